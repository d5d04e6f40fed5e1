"""Slack webhook router."""

from fastapi import APIRouter, BackgroundTasks, Depends
from fastapi.responses import JSONResponse

from devil_bot.slack.handlers import handle_slack_event
from devil_bot.slack.verification import verify_slack_request

router = APIRouter(prefix="", tags=["slack"])


@router.post("/slack/events")
async def slack_events(
    background_tasks: BackgroundTasks,
    payload: dict = Depends(verify_slack_request),
) -> JSONResponse:
    """Receive Slack Events API callbacks and URL verification requests."""
    return handle_slack_event(payload, background_tasks)
