"""Slack event dispatch: challenge echo plus classified side effects."""

import logging

from fastapi import BackgroundTasks
from fastapi.responses import JSONResponse

from devil_bot.config import get_settings
from devil_bot.slack.actions import run_actions
from devil_bot.slack.challenge import respond_to_challenge
from devil_bot.slack.classifier import classify

logger = logging.getLogger(__name__)


def handle_slack_event(payload: dict, background_tasks: BackgroundTasks) -> JSONResponse:
    """Build the webhook response and schedule any triggered actions.

    The response always carries the challenge (or the invalid_challenge
    sentinel). Actions run after the response is sent; their failures are
    logged and never change the status code.
    """
    settings = get_settings()
    logger.info("Received Slack payload", extra={"payload": payload})

    challenge = respond_to_challenge(payload)
    actions = classify(payload, allowed_channel_id=settings.allowed_channel_id)

    if actions:
        logger.info(
            "Dispatching %d action(s): %s",
            len(actions),
            ", ".join(action.kind for action in actions),
        )
        background_tasks.add_task(run_actions, actions)

    return JSONResponse({"challenge": challenge})
