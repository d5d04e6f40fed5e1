"""Side-effecting actions triggered by classified Slack events.

Every handler is fire-and-forget: Slack and DynamoDB failures are logged and
swallowed so a failed side effect never changes the webhook response.
Only a missing required setting escapes, as MissingConfigurationError.
"""

import asyncio
import logging

import aiohttp
from slack_sdk.errors import SlackApiError, SlackRequestError

from devil_bot.config import require_setting
from devil_bot.models.actions import ActionRequest, IncrementCounter, OnboardUser, SendReply
from devil_bot.slack.client import get_slack_client, get_webhook_client
from devil_bot.store.dynamo import CounterStoreError, increment_item

logger = logging.getLogger(__name__)

PING_REPLY_TEXT = "pong"
BUNS_KEY_NAME = "user_id"
BUNS_FIELD_NAME = "buns"

# Transport and API failures from Slack calls; logged, never raised
_SLACK_ERRORS = (SlackApiError, SlackRequestError, aiohttp.ClientError, asyncio.TimeoutError)


def _welcome_text(first_name: str) -> str:
    if first_name:
        return f"Welcome to the team, {first_name}! :wave:"
    return "Welcome to the team! :wave:"


async def onboard_user(user_id: str, first_name: str) -> None:
    """Greet a new workspace member by DM and announce them in the team channel."""
    logger.info("Onboarding user %s", user_id)

    try:
        client = await get_slack_client()
        await client.chat_postMessage(channel=user_id, text=_welcome_text(first_name))
    except _SLACK_ERRORS:
        logger.warning("Failed to send welcome message to %s", user_id, exc_info=True)

    webhook = await get_webhook_client()
    try:
        response = await webhook.send(text=f"Say hi to <@{user_id}>, who just joined!")
    except _SLACK_ERRORS:
        logger.warning("Failed to announce new user %s", user_id, exc_info=True)
        return

    if response.status_code != 200:
        logger.warning(
            "Team channel webhook rejected announcement for %s: %s %s",
            user_id,
            response.status_code,
            response.body,
        )


async def send_ping_reply(channel_id: str) -> None:
    """Answer a ``ping`` command in the channel it was posted in."""
    try:
        client = await get_slack_client()
        await client.chat_postMessage(channel=channel_id, text=PING_REPLY_TEXT)
    except SlackApiError as exc:
        error_code = exc.response.get("error", "") if exc.response else ""
        logger.error(
            "Failed to send ping reply to %s: %s", channel_id, error_code, exc_info=True
        )
    except _SLACK_ERRORS:
        logger.error("Failed to send ping reply to %s", channel_id, exc_info=True)


async def increment_buns(user_id: str) -> None:
    """Add one bun to the user's counter in the buns table."""
    table_name = require_setting("buns_table_name")
    try:
        await increment_item(table_name, BUNS_KEY_NAME, user_id, BUNS_FIELD_NAME)
    except CounterStoreError as exc:
        logger.error("DynamoDB increment buns error: %s", exc)


async def run_action(action: ActionRequest) -> None:
    """Dispatch one action request to its handler."""
    if isinstance(action, OnboardUser):
        await onboard_user(action.user_id, action.first_name)
    elif isinstance(action, SendReply):
        await send_ping_reply(action.channel_id)
    elif isinstance(action, IncrementCounter):
        await increment_buns(action.user_id)
    else:
        raise TypeError(f"Unsupported action request: {type(action).__name__}")


async def run_actions(actions: list[ActionRequest]) -> None:
    """Run classified actions in order."""
    for action in actions:
        await run_action(action)
