"""Async Slack client singletons.

Creates a cached AsyncWebClient configured with the bot token, and a cached
AsyncWebhookClient posting to the team channel's incoming webhook URL.
Both are created lazily from application settings on first use.
"""

from slack_sdk.web.async_client import AsyncWebClient
from slack_sdk.webhook.async_client import AsyncWebhookClient

from devil_bot.config import get_settings, require_setting

_client: AsyncWebClient | None = None
_webhook: AsyncWebhookClient | None = None


async def get_slack_client() -> AsyncWebClient:
    """Return a cached async Slack Web API client.

    Creates the client on first call using slack_bot_token from settings.
    Subsequent calls return the cached instance.
    """
    global _client
    if _client is None:
        settings = get_settings()
        _client = AsyncWebClient(token=settings.slack_bot_token)
    return _client


async def get_webhook_client() -> AsyncWebhookClient:
    """Return a cached incoming-webhook client for the team channel.

    Raises MissingConfigurationError if DEVIL_BOT_TEST_CHANNEL_URL is unset.
    """
    global _webhook
    if _webhook is None:
        _webhook = AsyncWebhookClient(url=require_setting("devil_bot_test_channel_url"))
    return _webhook


def reset_client() -> None:
    """Reset the cached client instances. Used for testing."""
    global _client, _webhook
    _client = None
    _webhook = None
