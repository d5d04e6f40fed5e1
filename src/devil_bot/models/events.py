"""Slack event fields extracted from an inbound webhook payload."""

from pydantic import BaseModel

# Sentinel defaults substituted for absent or non-string payload fields
INVALID_TOKEN = "invalid_token"
INVALID_CHALLENGE = "invalid_challenge"
INVALID_TYPE = "invalid_type"
INVALID_EVENT_TYPE = "invalid_event_type"
INVALID_USER_NAME = "invalid_user_name"
INVALID_CHANNEL = "invalid_channel"
INVALID_TEXT = "invalid_text"
INVALID_ENTERPRISE_ID = "invalid_enterprise_id"

BOT_MESSAGE_SUBTYPE = "bot_message"
TEAM_JOIN_EVENT = "team_join"


class EventFields(BaseModel):
    """Fields the dispatcher reads from a payload, with sentinels filled in.

    ``text`` is already lower-cased.
    """

    event_type: str = INVALID_EVENT_TYPE
    user_id: str = INVALID_USER_NAME
    first_name: str = ""
    channel: str = INVALID_CHANNEL
    text: str = INVALID_TEXT
    enterprise_user_id: str = INVALID_ENTERPRISE_ID
    is_bot: bool = False
