"""Parse raw webhook bodies and read fields with sentinel defaults."""

import json

from devil_bot.models.events import (
    BOT_MESSAGE_SUBTYPE,
    INVALID_CHANNEL,
    INVALID_ENTERPRISE_ID,
    INVALID_EVENT_TYPE,
    INVALID_TEXT,
    INVALID_USER_NAME,
    EventFields,
)


class MalformedPayloadError(ValueError):
    """Raised when a webhook body is not valid UTF-8 JSON."""


def parse_payload(body: bytes) -> dict:
    """Decode a raw UTF-8 request body into a JSON object.

    Raises MalformedPayloadError for invalid UTF-8 or invalid JSON. A valid
    document whose top level is not an object parses as an empty payload,
    so every field falls back to its sentinel.
    """
    try:
        payload = json.loads(body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise MalformedPayloadError(f"Body is not valid JSON: {exc}") from exc

    if not isinstance(payload, dict):
        return {}
    return payload


def get_str(payload: dict, *path: str, default: str) -> str:
    """Return the string at ``path`` inside nested dicts, or ``default``.

    Any missing key, non-dict intermediate, or non-string leaf yields the
    default.
    """
    node: object = payload
    for key in path:
        if not isinstance(node, dict):
            return default
        node = node.get(key)
    return node if isinstance(node, str) else default


def extract_event_fields(payload: dict) -> EventFields:
    """Pull the fields used for classification out of a Slack payload."""
    return EventFields(
        event_type=get_str(payload, "event", "type", default=INVALID_EVENT_TYPE),
        user_id=get_str(payload, "event", "user", "id", default=INVALID_USER_NAME),
        first_name=get_str(payload, "event", "user", "profile", "first_name", default=""),
        channel=get_str(payload, "event", "channel", default=INVALID_CHANNEL),
        text=get_str(payload, "event", "text", default=INVALID_TEXT).lower(),
        enterprise_user_id=get_str(payload, "enterprise_id", default=INVALID_ENTERPRISE_ID),
        is_bot=get_str(payload, "event", "subtype", default="") == BOT_MESSAGE_SUBTYPE,
    )
