"""Tests for payload parsing and tolerant field access."""

import pytest

from devil_bot.slack.parser import (
    MalformedPayloadError,
    extract_event_fields,
    get_str,
    parse_payload,
)


def test_parse_payload_object():
    assert parse_payload(b'{"challenge": "abc"}') == {"challenge": "abc"}


def test_parse_payload_empty_object():
    assert parse_payload(b"{}") == {}


@pytest.mark.parametrize("body", [b"", b"not json", b'{"a": ', b"\xff\xfe", b'{"a": "\xff"}'])
def test_parse_payload_rejects_invalid_json(body: bytes):
    with pytest.raises(MalformedPayloadError):
        parse_payload(body)


@pytest.mark.parametrize("body", [b"[]", b'"text"', b"42", b"null"])
def test_parse_payload_non_object_is_empty(body: bytes):
    """Valid JSON that is not an object parses as an empty payload."""
    assert parse_payload(body) == {}


def test_get_str_nested():
    payload = {"event": {"user": {"id": "U1"}}}
    assert get_str(payload, "event", "user", "id", default="x") == "U1"


def test_get_str_missing_key():
    assert get_str({"event": {}}, "event", "channel", default="invalid_channel") == "invalid_channel"


def test_get_str_wrong_type_leaf():
    assert get_str({"challenge": 123}, "challenge", default="invalid_challenge") == "invalid_challenge"


def test_get_str_wrong_type_intermediate():
    """A string where an object is expected yields the default."""
    assert get_str({"event": "oops"}, "event", "type", default="d") == "d"


def test_extract_event_fields_full():
    payload = {
        "enterprise_id": "E123",
        "event": {
            "type": "message",
            "channel": "C0351GJ62Q0",
            "text": "PING",
            "subtype": "bot_message",
            "user": {"id": "U1", "profile": {"first_name": "Ada"}},
        },
    }
    fields = extract_event_fields(payload)
    assert fields.event_type == "message"
    assert fields.channel == "C0351GJ62Q0"
    assert fields.text == "ping"
    assert fields.enterprise_user_id == "E123"
    assert fields.user_id == "U1"
    assert fields.first_name == "Ada"
    assert fields.is_bot is True


def test_extract_event_fields_empty_payload():
    fields = extract_event_fields({})
    assert fields.event_type == "invalid_event_type"
    assert fields.channel == "invalid_channel"
    assert fields.text == "invalid_text"
    assert fields.is_bot is False


def test_extract_event_fields_user_as_string():
    """Message events carry ``user`` as a plain id string; user id falls back."""
    fields = extract_event_fields({"event": {"type": "message", "user": "U1"}})
    assert fields.user_id == "invalid_user_name"
    assert fields.first_name == ""


def test_extract_event_fields_other_subtype_is_not_bot():
    fields = extract_event_fields({"event": {"subtype": "message_changed"}})
    assert fields.is_bot is False
