"""Tests for action request models and command parsing."""

import pytest
from pydantic import ValidationError

from devil_bot.models.actions import Command, IncrementCounter, OnboardUser, SendReply


def test_command_parse_ping():
    assert Command.parse("ping") is Command.PING


@pytest.mark.parametrize("text", ["ping buns", " ping", "pingg", "hello", "invalid_text", ""])
def test_command_parse_requires_exact_match(text: str):
    """Anything other than exactly 'ping' is an unknown command."""
    assert Command.parse(text) is Command.UNKNOWN


def test_onboard_user_defaults_first_name():
    action = OnboardUser(user_id="U123")
    assert action.first_name == ""
    assert action.kind == "onboard_user"


def test_action_requests_are_frozen():
    action = SendReply(channel_id="C0351GJ62Q0")
    with pytest.raises(ValidationError):
        action.channel_id = "C_OTHER"


def test_action_requests_compare_by_value():
    assert IncrementCounter(user_id="E1") == IncrementCounter(user_id="E1")
    assert IncrementCounter(user_id="E1") != IncrementCounter(user_id="E2")


def test_increment_counter_requires_user_id():
    with pytest.raises(ValidationError):
        IncrementCounter()
