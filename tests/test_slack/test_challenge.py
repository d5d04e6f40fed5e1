"""Tests for the URL verification challenge echo."""

import logging

import pytest

from devil_bot.slack.challenge import respond_to_challenge


def test_returns_challenge_verbatim():
    payload = {
        "token": "Jhj5dZrVaK7ZwHHjRyZWjbDl",
        "challenge": "3eZbrw1aBm2rZgRNFdxV2595E9CY3gmdALWMmHkvFXO7tYXAYM8P",
        "type": "url_verification",
    }
    assert respond_to_challenge(payload) == payload["challenge"]


@pytest.mark.parametrize("value", ["", " spaced ", "UPPER", "ünïcödé", "a" * 500])
def test_challenge_round_trip(value: str):
    """Any string challenge is returned unmodified."""
    assert respond_to_challenge({"challenge": value}) == value


def test_missing_challenge_returns_sentinel(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.INFO, logger="devil_bot.slack.challenge"):
        assert respond_to_challenge({"type": "event_callback"}) == "invalid_challenge"
    assert "Not a challenge request." in caplog.messages


def test_non_string_challenge_returns_sentinel():
    assert respond_to_challenge({"challenge": 42}) == "invalid_challenge"


def test_logs_challenge_details(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.INFO, logger="devil_bot.slack.challenge"):
        respond_to_challenge({"challenge": "abc"})
    record = next(r for r in caplog.records if r.getMessage() == "Challenge request")
    assert record.challenge == "abc"
    assert record.token == "invalid_token"
    assert record.message_type == "invalid_type"
