"""Slack ingress: webhook handling, challenge echo, classification, and actions."""

from devil_bot.slack.actions import increment_buns, onboard_user, run_actions, send_ping_reply
from devil_bot.slack.challenge import respond_to_challenge
from devil_bot.slack.classifier import classify
from devil_bot.slack.client import get_slack_client, get_webhook_client, reset_client
from devil_bot.slack.parser import MalformedPayloadError, parse_payload
from devil_bot.slack.router import router

__all__ = [
    "classify",
    "get_slack_client",
    "get_webhook_client",
    "increment_buns",
    "MalformedPayloadError",
    "onboard_user",
    "parse_payload",
    "reset_client",
    "respond_to_challenge",
    "router",
    "run_actions",
    "send_ping_reply",
]
