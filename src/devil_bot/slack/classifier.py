"""Decide which actions an inbound Slack event should trigger."""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from devil_bot.models.actions import (
    ActionRequest,
    Command,
    IncrementCounter,
    OnboardUser,
    SendReply,
)
from devil_bot.models.events import TEAM_JOIN_EVENT, EventFields
from devil_bot.slack.parser import extract_event_fields

logger = logging.getLogger(__name__)

ALLOWED_CHANNEL_ID = "C0351GJ62Q0"
BUNS_TRIGGER = "buns"


@dataclass(frozen=True)
class MessageRule:
    """A predicate over lower-cased message text and the action it produces."""

    name: str
    matches: Callable[[str], bool]
    build: Callable[[EventFields], ActionRequest]


# Evaluated in order, every rule independently; several may fire on one message.
MESSAGE_RULES: tuple[MessageRule, ...] = (
    MessageRule(
        name="ping",
        matches=lambda text: Command.parse(text) is Command.PING,
        build=lambda fields: SendReply(channel_id=fields.channel),
    ),
    MessageRule(
        name="buns",
        matches=lambda text: BUNS_TRIGGER in text,
        build=lambda fields: IncrementCounter(user_id=fields.enterprise_user_id),
    ),
)


def classify(payload: dict, allowed_channel_id: str = ALLOWED_CHANNEL_ID) -> list[ActionRequest]:
    """Return the actions triggered by a Slack payload, in firing order.

    1. ``team_join`` events onboard the new user, whatever the channel.
    2. Messages outside ``allowed_channel_id`` or posted by bots stop here.
    3. Every message rule is checked against the lower-cased text.
    """
    fields = extract_event_fields(payload)
    actions: list[ActionRequest] = []

    if fields.event_type == TEAM_JOIN_EVENT:
        actions.append(OnboardUser(user_id=fields.user_id, first_name=fields.first_name))
    else:
        logger.info("invalid event type %s", fields.event_type)

    logger.info(
        "text: %s, channel: %s, user_id: %s, is_bot %s",
        fields.text,
        fields.channel,
        fields.enterprise_user_id,
        fields.is_bot,
    )

    # Only respond in the allowed channel
    if fields.channel != allowed_channel_id:
        logger.info("This channel is not an allowed channel")
        return actions

    # Never respond to bots, including ourselves
    if fields.is_bot:
        logger.info("This is a bot")
        return actions

    if Command.parse(fields.text) is Command.UNKNOWN:
        logger.info("Invalid command: %s", fields.text)

    for rule in MESSAGE_RULES:
        if rule.matches(fields.text):
            logger.info("Rule '%s' matched", rule.name)
            actions.append(rule.build(fields))

    return actions
