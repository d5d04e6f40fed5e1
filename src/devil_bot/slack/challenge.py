"""Slack Events API subscription handshake.

When an event subscription is created, Slack sends a ``url_verification``
request and expects the ``challenge`` value echoed back verbatim.
See https://api.slack.com/apis/connections/events-api
"""

import logging

from devil_bot.models.events import INVALID_CHALLENGE, INVALID_TOKEN, INVALID_TYPE
from devil_bot.slack.parser import get_str

logger = logging.getLogger(__name__)


def respond_to_challenge(payload: dict) -> str:
    """Return the challenge to echo, or ``"invalid_challenge"`` if there is none."""
    token = get_str(payload, "token", default=INVALID_TOKEN)
    challenge = get_str(payload, "challenge", default=INVALID_CHALLENGE)
    message_type = get_str(payload, "type", default=INVALID_TYPE)

    if challenge == INVALID_CHALLENGE:
        logger.info("Not a challenge request.")
    else:
        logger.info(
            "Challenge request",
            extra={"token": token, "challenge": challenge, "message_type": message_type},
        )

    return challenge
