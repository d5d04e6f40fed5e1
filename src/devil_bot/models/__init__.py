"""Data models for inbound Slack events and the actions they trigger."""

from devil_bot.models.actions import (
    ActionRequest,
    Command,
    IncrementCounter,
    OnboardUser,
    SendReply,
)
from devil_bot.models.events import EventFields

__all__ = [
    "ActionRequest",
    "Command",
    "EventFields",
    "IncrementCounter",
    "OnboardUser",
    "SendReply",
]
