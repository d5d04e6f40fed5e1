"""Action requests produced by event classification.

Each request carries only the arguments its handler needs. They are never
persisted; the router runs them after building the response.
"""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict


class Command(str, Enum):
    """Slash-free text commands recognised in the allowed channel."""

    PING = "ping"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, text: str) -> "Command":
        """Map lower-cased message text to a command (exact match only)."""
        if text == cls.PING.value:
            return cls.PING
        return cls.UNKNOWN


class OnboardUser(BaseModel):
    """Welcome a user who just joined the workspace."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["onboard_user"] = "onboard_user"
    user_id: str
    first_name: str = ""


class SendReply(BaseModel):
    """Answer a ``ping`` in the channel it came from."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["send_reply"] = "send_reply"
    channel_id: str


class IncrementCounter(BaseModel):
    """Bump the buns counter for a user."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["increment_counter"] = "increment_counter"
    user_id: str


ActionRequest = OnboardUser | SendReply | IncrementCounter
