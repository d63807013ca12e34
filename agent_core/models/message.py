# Role: Single transcript entry. Immutable value object (role + content + ms timestamp)
# passed in and out of the responder inside ConversationState.

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from agent_core.utils.clock import now_ms


class Role(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"


class Message(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Role
    content: str
    # Milliseconds since the Unix epoch, stamped at creation time.
    # StrictInt: numeric strings are rejected, not coerced.
    ts: StrictInt = Field(default_factory=now_ms)
