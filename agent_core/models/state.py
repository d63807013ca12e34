# Role: The value handed between pipeline steps: an opaque session id plus the ordered transcript.
# Frozen + tuple-backed so a step can only produce a new state, never edit the one it was given.

from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from agent_core.models.message import Message


class ConversationState(BaseModel):
    # Key line: wire shape uses "sessionId"; python code uses session_id.
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    session_id: str = Field(alias="sessionId")
    messages: Tuple[Message, ...] = ()

    @property
    def last_message(self) -> Optional[Message]:
        return self.messages[-1] if self.messages else None
