# agent_core/core/responder.py
# Role: The single conversation step ("policy -> respond"). Reads the last message, builds an echo
# reply, and returns a new ConversationState with one assistant message appended.

from __future__ import annotations

from typing import Optional

import agent_core.config as config
from agent_core.models.message import Message, Role
from agent_core.models.state import ConversationState
from agent_core.utils.clock import Clock, now_ms

ECHO_PREFIX = "Echo: "


def build_echo_reply(last_content: str) -> str:
    # Key line: trim the whole concatenation, so an empty source collapses to "Echo:".
    return f"{ECHO_PREFIX}{last_content}".strip()


class Responder:
    def __init__(self, clock: Optional[Clock] = None) -> None:
        # Key line: clock is injectable for deterministic tests.
        self.clock = clock or now_ms

    def step(self, state: ConversationState) -> ConversationState:
        # 1) Last message content ("" when the transcript is empty)
        # 2) Build the echo reply and stamp it
        # 3) Return a fresh state: same session, old messages + reply
        last = state.last_message
        last_content = last.content if last is not None else ""

        reply = Message(
            role=Role.ASSISTANT,
            content=build_echo_reply(last_content),
            ts=self.clock(),
        )

        if config.DEBUG:
            print("[RESPONDER] session:", state.session_id)
            print("[RESPONDER] history size:", len(state.messages))
            print("[RESPONDER] reply:", repr(reply.content))

        return state.model_copy(update={"messages": (*state.messages, reply)})

    async def run(self, state: ConversationState) -> ConversationState:
        # Async calling convention for pipeline composition; there is no suspension point.
        return self.step(state)


_default_responder = Responder()


async def run_graph(state: ConversationState, clock: Optional[Clock] = None) -> ConversationState:
    """
    Run one conversation step over `state` and return the next state.
    Pass `clock` to control the timestamp of the appended reply.
    """
    responder = Responder(clock) if clock is not None else _default_responder
    return await responder.run(state)
