# Role: Local developer CLI to drive the conversation step without the HTTP layer.
# The transcript lives only in this loop; every turn hands the current state to run_graph.

from __future__ import annotations
import asyncio
import uuid

import agent_core.config
agent_core.config.load_env()

from agent_core.core.responder import run_graph
from agent_core.models.message import Message, Role
from agent_core.models.state import ConversationState


def _new_state() -> ConversationState:
    return ConversationState(session_id=str(uuid.uuid4()))


def _print_history(state: ConversationState) -> None:
    if not state.messages:
        print("(empty)")
        return
    for m in state.messages:
        print(f"[{m.ts}] {m.role.value}: {m.content}")


def main() -> None:
    # 1) Start with an empty transcript under a fresh session_id
    # 2) Append each user line, run one step, print the assistant reply
    print("Agent Core CLI")
    print("Commands: /new (new session), /session (show session_id), /history, /exit")
    print("-" * 50)

    state = _new_state()
    print(f"session_id: {state.session_id}")

    while True:
        try:
            user_message = input("\nYou: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        if not user_message:
            continue

        cmd = user_message.lower()

        if cmd in {"/exit", "exit", "quit", "/quit"}:
            print("Bye!")
            return

        if cmd in {"/new", "new"}:
            state = _new_state()
            print(f"New session_id: {state.session_id}")
            continue

        if cmd in {"/session", "session"}:
            print(f"session_id: {state.session_id}")
            continue

        if cmd in {"/history", "history"}:
            _print_history(state)
            continue

        state = state.model_copy(
            update={"messages": (*state.messages, Message(role=Role.USER, content=user_message))}
        )
        state = asyncio.run(run_graph(state))
        print(f"\nAssistant: {state.messages[-1].content}")


if __name__ == "__main__":
    main()
