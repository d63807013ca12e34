import pytest

from agent_core.models.message import Message, Role
from agent_core.models.state import ConversationState

FIXED_TS = 1_700_000_000_000


@pytest.fixture
def fixed_clock():
    """Clock that always returns FIXED_TS."""
    return lambda: FIXED_TS


@pytest.fixture
def make_state():
    """Build a ConversationState from (role, content) pairs."""
    def _make(*turns, session_id="t1"):
        messages = [
            Message(role=Role(role), content=content, ts=FIXED_TS - 1000 + i)
            for i, (role, content) in enumerate(turns)
        ]
        return ConversationState(session_id=session_id, messages=messages)

    return _make
