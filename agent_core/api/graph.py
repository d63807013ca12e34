# Role: Thin HTTP adapter for the conversation step. Request/response bodies are ConversationState
# in wire shape; the transformation itself lives in core, not in the API layer.

from fastapi import APIRouter

import agent_core.config as config
from agent_core.api import deps
from agent_core.models.state import ConversationState

router = APIRouter(tags=["graph"])


@router.post("/graph/run", response_model=ConversationState)
async def run_step(state: ConversationState) -> ConversationState:
    if config.DEBUG:
        print("[API] /graph/run session:", state.session_id, "messages:", len(state.messages))
    return await deps.responder.run(state)
