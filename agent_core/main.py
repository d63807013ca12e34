# HTTP entry point. Serve with `agent-core-api` (or `uvicorn agent_core.main:app`);
# the conversation step itself is mounted from agent_core.api.graph.

import os

import uvicorn
from fastapi import FastAPI

import agent_core.config
agent_core.config.load_env()

from agent_core.api.graph import router as graph_router

app = FastAPI(title="Agent Core API", version="0.1.0")
app.include_router(graph_router)


@app.get("/")
def index() -> dict:
    return {
        "message": "Agent Core API is running",
        "docs": "/docs",
        "health": "/health",
    }


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


def run() -> None:
    # HOST / PORT come from the environment (.env included), defaults suit local dev.
    uvicorn.run(
        app,
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
    )


if __name__ == "__main__":
    run()
