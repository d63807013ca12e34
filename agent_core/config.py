# Runtime settings for agent_core. Entry points call load_env() once at startup;
# other modules read config.DEBUG at call time to decide whether to print diagnostics.

from __future__ import annotations

import os
from dotenv import load_dotenv

DEBUG: bool = False

_TRUTHY = {"1", "true", "yes"}


def load_env() -> None:
    """
    Pull variables from a local .env (existing env vars win) and refresh DEBUG.
    Calling it again re-reads the environment.
    """
    global DEBUG
    load_dotenv()
    DEBUG = os.getenv("DEBUG", "0").strip().lower() in _TRUTHY
