# Role: Timestamp source for new messages. Kept as a plain callable so tests and callers
# can inject a fixed clock instead of reading wall-clock time.

from __future__ import annotations

import time
from typing import Callable

Clock = Callable[[], int]


def now_ms() -> int:
    """Current wall-clock time in milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000
