"""Millisecond wall clock and an interruptible sleep."""

from __future__ import annotations

import time
from typing import Callable, Optional

_POLL_SECONDS = 0.00005


def now_ms() -> int:
    """Return the current wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def sleep_ms(milliseconds: int, stop: Optional[Callable[[], bool]] = None) -> None:
    """Sleep for ``milliseconds``, returning early once ``stop()`` is true."""
    start = now_ms()
    while now_ms() - start < milliseconds:
        if stop is not None and stop():
            break
        time.sleep(_POLL_SECONDS)