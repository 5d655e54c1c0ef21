from __future__ import annotations

import threading
import time
from typing import Callable, Optional


class TimeBasedIdFactory:
    """Generate ids like `child-1725350400000`.

    Ids derive from epoch milliseconds and are bumped past the last issued
    value, so they stay unique for the process lifetime even when two entities
    are created within the same millisecond or on different request threads.
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        self._clock = clock or time.time
        self._last = 0
        self._lock = threading.Lock()

    def __call__(self, prefix: str) -> str:
        with self._lock:
            stamp = int(self._clock() * 1000)
            if stamp <= self._last:
                stamp = self._last + 1
            self._last = stamp
        return f"{prefix}-{stamp}"
