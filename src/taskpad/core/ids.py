# src/taskpad/core/ids.py

from __future__ import annotations

import time


def wall_clock_ms() -> int:
    return time.time_ns() // 1_000_000


class MonotonicIdGenerator:
    """
    Time-based task ids that never repeat within a session.

    An id is the clock reading in milliseconds, bumped to last_id + 1 when the
    clock has not advanced (same millisecond) or went backwards.
    """

    def __init__(self, last_id: int = 0) -> None:
        self._last_id = int(last_id)

    @property
    def last_id(self) -> int:
        return self._last_id

    def observe(self, task_id: int) -> None:
        """Make sure future ids are greater than an id that already exists."""
        if task_id > self._last_id:
            self._last_id = task_id

    def next_id(self, now_ms: int) -> int:
        nid = max(int(now_ms), self._last_id + 1)
        self._last_id = nid
        return nid
