# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field

from taskpad.core.errors import StorageError


@dataclass(slots=True)
class FakeStorage:
    """
    In-memory KeyValueStorage used by store tests.

    - Records every write for assertions
    - fail_writes / fail_reads simulate a broken backend
    """

    data: dict[str, str] = field(default_factory=dict)
    writes: list[tuple[str, str]] = field(default_factory=list)
    fail_writes: bool = False
    fail_reads: bool = False

    def get(self, key: str) -> str | None:
        if self.fail_reads:
            raise StorageError("read failed")
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise StorageError("quota exceeded")
        self.writes.append((key, value))
        self.data[key] = value


class FakeClock:
    """
    Deterministic millisecond clock.

    Stays on the same millisecond unless advanced, so tests can exercise
    same-millisecond id generation.
    """

    def __init__(self, now_ms: int = 1_700_000_000_000) -> None:
        self.now_ms = now_ms

    def __call__(self) -> int:
        return self.now_ms

    def advance(self, ms: int = 1) -> None:
        self.now_ms += ms
