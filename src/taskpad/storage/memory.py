# src/taskpad/storage/memory.py

from __future__ import annotations


class InMemoryStorage:
    """Dict-backed key-value storage. Nothing survives the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def close(self) -> None:
        return
