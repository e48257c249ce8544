# src/taskpad/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The store depends on Protocols instead of concrete implementations.
This keeps storage backends swappable and makes testing easier.
"""

from typing import Protocol


class KeyValueStorage(Protocol):
    """
    String key -> string value persistence.

    get() returns None when the key is absent.
    set() raises StorageError (or any other exception) on failure.
    """

    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str) -> None: ...


class Clock(Protocol):
    """Wall clock in integer milliseconds since the epoch."""

    def __call__(self) -> int: ...
