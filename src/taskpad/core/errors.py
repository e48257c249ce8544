# src/taskpad/core/errors.py

from __future__ import annotations


class TaskpadError(Exception):
    """Base class for taskpad errors."""


class StorageError(TaskpadError):
    """A key-value backend failed to read or write."""
