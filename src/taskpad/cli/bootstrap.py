# src/taskpad/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- picks the storage backend and wires it into a TaskStore held by AppState.
"""

from __future__ import annotations

import logging

from ..config import STORAGE_BACKENDS, get_settings
from ..core.ports import KeyValueStorage
from ..core.state import AppState
from ..core.store import TaskStore
from ..storage.json_file import JsonFileStorage
from ..storage.memory import InMemoryStorage
from ..storage.sqlite import SqliteStorage

logger = logging.getLogger(__name__)


def create_storage(settings) -> KeyValueStorage:
    backend = str(getattr(settings, "storage_backend", "json")).lower()
    if backend == "memory":
        return InMemoryStorage()
    if backend == "json":
        return JsonFileStorage(settings.storage_path)
    if backend == "sqlite":
        return SqliteStorage(settings.storage_path)
    raise ValueError(f"Unknown storage backend {backend!r}; expected one of {', '.join(STORAGE_BACKENDS)}")


def create_initial_state(*, settings=None, storage: KeyValueStorage | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and storage) injectable makes the app easier to test and
    avoids hidden global config reads. If settings is None, falls back to
    get_settings().
    """
    if settings is None:
        settings = get_settings()

    settings.data_dir.mkdir(parents=True, exist_ok=True)

    if storage is None:
        storage = create_storage(settings)

    store = TaskStore(storage, key=getattr(settings, "storage_key", "tasks"))
    logger.info("Storage backend=%s path=%s", settings.storage_backend, settings.storage_path)
    return AppState(settings=settings, storage=storage, store=store)
