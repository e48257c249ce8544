# src/taskpad/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import KeyValueStorage
from .store import TaskStore


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object

    storage: KeyValueStorage
    store: TaskStore
