# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskpad.core.state import AppState
from taskpad.core.store import TaskStore

from .fakes import FakeClock, FakeStorage


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="taskpad-test",
        log_level="DEBUG",
        console_enabled=False,
        storage_backend="memory",
        storage_key="tasks",
        data_dir=tmp_path / "data",
        storage_path=tmp_path / "data" / "tasks.json",
    )


@pytest.fixture()
def storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(storage: FakeStorage, clock: FakeClock) -> TaskStore:
    return TaskStore(storage, clock=clock)


@pytest.fixture()
def state(settings: SimpleNamespace, storage: FakeStorage, store: TaskStore) -> AppState:
    return AppState(settings=settings, storage=storage, store=store)
