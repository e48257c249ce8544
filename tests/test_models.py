# tests/test_models.py

from __future__ import annotations

import json

from taskpad.core.ids import MonotonicIdGenerator
from taskpad.core.models import Task, dump_tasks, load_tasks, task_from_dict


def test_snapshot_round_trip_is_structurally_equal() -> None:
    tasks = [
        Task(id=1_700_000_000_000, text="buy milk", completed=False, created_at=1_700_000_000_000),
        Task(id=1_700_000_000_001, text="café ☕", completed=True, created_at=1_700_000_000_000),
    ]
    assert load_tasks(dump_tasks(tasks)) == tasks


def test_snapshot_uses_browser_field_names() -> None:
    raw = json.loads(dump_tasks([Task(id=7, text="x", completed=True, created_at=6)]))
    assert raw == [{"id": 7, "text": "x", "completed": True, "createdAt": 6}]


def test_load_absent_or_garbage_is_empty() -> None:
    assert load_tasks(None) == []
    assert load_tasks("") == []
    assert load_tasks("[1, 2") == []
    assert load_tasks('{"tasks": []}') == []


def test_load_skips_malformed_and_duplicate_entries() -> None:
    raw = json.dumps(
        [
            {"id": 1, "text": "ok", "completed": False, "createdAt": 1},
            "not an object",
            {"id": "2", "text": "string id"},
            {"id": True, "text": "bool id"},
            {"id": 3, "text": "   "},
            {"id": 1, "text": "duplicate"},
            {"id": 4, "text": " padded ", "completed": 1},
        ]
    )
    tasks = load_tasks(raw)
    assert [t.id for t in tasks] == [1, 4]
    assert tasks[1].text == "padded"
    assert tasks[1].completed is True


def test_missing_created_at_falls_back_to_id() -> None:
    task = task_from_dict({"id": 42, "text": "legacy"})
    assert task == Task(id=42, text="legacy", completed=False, created_at=42)


def test_id_generator_is_strictly_monotonic() -> None:
    gen = MonotonicIdGenerator()
    ids = [gen.next_id(1000) for _ in range(3)] + [gen.next_id(500), gen.next_id(2000)]
    assert ids == [1000, 1001, 1002, 1003, 2000]


def test_id_generator_observe() -> None:
    gen = MonotonicIdGenerator()
    gen.observe(5000)
    gen.observe(10)
    assert gen.last_id == 5000
    assert gen.next_id(100) == 5001


def test_load_deeply_nested_snapshot_is_empty() -> None:
    assert load_tasks("[" * 200_000 + "]" * 200_000) == []
    assert load_tasks("[" * 200_000) == []
