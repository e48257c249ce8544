# src/taskpad/core/models.py

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

logger = logging.getLogger(__name__)


class TaskFilter(StrEnum):
    """
    View selector for the task list.

    Transient: it controls which tasks are shown, never which are stored.
    """

    ALL = "All"
    ACTIVE = "Active"
    COMPLETED = "Completed"

    @classmethod
    def parse(cls, raw: str | TaskFilter) -> TaskFilter:
        if isinstance(raw, TaskFilter):
            return raw
        name = str(raw).strip().lower()
        for f in cls:
            if f.value.lower() == name:
                return f
        raise ValueError(f"Unknown filter: {raw!r}")


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    text: str
    completed: bool = False
    created_at: int = 0


@dataclass(frozen=True, slots=True)
class TaskStats:
    total: int
    completed: int
    percentage: int


# ---- snapshot codec ----


def task_to_dict(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "text": task.text,
        "completed": task.completed,
        "createdAt": task.created_at,
    }


def task_from_dict(raw: Any) -> Task | None:
    """Build a Task from one snapshot entry, or None if the entry is unusable."""
    if not isinstance(raw, dict):
        return None

    tid = raw.get("id")
    # bool is an int subclass; a stray true/false is not an id.
    if not isinstance(tid, int) or isinstance(tid, bool):
        return None

    text = str(raw.get("text") or "").strip()
    if not text:
        return None

    created_at = raw.get("createdAt")
    if not isinstance(created_at, int) or isinstance(created_at, bool):
        created_at = tid

    return Task(id=tid, text=text, completed=bool(raw.get("completed", False)), created_at=created_at)


def dump_tasks(tasks: Iterable[Task]) -> str:
    return json.dumps([task_to_dict(t) for t in tasks], ensure_ascii=False)


def load_tasks(value: str | None) -> list[Task]:
    """
    Decode a persisted snapshot.

    Absent, unparseable or wrong-shaped values decode to an empty list.
    Malformed entries and repeated ids are skipped.
    """
    if value is None:
        return []

    try:
        data = json.loads(value)
    except (TypeError, ValueError, RecursionError):
        logger.warning("Stored task snapshot is not valid JSON; starting empty.")
        return []

    if not isinstance(data, list):
        logger.warning("Stored task snapshot is %s, expected a list; starting empty.", type(data).__name__)
        return []

    out: list[Task] = []
    seen: set[int] = set()
    for i, raw in enumerate(data):
        task = task_from_dict(raw)
        if task is None:
            logger.warning("Skipping malformed task entry at position %d.", i)
            continue
        if task.id in seen:
            logger.warning("Skipping duplicate task id=%s at position %d.", task.id, i)
            continue
        seen.add(task.id)
        out.append(task)
    return out
