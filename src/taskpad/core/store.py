# src/taskpad/core/store.py

from __future__ import annotations

import logging
from dataclasses import replace

from .ids import MonotonicIdGenerator, wall_clock_ms
from .models import Task, TaskFilter, TaskStats, dump_tasks, load_tasks
from .ports import Clock, KeyValueStorage
from .queries import compute_stats, filter_counts, filtered_tasks

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "tasks"


class TaskStore:
    """
    Ordered task collection with best-effort persistence.

    In-memory state is the source of truth for the running session. After
    every mutation the full collection is written to the key-value backend;
    write failures are logged and never undo the mutation. The next
    successful write stores the then-current state.

    Single-writer: the store expects to be driven from one owner and does no
    locking of its own.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        key: str = DEFAULT_STORAGE_KEY,
        clock: Clock | None = None,
    ) -> None:
        self._storage = storage
        self._key = key
        self._clock: Clock = clock or wall_clock_ms
        self._filter = TaskFilter.ALL
        self._tasks: list[Task] = self._load()

        self._ids = MonotonicIdGenerator()
        for t in self._tasks:
            self._ids.observe(t.id)

        logger.info("TaskStore ready key=%s total=%d", self._key, len(self._tasks))

    # ---- persistence ----

    def _load(self) -> list[Task]:
        try:
            raw = self._storage.get(self._key)
        except Exception:
            logger.exception("Failed to read tasks from storage; starting empty.")
            return []
        return load_tasks(raw)

    def _persist(self) -> bool:
        try:
            self._storage.set(self._key, dump_tasks(self._tasks))
        except Exception:
            logger.exception("Failed to persist %d tasks (key=%s).", len(self._tasks), self._key)
            return False
        return True

    def _index_of(self, task_id: int) -> int | None:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        return None

    # ---- read access ----

    @property
    def tasks(self) -> list[Task]:
        return list(self._tasks)

    @property
    def filter(self) -> TaskFilter:
        return self._filter

    def filtered_tasks(self) -> list[Task]:
        return filtered_tasks(self._tasks, self._filter)

    def stats(self) -> TaskStats:
        return compute_stats(self._tasks)

    def filter_counts(self) -> dict[TaskFilter, int]:
        return filter_counts(self._tasks)

    # ---- mutations ----

    def add_task(self, raw_text: str) -> Task | None:
        """
        Append a new task.

        Empty (after trimming) text is rejected silently: returns None and
        nothing is stored. Callers show their own validation message.
        """
        text = (raw_text or "").strip()
        if not text:
            logger.debug("add_task rejected empty text")
            return None

        now = int(self._clock())
        task = Task(id=self._ids.next_id(now), text=text, completed=False, created_at=now)
        self._tasks.append(task)
        logger.debug("Task added id=%s", task.id)
        self._persist()
        return task

    def delete_task(self, task_id: int) -> bool:
        idx = self._index_of(task_id)
        if idx is not None:
            del self._tasks[idx]
            logger.debug("Task deleted id=%s", task_id)
        self._persist()
        return idx is not None

    def toggle_task(self, task_id: int) -> Task | None:
        idx = self._index_of(task_id)
        updated: Task | None = None
        if idx is not None:
            current = self._tasks[idx]
            updated = replace(current, completed=not current.completed)
            self._tasks[idx] = updated
            logger.debug("Task toggled id=%s completed=%s", task_id, updated.completed)
        self._persist()
        return updated

    def reorder_tasks(self, source_index: int, dest_index: int) -> bool:
        """
        Move the task at source_index to dest_index in the full collection.

        Indices address the unfiltered list. Out-of-range indices (negative
        ones included) are rejected: nothing changes and nothing is written.
        """
        if source_index == dest_index:
            return False

        n = len(self._tasks)
        if not (0 <= source_index < n and 0 <= dest_index < n):
            logger.warning(
                "Rejected reorder %s -> %s: indices must be within 0..%d.",
                source_index,
                dest_index,
                n - 1,
            )
            return False

        moved = self._tasks.pop(source_index)
        self._tasks.insert(dest_index, moved)
        logger.debug("Task moved id=%s %d -> %d", moved.id, source_index, dest_index)
        self._persist()
        return True

    def clear_completed(self) -> int:
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if not t.completed]
        removed = before - len(self._tasks)
        logger.debug("Cleared %d completed tasks", removed)
        self._persist()
        return removed

    def set_filter(self, task_filter: TaskFilter | str) -> TaskFilter:
        self._filter = TaskFilter.parse(task_filter)
        return self._filter
