# src/taskpad/core/queries.py

"""
Derived views over a task collection.

All functions are pure: they take the current tasks (and filter) and
recompute on every call. Nothing here is cached.
"""

from __future__ import annotations

from collections.abc import Sequence

from .models import Task, TaskFilter, TaskStats


def filtered_tasks(tasks: Sequence[Task], task_filter: TaskFilter | str = TaskFilter.ALL) -> list[Task]:
    f = TaskFilter.parse(task_filter)
    if f is TaskFilter.ACTIVE:
        return [t for t in tasks if not t.completed]
    if f is TaskFilter.COMPLETED:
        return [t for t in tasks if t.completed]
    return list(tasks)


def percentage(part: int, total: int) -> int:
    """Round-half-up of 100 * part / total in integer arithmetic; 0 for an empty total."""
    if total <= 0:
        return 0
    return (200 * part + total) // (2 * total)


def compute_stats(tasks: Sequence[Task]) -> TaskStats:
    total = len(tasks)
    completed = sum(1 for t in tasks if t.completed)
    return TaskStats(total=total, completed=completed, percentage=percentage(completed, total))


def filter_counts(tasks: Sequence[Task]) -> dict[TaskFilter, int]:
    completed = sum(1 for t in tasks if t.completed)
    return {
        TaskFilter.ALL: len(tasks),
        TaskFilter.ACTIVE: len(tasks) - completed,
        TaskFilter.COMPLETED: completed,
    }


def to_full_index(
    tasks: Sequence[Task],
    task_filter: TaskFilter | str,
    view_index: int,
) -> int | None:
    """
    Translate a position in a filtered view into a position in the full list.

    Returns None if view_index does not address a visible task.
    """
    view = filtered_tasks(tasks, task_filter)
    if view_index < 0 or view_index >= len(view):
        return None
    target = view[view_index].id
    for i, t in enumerate(tasks):
        if t.id == target:
            return i
    return None
