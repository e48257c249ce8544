# src/taskpad/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.models import Task, TaskFilter
from ..core.queries import to_full_index
from ..core.state import AppState

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

EMPTY_TASK_MESSAGE = "Task cannot be empty"

EMPTY_STATE_TEXT: dict[TaskFilter, str] = {
    TaskFilter.ALL: "No tasks yet!",
    TaskFilter.ACTIVE: "All completed!",
    TaskFilter.COMPLETED: "No completed tasks.",
}

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except Exception:
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  (any other text adds a task)")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- rendering ----


def format_filter_bar(state: AppState) -> str:
    store = state.store
    counts = store.filter_counts()
    cells = []
    for f in TaskFilter:
        label = f"{f.value} ({counts[f]})"
        cells.append(f"[{label}]" if f is store.filter else f" {label} ")
    return "  ".join(cells)


def format_task_line(position: int, task: Task) -> str:
    mark = "x" if task.completed else " "
    return f"{position:>3}. [{mark}] {task.text}"


def format_task_list(state: AppState) -> str:
    store = state.store
    view = store.filtered_tasks()
    lines = [format_filter_bar(state)]
    if not view:
        lines.append(f"  {EMPTY_STATE_TEXT[store.filter]}")
    else:
        lines.extend(format_task_line(i, t) for i, t in enumerate(view, start=1))
    return "\n".join(lines)


def format_stats(state: AppState) -> str:
    s = state.store.stats()
    return f"Total {s.total} | Progress {s.percentage}% | Completed {s.completed}"


def _view_task(state: AppState, raw_position: str) -> Task | None:
    """Resolve a 1-based position in the current view to a task."""
    try:
        pos = int(raw_position)
    except ValueError:
        return None
    view = state.store.filtered_tasks()
    if pos < 1 or pos > len(view):
        return None
    return view[pos - 1]


# ---- handlers ----


def add_from_input(state: AppState, text: str) -> str:
    """Plain (non-command) input adds a task; empty input gets a validation message."""
    if not text.strip():
        return EMPTY_TASK_MESSAGE
    task = state.store.add_task(text)
    if task is None:
        return EMPTY_TASK_MESSAGE
    return f"Added: {task.text}"


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    settings = state.settings
    backend = getattr(settings, "storage_backend", "?")
    path = getattr(settings, "storage_path", "?")
    return (
        "Status:\n"
        f"  Storage: {backend} ({path})\n"
        f"  Filter: {state.store.filter.value}\n"
        f"  {format_stats(state)}"
    )


def cmd_add(state: AppState, args: list[str]) -> str:
    return add_from_input(state, " ".join(args))


def cmd_list(state: AppState, args: list[str]) -> str:
    return format_task_list(state)


def cmd_done(
    state: AppState,
    args: list[str],
    emit: CommandEmitter | None = None,
) -> str:
    """
    /done N -> toggle completion of the N-th task in the current view
    """
    if len(args) != 1:
        return "Usage: /done N"
    task = _view_task(state, args[0])
    if task is None:
        return f"No task #{args[0]} in this view."
    updated = state.store.toggle_task(task.id)
    if updated is None:
        return f"No task #{args[0]} in this view."
    if emit and updated.completed and state.store.stats().percentage == 100:
        emit("All tasks completed!")
    return f"{'Completed' if updated.completed else 'Reopened'}: {updated.text}"


def cmd_remove(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /rm N"
    task = _view_task(state, args[0])
    if task is None:
        return f"No task #{args[0]} in this view."
    state.store.delete_task(task.id)
    return f"Removed: {task.text}"


def cmd_move(state: AppState, args: list[str]) -> str:
    """
    /move FROM TO -> reorder using positions of the current view.

    The store only takes full-list indices, so view positions are translated
    first.
    """
    if len(args) != 2:
        return "Usage: /move FROM TO"
    try:
        src_pos, dst_pos = int(args[0]), int(args[1])
    except ValueError:
        return "Usage: /move FROM TO (positions are numbers)"

    store = state.store
    tasks = store.tasks
    src = to_full_index(tasks, store.filter, src_pos - 1)
    dst = to_full_index(tasks, store.filter, dst_pos - 1)
    if src is None or dst is None:
        return "Positions must refer to tasks in this view."
    if src == dst:
        return "Nothing to move."
    store.reorder_tasks(src, dst)
    return format_task_list(state)


def cmd_clear(state: AppState, args: list[str]) -> str:
    removed = state.store.clear_completed()
    if not removed:
        return "No completed tasks to clear."
    return f"Cleared {removed} completed task{'s' if removed != 1 else ''}."


def cmd_filter(state: AppState, args: list[str]) -> str:
    """
    /filter                         -> show current filter
    /filter all|active|completed    -> switch view
    """
    if not args:
        return f"Filter is {state.store.filter.value}. Use /filter all|active|completed."
    try:
        state.store.set_filter(args[0])
    except ValueError:
        return "Usage: /filter all|active|completed"
    logger.debug("Filter switched to %s", state.store.filter.value)
    return format_task_list(state)


def cmd_stats(state: AppState, args: list[str]) -> str:
    return format_stats(state)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show storage, filter and progress.")
registry.register("add", cmd_add, help_text="Add a task: /add buy milk.", aliases=["a"])
registry.register("list", cmd_list, help_text="Show tasks in the current view.", aliases=["ls", "l"])
registry.register("done", cmd_done, help_text="Toggle task N of the current view: /done 2.", aliases=["x"])
registry.register("rm", cmd_remove, help_text="Delete task N of the current view: /rm 2.", aliases=["del"])
registry.register("move", cmd_move, help_text="Reorder within the current view: /move 3 1.", aliases=["mv"])
registry.register("clear", cmd_clear, help_text="Remove all completed tasks.")
registry.register("filter", cmd_filter, help_text="Switch view: /filter all | active | completed.", aliases=["f"])
registry.register("stats", cmd_stats, help_text="Show total, completed and progress.")
