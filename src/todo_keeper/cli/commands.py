# src/todo_keeper/cli/commands.py

from __future__ import annotations

import contextlib
import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..tasks.task_models import FilterMode
from ..view.projector import format_counts, project, summarize

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, /done, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        # Commands that take the rest of the line verbatim as args[0].
        self._raw: set[CommandHandler] = set()

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        raw_args: bool = False,
    ) -> None:
        aliases = aliases or []
        if raw_args:
            self._raw.add(handler)
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

        parts = line[1:].split(maxsplit=1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        rest = parts[1] if len(parts) > 1 else ""

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        args = ([rest] if rest else []) if handler in self._raw else rest.split()
        logger.debug("Command /%s args=%s", name, args)

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
        return "\n".join(lines)


registry = CommandRegistry()


def _resolve_visible(state: AppState, args: list[str]) -> tuple[int | None, str]:
    """
    Map a task number as shown on screen to its full-list position.

    Numbers are full position + 1, and only tasks visible under the current
    filter can be addressed.
    """
    if not args:
        return None, "Missing task number."
    try:
        number = int(args[0].lstrip("#"))
    except ValueError:
        return None, f"Not a task number: {args[0]}"

    visible = dict(project(state.task_store.tasks, state.filter_mode))
    position = number - 1
    if position not in visible:
        return None, f"No task #{number} in the current view ({state.filter_mode.value})."
    return position, ""


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def _add(state: AppState, text: str, priority: str) -> str:
    task = state.task_store.add(text, priority)
    if task is None:
        return "Nothing to add: task text is empty."
    if not state.task_store.last_save_ok:
        return "Added, but saving failed (see log)."
    return ""


def add_plain(state: AppState, text: str) -> str:
    """Text typed without a command: stored whole, default priority."""
    return _add(state, text, state.default_priority)


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add buy milk          -> default priority
    /add high file taxes   -> first word picks the priority if it is a known one

    Registered with raw_args: args[0] is the rest of the line, spacing intact.
    """
    rest = args[0].strip() if args else ""
    head = rest.split(maxsplit=1)
    if len(head) == 2 and head[0].lower() in state.priorities:
        return _add(state, head[1], head[0].lower())
    return _add(state, rest, state.default_priority)


def cmd_done(
    state: AppState,
    args: list[str],
    emit: CommandEmitter | None = None,
) -> str:
    position, error = _resolve_visible(state, args)
    if position is None:
        return error + " Usage: /done <n>"

    task = state.task_store.toggle(position)
    if task is None:
        return "Task no longer exists."
    if emit and not task.completed:
        with contextlib.suppress(Exception):
            emit(f"Task #{position + 1} marked active again.")
    return ""


def cmd_delete(state: AppState, args: list[str]) -> str:
    position, error = _resolve_visible(state, args)
    if position is None:
        return error + " Usage: /rm <n>"

    task = state.task_store.delete(position)
    if task is None:
        return "Task no longer exists."
    return f"Deleted: {task.text}"


def cmd_clear_completed(state: AppState, args: list[str]) -> str:
    removed = state.task_store.clear_completed()
    return f"Removed {removed} completed task(s)."


def cmd_clear_all(state: AppState, args: list[str]) -> str:
    if len(state.task_store) == 0:
        return "Nothing to clear."
    if state.task_store.clear_all(state.confirm):
        return "All tasks deleted."
    return "Kept all tasks."


def _set_filter(state: AppState, mode: FilterMode) -> str:
    state.view.set_filter(mode)
    state.task_store.refresh()
    return ""


def cmd_filter(state: AppState, args: list[str]) -> str:
    """
    /filter                 -> show current filter
    /filter all|active|completed
    """
    if not args:
        return f"Current filter: {state.filter_mode.value}. Use /filter all|active|completed."

    mode = FilterMode.parse(args[0])
    if mode is None:
        return "Usage: /filter all|active|completed."
    return _set_filter(state, mode)


def cmd_all(state: AppState, args: list[str]) -> str:
    return _set_filter(state, FilterMode.ALL)


def cmd_active(state: AppState, args: list[str]) -> str:
    return _set_filter(state, FilterMode.ACTIVE)


def cmd_completed(state: AppState, args: list[str]) -> str:
    return _set_filter(state, FilterMode.COMPLETED)


def cmd_list(state: AppState, args: list[str]) -> str:
    state.task_store.refresh()
    return ""


def cmd_status(state: AppState, args: list[str]) -> str:
    active_line, completed_line = format_counts(summarize(state.task_store.tasks))
    ephemeral = bool(getattr(state.settings, "ephemeral", False))
    storage = "in-memory (not saved)" if ephemeral else str(getattr(state.settings, "storage_path", "?"))
    return (
        "Status:\n"
        f"  Tasks: {active_line}, {completed_line}\n"
        f"  Filter: {state.filter_mode.value}\n"
        f"  Priorities: {', '.join(state.priorities)} (default: {state.default_priority})\n"
        f"  Storage: {storage}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register(
    "add",
    cmd_add,
    help_text="Add a task: /add [priority] <text> (plain text works too).",
    raw_args=True,
)
registry.register("done", cmd_done, help_text="Toggle task completion: /done <n>.", aliases=["toggle"])
registry.register("rm", cmd_delete, help_text="Delete a task: /rm <n>.", aliases=["delete", "del"])
registry.register(
    "clear-completed", cmd_clear_completed, help_text="Delete all completed tasks."
)
registry.register("clear-all", cmd_clear_all, help_text="Delete every task (asks first).")
registry.register(
    "filter", cmd_filter, help_text="Choose the view: /filter all | active | completed."
)
registry.register("all", cmd_all, help_text="Show all tasks.")
registry.register("active", cmd_active, help_text="Show active tasks only.")
registry.register("completed", cmd_completed, help_text="Show completed tasks only.")
registry.register("list", cmd_list, help_text="Print the task list again.", aliases=["ls"])
registry.register("status", cmd_status, help_text="Show counts, filter and storage.")
