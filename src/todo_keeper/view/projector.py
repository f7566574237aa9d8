# src/todo_keeper/view/projector.py

"""
Read-side transforms over the task list.

Nothing here owns or mutates tasks. `project` pairs every visible task with its
position in the *full* list, which is the handle the task store expects.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from ..tasks.task_models import FilterMode, Task

logger = logging.getLogger(__name__)

EMPTY_MESSAGES: dict[FilterMode, str] = {
    FilterMode.ALL: "No tasks yet! Add one above.",
    FilterMode.ACTIVE: "No active tasks",
    FilterMode.COMPLETED: "No completed tasks",
}


@dataclass(frozen=True, slots=True)
class Summary:
    active: int
    total: int
    completed: int


def project(tasks: Sequence[Task], mode: FilterMode) -> list[tuple[int, Task]]:
    return [(pos, task) for pos, task in enumerate(tasks) if mode.matches(task)]


def summarize(tasks: Sequence[Task]) -> Summary:
    total = len(tasks)
    completed = sum(1 for t in tasks if t.completed)
    return Summary(active=total - completed, total=total, completed=completed)


def empty_message(mode: FilterMode) -> str:
    return EMPTY_MESSAGES[mode]


def format_counts(summary: Summary) -> tuple[str, str]:
    """("N active of M tasks", "K completed")"""
    return (
        f"{summary.active} active of {summary.total} tasks",
        f"{summary.completed} completed",
    )


@dataclass(slots=True)
class ViewState:
    """Current filter selection. Any mode may follow any other; starts at ALL."""

    mode: FilterMode = field(default=FilterMode.ALL)

    def set_filter(self, mode: FilterMode) -> bool:
        """Replace the mode. Returns True if it actually changed."""
        changed = mode is not self.mode
        self.mode = mode
        if changed:
            logger.debug("Filter mode -> %s", mode.value)
        return changed

    def current(self) -> FilterMode:
        return self.mode
