# src/todo_keeper/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.events import CompletionSignal
from ..core.ports import ConfirmPrompt, Renderer
from .task_models import FilterMode, Task
from .persistence import TaskPersistence

logger = logging.getLogger(__name__)

CLEAR_ALL_QUESTION = "Delete all tasks?"


class TaskStore:
    """
    Owner of the ordered task list.

    Position in the full list is the only handle for toggle/delete; callers
    working from a filtered view must pass the full position they got from
    `view.projector.project`.

    Every successful mutation runs the same cycle:
    save the whole list -> notify the renderer (-> completion signal on toggle).
    Invalid arguments are silent no-ops: nothing is saved or rendered.
    """

    def __init__(
        self,
        persistence: TaskPersistence,
        *,
        renderer: Renderer,
        current_filter: Callable[[], FilterMode] = lambda: FilterMode.ALL,
        completion_signal: CompletionSignal | None = None,
    ) -> None:
        self._persistence = persistence
        self._renderer = renderer
        self._current_filter = current_filter
        self.completion_signal = completion_signal or CompletionSignal()

        self._tasks: list[Task] = persistence.load()
        self.last_save_ok = True
        logger.info("TaskStore ready tasks=%d key=%s", len(self._tasks), persistence.key)

    # ---- read side ----

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def _valid_position(self, position: object) -> bool:
        # bool is an int subclass; True/False are not positions.
        if not isinstance(position, int) or isinstance(position, bool):
            return False
        return 0 <= position < len(self._tasks)

    def get(self, position: int) -> Task | None:
        if not self._valid_position(position):
            return None
        return self._tasks[position]

    # ---- save + render cycle ----

    def _commit(self) -> None:
        self.last_save_ok = self._persistence.save(self._tasks)
        self.refresh()

    def refresh(self) -> None:
        """Re-render without mutating (filter change, initial paint)."""
        self._renderer(self.tasks, self._current_filter())

    # ---- mutations ----

    def add(self, text: str, priority: str) -> Task | None:
        clean = (text or "").strip()
        if not clean:
            logger.debug("add ignored: empty text")
            return None

        task = Task(text=clean, completed=False, priority=priority)
        self._tasks.append(task)
        logger.debug("Task added position=%d priority=%s", len(self._tasks) - 1, priority)
        self._commit()
        return task

    def toggle(self, position: int) -> Task | None:
        if not self._valid_position(position):
            logger.debug("toggle ignored: position=%r out of range (len=%d)", position, len(self))
            return None

        task = self._tasks[position]
        task.completed = not task.completed
        logger.debug("Task toggled position=%d completed=%s", position, task.completed)
        self._commit()

        if task.completed:
            self.completion_signal.publish(task, position)
        return task

    def delete(self, position: int) -> Task | None:
        if not self._valid_position(position):
            logger.debug("delete ignored: position=%r out of range (len=%d)", position, len(self))
            return None

        task = self._tasks.pop(position)
        logger.debug("Task deleted position=%d", position)
        self._commit()
        return task

    def clear_completed(self) -> int:
        survivors = [t for t in self._tasks if not t.completed]
        removed = len(self._tasks) - len(survivors)
        self._tasks = survivors
        logger.debug("Cleared %d completed tasks", removed)
        self._commit()
        return removed

    def clear_all(self, confirm: ConfirmPrompt) -> bool:
        if not self._tasks:
            return False

        if not confirm(CLEAR_ALL_QUESTION):
            logger.debug("clear_all declined (tasks=%d)", len(self._tasks))
            return False

        logger.info("Clearing all %d tasks", len(self._tasks))
        self._tasks = []
        self._commit()
        return True
