# src/todo_keeper/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class FilterMode(StrEnum):
    """
    View lens over the task list.

    Session-only: never persisted.
    """

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, raw: str | None) -> FilterMode | None:
        if not raw:
            return None
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None

    def matches(self, task: Task) -> bool:
        if self is FilterMode.ACTIVE:
            return not task.completed
        if self is FilterMode.COMPLETED:
            return task.completed
        return True


@dataclass(slots=True)
class Task:
    text: str
    completed: bool = False
    # Opaque to the core: one of the configured priority names.
    priority: str = "medium"

    def to_dict(self) -> dict[str, object]:
        return {"text": self.text, "completed": self.completed, "priority": self.priority}
