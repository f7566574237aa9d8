# tests/fakes.py

from __future__ import annotations

from collections.abc import Sequence

from todo_keeper.storage.kv_store import InMemoryKeyValueStore
from todo_keeper.tasks.task_models import FilterMode, Task


class RecordingRenderer:
    """Captures every render call as (snapshot of tasks, filter mode)."""

    def __init__(self) -> None:
        self.calls: list[tuple[list[Task], FilterMode]] = []

    def __call__(self, tasks: Sequence[Task], mode: FilterMode) -> None:
        # Copy: tasks are mutated in place by toggle.
        self.calls.append(([Task(t.text, t.completed, t.priority) for t in tasks], mode))


class ScriptedConfirm:
    """Confirmation prompt that answers from a fixed value and records questions."""

    def __init__(self, answer: bool = True) -> None:
        self.answer = answer
        self.questions: list[str] = []

    def __call__(self, question: str) -> bool:
        self.questions.append(question)
        return self.answer


class CountingBackend(InMemoryKeyValueStore):
    """In-memory backend that counts writes."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        super().__init__(initial)
        self.writes = 0

    def set(self, key: str, value: str) -> None:
        self.writes += 1
        super().set(key, value)


class FailingBackend:
    """Backend whose writes always fail (quota exceeded, disabled storage...)."""

    def __init__(self, stored: str | None = None, *, fail_reads: bool = False) -> None:
        self.stored = stored
        self.fail_reads = fail_reads
        self.attempts = 0

    def get(self, key: str) -> str | None:
        if self.fail_reads:
            raise OSError("storage disabled")
        return self.stored

    def set(self, key: str, value: str) -> None:
        self.attempts += 1
        raise OSError("quota exceeded")
