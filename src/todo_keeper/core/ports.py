# src/todo_keeper/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The task store talks to storage, the user and the screen only through these
Protocols. Connectors provide the concrete implementations; tests provide fakes.
"""

from collections.abc import Sequence
from typing import Protocol

from ..tasks.task_models import FilterMode, Task


class KeyValueBackend(Protocol):
    """Durable string -> text blob store. Both calls may raise (disk full, locked db, ...)."""

    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str) -> None: ...


class ConfirmPrompt(Protocol):
    """Blocking yes/no question surfaced to the user."""

    def __call__(self, question: str) -> bool: ...


class Renderer(Protocol):
    """Called after every mutation + save cycle with the full list and the current filter."""

    def __call__(self, tasks: Sequence[Task], mode: FilterMode) -> None: ...


class CompletionListener(Protocol):
    """Fire-and-forget consumer of "task completed" events."""

    def __call__(self, task: Task, position: int) -> None: ...
