# src/todo_keeper/core/events.py

from __future__ import annotations

import logging

from ..tasks.task_models import Task
from .ports import CompletionListener

logger = logging.getLogger(__name__)


class CompletionSignal:
    """
    Observable channel for "a task was just completed".

    The task store publishes, decorative layers subscribe. Publishing never
    raises: a crashing listener is logged and the rest still run.
    """

    def __init__(self) -> None:
        self._listeners: list[CompletionListener] = []

    def subscribe(self, listener: CompletionListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: CompletionListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def publish(self, task: Task, position: int) -> None:
        for listener in list(self._listeners):
            try:
                listener(task, position)
            except Exception:
                logger.exception("Completion listener %r failed (position=%s)", listener, position)
