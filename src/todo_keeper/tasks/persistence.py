# src/todo_keeper/tasks/persistence.py

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import Any

from ..core.ports import KeyValueBackend
from .task_models import Task

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "tasks"


class TaskPersistence:
    """
    Serializes the whole task list as one JSON array under a single key.

    Layout per task: {"text": str, "completed": bool, "priority": str}.

    Both directions are best-effort:
    - load() never raises; corrupt or unreadable data yields an empty list
    - save() never raises; a failed write is logged and reported as False
    """

    def __init__(
        self,
        backend: KeyValueBackend,
        *,
        key: str = DEFAULT_STORAGE_KEY,
        default_priority: str = "medium",
    ) -> None:
        self._backend = backend
        self._key = key
        self._default_priority = default_priority

    @property
    def key(self) -> str:
        return self._key

    def _entry_to_task(self, entry: Any) -> Task | None:
        if not isinstance(entry, dict):
            return None
        text = entry.get("text")
        if not isinstance(text, str) or not text.strip():
            return None
        # Only real booleans or 0/1; "false" and friends mark the entry malformed.
        completed = entry.get("completed", False)
        if completed not in (True, False) or not isinstance(completed, (bool, int)):
            return None
        priority = entry.get("priority")
        if not isinstance(priority, str) or not priority:
            priority = self._default_priority
        return Task(text=text, completed=bool(completed), priority=priority)

    def load(self) -> list[Task]:
        try:
            raw = self._backend.get(self._key)
        except Exception:
            logger.exception("Failed to read tasks from storage key=%s", self._key)
            return []

        if not raw:
            return []

        try:
            data = json.loads(raw)
        except (TypeError, ValueError):
            logger.exception("Failed to parse tasks from storage key=%s", self._key)
            return []

        if not isinstance(data, list):
            logger.error(
                "Stored tasks are not a list (got %s); starting empty.", type(data).__name__
            )
            return []

        tasks: list[Task] = []
        skipped = 0
        for entry in data:
            task = self._entry_to_task(entry)
            if task is None:
                skipped += 1
                continue
            tasks.append(task)

        if skipped:
            logger.warning("Skipped %d malformed task entries key=%s", skipped, self._key)
        logger.info("Loaded %d tasks key=%s", len(tasks), self._key)
        return tasks

    @staticmethod
    def dumps(tasks: Sequence[Task]) -> str:
        return json.dumps([t.to_dict() for t in tasks], ensure_ascii=False)

    def save(self, tasks: Sequence[Task]) -> bool:
        try:
            self._backend.set(self._key, self.dumps(tasks))
        except Exception:
            # In-memory state stays as is; the UI keeps showing it.
            logger.exception("Failed to save %d tasks key=%s", len(tasks), self._key)
            return False
        logger.debug("Saved %d tasks key=%s", len(tasks), self._key)
        return True
