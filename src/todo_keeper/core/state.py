# src/todo_keeper/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.task_models import FilterMode
from ..tasks.task_store import TaskStore
from ..view.projector import ViewState
from .ports import ConfirmPrompt


class StartupError(RuntimeError):
    """A required collaborator was not wired; the app must not start half-initialized."""


@dataclass
class AppState:
    # Settings-like object (config.Settings or a SimpleNamespace in tests).
    settings: Any

    task_store: TaskStore
    view: ViewState
    confirm: ConfirmPrompt

    @property
    def filter_mode(self) -> FilterMode:
        return self.view.mode

    @property
    def priorities(self) -> list[str]:
        return list(getattr(self.settings, "priorities", []) or [])

    @property
    def default_priority(self) -> str:
        return str(getattr(self.settings, "default_priority", "medium"))
