# src/todo_keeper/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- picks the storage backend (SQLite file or in-memory),
- wires renderer / confirmation prompt / completion listeners into AppState.

Missing collaborators are fatal here: better to refuse to start than to run
with a store that cannot render or confirm.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..config import get_settings
from ..core.events import CompletionSignal
from ..core.ports import CompletionListener, ConfirmPrompt, KeyValueBackend, Renderer
from ..core.state import AppState, StartupError
from ..storage.kv_store import InMemoryKeyValueStore, SqliteKeyValueStore
from ..tasks.persistence import TaskPersistence
from ..tasks.task_store import TaskStore
from ..view.projector import ViewState

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.storage_path.parent.mkdir(parents=True, exist_ok=True)


def create_backend(settings) -> KeyValueBackend:
    if getattr(settings, "ephemeral", False):
        logger.info("Using in-memory storage (ephemeral run).")
        return InMemoryKeyValueStore()
    _ensure_local_dirs(settings)
    return SqliteKeyValueStore(settings.storage_path)


def _require(name: str, value: object) -> None:
    if value is None or not callable(value):
        raise StartupError(f"Required collaborator '{name}' is not wired (got {value!r}).")


def create_initial_state(
    *,
    renderer: Renderer | None,
    confirm: ConfirmPrompt | None,
    settings=None,
    backend: KeyValueBackend | None = None,
    listeners: Iterable[CompletionListener] = (),
) -> AppState:
    """
    Create AppState from the provided settings and collaborators.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings(); if backend is None, it is built from settings.
    """
    _require("renderer", renderer)
    _require("confirm", confirm)

    if settings is None:
        settings = get_settings()

    if backend is None:
        backend = create_backend(settings)
    if not (hasattr(backend, "get") and hasattr(backend, "set")):
        raise StartupError(f"Storage backend {backend!r} does not provide get/set.")

    persistence = TaskPersistence(
        backend,
        key=getattr(settings, "storage_key", "tasks"),
        default_priority=getattr(settings, "default_priority", "medium"),
    )

    signal = CompletionSignal()
    for listener in listeners:
        _require("completion listener", listener)
        signal.subscribe(listener)

    view = ViewState()
    task_store = TaskStore(
        persistence,
        renderer=renderer,
        current_filter=view.current,
        completion_signal=signal,
    )

    return AppState(settings=settings, task_store=task_store, view=view, confirm=confirm)
