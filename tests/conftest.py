# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_keeper.cli.bootstrap import create_initial_state
from todo_keeper.core.state import AppState
from todo_keeper.tasks.persistence import TaskPersistence
from todo_keeper.tasks.task_store import TaskStore

from .fakes import CountingBackend, RecordingRenderer, ScriptedConfirm


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        storage_path=tmp_path / "tasks.sqlite3",
        storage_key="tasks",
        ephemeral=True,
        priorities=["low", "medium", "high"],
        default_priority="medium",
        celebrate=False,
    )


@pytest.fixture()
def backend() -> CountingBackend:
    return CountingBackend()


@pytest.fixture()
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture()
def confirm() -> ScriptedConfirm:
    return ScriptedConfirm(answer=True)


@pytest.fixture()
def persistence(backend: CountingBackend) -> TaskPersistence:
    return TaskPersistence(backend, key="tasks")


@pytest.fixture()
def store(persistence: TaskPersistence, renderer: RecordingRenderer) -> TaskStore:
    return TaskStore(persistence, renderer=renderer)


@pytest.fixture()
def state(
    settings: SimpleNamespace,
    backend: CountingBackend,
    renderer: RecordingRenderer,
    confirm: ScriptedConfirm,
) -> AppState:
    """AppState wired with deterministic fakes."""
    return create_initial_state(
        renderer=renderer,
        confirm=confirm,
        settings=settings,
        backend=backend,
    )
