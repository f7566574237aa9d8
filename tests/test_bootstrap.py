# tests/test_bootstrap.py

from __future__ import annotations

import pytest

from todo_keeper.cli.bootstrap import create_backend, create_initial_state
from todo_keeper.core.state import StartupError
from todo_keeper.storage.kv_store import InMemoryKeyValueStore, SqliteKeyValueStore
from todo_keeper.tasks.task_models import FilterMode

from .fakes import CountingBackend, RecordingRenderer, ScriptedConfirm


def test_missing_renderer_is_fatal(settings) -> None:
    with pytest.raises(StartupError, match="renderer"):
        create_initial_state(renderer=None, confirm=ScriptedConfirm(), settings=settings)


def test_missing_confirm_is_fatal(settings) -> None:
    with pytest.raises(StartupError, match="confirm"):
        create_initial_state(renderer=RecordingRenderer(), confirm=None, settings=settings)


def test_backend_without_get_set_is_fatal(settings) -> None:
    with pytest.raises(StartupError):
        create_initial_state(
            renderer=RecordingRenderer(),
            confirm=ScriptedConfirm(),
            settings=settings,
            backend=object(),  # type: ignore[arg-type]
        )


def test_create_backend_follows_ephemeral_flag(settings) -> None:
    assert isinstance(create_backend(settings), InMemoryKeyValueStore)

    settings.ephemeral = False
    backend = create_backend(settings)
    assert isinstance(backend, SqliteKeyValueStore)
    assert settings.storage_path.exists()


def test_state_starts_on_all_filter_with_stored_tasks(settings) -> None:
    backend = CountingBackend({"tasks": '[{"text": "a", "completed": false, "priority": "low"}]'})
    state = create_initial_state(
        renderer=RecordingRenderer(),
        confirm=ScriptedConfirm(),
        settings=settings,
        backend=backend,
    )

    assert state.filter_mode is FilterMode.ALL
    assert [t.text for t in state.task_store.tasks] == ["a"]


def test_listeners_are_subscribed(settings) -> None:
    fired: list[int] = []
    state = create_initial_state(
        renderer=RecordingRenderer(),
        confirm=ScriptedConfirm(),
        settings=settings,
        listeners=[lambda task, pos: fired.append(pos)],
    )
    state.task_store.add("a", "low")
    state.task_store.toggle(0)

    assert fired == [0]
