# tests/test_persistence.py

from __future__ import annotations

import json

import pytest

from todo_keeper.storage.kv_store import InMemoryKeyValueStore
from todo_keeper.tasks.persistence import TaskPersistence
from todo_keeper.tasks.task_models import Task

from .fakes import FailingBackend


def test_load_missing_key_is_empty() -> None:
    assert TaskPersistence(InMemoryKeyValueStore()).load() == []


def test_save_then_load_preserves_order_and_fields() -> None:
    backend = InMemoryKeyValueStore()
    p = TaskPersistence(backend)
    tasks = [
        Task("Buy milk", False, "medium"),
        Task("Pay rent", True, "high"),
        Task("Пройтись", False, "low"),
    ]

    assert p.save(tasks) is True
    assert p.load() == tasks


def test_saved_layout_is_a_plain_json_array() -> None:
    backend = InMemoryKeyValueStore()
    TaskPersistence(backend, key="todo").save([Task("a", True, "high")])

    raw = backend.get("todo")
    assert raw is not None
    assert json.loads(raw) == [{"text": "a", "completed": True, "priority": "high"}]


def test_save_writes_whole_list_each_time() -> None:
    backend = InMemoryKeyValueStore()
    p = TaskPersistence(backend)
    p.save([Task("a"), Task("b")])
    p.save([Task("b")])

    assert p.load() == [Task("b")]


@pytest.mark.parametrize(
    "raw",
    [
        "{not json",
        "null",
        '{"text": "object, not list"}',
        '"just a string"',
        "42",
    ],
)
def test_corrupt_data_loads_as_empty(raw: str) -> None:
    p = TaskPersistence(InMemoryKeyValueStore({"tasks": raw}))

    assert p.load() == []


def test_malformed_entries_are_skipped() -> None:
    raw = json.dumps(
        [
            {"text": "keep", "completed": False, "priority": "low"},
            "garbage",
            {"text": "   "},
            {"completed": True},
            {"text": "no priority", "completed": 1},
        ]
    )
    p = TaskPersistence(InMemoryKeyValueStore({"tasks": raw}), default_priority="medium")

    assert p.load() == [
        Task("keep", False, "low"),
        Task("no priority", True, "medium"),
    ]


def test_read_failure_loads_as_empty() -> None:
    p = TaskPersistence(FailingBackend(fail_reads=True))
    assert p.load() == []


def test_write_failure_is_reported_not_raised(caplog) -> None:
    backend = FailingBackend()
    p = TaskPersistence(backend)

    assert p.save([Task("a")]) is False
    assert backend.attempts == 1
    assert "Failed to save" in caplog.text


@pytest.mark.parametrize("completed", ["false", "true", None, 2, 0.5, []])
def test_non_boolean_completed_marks_entry_malformed(completed) -> None:
    raw = json.dumps(
        [
            {"text": "bad flag", "completed": completed, "priority": "low"},
            {"text": "zero", "completed": 0, "priority": "low"},
        ]
    )
    p = TaskPersistence(InMemoryKeyValueStore({"tasks": raw}))

    assert p.load() == [Task("zero", False, "low")]
