# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_keeper.cli.bootstrap import build_state
from todo_keeper.core.state import AppState
from todo_keeper.todos.todo_models import Todo
from todo_keeper.todos.todo_store import TodoStore
from todo_keeper.ui.document import Document, build_app_document

from .fakes import InMemoryStorage


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI helpers.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="DEBUG",
        console_enabled=True,
        data_dir=tmp_path,
        storage_path=tmp_path / "storage.json",
        storage_key="todos",
        confirm_message="Are you sure?",
        html_snapshot_path=tmp_path / "todos.html",
    )


@pytest.fixture()
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture()
def store(storage: InMemoryStorage) -> TodoStore:
    return TodoStore(storage, key="todos")


@pytest.fixture()
def document() -> Document:
    return build_app_document()


@pytest.fixture()
def state(settings: SimpleNamespace, storage: InMemoryStorage) -> AppState:
    """AppState wired over in-memory storage (no files touched)."""
    return build_state(settings, storage)


def make_todo(todo_id: str, text: str = "", **kwargs) -> Todo:
    return Todo(
        id=todo_id,
        text=text or f"todo {todo_id}",
        due_date=kwargs.get("due_date", ""),
        completed=kwargs.get("completed", False),
        created_at=kwargs.get("created_at", "2026-01-01T00:00:00.000Z"),
    )
