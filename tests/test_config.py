# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from todo_keeper.cli.bootstrap import create_initial_state
from todo_keeper.config import Settings
from todo_keeper.storage.local_storage import JsonFileStorage


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("TODO_DATA_DIR", "TODO_STORAGE_PATH", "TODO_STORAGE_KEY", "TODO_CONFIRM_MESSAGE"):
        monkeypatch.delenv(name, raising=False)
    s = Settings.from_env()
    assert s.storage_key == "todos"
    assert s.confirm_message == "Are you sure?"
    assert s.storage_path == Path(".local/todo") / "storage.json"


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TODO_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TODO_STORAGE_KEY", "work")
    monkeypatch.setenv("TODO_CONSOLE_ENABLED", "off")
    s = Settings.from_env()
    assert s.data_dir == tmp_path
    assert s.storage_path == tmp_path / "storage.json"
    assert s.storage_key == "work"
    assert s.console_enabled is False


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("maybe", True), ("", True), ("ON", True), ("No", False), ("0", False)],
)
def test_console_enabled_unrecognised_keeps_default(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool
) -> None:
    monkeypatch.setenv("TODO_CONSOLE_ENABLED", raw)
    assert Settings.from_env().console_enabled is expected


def test_create_initial_state_renders_from_disk(settings) -> None:
    raw = '[{"id": "a", "text": "from disk", "dueDate": "", "completed": false, "createdAt": ""}]'
    JsonFileStorage(settings.storage_path).set_item("todos", raw)

    state = create_initial_state(settings=settings)

    assert state.renderer.render_count == 1
    texts = [e.text_content for e in state.document.query_selector_all(".todo-text")]
    assert texts == ["from disk"]
