# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from todo_keeper.logging_setup import _ConsoleNoiseFilter, setup_logging


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


@pytest.mark.parametrize(
    ("name", "level", "shown"),
    [
        ("todo_keeper", logging.DEBUG, True),
        ("todo_keeper.todos.delete_flow", logging.INFO, True),
        ("todo_keeper_extras", logging.INFO, False),
        ("py.warnings", logging.WARNING, False),
        ("dotenv.main", logging.WARNING, False),
        ("dotenv.main", logging.ERROR, True),
    ],
)
def test_console_filter_keeps_app_loggers(name: str, level: int, shown: bool) -> None:
    assert _ConsoleNoiseFilter().filter(_record(name, level)) is shown


def test_setup_logging_writes_file_and_replaces_handlers(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        setup_logging(log_dir=tmp_path)
        log_file = setup_logging(log_dir=tmp_path / "logs")

        assert len(root.handlers) == 2
        logging.getLogger("todo_keeper.todos.todo_store").debug("Saved %d todos", 3)
        for h in root.handlers:
            h.flush()

        assert log_file == tmp_path / "logs" / "todo.log"
        assert "todo_keeper.todos.todo_store: Saved 3 todos" in log_file.read_text("utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
        logging.captureWarnings(False)
