# src/todo_keeper/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

APP_LOGGER = "todo_keeper"
LOG_FILE_NAME = "todo.log"


def _is_app_record(record: logging.LogRecord) -> bool:
    return record.name == APP_LOGGER or record.name.startswith(APP_LOGGER + ".")


class _ConsoleNoiseFilter(logging.Filter):
    """
    Console gate for the REPL.

    Records from todo_keeper.* (todos.todo_store, todos.delete_flow,
    ui.render, connectors.console_connector, ...) pass at the handler's level.
    Anything else, captured `py.warnings` included, only reaches the console
    at ERROR or above. The log file is not filtered.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if _is_app_record(record):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".local/todo",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Send logs to stderr (filtered, for the person at the prompt) and to
    `<log_dir>/todo.log` (every store load/save and delete decision).

    Existing root handlers are replaced, so calling it twice does not
    duplicate output. Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console)

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(file_level)
    file_handler.setFormatter(fmt)
    root.addHandler(file_handler)

    logging.captureWarnings(True)
    return log_file
