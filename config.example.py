# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
See src/todo_keeper/config.py for how each value is parsed.

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name (default: todo).",
    "TODO_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Connectors
    "TODO_CONSOLE_ENABLED": "Run the interactive console (true/false, default: true).",
    # Storage
    "TODO_DATA_DIR": "Local data dir for storage, logs and snapshots (default: .local/todo).",
    "TODO_STORAGE_PATH": "JSON key-value file (default: <data_dir>/storage.json).",
    "TODO_STORAGE_KEY": "Slot that holds the todo list (default: todos).",
    # UI
    "TODO_CONFIRM_MESSAGE": "Question shown before a delete (default: Are you sure?).",
    "TODO_HTML_SNAPSHOT_PATH": "Where /html writes the page (default: <data_dir>/todos.html).",
}
