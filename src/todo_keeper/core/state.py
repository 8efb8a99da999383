# src/todo_keeper/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..todos.delete_flow import DeleteFlow
from ..todos.todo_store import TodoStore
from ..ui.document import Document
from ..ui.render import TodoRenderer


@dataclass
class AppState:
    # Settings object (real Settings or a test SimpleNamespace).
    settings: Any

    store: TodoStore
    document: Document
    renderer: TodoRenderer
    delete_flow: DeleteFlow
