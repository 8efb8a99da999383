# src/todo_keeper/core/ports.py

"""
Ports (interfaces) used by the core.

The delete flow and the todo helpers depend on Protocols instead of concrete
implementations. Storage and the page are passed in explicitly, so tests can
swap in in-memory fakes.
"""

from __future__ import annotations

from typing import Any, Protocol

TodoDict = dict[str, Any]
# Wire form of one record: {"id", "text", "dueDate", "completed", "createdAt"}.


class KeyValueStorage(Protocol):
    """localStorage-like string slots."""

    def get_item(self, key: str) -> str | None: ...
    def set_item(self, key: str, value: str) -> None: ...
    def remove_item(self, key: str) -> None: ...
    def clear(self) -> None: ...


class TodoRepo(Protocol):
    """Whole-list persistence: read everything, overwrite everything."""

    def load(self) -> list[Any]: ...
    def save(self, todos: list[Any]) -> None: ...


class TodoView(Protocol):
    """Anything that can re-project the stored list (usually the #todoList renderer)."""

    def render(self) -> None: ...
