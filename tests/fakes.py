# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field

from todo_keeper.todos.todo_models import Todo


class InMemoryStorage:
    """
    Dict-backed KeyValueStorage.

    Same string-slot semantics as the JSON file storage, without the disk.
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(initial or {})
        self.writes = 0

    def get_item(self, key: str) -> str | None:
        return self.data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.data[key] = str(value)
        self.writes += 1

    def remove_item(self, key: str) -> None:
        self.data.pop(key, None)

    def clear(self) -> None:
        self.data.clear()


@dataclass(slots=True)
class RecordingRepo:
    """
    In-memory TodoRepo that records every save() for assertions.
    """

    todos: list[Todo] = field(default_factory=list)
    saves: list[list[Todo]] = field(default_factory=list)
    loads: int = 0

    def load(self) -> list[Todo]:
        self.loads += 1
        return list(self.todos)

    def save(self, todos: list[Todo]) -> None:
        snapshot = list(todos)
        self.saves.append(snapshot)
        self.todos = snapshot


@dataclass(slots=True)
class RecordingView:
    renders: int = 0

    def render(self) -> None:
        self.renders += 1
