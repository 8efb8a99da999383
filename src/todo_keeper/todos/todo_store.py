# todos/todo_store.py

from __future__ import annotations

import json
import logging
from collections.abc import Iterable

from ..core.ports import KeyValueStorage
from .todo_models import Todo

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "todos"


class CorruptTodoData(ValueError):
    """
    The storage slot holds something that is not a list of todo records.

    Raised instead of resetting the slot: a corrupt list is left exactly as
    found so it can be inspected or repaired by hand.
    """


class TodoStore:
    """
    Whole-list todo persistence over one key-value slot.

    - load() reads the slot and parses the JSON array
    - save() serializes the full list and overwrites the slot
    - no merge, no versioning; one writer at a time
    """

    def __init__(self, storage: KeyValueStorage, key: str = DEFAULT_STORAGE_KEY) -> None:
        if not key:
            raise ValueError("storage key is required")
        self._storage = storage
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> list[Todo]:
        raw = self._storage.get_item(self._key)
        if not raw:
            return []

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error("Slot %r is not valid JSON: %s", self._key, e.msg)
            raise CorruptTodoData(f"slot {self._key!r}: invalid JSON ({e.msg})") from e

        if not isinstance(data, list):
            logger.error("Slot %r holds %s, expected a list", self._key, type(data).__name__)
            raise CorruptTodoData(f"slot {self._key!r}: expected a JSON array")

        todos: list[Todo] = []
        for i, item in enumerate(data):
            if not isinstance(item, dict):
                raise CorruptTodoData(f"slot {self._key!r}: item {i} is not an object")
            try:
                todos.append(Todo.from_dict(item))
            except (KeyError, TypeError) as e:
                raise CorruptTodoData(f"slot {self._key!r}: item {i}: {e.args[0]}") from e

        logger.debug("Loaded %d todos from slot %r", len(todos), self._key)
        return todos

    def save(self, todos: Iterable[Todo]) -> None:
        items = [t.to_dict() for t in todos]
        self._storage.set_item(self._key, json.dumps(items, ensure_ascii=False))
        logger.debug("Saved %d todos to slot %r", len(items), self._key)

    def count(self) -> int:
        return len(self.load())
