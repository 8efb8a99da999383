# src/todo_keeper/todos/todo_api.py

from __future__ import annotations

import logging
from dataclasses import replace

from ..core.ports import TodoRepo, TodoView
from .todo_models import Todo, TodoFilter, new_todo_id, normalize_due_date, now_iso

logger = logging.getLogger(__name__)


def _clean_text(text: str | None) -> str:
    text = (text or "").strip()
    if not text:
        raise ValueError("text is required")
    return text


def add_todo(store: TodoRepo, view: TodoView, text: str, due_date: str = "") -> Todo:
    """Append a new open todo, save the list and re-render."""
    todo = Todo(
        id=new_todo_id(),
        text=_clean_text(text),
        due_date=normalize_due_date(due_date),
        completed=False,
        created_at=now_iso(),
    )
    todos = store.load()
    todos.append(todo)
    store.save(todos)
    logger.info("Todo added id=%s due=%s", todo.id, todo.due_date or "-")
    view.render()
    return todo


def get_todo(store: TodoRepo, todo_id: str) -> Todo | None:
    for t in store.load():
        if t.id == todo_id:
            return t
    return None


def resolve_todo_id(store: TodoRepo, prefix: str) -> str | None:
    """
    Map a full id or a unique id prefix to the stored id.

    Returns None when nothing matches; raises ValueError when the prefix
    is ambiguous.
    """
    prefix = prefix.strip()
    if not prefix:
        return None
    ids = [t.id for t in store.load()]
    if prefix in ids:
        return prefix
    matches = [i for i in ids if i.startswith(prefix)]
    if len(matches) > 1:
        raise ValueError(f"id prefix {prefix!r} is ambiguous ({len(matches)} matches)")
    return matches[0] if matches else None


def list_todos(store: TodoRepo, filter: TodoFilter | str = TodoFilter.ALL) -> list[Todo]:
    flt = filter if isinstance(filter, TodoFilter) else TodoFilter.parse(filter)
    todos = store.load()
    if flt is TodoFilter.ACTIVE:
        return [t for t in todos if not t.completed]
    if flt is TodoFilter.DONE:
        return [t for t in todos if t.completed]
    return todos


def _replace_one(store: TodoRepo, view: TodoView, todo_id: str, **changes) -> Todo | None:
    todos = store.load()
    for i, t in enumerate(todos):
        if t.id == todo_id:
            updated = replace(t, **changes)
            todos[i] = updated
            store.save(todos)
            view.render()
            return updated
    logger.debug("No todo with id=%s; nothing changed", todo_id)
    return None


def edit_todo(
    store: TodoRepo,
    view: TodoView,
    todo_id: str,
    *,
    text: str | None = None,
    due_date: str | None = None,
) -> Todo | None:
    """
    Update text and/or due date of one todo.

    None leaves a field as it is; due_date="" clears the due date.
    Returns the updated record, or None if the id is unknown.
    """
    changes: dict[str, str] = {}
    if text is not None:
        changes["text"] = _clean_text(text)
    if due_date is not None:
        changes["due_date"] = normalize_due_date(due_date)
    if not changes:
        return get_todo(store, todo_id)

    updated = _replace_one(store, view, todo_id, **changes)
    if updated is not None:
        logger.info("Todo edited id=%s fields=%s", todo_id, ",".join(sorted(changes)))
    return updated


def toggle_todo(store: TodoRepo, view: TodoView, todo_id: str) -> Todo | None:
    current = get_todo(store, todo_id)
    if current is None:
        return None
    updated = _replace_one(store, view, todo_id, completed=not current.completed)
    if updated is not None:
        logger.info("Todo id=%s completed=%s", todo_id, updated.completed)
    return updated
