# src/todo_keeper/ui/render.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import date

from ..core.ports import TodoRepo
from ..todos.todo_models import Todo
from .document import Document, Element

logger = logging.getLogger(__name__)

EMPTY_STATE_TEXT = "No todos yet. Add one above!"

TodoAction = Callable[[str], None]


def format_date(date_str: str) -> str:
    """Turn YYYY-MM-DD into MM/DD/YY. Empty stays empty; anything else is shown as-is."""
    if not date_str:
        return ""
    parts = date_str.split("-")
    if len(parts) != 3:
        return date_str
    year, month, day = parts
    return f"{month}/{day}/{year[-2:]}"


def is_overdue(date_str: str, today: date | None = None) -> bool:
    """True when the due date is strictly before today. Unparsable dates are never overdue."""
    if not date_str:
        return False
    try:
        due = date.fromisoformat(date_str)
    except ValueError:
        return False
    return due < (today or date.today())


def _due_label(todo: Todo, today: date | None) -> tuple[str, bool]:
    overdue = not todo.completed and is_overdue(todo.due_date, today)
    label = f"Due: {format_date(todo.due_date)}"
    if overdue:
        label += " (overdue)"
    return label, overdue


class TodoRenderer:
    """
    Projects the stored list into the #todoList container.

    Every render() reloads from the store and rewrites the container
    wholesale; nothing is patched in place.
    """

    def __init__(
        self,
        document: Document,
        store: TodoRepo,
        *,
        container_id: str = "todoList",
        today: Callable[[], date] | None = None,
    ) -> None:
        self._document = document
        self._store = store
        self._container_id = container_id
        self._today = today or date.today
        self._on_toggle: TodoAction | None = None
        self._on_delete: TodoAction | None = None
        self.render_count = 0

    def bind(self, *, on_toggle: TodoAction | None = None, on_delete: TodoAction | None = None) -> None:
        """Attach per-item actions (checkbox click, delete button click)."""
        self._on_toggle = on_toggle
        self._on_delete = on_delete

    def _container(self) -> Element:
        el = self._document.get_element_by_id(self._container_id)
        if el is None:
            raise RuntimeError(f"container #{self._container_id} not found in document")
        return el

    def _build_item(self, todo: Todo, today: date) -> Element:
        doc = self._document
        item = doc.create_element(
            "div",
            class_name="todo-item completed" if todo.completed else "todo-item",
            attrs={"data-id": todo.id},
        )

        checkbox_attrs = {"type": "checkbox"}
        if todo.completed:
            checkbox_attrs["checked"] = ""
        checkbox = doc.create_element("input", class_name="todo-checkbox", attrs=checkbox_attrs)
        if self._on_toggle is not None:
            on_toggle = self._on_toggle
            checkbox.on_click = lambda: on_toggle(todo.id)
        item.append_child(checkbox)

        content = item.append_child(doc.create_element("div", class_name="todo-content"))
        content.append_child(doc.create_element("div", class_name="todo-text", text=todo.text))
        if todo.due_date:
            label, overdue = _due_label(todo, today)
            content.append_child(
                doc.create_element(
                    "div",
                    class_name="todo-due overdue" if overdue else "todo-due",
                    text=label,
                )
            )

        actions = item.append_child(doc.create_element("div", class_name="todo-actions"))
        actions.append_child(
            doc.create_element("button", class_name="btn-icon", text="✎", attrs={"title": "Edit"})
        )
        delete_btn = actions.append_child(
            doc.create_element(
                "button", class_name="btn-icon delete", text="✕", attrs={"title": "Delete"}
            )
        )
        if self._on_delete is not None:
            on_delete = self._on_delete
            delete_btn.on_click = lambda: on_delete(todo.id)
        return item

    def render(self) -> None:
        todos = self._store.load()
        container = self._container()
        self.render_count += 1

        if not todos:
            container.replace_children(
                self._document.create_element("div", class_name="empty-state", text=EMPTY_STATE_TEXT)
            )
            logger.debug("Rendered empty state (render #%d)", self.render_count)
            return

        today = self._today()
        container.replace_children(*(self._build_item(t, today) for t in todos))
        logger.debug("Rendered %d todos (render #%d)", len(todos), self.render_count)


def render_text(todos: Iterable[Todo], today: date | None = None) -> str:
    """Plain-text projection of the list for the console."""
    lines: list[str] = []
    for t in todos:
        mark = "x" if t.completed else " "
        line = f"[{mark}] {t.short_id}  {t.text}"
        if t.due_date:
            label, _ = _due_label(t, today)
            line += f"  ({label})"
        lines.append(line)
    if not lines:
        return EMPTY_STATE_TEXT
    return "\n".join(lines)
