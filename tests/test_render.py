# tests/test_render.py

from __future__ import annotations

from datetime import date

import pytest

from todo_keeper.todos.todo_store import TodoStore
from todo_keeper.ui.document import Document, Element, escape_html
from todo_keeper.ui.render import (
    EMPTY_STATE_TEXT,
    TodoRenderer,
    format_date,
    is_overdue,
    render_text,
)

from .conftest import make_todo

TODAY = date(2026, 10, 19)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("2026-03-07", "03/07/26"), ("1999-12-31", "12/31/99"), ("", ""), ("soon", "soon")],
)
def test_format_date(raw: str, expected: str) -> None:
    assert format_date(raw) == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("2026-10-18", True), ("2026-10-19", False), ("2026-10-20", False), ("", False), ("bad", False)],
)
def test_is_overdue(raw: str, expected: bool) -> None:
    assert is_overdue(raw, today=TODAY) is expected


def test_escape_html() -> None:
    assert escape_html('<a href="x">&</a>') == '&lt;a href="x"&gt;&amp;&lt;/a&gt;'


def _renderer(document: Document, store: TodoStore) -> TodoRenderer:
    return TodoRenderer(document, store, today=lambda: TODAY)


def test_render_empty_state(document: Document, store: TodoStore) -> None:
    r = _renderer(document, store)
    r.render()
    container = document.get_element_by_id("todoList")
    assert [c.class_name for c in container.children] == ["empty-state"]
    assert container.text_content == EMPTY_STATE_TEXT
    assert r.render_count == 1


def test_render_items_with_markers(document: Document, store: TodoStore) -> None:
    store.save(
        [
            make_todo("a", text="late", due_date="2026-10-01"),
            make_todo("b", text="late but done", due_date="2026-10-01", completed=True),
            make_todo("c", text="<script>x</script>"),
        ]
    )
    _renderer(document, store).render()

    items = document.query_selector_all(".todo-item")
    assert [i.attrs["data-id"] for i in items] == ["a", "b", "c"]
    assert not items[0].has_class("completed")
    assert items[1].has_class("completed")

    due_a = items[0].query_selector(".todo-due")
    assert due_a.has_class("overdue")
    assert due_a.text_content == "Due: 10/01/26 (overdue)"

    due_b = items[1].query_selector(".todo-due")
    assert not due_b.has_class("overdue")
    assert due_b.text_content == "Due: 10/01/26"

    assert items[2].query_selector(".todo-due") is None
    assert "checked" in items[1].query_selector(".todo-checkbox").attrs

    html_out = document.to_html()
    assert "&lt;script&gt;x&lt;/script&gt;" in html_out
    assert "<script>" not in html_out


def test_render_rewrites_container_wholesale(document: Document, store: TodoStore) -> None:
    r = _renderer(document, store)
    store.save([make_todo("a"), make_todo("b")])
    r.render()
    store.save([make_todo("b")])
    r.render()
    assert len(document.query_selector_all(".todo-item")) == 1
    assert r.render_count == 2


def test_render_binds_item_actions(document: Document, store: TodoStore) -> None:
    toggled: list[str] = []
    deleted: list[str] = []
    r = _renderer(document, store)
    r.bind(on_toggle=toggled.append, on_delete=deleted.append)
    store.save([make_todo("a"), make_todo("b")])
    r.render()

    items = document.query_selector_all(".todo-item")
    items[0].query_selector(".todo-checkbox").click()
    items[1].query_selector(".btn-icon.delete").click()

    assert toggled == ["a"]
    assert deleted == ["b"]


def test_render_without_container_fails(store: TodoStore) -> None:
    with pytest.raises(RuntimeError):
        _renderer(Document(), store).render()


def test_render_text() -> None:
    out = render_text(
        [make_todo("abcdef0123", text="write", due_date="2026-10-01"), make_todo("x", completed=True)],
        today=TODAY,
    )
    lines = out.splitlines()
    assert lines[0] == "[ ] abcdef01  write  (Due: 10/01/26 (overdue))"
    assert lines[1].startswith("[x] x  ")
    assert render_text([]) == EMPTY_STATE_TEXT


# ---- document ----


def test_document_tree_operations() -> None:
    root = Element("div", id="root")
    child = root.append_child(Element("span", class_name="a b"))
    assert root.query_selector(".a.b") is child
    assert root.query_selector("span.b") is child
    assert root.query_selector("#root") is None  # descendants only
    assert root.contains(child)

    other = Element("div")
    other.append_child(child)
    assert root.children == []
    assert child.parent is other

    with pytest.raises(ValueError):
        root.remove_child(child)
    with pytest.raises(ValueError):
        root.query_selector(".modal p")

    child.remove()
    assert child.parent is None
    child.click()  # no handler: nothing happens
