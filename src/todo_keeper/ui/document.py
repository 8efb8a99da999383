# src/todo_keeper/ui/document.py

"""
Minimal element tree for the todo page.

Only what the app needs from a DOM:
- elements with a tag, classes, an id, attributes and text,
- append/remove/replace of children,
- click handlers,
- compound selectors without combinators: "#id", ".a.b", "tag.class",
- serialization to HTML for snapshots.

Selectors never match the element they are called on, only descendants
(same as Element.querySelector in a browser).
"""

from __future__ import annotations

import html
import re
from collections.abc import Callable, Iterator

ClickHandler = Callable[[], None]


def escape_html(text: str) -> str:
    """Escape for a text node: &, < and >. Quotes are left alone, as textContent does."""
    return html.escape(text, quote=False)


_SELECTOR_PART = re.compile(r"[#.]?[^#.\s]+")
_VOID_TAGS = frozenset({"input", "br", "hr", "img", "meta", "link"})


class Element:
    def __init__(
        self,
        tag: str,
        *,
        class_name: str = "",
        id: str | None = None,
        text: str = "",
        attrs: dict[str, str] | None = None,
    ) -> None:
        self.tag = tag.lower()
        self.class_name = class_name
        self.id = id
        self.text = text
        self.attrs: dict[str, str] = dict(attrs or {})
        self.children: list[Element] = []
        self.parent: Element | None = None
        self.on_click: ClickHandler | None = None

    def __repr__(self) -> str:
        bits = [self.tag]
        if self.id:
            bits.append(f"#{self.id}")
        bits.extend(f".{c}" for c in self.classes)
        return f"<Element {''.join(bits)}>"

    # ---- classes ----

    @property
    def classes(self) -> list[str]:
        return self.class_name.split()

    def has_class(self, name: str) -> bool:
        return name in self.classes

    # ---- tree ----

    def append_child(self, child: Element) -> Element:
        if child.parent is not None:
            child.parent.remove_child(child)
        child.parent = self
        self.children.append(child)
        return child

    def remove_child(self, child: Element) -> Element:
        """Detach a direct child. Raises ValueError if it is not one."""
        for i, c in enumerate(self.children):
            if c is child:
                del self.children[i]
                child.parent = None
                return child
        raise ValueError(f"{child!r} is not a child of {self!r}")

    def remove(self) -> None:
        if self.parent is not None:
            self.parent.remove_child(self)

    def replace_children(self, *nodes: Element) -> None:
        for c in self.children:
            c.parent = None
        self.children = []
        for n in nodes:
            self.append_child(n)

    def iter_descendants(self) -> Iterator[Element]:
        for c in self.children:
            yield c
            yield from c.iter_descendants()

    def contains(self, other: Element) -> bool:
        node: Element | None = other
        while node is not None:
            if node is self:
                return True
            node = node.parent
        return False

    # ---- queries ----

    def _matches(self, selector: str) -> bool:
        for part in _SELECTOR_PART.findall(selector):
            if part.startswith("#"):
                if self.id != part[1:]:
                    return False
            elif part.startswith("."):
                if not self.has_class(part[1:]):
                    return False
            elif self.tag != part.lower():
                return False
        return True

    def query_selector_all(self, selector: str) -> list[Element]:
        selector = selector.strip()
        if not selector:
            raise ValueError("empty selector")
        if any(ch.isspace() for ch in selector):
            raise ValueError(f"combinators are not supported: {selector!r}")
        return [e for e in self.iter_descendants() if e._matches(selector)]

    def query_selector(self, selector: str) -> Element | None:
        found = self.query_selector_all(selector)
        return found[0] if found else None

    # ---- events ----

    def click(self) -> None:
        if self.on_click is not None:
            self.on_click()

    # ---- content ----

    @property
    def text_content(self) -> str:
        return self.text + "".join(c.text_content for c in self.children)

    def to_html(self) -> str:
        attrs: list[str] = []
        if self.id:
            attrs.append(f'id="{html.escape(self.id)}"')
        if self.class_name:
            attrs.append(f'class="{html.escape(self.class_name)}"')
        for k, v in self.attrs.items():
            attrs.append(k if v == "" else f'{k}="{html.escape(v)}"')
        open_tag = f"<{self.tag}{' ' if attrs else ''}{' '.join(attrs)}>"
        if self.tag in _VOID_TAGS:
            return open_tag
        inner = escape_html(self.text) + "".join(c.to_html() for c in self.children)
        return f"{open_tag}{inner}</{self.tag}>"


class Document:
    """The page: a body element plus convenience lookups."""

    def __init__(self) -> None:
        self.body = Element("body")

    def create_element(self, tag: str, **kwargs) -> Element:
        return Element(tag, **kwargs)

    def get_element_by_id(self, element_id: str) -> Element | None:
        return self.body.query_selector(f"#{element_id}")

    def query_selector(self, selector: str) -> Element | None:
        return self.body.query_selector(selector)

    def query_selector_all(self, selector: str) -> list[Element]:
        return self.body.query_selector_all(selector)

    def contains(self, el: Element) -> bool:
        return self.body.contains(el)

    def to_html(self, title: str = "Todo") -> str:
        return (
            "<!DOCTYPE html>\n"
            f"<html><head><meta charset=\"utf-8\"><title>{html.escape(title)}</title></head>"
            f"{self.body.to_html()}</html>\n"
        )


def build_app_document() -> Document:
    """Page skeleton: div.app > div.todo-list#todoList."""
    doc = Document()
    app = doc.create_element("div", class_name="app")
    app.append_child(doc.create_element("div", class_name="todo-list", id="todoList"))
    doc.body.append_child(app)
    return doc
