# src/todo_keeper/ui/dialog.py

"""
Yes/No confirmation overlay.

show_confirm() attaches the overlay and returns at once; the answer arrives
later through on_result when one of the two buttons is clicked.

Key invariants:
- on_result is never called synchronously from show_confirm(),
- the overlay is detached before on_result runs,
- on_result runs exactly once per dialog; both buttons are disarmed after
  the first click,
- nothing dismisses the dialog except a button click (no timeout, no
  outside click),
- dialogs are not deduplicated: each call adds its own overlay.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from .document import Document, Element

logger = logging.getLogger(__name__)

ResultCallback = Callable[[bool], None]


class ConfirmDialog:
    def __init__(self, document: Document, message: str, on_result: ResultCallback) -> None:
        self._document = document
        self.message = message
        self._on_result = on_result
        self._answer: bool | None = None

        self.overlay = self._build()

    def _build(self) -> Element:
        doc = self._document
        overlay = doc.create_element("div", class_name="modal-overlay")
        modal = overlay.append_child(doc.create_element("div", class_name="modal"))
        modal.append_child(doc.create_element("p", text=self.message))
        actions = modal.append_child(doc.create_element("div", class_name="modal-actions"))

        yes = actions.append_child(doc.create_element("button", class_name="btn-yes", text="Yes"))
        no = actions.append_child(doc.create_element("button", class_name="btn-no", text="No"))
        yes.on_click = lambda: self._settle(True)
        no.on_click = lambda: self._settle(False)
        return overlay

    @property
    def is_open(self) -> bool:
        return self._answer is None

    @property
    def answer(self) -> bool | None:
        return self._answer

    def button(self, confirmed: bool) -> Element:
        el = self.overlay.query_selector(".btn-yes" if confirmed else ".btn-no")
        if el is None:
            raise RuntimeError("confirm overlay is missing its buttons")
        return el

    def _settle(self, confirmed: bool) -> None:
        if self._answer is not None:
            return
        self._answer = confirmed

        for el in self.overlay.query_selector_all("button"):
            el.on_click = None
        self.overlay.remove()

        logger.debug("Confirm dialog answered=%s message=%r", confirmed, self.message)
        self._on_result(confirmed)


def show_confirm(document: Document, message: str, on_result: ResultCallback) -> ConfirmDialog:
    """Attach a Yes/No overlay to document.body and return the dialog handle."""
    dialog = ConfirmDialog(document, message, on_result)
    document.body.append_child(dialog.overlay)
    logger.debug("Confirm dialog shown message=%r", message)
    return dialog


def topmost_dialog(document: Document) -> Element | None:
    """The most recently attached overlay still in the page, if any."""
    overlays = document.query_selector_all(".modal-overlay")
    return overlays[-1] if overlays else None
