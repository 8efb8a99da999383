# todos/delete_flow.py

"""
Confirm-gated delete.

delete_todo(id) opens a confirmation overlay and returns immediately. The
actual delete happens later, when the user clicks:

  Yes -> load, drop records with the captured id, save, render
  No  -> nothing (no save, no render)

The id is captured when delete_todo() is called. If that record is gone by
the time the user confirms, the filter removes nothing; that is not an error.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum

from ..core.ports import TodoRepo, TodoView
from ..ui.dialog import ConfirmDialog, show_confirm
from ..ui.document import Document

logger = logging.getLogger(__name__)

DEFAULT_CONFIRM_MESSAGE = "Are you sure?"


class FlowState(StrEnum):
    IDLE = "idle"
    AWAITING_CONFIRMATION = "awaiting_confirmation"


@dataclass(slots=True, eq=False)
class PendingDelete:
    """One open confirmation: the captured id and the overlay asking about it."""

    todo_id: str
    dialog: ConfirmDialog | None = field(default=None, repr=False)

    def answer(self, confirmed: bool) -> None:
        """Click Yes/No on this request's overlay."""
        if self.dialog is None:
            raise RuntimeError("pending delete has no dialog attached")
        self.dialog.button(confirmed).click()


class DeleteFlow:
    def __init__(
        self,
        store: TodoRepo,
        view: TodoView,
        document: Document,
        *,
        confirm_message: str = DEFAULT_CONFIRM_MESSAGE,
    ) -> None:
        self._store = store
        self._view = view
        self._document = document
        self._confirm_message = confirm_message
        self._pending: list[PendingDelete] = []

    @property
    def state(self) -> FlowState:
        return FlowState.AWAITING_CONFIRMATION if self._pending else FlowState.IDLE

    @property
    def pending(self) -> list[PendingDelete]:
        return list(self._pending)

    def delete_todo(self, todo_id: str) -> PendingDelete:
        request = PendingDelete(todo_id=todo_id)
        self._pending.append(request)
        request.dialog = show_confirm(
            self._document,
            self._confirm_message,
            lambda confirmed: self._on_answer(request, confirmed),
        )
        logger.info("Delete requested id=%s, awaiting confirmation", todo_id)
        return request

    def _on_answer(self, request: PendingDelete, confirmed: bool) -> None:
        try:
            if not confirmed:
                logger.info("Delete declined id=%s", request.todo_id)
                return

            todos = self._store.load()
            kept = [t for t in todos if t.id != request.todo_id]
            self._store.save(kept)
            removed = len(todos) - len(kept)
            logger.info("Delete confirmed id=%s removed=%d", request.todo_id, removed)
            self._view.render()
        finally:
            self._pending.remove(request)
