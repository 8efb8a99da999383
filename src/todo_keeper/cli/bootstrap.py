# src/todo_keeper/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires storage, store, page, renderer and delete flow into AppState,
- writes HTML snapshots of the page on request.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..config import get_settings
from ..core.ports import KeyValueStorage
from ..core.state import AppState
from ..storage.local_storage import JsonFileStorage
from ..todos import todo_api
from ..todos.delete_flow import DeleteFlow
from ..todos.todo_store import TodoStore
from ..ui.document import build_app_document
from ..ui.render import TodoRenderer

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.storage_path.parent.mkdir(parents=True, exist_ok=True)
    settings.html_snapshot_path.parent.mkdir(parents=True, exist_ok=True)


def build_state(settings, storage: KeyValueStorage) -> AppState:
    """Wire an AppState around any KeyValueStorage (file-backed or in-memory)."""
    store = TodoStore(storage, key=settings.storage_key)
    document = build_app_document()
    renderer = TodoRenderer(document, store)
    flow = DeleteFlow(store, renderer, document, confirm_message=settings.confirm_message)
    renderer.bind(
        on_toggle=lambda todo_id: todo_api.toggle_todo(store, renderer, todo_id),
        on_delete=flow.delete_todo,
    )
    return AppState(
        settings=settings,
        store=store,
        document=document,
        renderer=renderer,
        delete_flow=flow,
    )


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    state = build_state(settings, JsonFileStorage(settings.storage_path))
    state.renderer.render()
    return state


def write_html_snapshot(state: AppState, path: str | Path | None = None) -> Path:
    """Render the current page (including any open overlays) to an HTML file."""
    target = Path(path) if path else Path(state.settings.html_snapshot_path)
    target.parent.mkdir(parents=True, exist_ok=True)
    tmp = target.with_suffix(target.suffix + ".tmp")
    tmp.write_text(state.document.to_html(title=str(state.settings.app_name)), "utf-8")
    os.replace(tmp, target)
    logger.info("Wrote HTML snapshot to %s", target)
    return target
