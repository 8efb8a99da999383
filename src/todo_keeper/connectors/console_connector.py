# src/todo_keeper/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import answer_confirmation
from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..todos.delete_flow import FlowState
from ..ui.dialog import topmost_dialog

logger = logging.getLogger(__name__)

YES_WORDS = frozenset({"y", "yes"})
NO_WORDS = frozenset({"n", "no"})

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _open_question(state: AppState) -> str | None:
    overlay = topmost_dialog(state.document)
    if overlay is None:
        return None
    p = overlay.query_selector("p")
    return p.text_content if p is not None else ""


def handle_line(state: AppState, line: str, emit: OutputFn | None = None) -> str | None:
    """
    Route one line of console input.

    While a confirmation is open, bare y/yes and n/no answer it; other plain
    text only repeats the question. Slash commands always go to the registry.
    """
    text = line.strip()
    if not text:
        return None

    if state.delete_flow.state is FlowState.AWAITING_CONFIRMATION and not text.startswith("/"):
        word = text.lower()
        if word not in YES_WORDS and word not in NO_WORDS:
            return f"{_open_question(state)} Please answer y or n."
        try:
            return answer_confirmation(state, word in YES_WORDS)
        except ValueError as e:
            logger.info("Answer %r rejected: %s", word, e)
            return f"Error: {e}"

    reply = command_registry.handle(state, text, emit=emit)
    if reply is None:
        return "Not a command. Use /help to list available commands."
    return reply


def run_console_loop(
    state: AppState,
    *,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> None:
    logger.info("Console connector started (storage key=%s).", state.store.key)
    app_name = str(getattr(state.settings, "app_name", "todo"))

    def emit(text: str) -> None:
        output_fn(f"[{_ts_local()}] {text}")

    emit(f"[{app_name}] Type /help for commands, /exit to quit.")

    while True:
        prompt = "(y/n) > " if state.delete_flow.state is FlowState.AWAITING_CONFIRMATION else "> "
        try:
            user_input = input_fn(prompt).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            output_fn("")
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            reply = handle_line(state, user_input, emit=emit)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is not None:
            emit(reply)

    if state.delete_flow.pending:
        # Open questions are abandoned with the session.
        logger.info("Leaving with %d unanswered confirmation(s).", len(state.delete_flow.pending))
    logger.info("Console connector finished.")
