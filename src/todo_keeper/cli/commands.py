# src/todo_keeper/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..todos import todo_api
from ..todos.delete_flow import PendingDelete
from ..todos.todo_models import Todo
from ..ui.dialog import topmost_dialog
from ..ui.render import render_text
from .bootstrap import write_html_snapshot

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        ValueError from a handler (bad input, corrupt stored list) becomes
        an "Error: ..." reply; anything else propagates to the connector.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except Exception:
            nparams = 3

        try:
            if nparams >= 3:
                h3 = cast(CommandHandler3, handler)
                return h3(state, args, emit)
            h2 = cast(CommandHandler2, handler)
            return h2(state, args)
        except ValueError as e:
            logger.info("Command /%s rejected: %s", name, e)
            return f"Error: {e}"

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _split_due(args: list[str]) -> tuple[str, str | None]:
    """
    Pull a "due:YYYY-MM-DD" token out of the args.

    Returns (text, due) where due is None when no token was given and ""
    when the token was "due:-" (clear).
    """
    due: str | None = None
    words: list[str] = []
    for a in args:
        if a.lower().startswith("due:"):
            value = a[4:]
            due = "" if value == "-" else value
        else:
            words.append(a)
    return " ".join(words), due


def _require_id(state: AppState, args: list[str], usage: str) -> str:
    if not args:
        raise ValueError(f"usage: {usage}")
    todo_id = todo_api.resolve_todo_id(state.store, args[0])
    if todo_id is None:
        raise ValueError(f"no todo with id {args[0]!r}")
    return todo_id


def _describe(todo: Todo) -> str:
    return render_text([todo])


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    settings = state.settings
    pending = len(state.delete_flow.pending)
    return (
        "Status:\n"
        f"  Storage: {getattr(settings, 'storage_path', '?')} (key {state.store.key!r})\n"
        f"  Todos: {state.store.count()}\n"
        f"  Delete flow: {state.delete_flow.state} ({pending} pending)\n"
        f"  Renders: {state.renderer.render_count}"
    )


def cmd_list(state: AppState, args: list[str]) -> str:
    todos = todo_api.list_todos(state.store, args[0] if args else "all")
    return render_text(todos)


def cmd_add(state: AppState, args: list[str]) -> str:
    text, due = _split_due(args)
    todo = todo_api.add_todo(state.store, state.renderer, text, due or "")
    return f"Added:\n{_describe(todo)}"


def cmd_edit(state: AppState, args: list[str]) -> str:
    todo_id = _require_id(state, args, "/edit <id> [text] [due:YYYY-MM-DD|due:-]")
    text, due = _split_due(args[1:])
    updated = todo_api.edit_todo(
        state.store,
        state.renderer,
        todo_id,
        text=text or None,
        due_date=due,
    )
    if updated is None:
        return f"No todo with id {args[0]!r}."
    return f"Updated:\n{_describe(updated)}"


def cmd_done(state: AppState, args: list[str]) -> str:
    todo_id = _require_id(state, args, "/done <id>")
    updated = todo_api.toggle_todo(state.store, state.renderer, todo_id)
    if updated is None:
        return f"No todo with id {args[0]!r}."
    return f"{'Completed' if updated.completed else 'Reopened'}:\n{_describe(updated)}"


def cmd_delete(state: AppState, args: list[str]) -> str:
    todo_id = _require_id(state, args, "/delete <id>")
    request = state.delete_flow.delete_todo(todo_id)
    message = request.dialog.message if request.dialog is not None else ""
    return f"{message} (y/n)"


def _topmost_request(state: AppState) -> PendingDelete | None:
    overlay = topmost_dialog(state.document)
    if overlay is None:
        return None
    for request in state.delete_flow.pending:
        if request.dialog is not None and request.dialog.overlay is overlay:
            return request
    return None


def answer_confirmation(state: AppState, confirmed: bool) -> str:
    """Click Yes/No on the most recently opened overlay."""
    request = _topmost_request(state)
    if request is None:
        return "No confirmation is pending."

    if not confirmed:
        request.answer(False)
        return "Cancelled. Nothing was deleted."

    existed = todo_api.get_todo(state.store, request.todo_id) is not None
    request.answer(True)
    if existed:
        return "Deleted."
    return "Nothing to delete: that todo is already gone."


def cmd_yes(state: AppState, args: list[str]) -> str:
    return answer_confirmation(state, True)


def cmd_no(state: AppState, args: list[str]) -> str:
    return answer_confirmation(state, False)


def cmd_html(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    path = write_html_snapshot(state, args[0] if args else None)
    return f"Page written to {path}"


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show storage, counts and pending confirmations.")
registry.register("list", cmd_list, help_text="List todos: /list [all|active|done].", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a todo: /add <text> [due:YYYY-MM-DD].")
registry.register(
    "edit", cmd_edit, help_text="Edit a todo: /edit <id> [text] [due:YYYY-MM-DD|due:-]."
)
registry.register("done", cmd_done, help_text="Toggle completion: /done <id>.", aliases=["toggle"])
registry.register("delete", cmd_delete, help_text="Delete a todo (asks first): /delete <id>.", aliases=["rm"])
registry.register("yes", cmd_yes, help_text="Confirm the open question.", aliases=["y"])
registry.register("no", cmd_no, help_text="Decline the open question.", aliases=["n"])
registry.register("html", cmd_html, help_text="Write the page as HTML: /html [path].")
