# todos/todo_models.py

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from enum import StrEnum
from typing import Any

_KNOWN_KEYS = ("id", "text", "dueDate", "completed", "createdAt")


class TodoFilter(StrEnum):
    ALL = "all"
    ACTIVE = "active"
    DONE = "done"

    @classmethod
    def parse(cls, raw: str | None) -> TodoFilter:
        if not raw:
            return cls.ALL
        try:
            return cls(raw.strip().lower())
        except ValueError:
            raise ValueError(f"unknown filter: {raw!r} (use all, active or done)") from None


def new_todo_id() -> str:
    return uuid.uuid4().hex


def now_iso() -> str:
    """UTC timestamp in the same shape as JavaScript's Date.toISOString()."""
    ts = datetime.now(UTC).isoformat(timespec="milliseconds")
    return ts.replace("+00:00", "Z")


def normalize_due_date(raw: str | None) -> str:
    """
    Accept "" / None (no due date) or an ISO calendar date.

    Returns the canonical "YYYY-MM-DD" string. Raises ValueError otherwise.
    """
    if raw is None:
        return ""
    raw = raw.strip()
    if not raw:
        return ""
    try:
        return date.fromisoformat(raw).isoformat()
    except ValueError:
        raise ValueError(f"due date must be YYYY-MM-DD, got {raw!r}") from None


@dataclass(slots=True, frozen=True)
class Todo:
    id: str
    text: str
    due_date: str = ""
    completed: bool = False
    created_at: str = ""

    # Keys we do not model are carried through untouched.
    extra: dict[str, Any] = field(default_factory=dict, compare=False)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = dict(self.extra)
        out.update(
            {
                "id": self.id,
                "text": self.text,
                "dueDate": self.due_date,
                "completed": self.completed,
                "createdAt": self.created_at,
            }
        )
        return out

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Todo:
        """
        Build a record from its stored form.

        `id` and `text` are mandatory; absent optional keys fall back to the
        defaults a freshly added record would have. Values of the wrong type
        raise TypeError instead of being coerced, so a save never rewrites
        them into something else.
        """
        if "id" not in raw or "text" not in raw:
            raise KeyError("todo record needs 'id' and 'text'")

        expected = {"id": str, "text": str, "dueDate": str, "completed": bool, "createdAt": str}
        for key, typ in expected.items():
            if key in raw and not isinstance(raw[key], typ):
                raise TypeError(
                    f"{key!r} must be {typ.__name__}, got {type(raw[key]).__name__}"
                )

        return cls(
            id=raw["id"],
            text=raw["text"],
            due_date=raw.get("dueDate", ""),
            completed=raw.get("completed", False),
            created_at=raw.get("createdAt", ""),
            extra={k: v for k, v in raw.items() if k not in _KNOWN_KEYS},
        )

    @property
    def short_id(self) -> str:
        return self.id[:8]
