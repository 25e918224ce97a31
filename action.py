from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from textual import events


class ActionKind(Enum):
    DELETE = "delete"
    ESCAPE = "escape"
    INSERT = "insert"


@dataclass(frozen=True)
class Action:
    """A session command derived from a single key press."""

    kind: ActionKind
    char: str = ""

    @classmethod
    def delete(cls) -> Action:
        return cls(ActionKind.DELETE)

    @classmethod
    def escape(cls) -> Action:
        return cls(ActionKind.ESCAPE)

    @classmethod
    def insert(cls, char: str) -> Action:
        return cls(ActionKind.INSERT, char)

    @classmethod
    def from_event(cls, event: events.Event) -> Action | None:
        """Classify an input event, returning None for anything the session ignores."""
        if not isinstance(event, events.Key):
            return None
        if event.key == "backspace":
            return cls.delete()
        if event.key == "escape":
            return cls.escape()
        if event.is_printable and event.character:
            return cls.insert(event.character)
        return None
