"""Events flowing into screen controllers and results flowing out.

Controllers never block on I/O. Slow work (listing or loading records,
loading the spell catalog) is described as a :class:`Task`, executed by
the adapter, and delivered back as a :class:`TaskResult`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from dnd_sheet.models.character import Character


class Navigation(StrEnum):
    """Signals asking the router to change screens."""

    BACK_TO_SELECTION = "back_to_selection"
    BACK_TO_SHEET = "back_to_sheet"
    OPEN_SHEET = "open_sheet"
    OPEN_INVENTORY = "open_inventory"
    OPEN_SPELLBOOK = "open_spellbook"
    OPEN_CHARACTER_INFO = "open_character_info"
    START_CREATION = "start_creation"
    QUIT = "quit"


class TaskKind(StrEnum):
    LIST_CHARACTERS = "list_characters"
    LOAD_CHARACTER = "load_character"
    DELETE_CHARACTER = "delete_character"
    LOAD_SPELLS = "load_spells"


# (screen name, activation serial, mode) of the controller that issued a task
Token = tuple[str, int, str]


@dataclass(frozen=True)
class KeyEvent:
    """A key press.

    Attributes:
        key: Normalised key name, e.g. 'up', 'enter', 'ctrl+c', or the
            printable character itself ('+', 'q').
        character: The printable character, if any.
    """

    key: str
    character: str | None = None

    @property
    def printable(self) -> str | None:
        """The typed character, or None for control keys."""
        char = self.character if self.character is not None else self.key
        if len(char) == 1 and char.isprintable():
            return char
        return None


@dataclass(frozen=True)
class ResizeEvent:
    width: int
    height: int


@dataclass(frozen=True)
class Task:
    """Deferred work requested by a controller."""

    kind: TaskKind
    token: Token
    payload: Any = None


@dataclass(frozen=True)
class TaskResult:
    """Outcome of a deferred task.

    Attributes:
        token: Token of the issuing controller.
        kind: Which task ran.
        payload: Task output on success.
        error: One-line error message on failure.
    """

    token: Token
    kind: TaskKind
    payload: Any = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


Event = KeyEvent | ResizeEvent | TaskResult


@dataclass
class ScreenResult:
    """What a controller asks of the router after handling an event.

    Attributes:
        navigation: Screen change to apply, if any.
        tasks: Deferred tasks to run.
        record: Record handed to the next screen (OPEN_SHEET).
    """

    navigation: Navigation | None = None
    tasks: list[Task] = field(default_factory=list)
    record: Character | None = None

    @property
    def quit(self) -> bool:
        return self.navigation == Navigation.QUIT


__all__ = [
    "Navigation",
    "TaskKind",
    "Token",
    "KeyEvent",
    "ResizeEvent",
    "Task",
    "TaskResult",
    "Event",
    "ScreenResult",
]
