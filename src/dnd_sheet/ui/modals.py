"""Modal interaction states.

A screen has at most one active modal. While it is active every key goes
to it. Modals hold input state only; controllers decide what a committed
value does to the record, so cancelling a modal never touches the record.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from dnd_sheet.core.constants import SEARCH_MIN_CHARS
from dnd_sheet.ui import keys
from dnd_sheet.ui.focus import clamp_cursor


if TYPE_CHECKING:
    from dnd_sheet.catalog.entries import SpellEntry
    from dnd_sheet.engine.spells import CastOption


# =============================================================================
# Numeric entry
# =============================================================================


class StepKind(StrEnum):
    EDITING = "editing"
    COMMIT = "commit"
    NO_CHANGE = "no_change"
    CANCEL = "cancel"
    INVALID = "invalid"
    ADJUST = "adjust"


@dataclass(frozen=True)
class ModalStep:
    """Result of feeding one key to a modal.

    value is the parsed number for COMMIT and the delta (+1/-1) for ADJUST.
    """

    kind: StepKind
    value: int = 0


class NumericPurpose(StrEnum):
    DAMAGE = "damage"
    HEAL = "heal"
    TEMP_HP = "temp_hp"
    QUANTITY = "quantity"
    CURRENCY_ADD = "currency_add"
    CURRENCY_SPEND = "currency_spend"


@dataclass
class NumericEntry:
    """A number typed into a buffer.

    Attributes:
        purpose: What the committed value is for.
        buffer: Characters typed so far.
        allow_arrows: Whether up/down produce ADJUST steps.
        target: Purpose-specific target, e.g. an item id or denomination.
        title: Prompt shown above the buffer.
    """

    purpose: NumericPurpose
    buffer: str = ""
    allow_arrows: bool = False
    target: Any = None
    title: str = ""

    def feed(self, key: str) -> ModalStep:
        if key == keys.ESCAPE:
            return ModalStep(StepKind.CANCEL)
        if key == keys.ENTER:
            text = self.buffer.strip()
            if not text:
                return ModalStep(StepKind.NO_CHANGE)
            if not text.isdigit():
                return ModalStep(StepKind.INVALID)
            return ModalStep(StepKind.COMMIT, int(text))
        if key == keys.BACKSPACE:
            self.buffer = self.buffer[:-1]
            return ModalStep(StepKind.EDITING)
        if self.allow_arrows and key == "up":
            return ModalStep(StepKind.ADJUST, 1)
        if self.allow_arrows and key == "down":
            return ModalStep(StepKind.ADJUST, -1)
        if len(key) == 1 and key.isdigit():
            self.buffer += key
        return ModalStep(StepKind.EDITING)


# =============================================================================
# Confirmation
# =============================================================================


@dataclass
class Confirmation:
    """A yes/no question.

    Attributes:
        prompt: Question shown to the user.
        action: Controller-defined action name run on yes.
        payload: Data the action needs, e.g. an item id.
        affirmative: Keys that answer yes.
        negative: Keys that answer no. When empty, any other key is no;
            otherwise unlisted keys are ignored.
        parent: Modal restored when the confirmation closes.
    """

    prompt: str
    action: str
    payload: Any = None
    affirmative: tuple[str, ...] = keys.YES
    negative: tuple[str, ...] = ()
    parent: Modal | None = None

    def answer(self, key: str) -> bool | None:
        """True for yes, False for no, None to keep waiting."""
        if key in self.affirmative:
            return True
        if not self.negative or key in self.negative:
            return False
        return None


# =============================================================================
# Lists & search
# =============================================================================


@dataclass
class ListPicker:
    """Pick one option from a short list. The cursor never wraps."""

    title: str
    options: list[str]
    values: list[Any] = field(default_factory=list)
    cursor: int = 0
    purpose: str = ""

    def move(self, delta: int) -> None:
        self.cursor = clamp_cursor(self.cursor + delta, len(self.options))

    @property
    def selected(self) -> Any:
        """The value under the cursor (the option text if no values)."""
        if not self.options:
            return None
        source = self.values or self.options
        return source[self.cursor]


@dataclass
class Search:
    """Incremental catalog search.

    The controller reruns its catalog query after every change and stores
    the hits in results.
    """

    purpose: str
    query: str = ""
    results: list[Any] = field(default_factory=list)
    cursor: int = 0
    min_chars: int = SEARCH_MIN_CHARS

    @property
    def ready(self) -> bool:
        return len(self.query.strip()) >= self.min_chars

    def type_char(self, char: str) -> None:
        self.query += char
        self.cursor = 0

    def backspace(self) -> None:
        self.query = self.query[:-1]
        self.cursor = 0

    def set_results(self, results: list[Any]) -> None:
        self.results = results if self.ready else []
        self.cursor = clamp_cursor(self.cursor, len(self.results))

    def move(self, delta: int) -> None:
        self.cursor = clamp_cursor(self.cursor + delta, len(self.results))

    @property
    def selected(self) -> Any:
        if not self.results:
            return None
        return self.results[self.cursor]


# =============================================================================
# Casting
# =============================================================================


@dataclass
class CastResolution:
    """Choosing how to cast a spell.

    options is empty for cantrips, which need no choice.
    """

    name: str
    level: int
    options: list[CastOption] = field(default_factory=list)
    spell: SpellEntry | None = None
    cursor: int = 0

    def move(self, delta: int) -> None:
        if len(self.options) > 1:
            self.cursor = clamp_cursor(self.cursor + delta, len(self.options))

    @property
    def selected_option(self) -> CastOption | None:
        if not self.options:
            return None
        return self.options[self.cursor]


# =============================================================================
# Rest flow
# =============================================================================


class RestPhase(StrEnum):
    MENU = "menu"
    SHORT = "short"
    LONG = "long"
    RESULT = "result"


@dataclass
class RestFlow:
    """The rest menu, dice picker, long rest confirmation and summary."""

    phase: RestPhase = RestPhase.MENU
    dice_to_spend: int = 0
    max_dice: int = 0
    summary: list[str] = field(default_factory=list)

    def adjust(self, delta: int) -> None:
        self.dice_to_spend = max(0, min(self.max_dice, self.dice_to_spend + delta))


# =============================================================================
# Text entry
# =============================================================================


@dataclass
class TextEntry:
    """Free text for a personality entry.

    Attributes:
        section: Personality section being edited.
        index: Entry index, or None when adding.
        buffer: Text typed so far.
        multiline: Enter inserts a newline and ctrl+s commits.
    """

    section: str
    index: int | None = None
    buffer: str = ""
    multiline: bool = False

    @property
    def adding(self) -> bool:
        return self.index is None

    def feed(self, key: str) -> ModalStep:
        if key == keys.ESCAPE:
            return ModalStep(StepKind.CANCEL)
        if key == keys.ENTER:
            if self.multiline:
                self.buffer += "\n"
                return ModalStep(StepKind.EDITING)
            return ModalStep(StepKind.COMMIT)
        if key == keys.SAVE and self.multiline:
            return ModalStep(StepKind.COMMIT)
        if key == keys.BACKSPACE:
            self.buffer = self.buffer[:-1]
        elif len(key) == 1 and key.isprintable():
            self.buffer += key
        return ModalStep(StepKind.EDITING)


Modal = NumericEntry | Confirmation | ListPicker | Search | CastResolution | RestFlow | TextEntry


__all__ = [
    "StepKind",
    "ModalStep",
    "NumericPurpose",
    "NumericEntry",
    "Confirmation",
    "ListPicker",
    "Search",
    "CastResolution",
    "RestPhase",
    "RestFlow",
    "TextEntry",
    "Modal",
]
