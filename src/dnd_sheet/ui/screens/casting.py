"""Spell casting flow shared by the main sheet and the spellbook.

Choosing a regular slot above the spell's level asks for confirmation on
top of the cast modal; answering no returns to the slot choice.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dnd_sheet.core.exceptions import ResourceExhaustedError
from dnd_sheet.core.logging import get_logger
from dnd_sheet.engine.spells import CastPool, cast_options, cast_spell
from dnd_sheet.ui import keys
from dnd_sheet.ui.modals import CastResolution, Confirmation


if TYPE_CHECKING:
    from dnd_sheet.catalog.entries import SpellEntry
    from dnd_sheet.models.character import Character
    from dnd_sheet.ui.base import ScreenController

logger = get_logger(__name__)

UPCAST_ACTION = "confirm_upcast"


def begin_cast(character: Character, name: str, level: int, entry: SpellEntry | None) -> CastResolution | str:
    """Open a cast for a spell, or explain why it cannot be cast.

    Returns:
        The modal to show, or a status message.
    """
    spellcasting = character.spellcasting
    if spellcasting is None:
        return "This character cannot cast spells"

    known = spellcasting.find_spell(name)
    ritual = known.ritual if known is not None else bool(entry and entry.ritual)
    options = cast_options(spellcasting, name, level, ritual=ritual)
    if level > 0 and not options:
        return f"No spell slots available for {name}"
    return CastResolution(name=name, level=level, options=options, spell=entry)


def finish_cast(character: Character, modal: CastResolution) -> tuple[str, bool]:
    """Cast with the option under the modal's cursor.

    Returns:
        (status message, whether the record changed)
    """
    spellcasting = character.spellcasting
    if spellcasting is None:
        return "This character cannot cast spells", False
    try:
        outcome = cast_spell(spellcasting, modal.name, modal.level, modal.selected_option)
    except ResourceExhaustedError as e:
        logger.info("Cast failed", spell=modal.name, reason=e.message)
        return e.message, False
    return outcome.message, outcome.pool in ("pact", "slot")


def upcast_confirmation(modal: CastResolution) -> Confirmation | None:
    """The question to ask before spending a higher regular slot, if any."""
    option = modal.selected_option
    if option is None or option.pool != CastPool.SLOT or option.level <= modal.level:
        return None
    return Confirmation(
        f"Cast {modal.name} with a level {option.level} slot? (y/n)",
        action=UPCAST_ACTION,
        affirmative=keys.YES_OR_ENTER,
        negative=("n", "N", keys.ESCAPE),
        parent=modal,
    )


def cast_key(screen: ScreenController, modal: CastResolution, key: str) -> None:
    """Handle a key while the cast modal is open."""
    if key == keys.ESCAPE:
        screen.close_modal()
        screen.status = "Casting cancelled"
    elif key in keys.UP:
        modal.move(-1)
    elif key in keys.DOWN:
        modal.move(1)
    elif key == keys.ENTER:
        confirmation = upcast_confirmation(modal)
        if confirmation is not None:
            screen.open_modal(confirmation, status=confirmation.prompt)
            return
        screen.close_modal()
        _complete(screen, modal)


def upcast_key(screen: ScreenController, confirmation: Confirmation, key: str) -> None:
    """Handle a key while an upcast confirmation sits over the cast modal."""
    answer = confirmation.answer(key)
    if answer is None:
        return
    screen.close_modal()
    screen.status = ""
    if answer:
        screen.close_modal()
        _complete(screen, confirmation.parent)


def _complete(screen: ScreenController, modal: CastResolution) -> None:
    assert screen.record is not None
    screen.status, changed = finish_cast(screen.record, modal)
    if changed:
        screen._persist()


__all__ = [
    "UPCAST_ACTION",
    "begin_cast",
    "cast_key",
    "finish_cast",
    "upcast_confirmation",
    "upcast_key",
]
