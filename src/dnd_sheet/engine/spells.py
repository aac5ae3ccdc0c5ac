"""Spell slot selection, casting and upcast descriptions.

Casting picks one option from :func:`cast_options`. Each option names
the exact pool it draws from (ritual, pact or a regular slot), so a
warlock with both pact and regular slots at the same level spends the
one they chose.

Upcast effects come from free-text rules descriptions. They are derived
by :data:`UPCAST_RULES`, an ordered keyword table whose output is display
text only.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from dnd_sheet.core.constants import MAX_SPELL_LEVEL, RITUAL_OPTION
from dnd_sheet.core.exceptions import ResourceExhaustedError
from dnd_sheet.core.logging import get_logger
from dnd_sheet.engine.dice import find_dice


if TYPE_CHECKING:
    from dnd_sheet.catalog.entries import SpellEntry
    from dnd_sheet.models.spellcasting import KnownSpell, Spellcasting

logger = get_logger(__name__)


# =============================================================================
# Cast options
# =============================================================================


class CastPool(StrEnum):
    """Where the energy for a cast comes from."""

    CANTRIP = "cantrip"
    """No slot; cantrips are free."""

    RITUAL = "ritual"
    """No slot; takes ten extra minutes."""

    PACT = "pact"
    """A warlock pact slot."""

    SLOT = "slot"
    """A regular spell slot."""


@dataclass(frozen=True)
class CastOption:
    """One selectable way to cast a spell."""

    level: int
    pool: CastPool

    @property
    def label(self) -> str:
        if self.pool == CastPool.RITUAL:
            return "Ritual (no slot, +10 minutes)"
        if self.pool == CastPool.PACT:
            return f"Pact Slot (Level {self.level})"
        return f"Level {self.level} Slot"


@dataclass(frozen=True)
class CastOutcome:
    """Result of a successful cast."""

    message: str
    pool: CastPool
    level: int


RITUAL_CAST = CastOption(level=RITUAL_OPTION, pool=CastPool.RITUAL)


def available_cast_levels(spellcasting: Spellcasting, spell_level: int) -> list[int]:
    """Slot levels a spell of spell_level can be cast at.

    The pact level comes first when it is high enough and has a slot left,
    followed by every regular level from spell_level to 9 with slots left.
    A level may appear twice when both pools have it.
    """
    levels: list[int] = []
    pact = spellcasting.pact_magic
    if pact is not None and pact.total > 0 and pact.remaining > 0 and pact.slot_level >= spell_level:
        levels.append(pact.slot_level)

    for level in range(max(spell_level, 1), MAX_SPELL_LEVEL + 1):
        tracker = spellcasting.slot(level)
        if tracker is not None and tracker.remaining > 0:
            levels.append(level)
    return levels


def _slot_options(spellcasting: Spellcasting, spell_level: int) -> list[CastOption]:
    options: list[CastOption] = []
    pact = spellcasting.pact_magic
    if pact is not None and pact.total > 0 and pact.remaining > 0 and pact.slot_level >= spell_level:
        options.append(CastOption(level=pact.slot_level, pool=CastPool.PACT))
    for level in range(max(spell_level, 1), MAX_SPELL_LEVEL + 1):
        tracker = spellcasting.slot(level)
        if tracker is not None and tracker.remaining > 0:
            options.append(CastOption(level=level, pool=CastPool.SLOT))
    return options


def is_ritual_eligible(spellcasting: Spellcasting, ritual: bool) -> bool:
    return ritual and (spellcasting.ritual_caster or spellcasting.ritual_caster_unprepared)


def cast_options(spellcasting: Spellcasting, name: str, level: int, *, ritual: bool = False) -> list[CastOption]:
    """All ways a spell can be cast right now.

    Cantrips have no options. Ritual-eligible spells get the ritual option
    first, then any slots. An empty list for a levelled spell means it
    cannot be cast.
    """
    if level == 0:
        return []
    options = _slot_options(spellcasting, level)
    if is_ritual_eligible(spellcasting, ritual):
        options.insert(0, RITUAL_CAST)
    return options


def can_cast(spellcasting: Spellcasting, spell: KnownSpell) -> bool:
    """Whether a known spell may be cast from the list without preparing."""
    if not spellcasting.prepares_spells:
        return True
    if spell.prepared or spell.always_prepared:
        return True
    return spell.ritual and spellcasting.ritual_caster_unprepared


def cast_spell(
    spellcasting: Spellcasting,
    name: str,
    level: int,
    option: CastOption | None,
) -> CastOutcome:
    """Cast a spell, spending the pool the option names.

    Args:
        spellcasting: The caster's spellcasting state, mutated in place.
        name: Spell name, used in the message.
        level: Spell's base level.
        option: The chosen option; None for cantrips.

    Returns:
        The outcome with its status message.

    Raises:
        ResourceExhaustedError: If the chosen pool has nothing left.
    """
    if level == 0 or option is None:
        return CastOutcome(f"Cast {name} (no slot required)", CastPool.CANTRIP, 0)

    if option.pool == CastPool.RITUAL:
        return CastOutcome(
            f"Cast {name} as ritual (no slot required, takes 10 extra minutes)",
            CastPool.RITUAL,
            level,
        )

    upcast = f" (upcast to level {option.level})" if option.level > level else ""

    if option.pool == CastPool.PACT:
        pact = spellcasting.pact_magic
        if pact is None or pact.slot_level != option.level or not pact.use():
            raise ResourceExhaustedError("No pact slots remaining", resource="pact_magic")
        logger.info("Spell cast", spell=name, pool="pact", level=option.level)
        return CastOutcome(f"Cast {name}{upcast} using pact magic", CastPool.PACT, option.level)

    if not spellcasting.use_slot(option.level):
        raise ResourceExhaustedError(
            f"No level {option.level} slots remaining",
            resource=f"slot_{option.level}",
        )
    logger.info("Spell cast", spell=name, pool="slot", level=option.level)
    return CastOutcome(
        f"Cast {name}{upcast} using level {option.level} slot",
        CastPool.SLOT,
        option.level,
    )


def refresh_ritual_flags(
    spellcasting: Spellcasting,
    lookup: Callable[[str], SpellEntry | None],
) -> int:
    """Copy the ritual flag from catalog data onto known spells.

    Records saved before the flag existed carry ritual=False everywhere.

    Returns:
        Number of spells whose flag changed.
    """
    changed = 0
    for known in spellcasting.known_spells:
        entry = lookup(known.name)
        if entry is not None and entry.ritual != known.ritual:
            known.ritual = entry.ritual
            changed += 1
    return changed


# =============================================================================
# Upcast descriptions
# =============================================================================


@dataclass(frozen=True)
class UpcastRule:
    """One row of the upcast table.

    Attributes:
        name: Rule name, for debugging.
        applies: Predicate over the spell entry.
        describe: Formatter given the spell and the levels above base.
            Returns None to fall through to the next rule.
    """

    name: str
    applies: Callable[[SpellEntry], bool]
    describe: Callable[[SpellEntry, int], str | None]


def _count_bonus(upcast: str) -> int:
    match = re.match(r"\s*\+(\d+)", upcast)
    return int(match.group(1)) if match else 1


def _darts(spell: SpellEntry, levels_above: int) -> str:
    total = 3 + levels_above
    return f"{total} darts, {spell.damage} each" if spell.damage else f"{total} darts"


def _rays(spell: SpellEntry, levels_above: int) -> str:
    total = 3 + _count_bonus(spell.upcast) * levels_above
    return f"{total} rays, {spell.damage} each" if spell.damage else f"{total} rays"


def _dice(spell: SpellEntry, levels_above: int) -> str | None:
    per_level = find_dice(spell.upcast)
    if per_level is None:
        return None
    count, sides = per_level
    noun = "healing" if "heal" in spell.upcast.lower() else "damage"

    if spell.damage:
        base = find_dice(spell.damage)
        if base is not None:
            return f"{base[0] + count * levels_above}d{sides} {noun}"
        if levels_above > 0:
            return f"{spell.damage} + {count * levels_above}d{sides} {noun}"
        return f"{spell.damage} {noun}"
    if levels_above > 0:
        return f"+{count * levels_above}d{sides} {noun}"
    return None


def _healing(spell: SpellEntry, levels_above: int) -> str | None:
    return f"{spell.damage} healing" if spell.damage else None


def _base_damage(spell: SpellEntry, levels_above: int) -> str | None:
    return f"{spell.damage} damage" if spell.damage else None


def _generic(spell: SpellEntry, levels_above: int) -> str | None:
    return f"upcast +{levels_above}" if levels_above > 0 else None


UPCAST_RULES: list[UpcastRule] = [
    UpcastRule("darts", lambda s: "dart" in s.upcast.lower(), _darts),
    UpcastRule(
        "rays",
        lambda s: "ray" in s.upcast.lower() or "beam" in s.upcast.lower(),
        _rays,
    ),
    UpcastRule("dice", lambda s: find_dice(s.upcast) is not None, _dice),
    UpcastRule("healing", lambda s: "heal" in s.upcast.lower(), _healing),
    UpcastRule("damage", lambda s: bool(s.damage), _base_damage),
    UpcastRule("generic", lambda s: True, _generic),
]


def describe_upcast(spell: SpellEntry, slot_level: int, base_level: int | None = None) -> str:
    """Best-effort description of a spell's effect at a slot level.

    Args:
        spell: Catalog entry for the spell.
        slot_level: Level of the slot being spent.
        base_level: Spell's own level; defaults to the entry's.

    Returns:
        Display text such as '5 darts, 1d4+1 each', or '' when nothing
        useful can be said.
    """
    levels_above = max(0, slot_level - (spell.level if base_level is None else base_level))
    for rule in UPCAST_RULES:
        if not rule.applies(spell):
            continue
        text = rule.describe(spell, levels_above)
        if text is not None:
            return text
    return ""


__all__ = [
    "CastPool",
    "CastOption",
    "CastOutcome",
    "RITUAL_CAST",
    "available_cast_levels",
    "is_ritual_eligible",
    "cast_options",
    "can_cast",
    "cast_spell",
    "refresh_ritual_flags",
    "UpcastRule",
    "UPCAST_RULES",
    "describe_upcast",
]
