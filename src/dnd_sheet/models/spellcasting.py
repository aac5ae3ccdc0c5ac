"""Spell slots, pact magic and the list of known spells."""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator, model_validator

from dnd_sheet.core.constants import MAX_SPELL_LEVEL
from dnd_sheet.models.base import SheetModel
from dnd_sheet.models.enums import Ability


class SlotTracker(SheetModel):
    """Total and remaining slots for one spell level."""

    total: int = Field(default=0, ge=0)
    remaining: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def clamp_remaining(self) -> "SlotTracker":
        if self.remaining > self.total:
            self.remaining = self.total
        return self

    def use(self) -> bool:
        if self.remaining > 0:
            self.remaining -= 1
            return True
        return False

    def restore(self) -> None:
        self.remaining = self.total


class PactMagic(SheetModel):
    """Warlock pact slots. Every pact slot is cast at slot_level."""

    slot_level: int = Field(default=1, ge=1, le=5)
    total: int = Field(default=0, ge=0)
    remaining: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def clamp_remaining(self) -> "PactMagic":
        if self.remaining > self.total:
            self.remaining = self.total
        return self

    def use(self) -> bool:
        if self.remaining > 0:
            self.remaining -= 1
            return True
        return False

    def restore(self) -> None:
        self.remaining = self.total


class KnownSpell(SheetModel):
    """A levelled spell in the character's list. Cantrips live separately."""

    name: str = Field(min_length=1)
    level: int = Field(default=1, ge=1, le=MAX_SPELL_LEVEL)
    prepared: bool = False
    ritual: bool = False
    always_prepared: bool = Field(default=False, description="Granted by a class feature")


class Spellcasting(SheetModel):
    """Spellcasting state for a caster.

    Attributes:
        ability: Spellcasting ability.
        slots: Regular slots keyed by level 1-9.
        pact_magic: Pact pool for warlocks, None otherwise.
        cantrips_known: Cantrip names.
        known_spells: Levelled spells known or in the spellbook.
        prepares_spells: Whether the class prepares from its list daily.
        max_prepared: Preparation limit; 0 means no limit is tracked.
        ritual_caster: Can cast ritual spells as rituals.
        ritual_caster_unprepared: Ritual spells need not be prepared
            (wizard-style spellbook rituals).
    """

    ability: Ability = Ability.INT
    slots: dict[int, SlotTracker] = Field(default_factory=dict)
    pact_magic: PactMagic | None = None
    cantrips_known: list[str] = Field(default_factory=list)
    known_spells: list[KnownSpell] = Field(default_factory=list)
    prepares_spells: bool = False
    max_prepared: int = Field(default=0, ge=0)
    ritual_caster: bool = False
    ritual_caster_unprepared: bool = False

    @field_validator("slots", mode="before")
    @classmethod
    def fill_slot_levels(cls, v: Any) -> dict[int, Any]:
        """Ensure every level 1-9 has a tracker."""
        slots = dict(v or {})
        filled: dict[int, Any] = {}
        for level in range(1, MAX_SPELL_LEVEL + 1):
            filled[level] = slots.get(level, slots.get(str(level), {"total": 0, "remaining": 0}))
        return filled

    # -------------------------------------------------------------------------
    # Slots
    # -------------------------------------------------------------------------

    def slot(self, level: int) -> SlotTracker | None:
        return self.slots.get(level)

    def set_slots(self, level: int, total: int) -> None:
        """Set the total for a level and refill it."""
        self.slots[level] = SlotTracker(total=total, remaining=total)

    def use_slot(self, level: int) -> bool:
        """Spend a regular slot.

        Returns:
            True if a slot of that level was available.
        """
        tracker = self.slot(level)
        return tracker is not None and tracker.use()

    def use_pact_slot(self) -> bool:
        return self.pact_magic is not None and self.pact_magic.use()

    def restore_pact(self) -> None:
        if self.pact_magic is not None:
            self.pact_magic.restore()

    def restore_all(self) -> None:
        """Refill every regular slot and the pact pool."""
        for tracker in self.slots.values():
            tracker.restore()
        self.restore_pact()

    # -------------------------------------------------------------------------
    # Spell list
    # -------------------------------------------------------------------------

    def find_spell(self, name: str) -> KnownSpell | None:
        for spell in self.known_spells:
            if spell.name.lower() == name.lower():
                return spell
        return None

    def knows(self, name: str) -> bool:
        lowered = name.lower()
        return self.find_spell(name) is not None or any(
            c.lower() == lowered for c in self.cantrips_known
        )

    def add_cantrip(self, name: str) -> bool:
        """Learn a cantrip.

        Returns:
            False if it was already known.
        """
        if self.knows(name):
            return False
        self.cantrips_known.append(name)
        return True

    def add_spell(self, name: str, level: int, *, ritual: bool = False) -> bool:
        """Learn a levelled spell.

        Returns:
            False if it was already known.
        """
        if self.knows(name):
            return False
        self.known_spells.append(KnownSpell(name=name, level=level, ritual=ritual))
        return True

    def remove_spell(self, name: str) -> bool:
        """Forget a spell or cantrip.

        Returns:
            True if something was removed.
        """
        lowered = name.lower()
        for index, spell in enumerate(self.known_spells):
            if spell.name.lower() == lowered:
                del self.known_spells[index]
                return True
        for index, cantrip in enumerate(self.cantrips_known):
            if cantrip.lower() == lowered:
                del self.cantrips_known[index]
                return True
        return False

    def prepare(self, name: str, prepared: bool = True) -> bool:
        """Set the prepared flag on a known spell.

        Returns:
            False if the spell is not known.
        """
        spell = self.find_spell(name)
        if spell is None:
            return False
        spell.prepared = prepared
        return True

    def count_prepared(self) -> int:
        """Prepared spells counting toward the limit; always-prepared ones are free."""
        return sum(1 for s in self.known_spells if s.prepared and not s.always_prepared)


__all__ = [
    "SlotTracker",
    "PactMagic",
    "KnownSpell",
    "Spellcasting",
]
