"""Tests for cast options, casting and upcast descriptions."""

from __future__ import annotations

import pytest

from dnd_sheet.catalog.catalog import Catalog
from dnd_sheet.core.exceptions import ResourceExhaustedError
from dnd_sheet.engine.spells import (
    RITUAL_CAST,
    CastOption,
    CastPool,
    available_cast_levels,
    can_cast,
    cast_options,
    cast_spell,
    describe_upcast,
    refresh_ritual_flags,
)
from dnd_sheet.models.character import Character
from dnd_sheet.models.spellcasting import KnownSpell


class TestCastOptions:
    """Tests for choosing how to cast."""

    def test_cantrips_have_no_options(self, wizard: Character) -> None:
        assert cast_options(wizard.spellcasting, "Fire Bolt", 0) == []

    def test_slots_from_spell_level_up(self, wizard: Character) -> None:
        options = cast_options(wizard.spellcasting, "Scorching Ray", 2)
        assert [o.label for o in options] == ["Level 2 Slot", "Level 3 Slot"]

    def test_ritual_option_first(self, wizard: Character) -> None:
        options = cast_options(wizard.spellcasting, "Detect Magic", 1, ritual=True)
        assert options[0] == RITUAL_CAST
        assert options[0].label == "Ritual (no slot, +10 minutes)"
        assert len(options) == 4

    def test_no_ritual_option_for_non_ritual_casters(self, warlock: Character) -> None:
        options = cast_options(warlock.spellcasting, "Detect Magic", 1, ritual=True)
        assert RITUAL_CAST not in options

    def test_empty_slots_skipped(self, wizard: Character) -> None:
        wizard.spellcasting.slot(1).remaining = 0
        options = cast_options(wizard.spellcasting, "Magic Missile", 1)
        assert [o.level for o in options] == [2, 3]

    def test_pact_option(self, warlock: Character) -> None:
        options = cast_options(warlock.spellcasting, "Hex", 1)
        assert options == [CastOption(level=2, pool=CastPool.PACT)]
        assert options[0].label == "Pact Slot (Level 2)"

    def test_pact_and_regular_slot_at_same_level(self, warlock: Character) -> None:
        warlock.spellcasting.set_slots(2, 1)
        assert available_cast_levels(warlock.spellcasting, 1) == [2, 2]
        pools = [o.pool for o in cast_options(warlock.spellcasting, "Hex", 1)]
        assert pools == [CastPool.PACT, CastPool.SLOT]


class TestCastSpell:
    def test_cantrip(self, wizard: Character) -> None:
        outcome = cast_spell(wizard.spellcasting, "Fire Bolt", 0, None)
        assert outcome.message == "Cast Fire Bolt (no slot required)"

    def test_ritual_spends_nothing(self, wizard: Character) -> None:
        outcome = cast_spell(wizard.spellcasting, "Detect Magic", 1, RITUAL_CAST)
        assert outcome.message == "Cast Detect Magic as ritual (no slot required, takes 10 extra minutes)"
        assert wizard.spellcasting.slot(1).remaining == 4

    def test_regular_slot(self, wizard: Character) -> None:
        outcome = cast_spell(wizard.spellcasting, "Magic Missile", 1, CastOption(1, CastPool.SLOT))
        assert outcome.message == "Cast Magic Missile using level 1 slot"
        assert wizard.spellcasting.slot(1).remaining == 3

    def test_upcast(self, wizard: Character) -> None:
        outcome = cast_spell(wizard.spellcasting, "Magic Missile", 1, CastOption(3, CastPool.SLOT))
        assert outcome.message == "Cast Magic Missile (upcast to level 3) using level 3 slot"
        assert wizard.spellcasting.slot(3).remaining == 1

    def test_pact(self, warlock: Character) -> None:
        outcome = cast_spell(warlock.spellcasting, "Hex", 1, CastOption(2, CastPool.PACT))
        assert outcome.message == "Cast Hex (upcast to level 2) using pact magic"
        assert warlock.spellcasting.pact_magic.remaining == 1

    def test_pact_keeps_regular_slots(self, warlock: Character) -> None:
        warlock.spellcasting.set_slots(2, 1)
        cast_spell(warlock.spellcasting, "Misty Step", 2, CastOption(2, CastPool.PACT))
        assert warlock.spellcasting.slot(2).remaining == 1

    def test_exhausted_slot(self, wizard: Character) -> None:
        with pytest.raises(ResourceExhaustedError):
            cast_spell(wizard.spellcasting, "Magic Missile", 1, CastOption(4, CastPool.SLOT))

    def test_exhausted_pact(self, warlock: Character) -> None:
        warlock.spellcasting.pact_magic.remaining = 0
        with pytest.raises(ResourceExhaustedError):
            cast_spell(warlock.spellcasting, "Hex", 1, CastOption(2, CastPool.PACT))


class TestPreparation:
    def test_unprepared_spell(self, wizard: Character) -> None:
        assert not can_cast(wizard.spellcasting, wizard.spellcasting.find_spell("Scorching Ray"))

    def test_unprepared_ritual_for_spellbook_casters(self, wizard: Character) -> None:
        assert can_cast(wizard.spellcasting, wizard.spellcasting.find_spell("Detect Magic"))

    def test_known_casters_cast_anything(self, warlock: Character) -> None:
        assert can_cast(warlock.spellcasting, warlock.spellcasting.find_spell("Misty Step"))

    def test_refresh_ritual_flags(self, wizard: Character, catalog: Catalog) -> None:
        wizard.spellcasting.known_spells.append(KnownSpell(name="Find Familiar", level=1))
        assert refresh_ritual_flags(wizard.spellcasting, catalog.get_spell) == 1
        assert wizard.spellcasting.find_spell("Find Familiar").ritual is True


class TestDescribeUpcast:
    @pytest.mark.parametrize(
        ("name", "slot", "expected"),
        [
            ("Magic Missile", 1, "3 darts, 1d4+1 each"),
            ("Magic Missile", 3, "5 darts, 1d4+1 each"),
            ("Scorching Ray", 3, "4 rays, 2d6 each"),
            ("Fireball", 5, "10d6 damage"),
            ("Cure Wounds", 2, "4d8 healing"),
            ("Hex", 3, "1d6 damage"),
            ("Shield", 2, "upcast +1"),
            ("Shield", 1, ""),
        ],
    )
    def test_descriptions(self, catalog: Catalog, name: str, slot: int, expected: str) -> None:
        assert describe_upcast(catalog.find_spell(name), slot) == expected
