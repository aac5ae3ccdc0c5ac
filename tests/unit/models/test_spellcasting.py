"""Tests for spell slots and the known-spell list."""

from __future__ import annotations

from dnd_sheet.models.spellcasting import KnownSpell, PactMagic, SlotTracker, Spellcasting


class TestSlots:
    """Tests for regular and pact slot tracking."""

    def test_every_level_has_a_tracker(self) -> None:
        casting = Spellcasting(slots={1: SlotTracker(total=2, remaining=2)})
        assert sorted(casting.slots) == list(range(1, 10))
        assert casting.slot(9).total == 0

    def test_string_keys_from_json(self) -> None:
        casting = Spellcasting.model_validate({"slots": {"3": {"total": 2, "remaining": 1}}})
        assert casting.slot(3).remaining == 1

    def test_remaining_clamped(self) -> None:
        assert SlotTracker(total=2, remaining=5).remaining == 2

    def test_use_slot(self) -> None:
        casting = Spellcasting(slots={1: SlotTracker(total=1, remaining=1)})
        assert casting.use_slot(1) is True
        assert casting.use_slot(1) is False
        assert casting.use_slot(2) is False

    def test_pact_slot(self) -> None:
        casting = Spellcasting(pact_magic=PactMagic(slot_level=3, total=2, remaining=1))
        assert casting.use_pact_slot() is True
        assert casting.use_pact_slot() is False

    def test_pact_slot_without_pact_magic(self) -> None:
        assert Spellcasting().use_pact_slot() is False

    def test_restore_all(self) -> None:
        casting = Spellcasting(
            slots={2: SlotTracker(total=3, remaining=0)},
            pact_magic=PactMagic(slot_level=1, total=1, remaining=0),
        )
        casting.restore_all()
        assert casting.slot(2).remaining == 3
        assert casting.pact_magic.remaining == 1

    def test_set_slots_refills(self) -> None:
        casting = Spellcasting()
        casting.set_slots(4, 2)
        assert (casting.slot(4).total, casting.slot(4).remaining) == (2, 2)


class TestSpellList:
    def test_add_cantrip_once(self) -> None:
        casting = Spellcasting()
        assert casting.add_cantrip("Light") is True
        assert casting.add_cantrip("light") is False
        assert casting.cantrips_known == ["Light"]

    def test_add_spell_once(self) -> None:
        casting = Spellcasting()
        assert casting.add_spell("Sleep", 1) is True
        assert casting.add_spell("Sleep", 1) is False
        assert casting.find_spell("SLEEP").level == 1

    def test_spell_and_cantrip_share_names(self) -> None:
        casting = Spellcasting(cantrips_known=["Shield"])
        assert casting.add_spell("Shield", 1) is False

    def test_remove(self) -> None:
        casting = Spellcasting(cantrips_known=["Light"], known_spells=[KnownSpell(name="Sleep")])
        assert casting.remove_spell("Sleep") is True
        assert casting.remove_spell("Light") is True
        assert casting.remove_spell("Light") is False
        assert not casting.knows("Sleep")

    def test_prepare(self) -> None:
        casting = Spellcasting(known_spells=[KnownSpell(name="Sleep")])
        assert casting.prepare("Sleep") is True
        assert casting.find_spell("Sleep").prepared
        assert casting.prepare("Sleep", False) is True
        assert not casting.find_spell("Sleep").prepared
        assert casting.prepare("Fly") is False

    def test_always_prepared_spells_are_free(self) -> None:
        casting = Spellcasting(
            known_spells=[
                KnownSpell(name="Bless", prepared=True),
                KnownSpell(name="Cure Wounds", prepared=True, always_prepared=True),
                KnownSpell(name="Command"),
            ]
        )
        assert casting.count_prepared() == 1
