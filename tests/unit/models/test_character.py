"""Tests for the character record aggregate."""

from __future__ import annotations

import pytest

from dnd_sheet.models.character import Character, CharacterInfo, Feature, Personality
from dnd_sheet.models.enums import RechargeType


class TestCharacterInfo:
    """Tests for level-derived values."""

    @pytest.mark.parametrize(
        ("level", "bonus"),
        [(1, 2), (4, 2), (5, 3), (8, 3), (9, 4), (13, 5), (17, 6), (20, 6)],
    )
    def test_proficiency_bonus(self, level: int, bonus: int) -> None:
        assert CharacterInfo(name="X", level=level).proficiency_bonus == bonus

    def test_can_level_up(self) -> None:
        assert CharacterInfo(name="X", level=1, experience_points=299).can_level_up() is False
        assert CharacterInfo(name="X", level=1, experience_points=300).can_level_up() is True
        assert CharacterInfo(name="X", level=1, experience_points=300, progression="milestone").can_level_up() is False

    def test_xp_for_next_level_at_cap(self) -> None:
        assert CharacterInfo(name="X", level=20).xp_for_next_level == 0

class TestDerivedValues:
    def test_fighter(self, fighter: Character) -> None:
        assert fighter.proficiency_bonus == 2
        assert fighter.initiative == 1
        # 10 + WIS 1 + proficient 2
        assert fighter.passive_perception == 13

    def test_non_caster_spell_values(self, fighter: Character) -> None:
        assert fighter.is_spellcaster is False
        assert fighter.spell_save_dc == 10
        assert fighter.spell_attack_bonus == 0

    def test_caster_spell_values(self, wizard: Character) -> None:
        # INT 16 (+3), level 5 (+3)
        assert wizard.spell_save_dc == 14
        assert wizard.spell_attack_bonus == 6

class TestFeatures:
    def test_use_and_restore(self) -> None:
        feature = Feature(name="Rage", max_uses=2, uses=2, recharge=RechargeType.LONG_REST)
        assert feature.use() is True
        assert feature.uses_display == "1/2"
        assert feature.restore() is True
        assert feature.restore() is False

    def test_unlimited_feature(self) -> None:
        feature = Feature(name="Darkvision")
        assert feature.use() is True
        assert feature.uses_display == "At Will"

class TestRests:
    def test_short_rest_restores_short_features(self, fighter: Character) -> None:
        restored = fighter.short_rest()
        assert restored == ["Second Wind", "Action Surge"]

    def test_short_rest_restores_pact(self, warlock: Character) -> None:
        warlock.spellcasting.pact_magic.remaining = 0
        warlock.short_rest()
        assert warlock.spellcasting.pact_magic.remaining == 2

    def test_long_rest(self, wizard: Character) -> None:
        wizard.combat.hit_points.current = 3
        wizard.combat.hit_points.temporary = 4
        wizard.combat.hit_dice.remaining = 0
        wizard.combat.exhaustion_level = 2
        wizard.combat.death_saves.failures = 2
        wizard.spellcasting.slot(1).remaining = 0

        wizard.long_rest()

        assert wizard.combat.hit_points.current == 27
        assert wizard.combat.hit_points.temporary == 0
        assert wizard.combat.hit_dice.remaining == 2
        assert wizard.combat.exhaustion_level == 1
        assert wizard.combat.death_saves.failures == 0
        assert wizard.spellcasting.slot(1).remaining == 4

class TestPersonality:
    def test_unknown_section(self) -> None:
        with pytest.raises(KeyError):
            Personality().section("quirks")

    def test_update_in_range_and_append(self) -> None:
        personality = Personality(traits=["Brave"])
        personality.update("traits", 0, "Bold")
        personality.update("traits", 5, "Curious")
        assert personality.traits == ["Bold", "Curious"]

    def test_remove(self) -> None:
        personality = Personality(flaws=["Greedy"])
        assert personality.remove("flaws", 0) == "Greedy"
        assert personality.remove("flaws", 0) is None

class TestRecord:
    def test_json_roundtrip_keeps_nested_items(self, fighter: Character) -> None:
        restored = Character.model_validate(fighter.model_dump(mode="json"))
        assert restored.inventory.find_item("torch").quantity == 10
        assert restored.info.subclass == "Champion"

    def test_blank_id_replaced(self) -> None:
        assert Character(id="", info=CharacterInfo(name="X")).id

    def test_validate_record(self) -> None:
        assert Character.create("X").validate_record() == [
            "character race is required",
            "character class is required",
        ]
        assert Character.create("X", race="Elf", class_name="Wizard").validate_record() == []
