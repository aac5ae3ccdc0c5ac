"""Tests for modifier arithmetic and weapon attack lines."""

from __future__ import annotations

import pytest

from dnd_sheet.engine.modifiers import (
    ability_modifier,
    format_modifier,
    proficiency_bonus,
    saving_throw_modifier,
    skill_modifier,
)
from dnd_sheet.engine.weapons import (
    UNARMED_STRIKE,
    equipped_weapons,
    is_proficient_with_weapon,
    unarmed_strike,
    weapon_ability_modifier,
    weapon_attack,
)
from dnd_sheet.models.character import Character
from dnd_sheet.models.enums import Ability, ItemType, ProficiencyLevel, Skill, WeaponCategory
from dnd_sheet.models.inventory import Item


class TestModifiers:
    """Tests for ability, save and skill modifiers."""

    @pytest.mark.parametrize(("score", "expected"), [(1, -5), (9, -1), (10, 0), (15, 2), (30, 10)])
    def test_ability_modifier(self, score: int, expected: int) -> None:
        assert ability_modifier(score) == expected

    def test_proficiency_bonus_clamped(self) -> None:
        assert proficiency_bonus(0) == 2
        assert proficiency_bonus(25) == 6

    def test_saving_throws(self, fighter: Character) -> None:
        assert saving_throw_modifier(fighter, Ability.STR) == 5
        assert saving_throw_modifier(fighter, Ability.DEX) == 1
        assert saving_throw_modifier(fighter, "charisma") == -1

    def test_skills(self, fighter: Character) -> None:
        assert skill_modifier(fighter, Skill.ATHLETICS) == 5
        assert skill_modifier(fighter, Skill.STEALTH) == 1

    def test_expertise_doubles(self, fighter: Character) -> None:
        fighter.skills.set_level(Skill.STEALTH, ProficiencyLevel.EXPERTISE)
        assert skill_modifier(fighter, Skill.STEALTH) == 5

    def test_format_modifier(self) -> None:
        assert format_modifier(2) == "+2"
        assert format_modifier(0) == "+0"
        assert format_modifier(-1) == "-1"


class TestWeaponAttacks:
    def test_longsword(self, fighter: Character, longsword: Item) -> None:
        attack = weapon_attack(fighter, longsword)
        assert attack.attack_bonus == 5
        assert attack.damage_text == "1d8+3 slashing"
        assert attack.describe() == "⚔ Longsword: Hit +5, Dmg 1d8+3 slashing"

    def test_not_proficient(self, fighter: Character, longsword: Item) -> None:
        fighter.proficiencies.weapons = ["Simple weapons"]
        attack = weapon_attack(fighter, longsword)
        assert attack.proficient is False
        assert attack.attack_bonus == 3

    def test_named_proficiency_matches_plural(self, fighter: Character, longsword: Item) -> None:
        fighter.proficiencies.weapons = ["Longswords"]
        assert is_proficient_with_weapon(fighter, longsword)

    def test_finesse_uses_better_ability(self, fighter: Character) -> None:
        fighter.ability_scores.dexterity = 18
        rapier = Item(id="r", name="Rapier", item_type=ItemType.WEAPON, damage="1d8", weapon_properties=["Finesse"])
        assert weapon_ability_modifier(fighter, rapier) == 4

    def test_ranged_uses_dex(self, fighter: Character) -> None:
        bow = Item(
            id="b",
            name="Longbow",
            item_type=ItemType.WEAPON,
            damage="1d8",
            damage_type="piercing",
            weapon_category=WeaponCategory.MARTIAL_RANGED,
            range="150/600",
        )
        attack = weapon_attack(fighter, bow)
        assert attack.attack_bonus == 3
        assert attack.damage_text == "1d8+1 piercing (150/600 ft)"

    def test_magic_bonus(self, fighter: Character, longsword: Item) -> None:
        longsword.magic_bonus = 1
        attack = weapon_attack(fighter, longsword)
        assert attack.attack_bonus == 6
        assert attack.damage_modifier == 4

    def test_unarmed_strike(self, fighter: Character) -> None:
        attack = unarmed_strike(fighter)
        assert attack.name == UNARMED_STRIKE
        assert attack.attack_bonus == 5
        assert attack.damage_text == "1+3 bludgeoning"

    def test_equipped_weapons(self, fighter: Character) -> None:
        assert equipped_weapons(fighter) == []
        fighter.inventory.equip("longsword", "main_hand")
        fighter.inventory.equip("shield", "off_hand")
        assert [w.name for w in equipped_weapons(fighter)] == ["Longsword"]
