"""Tests for ability scores, saving throws and skills."""

from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError

from dnd_sheet.models.abilities import AbilityScores, SavingThrows, Skills, calc_modifier
from dnd_sheet.models.enums import Ability, ProficiencyLevel, Skill


class TestCalcModifier:
    @pytest.mark.parametrize(
        ("score", "expected"),
        [(1, -5), (8, -1), (9, -1), (10, 0), (11, 0), (15, 2), (16, 3), (20, 5), (30, 10)],
    )
    def test_floor_division(self, score: int, expected: int) -> None:
        assert calc_modifier(score) == expected


class TestAbilityScores:
    def test_defaults_to_ten(self) -> None:
        scores = AbilityScores()
        assert all(scores.score(a) == 10 for a in Ability)

    def test_score_and_modifier_by_enum_or_name(self) -> None:
        scores = AbilityScores(strength=16)
        assert scores.score(Ability.STR) == 16
        assert scores.modifier("strength") == 3

    def test_set_score_validates(self) -> None:
        scores = AbilityScores()
        scores.set_score(Ability.DEX, 14)
        assert scores.dexterity == 14

        with pytest.raises(PydanticValidationError):
            scores.set_score(Ability.DEX, 31)


class TestSavingThrows:
    def test_proficiency_flags(self) -> None:
        saves = SavingThrows(strength=True)
        assert saves.is_proficient(Ability.STR)
        assert not saves.is_proficient(Ability.WIS)

        saves.set_proficient(Ability.WIS)
        assert saves.is_proficient("wisdom")


class TestSkills:
    def test_untrained_by_default(self) -> None:
        assert Skills().level(Skill.STEALTH) is ProficiencyLevel.NONE

    def test_set_level(self) -> None:
        skills = Skills()
        skills.set_level(Skill.STEALTH, ProficiencyLevel.EXPERTISE)
        assert skills.level("stealth") is ProficiencyLevel.EXPERTISE

    def test_unknown_skills_are_dropped(self) -> None:
        skills = Skills.model_validate({"levels": {"Stealth": 1, "basket_weaving": 2, "arcana": None}})
        assert skills.levels == {"stealth": ProficiencyLevel.PROFICIENT}

    def test_skill_governing_ability(self) -> None:
        assert Skill.ATHLETICS.ability is Ability.STR
        assert Skill.ANIMAL_HANDLING.display_name == "Animal Handling"
