"""Ability, skill and saving throw modifiers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dnd_sheet.core.constants import MAX_CHARACTER_LEVEL
from dnd_sheet.models.abilities import calc_modifier
from dnd_sheet.models.enums import Ability, ProficiencyLevel, Skill


if TYPE_CHECKING:
    from dnd_sheet.models.character import Character


def ability_modifier(score: int) -> int:
    """Modifier for an ability score: floor((score - 10) / 2).

    Example:
        >>> ability_modifier(15)
        2
        >>> ability_modifier(9)
        -1
    """
    return calc_modifier(score)


def proficiency_bonus(level: int) -> int:
    """Proficiency bonus by level, clamped to levels 1-20."""
    level = max(1, min(MAX_CHARACTER_LEVEL, level))
    return (level - 1) // 4 + 2


def saving_throw_modifier(character: Character, ability: Ability | str) -> int:
    """Ability modifier plus proficiency if the save is proficient."""
    modifier = character.ability_scores.modifier(ability)
    if character.saving_throws.is_proficient(ability):
        modifier += character.proficiency_bonus
    return modifier


def skill_modifier(character: Character, skill: Skill | str) -> int:
    """Governing ability modifier plus proficiency times the skill's multiplier.

    Expertise doubles the proficiency bonus.
    """
    skill = Skill(skill)
    level = character.skills.level(skill)
    modifier = character.ability_scores.modifier(skill.ability)
    if level is not ProficiencyLevel.NONE:
        modifier += character.proficiency_bonus * int(level)
    return modifier


def format_modifier(value: int) -> str:
    """Render a modifier with an explicit sign ('+2', '-1', '+0')."""
    return f"+{value}" if value >= 0 else str(value)


__all__ = [
    "ability_modifier",
    "proficiency_bonus",
    "saving_throw_modifier",
    "skill_modifier",
    "format_modifier",
]
