"""Ability scores, saving throws and skill proficiencies."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import Field, field_validator

from dnd_sheet.core.constants import MAX_ABILITY_SCORE, MIN_ABILITY_SCORE
from dnd_sheet.models.base import SheetModel
from dnd_sheet.models.enums import Ability, ProficiencyLevel, Skill


AbilityScore = Annotated[int, Field(ge=MIN_ABILITY_SCORE, le=MAX_ABILITY_SCORE)]


def calc_modifier(score: int) -> int:
    """Calculate an ability modifier: floor((score - 10) / 2)."""
    return (score - 10) // 2


class AbilityScores(SheetModel):
    """The six ability scores."""

    strength: AbilityScore = Field(default=10, description="Physical power")
    dexterity: AbilityScore = Field(default=10, description="Agility and reflexes")
    constitution: AbilityScore = Field(default=10, description="Health and stamina")
    intelligence: AbilityScore = Field(default=10, description="Reasoning and memory")
    wisdom: AbilityScore = Field(default=10, description="Perception and insight")
    charisma: AbilityScore = Field(default=10, description="Force of personality")

    def score(self, ability: Ability | str) -> int:
        return getattr(self, Ability(ability).value)

    def set_score(self, ability: Ability | str, value: int) -> None:
        setattr(self, Ability(ability).value, value)

    def modifier(self, ability: Ability | str) -> int:
        """Get the modifier for an ability.

        Args:
            ability: The ability to look up.

        Returns:
            The ability modifier.
        """
        return calc_modifier(self.score(ability))


class SavingThrows(SheetModel):
    """Saving throw proficiency flags, one per ability."""

    strength: bool = False
    dexterity: bool = False
    constitution: bool = False
    intelligence: bool = False
    wisdom: bool = False
    charisma: bool = False

    def is_proficient(self, ability: Ability | str) -> bool:
        return getattr(self, Ability(ability).value)

    def set_proficient(self, ability: Ability | str, proficient: bool = True) -> None:
        setattr(self, Ability(ability).value, proficient)


class Skills(SheetModel):
    """Skill proficiency levels.

    Skills absent from the mapping are untrained.
    """

    levels: dict[str, ProficiencyLevel] = Field(default_factory=dict)

    @field_validator("levels", mode="before")
    @classmethod
    def drop_unknown_skills(cls, v: Any) -> dict[str, int]:
        """Ignore entries that are not real skills and normalise keys."""
        if v is None:
            return {}
        if isinstance(v, dict):
            valid = {s.value for s in Skill}
            return {
                str(k).lower(): int(val)
                for k, val in v.items()
                if val is not None and str(k).lower() in valid
            }
        return v

    def level(self, skill: Skill | str) -> ProficiencyLevel:
        return ProficiencyLevel(self.levels.get(Skill(skill).value, ProficiencyLevel.NONE))

    def set_level(self, skill: Skill | str, level: ProficiencyLevel | int) -> None:
        updated = dict(self.levels)
        updated[Skill(skill).value] = ProficiencyLevel(level)
        self.levels = updated


__all__ = [
    "AbilityScore",
    "calc_modifier",
    "AbilityScores",
    "SavingThrows",
    "Skills",
]
