"""The character record aggregate and its descriptive components.

A Character is the single source of truth every screen reads and
mutates. It serialises to JSON with ``model_dump(mode="json")`` and is
restored with ``Character.model_validate``.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any
from uuid import uuid4

from pydantic import Field, computed_field, field_validator

from dnd_sheet.core.constants import (
    DEFAULT_SPELL_SAVE_DC,
    MAX_CHARACTER_LEVEL,
    MIN_CHARACTER_LEVEL,
    XP_THRESHOLDS,
)
from dnd_sheet.models.abilities import AbilityScores, SavingThrows, Skills, calc_modifier
from dnd_sheet.models.base import SheetModel
from dnd_sheet.models.combat import CombatStats
from dnd_sheet.models.enums import (
    Ability,
    ActivationType,
    ProgressionType,
    RechargeType,
    Skill,
)
from dnd_sheet.models.inventory import Inventory
from dnd_sheet.models.spellcasting import Spellcasting


def _utcnow() -> datetime:
    return datetime.now(UTC)


# =============================================================================
# Info
# =============================================================================


class CharacterInfo(SheetModel):
    """Identity, class and level."""

    name: str = Field(min_length=1)
    player_name: str = ""
    race: str = ""
    subrace: str = ""
    class_name: str = ""
    subclass: str = ""
    level: int = Field(default=1, ge=MIN_CHARACTER_LEVEL, le=MAX_CHARACTER_LEVEL)
    background: str = ""
    alignment: str = ""
    experience_points: int = Field(default=0, ge=0)
    progression: ProgressionType = ProgressionType.XP
    inspiration: bool = False

    @computed_field(description="Proficiency bonus for the current level")
    @property
    def proficiency_bonus(self) -> int:
        return (self.level - 1) // 4 + 2

    @property
    def xp_for_next_level(self) -> int:
        """XP needed to reach the next level, 0 at the level cap."""
        if self.level >= MAX_CHARACTER_LEVEL:
            return 0
        return XP_THRESHOLDS[self.level + 1]

    def can_level_up(self) -> bool:
        if self.progression != ProgressionType.XP or self.level >= MAX_CHARACTER_LEVEL:
            return False
        return self.experience_points >= XP_THRESHOLDS[self.level + 1]


# =============================================================================
# Personality
# =============================================================================


PERSONALITY_SECTIONS: tuple[str, ...] = ("traits", "ideals", "bonds", "flaws")


class Personality(SheetModel):
    """Roleplay notes: traits, ideals, bonds, flaws and backstory."""

    traits: list[str] = Field(default_factory=list)
    ideals: list[str] = Field(default_factory=list)
    bonds: list[str] = Field(default_factory=list)
    flaws: list[str] = Field(default_factory=list)
    backstory: str = ""
    notes: str = ""

    def section(self, name: str) -> list[str]:
        if name not in PERSONALITY_SECTIONS:
            raise KeyError(name)
        return getattr(self, name)

    def add(self, section: str, text: str) -> None:
        self.section(section).append(text)

    def update(self, section: str, index: int, text: str) -> None:
        entries = self.section(section)
        if 0 <= index < len(entries):
            entries[index] = text
        else:
            entries.append(text)

    def remove(self, section: str, index: int) -> str | None:
        entries = self.section(section)
        if 0 <= index < len(entries):
            return entries.pop(index)
        return None


# =============================================================================
# Features & Proficiencies
# =============================================================================


class Feature(SheetModel):
    """A racial trait, class feature or feat, with optional limited uses.

    Examples:
    - Second Wind: 1 use, recharges on short rest
    - Darkvision: passive, no tracking
    """

    name: str
    source: str = Field(default="", description="e.g. 'Fighter 1', 'Elf', 'Feat'")
    description: str = ""
    level: int = Field(default=1, ge=0)
    activation: ActivationType = ActivationType.PASSIVE
    uses: int | None = Field(default=None, ge=0, description="Uses remaining")
    max_uses: int | None = Field(default=None, ge=0)
    recharge: RechargeType = RechargeType.AT_WILL

    @property
    def uses_display(self) -> str:
        if self.max_uses is None:
            return "At Will"
        return f"{self.uses or 0}/{self.max_uses}"

    def use(self) -> bool:
        if self.max_uses is None:
            return True
        if not self.uses:
            return False
        self.uses -= 1
        return True

    def restore(self) -> bool:
        """Refill uses.

        Returns:
            True if anything was restored.
        """
        if self.max_uses is None or (self.uses or 0) >= self.max_uses:
            return False
        self.uses = self.max_uses
        return True


class Features(SheetModel):
    """Racial traits, class features and feats."""

    racial_traits: list[Feature] = Field(default_factory=list)
    class_features: list[Feature] = Field(default_factory=list)
    feats: list[Feature] = Field(default_factory=list)

    def all_features(self) -> list[Feature]:
        return [*self.racial_traits, *self.class_features, *self.feats]

    def restore(self, *recharges: RechargeType) -> list[str]:
        """Restore features whose recharge timing is in recharges.

        Returns:
            Names of the features restored.
        """
        return [
            f.name for f in self.all_features() if f.recharge in recharges and f.restore()
        ]


class Proficiencies(SheetModel):
    """Armor, weapon, tool and language proficiencies as free text."""

    armor: list[str] = Field(default_factory=list)
    weapons: list[str] = Field(default_factory=list)
    tools: list[str] = Field(default_factory=list)
    languages: list[str] = Field(default_factory=list)


# =============================================================================
# Character
# =============================================================================


class Character(SheetModel):
    """A complete character record."""

    id: str = Field(default_factory=lambda: uuid4().hex)
    info: CharacterInfo
    ability_scores: AbilityScores = Field(default_factory=AbilityScores)
    saving_throws: SavingThrows = Field(default_factory=SavingThrows)
    skills: Skills = Field(default_factory=Skills)
    combat: CombatStats = Field(default_factory=CombatStats)
    inventory: Inventory = Field(default_factory=Inventory)
    spellcasting: Spellcasting | None = None
    features: Features = Field(default_factory=Features)
    proficiencies: Proficiencies = Field(default_factory=Proficiencies)
    personality: Personality = Field(default_factory=Personality)
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

    @field_validator("id", mode="before")
    @classmethod
    def default_blank_id(cls, v: Any) -> str:
        return v or uuid4().hex

    @classmethod
    def create(
        cls,
        name: str,
        *,
        race: str = "",
        class_name: str = "",
        level: int = 1,
    ) -> Character:
        """Build a fresh character with default components."""
        return cls(info=CharacterInfo(name=name, race=race, class_name=class_name, level=level))

    def mark_updated(self) -> None:
        self.updated_at = _utcnow()

    # -------------------------------------------------------------------------
    # Derived values
    # -------------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self.info.name

    @property
    def proficiency_bonus(self) -> int:
        return self.info.proficiency_bonus

    @property
    def initiative(self) -> int:
        return self.ability_scores.modifier(Ability.DEX) + self.combat.initiative_bonus

    @property
    def passive_perception(self) -> int:
        level = self.skills.level(Skill.PERCEPTION)
        return 10 + self.ability_scores.modifier(Ability.WIS) + self.proficiency_bonus * int(level)

    @property
    def is_spellcaster(self) -> bool:
        return self.spellcasting is not None

    def _casting_modifier(self) -> int:
        assert self.spellcasting is not None
        return calc_modifier(self.ability_scores.score(self.spellcasting.ability))

    @property
    def spell_save_dc(self) -> int:
        """8 + spellcasting modifier + proficiency, or 10 for non-casters."""
        if self.spellcasting is None:
            return DEFAULT_SPELL_SAVE_DC
        return 8 + self._casting_modifier() + self.proficiency_bonus

    @property
    def spell_attack_bonus(self) -> int:
        if self.spellcasting is None:
            return 0
        return self._casting_modifier() + self.proficiency_bonus

    # -------------------------------------------------------------------------
    # Rest hooks
    # -------------------------------------------------------------------------

    def short_rest(self) -> list[str]:
        """Restore the pact pool and short-rest features.

        Hit dice healing is handled by the rule engine before this runs.

        Returns:
            Names of features restored.
        """
        if self.spellcasting is not None:
            self.spellcasting.restore_pact()
        restored = self.features.restore(RechargeType.SHORT_REST)
        self.mark_updated()
        return restored

    def long_rest(self) -> list[str]:
        """Restore HP, hit dice, slots, death saves, exhaustion and features.

        Returns:
            Names of features restored.
        """
        hp = self.combat.hit_points
        hp.current = hp.maximum
        hp.temporary = 0

        self.combat.hit_dice.recover_on_long_rest()

        if self.spellcasting is not None:
            self.spellcasting.restore_all()

        self.combat.death_saves.reset()

        if self.combat.exhaustion_level > 0:
            self.combat.exhaustion_level -= 1

        restored = self.features.restore(RechargeType.SHORT_REST, RechargeType.LONG_REST)
        self.mark_updated()
        return restored

    def validate_record(self) -> list[str]:
        """List problems that would make the record unusable on the sheet."""
        problems: list[str] = []
        if not self.info.race:
            problems.append("character race is required")
        if not self.info.class_name:
            problems.append("character class is required")
        return problems


__all__ = [
    "CharacterInfo",
    "PERSONALITY_SECTIONS",
    "Personality",
    "Feature",
    "Features",
    "Proficiencies",
    "Character",
]
