"""Enumeration types for the terminal character sheet.

This module defines the enumerations the character record is built on:
abilities, skills, conditions, item categories, equipment slots, coin
denominations and feature recharge timing.
"""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Ability(StrEnum):
    """D&D 5E ability scores.

    The six core abilities that define a character's physical
    and mental characteristics.
    """

    STR = "strength"
    DEX = "dexterity"
    CON = "constitution"
    INT = "intelligence"
    WIS = "wisdom"
    CHA = "charisma"

    @property
    def abbreviation(self) -> str:
        """Get the three-letter abbreviation.

        Returns:
            Three-letter abbreviation (e.g., 'STR').
        """
        return self.name


class Skill(StrEnum):
    """D&D 5E skills and their associated abilities.

    Members are declared alphabetically, which is the order the
    skills panel lists them in.
    """

    ACROBATICS = "acrobatics"
    ANIMAL_HANDLING = "animal_handling"
    ARCANA = "arcana"
    ATHLETICS = "athletics"
    DECEPTION = "deception"
    HISTORY = "history"
    INSIGHT = "insight"
    INTIMIDATION = "intimidation"
    INVESTIGATION = "investigation"
    MEDICINE = "medicine"
    NATURE = "nature"
    PERCEPTION = "perception"
    PERFORMANCE = "performance"
    PERSUASION = "persuasion"
    RELIGION = "religion"
    SLEIGHT_OF_HAND = "sleight_of_hand"
    STEALTH = "stealth"
    SURVIVAL = "survival"

    @property
    def display_name(self) -> str:
        """Get the human-readable skill name.

        Returns:
            Title-cased name (e.g., 'Sleight Of Hand').
        """
        return self.value.replace("_", " ").title()

    @property
    def ability(self) -> Ability:
        """Get the governing ability for this skill.

        Returns:
            The Ability used for checks with this skill.
        """
        return _SKILL_ABILITIES[self]


_SKILL_ABILITIES: dict[Skill, Ability] = {
    # Strength
    Skill.ATHLETICS: Ability.STR,
    # Dexterity
    Skill.ACROBATICS: Ability.DEX,
    Skill.SLEIGHT_OF_HAND: Ability.DEX,
    Skill.STEALTH: Ability.DEX,
    # Intelligence
    Skill.ARCANA: Ability.INT,
    Skill.HISTORY: Ability.INT,
    Skill.INVESTIGATION: Ability.INT,
    Skill.NATURE: Ability.INT,
    Skill.RELIGION: Ability.INT,
    # Wisdom
    Skill.ANIMAL_HANDLING: Ability.WIS,
    Skill.INSIGHT: Ability.WIS,
    Skill.MEDICINE: Ability.WIS,
    Skill.PERCEPTION: Ability.WIS,
    Skill.SURVIVAL: Ability.WIS,
    # Charisma
    Skill.DECEPTION: Ability.CHA,
    Skill.INTIMIDATION: Ability.CHA,
    Skill.PERFORMANCE: Ability.CHA,
    Skill.PERSUASION: Ability.CHA,
}


class ProficiencyLevel(IntEnum):
    """How proficient a character is with a skill.

    The integer value is the multiplier applied to the proficiency bonus.
    """

    NONE = 0
    PROFICIENT = 1
    EXPERTISE = 2


class Condition(StrEnum):
    """The fifteen standard D&D 5E conditions."""

    BLINDED = "blinded"
    CHARMED = "charmed"
    DEAFENED = "deafened"
    EXHAUSTION = "exhaustion"
    FRIGHTENED = "frightened"
    GRAPPLED = "grappled"
    INCAPACITATED = "incapacitated"
    INVISIBLE = "invisible"
    PARALYZED = "paralyzed"
    PETRIFIED = "petrified"
    POISONED = "poisoned"
    PRONE = "prone"
    RESTRAINED = "restrained"
    STUNNED = "stunned"
    UNCONSCIOUS = "unconscious"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class ItemType(StrEnum):
    """Inventory item categories."""

    WEAPON = "weapon"
    ARMOR = "armor"
    SHIELD = "shield"
    CONSUMABLE = "consumable"
    MAGIC_ITEM = "magic_item"
    TOOL = "tool"
    GENERAL = "general"


class WeaponCategory(StrEnum):
    """Weapon subcategory used for proficiency matching."""

    SIMPLE_MELEE = "simple_melee"
    SIMPLE_RANGED = "simple_ranged"
    MARTIAL_MELEE = "martial_melee"
    MARTIAL_RANGED = "martial_ranged"


class EquipmentSlot(StrEnum):
    """Where an item can be worn or wielded.

    Members are declared in the order the equipment panel shows them.
    """

    MAIN_HAND = "main_hand"
    OFF_HAND = "off_hand"
    HEAD = "head"
    BODY = "body"
    CLOAK = "cloak"
    GLOVES = "gloves"
    BOOTS = "boots"
    AMULET = "amulet"
    RING_1 = "ring_1"
    RING_2 = "ring_2"

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").title()


class Denomination(StrEnum):
    """Coin denominations, lowest value first."""

    CP = "cp"
    SP = "sp"
    EP = "ep"
    GP = "gp"
    PP = "pp"


class ProgressionType(StrEnum):
    """How a character advances in level."""

    XP = "xp"
    MILESTONE = "milestone"


class ActivationType(StrEnum):
    """Action economy cost of a feature or spell."""

    PASSIVE = "passive"
    ACTION = "action"
    BONUS = "bonus"
    REACTION = "reaction"


class RechargeType(StrEnum):
    """When a feature's uses are restored."""

    AT_WILL = "at_will"
    SHORT_REST = "short_rest"
    LONG_REST = "long_rest"


__all__ = [
    "Ability",
    "Skill",
    "ProficiencyLevel",
    "Condition",
    "ItemType",
    "WeaponCategory",
    "EquipmentSlot",
    "Denomination",
    "ProgressionType",
    "ActivationType",
    "RechargeType",
]
