"""Pydantic models for the character record."""

from __future__ import annotations

from dnd_sheet.models.abilities import AbilityScores, SavingThrows, Skills, calc_modifier
from dnd_sheet.models.character import (
    PERSONALITY_SECTIONS,
    Character,
    CharacterInfo,
    Feature,
    Features,
    Personality,
    Proficiencies,
)
from dnd_sheet.models.combat import CombatStats, DeathSaves, HitDice, HitPoints
from dnd_sheet.models.enums import (
    Ability,
    ActivationType,
    Condition,
    Denomination,
    EquipmentSlot,
    ItemType,
    ProficiencyLevel,
    ProgressionType,
    RechargeType,
    Skill,
    WeaponCategory,
)
from dnd_sheet.models.inventory import Currency, Equipment, Inventory, Item
from dnd_sheet.models.spellcasting import KnownSpell, PactMagic, SlotTracker, Spellcasting


__all__ = [
    # Enums
    "Ability",
    "ActivationType",
    "Condition",
    "Denomination",
    "EquipmentSlot",
    "ItemType",
    "ProficiencyLevel",
    "ProgressionType",
    "RechargeType",
    "Skill",
    "WeaponCategory",
    # Abilities
    "AbilityScores",
    "SavingThrows",
    "Skills",
    "calc_modifier",
    # Combat
    "HitPoints",
    "HitDice",
    "DeathSaves",
    "CombatStats",
    # Inventory
    "Currency",
    "Item",
    "Equipment",
    "Inventory",
    # Spellcasting
    "SlotTracker",
    "PactMagic",
    "KnownSpell",
    "Spellcasting",
    # Character
    "CharacterInfo",
    "PERSONALITY_SECTIONS",
    "Personality",
    "Feature",
    "Features",
    "Proficiencies",
    "Character",
]
