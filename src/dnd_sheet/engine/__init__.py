"""Rule engine for the character sheet.

Pure functions over the character record: modifiers, weapon attacks,
spell casting, rests and the action listing. Nothing here draws or saves.

Submodules:
    modifiers: Ability, save and skill modifiers
    dice: Deterministic dice notation (averages, no rolling)
    weapons: Weapon attack and damage bonuses
    hp_bar: HP bar segment widths
    spells: Cast options, slot spending and upcast descriptions
    rest: Short and long rest resolution
    actions: Action economy listing

Example:
    >>> from dnd_sheet.engine import weapon_attack, short_rest
    >>> weapon_attack(fighter, longsword).describe()
    '⚔ Longsword: Hit +5, Dmg 1d8+3 slashing'
"""

from __future__ import annotations

# =============================================================================
# Modifiers & Dice
# =============================================================================
from dnd_sheet.engine.dice import (
    DiceExpression,
    average_die,
    find_dice,
    parse_dice,
)
from dnd_sheet.engine.modifiers import (
    ability_modifier,
    format_modifier,
    proficiency_bonus,
    saving_throw_modifier,
    skill_modifier,
)

# =============================================================================
# Combat
# =============================================================================
from dnd_sheet.engine.hp_bar import HPBarSegments, hp_bar_segments, hp_color
from dnd_sheet.engine.weapons import (
    UNARMED_STRIKE,
    WeaponAttack,
    equipped_weapons,
    is_proficient_with_weapon,
    unarmed_strike,
    weapon_ability_modifier,
    weapon_attack,
)

# =============================================================================
# Spells, Rests & Actions
# =============================================================================
from dnd_sheet.engine.actions import (
    ACTION_TABS,
    STANDARD_ACTIONS,
    ActionItem,
    ActionKind,
    ActionType,
    StandardAction,
    build_actions,
)
from dnd_sheet.engine.rest import RestResult, long_rest, short_rest
from dnd_sheet.engine.spells import (
    UPCAST_RULES,
    CastOption,
    CastOutcome,
    CastPool,
    available_cast_levels,
    can_cast,
    cast_options,
    cast_spell,
    describe_upcast,
    refresh_ritual_flags,
)


__all__ = [
    # Modifiers & Dice
    "DiceExpression",
    "parse_dice",
    "average_die",
    "find_dice",
    "ability_modifier",
    "proficiency_bonus",
    "saving_throw_modifier",
    "skill_modifier",
    "format_modifier",
    # Combat
    "HPBarSegments",
    "hp_bar_segments",
    "hp_color",
    "UNARMED_STRIKE",
    "WeaponAttack",
    "weapon_ability_modifier",
    "is_proficient_with_weapon",
    "weapon_attack",
    "unarmed_strike",
    "equipped_weapons",
    # Spells
    "CastPool",
    "CastOption",
    "CastOutcome",
    "available_cast_levels",
    "cast_options",
    "can_cast",
    "cast_spell",
    "refresh_ritual_flags",
    "UPCAST_RULES",
    "describe_upcast",
    # Rests
    "RestResult",
    "short_rest",
    "long_rest",
    # Actions
    "ActionType",
    "ACTION_TABS",
    "ActionKind",
    "StandardAction",
    "STANDARD_ACTIONS",
    "ActionItem",
    "build_actions",
]
