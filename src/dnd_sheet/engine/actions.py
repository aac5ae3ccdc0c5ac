"""Action economy listing for the main sheet.

Groups weapon attacks, castable spells and the standard combat actions
under the Action, Bonus Action, Reaction and Other tabs.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from dnd_sheet.engine.spells import can_cast
from dnd_sheet.engine.weapons import WeaponAttack, equipped_weapons, unarmed_strike, weapon_attack


if TYPE_CHECKING:
    from dnd_sheet.catalog.catalog import Catalog
    from dnd_sheet.catalog.entries import SpellEntry
    from dnd_sheet.models.character import Character


class ActionType(StrEnum):
    """Action economy tabs, in display order."""

    ACTION = "Action"
    BONUS = "Bonus Action"
    REACTION = "Reaction"
    OTHER = "Other"


ACTION_TABS: list[ActionType] = list(ActionType)

# Catalog casting_time code for each tab.
_CASTING_TIMES: dict[ActionType, str] = {
    ActionType.ACTION: "A",
    ActionType.BONUS: "BA",
    ActionType.REACTION: "R",
}


class ActionKind(StrEnum):
    WEAPON = "weapon"
    SPELL = "spell"
    STANDARD = "standard"


@dataclass(frozen=True)
class StandardAction:
    name: str
    description: str
    action_type: ActionType


STANDARD_ACTIONS: list[StandardAction] = [
    StandardAction("Attack", "Make one attack with a weapon or Unarmed Strike", ActionType.ACTION),
    StandardAction("Dash", "Gain extra movement equal to your Speed", ActionType.ACTION),
    StandardAction("Disengage", "Your movement doesn't provoke Opportunity Attacks", ActionType.ACTION),
    StandardAction("Dodge", "Attacks against you have Disadvantage; DEX saves have Advantage", ActionType.ACTION),
    StandardAction("Grapple", "Grab a creature (Athletics vs Athletics/Acrobatics)", ActionType.ACTION),
    StandardAction("Help", "Give an ally Advantage on their next ability check or attack", ActionType.ACTION),
    StandardAction("Hide", "Make a Stealth check to become Hidden", ActionType.ACTION),
    StandardAction("Influence", "Make a Charisma check to alter a creature's attitude", ActionType.ACTION),
    StandardAction("Magic", "Cast a spell, use a magic item, or use a magical feature", ActionType.ACTION),
    StandardAction("Ready", "Prepare to take an action in response to a trigger", ActionType.ACTION),
    StandardAction("Search", "Make a Perception or Investigation check", ActionType.ACTION),
    StandardAction("Shove", "Push a creature 5 feet or knock it Prone", ActionType.ACTION),
    StandardAction("Study", "Make an Intelligence check to recall information", ActionType.ACTION),
    StandardAction("Utilize", "Use a nonmagical object", ActionType.ACTION),
    StandardAction(
        "Offhand Attack",
        "Attack with a Light weapon in your other hand (no ability mod to damage)",
        ActionType.BONUS,
    ),
    StandardAction(
        "Opportunity Attack",
        "Make one melee attack when a creature leaves your reach",
        ActionType.REACTION,
    ),
]


@dataclass(frozen=True)
class ActionItem:
    """One row in the actions panel.

    Exactly one of attack, spell or standard is set, matching kind.
    """

    kind: ActionKind
    name: str
    summary: str
    attack: WeaponAttack | None = None
    spell: SpellEntry | None = None
    standard: StandardAction | None = None

    def status_text(self) -> str:
        """Status line shown when the row is selected."""
        if self.attack is not None:
            return self.attack.describe()
        if self.standard is not None:
            return f"📋 {self.standard.name}: {self.standard.description}"
        return self.summary


def castable_spells(character: Character, catalog: Catalog, casting_time: str) -> list[SpellEntry]:
    """Known cantrips and castable spells with the given casting time.

    Names missing from the catalog are skipped; the panel only lists
    spells it can describe.
    """
    spellcasting = character.spellcasting
    if spellcasting is None:
        return []

    found: list[SpellEntry] = []
    for name in spellcasting.cantrips_known:
        entry = catalog.get_spell(name)
        if entry is not None and entry.casting_time == casting_time:
            found.append(entry)
    for known in spellcasting.known_spells:
        if not can_cast(spellcasting, known):
            continue
        entry = catalog.get_spell(known.name)
        if entry is not None and entry.casting_time == casting_time:
            found.append(entry)
    return found


def _spell_item(entry: SpellEntry) -> ActionItem:
    summary = "Cantrip" if entry.level == 0 else f"Level {entry.level}"
    return ActionItem(kind=ActionKind.SPELL, name=entry.name, summary=summary, spell=entry)


def _standard_item(action: StandardAction) -> ActionItem:
    return ActionItem(
        kind=ActionKind.STANDARD,
        name=action.name,
        summary=action.description,
        standard=action,
    )


def _attack_item(attack: WeaponAttack) -> ActionItem:
    return ActionItem(
        kind=ActionKind.WEAPON,
        name=attack.name,
        summary=attack.describe().removeprefix("⚔ "),
        attack=attack,
    )


def build_actions(character: Character, catalog: Catalog, action_type: ActionType | str) -> list[ActionItem]:
    """List everything the character can do with one kind of action.

    Args:
        character: The character on the sheet.
        catalog: Spell lookup.
        action_type: Which tab to build.

    Returns:
        Rows in display order. The Other tab is always empty.
    """
    action_type = ActionType(action_type)
    items: list[ActionItem] = []

    if action_type == ActionType.OTHER:
        return items

    if action_type == ActionType.ACTION:
        items.append(_attack_item(unarmed_strike(character)))
        for weapon in equipped_weapons(character):
            items.append(_attack_item(weapon_attack(character, weapon)))

    for entry in castable_spells(character, catalog, _CASTING_TIMES[action_type]):
        items.append(_spell_item(entry))

    for action in STANDARD_ACTIONS:
        if action.action_type == action_type and action.name != "Attack":
            items.append(_standard_item(action))
    return items


__all__ = [
    "ActionType",
    "ACTION_TABS",
    "ActionKind",
    "StandardAction",
    "STANDARD_ACTIONS",
    "ActionItem",
    "castable_spells",
    "build_actions",
]
