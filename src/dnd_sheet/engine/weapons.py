"""Weapon attack and damage bonuses.

Proficiency is matched heuristically against the free-text weapon
proficiency list. The predicate is kept on its own so it can be swapped
for an explicit proficiency model without touching the action panel.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from dnd_sheet.engine.modifiers import format_modifier
from dnd_sheet.models.enums import Ability


if TYPE_CHECKING:
    from dnd_sheet.models.character import Character
    from dnd_sheet.models.inventory import Item


UNARMED_STRIKE = "Unarmed Strike"


@dataclass(frozen=True)
class WeaponAttack:
    """Resolved attack line for one weapon.

    Attributes:
        name: Weapon name.
        attack_bonus: Total to-hit bonus.
        damage_modifier: Flat bonus added to the damage dice.
        damage: Damage dice, e.g. '1d8'.
        damage_type: e.g. 'slashing'.
        proficient: Whether proficiency was applied.
        range: Range text for ranged and thrown weapons.
    """

    name: str
    attack_bonus: int
    damage_modifier: int
    damage: str
    damage_type: str
    proficient: bool = True
    range: str = ""

    @property
    def damage_text(self) -> str:
        """Damage as shown on the sheet: '1d8+3 slashing'."""
        text = self.damage
        if self.damage_modifier != 0:
            text = f"{text}{format_modifier(self.damage_modifier)}"
        if self.damage_type:
            text = f"{text} {self.damage_type}"
        if self.range:
            text = f"{text} ({self.range} ft)"
        return text

    def describe(self) -> str:
        return f"⚔ {self.name}: Hit {format_modifier(self.attack_bonus)}, Dmg {self.damage_text}"


def weapon_ability_modifier(character: Character, item: Item) -> int:
    """Ability modifier a weapon attacks with.

    Finesse weapons use the better of STR and DEX, ranged and ammunition
    weapons use DEX, everything else uses STR.
    """
    scores = character.ability_scores
    if item.has_property("finesse"):
        return max(scores.modifier(Ability.STR), scores.modifier(Ability.DEX))
    ranged = item.weapon_category is not None and str(item.weapon_category).endswith("ranged")
    if ranged or item.has_property("ammunition"):
        return scores.modifier(Ability.DEX)
    return scores.modifier(Ability.STR)


def is_proficient_with_weapon(character: Character, item: Item) -> bool:
    """Best-effort proficiency match against free-text proficiencies.

    "Simple weapons" and "Martial weapons" match the item's category.
    Anything else matches by name containment in either direction,
    ignoring a trailing plural 's' ("Longswords" matches "Longsword").
    """
    name = item.name.lower()
    category = str(item.weapon_category or "").lower()

    for proficiency in character.proficiencies.weapons:
        prof = proficiency.strip().lower()
        if not prof:
            continue
        if prof == "simple weapons" and "simple" in category:
            return True
        if prof == "martial weapons" and "martial" in category:
            return True
        if prof.removesuffix("s") in name or name in prof:
            return True
    return False


def weapon_attack(character: Character, item: Item) -> WeaponAttack:
    """Resolve attack and damage bonuses for a weapon.

    Example:
        A STR 16 fighter proficient with martial weapons wielding a
        longsword gets Hit +5, Dmg 1d8+3 slashing.
    """
    ability_mod = weapon_ability_modifier(character, item)
    proficient = is_proficient_with_weapon(character, item)
    attack_bonus = ability_mod + item.magic_bonus
    if proficient:
        attack_bonus += character.proficiency_bonus
    return WeaponAttack(
        name=item.name,
        attack_bonus=attack_bonus,
        damage_modifier=ability_mod + item.magic_bonus,
        damage=item.damage,
        damage_type=item.damage_type,
        proficient=proficient,
        range=item.range,
    )


def unarmed_strike(character: Character) -> WeaponAttack:
    """Unarmed strike: STR + proficiency to hit, 1 + STR bludgeoning."""
    strength = character.ability_scores.modifier(Ability.STR)
    return WeaponAttack(
        name=UNARMED_STRIKE,
        attack_bonus=strength + character.proficiency_bonus,
        damage_modifier=strength,
        damage="1",
        damage_type="bludgeoning",
    )


def equipped_weapons(character: Character) -> list[Item]:
    """Weapons held in the main and off hand, without duplicates."""
    weapons: list[Item] = []
    seen: set[str] = set()
    for slot in ("main_hand", "off_hand"):
        item = character.inventory.equipped_item(slot)
        if item is None or not item.is_weapon or not item.damage or item.id in seen:
            continue
        seen.add(item.id)
        weapons.append(item)
    return weapons


__all__ = [
    "UNARMED_STRIKE",
    "WeaponAttack",
    "weapon_ability_modifier",
    "is_proficient_with_weapon",
    "weapon_attack",
    "unarmed_strike",
    "equipped_weapons",
]
