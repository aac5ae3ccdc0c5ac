"""Short and long rest resolution.

Hit dice heal their fixed average plus the CON modifier, never less than
1 HP per die.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from dnd_sheet.core.exceptions import RulesError
from dnd_sheet.core.logging import get_logger
from dnd_sheet.engine.dice import average_die
from dnd_sheet.engine.modifiers import format_modifier
from dnd_sheet.models.enums import Ability


if TYPE_CHECKING:
    from dnd_sheet.models.character import Character

logger = get_logger(__name__)


@dataclass(frozen=True)
class DieHealing:
    """Healing from one spent hit die."""

    average: int
    con_modifier: int

    @property
    def total(self) -> int:
        return max(1, self.average + self.con_modifier)


@dataclass
class RestResult:
    """What a rest changed, for the summary screen.

    Attributes:
        kind: 'short' or 'long'.
        hp_before: Current HP before resting.
        hp_after: Current HP after resting.
        hp_max: Maximum HP.
        dice_spent: Per-die healing for a short rest.
        die_type: Hit die type, e.g. 'd10'.
        con_modifier: CON modifier applied to each die.
        dice_recovered: Hit dice regained on a long rest.
        dice_remaining: Hit dice left afterwards.
        dice_total: Total hit dice.
        exhaustion_reduced: Whether a long rest removed an exhaustion level.
        features_restored: Names of recharged features.
    """

    kind: str
    hp_before: int
    hp_after: int
    hp_max: int
    die_type: str
    dice_remaining: int
    dice_total: int
    con_modifier: int = 0
    dice_spent: list[DieHealing] = field(default_factory=list)
    dice_recovered: int = 0
    exhaustion_reduced: bool = False
    features_restored: list[str] = field(default_factory=list)

    @property
    def healed(self) -> int:
        return self.hp_after - self.hp_before

    def summary_lines(self) -> list[str]:
        if self.kind == "short":
            return self._short_summary()
        return self._long_summary()

    def _short_summary(self) -> list[str]:
        lines = [
            "SHORT REST COMPLETE",
            "",
            f"Hit Dice Spent: {len(self.dice_spent)} ({self.die_type})",
            f"CON Modifier: {format_modifier(self.con_modifier)}",
            "",
        ]
        if self.dice_spent:
            lines.append("Healing Breakdown:")
            for index, die in enumerate(self.dice_spent, start=1):
                lines.append(
                    f"  Die {index}: avg ({die.average}) + con ({die.con_modifier}) = {die.total} HP"
                )
            lines.append("")
            lines.append(f"Total Healed: {self.healed} HP")
            lines.append(f"HP: {self.hp_before} → {self.hp_after}")
        else:
            lines.append("No hit dice spent.")
        lines.append("")
        lines.append(f"Hit Dice Remaining: {self.dice_remaining}/{self.dice_total}")
        if self.features_restored:
            lines.append(f"Features Restored: {', '.join(self.features_restored)}")
        return lines

    def _long_summary(self) -> list[str]:
        lines = ["LONG REST COMPLETE", ""]
        if self.healed > 0:
            lines.append(f"HP Restored: +{self.healed} (now {self.hp_after}/{self.hp_max})")
        else:
            lines.append(f"HP: {self.hp_after}/{self.hp_max} (already at max)")
        if self.dice_recovered > 0:
            lines.append(
                f"Hit Dice Recovered: +{self.dice_recovered} (now {self.dice_remaining}/{self.dice_total})"
            )
        else:
            lines.append(f"Hit Dice: {self.dice_remaining}/{self.dice_total} (already at max)")
        lines.append("All spell slots restored")
        lines.append("Death saves reset")
        if self.exhaustion_reduced:
            lines.append("Exhaustion reduced by 1 level")
        if self.features_restored:
            lines.append(f"Features Restored: {', '.join(self.features_restored)}")
        return lines


def short_rest(character: Character, dice: int) -> RestResult:
    """Spend hit dice and take a short rest.

    Args:
        character: The character resting, mutated in place.
        dice: Hit dice to spend, within [0, remaining].

    Returns:
        The rest summary.

    Raises:
        RulesError: If more dice are requested than remain.
    """
    hit_dice = character.combat.hit_dice
    if dice < 0 or dice > hit_dice.remaining:
        raise RulesError(
            f"Cannot spend {dice} hit dice",
            details={"remaining": hit_dice.remaining},
        )

    con = character.ability_scores.modifier(Ability.CON)
    hp = character.combat.hit_points
    hp_before = hp.current

    spent: list[DieHealing] = []
    for _ in range(dice):
        if not hit_dice.use():
            break
        die = DieHealing(average=average_die(hit_dice.die_size), con_modifier=con)
        spent.append(die)
        hp.heal(die.total)

    restored = character.short_rest()
    logger.info("Short rest", dice=len(spent), hp_before=hp_before, hp_after=hp.current)
    return RestResult(
        kind="short",
        hp_before=hp_before,
        hp_after=hp.current,
        hp_max=hp.maximum,
        die_type=hit_dice.die_type,
        dice_remaining=hit_dice.remaining,
        dice_total=hit_dice.total,
        con_modifier=con,
        dice_spent=spent,
        features_restored=restored,
    )


def long_rest(character: Character) -> RestResult:
    """Take a long rest and report what it restored."""
    hp = character.combat.hit_points
    hit_dice = character.combat.hit_dice
    hp_before = hp.current
    dice_before = hit_dice.remaining
    exhaustion_before = character.combat.exhaustion_level

    restored = character.long_rest()
    logger.info("Long rest", hp_before=hp_before, hp_after=hp.current)
    return RestResult(
        kind="long",
        hp_before=hp_before,
        hp_after=hp.current,
        hp_max=hp.maximum,
        die_type=hit_dice.die_type,
        dice_remaining=hit_dice.remaining,
        dice_total=hit_dice.total,
        dice_recovered=hit_dice.remaining - dice_before,
        exhaustion_reduced=character.combat.exhaustion_level < exhaustion_before,
        features_restored=restored,
    )


__all__ = [
    "DieHealing",
    "RestResult",
    "short_rest",
    "long_rest",
]
