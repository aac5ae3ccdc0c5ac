"""Deterministic dice notation.

The sheet never rolls. Dice strings are parsed so the rule engine can
show averages and rescale damage when a spell is upcast.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from dnd_sheet.core.exceptions import DiceFormatError


_DICE_PATTERN = re.compile(r"^\s*(\d*)d(\d+)\s*(?:([+-])\s*(\d+))?\s*$", re.IGNORECASE)
_FLAT_PATTERN = re.compile(r"^\s*([+-]?\d+)\s*$")


@dataclass(frozen=True)
class DiceExpression:
    """A parsed dice expression such as ``2d6+3``.

    Attributes:
        count: Number of dice.
        sides: Faces per die. 0 for a flat value.
        modifier: Static modifier.
    """

    count: int
    sides: int
    modifier: int = 0

    @property
    def average(self) -> int:
        """Average result, rounding each die up (d8 averages 5)."""
        return self.count * average_die(self.sides) + self.modifier if self.sides else self.modifier

    @property
    def maximum(self) -> int:
        return self.count * self.sides + self.modifier

    def with_count(self, count: int) -> DiceExpression:
        return DiceExpression(count=count, sides=self.sides, modifier=self.modifier)

    def __str__(self) -> str:
        if not self.sides:
            return str(self.modifier)
        text = f"{self.count}d{self.sides}"
        if self.modifier > 0:
            text += f"+{self.modifier}"
        elif self.modifier < 0:
            text += str(self.modifier)
        return text


def parse_dice(expression: str) -> DiceExpression:
    """Parse dice notation.

    Accepts ``NdM``, ``dM`` (one die), ``NdM+K``, ``NdM-K`` and flat
    integers.

    Args:
        expression: The notation to parse.

    Returns:
        The parsed expression.

    Raises:
        DiceFormatError: If the notation is not recognised.

    Example:
        >>> parse_dice("2d6+3").average
        11
    """
    if not expression or not expression.strip():
        raise DiceFormatError("Empty dice expression", expression=expression)

    match = _DICE_PATTERN.match(expression)
    if match:
        count_str, sides_str, sign, mod_str = match.groups()
        count = int(count_str) if count_str else 1
        sides = int(sides_str)
        if sides < 1:
            raise DiceFormatError("Dice must have at least one side", expression=expression)
        modifier = int(mod_str) if mod_str else 0
        if sign == "-":
            modifier = -modifier
        return DiceExpression(count=count, sides=sides, modifier=modifier)

    flat = _FLAT_PATTERN.match(expression)
    if flat:
        return DiceExpression(count=0, sides=0, modifier=int(flat.group(1)))

    raise DiceFormatError(f"Invalid dice expression: {expression}", expression=expression)


def average_die(sides: int) -> int:
    """Fixed average used for hit dice: sides // 2 + 1."""
    return sides // 2 + 1


def find_dice(text: str) -> tuple[int, int] | None:
    """Find the first ``NdM`` term inside free text.

    Returns:
        (count, sides), or None when the text has no dice term.
    """
    match = re.search(r"(\d+)d(\d+)", text)
    if match is None:
        return None
    return int(match.group(1)), int(match.group(2))


__all__ = [
    "DiceExpression",
    "parse_dice",
    "average_die",
    "find_dice",
]
