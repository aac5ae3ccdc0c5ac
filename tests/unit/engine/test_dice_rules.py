"""Tests for dice notation parsing."""

from __future__ import annotations

import pytest

from dnd_sheet.core.exceptions import DiceFormatError
from dnd_sheet.engine.dice import DiceExpression, average_die, find_dice, parse_dice


class TestParseDice:
    """Tests for parse_dice."""

    @pytest.mark.parametrize(
        ("text", "count", "sides", "modifier"),
        [
            ("1d20", 1, 20, 0),
            ("d8", 1, 8, 0),
            ("2d6+3", 2, 6, 3),
            ("4d4 - 1", 4, 4, -1),
            ("3D10", 3, 10, 0),
        ],
    )
    def test_valid(self, text: str, count: int, sides: int, modifier: int) -> None:
        assert parse_dice(text) == DiceExpression(count, sides, modifier)

    def test_flat_value(self) -> None:
        expr = parse_dice("5")
        assert expr.sides == 0
        assert expr.average == 5
        assert str(expr) == "5"

    @pytest.mark.parametrize("text", ["", "   ", "abc", "2d", "d0", "1d6+"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(DiceFormatError):
            parse_dice(text)

    def test_average_and_maximum(self) -> None:
        expr = parse_dice("2d6+3")
        assert expr.average == 11
        assert expr.maximum == 15

    def test_str(self) -> None:
        assert str(parse_dice("2d6-1")) == "2d6-1"
        assert str(parse_dice("1d8").with_count(3)) == "3d8"


class TestHelpers:
    @pytest.mark.parametrize(("sides", "expected"), [(6, 4), (8, 5), (10, 6), (12, 7)])
    def test_average_die(self, sides: int, expected: int) -> None:
        assert average_die(sides) == expected

    def test_find_dice(self) -> None:
        assert find_dice("+1d6 per slot level above 1st") == (1, 6)
        assert find_dice("Duration increases") is None
