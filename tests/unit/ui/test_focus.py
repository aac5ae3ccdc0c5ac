"""Tests for focus rings and tab strips."""

from __future__ import annotations

import pytest

from dnd_sheet.ui.focus import FocusRing, TabStrip, clamp_cursor


class TestClampCursor:
    @pytest.mark.parametrize(
        ("cursor", "count", "expected"),
        [(0, 0, 0), (-1, 5, 0), (3, 5, 3), (9, 5, 4), (2, 1, 0)],
    )
    def test_clamp(self, cursor: int, count: int, expected: int) -> None:
        assert clamp_cursor(cursor, count) == expected


class TestFocusRing:
    """Tests for FocusRing."""

    def test_next_wraps(self) -> None:
        ring = FocusRing(["a", "b", "c"])
        assert [ring.next(), ring.next(), ring.next()] == ["b", "c", "a"]

    def test_previous_wraps(self) -> None:
        ring = FocusRing(["a", "b", "c"])
        assert ring.previous() == "c"

    def test_focus(self) -> None:
        ring = FocusRing(["a", "b", "c"])
        ring.focus("b")
        assert ring.index == 1
        assert ring.next() == "c"

    def test_empty_rejected(self) -> None:
        with pytest.raises(ValueError):
            FocusRing([])


class TestTabStrip:
    def test_wrapping(self) -> None:
        strip = TabStrip(["A", "BA", "R", "O"], wrap=True)
        assert strip.move(-1) is True
        assert strip.current == "O"
        strip.move(1)
        assert strip.current == "A"

    def test_clamping(self) -> None:
        strip = TabStrip(["Racial", "Class"], wrap=False)
        assert strip.move(-1) is False
        assert strip.move(1) is True
        assert strip.move(1) is False
        assert strip.current == "Class"
