"""Focus rings, cursors and tab strips."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Generic, TypeVar


T = TypeVar("T")


def clamp_cursor(cursor: int, count: int) -> int:
    """Clamp a cursor into [0, max(count - 1, 0)]."""
    return max(0, min(cursor, max(count - 1, 0)))


class FocusRing(Generic[T]):
    """Cyclic focus over a screen's panels. next and previous always wrap.

    Example:
        >>> ring = FocusRing(["abilities", "skills", "combat"])
        >>> ring.previous()
        'combat'
    """

    def __init__(self, items: Sequence[T], start: int = 0) -> None:
        if not items:
            raise ValueError("FocusRing needs at least one item")
        self._items = list(items)
        self._index = start % len(self._items)

    @property
    def current(self) -> T:
        return self._items[self._index]

    @property
    def index(self) -> int:
        return self._index

    @property
    def size(self) -> int:
        return len(self._items)

    @property
    def items(self) -> list[T]:
        return list(self._items)

    def next(self) -> T:
        self._index = (self._index + 1) % len(self._items)
        return self.current

    def previous(self) -> T:
        self._index = (self._index - 1) % len(self._items)
        return self.current

    def focus(self, item: T) -> T:
        """Jump straight to item."""
        self._index = self._items.index(item)
        return self.current


class TabStrip(Generic[T]):
    """A row of category tabs.

    Args:
        tabs: Tabs in display order.
        wrap: Whether moving past either end wraps around.
    """

    def __init__(self, tabs: Sequence[T], *, wrap: bool) -> None:
        if not tabs:
            raise ValueError("TabStrip needs at least one tab")
        self.tabs = list(tabs)
        self.wrap = wrap
        self.index = 0

    @property
    def current(self) -> T:
        return self.tabs[self.index]

    def move(self, delta: int) -> bool:
        """Move by delta tabs.

        Returns:
            True if the selected tab changed.
        """
        before = self.index
        if self.wrap:
            self.index = (self.index + delta) % len(self.tabs)
        else:
            self.index = clamp_cursor(self.index + delta, len(self.tabs))
        return self.index != before


__all__ = [
    "clamp_cursor",
    "FocusRing",
    "TabStrip",
]
