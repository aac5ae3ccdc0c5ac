"""HP bar geometry.

The bar splits into current, temporary and empty segments. When current
plus temporary HP exceeds the maximum, the bar's scale stretches so the
whole pool still fits.
"""

from __future__ import annotations

from dataclasses import dataclass

from dnd_sheet.core.constants import HP_BAR_MIN_WIDTH, HP_BAR_PADDING


@dataclass(frozen=True)
class HPBarSegments:
    """Column widths for each bar segment.

    current + temporary + empty always equals bar_width.
    """

    current: int
    temporary: int
    empty: int
    bar_width: int


def hp_bar_segments(
    current: int,
    maximum: int,
    temporary: int,
    width: int,
    *,
    min_width: int = HP_BAR_MIN_WIDTH,
) -> HPBarSegments:
    """Compute HP bar segment widths.

    Args:
        current: Current HP.
        maximum: Maximum HP.
        temporary: Temporary HP.
        width: Panel width available for the bar and its padding.
        min_width: Smallest bar drawn.

    Returns:
        Segment widths that sum to the bar width.

    Example:
        >>> hp_bar_segments(10, 20, 0, 26)
        HPBarSegments(current=10, temporary=0, empty=10, bar_width=20)
    """
    bar_width = max(min_width, width - HP_BAR_PADDING)
    scale = max(maximum, current + temporary)

    current_width = 0
    if scale > 0:
        current_width = bar_width * current // scale
    current_width = max(0, min(bar_width, current_width))

    temp_width = 0
    if temporary > 0 and scale > 0:
        temp_width = max(1, bar_width * temporary // scale)
    temp_width = min(temp_width, bar_width - current_width)

    empty_width = max(0, bar_width - current_width - temp_width)
    return HPBarSegments(
        current=current_width,
        temporary=temp_width,
        empty=empty_width,
        bar_width=bar_width,
    )


def hp_color(current: int, maximum: int) -> str:
    """Rich colour name for the HP readout."""
    if maximum <= 0 or current * 4 <= maximum:
        return "red"
    if current * 2 <= maximum:
        return "yellow"
    return "green"


__all__ = [
    "HPBarSegments",
    "hp_bar_segments",
    "hp_color",
]
