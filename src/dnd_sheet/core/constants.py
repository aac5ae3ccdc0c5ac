"""Display limits and D&D 5E rules constants."""

from __future__ import annotations

# =============================================================================
# Display Limits
# =============================================================================

SEARCH_MIN_CHARS = 2
"""Characters that must be typed before a catalog search runs."""

SEARCH_RESULT_LIMIT = 10
"""Maximum number of catalog search results."""

HP_BAR_MIN_WIDTH = 10
"""Smallest HP bar drawn, in columns."""

HP_BAR_PADDING = 6
"""Columns reserved around the HP bar for its label."""

# =============================================================================
# D&D 5E Rules Constants
# =============================================================================

MIN_ABILITY_SCORE = 1
"""Minimum ability score."""

MAX_ABILITY_SCORE = 30
"""Maximum ability score."""

MIN_CHARACTER_LEVEL = 1
"""Minimum character level."""

MAX_CHARACTER_LEVEL = 20
"""Maximum character level in D&D 5E."""

MAX_SPELL_LEVEL = 9
"""Highest spell slot level."""

MAX_DEATH_SAVES = 3
"""Death saving throws to stabilize or die."""

MAX_EXHAUSTION = 6
"""Exhaustion level at which a creature dies."""

MAX_ATTUNED_ITEMS = 3
"""Soft limit on attuned magic items."""

DEFAULT_SPEED = 30
"""Default walking speed in feet."""

DEFAULT_SPELL_SAVE_DC = 10
"""Save DC shown when a character has no spellcasting ability."""

RITUAL_OPTION = 0
"""Cast option value meaning "cast as a ritual, no slot"."""

# Experience required to reach each level
XP_THRESHOLDS: dict[int, int] = {
    1: 0,
    2: 300,
    3: 900,
    4: 2700,
    5: 6500,
    6: 14000,
    7: 23000,
    8: 34000,
    9: 48000,
    10: 64000,
    11: 85000,
    12: 100000,
    13: 120000,
    14: 140000,
    15: 165000,
    16: 195000,
    17: 225000,
    18: 265000,
    19: 305000,
    20: 355000,
}

# =============================================================================
# Currency
# =============================================================================

# Value of one coin in copper pieces
COIN_VALUES_CP: dict[str, int] = {
    "cp": 1,
    "sp": 10,
    "ep": 50,
    "gp": 100,
    "pp": 1000,
}


__all__ = [
    # Display
    "SEARCH_MIN_CHARS",
    "SEARCH_RESULT_LIMIT",
    "HP_BAR_MIN_WIDTH",
    "HP_BAR_PADDING",
    # Rules
    "MIN_ABILITY_SCORE",
    "MAX_ABILITY_SCORE",
    "MIN_CHARACTER_LEVEL",
    "MAX_CHARACTER_LEVEL",
    "MAX_SPELL_LEVEL",
    "MAX_DEATH_SAVES",
    "MAX_EXHAUSTION",
    "MAX_ATTUNED_ITEMS",
    "DEFAULT_SPEED",
    "DEFAULT_SPELL_SAVE_DC",
    "RITUAL_OPTION",
    "XP_THRESHOLDS",
    # Currency
    "COIN_VALUES_CP",
]
