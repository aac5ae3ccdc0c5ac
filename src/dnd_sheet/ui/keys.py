"""Key names and key groups shared by the screens.

Names follow textual's conventions. Printable keys are normalised to the
character itself, so '+' arrives as '+' rather than 'plus'.
"""

from __future__ import annotations


UP = frozenset({"up", "k"})
DOWN = frozenset({"down", "j"})
LEFT = frozenset({"left", "h"})
RIGHT = frozenset({"right", "l"})

ENTER = "enter"
ESCAPE = "escape"
BACKSPACE = "backspace"
DELETE = "delete"
TAB = "tab"
SHIFT_TAB = "shift+tab"
FORCE_QUIT = "ctrl+c"
SAVE = "ctrl+s"

YES = ("y", "Y")
YES_OR_ENTER = ("y", "Y", ENTER)

# textual names for keys whose character is also delivered
_ALIASES: dict[str, str] = {
    "return": ENTER,
    "esc": ESCAPE,
    "ctrl+h": BACKSPACE,
    "backtab": SHIFT_TAB,
}


def normalize_key(key: str, character: str | None = None) -> str:
    """Map a textual key event onto the names controllers match on.

    Example:
        >>> normalize_key("plus", "+")
        '+'
        >>> normalize_key("up", None)
        'up'
    """
    key = _ALIASES.get(key, key)
    if key in (ENTER, TAB, BACKSPACE, ESCAPE):
        return key
    if character is not None and len(character) == 1 and character.isprintable():
        return character
    return key


__all__ = [
    "UP",
    "DOWN",
    "LEFT",
    "RIGHT",
    "ENTER",
    "ESCAPE",
    "BACKSPACE",
    "DELETE",
    "TAB",
    "SHIFT_TAB",
    "FORCE_QUIT",
    "SAVE",
    "YES",
    "YES_OR_ENTER",
    "normalize_key",
]
