"""Screen controllers.

Each controller owns one screen's state and turns events into record
changes, status messages, navigation signals and deferred tasks.

Submodules:
    selection: Saved character list
    main_sheet: Abilities, skills, combat and actions
    inventory: Equipment, items and currency
    spellbook: Spell list, preparation and casting
    character_info: Personality and features
    casting: Cast flow shared by the sheet and the spellbook
"""

from __future__ import annotations

from dnd_sheet.ui.screens.character_info import CharacterInfoController
from dnd_sheet.ui.screens.inventory import InventoryController
from dnd_sheet.ui.screens.main_sheet import MainSheetController
from dnd_sheet.ui.screens.selection import SelectionController
from dnd_sheet.ui.screens.spellbook import SpellbookController


__all__ = [
    "SelectionController",
    "MainSheetController",
    "InventoryController",
    "SpellbookController",
    "CharacterInfoController",
]
