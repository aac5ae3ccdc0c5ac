"""dnd_sheet - D&D 5e character sheet for the terminal.

Characters are stored in a local SQLite database and edited through a
keyboard-driven interface. The rules engine is plain Python and can be
used without the UI.

Example:
    >>> from dnd_sheet import Character, get_catalog, get_store
    >>> hero = Character.create("Thorin", race="Dwarf", class_name="Fighter", level=3)
    >>> get_store().save(hero)

Modules:
    core: Configuration, logging, and base exceptions.
    models: Pydantic V2 character record.
    catalog: Read-only game content.
    engine: Rules derived from the record.
    storage: SQLite persistence.
    ui: Screens, router and the textual adapter.
"""

from __future__ import annotations

from dnd_sheet.catalog.catalog import Catalog, get_catalog
from dnd_sheet.core.config import Settings, get_settings
from dnd_sheet.core.exceptions import SheetError
from dnd_sheet.core.logging import configure_logging, get_logger
from dnd_sheet.models.character import Character
from dnd_sheet.storage.database import CharacterStore, get_store


__version__ = "0.1.0"
__all__ = [
    "__version__",
    "SheetError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "Character",
    "Catalog",
    "get_catalog",
    "CharacterStore",
    "get_store",
]
