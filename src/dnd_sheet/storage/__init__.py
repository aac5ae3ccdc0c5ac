"""Storage module for character persistence.

Provides SQLite-based storage for character records, one JSON document
per character plus summary columns for the selection list.
"""

from dnd_sheet.storage.database import (
    CharacterStore,
    CharacterSummary,
    get_store,
)

__all__ = [
    "CharacterStore",
    "CharacterSummary",
    "get_store",
]
