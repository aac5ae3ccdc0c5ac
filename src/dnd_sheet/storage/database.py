"""SQLite persistence for character records.

Each character is stored as one row: a few indexed columns for the
selection list plus the full record as JSON.

Storage location: ~/.dnd_sheet/characters.db (see StorageSettings)
"""

from __future__ import annotations

import sqlite3
from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from dnd_sheet.core.config import get_settings
from dnd_sheet.core.exceptions import CharacterNotFoundError, PersistenceError
from dnd_sheet.core.logging import get_logger
from dnd_sheet.models.character import Character


logger = get_logger(__name__)


# =============================================================================
# Data Classes
# =============================================================================


@dataclass
class CharacterSummary:
    """One row of the character selection list.

    Attributes:
        id: Character id.
        name: Character name.
        race: Race name.
        class_name: Class name.
        level: Character level.
        updated_at: When the record was last saved.
    """

    id: str
    name: str
    race: str
    class_name: str
    level: int
    updated_at: datetime

    @classmethod
    def from_row(cls, row: tuple[Any, ...]) -> CharacterSummary:
        """Create from database row."""
        return cls(
            id=row[0],
            name=row[1],
            race=row[2],
            class_name=row[3],
            level=int(row[4]),
            updated_at=datetime.fromisoformat(row[5]),
        )

    @property
    def label(self) -> str:
        return f"{self.name} - Level {self.level} {self.race} {self.class_name}".strip()


# =============================================================================
# Store
# =============================================================================


class CharacterStore:
    """SQLite store of character records.

    Args:
        db_path: Path to the database file. Defaults to the configured path.
    """

    SCHEMA_VERSION = 1

    def __init__(self, db_path: str | Path | None = None) -> None:
        if db_path is None:
            self.db_path = get_settings().storage.database_path
        else:
            self.db_path = Path(db_path)

        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_schema()

        logger.info("Character store initialized", path=str(self.db_path))

    @contextmanager
    def _get_connection(self) -> Generator[sqlite3.Connection, None, None]:
        """Get a connection that commits on success and always closes."""
        try:
            conn = sqlite3.connect(str(self.db_path))
        except sqlite3.Error as e:
            raise PersistenceError(f"Cannot open database: {e}", details={"path": str(self.db_path)}) from e
        try:
            yield conn
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise PersistenceError(f"Database error: {e}") from e
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def _init_schema(self) -> None:
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS schema_version (
                    version INTEGER PRIMARY KEY
                )
            """)
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS characters (
                    id TEXT PRIMARY KEY,
                    name TEXT NOT NULL,
                    race TEXT NOT NULL DEFAULT '',
                    class_name TEXT NOT NULL DEFAULT '',
                    level INTEGER NOT NULL DEFAULT 1,
                    data_json TEXT NOT NULL,
                    created_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            """)
            cursor.execute("""
                CREATE INDEX IF NOT EXISTS idx_characters_updated
                ON characters(updated_at DESC)
            """)
            cursor.execute(
                "INSERT OR REPLACE INTO schema_version (version) VALUES (?)",
                (self.SCHEMA_VERSION,),
            )

    # =========================================================================
    # Character Operations
    # =========================================================================

    def list(self) -> list[CharacterSummary]:
        """All stored characters, most recently updated first.

        Rows that cannot be read are skipped with a warning.
        """
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("""
                SELECT id, name, race, class_name, level, updated_at
                FROM characters ORDER BY updated_at DESC
            """)
            rows = cursor.fetchall()

        summaries: list[CharacterSummary] = []
        for row in rows:
            try:
                summaries.append(CharacterSummary.from_row(tuple(row)))
            except (TypeError, ValueError) as e:
                logger.warning("Skipping unreadable character row", id=row[0], error=str(e))
        return summaries

    def load(self, character_id: str) -> Character:
        """Load a character record.

        Raises:
            CharacterNotFoundError: If no record has that id.
            PersistenceError: If the stored JSON is corrupt.
        """
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT data_json FROM characters WHERE id = ?", (character_id,))
            row = cursor.fetchone()

        if row is None:
            raise CharacterNotFoundError(f"Character not found: {character_id}", character_id=character_id)

        try:
            return Character.model_validate_json(row[0])
        except PydanticValidationError as e:
            raise PersistenceError(
                "Stored character data is corrupt",
                character_id=character_id,
                details={"errors": e.error_count()},
            ) from e

    def save(self, character: Character) -> str:
        """Insert or replace a character record.

        Returns:
            The character id.
        """
        data_json = character.model_dump_json()
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("""
                INSERT INTO characters
                    (id, name, race, class_name, level, data_json, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    name = excluded.name,
                    race = excluded.race,
                    class_name = excluded.class_name,
                    level = excluded.level,
                    data_json = excluded.data_json,
                    updated_at = excluded.updated_at
            """, (
                character.id,
                character.info.name,
                character.info.race,
                character.info.class_name,
                character.info.level,
                data_json,
                character.created_at.isoformat(),
                character.updated_at.isoformat(),
            ))

        logger.debug("Character saved", id=character.id, name=character.info.name)
        return character.id

    def autosave(self, character: Character) -> str:
        """Stamp the record as updated, then save it."""
        character.mark_updated()
        return self.save(character)

    def delete(self, character_id: str) -> bool:
        """Delete a character.

        Returns:
            True if deleted, False if not found.
        """
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM characters WHERE id = ?", (character_id,))
            deleted = cursor.rowcount > 0

        if deleted:
            logger.info("Character deleted", id=character_id)
        return deleted

    def exists(self, character_id: str) -> bool:
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT 1 FROM characters WHERE id = ?", (character_id,))
            return cursor.fetchone() is not None

    def count(self) -> int:
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT COUNT(*) FROM characters")
            return cursor.fetchone()[0]


# =============================================================================
# Singleton Instance
# =============================================================================


_store_instance: CharacterStore | None = None


def get_store() -> CharacterStore:
    """Get the global character store.

    Returns:
        CharacterStore singleton instance.
    """
    global _store_instance

    if _store_instance is None:
        _store_instance = CharacterStore()

    return _store_instance


__all__ = [
    "CharacterSummary",
    "CharacterStore",
    "get_store",
]
