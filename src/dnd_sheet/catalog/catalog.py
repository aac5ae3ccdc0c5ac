"""Read-only catalog of game content.

Tables are validated lazily on first access and cached for the life of
the catalog. A directory of JSON files can replace whole categories: a
file named ``spells.json`` replaces the built-in spell table, and so on.

Example:
    >>> catalog = get_catalog()
    >>> catalog.find_spell("magic missile").level
    1
    >>> [e.name for e in catalog.search_items("sword")]
    ['Greatsword', 'Longsword', 'Shortsword']
"""

from __future__ import annotations

import json
import threading
import uuid
from functools import lru_cache
from pathlib import Path
from typing import Any, TypeVar

from pydantic import ValidationError as PydanticValidationError

from dnd_sheet.catalog import data
from dnd_sheet.catalog.entries import (
    ArmorEntry,
    BackgroundEntry,
    CatalogEntry,
    ClassEntry,
    ConditionEntry,
    GearEntry,
    ItemEntry,
    RaceEntry,
    SpellEntry,
    WeaponEntry,
)
from dnd_sheet.core.config import get_settings
from dnd_sheet.core.constants import SEARCH_RESULT_LIMIT
from dnd_sheet.core.exceptions import CatalogEntryNotFoundError, CatalogError
from dnd_sheet.core.logging import get_logger
from dnd_sheet.models.enums import EquipmentSlot, ItemType
from dnd_sheet.models.inventory import Currency, Item


logger = get_logger(__name__)

EntryT = TypeVar("EntryT", bound=CatalogEntry)

# category -> (entry model, built-in table, key field the table is indexed by)
_CATEGORIES: dict[str, tuple[type[CatalogEntry], dict[str, Any], str]] = {
    "weapons": (WeaponEntry, data.WEAPONS, "id"),
    "armor": (ArmorEntry, data.ARMOR, "id"),
    "gear": (GearEntry, data.GEAR, "id"),
    "tools": (GearEntry, data.TOOLS, "id"),
    "packs": (GearEntry, data.PACKS, "id"),
    "spells": (SpellEntry, data.SPELLS, "name"),
    "conditions": (ConditionEntry, data.CONDITIONS, "name"),
    "classes": (ClassEntry, data.CLASSES, "name"),
    "races": (RaceEntry, data.RACES, "name"),
    "backgrounds": (BackgroundEntry, data.BACKGROUNDS, "name"),
}

_KIND_DEFAULTS: dict[str, str] = {"tools": "tool", "packs": "pack", "gear": "gear"}


def _rows_from_table(table: dict[str, Any], key_field: str) -> list[dict[str, Any]]:
    rows: list[dict[str, Any]] = []
    for key, value in table.items():
        row = {"description": value} if isinstance(value, str) else dict(value)
        row.setdefault(key_field, key)
        rows.append(row)
    return rows


def _rows_from_json(payload: Any, category: str, key_field: str) -> list[dict[str, Any]]:
    """Accept a list, a keyed table, or ``{category: list}``."""
    if isinstance(payload, dict) and isinstance(payload.get(category), list):
        payload = payload[category]
    if isinstance(payload, list):
        return [dict(row) for row in payload]
    if isinstance(payload, dict):
        return _rows_from_table(payload, key_field)
    raise CatalogError(f"Unsupported layout in {category}.json", category=category)


class Catalog:
    """Static game content with lazy, thread-safe loading.

    Args:
        override_dir: Optional directory of JSON files replacing built-in
            categories.
    """

    def __init__(self, override_dir: Path | None = None) -> None:
        self._override_dir = override_dir
        self._cache: dict[str, list[CatalogEntry]] = {}
        self._lock = threading.Lock()

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    def _load_rows(self, category: str) -> list[dict[str, Any]]:
        _, table, key_field = _CATEGORIES[category]
        if self._override_dir is not None:
            path = self._override_dir / f"{category}.json"
            if path.is_file():
                try:
                    payload = json.loads(path.read_text(encoding="utf-8"))
                except (OSError, json.JSONDecodeError) as e:
                    raise CatalogError(
                        f"Failed to read {path.name}: {e}",
                        category=category,
                        details={"path": str(path)},
                    ) from e
                logger.info("Catalog override loaded", category=category, path=str(path))
                return _rows_from_json(payload, category, key_field)
        return _rows_from_table(table, key_field)

    def _entries(self, category: str) -> list[CatalogEntry]:
        with self._lock:
            cached = self._cache.get(category)
            if cached is not None:
                return cached

            model, _, _ = _CATEGORIES[category]
            kind = _KIND_DEFAULTS.get(category)
            entries: list[CatalogEntry] = []
            for row in self._load_rows(category):
                if kind is not None:
                    row.setdefault("kind", kind)
                try:
                    entries.append(model.model_validate(row))
                except PydanticValidationError as e:
                    raise CatalogError(
                        f"Invalid {category} entry: {row.get('name', '?')}",
                        category=category,
                        details={"errors": e.error_count()},
                    ) from e

            self._cache[category] = entries
            logger.debug("Catalog category loaded", category=category, count=len(entries))
            return entries

    def clear_cache(self) -> None:
        """Drop cached tables so the next access reloads them."""
        with self._lock:
            self._cache.clear()

    # -------------------------------------------------------------------------
    # Category accessors
    # -------------------------------------------------------------------------

    def weapons(self) -> list[WeaponEntry]:
        return self._entries("weapons")  # type: ignore[return-value]

    def armor(self) -> list[ArmorEntry]:
        return self._entries("armor")  # type: ignore[return-value]

    def gear(self) -> list[GearEntry]:
        """Adventuring gear followed by equipment packs."""
        return self._entries("gear") + self._entries("packs")  # type: ignore[operator]

    def tools(self) -> list[GearEntry]:
        return self._entries("tools")  # type: ignore[return-value]

    def spells(self) -> list[SpellEntry]:
        return self._entries("spells")  # type: ignore[return-value]

    def conditions(self) -> list[ConditionEntry]:
        return self._entries("conditions")  # type: ignore[return-value]

    def classes(self) -> list[ClassEntry]:
        return self._entries("classes")  # type: ignore[return-value]

    def races(self) -> list[RaceEntry]:
        return self._entries("races")  # type: ignore[return-value]

    def backgrounds(self) -> list[BackgroundEntry]:
        return self._entries("backgrounds")  # type: ignore[return-value]

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    @staticmethod
    def _by_name(entries: list[EntryT], name: str) -> EntryT | None:
        wanted = name.strip().lower()
        for entry in entries:
            if entry.name.lower() == wanted:
                return entry
        return None

    def get_spell(self, name: str) -> SpellEntry | None:
        return self._by_name(self.spells(), name)

    def find_spell(self, name: str) -> SpellEntry:
        """Look up a spell by case-insensitive name.

        Raises:
            CatalogEntryNotFoundError: If no spell has that name.
        """
        entry = self.get_spell(name)
        if entry is None:
            raise CatalogEntryNotFoundError(f"Spell not found: {name}", name=name, category="spells")
        return entry

    def get_class(self, name: str) -> ClassEntry | None:
        return self._by_name(self.classes(), name)

    def get_race(self, name: str) -> RaceEntry | None:
        return self._by_name(self.races(), name)

    def get_condition(self, name: str) -> ConditionEntry | None:
        return self._by_name(self.conditions(), name)

    def find_gear(self, item_id: str) -> GearEntry | None:
        for entry in self._entries("gear") + self._entries("tools"):
            if getattr(entry, "id", None) == item_id:
                return entry  # type: ignore[return-value]
        return None

    # -------------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------------

    def search_items(self, query: str, limit: int = SEARCH_RESULT_LIMIT) -> list[ItemEntry]:
        """Search purchasable items by name substring.

        Each category contributes at most ``limit`` matches; the groups are
        concatenated as weapons, armor, gear, then tools.
        """
        wanted = query.strip().lower()
        if not wanted:
            return []
        results: list[ItemEntry] = []
        for group in (self.weapons(), self.armor(), self.gear(), self.tools()):
            matches = [entry for entry in group if wanted in entry.name.lower()]
            results.extend(matches[:limit])
        return results

    def search_spells(self, query: str, class_name: str, limit: int = SEARCH_RESULT_LIMIT) -> list[SpellEntry]:
        """Spells whose name contains query and whose class list has class_name."""
        wanted = query.strip().lower()
        if not wanted:
            return []
        results: list[SpellEntry] = []
        for entry in self.spells():
            if wanted in entry.name.lower() and entry.available_to(class_name):
                results.append(entry)
                if len(results) >= limit:
                    break
        return results

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def to_item(self, entry: ItemEntry) -> Item:
        """Build a fresh inventory item, quantity 1, from a catalog entry.

        Packs become containers holding one of each listed gear item.
        """
        base: dict[str, Any] = {
            "id": uuid.uuid4().hex,
            "name": entry.name,
            "description": entry.description,
            "weight": entry.weight,
            "value": Currency.model_validate(entry.cost),
        }

        if isinstance(entry, WeaponEntry):
            weapon_range = ""
            if entry.range_normal:
                weapon_range = f"{entry.range_normal}/{entry.range_long}"
            return Item(
                **base,
                item_type=ItemType.WEAPON,
                equipment_slot=EquipmentSlot.MAIN_HAND,
                damage=entry.damage,
                damage_type=entry.damage_type,
                weapon_properties=list(entry.properties),
                weapon_category=entry.category,
                range=weapon_range,
            )

        if isinstance(entry, ArmorEntry):
            if entry.category == "shield":
                return Item(
                    **base,
                    item_type=ItemType.SHIELD,
                    equipment_slot=EquipmentSlot.OFF_HAND,
                    armor_class=entry.base_ac,
                )
            return Item(
                **base,
                item_type=ItemType.ARMOR,
                equipment_slot=EquipmentSlot.BODY,
                armor_class=entry.base_ac,
                stealth_disadvantage=entry.stealth_disadvantage,
            )

        item_type = ItemType.TOOL if entry.kind == "tool" else ItemType.GENERAL
        contents: list[Item] = []
        for content_id in entry.contents:
            content = self.find_gear(content_id)
            if content is None:
                logger.warning("Pack content missing from catalog", pack=entry.id, item=content_id)
                continue
            contents.append(self.to_item(content))
        return Item(**base, item_type=item_type, contents=contents)


@lru_cache(maxsize=1)
def get_catalog() -> Catalog:
    """Get the cached catalog configured from settings."""
    settings = get_settings()
    return Catalog(settings.storage.catalog_path)


__all__ = [
    "Catalog",
    "get_catalog",
]
