"""Read-only catalog of D&D 5E content.

Exports:
    Catalog: Lazily loaded weapons, armor, gear, spells, classes, races,
        backgrounds and conditions.
    get_catalog: Settings-driven catalog singleton.
    Entry models: WeaponEntry, ArmorEntry, GearEntry, SpellEntry, ...
"""

from __future__ import annotations

from dnd_sheet.catalog.catalog import Catalog, get_catalog
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
    SubclassEntry,
    TraitEntry,
    WeaponEntry,
)


__all__ = [
    "Catalog",
    "get_catalog",
    "CatalogEntry",
    "WeaponEntry",
    "ArmorEntry",
    "GearEntry",
    "ItemEntry",
    "SpellEntry",
    "ClassEntry",
    "SubclassEntry",
    "TraitEntry",
    "RaceEntry",
    "BackgroundEntry",
    "ConditionEntry",
]
