"""Pytest configuration and shared fixtures.

This module provides common fixtures and configuration for all tests
in the character sheet test suite.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from dnd_sheet.catalog.catalog import Catalog
from dnd_sheet.core.config import clear_settings_cache
from dnd_sheet.models.character import Character, Feature, Proficiencies
from dnd_sheet.models.combat import CombatStats, HitDice, HitPoints
from dnd_sheet.models.abilities import AbilityScores, SavingThrows
from dnd_sheet.models.enums import ItemType, ProficiencyLevel, RechargeType, Skill, WeaponCategory
from dnd_sheet.models.inventory import Currency, Inventory, Item
from dnd_sheet.models.spellcasting import KnownSpell, PactMagic, SlotTracker, Spellcasting
from dnd_sheet.storage.database import CharacterStore
from dnd_sheet.ui.base import ScreenController
from dnd_sheet.ui.events import KeyEvent, ScreenResult


if TYPE_CHECKING:
    from collections.abc import Callable, Generator
    from pathlib import Path


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Point settings at a temp directory and reset the cache around each test."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("DND_SHEET_DATABASE_PATH", str(tmp_path / "characters.db"))
    monkeypatch.setenv("DND_SHEET_LOG_FILE", str(tmp_path / "sheet.log"))
    clear_settings_cache()
    yield
    clear_settings_cache()


# =============================================================================
# Collaborator Fixtures
# =============================================================================


@pytest.fixture
def store(tmp_path: Path) -> CharacterStore:
    """A character store backed by a fresh database file."""
    return CharacterStore(tmp_path / "test.db")


@pytest.fixture
def catalog() -> Catalog:
    """The built-in catalog with no overrides."""
    return Catalog()


# =============================================================================
# Character Fixtures
# =============================================================================


@pytest.fixture
def longsword() -> Item:
    return Item(
        id="longsword",
        name="Longsword",
        item_type=ItemType.WEAPON,
        weight=3.0,
        equipment_slot="main_hand",
        damage="1d8",
        damage_type="slashing",
        weapon_properties=["Versatile"],
        weapon_category=WeaponCategory.MARTIAL_MELEE,
    )


@pytest.fixture
def fighter(longsword: Item) -> Character:
    """Level 3 dwarf fighter: STR 16, CON 14, longsword, shield and a pack.

    Returns:
        Character with 28/28 HP and 3d10 hit dice.
    """
    character = Character.create("Thorin", race="Dwarf", class_name="Fighter", level=3)
    character.ability_scores = AbilityScores(
        strength=16, dexterity=12, constitution=14, intelligence=10, wisdom=12, charisma=8
    )
    character.saving_throws = SavingThrows(strength=True, constitution=True)
    character.skills.set_level(Skill.ATHLETICS, ProficiencyLevel.PROFICIENT)
    character.skills.set_level(Skill.PERCEPTION, ProficiencyLevel.PROFICIENT)
    character.combat = CombatStats(
        hit_points=HitPoints(maximum=28, current=28),
        armor_class=18,
        hit_dice=HitDice(total=3, remaining=3, die_type="d10"),
    )
    character.proficiencies = Proficiencies(
        armor=["All armor", "Shields"],
        weapons=["Simple weapons", "Martial weapons"],
        languages=["Common", "Dwarvish"],
    )
    character.inventory = Inventory(
        items=[
            longsword,
            Item(id="shield", name="Shield", item_type=ItemType.SHIELD, weight=6.0, equipment_slot="off_hand"),
            Item(
                id="backpack",
                name="Backpack",
                weight=5.0,
                contents=[
                    Item(id="torch", name="Torch", quantity=10, weight=1.0),
                    Item(id="rations", name="Rations (1 day)", quantity=5, weight=2.0),
                ],
            ),
            Item(id="rope", name="Rope, Hempen (50 feet)", weight=10.0),
        ],
        currency=Currency(gp=15, sp=8, cp=20),
    )
    character.features.class_features = [
        Feature(name="Second Wind", source="Fighter 1", max_uses=1, uses=0, recharge=RechargeType.SHORT_REST),
        Feature(name="Action Surge", source="Fighter 2", max_uses=1, uses=0, recharge=RechargeType.SHORT_REST),
        Feature(name="Improved Critical", source="Champion 3"),
    ]
    character.features.racial_traits = [Feature(name="Darkvision", source="Dwarf")]
    character.info.subclass = "Champion"
    return character


@pytest.fixture
def wizard() -> Character:
    """Level 5 wizard with INT 16, slots 4/3/2 and a mix of prepared spells."""
    character = Character.create("Elara", race="Elf", class_name="Wizard", level=5)
    character.ability_scores = AbilityScores(intelligence=16, dexterity=14, constitution=12)
    character.combat = CombatStats(
        hit_points=HitPoints(maximum=27, current=27),
        hit_dice=HitDice(total=5, remaining=5, die_type="d6"),
    )
    character.spellcasting = Spellcasting(
        ability="intelligence",
        slots={
            1: SlotTracker(total=4, remaining=4),
            2: SlotTracker(total=3, remaining=3),
            3: SlotTracker(total=2, remaining=2),
        },
        cantrips_known=["Fire Bolt", "Mage Hand"],
        known_spells=[
            KnownSpell(name="Magic Missile", level=1, prepared=True),
            KnownSpell(name="Shield", level=1, prepared=True),
            KnownSpell(name="Detect Magic", level=1, ritual=True),
            KnownSpell(name="Scorching Ray", level=2),
            KnownSpell(name="Fireball", level=3, prepared=True),
        ],
        prepares_spells=True,
        max_prepared=8,
        ritual_caster=True,
        ritual_caster_unprepared=True,
    )
    return character


@pytest.fixture
def warlock() -> Character:
    """Level 3 warlock with two level 2 pact slots and no regular slots."""
    character = Character.create("Morrow", race="Tiefling", class_name="Warlock", level=3)
    character.ability_scores = AbilityScores(charisma=16, constitution=14)
    character.combat = CombatStats(
        hit_points=HitPoints(maximum=24, current=24),
        hit_dice=HitDice(total=3, remaining=3, die_type="d8"),
    )
    character.spellcasting = Spellcasting(
        ability="charisma",
        pact_magic=PactMagic(slot_level=2, total=2, remaining=2),
        cantrips_known=["Eldritch Blast"],
        known_spells=[
            KnownSpell(name="Hex", level=1),
            KnownSpell(name="Hellish Rebuke", level=1),
            KnownSpell(name="Misty Step", level=2),
        ],
    )
    return character


# =============================================================================
# Screen Fixtures
# =============================================================================


@pytest.fixture
def make_screen(store: CharacterStore, catalog: Catalog) -> Callable[..., ScreenController]:
    """Build a screen controller wired to the test store and catalog."""

    def _make(cls: type[ScreenController], record: Character | None = None) -> ScreenController:
        if record is not None:
            store.save(record)
        return cls(record, store, catalog, width=120, height=40)

    return _make


@pytest.fixture
def press() -> Callable[..., ScreenResult]:
    """Feed keys to a controller and return the last result.

    Single characters arrive as printable key events, anything longer
    ('enter', 'up', 'ctrl+s') as a named key.
    """

    def _press(controller: ScreenController, *pressed: str) -> ScreenResult:
        result = ScreenResult()
        for key in pressed:
            character = key if len(key) == 1 else None
            result = controller.handle(KeyEvent(key, character))
        return result

    return _press
