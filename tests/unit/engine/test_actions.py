"""Tests for the action economy listing."""

from __future__ import annotations

from dnd_sheet.catalog.catalog import Catalog
from dnd_sheet.engine.actions import ActionKind, ActionType, build_actions, castable_spells
from dnd_sheet.models.character import Character


STANDARD_ACTION_NAMES = [
    "Dash",
    "Disengage",
    "Dodge",
    "Grapple",
    "Help",
    "Hide",
    "Influence",
    "Magic",
    "Ready",
    "Search",
    "Shove",
    "Study",
    "Utilize",
]


class TestBuildActions:
    """Tests for each action tab."""

    def test_fighter_action_tab(self, fighter: Character, catalog: Catalog) -> None:
        fighter.inventory.equip("longsword", "main_hand")

        items = build_actions(fighter, catalog, ActionType.ACTION)

        assert [i.name for i in items] == ["Unarmed Strike", "Longsword", *STANDARD_ACTION_NAMES]
        assert items[1].kind == ActionKind.WEAPON
        assert items[1].summary == "Longsword: Hit +5, Dmg 1d8+3 slashing"

    def test_wizard_action_tab(self, wizard: Character, catalog: Catalog) -> None:
        names = [i.name for i in build_actions(wizard, catalog, ActionType.ACTION)]
        assert names[:6] == ["Unarmed Strike", "Fire Bolt", "Mage Hand", "Magic Missile", "Detect Magic", "Fireball"]
        assert "Scorching Ray" not in names

    def test_reaction_tab(self, wizard: Character, catalog: Catalog) -> None:
        names = [i.name for i in build_actions(wizard, catalog, "Reaction")]
        assert names == ["Shield", "Opportunity Attack"]

    def test_bonus_action_tab(self, warlock: Character, catalog: Catalog) -> None:
        names = [i.name for i in build_actions(warlock, catalog, ActionType.BONUS)]
        assert names == ["Hex", "Misty Step", "Offhand Attack"]

    def test_other_tab_is_empty(self, fighter: Character, catalog: Catalog) -> None:
        assert build_actions(fighter, catalog, ActionType.OTHER) == []

    def test_status_text(self, fighter: Character, catalog: Catalog) -> None:
        items = build_actions(fighter, catalog, ActionType.ACTION)
        assert items[0].status_text() == "⚔ Unarmed Strike: Hit +5, Dmg 1+3 bludgeoning"
        assert items[1].status_text() == "📋 Dash: Gain extra movement equal to your Speed"


class TestCastableSpells:
    def test_unknown_spells_skipped(self, wizard: Character, catalog: Catalog) -> None:
        wizard.spellcasting.cantrips_known.append("Homebrew Zap")
        names = [s.name for s in castable_spells(wizard, catalog, "A")]
        assert "Homebrew Zap" not in names

    def test_non_caster(self, fighter: Character, catalog: Catalog) -> None:
        assert castable_spells(fighter, catalog, "A") == []

    def test_spell_summary(self, warlock: Character, catalog: Catalog) -> None:
        items = build_actions(warlock, catalog, ActionType.ACTION)
        blast = next(i for i in items if i.name == "Eldritch Blast")
        assert blast.summary == "Cantrip"
        assert blast.status_text() == "Cantrip"
