"""Tests for the main sheet screen."""

from __future__ import annotations

import pytest

from dnd_sheet.core.exceptions import PersistenceError
from dnd_sheet.engine.actions import ActionType
from dnd_sheet.models.character import Character
from dnd_sheet.storage.database import CharacterStore
from dnd_sheet.ui.events import Navigation
from dnd_sheet.ui.modals import CastResolution, Confirmation, ListPicker, NumericEntry, RestFlow, RestPhase
from dnd_sheet.ui.screens.main_sheet import MainSheetController, SheetPanel


@pytest.fixture
def sheet(make_screen, fighter: Character) -> MainSheetController:
    return make_screen(MainSheetController, fighter)


@pytest.fixture
def combat_sheet(sheet: MainSheetController) -> MainSheetController:
    sheet.focus.focus(SheetPanel.COMBAT)
    return sheet


class TestFocus:
    """Tests for panel focus and screen accelerators."""

    def test_tab_order(self, sheet: MainSheetController, press) -> None:
        assert sheet.focus.current == SheetPanel.ABILITIES
        press(sheet, "tab")
        assert sheet.focus.current == SheetPanel.SKILLS
        press(sheet, "shift+tab", "shift+tab")
        assert sheet.focus.current == SheetPanel.ACTIONS

    def test_cursors_clamp(self, sheet: MainSheetController, press) -> None:
        press(sheet, "up")
        assert sheet.ability_cursor == 0
        press(sheet, *["down"] * 10)
        assert sheet.ability_cursor == 5

    @pytest.mark.parametrize(
        ("key", "navigation"),
        [
            ("i", Navigation.OPEN_INVENTORY),
            ("s", Navigation.OPEN_SPELLBOOK),
            ("c", Navigation.OPEN_CHARACTER_INFO),
            ("escape", Navigation.BACK_TO_SELECTION),
        ],
    )
    def test_navigation(self, sheet: MainSheetController, press, key: str, navigation: Navigation) -> None:
        assert press(sheet, key).navigation == navigation

    def test_quit_confirmation(self, sheet: MainSheetController, press) -> None:
        press(sheet, "q")
        assert isinstance(sheet.modal, Confirmation)
        assert press(sheet, "enter").navigation == Navigation.QUIT

    def test_quit_declined(self, sheet: MainSheetController, press) -> None:
        result = press(sheet, "q", "n")
        assert result.navigation is None
        assert sheet.modal is None


class TestHitPoints:
    def test_damage(self, combat_sheet: MainSheetController, press, store: CharacterStore) -> None:
        press(combat_sheet, "d")
        assert isinstance(combat_sheet.modal, NumericEntry)

        press(combat_sheet, "1", "0", "enter")

        assert combat_sheet.modal is None
        assert combat_sheet.status == "Took 10 damage"
        assert store.load(combat_sheet.character.id).combat.hit_points.current == 18

    def test_heal_and_temp(self, combat_sheet: MainSheetController, press) -> None:
        combat_sheet.character.combat.hit_points.current = 10
        press(combat_sheet, "h", "5", "enter")
        assert combat_sheet.status == "Healed 5 HP"
        press(combat_sheet, "t", "4", "enter")
        assert combat_sheet.status == "Gained 4 temp HP"
        hp = combat_sheet.character.combat.hit_points
        assert (hp.current, hp.temporary) == (15, 4)

    def test_escape_leaves_record_alone(self, combat_sheet: MainSheetController, press) -> None:
        press(combat_sheet, "d", "9", "escape")
        assert combat_sheet.modal is None
        assert combat_sheet.character.combat.hit_points.current == 28

    def test_hp_keys_only_on_combat_panel(self, sheet: MainSheetController, press) -> None:
        press(sheet, "d")
        assert sheet.modal is None

    def test_save_failure_reported(
        self, combat_sheet: MainSheetController, press, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def fail(character: Character) -> str:
            raise PersistenceError("disk full")

        monkeypatch.setattr(combat_sheet.store, "autosave", fail)
        press(combat_sheet, "d", "3", "enter")
        assert combat_sheet.status == "Save failed: disk full"
        assert combat_sheet.character.combat.hit_points.current == 25


class TestDeathSaves:
    def test_only_at_zero_hp(self, combat_sheet: MainSheetController, press) -> None:
        press(combat_sheet, "1")
        assert combat_sheet.character.combat.death_saves.successes == 0

    def test_successes_stabilise(self, combat_sheet: MainSheetController, press) -> None:
        combat_sheet.character.combat.hit_points.current = 0
        press(combat_sheet, "1")
        assert combat_sheet.status == "Death save success (1/3)"
        press(combat_sheet, "1", "1")
        assert combat_sheet.status == "Stabilized!"
        press(combat_sheet, "1")
        assert combat_sheet.character.combat.death_saves.successes == 3

    def test_failures_kill(self, combat_sheet: MainSheetController, press) -> None:
        combat_sheet.character.combat.hit_points.current = 0
        press(combat_sheet, "2")
        assert combat_sheet.status == "Death save failure (1/3)"
        press(combat_sheet, "2", "2")
        assert combat_sheet.status == "Character has died!"

    def test_reset(self, combat_sheet: MainSheetController, press) -> None:
        combat_sheet.character.combat.death_saves.failures = 2
        press(combat_sheet, "0")
        assert combat_sheet.status == "Death saves reset"
        assert combat_sheet.character.combat.death_saves.failures == 0


class TestConditions:
    def test_add_condition(self, combat_sheet: MainSheetController, press) -> None:
        press(combat_sheet, "+")
        assert isinstance(combat_sheet.modal, ListPicker)
        assert len(combat_sheet.modal.options) == 15

        press(combat_sheet, "down", "enter")

        assert combat_sheet.status == "Added condition: Charmed"
        assert combat_sheet.character.combat.conditions == ["charmed"]

    def test_remove_condition(self, combat_sheet: MainSheetController, press) -> None:
        combat_sheet.character.combat.conditions = ["prone", "stunned"]
        press(combat_sheet, "-")
        assert combat_sheet.modal.options == ["Prone", "Stunned"]
        press(combat_sheet, "enter")
        assert combat_sheet.status == "Removed condition: Prone"
        assert combat_sheet.character.combat.conditions == ["stunned"]

    def test_nothing_to_remove(self, combat_sheet: MainSheetController, press) -> None:
        press(combat_sheet, "-")
        assert combat_sheet.modal is None


class TestRest:
    def test_short_rest(self, sheet: MainSheetController, press) -> None:
        sheet.character.combat.hit_points.current = 10
        press(sheet, "r")
        assert isinstance(sheet.modal, RestFlow)

        press(sheet, "s", "up", "+", "enter")

        assert sheet.modal.phase == RestPhase.RESULT
        assert sheet.modal.summary[0] == "SHORT REST COMPLETE"
        assert sheet.character.combat.hit_points.current == 26

        press(sheet, "x")
        assert sheet.modal is None

    def test_dice_capped_at_remaining(self, sheet: MainSheetController, press) -> None:
        sheet.character.combat.hit_dice.remaining = 1
        press(sheet, "r", "1", "up", "up", "up")
        assert sheet.modal.dice_to_spend == 1

    def test_long_rest(self, sheet: MainSheetController, press) -> None:
        sheet.character.combat.hit_points.current = 1
        press(sheet, "r", "l", "y")
        assert sheet.modal.summary[0] == "LONG REST COMPLETE"
        assert sheet.character.combat.hit_points.current == 28

    def test_back_to_menu(self, sheet: MainSheetController, press) -> None:
        press(sheet, "r", "2", "n")
        assert sheet.modal.phase == RestPhase.MENU
        press(sheet, "escape")
        assert sheet.modal is None


class TestActions:
    def test_tabs_wrap(self, sheet: MainSheetController, press) -> None:
        sheet.focus.focus(SheetPanel.ACTIONS)
        press(sheet, "left")
        assert sheet.action_tabs.current == ActionType.OTHER
        press(sheet, "right", "right")
        assert sheet.action_tabs.current == ActionType.BONUS

    def test_attack_row_shows_status(self, sheet: MainSheetController, press) -> None:
        sheet.character.inventory.equip("longsword", "main_hand")
        sheet.focus.focus(SheetPanel.ACTIONS)
        press(sheet, "down", "enter")
        assert sheet.status == "⚔ Longsword: Hit +5, Dmg 1d8+3 slashing"

    def test_cast_from_actions(self, make_screen, press, wizard: Character) -> None:
        sheet = make_screen(MainSheetController, wizard)
        sheet.focus.focus(SheetPanel.ACTIONS)

        press(sheet, "down", "down", "down", "enter")
        assert isinstance(sheet.modal, CastResolution)
        assert sheet.modal.name == "Magic Missile"

        press(sheet, "down", "enter")
        assert isinstance(sheet.modal, Confirmation)
        assert sheet.status == "Cast Magic Missile with a level 2 slot? (y/n)"

        press(sheet, "y")
        assert sheet.modal is None
        assert sheet.status == "Cast Magic Missile (upcast to level 2) using level 2 slot"
        assert wizard.spellcasting.slot(2).remaining == 2

    @pytest.mark.parametrize("answer", ["n", "escape"])
    def test_declined_upcast_returns_to_slot_choice(self, make_screen, press, wizard: Character, answer: str) -> None:
        sheet = make_screen(MainSheetController, wizard)
        sheet.focus.focus(SheetPanel.ACTIONS)
        press(sheet, "down", "down", "down", "enter", "down", "enter")
        cast = sheet.modal.parent

        press(sheet, answer)

        assert sheet.modal is cast
        assert sheet.modal.cursor == 1
        assert wizard.spellcasting.slot(2).remaining == 3

        press(sheet, "up", "enter")
        assert sheet.modal is None
        assert sheet.status == "Cast Magic Missile using level 1 slot"

    def test_cast_cantrip(self, make_screen, press, wizard: Character) -> None:
        sheet = make_screen(MainSheetController, wizard)
        sheet.focus.focus(SheetPanel.ACTIONS)
        press(sheet, "down", "enter", "enter")
        assert sheet.status == "Cast Fire Bolt (no slot required)"

    def test_cancel_cast(self, make_screen, press, wizard: Character) -> None:
        sheet = make_screen(MainSheetController, wizard)
        sheet.focus.focus(SheetPanel.ACTIONS)
        press(sheet, "down", "down", "down", "enter", "escape")
        assert sheet.status == "Casting cancelled"
        assert wizard.spellcasting.slot(1).remaining == 4
