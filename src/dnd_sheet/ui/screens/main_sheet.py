"""Main character sheet screen.

Panels: abilities, skills, combat and actions. The combat panel edits HP,
death saves and conditions; the actions panel lists attacks, castable
spells and standard actions per action type.
"""

from __future__ import annotations

from enum import StrEnum

from dnd_sheet.core.logging import get_logger
from dnd_sheet.engine.actions import ACTION_TABS, ActionItem, ActionKind, build_actions
from dnd_sheet.engine.rest import long_rest, short_rest
from dnd_sheet.models.character import Character
from dnd_sheet.models.enums import Ability, Condition, Skill
from dnd_sheet.ui import keys
from dnd_sheet.ui.base import ScreenController
from dnd_sheet.ui.events import KeyEvent, Navigation, ScreenResult
from dnd_sheet.ui.focus import FocusRing, TabStrip, clamp_cursor
from dnd_sheet.ui.modals import (
    CastResolution,
    Confirmation,
    ListPicker,
    NumericEntry,
    NumericPurpose,
    RestFlow,
    RestPhase,
    StepKind,
)
from dnd_sheet.ui.screens.casting import UPCAST_ACTION, begin_cast, cast_key, upcast_key


logger = get_logger(__name__)


class SheetPanel(StrEnum):
    ABILITIES = "abilities"
    SKILLS = "skills"
    COMBAT = "combat"
    ACTIONS = "actions"


_NAVIGATION_KEYS: dict[str, Navigation] = {
    "i": Navigation.OPEN_INVENTORY,
    "s": Navigation.OPEN_SPELLBOOK,
    "c": Navigation.OPEN_CHARACTER_INFO,
}

_HP_KEYS: dict[str, tuple[NumericPurpose, str]] = {
    "d": (NumericPurpose.DAMAGE, "Damage"),
    "h": (NumericPurpose.HEAL, "Heal"),
    "t": (NumericPurpose.TEMP_HP, "Temporary HP"),
}


class MainSheetController(ScreenController):
    """The main sheet for one character."""

    screen_name = "sheet"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.focus: FocusRing[SheetPanel] = FocusRing(list(SheetPanel))
        self.ability_cursor = 0
        self.skill_cursor = 0
        self.action_tabs = TabStrip(ACTION_TABS, wrap=True)
        self.action_cursor = 0

    @property
    def character(self) -> Character:
        assert self.record is not None
        return self.record

    def action_items(self) -> list[ActionItem]:
        return build_actions(self.character, self.catalog, self.action_tabs.current)

    def clamp_cursors(self) -> None:
        self.ability_cursor = clamp_cursor(self.ability_cursor, len(Ability))
        self.skill_cursor = clamp_cursor(self.skill_cursor, len(Skill))
        self.action_cursor = clamp_cursor(self.action_cursor, len(self.action_items()))

    # -------------------------------------------------------------------------
    # Modal keys
    # -------------------------------------------------------------------------

    def on_modal_key(self, event: KeyEvent) -> ScreenResult:
        modal = self.modal
        key = event.key

        if isinstance(modal, Confirmation):
            if modal.action == UPCAST_ACTION:
                upcast_key(self, modal, key)
            elif modal.answer(key):
                return ScreenResult(navigation=Navigation.QUIT)
            else:
                self.close_modal()
                self.status = ""
        elif isinstance(modal, NumericEntry):
            self._numeric_key(modal, key)
        elif isinstance(modal, ListPicker):
            self._picker_key(modal, key)
        elif isinstance(modal, CastResolution):
            cast_key(self, modal, key)
        elif isinstance(modal, RestFlow):
            self._rest_key(modal, key)
        return ScreenResult()

    def _numeric_key(self, modal: NumericEntry, key: str) -> None:
        step = modal.feed(key)
        if step.kind == StepKind.EDITING:
            return
        self.close_modal()
        if step.kind == StepKind.INVALID:
            self.status = "Invalid number"
            return
        if step.kind != StepKind.COMMIT:
            return

        amount = step.value
        combat = self.character.combat
        if modal.purpose == NumericPurpose.DAMAGE:
            combat.take_damage(amount)
            self.status = f"Took {amount} damage"
        elif modal.purpose == NumericPurpose.HEAL:
            combat.heal(amount)
            self.status = f"Healed {amount} HP"
        else:
            combat.add_temporary_hp(amount)
            self.status = f"Gained {amount} temp HP"
        hp = combat.hit_points
        logger.info("HP changed", purpose=str(modal.purpose), amount=amount, hp=hp.current, temp=hp.temporary)
        self._persist()

    def _picker_key(self, modal: ListPicker, key: str) -> None:
        if key == keys.ESCAPE:
            self.close_modal()
        elif key in keys.UP:
            modal.move(-1)
        elif key in keys.DOWN:
            modal.move(1)
        elif key == keys.ENTER:
            self.close_modal()
            condition = Condition(modal.selected)
            combat = self.character.combat
            if modal.purpose == "add_condition":
                if combat.add_condition(condition):
                    self.status = f"Added condition: {condition.display_name}"
            elif combat.remove_condition(condition):
                self.status = f"Removed condition: {condition.display_name}"
            logger.info("Conditions changed", conditions=list(combat.conditions))
            self._persist()

    def _rest_key(self, flow: RestFlow, key: str) -> None:
        if flow.phase == RestPhase.MENU:
            if key in ("s", "1"):
                flow.phase = RestPhase.SHORT
                flow.dice_to_spend = 0
                flow.max_dice = self.character.combat.hit_dice.remaining
            elif key in ("l", "2"):
                flow.phase = RestPhase.LONG
            elif key in (keys.ESCAPE, "q"):
                self.close_modal()
        elif flow.phase == RestPhase.SHORT:
            if key in keys.UP or key in ("+", "="):
                flow.adjust(1)
            elif key in keys.DOWN or key == "-":
                flow.adjust(-1)
            elif key == keys.ENTER:
                result = short_rest(self.character, flow.dice_to_spend)
                flow.summary = result.summary_lines()
                flow.phase = RestPhase.RESULT
                self._persist()
            elif key == keys.ESCAPE:
                flow.phase = RestPhase.MENU
        elif flow.phase == RestPhase.LONG:
            if key in (keys.ENTER, "y"):
                result = long_rest(self.character)
                flow.summary = result.summary_lines()
                flow.phase = RestPhase.RESULT
                self._persist()
            elif key in (keys.ESCAPE, "n"):
                flow.phase = RestPhase.MENU
        else:
            self.close_modal()

    # -------------------------------------------------------------------------
    # Accelerators
    # -------------------------------------------------------------------------

    def on_global_key(self, event: KeyEvent) -> ScreenResult | None:
        key = event.key
        if key == "q":
            self.confirm_quit()
            return ScreenResult()
        if key == keys.ESCAPE:
            return ScreenResult(navigation=Navigation.BACK_TO_SELECTION)
        if key in _NAVIGATION_KEYS:
            return ScreenResult(navigation=_NAVIGATION_KEYS[key])
        if key == "r":
            self.open_modal(RestFlow(max_dice=self.character.combat.hit_dice.remaining))
            return ScreenResult()
        if key == keys.TAB:
            self.focus.next()
            return ScreenResult()
        if key == keys.SHIFT_TAB:
            self.focus.previous()
            return ScreenResult()
        return None

    # -------------------------------------------------------------------------
    # Panels
    # -------------------------------------------------------------------------

    def on_panel_key(self, event: KeyEvent) -> ScreenResult:
        self.status = ""
        panel = self.focus.current
        if panel == SheetPanel.ABILITIES:
            self.ability_cursor = self._move(self.ability_cursor, event.key, len(Ability))
        elif panel == SheetPanel.SKILLS:
            self.skill_cursor = self._move(self.skill_cursor, event.key, len(Skill))
        elif panel == SheetPanel.COMBAT:
            self._combat_key(event.key)
        else:
            self._actions_key(event.key)
        return ScreenResult()

    @staticmethod
    def _move(cursor: int, key: str, count: int) -> int:
        if key in keys.UP:
            return clamp_cursor(cursor - 1, count)
        if key in keys.DOWN:
            return clamp_cursor(cursor + 1, count)
        return cursor

    def _combat_key(self, key: str) -> None:
        combat = self.character.combat
        saves = combat.death_saves

        if key in _HP_KEYS:
            purpose, title = _HP_KEYS[key]
            self.open_modal(NumericEntry(purpose=purpose, title=title))
        elif key == "1":
            if combat.hit_points.current == 0 and not saves.is_stable and not saves.is_dead:
                if saves.add_success():
                    self.status = "Stabilized!"
                else:
                    self.status = f"Death save success ({saves.successes}/3)"
                logger.info("Death save", successes=saves.successes, failures=saves.failures)
                self._persist()
        elif key == "2":
            if combat.hit_points.current == 0 and not saves.is_stable and not saves.is_dead:
                if saves.add_failure():
                    self.status = "Character has died!"
                else:
                    self.status = f"Death save failure ({saves.failures}/3)"
                logger.info("Death save", successes=saves.successes, failures=saves.failures)
                self._persist()
        elif key == "0":
            saves.reset()
            self.status = "Death saves reset"
            self._persist()
        elif key in ("+", "="):
            missing = combat.missing_conditions()
            if missing:
                self.open_modal(
                    ListPicker(
                        title="Add Condition",
                        options=[c.display_name for c in missing],
                        values=[c.value for c in missing],
                        purpose="add_condition",
                    )
                )
        elif key in ("-", "_"):
            if combat.conditions:
                active = [Condition(c) for c in combat.conditions]
                self.open_modal(
                    ListPicker(
                        title="Remove Condition",
                        options=[c.display_name for c in active],
                        values=[c.value for c in active],
                        purpose="remove_condition",
                    )
                )

    def _actions_key(self, key: str) -> None:
        if key in keys.LEFT:
            self.action_tabs.move(-1)
            self.action_cursor = 0
            return
        if key in keys.RIGHT:
            self.action_tabs.move(1)
            self.action_cursor = 0
            return

        items = self.action_items()
        if key in keys.UP or key in keys.DOWN:
            self.action_cursor = self._move(self.action_cursor, key, len(items))
        elif key == keys.ENTER:
            if not 0 <= self.action_cursor < len(items):
                return
            item = items[self.action_cursor]
            if item.kind == ActionKind.SPELL and item.spell is not None:
                opened = begin_cast(self.character, item.spell.name, item.spell.level, item.spell)
                if isinstance(opened, str):
                    self.status = opened
                else:
                    self.open_modal(opened)
            else:
                self.status = item.status_text()


__all__ = ["SheetPanel", "MainSheetController"]
