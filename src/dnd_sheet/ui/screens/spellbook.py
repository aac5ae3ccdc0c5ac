"""Spellbook screen.

Lists cantrips and known spells, casts them, manages preparation and adds
spells from the catalog. Full spell data is loaded through a deferred
task, so the list works before the details panel has anything to show.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from dnd_sheet.catalog.entries import SpellEntry
from dnd_sheet.core.constants import MAX_SPELL_LEVEL
from dnd_sheet.core.logging import get_logger
from dnd_sheet.engine.spells import can_cast, refresh_ritual_flags
from dnd_sheet.models.character import Character
from dnd_sheet.models.spellcasting import Spellcasting
from dnd_sheet.ui import keys
from dnd_sheet.ui.base import ScreenController
from dnd_sheet.ui.events import KeyEvent, Navigation, ScreenResult, TaskKind, TaskResult
from dnd_sheet.ui.focus import clamp_cursor
from dnd_sheet.ui.modals import CastResolution, Confirmation, Search
from dnd_sheet.ui.screens.casting import UPCAST_ACTION, begin_cast, cast_key, upcast_key


logger = get_logger(__name__)


class SpellbookMode(StrEnum):
    SPELL_LIST = "spell_list"
    PREPARATION = "preparation"


PREPARATION_HINT = "Preparation Mode - [✓]=prepared [●]=always prepared  p:toggle esc:exit"


@dataclass(frozen=True)
class SpellRow:
    """One line of the spell list. Cantrips have level 0."""

    name: str
    level: int
    prepared: bool = False
    ritual: bool = False
    always_prepared: bool = False

    @property
    def is_cantrip(self) -> bool:
        return self.level == 0


def display_spells(
    spellcasting: Spellcasting | None,
    mode: SpellbookMode,
    filter_level: int | None,
) -> list[SpellRow]:
    """Rows to show for a mode and level filter.

    Cantrips come first; the rest sort by level then name. In list mode a
    preparing class only shows what it can cast right now.
    """
    if spellcasting is None:
        return []

    rows: list[SpellRow] = []
    if filter_level is None or filter_level == 0:
        rows.extend(SpellRow(name=name, level=0, prepared=True) for name in spellcasting.cantrips_known)

    for spell in spellcasting.known_spells:
        if filter_level is not None and spell.level != filter_level:
            continue
        if mode == SpellbookMode.SPELL_LIST and not can_cast(spellcasting, spell):
            continue
        rows.append(
            SpellRow(
                name=spell.name,
                level=spell.level,
                prepared=spell.prepared,
                ritual=spell.ritual,
                always_prepared=spell.always_prepared,
            )
        )

    rows.sort(key=lambda row: (row.level, row.name))
    return rows


class SpellbookController(ScreenController):
    """Spell list, preparation and casting for one character."""

    screen_name = "spellbook"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.mode_name = SpellbookMode.SPELL_LIST
        self.cursor = 0
        self.scroll = 0
        self.filter_level: int | None = None
        self.loading = True
        self.spell_index: dict[str, SpellEntry] = {}

    @property
    def character(self) -> Character:
        assert self.record is not None
        return self.record

    @property
    def spellcasting(self) -> Spellcasting | None:
        return self.character.spellcasting

    def rows(self) -> list[SpellRow]:
        return display_spells(self.spellcasting, self.mode_name, self.filter_level)

    @property
    def current_row(self) -> SpellRow | None:
        rows = self.rows()
        if 0 <= self.cursor < len(rows):
            return rows[self.cursor]
        return None

    @property
    def selected_entry(self) -> SpellEntry | None:
        """Catalog data for the highlighted spell, once loaded."""
        row = self.current_row
        if row is None or self.loading:
            return None
        return self.spell_index.get(row.name.lower())

    def activate(self) -> ScreenResult:
        self.loading = True
        return ScreenResult(tasks=[self.issue(TaskKind.LOAD_SPELLS)])

    # -------------------------------------------------------------------------
    # Task results
    # -------------------------------------------------------------------------

    def on_task_result(self, result: TaskResult) -> ScreenResult:
        if result.kind != TaskKind.LOAD_SPELLS:
            return ScreenResult()
        self.loading = False
        if not result.ok:
            self.status = f"Error loading spells: {result.error}"
            return ScreenResult()

        self.spell_index = {entry.name.lower(): entry for entry in result.payload or []}
        if self.spellcasting is not None:
            changed = refresh_ritual_flags(self.spellcasting, lambda name: self.spell_index.get(name.lower()))
            if changed:
                logger.info("Ritual flags refreshed", count=changed)
                self._persist()
        return ScreenResult()

    # -------------------------------------------------------------------------
    # Modal keys
    # -------------------------------------------------------------------------

    def on_modal_key(self, event: KeyEvent) -> ScreenResult:
        modal = self.modal
        key = event.key

        if isinstance(modal, Confirmation) and modal.action == UPCAST_ACTION:
            upcast_key(self, modal, key)
        elif isinstance(modal, Confirmation):
            answer = modal.answer(key)
            if answer is None:
                return ScreenResult()
            self.close_modal()
            if modal.action == "quit":
                if answer:
                    return ScreenResult(navigation=Navigation.QUIT)
                self.status = ""
            elif answer:
                self.remove_spell(modal.payload)
            else:
                self.status = "Remove cancelled"
        elif isinstance(modal, CastResolution):
            cast_key(self, modal, key)
        elif isinstance(modal, Search):
            self._search_key(modal, event)
        return ScreenResult()

    def _search_key(self, modal: Search, event: KeyEvent) -> None:
        key = event.key
        if key == keys.ESCAPE:
            self.close_modal()
            self.status = "Add spell cancelled"
        elif key == "up":
            modal.move(-1)
        elif key == "down":
            modal.move(1)
        elif key == keys.ENTER:
            entry = modal.selected
            if entry is not None:
                self.close_modal()
                self.add_spell(entry)
        elif key == keys.BACKSPACE:
            modal.backspace()
            self._run_search(modal)
        elif event.printable is not None:
            modal.type_char(event.printable)
            self._run_search(modal)

    def _run_search(self, modal: Search) -> None:
        results: list[SpellEntry] = []
        if modal.ready:
            results = self.catalog.search_spells(
                modal.query,
                self.character.info.class_name,
                limit=self.settings.sheet.search_limit,
            )
        modal.set_results(results)

    # -------------------------------------------------------------------------
    # Accelerators
    # -------------------------------------------------------------------------

    def on_global_key(self, event: KeyEvent) -> ScreenResult | None:
        key = event.key
        if key == "q":
            self.confirm_quit()
            return ScreenResult()
        if key == keys.ESCAPE:
            if self.mode_name == SpellbookMode.PREPARATION:
                self.mode_name = SpellbookMode.SPELL_LIST
                self.cursor = 0
                self.scroll = 0
                self.status = ""
                return ScreenResult()
            return ScreenResult(navigation=Navigation.BACK_TO_SHEET)
        return None

    def on_panel_key(self, event: KeyEvent) -> ScreenResult:
        key = event.key
        self.status = ""
        preparing = self.mode_name == SpellbookMode.PREPARATION

        if key in keys.UP:
            self._move(-1)
        elif key in keys.DOWN:
            self._move(1)
        elif key == "f":
            self.cycle_filter()
        elif key == "p":
            if preparing:
                self.toggle_prepared()
            else:
                self.mode_name = SpellbookMode.PREPARATION
                self.cursor = 0
                self.scroll = 0
                self.status = PREPARATION_HINT
        elif key in ("c", keys.ENTER):
            if preparing:
                self.toggle_prepared()
            else:
                self.cast_current()
        elif key in ("a", "+"):
            self.open_modal(Search(purpose="add_spell", min_chars=1))
        elif key == "x" and preparing:
            row = self.current_row
            if row is not None:
                prompt = f"Remove {row.name}? (y/n)"
                self.open_modal(Confirmation(prompt, action="remove_spell", payload=row.name), status=prompt)
        return ScreenResult()

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def _move(self, delta: int) -> None:
        self.cursor = clamp_cursor(self.cursor + delta, len(self.rows()))
        self._scroll_to_cursor()

    def clamp_cursors(self) -> None:
        self.cursor = clamp_cursor(self.cursor, len(self.rows()))
        self._scroll_to_cursor()

    def _scroll_to_cursor(self) -> None:
        per_page = self.settings.sheet.items_per_page
        if self.cursor < self.scroll:
            self.scroll = self.cursor
        elif self.cursor >= self.scroll + per_page:
            self.scroll = self.cursor - per_page + 1

    def cycle_filter(self) -> None:
        """all -> cantrips -> 1 -> ... -> 9 -> all"""
        if self.filter_level is None:
            self.filter_level = 0
        elif self.filter_level >= MAX_SPELL_LEVEL:
            self.filter_level = None
        else:
            self.filter_level += 1

        self.cursor = 0
        self.scroll = 0
        if self.filter_level is None:
            self.status = "Showing all spells"
        elif self.filter_level == 0:
            self.status = "Showing cantrips"
        else:
            self.status = f"Showing level {self.filter_level} spells"

    def toggle_prepared(self) -> None:
        spellcasting = self.spellcasting
        if spellcasting is None:
            self.status = "No spellcasting ability"
            return
        if not spellcasting.prepares_spells:
            self.status = "This class doesn't prepare spells"
            return

        row = self.current_row
        if row is None or row.is_cantrip:
            return
        if row.always_prepared:
            self.status = f"{row.name} is always prepared (from class feature)"
            return
        if row.ritual and spellcasting.ritual_caster_unprepared:
            self.status = f"{row.name} is a ritual spell (can cast from spellbook)"
            return
        if not row.prepared and spellcasting.max_prepared > 0:
            if spellcasting.count_prepared() >= spellcasting.max_prepared:
                self.status = f"Cannot prepare more than {spellcasting.max_prepared} spells"
                return

        prepared = not row.prepared
        spellcasting.prepare(row.name, prepared)
        self.status = f"{'Prepared' if prepared else 'Unprepared'} {row.name}"
        logger.info("Preparation changed", spell=row.name, prepared=prepared)
        self._persist()

    def cast_current(self) -> None:
        spellcasting = self.spellcasting
        if spellcasting is None:
            self.status = "No spellcasting ability"
            return
        row = self.current_row
        if row is None:
            return

        if not row.is_cantrip:
            known = spellcasting.find_spell(row.name)
            if known is not None and not can_cast(spellcasting, known):
                self.status = f"{row.name} is not prepared"
                return

        entry = self.selected_entry
        warning = ""
        if entry is None and not self.loading:
            warning = f"Warning: {row.name} data not found in spell database"

        opened = begin_cast(self.character, row.name, row.level, entry)
        if isinstance(opened, str):
            self.status = opened
        else:
            self.open_modal(opened, status=warning)

    def add_spell(self, entry: SpellEntry) -> None:
        spellcasting = self.spellcasting
        if spellcasting is None:
            self.status = "No spellcasting ability"
            return
        if spellcasting.knows(entry.name):
            self.status = f"{entry.name} already known"
            return

        if entry.is_cantrip:
            spellcasting.add_cantrip(entry.name)
            self.status = f"Added cantrip: {entry.name}"
        else:
            spellcasting.add_spell(entry.name, entry.level, ritual=entry.ritual)
            self.status = f"Added spell: {entry.name}"
        self.spell_index.setdefault(entry.name.lower(), entry)
        logger.info("Spell added", spell=entry.name, level=entry.level)
        self._persist()

    def remove_spell(self, name: str) -> None:
        spellcasting = self.spellcasting
        if spellcasting is None or not spellcasting.remove_spell(name):
            return
        self.cursor = clamp_cursor(self.cursor, len(self.rows()))
        self.status = f"Removed {name}"
        logger.info("Spell removed", spell=name)
        self._persist()


__all__ = [
    "SpellbookMode",
    "SpellRow",
    "display_spells",
    "SpellbookController",
]
