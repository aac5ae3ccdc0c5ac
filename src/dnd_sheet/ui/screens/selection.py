"""Character selection screen."""

from __future__ import annotations

from dnd_sheet.core.logging import get_logger
from dnd_sheet.storage.database import CharacterSummary
from dnd_sheet.ui import keys
from dnd_sheet.ui.base import ScreenController
from dnd_sheet.ui.events import KeyEvent, Navigation, ScreenResult, TaskKind, TaskResult
from dnd_sheet.ui.focus import clamp_cursor
from dnd_sheet.ui.modals import Confirmation


logger = get_logger(__name__)


class SelectionController(ScreenController):
    """Lists saved characters and opens, creates or deletes them."""

    screen_name = "selection"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.characters: list[CharacterSummary] = []
        self.loading = True
        self.cursor = 0

    @property
    def mode(self) -> str:
        return "confirm" if self.modal is not None else "default"

    @property
    def selected(self) -> CharacterSummary | None:
        if not self.characters:
            return None
        return self.characters[self.cursor]

    def _reload(self) -> ScreenResult:
        self.loading = True
        return ScreenResult(tasks=[self.issue(TaskKind.LIST_CHARACTERS)])

    def activate(self) -> ScreenResult:
        return self._reload()

    def clamp_cursors(self) -> None:
        self.cursor = clamp_cursor(self.cursor, len(self.characters))

    # -------------------------------------------------------------------------
    # Task results
    # -------------------------------------------------------------------------

    def on_task_result(self, result: TaskResult) -> ScreenResult:
        if result.kind == TaskKind.LIST_CHARACTERS:
            self.loading = False
            if not result.ok:
                self.status = f"Error: {result.error}"
                return ScreenResult()
            self.characters = list(result.payload or [])
            self.cursor = clamp_cursor(self.cursor, len(self.characters))
            return ScreenResult()

        if result.kind == TaskKind.LOAD_CHARACTER:
            if not result.ok:
                self.status = f"Error: {result.error}"
                return ScreenResult()
            return ScreenResult(navigation=Navigation.OPEN_SHEET, record=result.payload)

        if result.kind == TaskKind.DELETE_CHARACTER:
            if not result.ok:
                self.status = f"Error: {result.error}"
                return ScreenResult()
            self.status = f"Deleted {result.payload}"
            return self._reload()

        return ScreenResult()

    # -------------------------------------------------------------------------
    # Keys
    # -------------------------------------------------------------------------

    def on_modal_key(self, event: KeyEvent) -> ScreenResult:
        modal = self.modal
        if not isinstance(modal, Confirmation):
            self.close_modal()
            return ScreenResult()

        answer = modal.answer(event.key)
        if answer is None:
            return ScreenResult()
        self.close_modal()
        if not answer:
            self.status = ""
            # a list requested before the prompt opened was dropped
            return self._reload() if self.loading else ScreenResult()

        summary: CharacterSummary = modal.payload
        logger.info("Deleting character", id=summary.id, name=summary.name)
        return ScreenResult(tasks=[self.issue(TaskKind.DELETE_CHARACTER, (summary.id, summary.name))])

    def on_global_key(self, event: KeyEvent) -> ScreenResult | None:
        if event.key == "q":
            return ScreenResult(navigation=Navigation.QUIT)
        if event.key in ("n", "N"):
            return ScreenResult(navigation=Navigation.START_CREATION)
        return None

    def on_panel_key(self, event: KeyEvent) -> ScreenResult:
        key = event.key
        if key in keys.UP:
            if not self.loading:
                self.cursor = clamp_cursor(self.cursor - 1, len(self.characters))
        elif key in keys.DOWN:
            if not self.loading:
                self.cursor = clamp_cursor(self.cursor + 1, len(self.characters))
        elif key == keys.ENTER:
            selected = self.selected
            if selected is None:
                self.status = "Error: no characters available to load"
                return ScreenResult()
            self.status = f"Loading {selected.name}..."
            return ScreenResult(tasks=[self.issue(TaskKind.LOAD_CHARACTER, selected.id)])
        elif key in ("d", "D"):
            selected = self.selected
            if selected is None:
                self.status = "Error: no characters available to delete"
                return ScreenResult()
            prompt = f"Delete character '{selected.name}'? (y/n)"
            self.open_modal(
                Confirmation(
                    prompt,
                    action="delete_character",
                    payload=selected,
                    negative=("n", "N", keys.ESCAPE),
                ),
                status=prompt,
            )
        return ScreenResult()


__all__ = ["SelectionController"]
