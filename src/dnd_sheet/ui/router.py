"""Navigation router.

The router owns the active screen controller, the persistence and catalog
collaborators and the character record currently open. It forwards events
to the active controller, applies the navigation signals that come back,
and runs deferred tasks on behalf of the terminal adapter.

Example:
    >>> router = Router(store, catalog)
    >>> tasks = router.start()
    >>> results = [router.run_task(t) for t in tasks]
    >>> for result in results:
    ...     router.dispatch(result)
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from dnd_sheet.core.config import Settings, get_settings
from dnd_sheet.core.exceptions import CharacterNotFoundError, NavigationError, SheetError
from dnd_sheet.core.logging import bind_context, get_logger
from dnd_sheet.models.character import Character
from dnd_sheet.ui.base import ScreenController
from dnd_sheet.ui.events import Event, Navigation, ResizeEvent, ScreenResult, Task, TaskKind, TaskResult
from dnd_sheet.ui.screens import (
    CharacterInfoController,
    InventoryController,
    MainSheetController,
    SelectionController,
    SpellbookController,
)
from dnd_sheet.ui.render import render_screen


if TYPE_CHECKING:
    from rich.console import RenderableType

    from dnd_sheet.catalog.catalog import Catalog
    from dnd_sheet.storage.database import CharacterStore

logger = get_logger(__name__)

NEW_CHARACTER_NAME = "New Character"

_RECORD_SCREENS: dict[Navigation, type[ScreenController]] = {
    Navigation.OPEN_SHEET: MainSheetController,
    Navigation.BACK_TO_SHEET: MainSheetController,
    Navigation.OPEN_INVENTORY: InventoryController,
    Navigation.OPEN_SPELLBOOK: SpellbookController,
    Navigation.OPEN_CHARACTER_INFO: CharacterInfoController,
}


@dataclass
class DispatchResult:
    """What the adapter must do after an event.

    Attributes:
        tasks: Deferred tasks to run in the background.
        quit: Whether the application should exit.
    """

    tasks: list[Task] = field(default_factory=list)
    quit: bool = False


class Router:
    """Routes events between screens and runs deferred tasks."""

    def __init__(
        self,
        store: CharacterStore,
        catalog: Catalog,
        settings: Settings | None = None,
        *,
        width: int = 80,
        height: int = 24,
    ) -> None:
        self.store = store
        self.catalog = catalog
        self.settings = settings or get_settings()
        self.width = width
        self.height = height
        self.record: Character | None = None
        self._activations = itertools.count(1)
        self.active: ScreenController = self._build(SelectionController, None)

    def _build(self, cls: type[ScreenController], record: Character | None) -> ScreenController:
        screen = cls(
            record,
            self.store,
            self.catalog,
            width=self.width,
            height=self.height,
            settings=self.settings,
        )
        screen.activation = next(self._activations)
        return screen

    # =========================================================================
    # Events
    # =========================================================================

    def start(self) -> list[Task]:
        """Activate the selection screen and return its startup tasks."""
        self._bind()
        return self._apply(self.active.activate()).tasks

    def dispatch(self, event: Event) -> DispatchResult:
        """Send an event to the active screen and apply what comes back."""
        if isinstance(event, ResizeEvent):
            self.width = event.width
            self.height = event.height
        return self._apply(self.active.handle(event))

    def _apply(self, result: ScreenResult) -> DispatchResult:
        outcome = DispatchResult(tasks=list(result.tasks))
        while result.navigation is not None:
            if result.quit:
                logger.info("Quit requested", screen=self.active.screen_name)
                outcome.quit = True
                break
            try:
                result = self.navigate(result.navigation, result.record)
            except NavigationError as e:
                logger.warning("Navigation failed", error=e.message)
                self.active.status = f"Error: {e.message}"
                break
            outcome.tasks.extend(result.tasks)
        return outcome

    def navigate(self, navigation: Navigation, record: Character | None = None) -> ScreenResult:
        """Switch screens and activate the new one.

        Returns:
            The new screen's activation result.

        Raises:
            NavigationError: If the target screen needs a record and none is open.
        """
        if navigation == Navigation.BACK_TO_SELECTION:
            self.record = None
            self.active = self._build(SelectionController, None)
        elif navigation == Navigation.START_CREATION:
            self.record = self._create_blank()
            self.active = self._build(MainSheetController, self.record)
        else:
            if navigation == Navigation.OPEN_SHEET and record is not None:
                self.record = record
            if self.record is None:
                raise NavigationError("No character is open", signal=str(navigation))
            self.active = self._build(_RECORD_SCREENS[navigation], self.record)

        logger.info("Screen changed", navigation=str(navigation), screen=self.active.screen_name)
        self._bind()
        return self.active.activate()

    def _create_blank(self) -> Character:
        record = Character.create(NEW_CHARACTER_NAME)
        try:
            self.store.save(record)
        except SheetError as e:
            raise NavigationError(f"Could not create character: {e.message}", signal="start_creation") from e
        logger.info("Character created", id=record.id)
        return record

    def _bind(self) -> None:
        bind_context(
            screen=self.active.screen_name,
            character=self.record.name if self.record is not None else None,
        )

    # =========================================================================
    # Deferred Tasks
    # =========================================================================

    def run_task(self, task: Task) -> TaskResult:
        """Execute a deferred task. Safe to call from a worker thread.

        Domain errors are returned in TaskResult.error, never raised.
        """
        try:
            payload = self._execute(task)
        except SheetError as e:
            logger.warning("Task failed", kind=str(task.kind), error=e.message)
            return TaskResult(token=task.token, kind=task.kind, error=e.message)
        return TaskResult(token=task.token, kind=task.kind, payload=payload)

    def _execute(self, task: Task) -> object:
        if task.kind == TaskKind.LIST_CHARACTERS:
            return self.store.list()
        if task.kind == TaskKind.LOAD_CHARACTER:
            return self.store.load(task.payload)
        if task.kind == TaskKind.DELETE_CHARACTER:
            character_id, name = task.payload
            if not self.store.delete(character_id):
                raise CharacterNotFoundError(f"Character not found: {name}", character_id=character_id)
            return name
        if task.kind == TaskKind.LOAD_SPELLS:
            return self.catalog.spells()
        raise NavigationError(f"Unknown task: {task.kind}")

    # =========================================================================
    # Projection
    # =========================================================================

    def render(self) -> RenderableType:
        return render_screen(self.active)


__all__ = [
    "NEW_CHARACTER_NAME",
    "DispatchResult",
    "Router",
]
