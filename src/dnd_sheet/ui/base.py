"""Shared screen controller machinery.

Every screen handles events in the same order:

1. resize
2. deferred task results (stale tokens are dropped)
3. ctrl+c, which always quits
4. the active modal
5. screen-wide accelerators
6. the focused panel

Handlers never raise: domain errors become one-line status messages.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from dnd_sheet.core.config import get_settings
from dnd_sheet.core.exceptions import PersistenceError
from dnd_sheet.core.logging import get_logger
from dnd_sheet.ui import keys
from dnd_sheet.ui.events import (
    Event,
    KeyEvent,
    Navigation,
    ResizeEvent,
    ScreenResult,
    Task,
    TaskKind,
    TaskResult,
    Token,
)
from dnd_sheet.ui.modals import Confirmation, Modal


if TYPE_CHECKING:
    from dnd_sheet.catalog.catalog import Catalog
    from dnd_sheet.core.config import Settings
    from dnd_sheet.models.character import Character
    from dnd_sheet.storage.database import CharacterStore

logger = get_logger(__name__)


class ScreenController:
    """Base class for the screens.

    Subclasses override the ``on_*`` hooks they need.

    Attributes:
        record: The character being viewed; None on the selection screen.
        store: Persistence collaborator.
        catalog: Read-only game content.
        status: One-line status message.
        modal: Active modal, if any.
        activation: Serial number the router gives each screen it builds.
        width: Terminal width.
        height: Terminal height.
    """

    screen_name: ClassVar[str] = "screen"

    def __init__(
        self,
        record: Character | None,
        store: CharacterStore | None,
        catalog: Catalog,
        *,
        width: int = 80,
        height: int = 24,
        settings: Settings | None = None,
    ) -> None:
        self.record = record
        self.store = store
        self.catalog = catalog
        self.settings = settings or get_settings()
        self.status = ""
        self.modal: Modal | None = None
        self.width = width
        self.height = height
        self.activation = 0

    # -------------------------------------------------------------------------
    # Tokens & tasks
    # -------------------------------------------------------------------------

    @property
    def mode(self) -> str:
        """Sub-mode that makes in-flight task results stale when it changes."""
        return "default"

    @property
    def token(self) -> Token:
        """Identity of this screen instance and sub-mode; results for any other are stale."""
        return (self.screen_name, self.activation, self.mode)

    def issue(self, kind: TaskKind, payload: object = None) -> Task:
        """Create a deferred task tagged with this screen's current token."""
        return Task(kind=kind, token=self.token, payload=payload)

    # -------------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------------

    def activate(self) -> ScreenResult:
        """Called once when the router makes this screen active."""
        return ScreenResult()

    def handle(self, event: Event) -> ScreenResult:
        if isinstance(event, ResizeEvent):
            self.width = event.width
            self.height = event.height
            return ScreenResult()

        if isinstance(event, TaskResult):
            if event.token != self.token:
                logger.debug("Dropping stale task result", kind=event.kind, token=event.token)
                return ScreenResult()
            return self.on_task_result(event)

        if event.key == keys.FORCE_QUIT:
            return ScreenResult(navigation=Navigation.QUIT)

        if self.modal is not None:
            return self.on_modal_key(event)

        result = self.on_global_key(event)
        if result is not None:
            return result
        return self.on_panel_key(event)

    # -------------------------------------------------------------------------
    # Hooks
    # -------------------------------------------------------------------------

    def on_task_result(self, result: TaskResult) -> ScreenResult:
        return ScreenResult()

    def on_modal_key(self, event: KeyEvent) -> ScreenResult:
        return ScreenResult()

    def on_global_key(self, event: KeyEvent) -> ScreenResult | None:
        """Screen-wide accelerators. Return None to fall through to the panel."""
        return None

    def on_panel_key(self, event: KeyEvent) -> ScreenResult:
        return ScreenResult()

    def clamp_cursors(self) -> None:
        """Pull panel cursors back inside their lists. Runs before every render."""

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def open_modal(self, modal: Modal, status: str = "") -> None:
        self.modal = modal
        self.status = status

    def close_modal(self) -> None:
        """Close the active modal, restoring a confirmation's parent."""
        if isinstance(self.modal, Confirmation) and self.modal.parent is not None:
            self.modal = self.modal.parent
        else:
            self.modal = None

    def confirm_quit(self) -> None:
        self.open_modal(
            Confirmation("Quit? (y/n)", action="quit", affirmative=keys.YES_OR_ENTER),
            status="Quit? (y/n)",
        )

    def _persist(self) -> None:
        """Autosave the record. Failures go to the log and the status line."""
        if self.record is None or self.store is None:
            return
        try:
            self.store.autosave(self.record)
        except PersistenceError as e:
            logger.warning("Autosave failed", character=self.record.id, error=e.message)
            if self.settings.sheet.surface_save_errors:
                self.status = f"Save failed: {e.message}"


__all__ = ["ScreenController"]
