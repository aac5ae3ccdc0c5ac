"""Terminal adapter.

A thin textual shell around the router: keys and resizes go in as
events, deferred tasks run on worker threads, and after every change the
whole screen is re-rendered into one ``Static``.

Usage:
    >>> app = SheetApp(get_store(), get_catalog())
    >>> app.run()
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Static

from dnd_sheet.core.config import get_settings
from dnd_sheet.core.logging import get_logger
from dnd_sheet.ui import keys
from dnd_sheet.ui.events import KeyEvent, ResizeEvent, Task, TaskResult
from dnd_sheet.ui.router import DispatchResult, Router


if TYPE_CHECKING:
    from dnd_sheet.catalog.catalog import Catalog
    from dnd_sheet.core.config import Settings
    from dnd_sheet.storage.database import CharacterStore

logger = get_logger(__name__)


class SheetApp(App[None]):
    """Full-screen character sheet."""

    TITLE = "D&D 5e Character Sheet"

    CSS = """
    Screen {
        overflow-y: auto;
    }
    #sheet {
        width: 100%;
        height: auto;
    }
    """

    # textual would otherwise consume these for focus changes and quitting
    BINDINGS = [
        Binding("tab", "forward('tab')", show=False, priority=True),
        Binding("shift+tab", "forward('shift+tab')", show=False, priority=True),
        Binding("ctrl+c", "forward('ctrl+c')", show=False, priority=True),
    ]

    def __init__(
        self,
        store: CharacterStore,
        catalog: Catalog,
        settings: Settings | None = None,
    ) -> None:
        super().__init__()
        self.router = Router(store, catalog, settings or get_settings())

    def compose(self) -> ComposeResult:
        yield Static(id="sheet")

    def on_mount(self) -> None:
        self.router.width = self.size.width
        self.router.height = self.size.height
        self._schedule(self.router.start())
        self._refresh_sheet()

    # =========================================================================
    # Input
    # =========================================================================

    def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        key = keys.normalize_key(event.key, event.character)
        self._handle(KeyEvent(key, event.character))

    def action_forward(self, key: str) -> None:
        self._handle(KeyEvent(key))

    def on_resize(self, event: events.Resize) -> None:
        self._handle(ResizeEvent(event.size.width, event.size.height))

    def _handle(self, event: KeyEvent | ResizeEvent | TaskResult) -> None:
        outcome = self.router.dispatch(event)
        self._after(outcome)

    def _after(self, outcome: DispatchResult) -> None:
        if outcome.quit:
            self.exit()
            return
        self._schedule(outcome.tasks)
        self._refresh_sheet()

    # =========================================================================
    # Deferred tasks
    # =========================================================================

    def _schedule(self, tasks: list[Task]) -> None:
        for task in tasks:
            logger.debug("Scheduling task", kind=str(task.kind), token=task.token)
            self.run_worker(lambda task=task: self._run_task(task), thread=True, group="tasks")

    def _run_task(self, task: Task) -> None:
        result = self.router.run_task(task)
        self.call_from_thread(self._handle, result)

    # =========================================================================
    # Output
    # =========================================================================

    def _refresh_sheet(self) -> None:
        self.query_one("#sheet", Static).update(self.router.render())


def run_app(store: CharacterStore, catalog: Catalog, settings: Settings | None = None) -> None:
    """Run the terminal UI until the user quits."""
    SheetApp(store, catalog, settings).run()


__all__ = [
    "SheetApp",
    "run_app",
]
