"""Tests for screen routing and deferred tasks."""

from __future__ import annotations

import pytest

from dnd_sheet.catalog.catalog import Catalog
from dnd_sheet.core.exceptions import NavigationError
from dnd_sheet.models.character import Character
from dnd_sheet.storage.database import CharacterStore
from dnd_sheet.ui.events import KeyEvent, Navigation, ResizeEvent, Task, TaskKind, TaskResult
from dnd_sheet.ui.router import NEW_CHARACTER_NAME, Router
from dnd_sheet.ui.screens import (
    CharacterInfoController,
    InventoryController,
    MainSheetController,
    SelectionController,
    SpellbookController,
)


def drain(router: Router, tasks: list[Task]) -> None:
    """Run tasks the way the adapter would, including any they spawn."""
    pending = list(tasks)
    while pending:
        result = router.run_task(pending.pop(0))
        pending.extend(router.dispatch(result).tasks)


@pytest.fixture
def router(store: CharacterStore, catalog: Catalog) -> Router:
    return Router(store, catalog, width=120, height=40)


class TestStartup:
    def test_start_lists_characters(self, router: Router) -> None:
        tasks = router.start()

        assert isinstance(router.active, SelectionController)
        assert [t.kind for t in tasks] == [TaskKind.LIST_CHARACTERS]
        assert tasks[0].token == ("selection", 1, "default")

    def test_list_result_reaches_selection(self, router: Router, store: CharacterStore, fighter: Character) -> None:
        store.save(fighter)
        drain(router, router.start())

        assert not router.active.loading
        assert [c.name for c in router.active.characters] == ["Thorin"]


class TestNavigation:
    """Tests for screen changes driven by controllers."""

    def test_load_opens_sheet(self, router: Router, store: CharacterStore, fighter: Character) -> None:
        store.save(fighter)
        drain(router, router.start())

        drain(router, router.dispatch(KeyEvent("enter")).tasks)

        assert isinstance(router.active, MainSheetController)
        assert router.record is not None
        assert router.record.id == fighter.id

    def test_create_new_character(self, router: Router, store: CharacterStore) -> None:
        drain(router, router.start())

        router.dispatch(KeyEvent("n", "n"))

        assert isinstance(router.active, MainSheetController)
        assert router.record.name == NEW_CHARACTER_NAME
        assert [c.name for c in store.list()] == [NEW_CHARACTER_NAME]

    @pytest.mark.parametrize(
        ("key", "screen"),
        [
            ("i", InventoryController),
            ("s", SpellbookController),
            ("c", CharacterInfoController),
        ],
    )
    def test_sheet_accelerators(self, router: Router, fighter: Character, key: str, screen: type) -> None:
        router.navigate(Navigation.OPEN_SHEET, fighter)

        router.dispatch(KeyEvent(key, key))

        assert isinstance(router.active, screen)
        assert router.active.record is fighter

    def test_spellbook_requests_spells(self, router: Router, wizard: Character) -> None:
        router.navigate(Navigation.OPEN_SHEET, wizard)

        outcome = router.dispatch(KeyEvent("s", "s"))

        assert [t.kind for t in outcome.tasks] == [TaskKind.LOAD_SPELLS]
        drain(router, outcome.tasks)
        assert not router.active.loading

    def test_back_to_sheet(self, router: Router, fighter: Character) -> None:
        router.navigate(Navigation.OPEN_SHEET, fighter)
        router.navigate(Navigation.OPEN_CHARACTER_INFO)

        router.dispatch(KeyEvent("escape"))

        assert isinstance(router.active, MainSheetController)
        assert router.record is fighter

    def test_escape_from_sheet_returns_to_selection(self, router: Router, fighter: Character) -> None:
        router.navigate(Navigation.OPEN_SHEET, fighter)

        outcome = router.dispatch(KeyEvent("escape"))

        assert isinstance(router.active, SelectionController)
        assert router.record is None
        assert [t.kind for t in outcome.tasks] == [TaskKind.LIST_CHARACTERS]

    def test_record_screen_without_record(self, router: Router) -> None:
        with pytest.raises(NavigationError, match="No character is open"):
            router.navigate(Navigation.OPEN_INVENTORY)


class TestDispatch:
    def test_ctrl_c_quits(self, router: Router) -> None:
        router.start()
        assert router.dispatch(KeyEvent("ctrl+c")).quit

    def test_q_on_selection_quits(self, router: Router) -> None:
        router.start()
        assert router.dispatch(KeyEvent("q", "q")).quit

    def test_resize_updates_dimensions(self, router: Router) -> None:
        router.start()
        router.dispatch(ResizeEvent(100, 30))

        assert (router.width, router.height) == (100, 30)
        assert router.active.width == 100

    def test_stale_result_dropped(self, router: Router, fighter: Character) -> None:
        tasks = router.start()
        router.navigate(Navigation.OPEN_SHEET, fighter)

        outcome = router.dispatch(router.run_task(tasks[0]))

        assert isinstance(router.active, MainSheetController)
        assert outcome.tasks == []
        assert not outcome.quit

    def test_load_from_previous_selection_dropped(
        self, router: Router, store: CharacterStore, fighter: Character
    ) -> None:
        store.save(fighter)
        drain(router, router.start())
        load = router.dispatch(KeyEvent("enter")).tasks[0]

        router.dispatch(KeyEvent("n", "n"))
        drain(router, router.dispatch(KeyEvent("escape")).tasks)
        router.dispatch(router.run_task(load))

        assert isinstance(router.active, SelectionController)
        assert router.record is None

    def test_each_screen_gets_a_new_token(self, router: Router, fighter: Character) -> None:
        first = router.active.token
        router.navigate(Navigation.OPEN_SHEET, fighter)
        router.navigate(Navigation.BACK_TO_SELECTION)

        assert router.active.token != first
        assert router.active.token[0] == first[0]


class TestRunTask:
    """Tests for executing deferred tasks."""

    def test_load_missing_character(self, router: Router) -> None:
        task = Task(TaskKind.LOAD_CHARACTER, ("selection", 0, "default"), "missing-id")

        result = router.run_task(task)

        assert not result.ok
        assert result.payload is None

    def test_delete_missing_character(self, router: Router) -> None:
        task = Task(TaskKind.DELETE_CHARACTER, ("selection", 0, "default"), ("missing-id", "Ghost"))

        result = router.run_task(task)

        assert result == TaskResult(
            token=("selection", 0, "default"),
            kind=TaskKind.DELETE_CHARACTER,
            error="Character not found: Ghost",
        )

    def test_delete_character(self, router: Router, store: CharacterStore, fighter: Character) -> None:
        store.save(fighter)
        task = Task(TaskKind.DELETE_CHARACTER, ("selection", 0, "default"), (fighter.id, fighter.name))

        result = router.run_task(task)

        assert result.ok
        assert result.payload == "Thorin"
        assert store.list() == []

    def test_load_spells(self, router: Router) -> None:
        result = router.run_task(Task(TaskKind.LOAD_SPELLS, ("spellbook", 0, "default")))

        assert result.ok
        assert any(spell.name == "Fireball" for spell in result.payload)
