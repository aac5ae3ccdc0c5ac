"""Inventory screen: equipment slots, items and the purse."""

from __future__ import annotations

from enum import StrEnum

from dnd_sheet.core.constants import MAX_ATTUNED_ITEMS
from dnd_sheet.core.exceptions import InsufficientFundsError
from dnd_sheet.core.logging import get_logger
from dnd_sheet.models.character import Character
from dnd_sheet.models.enums import Denomination, EquipmentSlot
from dnd_sheet.models.inventory import Item
from dnd_sheet.ui import keys
from dnd_sheet.ui.base import ScreenController
from dnd_sheet.ui.events import KeyEvent, Navigation, ScreenResult
from dnd_sheet.ui.focus import FocusRing, clamp_cursor
from dnd_sheet.ui.modals import (
    Confirmation,
    NumericEntry,
    NumericPurpose,
    Search,
    StepKind,
)


logger = get_logger(__name__)


class InventoryPanel(StrEnum):
    EQUIPMENT = "equipment"
    ITEMS = "items"
    CURRENCY = "currency"


RINGS_ROW = "rings"

# Slot rows of the equipment panel; both ring slots share the last row.
EQUIPMENT_ROWS: list[EquipmentSlot | str] = [
    EquipmentSlot.MAIN_HAND,
    EquipmentSlot.OFF_HAND,
    EquipmentSlot.HEAD,
    EquipmentSlot.BODY,
    EquipmentSlot.CLOAK,
    EquipmentSlot.GLOVES,
    EquipmentSlot.BOOTS,
    EquipmentSlot.AMULET,
    RINGS_ROW,
]

RING_SLOTS = (EquipmentSlot.RING_1, EquipmentSlot.RING_2)

TOTAL_ROW = "total"

# Currency rows; the last spends across denominations and adds as gold.
CURRENCY_ROWS: list[Denomination | str] = [*Denomination, TOTAL_ROW]


def currency_label(row: Denomination | str) -> str:
    if row == TOTAL_ROW:
        return "GP (from total)"
    return str(row).upper()


class InventoryController(ScreenController):
    """Edits the items, equipment and currency of one character."""

    screen_name = "inventory"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.focus: FocusRing[InventoryPanel] = FocusRing(list(InventoryPanel))
        self.item_cursor = 0
        self.item_scroll = 0
        self.container_id: str | None = None
        self.container_cursor = 0
        self.equipment_cursor = 0
        self.currency_cursor = 0

    @property
    def character(self) -> Character:
        assert self.record is not None
        return self.record

    # -------------------------------------------------------------------------
    # Item views
    # -------------------------------------------------------------------------

    @property
    def container(self) -> Item | None:
        if self.container_id is None:
            return None
        return self.character.inventory.find_item(self.container_id)

    def display_items(self) -> list[Item]:
        """Items of the open container, or the top-level items."""
        container = self.container
        if container is not None:
            return container.contents
        return self.character.inventory.items

    @property
    def cursor(self) -> int:
        return self.container_cursor if self.container_id else self.item_cursor

    @cursor.setter
    def cursor(self, value: int) -> None:
        if self.container_id:
            self.container_cursor = value
        else:
            self.item_cursor = value

    @property
    def current_item(self) -> Item | None:
        items = self.display_items()
        if 0 <= self.cursor < len(items):
            return items[self.cursor]
        return None

    def _scroll_to_cursor(self) -> None:
        per_page = self.settings.sheet.items_per_page
        if self.cursor < self.item_scroll:
            self.item_scroll = self.cursor
        elif self.cursor >= self.item_scroll + per_page:
            self.item_scroll = self.cursor - per_page + 1

    def clamp_cursors(self) -> None:
        self.cursor = clamp_cursor(self.cursor, len(self.display_items()))
        self._scroll_to_cursor()
        self.equipment_cursor = clamp_cursor(self.equipment_cursor, len(EQUIPMENT_ROWS))
        self.currency_cursor = clamp_cursor(self.currency_cursor, len(CURRENCY_ROWS))

    def open_container(self, item: Item) -> None:
        self.container_id = item.id
        self.container_cursor = 0
        self.item_scroll = 0
        self.focus.focus(InventoryPanel.ITEMS)
        self.status = f"Viewing contents of {item.name}"

    def close_container(self) -> None:
        self.container_id = None
        self.container_cursor = 0
        self.item_scroll = 0
        self.status = "Back to inventory"

    # -------------------------------------------------------------------------
    # Modal keys
    # -------------------------------------------------------------------------

    def on_modal_key(self, event: KeyEvent) -> ScreenResult:
        modal = self.modal
        key = event.key

        if isinstance(modal, Confirmation):
            return self._confirmation_key(modal, key)
        if isinstance(modal, NumericEntry):
            if modal.purpose == NumericPurpose.QUANTITY:
                self._quantity_key(modal, key)
            else:
                self._currency_key(modal, key)
        elif isinstance(modal, Search):
            self._search_key(modal, event)
        return ScreenResult()

    def _confirmation_key(self, modal: Confirmation, key: str) -> ScreenResult:
        answer = modal.answer(key)
        if answer is None:
            return ScreenResult()
        self.close_modal()
        if modal.action == "quit":
            if answer:
                return ScreenResult(navigation=Navigation.QUIT)
            self.status = ""
            return ScreenResult()

        if not answer:
            self.status = "Delete cancelled"
            return ScreenResult()

        removed = self.character.inventory.remove_item(modal.payload)
        if removed is not None:
            count = len(self.display_items())
            self.cursor = clamp_cursor(self.cursor, count)
            self.status = f"Deleted {removed.name}"
            logger.info("Item deleted", item=removed.name, id=removed.id)
            self._persist()
        return ScreenResult()

    def _quantity_key(self, modal: NumericEntry, key: str) -> None:
        item = self.character.inventory.find_item(modal.target)
        step = modal.feed(key)
        if item is None:
            self.close_modal()
            return

        if step.kind == StepKind.ADJUST:
            item.quantity = max(1, item.quantity + step.value)
            modal.buffer = str(item.quantity)
            self._persist()
        elif step.kind == StepKind.COMMIT:
            self.close_modal()
            item.quantity = max(1, step.value)
            self.status = f"Set {item.name} quantity to {item.quantity}"
            logger.info("Quantity set", item=item.name, quantity=item.quantity)
            self._persist()
        elif step.kind == StepKind.INVALID:
            self.close_modal()
            self.status = "Invalid number"
        elif step.kind != StepKind.EDITING:
            self.close_modal()
            self.status = ""

    def _currency_key(self, modal: NumericEntry, key: str) -> None:
        step = modal.feed(key)
        if step.kind == StepKind.EDITING:
            return
        self.close_modal()
        if step.kind == StepKind.INVALID:
            self.status = "Invalid number"
            return
        if step.kind != StepKind.COMMIT or step.value <= 0:
            self.status = ""
            return

        amount = step.value
        row = modal.target
        currency = self.character.inventory.currency
        if modal.purpose == NumericPurpose.CURRENCY_ADD:
            currency.add(Denomination.GP if row == TOTAL_ROW else row, amount)
            self.status = f"Added {amount} {currency_label(row)}"
        else:
            try:
                if row == TOTAL_ROW:
                    currency.spend_from_total(amount)
                else:
                    currency.spend(row, amount)
            except InsufficientFundsError:
                self.status = "Insufficient funds"
                return
            self.status = f"Spent {amount} {currency_label(row)}"
        logger.info("Currency changed", purpose=str(modal.purpose), amount=amount, denomination=str(row))
        self._persist()

    def _search_key(self, modal: Search, event: KeyEvent) -> None:
        key = event.key
        if key == keys.ESCAPE:
            self.close_modal()
            self.status = ""
        elif key == "up":
            modal.move(-1)
        elif key == "down":
            modal.move(1)
        elif key == keys.ENTER:
            entry = modal.selected
            self.close_modal()
            if entry is None:
                self.status = ""
                return
            item = self.catalog.to_item(entry)
            self.character.inventory.add_item(item)
            self.status = f"Added {item.name} to inventory"
            logger.info("Item added", item=item.name, id=item.id)
            self._persist()
        elif key == keys.BACKSPACE:
            modal.backspace()
            self._run_search(modal)
        elif event.printable is not None:
            modal.type_char(event.printable)
            self._run_search(modal)

    def _run_search(self, modal: Search) -> None:
        results = []
        if modal.ready:
            results = self.catalog.search_items(modal.query, limit=self.settings.sheet.search_limit)
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
            if self.container_id is not None:
                self.close_container()
                return ScreenResult()
            return ScreenResult(navigation=Navigation.BACK_TO_SHEET)
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
        if panel == InventoryPanel.ITEMS:
            self._items_key(event.key)
        elif panel == InventoryPanel.EQUIPMENT:
            self._equipment_key(event.key)
        else:
            self._wallet_key(event.key)
        return ScreenResult()

    def _items_key(self, key: str) -> None:
        items = self.display_items()
        if key in keys.UP:
            self.cursor = clamp_cursor(self.cursor - 1, len(items))
            self._scroll_to_cursor()
            return
        if key in keys.DOWN:
            self.cursor = clamp_cursor(self.cursor + 1, len(items))
            self._scroll_to_cursor()
            return
        if key in ("a", "+"):
            self.open_modal(
                Search(purpose="add_item", min_chars=self.settings.sheet.search_min_chars),
                status="Type to search items, Enter to add, Esc to cancel",
            )
            return

        item = self.current_item
        if item is None:
            return
        if key == keys.ENTER:
            if self.container_id is None and item.is_container:
                self.open_container(item)
        elif key in ("n", "#"):
            self.open_modal(
                NumericEntry(
                    purpose=NumericPurpose.QUANTITY,
                    buffer=str(item.quantity),
                    allow_arrows=True,
                    target=item.id,
                    title=f"Quantity: {item.name}",
                ),
                status=f"Adjust quantity for {item.name}",
            )
        elif key in ("x", keys.DELETE):
            prompt = f"Delete {item.name}? (y/n)"
            self.open_modal(
                Confirmation(prompt, action="delete_item", payload=item.id),
                status=prompt,
            )
        elif key == "e":
            if self.container_id is None:
                self.toggle_equip(item)

    def toggle_equip(self, item: Item) -> None:
        """Equip or unequip an item from the items panel."""
        inventory = self.character.inventory
        current_slot = inventory.equipment.slot_of(item.id)

        if current_slot is not None:
            inventory.unequip(current_slot)
            if item.is_weapon:
                self.status = f"Unequipped {item.name} from {current_slot.display_name}"
            else:
                self.status = f"Unequipped {item.name}"
            self._persist()
            return

        suffix = ""
        if item.is_weapon:
            if inventory.equipment.get(EquipmentSlot.MAIN_HAND) is None:
                slot = EquipmentSlot.MAIN_HAND
            elif inventory.equipment.get(EquipmentSlot.OFF_HAND) is None:
                slot = EquipmentSlot.OFF_HAND
            else:
                slot = EquipmentSlot.MAIN_HAND
                suffix = " (replaced)"
        elif item.is_shield:
            slot = EquipmentSlot.OFF_HAND
        elif item.equipment_slot is None:
            self.status = "This item cannot be equipped"
            return
        else:
            slot = EquipmentSlot(item.equipment_slot)
            if slot in RING_SLOTS:
                free = [s for s in RING_SLOTS if inventory.equipment.get(s) is None]
                slot = free[0] if free else EquipmentSlot.RING_1

        inventory.equip(item.id, slot)
        self.status = f"Equipped {item.name} to {slot.display_name}{suffix}"
        attuned = inventory.attuned_count()
        if attuned > MAX_ATTUNED_ITEMS:
            self.status += f" (Warning: {attuned}/{MAX_ATTUNED_ITEMS} attuned)"
        logger.info("Item equipped", item=item.name, slot=str(slot))
        self._persist()

    def _equipment_key(self, key: str) -> None:
        if key in keys.UP:
            self.equipment_cursor = clamp_cursor(self.equipment_cursor - 1, len(EQUIPMENT_ROWS))
            return
        if key in keys.DOWN:
            self.equipment_cursor = clamp_cursor(self.equipment_cursor + 1, len(EQUIPMENT_ROWS))
            return

        inventory = self.character.inventory
        row = EQUIPMENT_ROWS[self.equipment_cursor]
        if key == "e":
            if row == RINGS_ROW:
                worn = [s for s in RING_SLOTS if inventory.equipment.get(s)]
                if not worn:
                    self.status = "No rings equipped"
                    return
                removed = inventory.unequip(worn[0])
            else:
                removed = inventory.unequip(row)
                if removed is None:
                    self.status = "Nothing equipped in this slot"
                    return
            name = removed.name if removed is not None else "item"
            self.status = f"Unequipped {name}"
            self._persist()
        elif key == keys.ENTER and row != RINGS_ROW:
            item = inventory.equipped_item(row)
            if item is not None and item.is_container:
                self.open_container(item)

    def _wallet_key(self, key: str) -> None:
        if key in keys.UP:
            self.currency_cursor = clamp_cursor(self.currency_cursor - 1, len(CURRENCY_ROWS))
            return
        if key in keys.DOWN:
            self.currency_cursor = clamp_cursor(self.currency_cursor + 1, len(CURRENCY_ROWS))
            return

        row = CURRENCY_ROWS[self.currency_cursor]
        label = currency_label(row)
        if key in ("a", "+", keys.ENTER):
            self.open_modal(
                NumericEntry(purpose=NumericPurpose.CURRENCY_ADD, target=row, title=f"Add {label}"),
                status=f"Add {label}: type amount and press Enter",
            )
        elif key in ("s", "-"):
            self.open_modal(
                NumericEntry(purpose=NumericPurpose.CURRENCY_SPEND, target=row, title=f"Spend {label}"),
                status=f"Spend {label}: type amount and press Enter",
            )


__all__ = [
    "InventoryPanel",
    "EQUIPMENT_ROWS",
    "CURRENCY_ROWS",
    "RINGS_ROW",
    "TOTAL_ROW",
    "currency_label",
    "InventoryController",
]
