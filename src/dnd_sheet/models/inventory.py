"""Items, equipment slots and currency.

Equipment slots hold item ids rather than copies, so an equipped item
is always the same object the items panel edits.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, model_validator

from dnd_sheet.core.constants import COIN_VALUES_CP
from dnd_sheet.core.exceptions import InsufficientFundsError, ValidationError
from dnd_sheet.models.base import SheetModel
from dnd_sheet.models.enums import Denomination, EquipmentSlot, ItemType, WeaponCategory


# =============================================================================
# Currency
# =============================================================================


class Currency(SheetModel):
    """A purse of coins."""

    cp: int = Field(default=0, ge=0, description="Copper pieces")
    sp: int = Field(default=0, ge=0, description="Silver pieces")
    ep: int = Field(default=0, ge=0, description="Electrum pieces")
    gp: int = Field(default=0, ge=0, description="Gold pieces")
    pp: int = Field(default=0, ge=0, description="Platinum pieces")

    def amount(self, denomination: Denomination | str) -> int:
        return getattr(self, Denomination(denomination).value)

    def add(self, denomination: Denomination | str, amount: int) -> None:
        """Add coins of one denomination.

        Raises:
            ValidationError: If amount is negative.
        """
        if amount < 0:
            raise ValidationError(
                "Cannot add a negative amount",
                field_name=str(denomination),
                invalid_value=amount,
            )
        key = Denomination(denomination).value
        setattr(self, key, getattr(self, key) + amount)

    def spend(self, denomination: Denomination | str, amount: int) -> None:
        """Remove coins of one denomination without conversion.

        Raises:
            InsufficientFundsError: If the purse holds fewer coins.
        """
        key = Denomination(denomination).value
        held = getattr(self, key)
        if amount > held:
            raise InsufficientFundsError(
                f"Not enough {key.upper()}",
                denomination=key,
                amount=amount,
            )
        setattr(self, key, held - amount)

    def total_in_copper(self) -> int:
        return sum(getattr(self, key) * value for key, value in COIN_VALUES_CP.items())

    def total_in_gold(self) -> float:
        """Value of the whole purse in gold pieces."""
        return self.total_in_copper() / COIN_VALUES_CP["gp"]

    def spend_from_total(self, gold: int) -> None:
        """Spend a gold-piece cost using whatever coins are available.

        Gold is used first, then platinum, electrum, silver and copper.
        When a coin overpays, change comes back as gold, silver and copper.

        Args:
            gold: Cost in gold pieces.

        Raises:
            InsufficientFundsError: If the whole purse is worth less.
        """
        cost = gold * COIN_VALUES_CP["gp"]
        if cost > self.total_in_copper():
            raise InsufficientFundsError(
                "Insufficient funds",
                denomination="total",
                amount=gold,
            )

        remaining = cost
        for key in ("gp", "pp", "ep", "sp", "cp"):
            if remaining <= 0:
                break
            value = COIN_VALUES_CP[key]
            held = getattr(self, key)
            coins = min(held, -(-remaining // value))
            setattr(self, key, held - coins)
            remaining -= coins * value

        change = -remaining
        for key in ("gp", "sp", "cp"):
            value = COIN_VALUES_CP[key]
            coins, change = divmod(change, value)
            if coins:
                setattr(self, key, getattr(self, key) + coins)

    def format_cost(self) -> str:
        """Show the highest non-zero denomination, e.g. '15 GP'."""
        for key in ("pp", "gp", "ep", "sp", "cp"):
            held = getattr(self, key)
            if held > 0:
                return f"{held} {key.upper()}"
        return "—"


# =============================================================================
# Items
# =============================================================================


class Item(SheetModel):
    """An inventory item. Containers carry their contents inline."""

    id: str = Field(description="Unique item id within the character")
    name: str = Field(min_length=1)
    item_type: ItemType = Field(default=ItemType.GENERAL)
    description: str = ""
    quantity: int = Field(default=1, ge=1)
    weight: float = Field(default=0.0, ge=0)
    value: Currency = Field(default_factory=Currency)
    equipment_slot: EquipmentSlot | None = None

    # Weapon
    damage: str = ""
    damage_type: str = ""
    weapon_properties: list[str] = Field(default_factory=list)
    weapon_category: WeaponCategory | None = None
    range: str = ""

    # Armor
    armor_class: int = Field(default=0, ge=0)
    stealth_disadvantage: bool = False

    # Magic
    magical: bool = False
    magic_bonus: int = Field(default=0, ge=0, le=3)
    requires_attunement: bool = False
    attuned: bool = False

    # Consumables
    charges: int = Field(default=0, ge=0)
    max_charges: int = Field(default=0, ge=0)

    contents: list[Item] = Field(default_factory=list)

    @property
    def is_container(self) -> bool:
        return len(self.contents) > 0

    @property
    def is_weapon(self) -> bool:
        return self.item_type == ItemType.WEAPON

    @property
    def is_shield(self) -> bool:
        return self.item_type == ItemType.SHIELD

    def has_property(self, prop: str) -> bool:
        return prop.lower() in (p.lower() for p in self.weapon_properties)


# =============================================================================
# Equipment
# =============================================================================


class Equipment(SheetModel):
    """Equipment slots, each holding at most one item id."""

    main_hand: str | None = None
    off_hand: str | None = None
    head: str | None = None
    body: str | None = None
    cloak: str | None = None
    gloves: str | None = None
    boots: str | None = None
    amulet: str | None = None
    ring_1: str | None = None
    ring_2: str | None = None

    def get(self, slot: EquipmentSlot | str) -> str | None:
        return getattr(self, EquipmentSlot(slot).value)

    def set(self, slot: EquipmentSlot | str, item_id: str | None) -> str | None:
        """Put an item id into a slot.

        Returns:
            The id that previously occupied the slot.
        """
        key = EquipmentSlot(slot).value
        previous = getattr(self, key)
        setattr(self, key, item_id)
        return previous

    def slot_of(self, item_id: str) -> EquipmentSlot | None:
        for slot in EquipmentSlot:
            if self.get(slot) == item_id:
                return slot
        return None

    def occupied(self) -> list[tuple[EquipmentSlot, str]]:
        return [(slot, self.get(slot)) for slot in EquipmentSlot if self.get(slot)]


# =============================================================================
# Inventory
# =============================================================================


class Inventory(SheetModel):
    """All items, equipment slots and the purse."""

    items: list[Item] = Field(default_factory=list)
    equipment: Equipment = Field(default_factory=Equipment)
    currency: Currency = Field(default_factory=Currency)

    @model_validator(mode="before")
    @classmethod
    def default_none_sections(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

    def add_item(self, item: Item) -> None:
        self.items.append(item)

    def find_item(self, item_id: str) -> Item | None:
        """Find an item by id, looking inside containers too."""
        stack = list(self.items)
        while stack:
            item = stack.pop(0)
            if item.id == item_id:
                return item
            stack.extend(item.contents)
        return None

    def find_container(self, item_id: str) -> Item | None:
        """Return the container holding item_id, or None for top-level items."""
        stack = list(self.items)
        while stack:
            item = stack.pop(0)
            if any(child.id == item_id for child in item.contents):
                return item
            stack.extend(item.contents)
        return None

    def remove_item(self, item_id: str) -> Item | None:
        """Remove an item wherever it lives and clear any slot holding it.

        Returns:
            The removed item, or None if no item has that id.
        """
        container = self.find_container(item_id)
        siblings = container.contents if container is not None else self.items
        for index, item in enumerate(siblings):
            if item.id == item_id:
                removed = siblings.pop(index)
                slot = self.equipment.slot_of(item_id)
                if slot is not None:
                    self.equipment.set(slot, None)
                return removed
        return None

    def equip(self, item_id: str, slot: EquipmentSlot | str) -> str | None:
        """Equip an item into a slot.

        Returns:
            Id of the item the slot previously held.

        Raises:
            ValidationError: If no item has that id.
        """
        if self.find_item(item_id) is None:
            raise ValidationError(
                f"No item with id {item_id!r}",
                field_name="item_id",
                invalid_value=item_id,
            )
        return self.equipment.set(slot, item_id)

    def unequip(self, slot: EquipmentSlot | str) -> Item | None:
        """Empty a slot.

        Returns:
            The item that was in the slot, if any.
        """
        previous = self.equipment.set(slot, None)
        return self.find_item(previous) if previous else None

    def equipped_item(self, slot: EquipmentSlot | str) -> Item | None:
        item_id = self.equipment.get(slot)
        return self.find_item(item_id) if item_id else None

    def is_equipped(self, item_id: str) -> bool:
        return self.equipment.slot_of(item_id) is not None

    def attuned_count(self) -> int:
        """Count attuned items among those equipped."""
        count = 0
        for _, item_id in self.equipment.occupied():
            item = self.find_item(item_id)
            if item is not None and item.attuned:
                count += 1
        return count

    def total_weight(self) -> float:
        return sum(item.weight * item.quantity for item in self.items)


__all__ = [
    "Currency",
    "Item",
    "Equipment",
    "Inventory",
]
