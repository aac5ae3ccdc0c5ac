"""Tests for the exception hierarchy."""

from __future__ import annotations

from dnd_sheet.core.exceptions import (
    CatalogEntryNotFoundError,
    CatalogError,
    CharacterNotFoundError,
    DiceFormatError,
    InsufficientFundsError,
    NavigationError,
    PersistenceError,
    ResourceExhaustedError,
    RulesError,
    SheetError,
    UIError,
    ValidationError,
)


class TestSheetError:
    """Tests for the base SheetError exception."""

    def test_basic_message(self) -> None:
        """Test exception with basic message."""
        exc = SheetError("Test error message")
        assert exc.message == "Test error message"
        assert exc.details == {}
        assert str(exc) == "Test error message"

    def test_with_details(self) -> None:
        """Test exception with additional details."""
        exc = SheetError("Test error", details={"key": "value", "count": 42})
        assert "key='value'" in str(exc)
        assert "count=42" in str(exc)

    def test_repr(self) -> None:
        exc = SheetError("Test", details={"x": 1})
        assert repr(exc) == "SheetError(message='Test', details={'x': 1})"


class TestPersistenceExceptions:
    """Tests for persistence exceptions."""

    def test_character_id_in_details(self) -> None:
        exc = CharacterNotFoundError("Missing", character_id="abc")
        assert exc.details["character_id"] == "abc"
        assert isinstance(exc, PersistenceError)
        assert isinstance(exc, SheetError)


class TestCatalogExceptions:
    """Tests for catalog exceptions."""

    def test_entry_not_found_context(self) -> None:
        exc = CatalogEntryNotFoundError("Spell not found", name="Wish", category="spells")
        assert exc.details == {"name": "Wish", "category": "spells"}
        assert isinstance(exc, CatalogError)


class TestRulesExceptions:
    """Tests for rule engine exceptions."""

    def test_dice_format_error(self) -> None:
        exc = DiceFormatError("Bad dice", expression="2x6")
        assert exc.details["expression"] == "2x6"
        assert isinstance(exc, RulesError)

    def test_insufficient_funds_is_resource_exhaustion(self) -> None:
        exc = InsufficientFundsError("Insufficient funds", denomination="gp", amount=50)
        assert exc.details == {"denomination": "gp", "amount": 50, "resource": "currency"}
        assert isinstance(exc, ResourceExhaustedError)


class TestOtherExceptions:
    def test_validation_error_fields(self) -> None:
        exc = ValidationError("Negative", field_name="gp", invalid_value=-1)
        assert exc.details == {"field_name": "gp", "invalid_value": -1}

    def test_navigation_error_is_ui_error(self) -> None:
        exc = NavigationError("No character is open", signal="open_inventory")
        assert exc.details["signal"] == "open_inventory"
        assert isinstance(exc, UIError)

    def test_none_context_skipped(self) -> None:
        exc = PersistenceError("Database error", character_id=None)
        assert exc.details == {}
        assert str(exc) == "Database error"
