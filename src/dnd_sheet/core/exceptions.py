"""Exception hierarchy for the character sheet.

Every domain failure derives from :class:`SheetError`. Screen controllers
catch it at one seam and turn ``message`` into a status line; ``details``
carries the context that goes to the log.

Keyword context is folded into ``details``, skipping None values:

    >>> e = InsufficientFundsError("Insufficient funds", denomination="gp", amount=50)
    >>> e.details
    {'denomination': 'gp', 'amount': 50, 'resource': 'currency'}
"""

from __future__ import annotations

from typing import Any


class SheetError(Exception):
    """Base class for sheet errors.

    Attributes:
        message: One-line description shown to the user.
        details: Context for the log.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None, **context: Any) -> None:
        self.message = message
        self.details = dict(details or {})
        self.details.update({key: value for key, value in context.items() if value is not None})
        super().__init__(str(self))

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value!r}" for key, value in self.details.items())
        return f"{self.message} [{context}]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Persistence
# =============================================================================


class PersistenceError(SheetError):
    """The store could not read or write a record. Context: ``character_id``."""


class CharacterNotFoundError(PersistenceError):
    pass


# =============================================================================
# Catalog
# =============================================================================


class CatalogError(SheetError):
    """A catalog file is unreadable or malformed. Context: ``category``."""


class CatalogEntryNotFoundError(CatalogError):
    """Context: ``name`` and ``category``."""


# =============================================================================
# Rules
# =============================================================================


class RulesError(SheetError):
    """A rule computation got input it cannot resolve."""


class DiceFormatError(RulesError):
    """Unparseable dice notation. Context: ``expression``."""


class ResourceExhaustedError(RulesError):
    """A spell slot, pact slot, hit die or charge pool is empty.

    Context: ``resource``.
    """


class InsufficientFundsError(ResourceExhaustedError):
    """The purse cannot cover a spend. Context: ``denomination``, ``amount``."""

    def __init__(self, message: str, **context: Any) -> None:
        context.setdefault("resource", "currency")
        super().__init__(message, **context)


# =============================================================================
# Configuration & validation
# =============================================================================


class ConfigurationError(SheetError):
    """Invalid settings. Context: ``config_key``."""


class ValidationError(SheetError):
    """A record mutation broke a constraint.

    Context: ``field_name`` and ``invalid_value``.
    """


# =============================================================================
# UI
# =============================================================================


class UIError(SheetError):
    pass


class NavigationError(UIError):
    """The router cannot honour a navigation signal. Context: ``signal``."""


__all__ = [
    "SheetError",
    "PersistenceError",
    "CharacterNotFoundError",
    "CatalogError",
    "CatalogEntryNotFoundError",
    "RulesError",
    "DiceFormatError",
    "ResourceExhaustedError",
    "InsufficientFundsError",
    "ConfigurationError",
    "ValidationError",
    "UIError",
    "NavigationError",
]
