"""Settings, structured logging and the exception hierarchy shared by every layer."""

from __future__ import annotations

from dnd_sheet.core.config import (
    LoggingSettings,
    Settings,
    SheetSettings,
    StorageSettings,
    clear_settings_cache,
    get_settings,
)
from dnd_sheet.core.exceptions import (
    CatalogEntryNotFoundError,
    CatalogError,
    CharacterNotFoundError,
    ConfigurationError,
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
from dnd_sheet.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


__all__ = [
    # Exceptions
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
    # Configuration
    "Settings",
    "StorageSettings",
    "SheetSettings",
    "LoggingSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
