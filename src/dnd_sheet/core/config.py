"""Settings for the character sheet, read from DND_SHEET_* variables.

Each group is its own pydantic-settings class with its own prefix, so a
group can be built on its own in tests:

    DND_SHEET_DATABASE_PATH          SQLite file holding the characters
    DND_SHEET_CATALOG_PATH           directory of JSON catalog overrides
    DND_SHEET_SHEET_ITEMS_PER_PAGE   rows per page in list panels
    DND_SHEET_LOG_LEVEL / _LOG_FILE  logging threshold and destination
    DND_SHEET_DEBUG                  forces DEBUG logging

A ``.env`` file in the working directory is read as well.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dnd_sheet.core.exceptions import ConfigurationError


APP_HOME = Path.home() / ".dnd_sheet"


def _env(prefix: str, **extra: str) -> SettingsConfigDict:
    return SettingsConfigDict(
        env_prefix=prefix,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        **extra,
    )


class StorageSettings(BaseSettings):
    """Where characters are saved and where catalog overrides live."""

    model_config = _env("DND_SHEET_")

    database_path: Path = Field(default_factory=lambda: APP_HOME / "characters.db")
    catalog_path: Path | None = None

    @field_validator("database_path", mode="after")
    @classmethod
    def create_database_dir(cls, value: Path) -> Path:
        value.parent.mkdir(parents=True, exist_ok=True)
        return value

    @field_validator("catalog_path", mode="after")
    @classmethod
    def catalog_must_be_dir(cls, value: Path | None) -> Path | None:
        """A missing directory is allowed; a regular file is not.

        Raises:
            ConfigurationError: If the path points at a file.
        """
        if value is not None and value.exists() and not value.is_dir():
            raise ConfigurationError(
                f"catalog_path must be a directory: {value}",
                config_key="catalog_path",
            )
        return value


class SheetSettings(BaseSettings):
    """Screen behaviour.

    Attributes:
        items_per_page: Rows visible in list panels before scrolling.
        search_min_chars: Query length at which item search starts.
        search_limit: Most matches a catalog search takes from each category.
        surface_save_errors: Show failed autosaves on the status line
            as well as in the log.
    """

    model_config = _env("DND_SHEET_SHEET_")

    items_per_page: int = Field(default=15, ge=1, le=100)
    search_min_chars: int = Field(default=2, ge=1, le=10)
    search_limit: int = Field(default=10, ge=1, le=50)
    surface_save_errors: bool = True


class LoggingSettings(BaseSettings):
    model_config = _env("DND_SHEET_LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    json_format: bool = False
    # stdout belongs to the UI
    file: Path | None = Field(default_factory=lambda: APP_HOME / "sheet.log")


class Settings(BaseSettings):
    """All settings groups plus application identity."""

    model_config = _env("DND_SHEET_", env_nested_delimiter="__")

    app_name: str = "D&D 5e Character Sheet"
    app_version: str = "0.1.0"
    debug: bool = False

    storage: StorageSettings = Field(default_factory=StorageSettings)
    sheet: SheetSettings = Field(default_factory=SheetSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @model_validator(mode="after")
    def debug_means_debug_logging(self) -> Settings:
        if self.debug:
            self.logging = self.logging.model_copy(update={"level": "DEBUG"})
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings once per process.

    Raises:
        ConfigurationError: If a variable or ``.env`` entry is invalid.
    """
    try:
        return Settings()
    except ValidationError as e:
        problems = {".".join(str(p) for p in err["loc"]): err["msg"] for err in e.errors()}
        raise ConfigurationError(f"Invalid settings: {e.error_count()} problem(s)", details=problems) from e


def clear_settings_cache() -> None:
    """Forget the loaded settings; the next get_settings() rereads the environment."""
    get_settings.cache_clear()


__all__ = [
    "APP_HOME",
    "StorageSettings",
    "SheetSettings",
    "LoggingSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
