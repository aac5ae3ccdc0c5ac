"""Tests for structured logging setup."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest
import structlog

from dnd_sheet.core.logging import bind_context, clear_context, configure_logging, get_logger


if TYPE_CHECKING:
    from collections.abc import Generator
    from pathlib import Path


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    yield
    clear_context()
    structlog.reset_defaults()


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_writes_to_log_file(self, tmp_path: Path) -> None:
        """Test events go to the log file rather than stdout."""
        log_file = tmp_path / "logs" / "sheet.log"
        configure_logging(level="INFO", log_file=log_file)

        get_logger("tests").info("Character saved", id="abc")

        content = log_file.read_text(encoding="utf-8")
        assert "Character saved" in content
        assert "abc" in content

    def test_json_lines_include_bound_context(self, tmp_path: Path) -> None:
        """Test bound context is merged into JSON output."""
        log_file = tmp_path / "sheet.log"
        configure_logging(level="DEBUG", json_format=True, log_file=log_file)

        bind_context(screen="inventory", character="Thorin")
        get_logger("tests").info("Item equipped", item="Longsword")

        record = json.loads(log_file.read_text(encoding="utf-8").strip().splitlines()[-1])
        assert record["event"] == "Item equipped"
        assert record["screen"] == "inventory"
        assert record["character"] == "Thorin"
        assert record["level"] == "info"

    def test_level_filters_debug(self, tmp_path: Path) -> None:
        log_file = tmp_path / "sheet.log"
        configure_logging(level="WARNING", log_file=log_file)

        get_logger("tests").info("quiet")
        get_logger("tests").warning("loud")

        content = log_file.read_text(encoding="utf-8")
        assert "quiet" not in content
        assert "loud" in content

    def test_unset_context_dropped(self, tmp_path: Path) -> None:
        log_file = tmp_path / "sheet.log"
        configure_logging(level="INFO", json_format=True, log_file=log_file)

        bind_context(screen="selection", character=None)
        get_logger("tests").info("Screen changed")

        record = json.loads(log_file.read_text(encoding="utf-8").strip().splitlines()[-1])
        assert record["screen"] == "selection"
        assert "character" not in record

    def test_unknown_level_falls_back_to_info(self, tmp_path: Path) -> None:
        log_file = tmp_path / "sheet.log"
        configure_logging(level="CHATTY", log_file=log_file)

        get_logger("tests").debug("hidden")
        get_logger("tests").info("shown")

        content = log_file.read_text(encoding="utf-8")
        assert "hidden" not in content
        assert "shown" in content
