"""Command-line entry point: ``dnd-sheet`` or ``python -m dnd_sheet``."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dnd_sheet.catalog.catalog import Catalog, get_catalog
from dnd_sheet.core.config import get_settings
from dnd_sheet.core.exceptions import ConfigurationError, SheetError
from dnd_sheet.core.logging import configure_logging, get_logger
from dnd_sheet.storage.database import CharacterStore, get_store
from dnd_sheet.ui.app import run_app


logger = get_logger(__name__)


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="dnd-sheet",
        description="D&D 5e character sheet for the terminal",
    )
    parser.add_argument(
        "--db",
        metavar="PATH",
        help="SQLite character database (default: from settings)",
    )
    parser.add_argument(
        "--catalog",
        metavar="DIR",
        help="Directory of JSON catalog overrides",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_arguments(argv)
    try:
        settings = get_settings()
    except ConfigurationError as e:
        # logging is configured from these settings, so report directly
        print(f"Error: {e.message}", file=sys.stderr)
        for key, problem in e.details.items():
            print(f"  {key}: {problem}", file=sys.stderr)
        return 1

    configure_logging(
        level=args.log_level or settings.logging.level,
        json_format=settings.logging.json_format,
        log_file=settings.logging.file,
    )

    try:
        store = CharacterStore(args.db) if args.db else get_store()
        catalog = Catalog(Path(args.catalog)) if args.catalog else get_catalog()
    except SheetError as e:
        logger.error("Startup failed", error=e.message, details=e.details)
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    logger.info("Starting", version=settings.app_version)
    run_app(store, catalog, settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
