"""structlog setup for the character sheet.

textual owns the terminal, so in normal runs every log line goes to a
file. The stdlib root logger is pointed at the same stream, which keeps
messages from textual and sqlite off the screen.

Example:
    >>> from dnd_sheet.core.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Damage applied", amount=7, hp=12)
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any, TextIO

import structlog
from structlog.types import Processor


if TYPE_CHECKING:
    from structlog.types import EventDict, WrappedLogger


_file_stream: TextIO | None = None

# Libraries that flood DEBUG output under textual
_NOISY_LOGGERS = ("asyncio", "markdown_it")


def drop_unset_context(_: WrappedLogger, __: str, event_dict: EventDict) -> EventDict:
    """Remove None-valued keys, e.g. ``character`` while no sheet is open."""
    return {key: value for key, value in event_dict.items() if value is not None}


def _log_destination(log_file: str | Path | None) -> TextIO:
    """The stream logs go to: a reopened append-mode file, or stderr."""
    global _file_stream
    if log_file is None:
        return sys.stderr
    if _file_stream is not None and not _file_stream.closed:
        _file_stream.close()
    path = Path(log_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    _file_stream = path.open("a", encoding="utf-8")
    return _file_stream


def configure_logging(
    *,
    level: str = "INFO",
    json_format: bool = False,
    log_file: str | Path | None = None,
) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        level: Minimum level name; unknown names fall back to INFO.
        json_format: Emit one JSON object per line instead of console text.
        log_file: Where to append logs. None writes to stderr, which is
            only sensible when the UI is not running.
    """
    threshold = logging.getLevelName(level.upper())
    if not isinstance(threshold, int):
        threshold = logging.INFO

    stream = _log_destination(log_file)

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        drop_unset_context,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if json_format:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=stream is sys.stderr and sys.stderr.isatty(),
                exception_formatter=structlog.dev.plain_traceback,
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(threshold),
        context_class=dict,
        logger_factory=structlog.WriteLoggerFactory(file=stream),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(asctime)s %(levelname)-8s %(name)s | %(message)s",
        level=threshold,
        stream=stream,
        force=True,
    )
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Attach key/values to every later event on this thread of control.

    The router calls this on each screen change with the screen name and
    the open character.
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()


__all__ = [
    "configure_logging",
    "drop_unset_context",
    "get_logger",
    "bind_context",
    "clear_context",
]
