"""Diagnostic logging for the dungeon core, built on structlog.

Everything the engine reports for developers (levels generated, rooms
rejected, attacks, deaths, item use, turns) goes through here as key/value
events. The in-game message log is unrelated: that is player-facing state
kept on the session.

Example:
    >>> from dungeon_core.core.config import get_settings
    >>> from dungeon_core.core.logging import configure_from_settings, get_logger
    >>> configure_from_settings(get_settings())
    >>> get_logger(__name__).debug("Room accepted", x=12, y=4, w=8, h=6)
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog


if TYPE_CHECKING:
    from structlog.types import EventDict, Processor, WrappedLogger

    from dungeon_core.core.config import Settings


APP_NAME = "dungeon_core"
STDLIB_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def add_app_context(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Tag every event with the application name."""
    event_dict["app"] = APP_NAME
    return event_dict


def _renderer(json_format: bool) -> list[Processor]:
    if json_format:
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer(colors=True, exception_formatter=structlog.dev.plain_traceback)]


def configure_logging(
    *,
    level: str = "INFO",
    json_format: bool = False,
    log_file: str | None = None,
) -> None:
    """Install the structlog pipeline and the stdlib bridge.

    Args:
        level: Minimum level name; unknown names fall back to INFO.
        json_format: Emit one JSON object per line instead of console output.
        log_file: Also write stdlib records to this file.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            add_app_context,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            *_renderer(json_format),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Frontends embedding the core may log through the standard library
    logging.basicConfig(format=STDLIB_FORMAT, level=numeric_level, stream=sys.stdout, force=True)

    if log_file:
        handler = logging.FileHandler(log_file)
        handler.setLevel(numeric_level)
        handler.setFormatter(logging.Formatter(STDLIB_FORMAT))
        logging.getLogger().addHandler(handler)


def configure_from_settings(settings: Settings) -> None:
    """Configure logging from ``Settings.log_level`` and ``Settings.json_logs``.

    ``debug`` forces DEBUG regardless of the configured level.
    """
    level = "DEBUG" if settings.debug else settings.log_level
    configure_logging(level=level, json_format=settings.json_logs)


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Return a structlog logger, usually ``get_logger(__name__)``."""
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Attach key/value pairs to every later event in this context.

    ``new_session`` binds ``session_id`` here so all engine events of one
    play session can be correlated.
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Drop everything bound with :func:`bind_context`."""
    structlog.contextvars.clear_contextvars()


__all__ = [
    "add_app_context",
    "bind_context",
    "clear_context",
    "configure_from_settings",
    "configure_logging",
    "get_logger",
]
