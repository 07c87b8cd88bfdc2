"""Structured logging for the carousel, built on structlog.

Every carousel event is a snake_case event name plus key/value fields
(``slide_changed index=2 offset_percent=-200``). Views bind their own
``carousel_id``; page-level context such as ``page`` and ``section`` is bound
through contextvars so it reaches every view mounted while it is active.

Usage:
    from src.core.logging import configure_logging, get_logger, log_context

    configure_logging()  # ENVIRONMENT / LOG_LEVEL from env

    with log_context(page="home", section="testimonials"):
        async with CarouselView(region) as view:
            ...
"""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from os import getenv
from typing import IO, Any, cast

import structlog
from structlog.types import Processor

# Chatty stdlib loggers that only matter when something is wrong
QUIET_LOGGERS = ("asyncio",)


def _renderer(development: bool) -> list[Processor]:
    if development:
        return [structlog.dev.ConsoleRenderer(colors=True)]
    return [
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]


def configure_logging(
    development: bool | None = None,
    log_level: str | None = None,
    stream: IO[str] | None = None,
) -> None:
    """Configure structured logging for carousel events.

    Args:
        development: True for coloured console output, False for one JSON
            object per line. None reads ENVIRONMENT ("production" means JSON).
        log_level: DEBUG, INFO, WARNING or ERROR. None reads LOG_LEVEL
            (default INFO). Unknown names fall back to INFO.
        stream: Where log lines go. Defaults to stdout.
    """
    if development is None:
        development = getenv("ENVIRONMENT", "development").lower() != "production"
    if log_level is None:
        log_level = getenv("LOG_LEVEL", "INFO")

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            *_renderer(development),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # force=True replaces handlers installed by earlier calls
    logging.basicConfig(
        format="%(message)s",
        stream=stream or sys.stdout,
        level=numeric_level,
        force=True,
    )
    logging.getLogger().setLevel(numeric_level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger, typically with ``__name__``."""
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))


@contextmanager
def log_context(**kwargs: Any) -> Iterator[None]:
    """Bind context variables for the duration of a block.

    Keys bound here are removed on exit, even if the block raises.

    Example:
        with log_context(page="home"):
            logger.info("carousel_mounted")  # includes page="home"
    """
    with structlog.contextvars.bound_contextvars(**kwargs):
        yield


def bind_contextvars(**kwargs: Any) -> None:
    """Bind context variables included in all subsequent log calls."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_contextvars() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()


def unbind_contextvars(*keys: str) -> None:
    """Remove specific context variables."""
    structlog.contextvars.unbind_contextvars(*keys)
