"""Structured logging setup."""

from __future__ import annotations

import logging
import sys

import structlog

from .settings import get_config


def configure_logging(level: str | None = None) -> None:
    """Configure structlog to render events to stderr at ``level``."""
    level_name = (level or get_config().log_level).upper()
    min_level = logging.getLevelName(level_name)
    if not isinstance(min_level, int):
        min_level = logging.WARNING

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None):
    """Get a structured logger.

    Output follows whatever structlog configuration the application has set;
    call :func:`configure_logging` to opt in to plotweave's own rendering.
    """
    return structlog.get_logger(name)
