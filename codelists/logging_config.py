"""Structured logging setup shared by the library and its callers."""

import logging
from typing import Optional

import structlog

from codelists.config import get_settings


def configure_logging(level: Optional[str] = None, debug: Optional[bool] = None) -> None:
    """Configure structlog processors and the minimum level.

    Args:
        level: Log level name (e.g. "info", "debug"). Defaults to LOG_LEVEL.
        debug: Human-readable console output instead of JSON. Defaults to DEBUG.
    """
    settings = get_settings()
    level_name = (level or settings.LOG_LEVEL).upper()
    use_console = settings.DEBUG if debug is None else debug

    min_level = logging.getLevelName(level_name)
    if not isinstance(min_level, int):
        min_level = logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if use_console else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        cache_logger_on_first_use=False,
    )
