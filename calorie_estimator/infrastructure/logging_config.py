"""structlog setup shared by the entry points."""

import logging
import sys
from typing import Optional

import structlog

from .config import get_log_format, get_log_level


def resolve_level(name: str) -> int:
    """Map a level name to its ``logging`` constant, INFO when unknown."""
    level = logging.getLevelName(name.upper())
    if isinstance(level, int):
        return level
    return logging.INFO


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """Configure structlog processors and level filter.

    Args:
        level: Level name, defaults to CALORIE_ESTIMATOR_LOG_LEVEL
        fmt: "console" or "json", defaults to CALORIE_ESTIMATOR_LOG_FORMAT
    """
    fmt = fmt or get_log_format()
    renderer = (
        structlog.processors.JSONRenderer()
        if fmt == "json"
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            resolve_level(level or get_log_level())
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
