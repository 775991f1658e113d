"""Configuration utilities for infrastructure layer."""

import os

LOG_FORMATS = ("console", "json")


def get_log_level() -> str:
    """
    Get log level name for the structlog filter.

    Returns:
        Upper-cased level from CALORIE_ESTIMATOR_LOG_LEVEL, defaults to
        "WARNING" so that a plain CLI run prints only the result
    """
    return os.getenv("CALORIE_ESTIMATOR_LOG_LEVEL", "WARNING").strip().upper()


def get_log_format() -> str:
    """
    Get log renderer name.

    Returns:
        "console" or "json" from CALORIE_ESTIMATOR_LOG_FORMAT; unknown
        values fall back to "console"
    """
    value = os.getenv("CALORIE_ESTIMATOR_LOG_FORMAT", "console").strip().lower()
    if value not in LOG_FORMATS:
        return "console"
    return value
