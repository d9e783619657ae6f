"""Configuration utilities for infrastructure layer."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the backend directory (does not override real env vars)
_env_path = Path(__file__).parent.parent / ".env"
if _env_path.exists():
    load_dotenv(_env_path)


def get_log_level() -> str:
    """
    Get log level name.

    Returns:
        Upper-cased LOG_LEVEL env var, defaults to "INFO"
    """
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_format() -> str:
    """
    Get log renderer.

    Returns:
        "json" or "console" from LOG_FORMAT, defaults to "console"
    """
    value = os.getenv("LOG_FORMAT", "console").lower()
    return value if value in ("json", "console") else "console"


def get_activity_window_days() -> int:
    """
    Get number of days of device activity averaged for TDEE.

    Returns:
        ACTIVITY_WINDOW_DAYS as int (minimum 1), defaults to 7
    """
    try:
        days = int(os.getenv("ACTIVITY_WINDOW_DAYS", "7"))
    except ValueError:
        return 7
    return days if days >= 1 else 7


def get_default_activity_multiplier() -> float:
    """
    Get multiplier used when no activity data is available.

    Returns:
        DEFAULT_ACTIVITY_MULTIPLIER as float, defaults to 1.55.
        The static TDEE path still clamps it to [1.2, 2.0].
    """
    try:
        return float(os.getenv("DEFAULT_ACTIVITY_MULTIPLIER", "1.55"))
    except ValueError:
        return 1.55


def get_repository_backend() -> str:
    """
    Get persistence backend name.

    Returns:
        REPOSITORY_BACKEND lower-cased, defaults to "inmemory"
    """
    return os.getenv("REPOSITORY_BACKEND", "inmemory").lower()
