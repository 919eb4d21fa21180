"""Runtime configuration read from environment variables.

Only caller-facing defaults live here. Scoring weights, thresholds and the
lookup tables are fixed constants in their service modules.
"""

import os
from typing import Optional

from core.exceptions import ConfigurationError


def _env_int(key: str, default: int, minimum: int = 0) -> int:
    """Read an integer setting, raising ConfigurationError on bad values."""
    raw = os.getenv(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"{key} must be an integer, got '{raw}'", config_key=key)
    if value < minimum:
        raise ConfigurationError(f"{key} must be >= {minimum}, got {value}", config_key=key)
    return value


MEALS_PER_DAY = _env_int("MACROMENU_MEALS_PER_DAY", 3, minimum=1)
DEFAULT_MIN_SCORE = _env_int("MACROMENU_MIN_SCORE", 50)
TOP_RECOMMENDATIONS_LIMIT = _env_int("MACROMENU_TOP_LIMIT", 10, minimum=1)
TOP_RECOMMENDATIONS_MIN_SCORE = _env_int("MACROMENU_TOP_MIN_SCORE", 60)

LOG_LEVEL = os.getenv("MACROMENU_LOG_LEVEL", "INFO").upper()
LOG_FILE: Optional[str] = os.getenv("MACROMENU_LOG_FILE") or None
