"""Configuration management."""

import os


def _int_env(name: str, default: int) -> int:
    """Read integer env var, falling back on garbage."""
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


# Debug Handler Configuration
DEBUG_LEVEL = _int_env("GRIG_DEBUG_LEVEL", 0)
DEBUG_LOG_FILE = os.getenv("GRIG_DEBUG_LOG_FILE", "")
SEPARATOR = os.getenv("GRIG_DEBUG_SEPARATOR", "|")

# Rig library Configuration
RIG_LOGGER_NAME = os.getenv("GRIG_RIG_LOGGER", "hamlib")

# Record Format (indexed by Source)
TIME_FORMAT = "%Y/%m/%d %H:%M:%S"
SOURCE_NAMES = ("NONE", "HAMLIB", "GRIG")
