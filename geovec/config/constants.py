"""Constant values for the vector library."""

from __future__ import annotations

DEFAULT_EQUAL_TOLERANCE = 1e-7

DEFAULTS = {
    "EQUAL_TOLERANCE": DEFAULT_EQUAL_TOLERANCE,
    "RANDOM_SEED": None,
    "LOG_DIRECTORY": "logs",
    "DEBUG_LOG_FILE": "geovec_debug.log",
    "DEBUG_LOG_LEVEL": "INFO",
    "LOG_TO_FILE": False,
}
