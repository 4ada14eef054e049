"""Configuration utilities for EXEMPLAR.

This module centralizes the constants used by the calculator and string
utilities, plus the single environment lookup used for logging setup.
"""

import logging
import os

COMPLEX_CALCULATION_DELAY = 1.5  # seconds  # pragma: no mutate
PROCESS_DELAY = 2.0  # seconds  # pragma: no mutate
PROCESSED_SUFFIX = "-PROCESSED"

LOG_LEVEL_ENV = "EXEMPLAR_LOG_LEVEL"
DEFAULT_LOG_LEVEL = logging.WARNING


class InvalidLogLevelError(Exception):
    """Raised when EXEMPLAR_LOG_LEVEL names an unknown logging level."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid log level in {LOG_LEVEL_ENV}: {value!r}")
        self.value = value


def get_log_level() -> int:
    """Get the console logging level from the environment.

    Level names are matched case-insensitively against the standard
    `logging` level names (DEBUG, INFO, WARNING, ...).

    Returns:
        The numeric level named by `EXEMPLAR_LOG_LEVEL`, or `logging.WARNING`
        when the variable is unset or empty.

    Raises:
        InvalidLogLevelError: If the variable names an unknown level.
    """
    if not (value := os.environ.get(LOG_LEVEL_ENV, "").strip()):
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelNamesMapping().get(value.upper())
    if level is None:
        raise InvalidLogLevelError(value)
    return level
