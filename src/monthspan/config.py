"""Configuration utilities for monthspan.

This module centralizes the environment variables read by the package. The
library itself has no settings; these only drive the optional console logging
set up by `monthspan.logging.configure_logging`.
"""

import logging
import os

LOG_LEVEL_ENV = "MONTHSPAN_LOG_LEVEL"  # pragma: no mutate
DEBUG_ENV = "MONTHSPAN_DEBUG"  # pragma: no mutate
NO_COLOR_ENV = "NO_COLOR"  # pragma: no mutate

DEFAULT_LOG_LEVEL = logging.WARNING


class InvalidLogLevelError(ValueError):
    """Raised when MONTHSPAN_LOG_LEVEL does not name a logging level."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid log level in {LOG_LEVEL_ENV}: {value!r}")
        self.value = value


def get_log_level() -> int:
    """Get the console log level from the environment.

    Returns:
        The numeric level named by `MONTHSPAN_LOG_LEVEL` (case-insensitive),
        or `logging.WARNING` when it is unset or empty.

    Raises:
        InvalidLogLevelError: If the variable names an unknown level.
    """
    if not (value := os.environ.get(LOG_LEVEL_ENV, "").strip()):
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelNamesMapping().get(value.upper())
    if level is None:
        raise InvalidLogLevelError(value)
    return level


def get_debug_mode() -> bool:
    """Return True when `MONTHSPAN_DEBUG` is set to any non-empty value."""
    return bool(os.environ.get(DEBUG_ENV))


def get_color_enabled() -> bool:
    """Return False when `NO_COLOR` is set to any non-empty value (see no-color.org)."""
    return not os.environ.get(NO_COLOR_ENV)
