"""Logging helpers for applications using monthspan.

The library modules only emit DEBUG records through module loggers and never
configure logging themselves. Applications (or a REPL session) that want to
see those records on the console can call `configure_logging`, which installs
a Rich console handler on the root logger.
"""

from __future__ import annotations

import logging
from typing import Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

from monthspan import config

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "monthspan"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class ThirdPartyPrefixFilter(logging.Filter):
    """Annotate third-party log records with a short prefix.

    Records from loggers outside the project get `record.prefix` set to a
    bracketed token like "[urllib3]"; project records get an empty prefix.
    The filter never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not record.name.startswith(PROJECT_PREFIX):
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""
        return True


def config_console_handler(
    level: int = logging.WARNING, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler writing to stderr.

    In debug mode the handler is set to DEBUG and shows the logger name and
    source location; otherwise third-party records get a short prefix.

    Args:
        level: Minimum level for console output (overridden to DEBUG in debug_mode).
        debug_mode: When True, enable debug formatting.
        color: Enable color output when True.

    Returns:
        RichHandler: Configured handler suitable to attach to the root logger.
    """
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    fmt = "%(name)s: %(message)s" if debug_mode else "%(prefix)s %(message)s"
    handler.setFormatter(logging.Formatter(fmt=fmt))

    if not debug_mode:
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def configure_logging(
    level: int | None = None,
    debug_mode: bool | None = None,
    color: bool | None = None,
) -> RichHandler:
    """Send log records to the console through a Rich handler.

    Arguments left as None are read from the environment (see `monthspan.config`).

    Args:
        level: Minimum console level.
        debug_mode: Enable debug formatting and DEBUG level.
        color: Enable color output.

    Returns:
        RichHandler: The handler installed on the root logger.

    Raises:
        InvalidLogLevelError: If `level` is None and MONTHSPAN_LOG_LEVEL is invalid.
    """
    if level is None:
        level = config.get_log_level()
    if debug_mode is None:
        debug_mode = config.get_debug_mode()
    if color is None:
        color = config.get_color_enabled()

    handler = config_console_handler(level=level, debug_mode=debug_mode, color=color)
    logging.basicConfig(
        level=logging.DEBUG,  # capture all levels; the handler filters
        handlers=[handler],
        force=True,
    )
    logging.getLogger(PROJECT_PREFIX).debug(
        "Console logging configured: level=%s, debug=%s, color=%s",
        logging.getLevelName(handler.level),
        debug_mode,
        color,
    )
    return handler
