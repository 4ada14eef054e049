"""Logging helpers for EXEMPLAR.

Library modules only create loggers; they never attach handlers. This module
provides the console setup an application (or a debugging test session) can
opt into: a Rich console handler and a filter that annotates third-party log
records with a short prefix used by console formatting.
"""

from __future__ import annotations

import logging
from typing import Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

from exemplar import config

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "exemplar"

CONSOLE_FORMAT = "%(prefix)s %(message)s"
DEBUG_FORMAT = "%(asctime)s %(name)s: %(message)s"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class ConsoleHandler(RichHandler):
    """Rich handler installed by `configure_logging`.

    A distinct type so a later `configure_logging` call can find and replace
    it on the root logger without touching handlers installed by others.
    """


def _source_prefix(logger_name: str) -> str:
    """Return "[toplevel]" for foreign loggers, "" for project loggers."""
    top = logger_name.split(".")[0]
    return "" if top == PROJECT_PREFIX else f"[{top}]"


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag each record with the package it came from, unless it is ours.

    Sets `record.prefix` ("[urllib3]" for "urllib3.connectionpool", "" for
    "exemplar.calculator") for use by `CONSOLE_FORMAT`. Never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        record.prefix = _source_prefix(record.name)
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> ConsoleHandler:
    """Build the stderr console handler.

    Args:
        level: Minimum level for console output (forced to DEBUG in debug_mode).
        debug_mode: Show timestamps, logger names and source paths instead of
            the short package prefix.
        color: Enable color output when True.

    Returns:
        ConsoleHandler: Handler ready to attach to the root logger.
    """
    color_system: ColorSystem | None = "auto" if color else None
    handler = ConsoleHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter(fmt=DEBUG_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def configure_logging(level: int | None = None, color: bool = True) -> ConsoleHandler:
    """Route all log records to the console through the root logger.

    Project and third-party records share the handler; the latter are shown
    with their package prefix. Calling this again replaces the handler
    installed by a previous call instead of stacking a second one.

    Args:
        level: Console level. Defaults to the level named by
            `EXEMPLAR_LOG_LEVEL` (see `config.get_log_level`). DEBUG switches
            the handler to debug formatting.
        color: Enable color output when True.

    Returns:
        ConsoleHandler: The handler now attached to the root logger.

    Raises:
        InvalidLogLevelError: If `level` is None and the environment names an
            unknown level.
    """
    if level is None:
        level = config.get_log_level()

    root = logging.getLogger()
    for existing in [h for h in root.handlers if isinstance(h, ConsoleHandler)]:
        root.removeHandler(existing)
        existing.close()

    handler = config_console_handler(
        level=level, debug_mode=level <= logging.DEBUG, color=color
    )
    root.addHandler(handler)
    root.setLevel(level)
    return handler
