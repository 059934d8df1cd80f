"""Logging setup for the ``unify`` command.

Two handlers hang off the root logger while a command runs:

- a Rich console handler on **stderr** (stdout carries set elements), whose
  level follows ``-v``/``-q``;
- an optional flight recorder: a `MemoryHandler` that keeps recent records
  at every level and writes them to a log file once something goes wrong.

`log_startup` then records what the run looks like: which command, which
element types, which handlers, and where the flight recorder writes.

Only the CLI calls into this module. ``unify4py.sets`` never logs.
"""

from __future__ import annotations

import logging
import os
import platform
from importlib.metadata import PackageNotFoundError, version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

from .config import DEFAULT_ELEMENT_TYPE, ELEMENT_TYPES

if TYPE_CHECKING:
    from logging import Handler, Logger

PROJECT_PREFIX = "unify4py"

CONSOLE_FORMAT = "%(prefix)s%(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
RECORDER_FORMAT = "[%(asctime)s] %(levelname)-8s %(name)s:%(lineno)d %(message)s"

# distributions whose versions are worth knowing when reading a recorder file
_REPORTED_DISTRIBUTIONS = ("click", "click-extra", "rich")


class ThirdPartyPrefixFilter(logging.Filter):  # pylint: disable=too-few-public-methods
    """Tag records from other packages with their top-level package name.

    ``click_extra.colorize`` becomes ``"[click_extra] "``; records from
    ``unify4py`` get an empty prefix. Nothing is filtered out.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        package = record.name.partition(".")[0]
        record.prefix = "" if package == PROJECT_PREFIX else f"[{package}] "
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr handler used for console logging.

    Args:
        level: Minimum level shown. Ignored in debug mode, which shows DEBUG.
        debug_mode: Show timestamps, logger names and source locations.
        color: Let Rich pick a color system; ``False`` disables styling.

    Returns:
        A `RichHandler` writing to stderr.
    """
    console = Console(stderr=True, color_system="auto" if color else None)
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=console,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
        rich_tracebacks=True,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter(DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build the in-memory flight recorder.

    Up to ``capacity`` records are kept in memory and written to ``path``
    when a record at ``flush_level`` or above arrives, or when the buffer
    fills. With ``flush_on_close`` the remaining records are also written
    when logging shuts down. ``path`` is truncated here, so each run starts
    a fresh file, and missing parent directories are created.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    target = logging.FileHandler(path, mode="w", encoding="utf-8")
    target.setFormatter(logging.Formatter(RECORDER_FORMAT))
    return MemoryHandler(
        capacity,
        flushLevel=flush_level,
        target=target,
        flushOnClose=flush_on_close,
    )


def _distribution_versions() -> str:
    found = []
    for name in _REPORTED_DISTRIBUTIONS:
        try:
            found.append(f"{name}={version(name)}")
        except PackageNotFoundError:
            found.append(f"{name}=?")
    return ", ".join(found)


def _describe_handler(handler: Handler) -> str:
    if isinstance(handler, MemoryHandler):
        target = handler.target
        destination = getattr(target, "baseFilename", type(target).__name__)
        return (
            f"flight recorder -> {destination} "
            f"(capacity={handler.capacity}, flush_on_close={handler.flushOnClose})"
        )
    return f"{type(handler).__name__} at {logging.getLevelName(handler.level)}"


def log_startup(  # pylint: disable=too-many-arguments
    logger: Logger,
    *,
    app_version: str,
    command: str | None,
    level: int,
    handlers: list[Handler],
    logger_levels: dict[str, int],
) -> None:
    """Record one INFO summary line plus DEBUG diagnostics for this run.

    The summary reads ``UNIFY <version> - console=<LEVEL>,
    flight-recorder=ON|OFF, command=<name>``. The DEBUG lines cover the
    runtime, library versions, element types, each handler (the flight
    recorder's file, capacity and flush-on-close setting are read from the
    handler itself) and the per-logger levels.
    """
    recording = any(isinstance(h, MemoryHandler) for h in handlers)
    logger.info(
        "UNIFY %s - console=%s, flight-recorder=%s, command=%s",
        app_version,
        logging.getLevelName(level),
        "ON" if recording else "OFF",
        command or "<none>",
    )
    logger.debug(
        "Runtime: Python %s on %s %s (pid %d)",
        platform.python_version(),
        platform.system(),
        platform.release(),
        os.getpid(),
    )
    logger.debug("Working directory: %s", Path.cwd())
    logger.debug("Libraries: %s", _distribution_versions())
    logger.debug(
        "Element types: %s (default %s)",
        ", ".join(ELEMENT_TYPES),
        DEFAULT_ELEMENT_TYPE,
    )
    for handler in handlers:
        logger.debug("Handler: %s", _describe_handler(handler))
    logger.debug(
        "Logger levels: %s",
        ", ".join(
            f"{name}={logging.getLevelName(lvl)}"
            for name, lvl in sorted(logger_levels.items())
        ),
    )
