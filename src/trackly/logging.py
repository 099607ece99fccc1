"""Logging helpers used by the TRACKLY CLI.

Console logging goes through Rich. An in-memory "flight recorder" buffers
records at DEBUG granularity and writes them to disk when something goes wrong,
so an operator can hand over the full trail of a failed signal commit without
rerunning it with ``-vvv``.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

import alembic
import sqlalchemy
from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "trackly"


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag records from other libraries with a bracketed prefix.

    Sets ``record.prefix`` to e.g. ``"[sqlalchemy]"`` for foreign loggers and
    to ``""`` for TRACKLY's own. Never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not record.name.startswith(PROJECT_PREFIX):
            # e.g. "sqlalchemy.engine.Engine" -> "[sqlalchemy]"
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler writing to stderr.

    Args:
        level: Minimum level for console output (DEBUG in debug mode).
        debug_mode: Show timestamps, logger names and source paths.
        color: Enable color output.

    Returns:
        RichHandler: Handler to attach to the root logger.
    """

    # keep in step with click-extra's --color / --no-color
    ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]
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

    fmt = (
        "%(prefix)s %(message)s"
        if not debug_mode
        else "%(asctime)s %(name)s: %(message)s"
    )
    handler.setFormatter(logging.Formatter(fmt=fmt))

    if not debug_mode:
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Configure an in-memory flight recorder backed by a file.

    Buffers up to ``capacity`` records and flushes them to ``path`` when a
    record at ``flush_level`` or higher arrives, or on close when
    ``flush_on_close`` is set.
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(process)d:%(threadName)s] %(levelname)s %(name)s:%(lineno)d: %(message)s"
        )
    )

    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def log_startup(  # pylint: disable=too-many-arguments
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_recorder: bool,
    flight_capacity: int | None,
    force_flush_fr: bool,
    logger_levels: dict[str, int],
    db_url: str | None = None,
    hotel_context: str | None = None,
    holidays_path: str | None = None,
) -> None:
    """Log a one-line startup summary at INFO and diagnostics at DEBUG.

    Args:
        logger: Logger used to emit startup messages.
        app_version: Application version string.
        level: Effective console logging level.
        handlers: Handlers attached to the root logger.
        log_path: Flight-recorder output file, or None.
        flight_recorder: Whether the flight recorder is enabled.
        flight_capacity: Flight recorder buffer size, or None.
        force_flush_fr: Whether the flight recorder flushes on close.
        logger_levels: Per-logger level overrides.
        db_url: Database URL with the password masked, or None when unset.
        hotel_context: Context tag used for VIP setup tasks.
        holidays_path: Holiday table override, or None for the packaged table.
    """
    logger.info(
        "TRACKLY %s: console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(level),
        "ON" if flight_recorder else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    logger.debug("Alembic: %s", alembic.__version__)
    logger.debug("SQLAlchemy: %s", sqlalchemy.__version__)
    logger.debug("Database: %s", db_url or "<unset>")
    logger.debug("Hotel context: %s", hotel_context or "<default>")
    logger.debug("Holiday table: %s", holidays_path or "<packaged>")
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            str(log_path) if log_path else "<none>",
            flight_capacity,
            force_flush_fr,
        )
    if logger_levels:
        logger.debug(
            "Per-logger overrides: %s",
            {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()},
        )
    else:
        logger.debug("Per-logger overrides: <none>")  # pragma: no cover
