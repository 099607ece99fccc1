"""TRACKLY CLI entry point.

Defines the top-level ``trackly`` command (via Click-Extra), configures logging
once per invocation and registers the command groups:

- ``trackly db``: schema migrations and seed loading.
- ``trackly calendar``: month view, events and meetings.
- ``trackly signals``: pending artist bookings and residency commit.
- ``trackly bookings``: guest ledger, check-in and occupancy.
- ``trackly tickets``: maintenance tickets.
- ``trackly price``: room tier price projection.

Examples
    $ trackly db upgrade
    $ trackly calendar show 2026 8 -c h1
    $ trackly signals commit sig-1 --room r-401 --pickup 18:30
"""

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir
from sqlalchemy.exc import ArgumentError

from trackly import __version__
from trackly.config import DB_URL_ENV, HOLIDAYS_PATH_ENV, get_hotel_context
from trackly.logging import config_console_handler, config_flight_recorder, log_startup

from .bookings import bookings as bookings_group
from .calendar_cmds import calendar as calendar_group
from .db import db as db_group
from .helpers.db_url import sanitize_url
from .helpers.log_level_parser import parse_log_level
from .price import price as price_command
from .signals import signals as signals_group
from .tickets import tickets as tickets_group

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """TRACKLY command-line interface.

    TRACKLY keeps a boutique hotel's operations in one place: the shared
    calendar with holidays and birthdays, the guest ledger, maintenance
    tickets, and the VIP residency workflow that turns artist-booking
    signals from other domains into a protocol, a booking and a setup task.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (full tracebacks and source locations in the console).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file (overrides default flight recorder path).",
    default=Path(user_log_dir("trackly", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="TRACKLY_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="TRACKLY_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep the last N log records at DEBUG granularity in memory and write "
        "them to --log-path when a WARNING or ERROR occurs, or on exit with "
        "--force-flush. Console verbosity is unchanged."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Write the flight recorder buffer to --log-path on program exit.",
    default=False,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Applies to both "
        "console and flight recorder. Repeatable (e.g. -L sqlalchemy=INFO) or "
        "via TRACKLY_LOGGER_LEVELS (comma/space list)."
    ),
    default=("sqlalchemy=WARNING", "alembic=WARNING"),
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def trackly(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """TRACKLY command-line interface."""

    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = [
        config_console_handler(
            level=level, debug_mode=debug, color=ctx.color is not False
        )
    ]
    if flight_recorder:
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush_flight_recorder,
            )
        )

    # capture everything at the root; handlers filter
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    if db_url := os.environ.get(DB_URL_ENV):
        try:
            db_url = sanitize_url(db_url)
        except ArgumentError:
            db_url = "<malformed>"
    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity if flight_recorder else None,
        force_flush_fr=force_flush_flight_recorder,
        logger_levels=logger_levels,
        db_url=db_url,
        hotel_context=get_hotel_context(),
        holidays_path=os.environ.get(HOLIDAYS_PATH_ENV),
    )

    ctx.call_on_close(logging.shutdown)


trackly.add_command(db_group)
trackly.add_command(calendar_group)
trackly.add_command(signals_group)
trackly.add_command(bookings_group)
trackly.add_command(tickets_group)
trackly.add_command(price_command)
