"""Configuration utilities for TRACKLY.

Small helpers reading settings from the environment and locating packaged data.
"""

import json
import os
import sys
from importlib.resources import files
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import TextIO

from alembic.config import Config

from trackly.domain.holidays import HolidayRegistry

ALEMBIC_URL_KEY = "sqlalchemy.url"  # pragma: no mutate
ALEMBIC_SCRIPT_LOCATION_KEY = "script_location"  # pragma: no mutate

DB_URL_ENV = "TRACKLY_DB_URL"
HOTEL_CONTEXT_ENV = "TRACKLY_HOTEL_CONTEXT"
HOLIDAYS_PATH_ENV = "TRACKLY_HOLIDAYS_PATH"

DEFAULT_HOTEL_CONTEXT = "h1"
DEFAULT_HOLIDAY_TABLE = "holidays_za.json"


class DatabaseUrlNotSetError(Exception):
    """Raised when the TRACKLY_DB_URL environment variable is not set."""


class HolidayTableError(Exception):
    """Raised when a holiday table file cannot be read or parsed."""

    def __init__(self, source: str, detail: str) -> None:
        super().__init__(f"Invalid holiday table {source}: {detail}")
        self.source = source
        self.detail = detail


def get_db_url() -> str:
    """Get the database URL from the environment.

    Returns:
        The value of the `TRACKLY_DB_URL` environment variable.

    Raises:
        DatabaseUrlNotSetError: If `TRACKLY_DB_URL` is not set.
    """
    if not (url := os.environ.get(DB_URL_ENV)):
        raise DatabaseUrlNotSetError
    return url


def get_hotel_context() -> str:
    """Context tag of the hotel operations board (`TRACKLY_HOTEL_CONTEXT`, default ``h1``)."""
    return os.environ.get(HOTEL_CONTEXT_ENV) or DEFAULT_HOTEL_CONTEXT


def load_holiday_registry(path: Path | str | None = None) -> HolidayRegistry:
    """Load a holiday table.

    Precedence: ``path`` > `TRACKLY_HOLIDAYS_PATH` > the packaged South African
    table. A table is a JSON object ``{"version": ..., "holidays": {date: {name, type}}}``.

    Raises:
        HolidayTableError: If the file cannot be read or is not a valid holiday
            table.
    """
    path = path or os.environ.get(HOLIDAYS_PATH_ENV)
    table: Path | Traversable
    if path:
        table = Path(path)
    else:
        table = files("trackly.data").joinpath(DEFAULT_HOLIDAY_TABLE)
    source = str(table)
    try:
        document = json.loads(table.read_text(encoding="utf-8"))
        return HolidayRegistry.from_mapping(
            document["holidays"], version=document.get("version")
        )
    except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
        raise HolidayTableError(source, str(e)) from e


def build_alembic_config(
    db_url: str | None = None, stdout: TextIO = sys.stdout
) -> Config:
    """Build an Alembic `Config` object for TRACKLY's migrations.

    Args:
        db_url: SQLAlchemy database URL. May be ``None`` where Alembic won't
            need to connect.
        stdout: Stream Alembic writes status lines to.

    Returns:
        An `alembic.config.Config` pointing to TRACKLY's migration scripts.
    """
    cfg = Config(stdout=stdout)
    if db_url is not None:
        cfg.set_main_option(ALEMBIC_URL_KEY, db_url)
    cfg.set_main_option(
        ALEMBIC_SCRIPT_LOCATION_KEY,
        str(files("trackly.adapters.db.alembic")),
    )
    return cfg
