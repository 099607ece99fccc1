"""Shared wiring for CLI commands.

Commands obtain the application through `get_app` and run service calls inside
`rejections()`, which turns expected failures into a one-line error and exit
code 1 instead of a traceback.
"""

from __future__ import annotations

import contextlib
import datetime as dt
from collections.abc import Iterator
from typing import TYPE_CHECKING

import click

from trackly import config
from trackly.bootstrap import bootstrap
from trackly.domain.errors import DomainError
from trackly.interfaces.errors import StoreError

if TYPE_CHECKING:
    from trackly.bootstrap import AppContainer

MISSING_DB_URL_MSG = (
    "TRACKLY_DB_URL is not set.\n\n"
    "Set it before running this command, e.g.:\n"
    "  export TRACKLY_DB_URL='sqlite:///trackly.db'\n"
    "  or in PowerShell:\n"
    "  $env:TRACKLY_DB_URL='sqlite:///trackly.db'"
)

#: ``click`` parameter type for ``YYYY-MM-DD`` dates.
DATE = click.DateTime(formats=["%Y-%m-%d"])


def as_date(value: dt.datetime | None) -> dt.date | None:
    """Strip the time part click adds to parsed dates."""
    return value.date() if value is not None else None


def get_app() -> AppContainer:
    """Bootstrap the application from the environment.

    Raises:
        click.ClickException: If the database URL or holiday table is unusable.
    """
    try:
        return bootstrap()
    except config.DatabaseUrlNotSetError as e:
        raise click.ClickException(MISSING_DB_URL_MSG) from e
    except config.HolidayTableError as e:
        raise click.ClickException(str(e)) from e


@contextlib.contextmanager
def rejections() -> Iterator[None]:
    """Report domain and store rejections as click errors."""
    try:
        yield
    except (DomainError, StoreError) as e:
        reason = getattr(e, "reason", "error")
        raise click.ClickException(f"[{reason}] {e}") from e
