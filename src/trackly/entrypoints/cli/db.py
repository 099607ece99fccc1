"""TRACKLY DB CLI: forward-only Alembic wrappers plus seeding.

Commands
- ``current``  : show the current DB revision.
- ``heads``    : show available head revisions.
- ``upgrade``  : migrate to head (asks for confirmation unless ``--force``).
- ``status``   : connectivity, backend and schema state.
- ``load``     : seed rooms, team members, signals and other entities from JSON.

Human-oriented notices go to stderr; Alembic output goes to stdout.
Destructive operations (``downgrade``, ``stamp``) are intentionally omitted.
"""

from __future__ import annotations

import json
import sys
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click
import click_extra as clickx
from alembic import command
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import text
from sqlalchemy.exc import ArgumentError, OperationalError

from trackly import config
from trackly.adapters.db.engine import make_engine
from trackly.adapters.serialization import UnknownEntityKindError, from_payload
from trackly.domain.errors import DomainError

from .app import MISSING_DB_URL_MSG, get_app, rejections
from .helpers import error, sanitize_url, success, warn

if TYPE_CHECKING:
    from alembic.config import Config
    from sqlalchemy.engine import Engine

INVALID_URL_FORMAT_MSG = (
    "The value of TRACKLY_DB_URL is not a valid SQLAlchemy database URL."
)

CANNOT_CONNECT_MSG = (
    "TRACKLY_DB_URL is set, but the database is not reachable.\n"
    "Please ensure the database is running and the URL is correct."
)

UPGRADE_SCHEMA_WARNING = (
    "This will upgrade the database schema to the latest version.\n"
    "Please ensure you have a backup before proceeding."
)

UPGRADE_SCHEMA_INSTRUCTIONS = "Run 'trackly db upgrade' to update the schema."

#: Top-level keys accepted by ``db load``, mapped to stored entity kinds.
SEED_SECTIONS = {
    "events": "Event",
    "meetings": "Meeting",
    "team": "TeamMember",
    "rooms": "Room",
    "bookings": "Booking",
    "protocols": "VipResidencyProtocol",
    "tasks": "OperationalTask",
    "tickets": "MaintenanceTicket",
    "signals": "CrossDomainSignal",
}


def _check_connection(url: str) -> None:
    engine = make_engine(url)
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))  # pragma: no mutate


def _get_url() -> str:
    try:
        url = config.get_db_url()
    except config.DatabaseUrlNotSetError as e:
        raise click.ClickException(MISSING_DB_URL_MSG) from e
    try:
        _check_connection(url)
    except OperationalError as e:
        raise click.ClickException(CANNOT_CONNECT_MSG) from e
    except ArgumentError as e:
        raise click.ClickException(INVALID_URL_FORMAT_MSG) from e
    return url


@click.group(cls=clickx.ExtraGroup)
def db() -> None:
    """Database management commands."""


@db.command()
@click.option(
    "--verbose", "-v", is_flag=True, help="Show alembic's more verbose output."
)
def current(verbose: bool) -> None:
    """Show current DB revision."""
    cfg = config.build_alembic_config(db_url=_get_url(), stdout=sys.stdout)
    command.current(cfg, verbose=verbose)


@db.command()
@click.option(
    "--verbose", "-v", is_flag=True, help="Show alembic's more verbose output."
)
def heads(verbose: bool) -> None:
    """Show available head revisions."""
    cfg = config.build_alembic_config(stdout=sys.stdout)
    command.heads(cfg, verbose=verbose)


@db.command()
@click.option("--sql", is_flag=True, help="Generate SQL without executing.")
@click.option("--force", is_flag=True, help="Upgrade without confirmation.")
def upgrade(sql: bool, force: bool) -> None:
    """Upgrade the database to the head revision."""
    url = _get_url()
    cfg = config.build_alembic_config(db_url=url, stdout=sys.stdout)
    if not force and not sql:
        warn(UPGRADE_SCHEMA_WARNING)
        click.secho(f"db: {click.style(sanitize_url(url), underline=True)}", err=True)
        click.confirm("Are you sure you want to proceed?", abort=True)
    command.upgrade(cfg, revision="head", sql=sql)
    success("Upgrade complete!")


def _get_current_revision(engine: Engine) -> str | None:
    with engine.connect() as conn:
        return MigrationContext.configure(conn).get_current_revision()


def _get_head_revision(cfg: Config) -> str | None:
    return ScriptDirectory.from_config(cfg).get_current_head()


class MigrationStatus(Enum):
    """Migration status of the database schema."""

    UP_TO_DATE = "up to date"
    OUT_OF_DATE = "out of date"
    UNINITIALIZED = "uninitialized"


@db.command()
def status() -> None:
    """Show database connection and schema status."""
    try:
        engine = make_engine(_get_url())
    except click.ClickException as e:
        error("Cannot connect to database")
        click.echo(e.message)
        return

    success("Database reachable")
    click.echo(f"Backend : {engine.dialect.name}")
    click.echo(f"URL     : {sanitize_url(str(engine.url))}")
    rev = _get_current_revision(engine)
    head = _get_head_revision(config.build_alembic_config(db_url=str(engine.url)))
    if rev == head:
        migration_status = MigrationStatus.UP_TO_DATE
    elif rev is None:
        migration_status = MigrationStatus.UNINITIALIZED
    else:
        migration_status = MigrationStatus.OUT_OF_DATE  # pragma: nocover

    click.echo(
        f"Schema  : {rev} ({migration_status.value})"
        if rev is not None
        else f"Schema  : {migration_status.value}"
    )
    if migration_status is not MigrationStatus.UP_TO_DATE:
        warn(UPGRADE_SCHEMA_INSTRUCTIONS)


def _parse_seed(document: dict[str, Any]) -> list[Any]:
    entities = []
    for section, records in document.items():
        if (kind := SEED_SECTIONS.get(section)) is None:
            raise click.ClickException(
                f"Unknown section {section!r}; expected one of {sorted(SEED_SECTIONS)}"
            )
        for record in records:
            try:
                entities.append(from_payload(kind, record))
            except (KeyError, TypeError, ValueError, UnknownEntityKindError) as e:
                raise click.ClickException(
                    f"Invalid {section} record {record!r}: {e}"
                ) from e
            except DomainError as e:
                raise click.ClickException(
                    f"[{e.reason}] Invalid {section} record {record!r}: {e}"
                ) from e
    return entities


@db.command()
@click.argument(
    "seed_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
def load(seed_file: Path) -> None:
    """Load entities from a JSON seed file in one transaction.

    The file is an object whose keys are among: events, meetings, team, rooms,
    bookings, protocols, tasks, tickets, signals. Each holds a list of records.
    """
    try:
        document = json.loads(seed_file.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise click.ClickException(f"{seed_file} is not valid JSON: {e}") from e
    if not isinstance(document, dict):
        raise click.ClickException(f"{seed_file} must contain a JSON object")

    entities = _parse_seed(document)
    uow = get_app().uow
    with rejections(), uow:
        for entity in entities:
            uow.store.add(entity)
        uow.commit()
    success(f"Loaded {len(entities)} entities from {seed_file.name}")
