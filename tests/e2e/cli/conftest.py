"""Fixtures for end-to-end CLI tests.

Provides a test-only ``log-demo`` command for the logging options, a
CliRunner, an isolated filesystem, and a migrated, seeded SQLite database
that ``trackly`` finds through ``TRACKLY_DB_URL``.
"""

import json
import logging
from pathlib import Path

import click
import pytest
from click.testing import CliRunner

from trackly.entrypoints.cli.main import trackly

# pylint: disable=redefined-outer-name

SEED = {
    "rooms": [
        {"id": "r-101", "room_number": "101", "type": "The Nest", "floor": 1},
        {
            "id": "r-102",
            "room_number": "102",
            "type": "The Nest",
            "floor": 1,
            "status": "occupied",
        },
        {
            "id": "r-401",
            "room_number": "401",
            "type": "The Sanctuary",
            "floor": 2,
            "is_vip_room": True,
        },
    ],
    "team": [{"id": "tm-1", "name": "Thandi", "birthday": "08-09"}],
    "events": [{"id": "evt-1", "title": "Gala", "date": "2026-08-09", "context": "h1"}],
    "signals": [
        {
            "id": "sig-nova",
            "payload": {
                "artist_name": "Nova",
                "event_date": "2026-08-09",
                "source_brand": "Sunday Theory",
            },
        },
        {
            "id": "sig-kai",
            "payload": {
                "artist_name": "Kai",
                "event_date": "2026-08-20",
                "rider": ["Oat milk"],
            },
        },
    ],
}


@click.command()
def log_demo():
    """Emit messages at every level on a TRACKLY and a third-party logger."""
    logger = logging.getLogger("trackly.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and any section registries."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register ``log-demo`` on the top-level group for one test."""
    trackly.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(trackly, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside an isolated working directory."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def cli(runner, monkeypatch, tmp_path):
    """Invoke ``trackly`` with its log file kept under the test's temp dir."""
    monkeypatch.setenv("TRACKLY_LOG_PATH", str(tmp_path / "trackly.log"))
    monkeypatch.delenv("TRACKLY_HOTEL_CONTEXT", raising=False)
    monkeypatch.delenv("TRACKLY_HOLIDAYS_PATH", raising=False)

    def _invoke(*args: str, **kwargs):
        return runner.invoke(trackly, list(args), **kwargs)

    return _invoke


@pytest.fixture
def seed_file(tmp_path) -> Path:
    """JSON seed with rooms, a team member, an event and two signals."""
    path = tmp_path / "seed.json"
    path.write_text(json.dumps(SEED), encoding="utf-8")
    return path


@pytest.fixture
def hotel_db(cli, monkeypatch, tmp_path, seed_file) -> str:
    """A migrated SQLite file database loaded from `SEED`."""
    url = f"sqlite:///{tmp_path / 'trackly.db'}"
    monkeypatch.setenv("TRACKLY_DB_URL", url)
    upgraded = cli("db", "upgrade", "--force")
    assert upgraded.exit_code == 0, upgraded.output
    loaded = cli("db", "load", str(seed_file))
    assert loaded.exit_code == 0, loaded.output
    return url
