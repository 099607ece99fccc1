"""Unit tests for the ``-L NAME=LEVEL`` option parser."""

import logging
import types

import click
import pytest

from trackly.entrypoints.cli.helpers.log_level_parser import (
    DEFAULT_LIB_LEVELS,
    parse_log_level,
)

# The callback never touches its context.
CTX = types.SimpleNamespace()


def test_no_items_gives_library_defaults():
    """SQLAlchemy and Alembic are quieted by default."""
    assert parse_log_level(CTX, None, ()) == {
        "sqlalchemy": logging.WARNING,
        "alembic": logging.WARNING,
    }


def test_defaults_are_not_mutated():
    """Overrides never leak into the module defaults."""
    parse_log_level(CTX, None, ("sqlalchemy=DEBUG",))
    assert DEFAULT_LIB_LEVELS["sqlalchemy"] == logging.WARNING


def test_later_items_win():
    """Repeating a logger keeps the last level given."""
    out = parse_log_level(
        CTX, None, ("trackly=DEBUG", "alembic=ERROR", "trackly=WARNING")
    )
    assert out["trackly"] == logging.WARNING
    assert out["alembic"] == logging.ERROR


@pytest.mark.parametrize(
    "value",
    [
        "trackly.service_layer=info,  alembic=ERROR sqlalchemy.engine=Warning",
        ("trackly.service_layer=INFO, alembic=error", "sqlalchemy.engine=WARNING"),
    ],
    ids=["envvar-string", "repeated-flags"],
)
def test_commas_spaces_and_case(value):
    """Env var strings and repeated flags parse the same way, case-insensitively."""
    out = parse_log_level(CTX, None, value)
    assert out["trackly.service_layer"] == logging.INFO
    assert out["alembic"] == logging.ERROR
    assert out["sqlalchemy.engine"] == logging.WARNING


@pytest.mark.parametrize("item", ["trackly", "=DEBUG", "trackly=LOUD"])
def test_malformed_items_are_bad_parameters(item):
    """Missing name, missing level or unknown level are all rejected."""
    with pytest.raises(click.BadParameter):
        parse_log_level(CTX, None, (item,))
