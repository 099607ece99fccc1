"""Parsing of ``-L NAME=LEVEL`` logger-level options."""

import logging
import re

import click

#: Third-party loggers quieted unless overridden.
DEFAULT_LIB_LEVELS = {"sqlalchemy": logging.WARNING, "alembic": logging.WARNING}

_SEPARATORS = re.compile(r"[,\s]+")


def _normalize_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Flatten a string or sequence of strings split on commas and whitespace."""
    values = [value] if isinstance(value, str) else list(value)
    return [item for v in values for item in _SEPARATORS.split(v) if item]


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback turning NAME=LEVEL items into a name->level dict.

    The result starts from `DEFAULT_LIB_LEVELS`; later items win.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or LEVEL is unknown.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _normalize_items(value):
        name, sep, level_str = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        lvl = logging.getLevelNamesMapping().get(level_str.strip().upper())
        if lvl is None:
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name.strip()] = lvl
    return levels
