"""Supported database dialect names.

Dialect checks compare against these members instead of raw string literals.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine


class UnsupportedDialect(Exception):
    """Raised when an unsupported database dialect is encountered."""


class DialectName(str, Enum):
    """Supported SQLAlchemy dialect names."""

    POSTGRES = "postgresql"
    SQLITE = "sqlite"

    @classmethod
    def from_string(cls, dialect_str: str) -> DialectName:
        """Normalize a dialect string such as ``'postgresql+psycopg'``.

        Raises:
            UnsupportedDialect: if the dialect is not recognized or supported.
        """
        base = (dialect_str or "").strip().lower().split("+", 1)[0]
        if base in {"postgres", "postgresql", "pg"}:
            return cls.POSTGRES
        if base == "sqlite":
            return cls.SQLITE
        raise UnsupportedDialect(f"Unsupported dialect: {dialect_str!r}")

    @classmethod
    def from_sqlalchemy(cls, obj: Engine | Connection) -> DialectName:
        """Extract the dialect of a SQLAlchemy Engine or Connection.

        Raises:
            UnsupportedDialect: if the dialect is not recognized or supported.
        """
        try:
            name = obj.dialect.name
        except AttributeError as e:
            raise UnsupportedDialect(
                f"Object {type(obj).__name__} does not expose .dialect.name"
            ) from e
        return cls.from_string(name)
