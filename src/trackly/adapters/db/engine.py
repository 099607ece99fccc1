"""Database engine factory.

All code needing an Engine goes through `make_engine` so connections are
configured consistently. SQLite connections get PRAGMAs enforcing foreign
keys and enabling WAL; other backends are left as SQLAlchemy configures them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, make_url

from trackly.adapters.db.dialects import DialectName

if TYPE_CHECKING:
    from sqlite3 import Connection as SQLiteConnection

    from sqlalchemy.engine import Engine


def is_sqlite(url: str | URL) -> bool:
    """Return True if the given SQLAlchemy URL or string corresponds to SQLite."""
    u = make_url(str(url))
    return u.get_backend_name() == DialectName.SQLITE.value


def make_engine(url: str | URL, *, echo: bool = False) -> Engine:
    """Create a SQLAlchemy Engine for the given URL.

    On SQLite, each connection runs:
        - ``foreign_keys=ON``
        - ``journal_mode=WAL``
        - ``synchronous=NORMAL``
        - ``temp_store=MEMORY``

    Args:
        url: Database connection URL (str or :class:`URL`).
        echo: If True, log SQL statements.

    Returns:
        Engine: Configured SQLAlchemy Engine.
    """

    engine = create_engine(url, echo=echo)

    if is_sqlite(url):

        @event.listens_for(engine, "connect")
        def _sqlite_pragmas(dbapi_conn: SQLiteConnection, conn_record):  # type: ignore #pylint: disable=W0613
            cur = dbapi_conn.cursor()
            cur.execute("PRAGMA foreign_keys=ON;")
            cur.execute("PRAGMA journal_mode=WAL;")
            cur.execute("PRAGMA synchronous=NORMAL;")
            cur.execute("PRAGMA temp_store=MEMORY;")
            cur.close()

    return engine
