"""Unit of Work implementations for TRACKLY.

`InMemoryUnitOfWork` stages writes on a private copy of shared in-memory data
and swaps it in on commit. `SqlAlchemyUnitOfWork` runs each ``with`` block on
its own connection and transaction.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from trackly.adapters.db.entity_store import SqlAlchemyEntityStore
from trackly.adapters.memory_store import InMemoryEntityStore, InMemoryStoreData
from trackly.interfaces.errors import ConcurrentCommitError
from trackly.interfaces.unit_of_work import AbstractUnitOfWork

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine


class InMemoryUnitOfWork(AbstractUnitOfWork):
    """In-memory Unit of Work.

    Inside a ``with`` block, ``store`` is a private copy of the committed data.
    `commit` publishes it, provided nobody else committed since the block began;
    otherwise it raises `ConcurrentCommitError` and publishes nothing. Outside a
    block, ``store`` is a snapshot of committed data taken at the last
    enter, commit or rollback.
    """

    def __init__(self, data: InMemoryStoreData | None = None) -> None:
        self.data = data if data is not None else InMemoryStoreData()
        self.committed = False
        self._base_revision = 0
        self._begin()

    def __enter__(self):
        self._begin()
        return super().__enter__()

    def commit(self):
        with self.data.lock:
            if self.data.revision != self._base_revision:
                raise ConcurrentCommitError(self._base_revision, self.data.revision)
            self.data.entities = self.store.entities  # type: ignore[attr-defined]
            self.data.revision += 1
        self.committed = True
        self._begin()

    def rollback(self):
        self._begin()

    def _begin(self) -> None:
        with self.data.lock:
            self._base_revision = self.data.revision
            self.store = InMemoryEntityStore(self.data.copy())


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """SQLAlchemy-backed Unit of Work."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self.connection: Connection

    def __enter__(self):
        self.connection = self.engine.connect()
        self.store = SqlAlchemyEntityStore(self.connection)
        return super().__enter__()

    def __exit__(self, *args):
        super().__exit__(*args)
        self.connection.close()

    def commit(self):
        self.connection.commit()

    def rollback(self):
        self.connection.rollback()
