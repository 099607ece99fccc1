"""Fixtures for EntityStore contract tests."""

from collections.abc import Iterator

import pytest

from trackly.adapters.db.entity_store import SqlAlchemyEntityStore
from trackly.adapters.memory_store import InMemoryEntityStore
from trackly.interfaces.entity_store import EntityStore


@pytest.fixture(params=["memory", "sqlite"])
def store(request: pytest.FixtureRequest) -> Iterator[EntityStore]:
    """Yield an empty store for the requested backend.

    The SQLite store runs inside one open transaction that is rolled back on
    teardown.
    """
    match request.param:
        case "memory":
            yield InMemoryEntityStore()
        case "sqlite":
            engine = request.getfixturevalue("sqlite_engine_memory")
            with engine.connect() as connection:
                yield SqlAlchemyEntityStore(connection)
                connection.rollback()
        case _:
            raise ValueError(f"unknown store type: {request.param}")
