"""Integration tests for the SQLAlchemy-backed Unit of Work adapter.

Verifies commit and rollback behavior of SqlAlchemyUnitOfWork.
"""

import pytest

from trackly.adapters.unit_of_work import SqlAlchemyUnitOfWork
from trackly.domain.models import Booking, Room
from trackly.interfaces.errors import DuplicateEntityError


def test_uow_commit_persists(sqlite_engine_memory, make_booking):
    """Committed entities are visible to the next unit."""
    uow = SqlAlchemyUnitOfWork(sqlite_engine_memory)
    booking = make_booking()
    with uow:
        uow.store.add(booking)
        uow.commit()

    with uow:
        assert uow.store.get(Booking, booking.id) == booking


def test_uow_without_commit_discards(sqlite_engine_memory, make_booking):
    """Leaving the block without committing discards the writes."""
    uow = SqlAlchemyUnitOfWork(sqlite_engine_memory)
    with uow:
        uow.store.add(make_booking())
        # Intentionally not calling commit()

    with uow:
        assert uow.store.list(Booking) == []


def test_rolls_back_on_error(sqlite_engine_memory, make_booking, make_room):
    """An exception inside the block discards every write of the unit."""

    class MyException(Exception):
        """Custom exception for testing."""

    uow = SqlAlchemyUnitOfWork(sqlite_engine_memory)
    with pytest.raises(MyException):
        with uow:
            uow.store.add(make_room())
            uow.store.add(make_booking())
            raise MyException()

    with uow:
        assert uow.store.list(Room) == []
        assert uow.store.list(Booking) == []


def test_failed_write_leaves_earlier_commits(sqlite_engine_memory, make_booking):
    """A rejected unit does not disturb what was committed before it."""
    uow = SqlAlchemyUnitOfWork(sqlite_engine_memory)
    first = make_booking(id="bk-1")
    with uow:
        uow.store.add(first)
        uow.commit()

    with pytest.raises(DuplicateEntityError):
        with uow:
            uow.store.add(make_booking(id="bk-2"))
            uow.store.add(make_booking(id="bk-1", guest_name="Someone else"))
            uow.commit()

    with uow:
        assert uow.store.list(Booking) == [first]


def test_uow_on_migrated_file_database(sqlite_engine_file, make_room):
    """The unit works against the schema built by the migrations."""
    uow = SqlAlchemyUnitOfWork(sqlite_engine_file)
    room = make_room(id="r-1")
    with uow:
        uow.store.add(room)
        uow.commit()

    with uow:
        assert uow.store.require(Room, "r-1") == room
