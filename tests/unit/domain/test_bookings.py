"""Unit tests for the guest ledger rules."""

import datetime as dt

import pytest

from trackly.domain import errors
from trackly.domain.bookings import (
    LedgerStats,
    assign_room,
    ledger_stats,
    new_booking,
    occupancy_rate,
    vacant_clean_rooms,
)
from trackly.domain.value_objects import PaymentStatus, RoomStatus

MARCH_10 = dt.date(2026, 3, 10)
MARCH_12 = dt.date(2026, 3, 12)


def test_new_booking_defaults():
    """New bookings are unassigned, payment pending, in the default tier."""
    booking = new_booking("bk-1", "  Ada Guest ", MARCH_10, MARCH_12)

    assert booking.guest_name == "Ada Guest"
    assert booking.room_id is None
    assert not booking.is_checked_in
    assert booking.payment_status is PaymentStatus.PENDING
    assert booking.internal_table == "The Nest"
    assert booking.welcome_pack_assigned is False
    assert booking.provenance is None


def test_vip_booking_gets_welcome_pack():
    """VIP guests are assigned a welcome pack."""
    booking = new_booking("bk-1", "Ada", MARCH_10, MARCH_12, is_vip=True, tier="The Haven")
    assert booking.welcome_pack_assigned is True
    assert booking.internal_table == "The Haven"


def test_same_day_stay_is_allowed():
    """Check-out on the check-in day is a valid stay."""
    assert new_booking("bk-1", "Ada", MARCH_10, MARCH_10).check_out == MARCH_10


def test_check_out_before_check_in_is_rejected():
    """A stay cannot end before it starts."""
    with pytest.raises(errors.InvalidStayError):
        new_booking("bk-1", "Ada", MARCH_12, MARCH_10)


@pytest.mark.parametrize("name", ["", "   "])
def test_guest_name_is_required(name):
    """Blank guest names are rejected."""
    with pytest.raises(errors.MissingFieldError) as excinfo:
        new_booking("bk-1", name, MARCH_10, MARCH_12)
    assert excinfo.value.field_name == "guest_name"


def test_assign_room_sets_room_once(make_booking, make_room):
    """Check-in records the room; the original booking is untouched."""
    booking = make_booking()
    room = make_room(id="r-101")

    checked_in = assign_room(booking, room)

    assert checked_in.room_id == "r-101"
    assert checked_in.is_checked_in
    assert booking.room_id is None
    with pytest.raises(errors.RoomAlreadyAssignedError):
        assign_room(checked_in, make_room(id="r-102"))


@pytest.mark.parametrize(
    "status",
    [
        RoomStatus.VACANT_DIRTY,
        RoomStatus.OCCUPIED,
        RoomStatus.MAINTENANCE,
        RoomStatus.BLOCKER,
    ],
)
def test_assign_room_requires_vacant_clean(make_booking, make_room, status):
    """Only vacant-clean rooms accept a guest."""
    with pytest.raises(errors.RoomNotVacantError) as excinfo:
        assign_room(make_booking(), make_room(status=status))
    assert excinfo.value.status == status.value


def test_vacant_clean_rooms(hotel_rooms):
    """Occupied rooms are filtered out, order is kept."""
    assert [room.id for room in vacant_clean_rooms(hotel_rooms)] == [
        "r-101",
        "r-201",
        "r-401",
    ]


def test_ledger_stats(make_booking):
    """Arrivals, departures and checked-in guests are counted per day."""
    bookings = [
        make_booking(check_in=MARCH_10, check_out=MARCH_12),
        make_booking(check_in=MARCH_10, check_out=MARCH_10, room_id="r-1"),
        make_booking(check_in=dt.date(2026, 3, 8), check_out=MARCH_10, room_id="r-2"),
    ]
    assert ledger_stats(bookings, MARCH_10) == LedgerStats(
        arrivals=2, departures=2, checked_in=2
    )
    assert ledger_stats([], MARCH_10) == LedgerStats(0, 0, 0)


@pytest.mark.parametrize(
    "statuses,expected",
    [
        ([], 0),
        ([RoomStatus.OCCUPIED], 100),
        ([RoomStatus.OCCUPIED, RoomStatus.VACANT_CLEAN], 50),
        ([RoomStatus.BLOCKER, RoomStatus.VACANT_CLEAN, RoomStatus.VACANT_DIRTY], 33),
        ([RoomStatus.OCCUPIED, RoomStatus.OCCUPIED, RoomStatus.MAINTENANCE], 67),
        ([RoomStatus.OCCUPIED] + [RoomStatus.VACANT_CLEAN] * 7, 13),
    ],
)
def test_occupancy_rate(make_room, statuses, expected):
    """Occupied and blocked rooms count, rounded half up to a whole percent."""
    rooms = [make_room(status=status) for status in statuses]
    assert occupancy_rate(rooms) == expected
