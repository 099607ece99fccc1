"""Guest ledger rules: booking creation, check-in and occupancy."""

import datetime as dt
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace

from trackly.domain import errors
from trackly.domain.models import Booking, Room
from trackly.domain.pricing import DEFAULT_TIER
from trackly.domain.value_objects import PaymentStatus, RoomStatus

OCCUPYING_STATUSES = frozenset({RoomStatus.OCCUPIED, RoomStatus.BLOCKER})


@dataclass(frozen=True)
class LedgerStats:
    """Front desk counters for one day."""

    arrivals: int
    departures: int
    checked_in: int


def new_booking(  # pylint: disable=too-many-arguments
    booking_id: str,
    guest_name: str,
    check_in: dt.date,
    check_out: dt.date,
    *,
    guest_email: str = "",
    guest_phone: str = "",
    pax: int = 1,
    source: str = "Direct",
    is_vip: bool = False,
    tier: str | None = None,
    special_requests: str = "",
    dietary_notes: str = "",
    provenance: str | None = None,
) -> Booking:
    """Build a new, unassigned booking.

    VIP guests get a welcome pack. Payment starts pending.

    Raises:
        MissingFieldError: If ``guest_name`` is blank.
        InvalidStayError: If ``check_out`` is before ``check_in``.
    """
    if not guest_name or not guest_name.strip():
        raise errors.MissingFieldError("Booking", "guest_name")
    return Booking(
        id=booking_id,
        guest_name=guest_name.strip(),
        check_in=check_in,
        check_out=check_out,
        guest_email=guest_email,
        guest_phone=guest_phone,
        pax=pax,
        source=source,
        is_vip=is_vip,
        internal_table=tier or DEFAULT_TIER,
        payment_status=PaymentStatus.PENDING,
        special_requests=special_requests,
        dietary_notes=dietary_notes,
        welcome_pack_assigned=is_vip,
        provenance=provenance,
    )


def assign_room(booking: Booking, room: Room) -> Booking:
    """Check a booking into a room.

    Raises:
        RoomAlreadyAssignedError: If the booking already holds a room.
        RoomNotVacantError: If the room is not vacant-clean.
    """
    if booking.room_id is not None:
        raise errors.RoomAlreadyAssignedError(booking.id, booking.room_id)
    if room.status is not RoomStatus.VACANT_CLEAN:
        raise errors.RoomNotVacantError(room.id, room.status.value)
    return replace(booking, room_id=room.id)


def vacant_clean_rooms(rooms: Iterable[Room]) -> list[Room]:
    """Rooms a guest can be checked into."""
    return [room for room in rooms if room.status is RoomStatus.VACANT_CLEAN]


def ledger_stats(bookings: Iterable[Booking], day: dt.date) -> LedgerStats:
    """Count arrivals and departures on ``day`` and currently checked-in guests."""
    arrivals = departures = checked_in = 0
    for booking in bookings:
        arrivals += booking.check_in == day
        departures += booking.check_out == day
        checked_in += booking.is_checked_in
    return LedgerStats(arrivals=arrivals, departures=departures, checked_in=checked_in)


def occupancy_rate(rooms: Sequence[Room]) -> int:
    """Percentage of rooms occupied or blocked, rounded half up. 0 with no rooms."""
    if not rooms:
        return 0
    taken = sum(1 for room in rooms if room.status in OCCUPYING_STATUSES)
    return (taken * 200 + len(rooms)) // (2 * len(rooms))
