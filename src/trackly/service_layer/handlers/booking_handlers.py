"""Handlers for the guest ledger."""

import logging
from collections.abc import Callable

from trackly.domain import bookings
from trackly.domain.errors import SignalAlreadyAcknowledgedError
from trackly.domain.models import Booking, CrossDomainSignal, Room
from trackly.domain.residency import provenance_key
from trackly.interfaces.id_generator import IdGenerator
from trackly.interfaces.unit_of_work import AbstractUnitOfWork
from trackly.service_layer import commands

logger = logging.getLogger(__name__)


def create_booking(
    cmd: commands.CreateBooking, uow: AbstractUnitOfWork, id_generator: IdGenerator
) -> str:
    """Create a booking and return its id.

    With ``signal_id`` set, the signal is acknowledged in the same commit and
    the booking carries the signal's provenance key, so the signal can no
    longer be committed as a residency.

    Raises:
        EntityNotFoundError: If ``signal_id`` names no signal.
        SignalAlreadyAcknowledgedError: If that signal was already acted upon.
    """
    with uow:
        provenance = None
        acknowledged = None
        if cmd.signal_id is not None:
            signal = uow.store.require(CrossDomainSignal, cmd.signal_id)
            provenance = provenance_key(signal.id)
            if uow.store.has_provenance(provenance):
                raise SignalAlreadyAcknowledgedError(signal.id)
            acknowledged = signal.acknowledge()

        booking = bookings.new_booking(
            id_generator.new_id("bk-"),
            cmd.guest_name,
            cmd.check_in,
            cmd.check_out,
            guest_email=cmd.guest_email,
            guest_phone=cmd.guest_phone,
            pax=cmd.pax,
            source=cmd.source,
            is_vip=cmd.is_vip,
            tier=cmd.tier,
            special_requests=cmd.special_requests,
            dietary_notes=cmd.dietary_notes,
            provenance=provenance,
        )
        uow.store.add(booking)
        if acknowledged is not None:
            uow.store.replace(acknowledged)
        uow.commit()

    logger.debug("Created booking %s for %s", booking.id, booking.guest_name)
    return booking.id


def assign_room(cmd: commands.AssignRoom, uow: AbstractUnitOfWork) -> None:
    """Check a booking into a vacant-clean room.

    Raises:
        EntityNotFoundError: If the booking or room does not exist.
        RoomAlreadyAssignedError: If the booking already holds a room.
        RoomNotVacantError: If the room is not vacant-clean.
    """
    with uow:
        booking = uow.store.require(Booking, cmd.booking_id)
        room = uow.store.require(Room, cmd.room_id)
        uow.store.replace(bookings.assign_room(booking, room))
        uow.commit()
    logger.info("Booking %s checked into room %s", cmd.booking_id, room.room_number)


COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    commands.CreateBooking: create_booking,
    commands.AssignRoom: assign_room,
}
