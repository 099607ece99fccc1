"""Handlers for the cross-domain signal workflow."""

import logging
from collections.abc import Callable

from trackly.domain.errors import SignalAlreadyAcknowledgedError
from trackly.domain.models import CrossDomainSignal, Room
from trackly.domain.residency import (
    ResidencyBundle,
    ResidencyIds,
    materialize_residency,
    provenance_key,
)
from trackly.interfaces.id_generator import IdGenerator
from trackly.interfaces.unit_of_work import AbstractUnitOfWork
from trackly.service_layer import commands

logger = logging.getLogger(__name__)


def commit_signal(
    cmd: commands.CommitSignal,
    uow: AbstractUnitOfWork,
    id_generator: IdGenerator,
    hotel_context: str,
) -> ResidencyBundle:
    """Authorize a signal: add protocol, booking and task, acknowledge the signal.

    All four writes are committed together. Any rejection leaves the store
    untouched.

    Raises:
        EntityNotFoundError: If the signal does not exist.
        RoomNotSelectedError: If no room was chosen.
        SignalAlreadyAcknowledgedError: If the signal was acknowledged, or its
            entities already exist.
        InvalidTimeError: If the pickup time is not ``HH:MM``.
    """

    with uow:
        signal = uow.store.require(CrossDomainSignal, cmd.signal_id)
        if uow.store.has_provenance(provenance_key(signal.id)):
            raise SignalAlreadyAcknowledgedError(signal.id)

        bundle = materialize_residency(
            signal,
            cmd.room_id,
            cmd.pickup_time,
            rooms=uow.store.list(Room),
            ids=ResidencyIds(
                protocol_id=id_generator.new_id("vip-"),
                booking_id=id_generator.new_id("bk-"),
                task_id=id_generator.new_id("task-"),
            ),
            hotel_context=hotel_context,
        )

        uow.store.add(bundle.protocol)
        uow.store.add(bundle.booking)
        uow.store.add(bundle.task)
        uow.store.replace(bundle.signal)
        uow.commit()

    logger.info(
        "Committed signal %s: %s in room %s (booking %s, task %s)",
        signal.id,
        signal.payload.artist_name,
        bundle.protocol.assigned_room_number,
        bundle.booking.id,
        bundle.task.id,
    )
    return bundle


COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    commands.CommitSignal: commit_signal,
}
