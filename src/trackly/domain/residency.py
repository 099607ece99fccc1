"""VIP residency workflow.

An artist booked by another domain arrives as a `CrossDomainSignal`. The
workflow takes it through three states:

* **pending**: unacknowledged artist-booking signal, listed for operators;
* **staged**: an operator opened it; a default room and pickup time are
  proposed (`stage_signal`);
* **committed**: the operator authorized it; `materialize_residency` builds a
  residency protocol, a VIP booking and a setup task, plus the acknowledged
  signal, as one `ResidencyBundle` to be applied all together or not at all.

Everything here is pure. Applying a bundle atomically is the unit of work's job.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from trackly.domain import errors
from trackly.domain.models import (
    Booking,
    CrossDomainSignal,
    OperationalTask,
    Room,
    VipResidencyProtocol,
)
from trackly.domain.pricing import SANCTUARY
from trackly.domain.scheduling import validate_time
from trackly.domain.value_objects import (
    PaymentStatus,
    SignalType,
    TaskCategory,
    TaskPriority,
    TaskStatus,
    TransportLeg,
)

DEFAULT_RIDER = ("Standard VIP Refreshments", "Premium Security Escort")
DEFAULT_PICKUP_TIME = "19:00"
DEFAULT_GIFTING = ("Premium Welcome Pack", "Artisanal Water")
DEFAULT_SOURCE_BRAND = "The Yard"
PICKUP_ORIGIN = "Airport"
PICKUP_DESTINATION = "T3S"
BOOKING_SOURCE = "Artist Management"
UNASSIGNED_ROOM_NUMBER = "TBD"


@dataclass(frozen=True)
class StagedSignal:
    """Proposed defaults for an operator reviewing a pending signal."""

    signal: CrossDomainSignal
    default_room_id: str | None
    default_pickup_time: str = DEFAULT_PICKUP_TIME


@dataclass(frozen=True)
class ResidencyIds:
    """Pre-allocated ids for the entities of one residency bundle."""

    protocol_id: str
    booking_id: str
    task_id: str


@dataclass(frozen=True)
class ResidencyBundle:
    """The four mutations produced by committing one signal."""

    protocol: VipResidencyProtocol
    booking: Booking
    task: OperationalTask
    signal: CrossDomainSignal

    @property
    def acknowledged_signal_id(self) -> str:
        """Id of the signal this bundle consumes."""
        return self.signal.id

    @property
    def provenance(self) -> str:
        """Provenance key shared by the spawned entities."""
        return provenance_key(self.signal.id)


def provenance_key(signal_id: str) -> str:
    """Idempotency key carried by every entity spawned from a signal."""
    return f"signal:{signal_id}"


def is_pending(signal: CrossDomainSignal) -> bool:
    """True for unacknowledged artist-booking signals."""
    return signal.type is SignalType.ARTIST_BOOKING and not signal.acknowledged


def pending_signals(signals: Iterable[CrossDomainSignal]) -> list[CrossDomainSignal]:
    """Return the pending signals, preserving order."""
    return [s for s in signals if is_pending(s)]


def source_display(source_brand: str | None) -> str:
    """Display name of the venue that raised a signal."""
    brand = (source_brand or "").lower()
    if "theory" in brand or "st" in brand:
        return "Sunday Theory"
    return "The Yard"


def default_room(rooms: Sequence[Room]) -> Room | None:
    """Pick the room proposed for a residency.

    First Sanctuary-tier room, else first VIP room, else first room.
    """
    for room in rooms:
        if room.type == SANCTUARY.name:
            return room
    for room in rooms:
        if room.is_vip_room:
            return room
    return rooms[0] if rooms else None


def stage_signal(signal: CrossDomainSignal, rooms: Sequence[Room]) -> StagedSignal:
    """Stage a pending signal for review.

    Raises:
        SignalAlreadyAcknowledgedError: If the signal was already acted upon.
    """
    if signal.acknowledged:
        raise errors.SignalAlreadyAcknowledgedError(signal.id)
    room = default_room(rooms)
    return StagedSignal(
        signal=signal,
        default_room_id=room.id if room else None,
        default_pickup_time=DEFAULT_PICKUP_TIME,
    )


def effective_rider(signal: CrossDomainSignal) -> tuple[str, ...]:
    """The signal's rider, or `DEFAULT_RIDER` when it has none."""
    return tuple(signal.payload.rider) or DEFAULT_RIDER


def materialize_residency(  # pylint: disable=too-many-arguments,too-many-locals
    signal: CrossDomainSignal,
    room_id: str | None,
    pickup_time: str = DEFAULT_PICKUP_TIME,
    *,
    rooms: Iterable[Room],
    ids: ResidencyIds,
    hotel_context: str,
) -> ResidencyBundle:
    """Build the residency bundle for an authorized signal.

    The booking is pre-assigned to ``room_id`` without the vacant-clean check
    applied at regular check-in. A ``room_id`` that matches no known room is
    kept on the booking, with the room number shown as ``TBD``.

    Args:
        signal: The signal being committed.
        room_id: Room chosen by the operator.
        pickup_time: Airport pickup time, ``HH:MM``.
        rooms: Known rooms, used to resolve the room number and tier.
        ids: Ids for the new protocol, booking and task.
        hotel_context: Context tag of the hotel operations board.

    Returns:
        The bundle. Nothing is applied.

    Raises:
        RoomNotSelectedError: If no room was chosen.
        SignalAlreadyAcknowledgedError: If the signal was already acted upon.
        InvalidTimeError: If ``pickup_time`` is not ``HH:MM``.
    """
    if not room_id:
        raise errors.RoomNotSelectedError(signal.id)
    acknowledged = signal.acknowledge()
    validate_time(pickup_time)

    payload = signal.payload
    provenance = provenance_key(signal.id)
    room = next((r for r in rooms if r.id == room_id), None)
    room_number = room.room_number if room else UNASSIGNED_ROOM_NUMBER
    tier = room.type if room else SANCTUARY.name
    source = payload.source_brand or DEFAULT_SOURCE_BRAND
    rider = effective_rider(signal)
    rider_text = ", ".join(rider)

    protocol = VipResidencyProtocol(
        id=ids.protocol_id,
        artist_id=payload.artist_name,
        rider=rider,
        assigned_room_number=room_number,
        transport_schedule=(
            TransportLeg(pickup_time, PICKUP_ORIGIN, PICKUP_DESTINATION),
        ),
        security_required=True,
        entourage_size=1,
        hospitality_gifting=DEFAULT_GIFTING,
        privacy_notes=f"Authorized from {source}. Assigned to {room_number}.",
        provenance=provenance,
    )
    booking = Booking(
        id=ids.booking_id,
        guest_name=payload.artist_name,
        guest_email=payload.management_email or "",
        guest_phone=payload.management_phone or "",
        check_in=payload.event_date,
        check_out=payload.event_date,
        pax=1,
        source=BOOKING_SOURCE,
        is_vip=True,
        room_id=room_id,
        internal_table=tier,
        payment_status=PaymentStatus.PENDING,
        special_requests=(
            f"VIP RESIDENCY. Sanctuary Room {room_number}. Rider: {rider_text}"
        ),
        welcome_pack_assigned=True,
        provenance=provenance,
    )
    task = OperationalTask(
        id=ids.task_id,
        title=f"VIP SETUP: {payload.artist_name} (Room {room_number})",
        description=(
            f"Rider Setup: {rider_text}. Security protocol active. "
            f"Pickup at {pickup_time}."
        ),
        due_date=payload.event_date,
        context=hotel_context,
        status=TaskStatus.TODO,
        priority=TaskPriority.CRITICAL,
        category=TaskCategory.OPS,
        progress=0,
        provenance=provenance,
    )
    return ResidencyBundle(
        protocol=protocol, booking=booking, task=task, signal=acknowledged
    )

