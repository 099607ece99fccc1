"""Entities handled by the TRACKLY core.

All entities are immutable. A change is expressed by building a new value with
`dataclasses.replace` and handing it back to the host, which assigns it over
the old one. Entities spawned from a cross-domain signal carry a
``provenance`` key so a second materialization of the same signal can be
detected from the stored data alone.
"""

import datetime as dt
import re
from dataclasses import dataclass, field, replace

from trackly.domain import errors
from trackly.domain.value_objects import (
    HolidayType,
    MeetingType,
    PaymentStatus,
    RecurrenceType,
    RoomStatus,
    SignalType,
    TaskCategory,
    TaskPriority,
    TaskStatus,
    TicketCategory,
    TicketStatus,
    TransportLeg,
)

# pylint: disable=too-many-instance-attributes

_BIRTHDAY_RE = re.compile(r"^(0[1-9]|1[0-2])-(0[1-9]|[12]\d|3[01])$")


# ============================================================================
#                           Calendar entities
# ============================================================================


@dataclass(frozen=True)
class Event:
    """A one-off event owned by a business context."""

    id: str
    title: str
    date: dt.date
    context: str


@dataclass(frozen=True)
class Meeting:
    """A meeting, break or wellness slot on the shared calendar.

    ``is_recurring`` and ``recurrence_type`` are informational; the calendar
    matches meetings on their literal ``date`` only.
    """

    id: str
    title: str
    date: dt.date
    context: str
    start_time: str = "10:00"
    end_time: str = "11:00"
    type: MeetingType = MeetingType.MEETING
    notes: str = ""
    attendees: tuple[str, ...] = ()
    is_recurring: bool = False
    recurrence_type: RecurrenceType = RecurrenceType.NONE


@dataclass(frozen=True)
class TeamMember:
    """A team member whose year-less birthday (``MM-DD``) recurs annually."""

    id: str
    name: str
    birthday: str

    def __post_init__(self) -> None:
        if not _BIRTHDAY_RE.match(self.birthday or ""):
            raise errors.InvalidBirthdayError(self.id, self.birthday)


@dataclass(frozen=True)
class Holiday:
    """A year-bound holiday loaded from the holiday table."""

    date: dt.date
    name: str
    classification: HolidayType


# ============================================================================
#                           Hotel entities
# ============================================================================


@dataclass(frozen=True)
class Room:
    """A bookable room. The core filters rooms but never mutates them."""

    id: str
    room_number: str
    type: str
    floor: int
    status: RoomStatus = RoomStatus.VACANT_CLEAN
    is_vip_room: bool = False


@dataclass(frozen=True)
class Booking:
    """A guest booking. ``room_id`` stays ``None`` until check-in."""

    id: str
    guest_name: str
    check_in: dt.date
    check_out: dt.date
    guest_email: str = ""
    guest_phone: str = ""
    pax: int = 1
    source: str = "Direct"
    is_vip: bool = False
    room_id: str | None = None
    internal_table: str = "The Nest"
    payment_status: PaymentStatus = PaymentStatus.PENDING
    special_requests: str = ""
    dietary_notes: str = ""
    has_breakfast: bool = True
    has_dinner: bool = False
    welcome_pack_assigned: bool = False
    provenance: str | None = None

    def __post_init__(self) -> None:
        if self.check_out < self.check_in:
            raise errors.InvalidStayError(self.check_in, self.check_out)

    @property
    def is_checked_in(self) -> bool:
        """True once a room has been assigned."""
        return self.room_id is not None


@dataclass(frozen=True)
class VipResidencyProtocol:
    """Security, transport and hospitality requirements for an artist's stay."""

    id: str
    artist_id: str
    rider: tuple[str, ...]
    assigned_room_number: str
    transport_schedule: tuple[TransportLeg, ...] = ()
    security_required: bool = True
    entourage_size: int = 1
    hospitality_gifting: tuple[str, ...] = ()
    privacy_notes: str = ""
    provenance: str | None = None

    def __post_init__(self) -> None:
        if not self.rider:
            raise errors.MissingFieldError("VipResidencyProtocol", "rider")


@dataclass(frozen=True)
class OperationalTask:
    """A task pinned to an operations board."""

    id: str
    title: str
    description: str
    due_date: dt.date
    context: str
    status: TaskStatus = TaskStatus.TODO
    priority: TaskPriority = TaskPriority.MEDIUM
    category: TaskCategory = TaskCategory.OPS
    assignees: tuple[str, ...] = ()
    progress: int = 0
    is_recurring: bool = False
    recurrence_type: RecurrenceType = RecurrenceType.NONE
    provenance: str | None = None


@dataclass(frozen=True)
class MaintenanceTicket:
    """A facilities maintenance ticket."""

    id: str
    title: str
    due_date: dt.date
    category: TicketCategory = TicketCategory.GENERAL
    priority: TaskPriority = TaskPriority.MEDIUM
    status: TicketStatus = TicketStatus.TODO
    is_recurring: bool = False


# ============================================================================
#                           Cross-domain signals
# ============================================================================


@dataclass(frozen=True)
class SignalPayload:
    """Data published by the producing domain with an artist-booking signal."""

    artist_name: str
    event_date: dt.date
    management_email: str | None = None
    management_phone: str | None = None
    rider: tuple[str, ...] = ()
    source_brand: str | None = None


@dataclass(frozen=True)
class CrossDomainSignal:
    """A notification from another domain awaiting operator authorization."""

    id: str
    payload: SignalPayload
    type: SignalType = SignalType.ARTIST_BOOKING
    acknowledged: bool = False
    source_sector: str | None = None
    target_sector: str | None = None
    raised_at: dt.datetime | None = field(default=None, compare=False)

    @property
    def is_pending(self) -> bool:
        """True while the signal has not been acted upon."""
        return not self.acknowledged

    def acknowledge(self) -> "CrossDomainSignal":
        """Return the acknowledged version of this signal.

        Raises:
            SignalAlreadyAcknowledgedError: If the signal was already acknowledged.
        """
        if self.acknowledged:
            raise errors.SignalAlreadyAcknowledgedError(self.id)
        return replace(self, acknowledged=True)
