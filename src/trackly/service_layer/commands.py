"""Module defining Commands."""

import datetime as dt
from dataclasses import dataclass

from trackly.domain.residency import DEFAULT_PICKUP_TIME
from trackly.domain.unsettable import UNSET, Unsettable
from trackly.domain.value_objects import (
    MeetingType,
    RecurrenceType,
    TaskPriority,
    TicketCategory,
    TicketStatus,
)

# pylint: disable=too-many-instance-attributes


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


# ============================================================================
#                           Signal workflow
# ============================================================================


@dataclass(frozen=True)
class CommitSignal(Command):
    """Authorize a pending artist-booking signal and materialize the residency."""

    signal_id: str
    room_id: str | None
    pickup_time: str = DEFAULT_PICKUP_TIME


# ============================================================================
#                           Calendar
# ============================================================================


@dataclass(frozen=True)
class AddEvent(Command):
    """Register a one-off event in a context."""

    title: str
    date: dt.date | None
    context: str


@dataclass(frozen=True)
class AddMeeting(Command):
    """Schedule a meeting in a context."""

    title: str
    date: dt.date | None
    context: str
    start_time: str = "10:00"
    end_time: str = "11:00"
    type: MeetingType = MeetingType.MEETING
    notes: str = ""
    attendees: tuple[str, ...] = ()
    is_recurring: bool = False
    recurrence_type: RecurrenceType = RecurrenceType.NONE


@dataclass(frozen=True)
class UpdateMeeting(Command):
    """Replace fields of an existing meeting. ``UNSET`` fields keep their value."""

    meeting_id: str
    title: Unsettable[str] = UNSET
    date: Unsettable[dt.date] = UNSET
    start_time: Unsettable[str] = UNSET
    end_time: Unsettable[str] = UNSET
    type: Unsettable[MeetingType] = UNSET
    notes: Unsettable[str] = UNSET
    attendees: Unsettable[tuple[str, ...]] = UNSET
    is_recurring: Unsettable[bool] = UNSET
    recurrence_type: Unsettable[RecurrenceType] = UNSET


@dataclass(frozen=True)
class DeleteMeeting(Command):
    """Delete a meeting."""

    meeting_id: str


# ============================================================================
#                           Guest ledger
# ============================================================================


@dataclass(frozen=True)
class CreateBooking(Command):
    """Create a guest booking, optionally consuming a pending signal."""

    guest_name: str
    check_in: dt.date
    check_out: dt.date
    guest_email: str = ""
    guest_phone: str = ""
    pax: int = 1
    source: str = "Direct"
    is_vip: bool = False
    tier: str | None = None
    special_requests: str = ""
    dietary_notes: str = ""
    signal_id: str | None = None


@dataclass(frozen=True)
class AssignRoom(Command):
    """Check a booking into a vacant-clean room."""

    booking_id: str
    room_id: str


# ============================================================================
#                           Maintenance
# ============================================================================


@dataclass(frozen=True)
class AddMaintenanceTicket(Command):
    """Open a maintenance ticket."""

    title: str
    due_date: dt.date
    category: TicketCategory = TicketCategory.GENERAL
    priority: TaskPriority = TaskPriority.MEDIUM
    is_recurring: bool = False


@dataclass(frozen=True)
class UpdateTicketStatus(Command):
    """Move a maintenance ticket to a new status."""

    ticket_id: str
    status: TicketStatus
