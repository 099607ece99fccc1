"""Module including value objects used across the domain layer."""

from dataclasses import dataclass
from enum import Enum


class HolidayType(Enum):
    """Classification of a calendar holiday."""

    OFFICIAL = "official"
    OBSERVED = "observed"
    CULTURAL = "cultural"
    BIRTHDAY = "birthday"
    WELLNESS = "wellness"


class ItemKind(Enum):
    """Kind tag derived for items surfaced on a calendar day."""

    EVENT = "event"
    MEETING = "meeting"


class MeetingType(Enum):
    """Enumeration of meeting types"""

    MEETING = "meeting"
    BREAK = "break"
    WELLNESS = "wellness"


class RecurrenceType(Enum):
    """Descriptive recurrence pattern. Not expanded by the calendar."""

    NONE = "none"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class RoomStatus(Enum):
    """Housekeeping status of a room."""

    VACANT_CLEAN = "vacant-clean"
    VACANT_DIRTY = "vacant-dirty"
    OCCUPIED = "occupied"
    MAINTENANCE = "maintenance"
    BLOCKER = "blocker"


class PaymentStatus(Enum):
    """Enumeration of booking payment statuses"""

    PENDING = "pending"
    PAID = "paid"


class TaskStatus(Enum):
    """Enumeration of operational task statuses"""

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    REVIEW = "review"
    DONE = "done"


class TaskPriority(Enum):
    """Priority shared by tasks and maintenance tickets."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class TaskCategory(Enum):
    """Enumeration of operational task categories"""

    OPS = "ops"
    MARKETING = "marketing"
    MAINTENANCE = "maintenance"


class TicketStatus(Enum):
    """Enumeration of maintenance ticket statuses"""

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"


class TicketCategory(Enum):
    """Enumeration of maintenance ticket categories"""

    PLUMBING = "plumbing"
    ELECTRICAL = "electrical"
    HVAC = "hvac"
    POOL = "pool"
    GARDEN = "garden"
    GENERAL = "general"


class SignalType(Enum):
    """Types of cross-domain signals."""

    ARTIST_BOOKING = "artist-booking"


@dataclass(frozen=True)
class TransportLeg:
    """Value object representing one scheduled transfer for a VIP guest."""

    time: str
    origin: str
    destination: str
