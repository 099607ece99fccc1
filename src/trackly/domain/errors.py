"""Domain-layer error definitions.

Every error carries a short machine-readable ``reason`` so callers can report
rejections by name. Expected absences (no holiday, no birthday, unknown tier in
lenient pricing) are never raised; only constraint violations are.
"""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""

    reason: str = "domain_error"


class ValidationError(DomainError):
    """Raised when input is incomplete or malformed. Nothing is mutated."""

    reason = "validation_error"


class StateConflictError(DomainError):
    """Raised when an entity is in the wrong state for the attempted action."""

    reason = "state_conflict"


# ============================================================================
#                           Validation errors
# ============================================================================


class MissingFieldError(ValidationError):
    """Raised when a required field is missing or blank."""

    reason = "missing_field"

    def __init__(self, kind: str, field_name: str) -> None:
        super().__init__(f"{kind}: '{field_name}' is required.")
        self.kind = kind
        self.field_name = field_name


class RoomNotSelectedError(ValidationError):
    """Raised when a signal is committed without a room."""

    reason = "room_not_selected"

    def __init__(self, signal_id: str) -> None:
        super().__init__(f"Signal {signal_id} cannot be committed without a room.")
        self.signal_id = signal_id


class InvalidStayError(ValidationError):
    """Raised when a booking checks out before it checks in."""

    reason = "invalid_stay"

    def __init__(self, check_in: object, check_out: object) -> None:
        super().__init__(f"Check-out {check_out} is before check-in {check_in}.")
        self.check_in = check_in
        self.check_out = check_out


class UnknownTierError(ValidationError):
    """Raised by strict pricing when a room tier is not in the tier table."""

    reason = "unknown_tier"

    def __init__(self, tier: str) -> None:
        super().__init__(f"Unknown room tier: {tier!r}.")
        self.tier = tier


class InvalidTimeError(ValidationError):
    """Raised when a wall-clock time is not in HH:MM form."""

    reason = "invalid_time"

    def __init__(self, value: str) -> None:
        super().__init__(f"Expected a time as HH:MM, got {value!r}.")
        self.value = value


class InvalidTimeWindowError(ValidationError):
    """Raised when a meeting ends before it starts."""

    reason = "invalid_time_window"

    def __init__(self, start_time: str, end_time: str) -> None:
        super().__init__(f"End time {end_time} is before start time {start_time}.")
        self.start_time = start_time
        self.end_time = end_time


class InvalidBirthdayError(ValidationError):
    """Raised when a team member's birthday is not a valid MM-DD day."""

    reason = "invalid_birthday"

    def __init__(self, member_id: str, value: str) -> None:
        super().__init__(f"Team member {member_id}: expected birthday as MM-DD, got {value!r}.")
        self.member_id = member_id
        self.value = value


# ============================================================================
#                           State conflicts
# ============================================================================


class SignalAlreadyAcknowledgedError(StateConflictError):
    """Raised when a signal that has already been acted upon is staged or committed."""

    reason = "signal_already_acknowledged"

    def __init__(self, signal_id: str) -> None:
        super().__init__(f"Signal {signal_id} has already been acknowledged.")
        self.signal_id = signal_id


class RoomNotVacantError(StateConflictError):
    """Raised when checking a guest into a room that is not vacant-clean."""

    reason = "room_not_vacant"

    def __init__(self, room_id: str, status: str) -> None:
        super().__init__(f"Room {room_id} is {status}, expected vacant-clean.")
        self.room_id = room_id
        self.status = status


class RoomAlreadyAssignedError(StateConflictError):
    """Raised when a booking that already holds a room is assigned another one."""

    reason = "room_already_assigned"

    def __init__(self, booking_id: str, room_id: str) -> None:
        super().__init__(f"Booking {booking_id} is already checked into room {room_id}.")
        self.booking_id = booking_id
        self.room_id = room_id


class InvalidTransitionError(StateConflictError):
    """Raised when a status change is not allowed from the current status."""

    reason = "invalid_transition"

    def __init__(self, entity_id: str, current: str, requested: str) -> None:
        super().__init__(
            f"{entity_id} cannot move from '{current}' to '{requested}'."
        )
        self.entity_id = entity_id
        self.current = current
        self.requested = requested
