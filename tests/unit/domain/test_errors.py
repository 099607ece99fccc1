"""Unit tests for domain errors."""

import pytest

from trackly.domain import errors


@pytest.mark.parametrize(
    "error,base,reason",
    [
        (errors.MissingFieldError("Meeting", "title"), errors.ValidationError, "missing_field"),
        (errors.RoomNotSelectedError("sig-1"), errors.ValidationError, "room_not_selected"),
        (errors.UnknownTierError("The Attic"), errors.ValidationError, "unknown_tier"),
        (errors.InvalidTimeError("7pm"), errors.ValidationError, "invalid_time"),
        (
            errors.InvalidTimeWindowError("15:00", "09:00"),
            errors.ValidationError,
            "invalid_time_window",
        ),
        (
            errors.InvalidBirthdayError("tm-1", "2-5"),
            errors.ValidationError,
            "invalid_birthday",
        ),
        (
            errors.SignalAlreadyAcknowledgedError("sig-1"),
            errors.StateConflictError,
            "signal_already_acknowledged",
        ),
        (errors.RoomNotVacantError("r-1", "occupied"), errors.StateConflictError, "room_not_vacant"),
        (
            errors.RoomAlreadyAssignedError("bk-1", "r-1"),
            errors.StateConflictError,
            "room_already_assigned",
        ),
        (
            errors.InvalidTransitionError("tkt-1", "todo", "done"),
            errors.StateConflictError,
            "invalid_transition",
        ),
    ],
)
def test_taxonomy_and_reasons(error, base, reason):
    """Each error belongs to its family and names its reason."""
    assert isinstance(error, base)
    assert isinstance(error, errors.DomainError)
    assert error.reason == reason


class TestMissingFieldError:
    """Tests for MissingFieldError."""

    @staticmethod
    def test_attributes_and_message() -> None:
        """The kind and field are kept and shown."""
        error = errors.MissingFieldError("Meeting", "title")
        assert (error.kind, error.field_name) == ("Meeting", "title")
        assert str(error) == "Meeting: 'title' is required."


class TestRoomNotVacantError:
    """Tests for RoomNotVacantError."""

    @staticmethod
    def test_error_message() -> None:
        """The message names the room and its status."""
        error = errors.RoomNotVacantError("r-102", "occupied")
        assert str(error) == "Room r-102 is occupied, expected vacant-clean."


class TestInvalidTransitionError:
    """Tests for InvalidTransitionError."""

    @staticmethod
    def test_error_message() -> None:
        """The message names both statuses."""
        error = errors.InvalidTransitionError("tkt-1", "done", "todo")
        assert str(error) == "tkt-1 cannot move from 'done' to 'todo'."
