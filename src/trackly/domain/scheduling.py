"""Meeting and event scheduling rules."""

import datetime as dt
import re
from collections.abc import Iterable
from dataclasses import replace

from trackly.domain import errors
from trackly.domain.models import Event, Meeting
from trackly.domain.unsettable import UNSET, Unsettable, resolve
from trackly.domain.value_objects import MeetingType, RecurrenceType

# pylint: disable=too-many-arguments

DEFAULT_START_TIME = "10:00"
DEFAULT_END_TIME = "11:00"

_TIME_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def validate_time(value: str) -> str:
    """Return ``value`` if it is a 24h ``HH:MM`` time.

    Raises:
        InvalidTimeError: Otherwise.
    """
    if not _TIME_RE.match(value or ""):
        raise errors.InvalidTimeError(value)
    return value


def _check_window(start_time: str, end_time: str) -> None:
    # zero-padded HH:MM strings order chronologically
    if end_time < start_time:
        raise errors.InvalidTimeWindowError(start_time, end_time)


def _require_text(kind: str, field_name: str, value: str | None) -> str:
    if not value or not value.strip():
        raise errors.MissingFieldError(kind, field_name)
    return value.strip()


def _require_date(kind: str, field_name: str, value: dt.date | None) -> dt.date:
    if value is None:
        raise errors.MissingFieldError(kind, field_name)
    return value


def new_meeting(
    meeting_id: str,
    title: str,
    date: dt.date | None,
    context: str,
    *,
    start_time: str = DEFAULT_START_TIME,
    end_time: str = DEFAULT_END_TIME,
    type: MeetingType = MeetingType.MEETING,  # pylint: disable=redefined-builtin
    notes: str = "",
    attendees: Iterable[str] = (),
    is_recurring: bool = False,
    recurrence_type: RecurrenceType = RecurrenceType.NONE,
) -> Meeting:
    """Build a meeting in ``context``.

    Raises:
        MissingFieldError: If the title, date or context is missing.
        InvalidTimeError: If a start or end time is not ``HH:MM``.
        InvalidTimeWindowError: If the meeting ends before it starts.
    """
    _check_window(validate_time(start_time), validate_time(end_time))
    return Meeting(
        id=meeting_id,
        title=_require_text("Meeting", "title", title),
        date=_require_date("Meeting", "date", date),
        context=_require_text("Meeting", "context", context),
        start_time=start_time,
        end_time=end_time,
        type=type,
        notes=notes,
        attendees=tuple(attendees),
        is_recurring=is_recurring,
        recurrence_type=recurrence_type,
    )


def revise_meeting(
    meeting: Meeting,
    *,
    title: Unsettable[str] = UNSET,
    date: Unsettable[dt.date] = UNSET,
    start_time: Unsettable[str] = UNSET,
    end_time: Unsettable[str] = UNSET,
    type: Unsettable[MeetingType] = UNSET,  # pylint: disable=redefined-builtin
    notes: Unsettable[str] = UNSET,
    attendees: Unsettable[tuple[str, ...]] = UNSET,
    is_recurring: Unsettable[bool] = UNSET,
    recurrence_type: Unsettable[RecurrenceType] = UNSET,
) -> Meeting:
    """Return ``meeting`` with the given fields replaced.

    Fields left ``UNSET`` keep their value. Only ``notes`` and ``attendees``
    may be cleared with ``None``. The resulting times must still form a valid
    window, so moving only the start past the end is rejected.
    """
    kind = "Meeting"
    new_title = resolve(title, meeting.title, clearable=False, field="title", kind=kind)
    revised = replace(
        meeting,
        title=_require_text(kind, "title", new_title),
        date=resolve(date, meeting.date, clearable=False, field="date", kind=kind),
        start_time=validate_time(
            resolve(
                start_time,
                meeting.start_time,
                clearable=False,
                field="start_time",
                kind=kind,
            )
        ),
        end_time=validate_time(
            resolve(
                end_time, meeting.end_time, clearable=False, field="end_time", kind=kind
            )
        ),
        type=resolve(type, meeting.type, clearable=False, field="type", kind=kind),
        notes=resolve(notes, meeting.notes, clearable=True, field="notes", kind=kind)
        or "",
        attendees=tuple(
            resolve(
                attendees,
                meeting.attendees,
                clearable=True,
                field="attendees",
                kind=kind,
            )
            or ()
        ),
        is_recurring=resolve(
            is_recurring,
            meeting.is_recurring,
            clearable=False,
            field="is_recurring",
            kind=kind,
        ),
        recurrence_type=resolve(
            recurrence_type,
            meeting.recurrence_type,
            clearable=False,
            field="recurrence_type",
            kind=kind,
        ),
    )
    _check_window(revised.start_time, revised.end_time)
    return revised


def new_event(event_id: str, title: str, date: dt.date | None, context: str) -> Event:
    """Build a one-off event.

    Raises:
        MissingFieldError: If the title, date or context is missing.
    """
    return Event(
        id=event_id,
        title=_require_text("Event", "title", title),
        date=_require_date("Event", "date", date),
        context=_require_text("Event", "context", context),
    )
