"""Calendar aggregation.

Builds the per-day month view shown on the shared calendar surface. A month
view is a Sunday-first grid: ``None`` placeholders for the weekdays before the
1st, then one `DayCell` per day in ascending order.

Within a day the ordering is an observable contract: events come before
meetings, and each group keeps the store's insertion order. Holidays and
birthdays are shown in every context; events and meetings only in their own.
"""

import calendar
import datetime as dt
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass

from trackly.domain.holidays import HolidayRegistry
from trackly.domain.models import Event, Holiday, Meeting, TeamMember
from trackly.domain.value_objects import HolidayType, ItemKind

HOLIDAY_STYLES: dict[HolidayType, str] = {
    HolidayType.OFFICIAL: "amber",
    HolidayType.OBSERVED: "indigo",
    HolidayType.CULTURAL: "rose",
}
DEFAULT_HOLIDAY_STYLE = "slate"


@dataclass(frozen=True)
class CalendarItem:
    """An event or meeting surfaced on a day, tagged with its derived kind."""

    kind: ItemKind
    entry: Event | Meeting

    @property
    def id(self) -> str:
        """Id of the underlying entry."""
        return self.entry.id

    @property
    def title(self) -> str:
        """Title of the underlying entry."""
        return self.entry.title


@dataclass(frozen=True)
class DayCell:
    """Everything the calendar shows for one real day."""

    date: dt.date
    holiday: Holiday | None
    birthdays: tuple[TeamMember, ...]
    items: tuple[CalendarItem, ...]
    is_today: bool = False

    @property
    def date_key(self) -> str:
        """Canonical ``YYYY-MM-DD`` key."""
        return date_key(self.date)

    @property
    def birthday_key(self) -> str:
        """Year-less ``MM-DD`` key."""
        return birthday_key(self.date)

    @property
    def holiday_style(self) -> str | None:
        """Presentation class for the holiday badge, if any."""
        if self.holiday is None:
            return None
        return holiday_style(self.holiday.classification)


def date_key(day: dt.date) -> str:
    """Return the canonical ``YYYY-MM-DD`` key for a day."""
    return day.isoformat()


def birthday_key(day: dt.date) -> str:
    """Return the ``MM-DD`` key used to match birthdays."""
    return f"{day.month:02d}-{day.day:02d}"


def holiday_style(classification: HolidayType) -> str:
    """Map a holiday classification to its presentation class."""
    return HOLIDAY_STYLES.get(classification, DEFAULT_HOLIDAY_STYLE)


def leading_placeholders(year: int, month: int) -> int:
    """Number of empty cells before the 1st in a Sunday-first week grid."""
    # date.weekday() is Monday=0; shift so Sunday=0
    return (dt.date(year, month, 1).weekday() + 1) % 7


def days_in_month(year: int, month: int) -> int:
    """Number of days in the month."""
    return calendar.monthrange(year, month)[1]


def build_month_view(  # pylint: disable=too-many-arguments
    year: int,
    month: int,
    context: str,
    *,
    events: Iterable[Event],
    meetings: Iterable[Meeting],
    team: Iterable[TeamMember],
    holidays: HolidayRegistry,
    today: dt.date | None = None,
) -> list[DayCell | None]:
    """Build the month view for one context.

    Args:
        year: Calendar year.
        month: Calendar month (1-12).
        context: Business context whose events and meetings are shown.
        events: All known events, in store order.
        meetings: All known meetings, in store order.
        team: Team members, for birthdays.
        holidays: Holiday registry used for the lookup.
        today: The consumer's current local date. Defaults to ``date.today()``.

    Returns:
        ``leading_placeholders`` ``None`` entries followed by one `DayCell`
        per day of the month.

    Raises:
        ValueError: If ``month`` is not in 1..12.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    today = today or dt.date.today()

    events_by_day: dict[dt.date, list[Event]] = defaultdict(list)
    for event in events:
        if event.context == context:
            events_by_day[event.date].append(event)

    meetings_by_day: dict[dt.date, list[Meeting]] = defaultdict(list)
    for meeting in meetings:
        if meeting.context == context:
            meetings_by_day[meeting.date].append(meeting)

    birthdays_by_key: dict[str, list[TeamMember]] = defaultdict(list)
    for member in team:
        birthdays_by_key[member.birthday].append(member)

    cells: list[DayCell | None] = [None] * leading_placeholders(year, month)
    for day_number in range(1, days_in_month(year, month) + 1):
        day = dt.date(year, month, day_number)
        items = [CalendarItem(ItemKind.EVENT, e) for e in events_by_day[day]]
        items += [CalendarItem(ItemKind.MEETING, m) for m in meetings_by_day[day]]
        cells.append(
            DayCell(
                date=day,
                holiday=holidays.lookup(day),
                birthdays=tuple(birthdays_by_key[birthday_key(day)]),
                items=tuple(items),
                is_today=day == today,
            )
        )
    return cells
