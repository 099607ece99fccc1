"""``trackly calendar``: the shared month calendar and its entries."""

from __future__ import annotations

import datetime as dt
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from trackly.domain.value_objects import MeetingType, RecurrenceType
from trackly.service_layer import commands, queries

from .app import DATE, as_date, get_app, rejections
from .helpers import success

if TYPE_CHECKING:
    from trackly.domain.calendar import DayCell

WEEKDAYS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

#: Terminal colours for the holiday presentation classes.
HOLIDAY_COLOURS = {
    "amber": "yellow",
    "indigo": "blue",
    "rose": "red",
    "slate": "grey50",
}


def _cell_text(cell: DayCell | None) -> str:
    if cell is None:
        return ""
    day = f"[bold]{cell.date.day}[/bold]" if cell.is_today else str(cell.date.day)
    lines = [day]
    if cell.holiday is not None:
        colour = HOLIDAY_COLOURS.get(cell.holiday_style or "", "default")
        lines.append(f"[{colour}]{escape(cell.holiday.name)}[/]")
    lines.extend(f"[magenta]★ {escape(member.name)}[/]" for member in cell.birthdays)
    lines.extend(
        f"{item.kind.value[0].upper()} {escape(item.title)}" for item in cell.items
    )
    return "\n".join(lines)


def render_month(cells: list[DayCell | None], year: int, month: int) -> Table:
    """Lay the cells out as a Sunday-first week grid."""
    table = Table(
        title=dt.date(year, month, 1).strftime("%B %Y"), show_lines=True, expand=True
    )
    for name in WEEKDAYS:
        table.add_column(name, vertical="top", ratio=1)
    for start in range(0, len(cells), 7):
        week = cells[start : start + 7]
        week += [None] * (7 - len(week))
        table.add_row(*(_cell_text(cell) for cell in week))
    return table


@click.group(cls=clickx.ExtraGroup)
def calendar() -> None:
    """Shared calendar: holidays, birthdays, events and meetings."""


@calendar.command()
@click.argument("year", type=click.IntRange(1, 9999))
@click.argument("month", type=click.IntRange(1, 12))
@click.option("--context", "-c", required=True, help="Business context to show.")
@click.option("--today", type=DATE, help="Override today's date (YYYY-MM-DD).")
def show(year: int, month: int, context: str, today: dt.datetime | None) -> None:
    """Print the month view for CONTEXT."""
    app = get_app()
    cells = queries.build_month_view(
        app.uow, year, month, context, app.holidays, today=as_date(today)
    )
    Console().print(render_month(cells, year, month))


@calendar.command("add-event")
@click.argument("title")
@click.argument("date", type=DATE)
@click.option("--context", "-c", required=True, help="Owning business context.")
def add_event(title: str, date: dt.datetime, context: str) -> None:
    """Register a one-off event."""
    app = get_app()
    with rejections():
        event_id = app.message_bus.handle(
            commands.AddEvent(title=title, date=as_date(date), context=context)
        )
    success(f"Added event {event_id}")
    click.echo(event_id)


@calendar.command("add-meeting")
@click.argument("title")
@click.argument("date", type=DATE)
@click.option("--context", "-c", required=True, help="Owning business context.")
@click.option("--start", "start_time", default="10:00", show_default=True)
@click.option("--end", "end_time", default="11:00", show_default=True)
@click.option(
    "--type",
    "meeting_type",
    type=click.Choice([t.value for t in MeetingType]),
    default=MeetingType.MEETING.value,
    show_default=True,
)
@click.option("--notes", default="")
@click.option("--attendee", "attendees", multiple=True, help="Repeatable.")
@click.option(
    "--recurrence",
    type=click.Choice([r.value for r in RecurrenceType]),
    default=RecurrenceType.NONE.value,
    show_default=True,
    help="Descriptive only; the calendar shows the meeting on DATE.",
)
def add_meeting(  # pylint: disable=too-many-arguments,too-many-positional-arguments
    title: str,
    date: dt.datetime,
    context: str,
    start_time: str,
    end_time: str,
    meeting_type: str,
    notes: str,
    attendees: tuple[str, ...],
    recurrence: str,
) -> None:
    """Schedule a meeting."""
    recurrence_type = RecurrenceType(recurrence)
    app = get_app()
    with rejections():
        meeting_id = app.message_bus.handle(
            commands.AddMeeting(
                title=title,
                date=as_date(date),
                context=context,
                start_time=start_time,
                end_time=end_time,
                type=MeetingType(meeting_type),
                notes=notes,
                attendees=attendees,
                is_recurring=recurrence_type is not RecurrenceType.NONE,
                recurrence_type=recurrence_type,
            )
        )
    success(f"Added meeting {meeting_id}")
    click.echo(meeting_id)


@calendar.command("move-meeting")
@click.argument("meeting_id")
@click.argument("date", type=DATE)
@click.option("--start", "start_time", default=None)
@click.option("--end", "end_time", default=None)
def move_meeting(
    meeting_id: str, date: dt.datetime, start_time: str | None, end_time: str | None
) -> None:
    """Move a meeting to another date (and optionally time)."""
    changes = {"date": as_date(date)}
    if start_time is not None:
        changes["start_time"] = start_time
    if end_time is not None:
        changes["end_time"] = end_time
    app = get_app()
    with rejections():
        app.message_bus.handle(commands.UpdateMeeting(meeting_id=meeting_id, **changes))
    success(f"Moved meeting {meeting_id}")


@calendar.command("delete-meeting")
@click.argument("meeting_id")
def delete_meeting(meeting_id: str) -> None:
    """Delete a meeting."""
    app = get_app()
    with rejections():
        app.message_bus.handle(commands.DeleteMeeting(meeting_id=meeting_id))
    success(f"Deleted meeting {meeting_id}")
