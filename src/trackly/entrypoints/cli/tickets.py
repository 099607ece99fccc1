"""``trackly tickets``: facilities maintenance tickets."""

import datetime as dt

import click
import click_extra as clickx

from trackly.domain.value_objects import TaskPriority, TicketCategory, TicketStatus
from trackly.service_layer import commands

from .app import DATE, as_date, get_app, rejections
from .helpers import success


@click.group(cls=clickx.ExtraGroup)
def tickets() -> None:
    """Maintenance tickets."""


@tickets.command()
@click.argument("title")
@click.argument("due_date", type=DATE)
@click.option(
    "--category",
    type=click.Choice([c.value for c in TicketCategory]),
    default=TicketCategory.GENERAL.value,
    show_default=True,
)
@click.option(
    "--priority",
    type=click.Choice([p.value for p in TaskPriority]),
    default=TaskPriority.MEDIUM.value,
    show_default=True,
)
@click.option("--recurring/--once", default=False)
def add(
    title: str, due_date: dt.datetime, category: str, priority: str, recurring: bool
) -> None:
    """Open a ticket."""
    app = get_app()
    with rejections():
        ticket_id = app.message_bus.handle(
            commands.AddMaintenanceTicket(
                title=title,
                due_date=as_date(due_date),
                category=TicketCategory(category),
                priority=TaskPriority(priority),
                is_recurring=recurring,
            )
        )
    success(f"Opened ticket {ticket_id}")
    click.echo(ticket_id)


@tickets.command()
@click.argument("ticket_id")
@click.argument("status", type=click.Choice([s.value for s in TicketStatus]))
def move(ticket_id: str, status: str) -> None:
    """Move TICKET_ID to STATUS."""
    app = get_app()
    with rejections():
        app.message_bus.handle(
            commands.UpdateTicketStatus(ticket_id=ticket_id, status=TicketStatus(status))
        )
    success(f"Ticket {ticket_id} is now {status}")
