"""``trackly bookings``: the guest ledger."""

import datetime as dt

import click
import click_extra as clickx
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from trackly.domain.pricing import DEFAULT_TIER, ROOM_TIERS, price_projection
from trackly.service_layer import commands, queries

from .app import DATE, as_date, get_app, rejections
from .helpers import success


@click.group(cls=clickx.ExtraGroup)
def bookings() -> None:
    """Guest bookings and check-in."""


@bookings.command()
@click.argument("guest_name")
@click.argument("check_in", type=DATE)
@click.argument("check_out", type=DATE)
@click.option("--email", default="")
@click.option("--phone", default="")
@click.option("--pax", type=click.IntRange(min=1), default=1, show_default=True)
@click.option("--source", default="Direct", show_default=True)
@click.option("--vip/--no-vip", default=False)
@click.option(
    "--tier",
    type=click.Choice(sorted(ROOM_TIERS)),
    default=DEFAULT_TIER,
    show_default=True,
)
@click.option("--requests", "special_requests", default="")
@click.option(
    "--signal", "signal_id", default=None, help="Pending signal this booking settles."
)
def create(  # pylint: disable=too-many-arguments,too-many-positional-arguments
    guest_name: str,
    check_in: dt.datetime,
    check_out: dt.datetime,
    email: str,
    phone: str,
    pax: int,
    source: str,
    vip: bool,
    tier: str,
    special_requests: str,
    signal_id: str | None,
) -> None:
    """Create a booking for GUEST_NAME."""
    app = get_app()
    with rejections():
        booking_id = app.message_bus.handle(
            commands.CreateBooking(
                guest_name=guest_name,
                check_in=as_date(check_in),
                check_out=as_date(check_out),
                guest_email=email,
                guest_phone=phone,
                pax=pax,
                source=source,
                is_vip=vip,
                tier=tier,
                special_requests=special_requests,
                signal_id=signal_id,
            )
        )
    total = price_projection(tier, as_date(check_in), as_date(check_out))
    success(f"Created booking {booking_id} (projected {total})")
    click.echo(booking_id)


@bookings.command()
@click.argument("booking_id")
@click.argument("room_id")
def assign(booking_id: str, room_id: str) -> None:
    """Check BOOKING_ID into ROOM_ID."""
    app = get_app()
    with rejections():
        app.message_bus.handle(commands.AssignRoom(booking_id=booking_id, room_id=room_id))
    success(f"Booking {booking_id} checked into {room_id}")


@bookings.command()
@click.option("--date", "day", type=DATE, default=None, help="Defaults to today.")
def stats(day: dt.datetime | None) -> None:
    """Show arrivals, departures, checked-in guests and occupancy."""
    app = get_app()
    ledger = queries.ledger_stats(app.uow, as_date(day) or dt.date.today())
    click.echo(f"Arrivals   : {ledger.arrivals}")
    click.echo(f"Departures : {ledger.departures}")
    click.echo(f"Checked in : {ledger.checked_in}")
    click.echo(f"Occupancy  : {queries.occupancy(app.uow)}%")


@bookings.command("list")
def list_bookings() -> None:
    """List bookings in store order."""
    table = Table("ID", "Guest", "In", "Out", "Room", "Tier", "VIP")
    for booking in queries.list_bookings(get_app().uow):
        table.add_row(
            booking.id,
            escape(booking.guest_name),
            booking.check_in.isoformat(),
            booking.check_out.isoformat(),
            booking.room_id or "-",
            booking.internal_table,
            "yes" if booking.is_vip else "",
        )
    Console().print(table)


@bookings.command()
@click.option("--vacant", is_flag=True, help="Only rooms ready for check-in.")
def rooms(vacant: bool) -> None:
    """List rooms and their status."""
    app = get_app()
    listed = queries.list_vacant_rooms(app.uow) if vacant else queries.list_rooms(app.uow)
    table = Table("ID", "Number", "Type", "Floor", "Status", "VIP")
    for room in listed:
        table.add_row(
            room.id,
            room.room_number,
            room.type,
            str(room.floor),
            room.status.value,
            "yes" if room.is_vip_room else "",
        )
    Console().print(table)
