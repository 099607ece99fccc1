"""``trackly signals``: the VIP residency workflow.

Artist bookings published by other domains arrive as signals. ``list`` shows
the pending ones, ``stage`` proposes a room and pickup time, and ``commit``
creates the residency protocol, VIP booking and setup task in one go.
"""

import click
import click_extra as clickx
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from trackly.domain.residency import DEFAULT_PICKUP_TIME, source_display
from trackly.service_layer import commands, queries

from .app import get_app, rejections
from .helpers import success, warn


@click.group(cls=clickx.ExtraGroup)
def signals() -> None:
    """Cross-domain artist-booking signals."""


@signals.command("list")
def list_signals() -> None:
    """List pending signals."""
    pending = queries.list_pending_signals(get_app().uow)
    if not pending:
        warn("No pending signals.")
        return
    table = Table("ID", "Artist", "Event date", "Source", "Rider")
    for signal in pending:
        table.add_row(
            signal.id,
            escape(signal.payload.artist_name),
            signal.payload.event_date.isoformat(),
            source_display(signal.payload.source_brand),
            escape(", ".join(signal.payload.rider)) or "-",
        )
    Console().print(table)


@signals.command()
@click.argument("signal_id")
def stage(signal_id: str) -> None:
    """Show the proposed room and pickup time for SIGNAL_ID."""
    app = get_app()
    with rejections():
        staged = queries.stage_signal(app.uow, signal_id)
    payload = staged.signal.payload
    click.echo(f"Artist      : {payload.artist_name}")
    click.echo(f"Event date  : {payload.event_date.isoformat()}")
    click.echo(f"Source      : {source_display(payload.source_brand)}")
    click.echo(f"Room        : {staged.default_room_id or '<none available>'}")
    click.echo(f"Pickup time : {staged.default_pickup_time}")


@signals.command()
@click.argument("signal_id")
@click.option(
    "--room",
    "room_id",
    default=None,
    help="Room id to assign. Defaults to the staged proposal.",
)
@click.option(
    "--pickup",
    "pickup_time",
    default=DEFAULT_PICKUP_TIME,
    show_default=True,
    help="Airport pickup time (HH:MM).",
)
def commit(signal_id: str, room_id: str | None, pickup_time: str) -> None:
    """Authorize SIGNAL_ID and materialize the residency."""
    app = get_app()
    with rejections():
        if room_id is None:
            room_id = queries.stage_signal(app.uow, signal_id).default_room_id
        bundle = app.message_bus.handle(
            commands.CommitSignal(
                signal_id=signal_id, room_id=room_id, pickup_time=pickup_time
            )
        )
    success(
        f"Residency committed for {bundle.protocol.artist_id} "
        f"in room {bundle.protocol.assigned_room_number}"
    )
    click.echo(f"protocol {bundle.protocol.id}")
    click.echo(f"booking  {bundle.booking.id}")
    click.echo(f"task     {bundle.task.id}")
