"""Read-side queries.

Each query opens the unit of work only to read, never commits, and hands the
collections to the pure domain functions.
"""

import datetime as dt

from trackly.domain import bookings, calendar, residency
from trackly.domain.holidays import HolidayRegistry
from trackly.domain.models import (
    Booking,
    CrossDomainSignal,
    Event,
    MaintenanceTicket,
    Meeting,
    OperationalTask,
    Room,
    TeamMember,
    VipResidencyProtocol,
)
from trackly.interfaces.unit_of_work import AbstractUnitOfWork


def build_month_view(  # pylint: disable=too-many-arguments
    uow: AbstractUnitOfWork,
    year: int,
    month: int,
    context: str,
    holidays: HolidayRegistry,
    today: dt.date | None = None,
) -> list[calendar.DayCell | None]:
    """Month view of ``context`` built from the stored events, meetings and team."""
    with uow:
        events = uow.store.list(Event)
        meetings = uow.store.list(Meeting)
        team = uow.store.list(TeamMember)
    return calendar.build_month_view(
        year,
        month,
        context,
        events=events,
        meetings=meetings,
        team=team,
        holidays=holidays,
        today=today,
    )


def list_pending_signals(uow: AbstractUnitOfWork) -> list[CrossDomainSignal]:
    """Unacknowledged artist-booking signals, in store order."""
    with uow:
        return residency.pending_signals(uow.store.list(CrossDomainSignal))


def stage_signal(uow: AbstractUnitOfWork, signal_id: str) -> residency.StagedSignal:
    """Propose a room and pickup time for a pending signal.

    Raises:
        EntityNotFoundError: If the signal does not exist.
        SignalAlreadyAcknowledgedError: If it was already acted upon.
    """
    with uow:
        signal = uow.store.require(CrossDomainSignal, signal_id)
        rooms = uow.store.list(Room)
    return residency.stage_signal(signal, rooms)


def list_rooms(uow: AbstractUnitOfWork) -> list[Room]:
    """All rooms, in store order."""
    with uow:
        return uow.store.list(Room)


def list_vacant_rooms(uow: AbstractUnitOfWork) -> list[Room]:
    """Rooms a guest can be checked into."""
    return bookings.vacant_clean_rooms(list_rooms(uow))


def ledger_stats(uow: AbstractUnitOfWork, day: dt.date) -> bookings.LedgerStats:
    """Arrivals, departures and checked-in counts for ``day``."""
    with uow:
        return bookings.ledger_stats(uow.store.list(Booking), day)


def occupancy(uow: AbstractUnitOfWork) -> int:
    """Occupancy percentage over all rooms."""
    return bookings.occupancy_rate(list_rooms(uow))


def list_bookings(uow: AbstractUnitOfWork) -> list[Booking]:
    """All bookings, in store order."""
    with uow:
        return uow.store.list(Booking)


def list_protocols(uow: AbstractUnitOfWork) -> list[VipResidencyProtocol]:
    """All VIP residency protocols, in store order."""
    with uow:
        return uow.store.list(VipResidencyProtocol)


def list_tasks(uow: AbstractUnitOfWork, context: str | None = None) -> list[OperationalTask]:
    """Operational tasks, optionally restricted to one context."""
    with uow:
        tasks = uow.store.list(OperationalTask)
    return [t for t in tasks if context is None or t.context == context]


def list_tickets(uow: AbstractUnitOfWork) -> list[MaintenanceTicket]:
    """All maintenance tickets, in store order."""
    with uow:
        return uow.store.list(MaintenanceTicket)
