"""Maintenance ticket lifecycle."""

import datetime as dt
from dataclasses import replace

from trackly.domain import errors
from trackly.domain.models import MaintenanceTicket
from trackly.domain.value_objects import TaskPriority, TicketCategory, TicketStatus

#: Allowed status moves. A ticket in progress can be put back on the queue.
TICKET_TRANSITIONS: dict[TicketStatus, frozenset[TicketStatus]] = {
    TicketStatus.TODO: frozenset({TicketStatus.IN_PROGRESS}),
    TicketStatus.IN_PROGRESS: frozenset({TicketStatus.DONE, TicketStatus.TODO}),
    TicketStatus.DONE: frozenset(),
}


def new_ticket(  # pylint: disable=too-many-arguments
    ticket_id: str,
    title: str,
    due_date: dt.date,
    *,
    category: TicketCategory = TicketCategory.GENERAL,
    priority: TaskPriority = TaskPriority.MEDIUM,
    is_recurring: bool = False,
) -> MaintenanceTicket:
    """Open a ticket. New tickets start in ``todo``.

    Raises:
        MissingFieldError: If the title is blank or the due date is missing.
    """
    if not title or not title.strip():
        raise errors.MissingFieldError("MaintenanceTicket", "title")
    if due_date is None:
        raise errors.MissingFieldError("MaintenanceTicket", "due_date")
    return MaintenanceTicket(
        id=ticket_id,
        title=title.strip(),
        due_date=due_date,
        category=category,
        priority=priority,
        status=TicketStatus.TODO,
        is_recurring=is_recurring,
    )


def transition_ticket(
    ticket: MaintenanceTicket, status: TicketStatus
) -> MaintenanceTicket:
    """Move a ticket to ``status``.

    Raises:
        InvalidTransitionError: If the move is not in `TICKET_TRANSITIONS`.
    """
    if status not in TICKET_TRANSITIONS[ticket.status]:
        raise errors.InvalidTransitionError(
            ticket.id, ticket.status.value, status.value
        )
    return replace(ticket, status=status)
