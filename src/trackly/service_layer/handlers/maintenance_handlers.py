"""Handlers for maintenance tickets."""

import logging
from collections.abc import Callable

from trackly.domain import maintenance
from trackly.domain.models import MaintenanceTicket
from trackly.interfaces.id_generator import IdGenerator
from trackly.interfaces.unit_of_work import AbstractUnitOfWork
from trackly.service_layer import commands

logger = logging.getLogger(__name__)


def add_maintenance_ticket(
    cmd: commands.AddMaintenanceTicket,
    uow: AbstractUnitOfWork,
    id_generator: IdGenerator,
) -> str:
    """Open a ticket and return its id."""
    ticket = maintenance.new_ticket(
        id_generator.new_id("tkt-"),
        cmd.title,
        cmd.due_date,
        category=cmd.category,
        priority=cmd.priority,
        is_recurring=cmd.is_recurring,
    )
    with uow:
        uow.store.add(ticket)
        uow.commit()
    logger.debug("Opened ticket %s (%s)", ticket.id, ticket.category.value)
    return ticket.id


def update_ticket_status(
    cmd: commands.UpdateTicketStatus, uow: AbstractUnitOfWork
) -> None:
    """Move a ticket along its lifecycle.

    Raises:
        EntityNotFoundError: If the ticket does not exist.
        InvalidTransitionError: If the move is not allowed.
    """
    with uow:
        ticket = uow.store.require(MaintenanceTicket, cmd.ticket_id)
        if ticket.status is cmd.status:
            logger.debug(
                "UpdateTicketStatus %s: already %s; noop", ticket.id, cmd.status.value
            )
            return
        uow.store.replace(maintenance.transition_ticket(ticket, cmd.status))
        uow.commit()


COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    commands.AddMaintenanceTicket: add_maintenance_ticket,
    commands.UpdateTicketStatus: update_ticket_status,
}
