"""Tests for the maintenance ticket handlers."""

import datetime as dt

import pytest

from trackly.domain import errors
from trackly.domain.models import MaintenanceTicket
from trackly.domain.value_objects import TaskPriority, TicketCategory, TicketStatus
from trackly.interfaces.errors import EntityNotFoundError
from trackly.service_layer import commands

from .base import HandlerTestBase

DUE = dt.date(2026, 8, 12)


class TestMaintenanceTickets(HandlerTestBase):
    """Opening tickets and moving them through their lifecycle."""

    def open_ticket(self, **kwargs) -> str:
        kwargs.setdefault("title", "Pool pump")
        kwargs.setdefault("due_date", DUE)
        ticket_id = self.bus.handle(commands.AddMaintenanceTicket(**kwargs))
        self.reset_committed()
        return ticket_id

    def move(self, ticket_id: str, status: TicketStatus) -> None:
        self.bus.handle(commands.UpdateTicketStatus(ticket_id=ticket_id, status=status))

    def test_open_ticket(self):
        """A new ticket is stored in ``todo``."""
        ticket_id = self.bus.handle(
            commands.AddMaintenanceTicket(
                title="Pool pump",
                due_date=DUE,
                category=TicketCategory.POOL,
                priority=TaskPriority.HIGH,
                is_recurring=True,
            )
        )

        self.assert_committed()
        ticket = self.stored(MaintenanceTicket, ticket_id)
        assert ticket_id == "tkt-001"
        assert ticket.status is TicketStatus.TODO
        assert ticket.category is TicketCategory.POOL
        assert ticket.is_recurring is True

    def test_blank_title_is_rejected(self):
        """A ticket needs a title."""
        with pytest.raises(errors.MissingFieldError):
            self.open_ticket(title="  ")
        assert self.all_stored(MaintenanceTicket) == []

    def test_full_lifecycle(self):
        """todo -> in-progress -> done."""
        ticket_id = self.open_ticket()
        self.move(ticket_id, TicketStatus.IN_PROGRESS)
        self.move(ticket_id, TicketStatus.DONE)

        self.assert_committed()
        assert self.stored(MaintenanceTicket, ticket_id).status is TicketStatus.DONE

    def test_skipping_ahead_is_rejected(self):
        """A ticket cannot jump from todo to done."""
        ticket_id = self.open_ticket()

        with pytest.raises(errors.InvalidTransitionError):
            self.move(ticket_id, TicketStatus.DONE)

        self.assert_not_committed()
        assert self.stored(MaintenanceTicket, ticket_id).status is TicketStatus.TODO

    def test_same_status_is_a_noop(self):
        """Moving to the current status writes nothing."""
        ticket_id = self.open_ticket()
        self.move(ticket_id, TicketStatus.TODO)
        self.assert_not_committed()

    def test_unknown_ticket(self):
        """Moving a missing ticket is a lookup failure."""
        with pytest.raises(EntityNotFoundError):
            self.move("tkt-404", TicketStatus.IN_PROGRESS)
