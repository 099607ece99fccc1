"""Handlers for calendar entries: events and meetings."""

import logging
from collections.abc import Callable

from trackly.domain import scheduling
from trackly.domain.models import Meeting
from trackly.interfaces.id_generator import IdGenerator
from trackly.interfaces.unit_of_work import AbstractUnitOfWork
from trackly.service_layer import commands

logger = logging.getLogger(__name__)


def add_event(
    cmd: commands.AddEvent, uow: AbstractUnitOfWork, id_generator: IdGenerator
) -> str:
    """Register a one-off event and return its id."""
    event = scheduling.new_event(
        id_generator.new_id("evt-"), cmd.title, cmd.date, cmd.context
    )
    with uow:
        uow.store.add(event)
        uow.commit()
    logger.debug("Added event %s on %s (%s)", event.id, event.date, event.context)
    return event.id


def add_meeting(
    cmd: commands.AddMeeting, uow: AbstractUnitOfWork, id_generator: IdGenerator
) -> str:
    """Schedule a meeting and return its id."""
    meeting = scheduling.new_meeting(
        id_generator.new_id("meet-"),
        cmd.title,
        cmd.date,
        cmd.context,
        start_time=cmd.start_time,
        end_time=cmd.end_time,
        type=cmd.type,
        notes=cmd.notes,
        attendees=cmd.attendees,
        is_recurring=cmd.is_recurring,
        recurrence_type=cmd.recurrence_type,
    )
    with uow:
        uow.store.add(meeting)
        uow.commit()
    logger.debug("Added meeting %s on %s", meeting.id, meeting.date)
    return meeting.id


def update_meeting(cmd: commands.UpdateMeeting, uow: AbstractUnitOfWork) -> None:
    """Replace the active version of a meeting."""
    with uow:
        current = uow.store.require(Meeting, cmd.meeting_id)
        revised = scheduling.revise_meeting(
            current,
            title=cmd.title,
            date=cmd.date,
            start_time=cmd.start_time,
            end_time=cmd.end_time,
            type=cmd.type,
            notes=cmd.notes,
            attendees=cmd.attendees,
            is_recurring=cmd.is_recurring,
            recurrence_type=cmd.recurrence_type,
        )
        if revised == current:
            logger.debug("UpdateMeeting %s: no changes; noop", cmd.meeting_id)
            return
        uow.store.replace(revised)
        uow.commit()


def delete_meeting(cmd: commands.DeleteMeeting, uow: AbstractUnitOfWork) -> None:
    """Delete a meeting."""
    with uow:
        uow.store.remove(Meeting, cmd.meeting_id)
        uow.commit()


COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    commands.AddEvent: add_event,
    commands.AddMeeting: add_meeting,
    commands.UpdateMeeting: update_meeting,
    commands.DeleteMeeting: delete_meeting,
}
