"""Service layer handlers."""

from collections.abc import Callable

from .booking_handlers import COMMAND_HANDLERS as BOOKING_COMMAND_HANDLERS
from .calendar_handlers import COMMAND_HANDLERS as CALENDAR_COMMAND_HANDLERS
from .maintenance_handlers import COMMAND_HANDLERS as MAINTENANCE_COMMAND_HANDLERS
from .signal_handlers import COMMAND_HANDLERS as SIGNAL_COMMAND_HANDLERS

__all__ = ["COMMAND_HANDLERS"]

COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    **SIGNAL_COMMAND_HANDLERS,
    **CALENDAR_COMMAND_HANDLERS,
    **BOOKING_COMMAND_HANDLERS,
    **MAINTENANCE_COMMAND_HANDLERS,
}
