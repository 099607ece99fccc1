"""Bootstrap the message bus with handlers and unit of work."""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from trackly import config
from trackly.adapters.db.engine import make_engine
from trackly.adapters.id_generators import ULIDGenerator
from trackly.adapters.unit_of_work import SqlAlchemyUnitOfWork
from trackly.service_layer.handlers import COMMAND_HANDLERS
from trackly.service_layer.messagebus import MessageBus

if TYPE_CHECKING:
    from trackly.domain.holidays import HolidayRegistry
    from trackly.interfaces.id_generator import IdGenerator
    from trackly.interfaces.unit_of_work import AbstractUnitOfWork
    from trackly.service_layer.commands import Command


@dataclass(frozen=True)
class AppContainer:
    """Application wiring handed to entrypoints."""

    message_bus: MessageBus
    holidays: HolidayRegistry
    hotel_context: str

    @property
    def uow(self) -> AbstractUnitOfWork:
        """The unit of work shared by commands and queries."""
        return self.message_bus.uow


def build_write_uow(url: str) -> AbstractUnitOfWork:
    """Build a new unit of work for write operations."""
    engine = make_engine(url)
    return SqlAlchemyUnitOfWork(engine)


def build_message_bus(
    uow: AbstractUnitOfWork,
    command_handlers: dict[type[Command], Callable[..., Any]],
    *,
    id_generator: IdGenerator | None = None,
    hotel_context: str | None = None,
) -> MessageBus:
    """Build a message bus with injected dependencies."""
    dependencies = {
        "uow": uow,
        "id_generator": id_generator or ULIDGenerator(),
        "hotel_context": hotel_context or config.get_hotel_context(),
    }
    injected_command_handlers = {
        command_type: inject_dependencies(handler, dependencies)
        for command_type, handler in command_handlers.items()
    }

    return MessageBus(
        uow,
        command_handlers=injected_command_handlers,
    )


def bootstrap(
    uow: AbstractUnitOfWork | None = None,
    *,
    id_generator: IdGenerator | None = None,
    holidays: HolidayRegistry | None = None,
    hotel_context: str | None = None,
) -> AppContainer:
    """Assemble the application.

    Every argument defaults to its configured production value: a SQLAlchemy
    unit of work at `TRACKLY_DB_URL`, ULID ids, the configured holiday table
    and hotel context.
    """
    hotel_context = hotel_context or config.get_hotel_context()
    message_bus = build_message_bus(
        uow or build_write_uow(config.get_db_url()),
        COMMAND_HANDLERS,
        id_generator=id_generator,
        hotel_context=hotel_context,
    )
    return AppContainer(
        message_bus=message_bus,
        holidays=holidays if holidays is not None else config.load_holiday_registry(),
        hotel_context=hotel_context,
    )


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Bind the dependencies a handler declares by parameter name."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return functools.partial(handler, **deps)
