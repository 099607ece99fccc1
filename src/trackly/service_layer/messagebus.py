"""Message bus implementation for handling commands."""

import logging
from collections.abc import Callable
from typing import Any

from trackly.domain.errors import DomainError
from trackly.interfaces.errors import StoreError
from trackly.interfaces.unit_of_work import AbstractUnitOfWork

from .commands import Command

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class NoHandlerForCommand(LookupError):
    """Exception raised when no handler is found for a command."""

    def __init__(self, cmd: Command) -> None:
        super().__init__(f"No handler found for command {type(cmd).__name__}")


class MessageBus:
    """Routes commands to their handlers.

    Args:
        uow: The unit of work injected into the handlers, exposed here for
            convenience (e.g. for queries run by the same entrypoint).
        command_handlers: A mapping of command types to handlers taking the
            command as their single argument. Other dependencies are bound
            beforehand (see `trackly.bootstrap.inject_dependencies`).

    Note:
        Rejections (domain and store errors) are logged at WARNING and
        re-raised unchanged; anything else is logged with its traceback.
    """

    def __init__(
        self,
        uow: AbstractUnitOfWork,
        command_handlers: dict[type[Command], Callable[..., Any]],
    ) -> None:
        self.uow = uow
        self._command_handlers = command_handlers

    def handle(self, cmd: Command) -> Any:
        """Dispatch a command to its handler.

        Args:
            cmd: The command to handle.

        Returns:
            Whatever the handler returns (e.g. the id of a created entity).

        Raises:
            NoHandlerForCommand: If no handler is found for the command type.
            Exception: If the handler raises an exception.
        """

        if handler := self._command_handlers.get(type(cmd)):
            handler_name = self._get_handler_name(handler)
            logger.debug("Handling command %s with handler %s", cmd, handler_name)
            try:
                return handler(cmd)
            except (DomainError, StoreError) as e:
                logger.warning(
                    "Command %s rejected by %s: %s",
                    type(cmd).__name__,
                    handler_name,
                    e,
                )
                raise
            except Exception:  # pylint: disable=broad-except
                logger.exception(
                    "Exception handling command %s with handler %s", cmd, handler_name
                )
                raise
        logger.error("No handler found for command %s", type(cmd).__name__)
        raise NoHandlerForCommand(cmd)

    @staticmethod
    def _get_handler_name(fn: Callable[..., Any]) -> str:
        if hasattr(fn, "__name__"):
            return fn.__name__
        if hasattr(fn, "func") and hasattr(fn.func, "__name__"):
            return fn.func.__name__
        return repr(fn)
