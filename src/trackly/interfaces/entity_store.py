"""Entity store interface.

The store holds the host's collections (events, meetings, bookings, rooms,
signals, ...) keyed by entity type and id. Entities are immutable values:
an update replaces the stored value as a whole.

Every entity exposes an ``id``. Entities spawned from a cross-domain signal
also carry a ``provenance`` key; `EntityStore.has_provenance` lets the
service layer detect a second materialization from stored data alone.
"""

from __future__ import annotations

import abc
from typing import Protocol, TypeVar

from .errors import EntityNotFoundError


class Entity(Protocol):  # pylint: disable=too-few-public-methods
    """Anything with a string ``id``."""

    @property
    def id(self) -> str:
        """Unique id within the entity's kind."""
        ...  # pylint: disable=unnecessary-ellipsis


E = TypeVar("E", bound=Entity)


def kind_of(entity_type: type) -> str:
    """Name under which entities of ``entity_type`` are stored."""
    return entity_type.__name__


class EntityStore(abc.ABC):
    """Contract for a store of immutable entities."""

    @abc.abstractmethod
    def get(self, entity_type: type[E], entity_id: str) -> E | None:
        """Return the entity with ``entity_id``, or None."""

    @abc.abstractmethod
    def list(self, entity_type: type[E]) -> list[E]:
        """Return all entities of ``entity_type`` in insertion order."""

    @abc.abstractmethod
    def add(self, entity: Entity) -> None:
        """Add a new entity.

        Raises:
            DuplicateEntityError: If an entity of the same kind already has
                this id or, when set, this provenance.
        """

    @abc.abstractmethod
    def replace(self, entity: Entity) -> None:
        """Replace the stored entity with the same kind and id.

        The entity keeps its position in insertion order.

        Raises:
            EntityNotFoundError: If no such entity is stored.
        """

    @abc.abstractmethod
    def remove(self, entity_type: type, entity_id: str) -> None:
        """Remove an entity.

        Raises:
            EntityNotFoundError: If no such entity is stored.
        """

    @abc.abstractmethod
    def has_provenance(self, provenance: str) -> bool:
        """True if any stored entity carries ``provenance``."""

    def require(self, entity_type: type[E], entity_id: str) -> E:
        """Like `get`, but raise when the entity is missing.

        Raises:
            EntityNotFoundError: If no such entity is stored.
        """
        if (entity := self.get(entity_type, entity_id)) is None:
            raise EntityNotFoundError(kind_of(entity_type), entity_id)
        return entity
