"""SQLAlchemy-backed EntityStore adapter.

Works on a caller-owned `Connection`; transaction boundaries belong to the unit
of work. Rows live in the ``entities`` table (see `trackly.adapters.db.schema`).
SQLAlchemy errors are mapped to the store errors of `trackly.interfaces.errors`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import delete, exists, func, insert, select, update
from sqlalchemy.exc import DBAPIError, IntegrityError

from trackly.adapters.serialization import from_payload, to_record
from trackly.interfaces.entity_store import EntityStore, kind_of
from trackly.interfaces.errors import (
    DuplicateEntityError,
    EntityNotFoundError,
    StoreUnavailableError,
)

from .schema import entities

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection

    from trackly.interfaces.entity_store import E, Entity


class SqlAlchemyEntityStore(EntityStore):
    """`EntityStore` over the ``entities`` table.

    Store order within a kind is the ``seq`` column, so a replaced entity keeps
    its position.
    """

    def __init__(self, connection: Connection):
        self.connection = connection

    # --------------------------------------------------------------------- #
    # Interface implementation
    # --------------------------------------------------------------------- #

    def get(self, entity_type: type[E], entity_id: str) -> E | None:
        kind = kind_of(entity_type)
        stmt = select(entities.c.payload).where(
            entities.c.kind == kind, entities.c.entity_id == entity_id
        )
        payload = self._execute(stmt).scalar_one_or_none()
        return None if payload is None else from_payload(kind, payload)

    def list(self, entity_type: type[E]) -> list[E]:
        kind = kind_of(entity_type)
        stmt = (
            select(entities.c.payload)
            .where(entities.c.kind == kind)
            .order_by(entities.c.seq.asc())
        )
        return [from_payload(kind, payload) for payload in self._execute(stmt).scalars()]

    def add(self, entity: Entity) -> None:
        record = to_record(entity)
        if self._exists(record.kind, record.entity_id, record.provenance):
            raise DuplicateEntityError(record.kind, record.entity_id)
        stmt = insert(entities).values(
            kind=record.kind,
            entity_id=record.entity_id,
            provenance=record.provenance,
            payload=record.payload,
        )
        try:
            self.connection.execute(stmt)
        except IntegrityError as e:
            raise DuplicateEntityError(record.kind, record.entity_id) from e
        except DBAPIError as e:
            raise StoreUnavailableError(str(e)) from e

    def replace(self, entity: Entity) -> None:
        record = to_record(entity)
        stmt = (
            update(entities)
            .where(
                entities.c.kind == record.kind,
                entities.c.entity_id == record.entity_id,
            )
            .values(
                provenance=record.provenance,
                payload=record.payload,
                updated_at=func.current_timestamp(),
            )
        )
        if self._execute(stmt).rowcount == 0:
            raise EntityNotFoundError(record.kind, record.entity_id)

    def remove(self, entity_type: type, entity_id: str) -> None:
        kind = kind_of(entity_type)
        stmt = delete(entities).where(
            entities.c.kind == kind, entities.c.entity_id == entity_id
        )
        if self._execute(stmt).rowcount == 0:
            raise EntityNotFoundError(kind, entity_id)

    def has_provenance(self, provenance: str) -> bool:
        stmt = select(exists().where(entities.c.provenance == provenance))
        return bool(self._execute(stmt).scalar())

    # --------------------------------------------------------------------- #
    # Internals
    # --------------------------------------------------------------------- #

    def _exists(self, kind: str, entity_id: str, provenance: str | None) -> bool:
        """True if a row of ``kind`` already has this id or provenance."""
        clause = entities.c.entity_id == entity_id
        if provenance is not None:
            clause = clause | (entities.c.provenance == provenance)
        stmt = select(exists().where(entities.c.kind == kind, clause))
        return bool(self._execute(stmt).scalar())

    def _execute(self, stmt: Any) -> Any:
        try:
            return self.connection.execute(stmt)
        except DBAPIError as e:
            raise StoreUnavailableError(str(e)) from e
