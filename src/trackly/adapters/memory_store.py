"""In-memory entity store.

`InMemoryStoreData` is the shared, committed state. `InMemoryEntityStore` is a
view over one ``{kind: {id: entity}}`` mapping; units of work hand each
transaction its own copy and swap it in on commit.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from trackly.interfaces.entity_store import EntityStore, kind_of
from trackly.interfaces.errors import DuplicateEntityError, EntityNotFoundError

if TYPE_CHECKING:
    from trackly.interfaces.entity_store import E, Entity

Buckets = dict[str, dict[str, Any]]


@dataclass(slots=True)
class InMemoryStoreData:
    """Shared committed state for in-memory units of work.

    A single instance should be passed to every unit of work that must see the
    same data. ``revision`` increases by one on each commit.
    """

    entities: Buckets = field(default_factory=dict)
    revision: int = 0
    lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )

    def copy(self) -> Buckets:
        """Shallow copy of every bucket. Entities are immutable, so this is a snapshot."""
        return {kind: dict(bucket) for kind, bucket in self.entities.items()}

    def load(self, *entities: Entity) -> None:
        """Seed committed data directly, outside any unit of work.

        Raises:
            DuplicateEntityError: If an entity is already present.
        """
        with self.lock:
            staged = InMemoryEntityStore(self.copy())
            for entity in entities:
                staged.add(entity)
            self.entities = staged.entities
            self.revision += 1


class InMemoryEntityStore(EntityStore):
    """`EntityStore` over a plain nested dict.

    Insertion order of each bucket is the store order exposed by `list`.
    """

    def __init__(self, entities: Buckets | None = None) -> None:
        self.entities: Buckets = entities if entities is not None else {}

    def get(self, entity_type: type[E], entity_id: str) -> E | None:
        return self.entities.get(kind_of(entity_type), {}).get(entity_id)

    def list(self, entity_type: type[E]) -> list[E]:
        return list(self.entities.get(kind_of(entity_type), {}).values())

    def add(self, entity: Entity) -> None:
        kind = kind_of(type(entity))
        bucket = self.entities.setdefault(kind, {})
        if entity.id in bucket:
            raise DuplicateEntityError(kind, entity.id)
        provenance = getattr(entity, "provenance", None)
        if provenance is not None and any(
            getattr(other, "provenance", None) == provenance
            for other in bucket.values()
        ):
            raise DuplicateEntityError(kind, entity.id)
        bucket[entity.id] = entity

    def replace(self, entity: Entity) -> None:
        kind = kind_of(type(entity))
        bucket = self.entities.get(kind, {})
        if entity.id not in bucket:
            raise EntityNotFoundError(kind, entity.id)
        bucket[entity.id] = entity

    def remove(self, entity_type: type, entity_id: str) -> None:
        kind = kind_of(entity_type)
        bucket = self.entities.get(kind, {})
        if entity_id not in bucket:
            raise EntityNotFoundError(kind, entity_id)
        del bucket[entity_id]

    def has_provenance(self, provenance: str) -> bool:
        return any(
            getattr(entity, "provenance", None) == provenance
            for bucket in self.entities.values()
            for entity in bucket.values()
        )
