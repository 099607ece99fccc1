"""Mapping between domain entities and stored records.

Each stored row holds the entity kind, its id, its provenance (if any) and a
JSON payload. The payload is the flattened dataclass; enums are stored by value
and dates as ISO strings.
"""

from dataclasses import dataclass
from typing import Any

from trackly.domain.models import (
    Booking,
    CrossDomainSignal,
    Event,
    MaintenanceTicket,
    Meeting,
    OperationalTask,
    Room,
    TeamMember,
    VipResidencyProtocol,
)
from trackly.domain.utils import dataclass_to_dict, dict_to_dataclass
from trackly.interfaces.entity_store import kind_of

#: Entity kinds the stores know how to persist, keyed by stored kind name.
ENTITY_TYPES: dict[str, type] = {
    kind_of(cls): cls
    for cls in (
        Event,
        Meeting,
        TeamMember,
        Room,
        Booking,
        VipResidencyProtocol,
        OperationalTask,
        MaintenanceTicket,
        CrossDomainSignal,
    )
}


class UnknownEntityKindError(LookupError):
    """Raised when a stored kind has no registered entity type."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"Unknown entity kind: {kind!r}")
        self.kind = kind


@dataclass(frozen=True)
class EntityRecord:
    """A persisted entity, as stored."""

    kind: str
    entity_id: str
    provenance: str | None
    payload: dict[str, Any]


def to_record(entity: Any) -> EntityRecord:
    """Flatten an entity into an `EntityRecord`."""
    kind = kind_of(type(entity))
    if kind not in ENTITY_TYPES:
        raise UnknownEntityKindError(kind)
    return EntityRecord(
        kind=kind,
        entity_id=entity.id,
        provenance=getattr(entity, "provenance", None),
        payload=dataclass_to_dict(entity),
    )


def from_payload(kind: str, payload: dict[str, Any]) -> Any:
    """Rebuild an entity of ``kind`` from its stored payload."""
    if (entity_type := ENTITY_TYPES.get(kind)) is None:
        raise UnknownEntityKindError(kind)
    return dict_to_dataclass(entity_type, payload)
