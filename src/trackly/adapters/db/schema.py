"""SQLAlchemy table definitions for the entity store.

One ``entities`` table holds every kind of entity as a JSON payload. The
unique constraint on ``(kind, provenance)`` makes the database itself reject
a second materialization of the same cross-domain signal; rows with a NULL
provenance never collide.
"""

import sqlalchemy as sa

from trackly.adapters.db.metadata import metadata
from trackly.adapters.db.sa_types import BIGINT_PK, PORTABLE_JSON, UTCDateTime

entities = sa.Table(
    "entities",
    metadata,
    sa.Column(
        "seq",
        BIGINT_PK,
        sa.Identity(always=False, start=1),
        primary_key=True,
        comment="Insertion sequence; defines store order within a kind.",
    ),
    sa.Column(
        "kind",
        sa.String(64),
        nullable=False,
        comment="Entity type name, e.g. 'Booking'.",
    ),
    sa.Column(
        "entity_id",
        sa.String(80),
        nullable=False,
        comment="Entity id, unique within its kind.",
    ),
    sa.Column(
        "provenance",
        sa.String(120),
        nullable=True,
        comment="Idempotency key of the signal that spawned the entity, if any.",
    ),
    sa.Column(
        "payload",
        PORTABLE_JSON,
        nullable=False,
        comment="Flattened entity (JSON object).",
    ),
    sa.Column(
        "updated_at",
        UTCDateTime(timezone=True),
        server_default=sa.func.current_timestamp(),
        nullable=False,
        comment="UTC time of the last write.",
    ),
    sa.UniqueConstraint("kind", "entity_id"),
    sa.UniqueConstraint("kind", "provenance"),
    sa.Index("ix_entities_provenance", "provenance"),
    comment="Entity store. One row per live entity.",
)
