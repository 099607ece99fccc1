"""Create entities table

Revision ID: 4c1d7e2a9b30
Revises:
Create Date: 2026-10-12

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

from trackly.adapters.db.dialects import DialectName
from trackly.adapters.db.sa_types import BIGINT_PK, PORTABLE_JSON, UTCDateTime

# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "4c1d7e2a9b30"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""
    dialect = DialectName.from_sqlalchemy(op.get_bind())

    op.create_table(
        "entities",
        sa.Column(
            "seq",
            BIGINT_PK,
            sa.Identity(always=False, start=1),
            nullable=False,
            comment="Insertion sequence; defines store order within a kind.",
        ),
        sa.Column(
            "kind",
            sa.String(length=64),
            nullable=False,
            comment="Entity type name, e.g. 'Booking'.",
        ),
        sa.Column(
            "entity_id",
            sa.String(length=80),
            nullable=False,
            comment="Entity id, unique within its kind.",
        ),
        sa.Column(
            "provenance",
            sa.String(length=120),
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
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="UTC time of the last write.",
        ),
        sa.PrimaryKeyConstraint("seq", name=op.f("pk_entities")),
        sa.UniqueConstraint(
            "kind", "entity_id", name=op.f("uq_entities_kind_entity_id")
        ),
        sa.UniqueConstraint(
            "kind", "provenance", name=op.f("uq_entities_kind_provenance")
        ),
        comment="Entity store. One row per live entity.",
    )
    op.create_index(
        "ix_entities_provenance", "entities", ["provenance"], unique=False
    )

    if dialect is DialectName.POSTGRES:
        op.create_index(
            "ix_entities_payload_gin",
            "entities",
            ["payload"],
            postgresql_using="gin",
        )


def downgrade() -> None:
    """Downgrade schema."""
    dialect = DialectName.from_sqlalchemy(op.get_bind())
    if dialect is DialectName.POSTGRES:
        op.drop_index("ix_entities_payload_gin", table_name="entities")
    op.drop_index("ix_entities_provenance", table_name="entities")
    op.drop_table("entities")
