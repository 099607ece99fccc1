"""Shared SQLAlchemy `MetaData` object with a naming convention.

Every TRACKLY table attaches to this metadata so constraints and indexes get
deterministic names, which keeps Alembic autogenerate from emitting spurious
drops and adds.

Naming convention:
    - Indexes:       ix_<table>_<col...>
    - Unique:        uq_<table>_<col...>
    - Check:         ck_<table>_<constraint_name>
    - Foreign keys:  fk_<table>_<col...>_<reftable>
    - Primary key:   pk_<table>
"""

from sqlalchemy import MetaData

metadata = MetaData(
    naming_convention={
        "ix": "ix_%(table_name)s_%(column_0_N_label)s",
        "uq": "uq_%(table_name)s_%(column_0_N_name)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
        "fk": "fk_%(table_name)s_%(column_0_N_name)s_%(referred_table_name)s",
        "pk": "pk_%(table_name)s",
    }
)
