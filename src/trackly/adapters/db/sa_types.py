"""Column types shared by TRACKLY tables.

``BIGINT_PK`` is a BIGINT on servers and an INTEGER on SQLite (where only
``INTEGER PRIMARY KEY`` autoincrements). ``PORTABLE_JSON`` is JSONB on
Postgres. `UTCDateTime` always hands back aware UTC datetimes.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from sqlalchemy import JSON, BigInteger, Integer
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.types import DateTime, TypeDecorator

from trackly.adapters.db.dialects import DialectName

if TYPE_CHECKING:
    from sqlalchemy.engine.interfaces import Dialect

__all__ = ["BIGINT_PK", "PORTABLE_JSON", "UTCDateTime"]


BIGINT_PK = BigInteger().with_variant(Integer(), DialectName.SQLITE.value)

PORTABLE_JSON = JSON(none_as_null=True).with_variant(
    JSONB(none_as_null=True), DialectName.POSTGRES.value
)


def _as_utc(value: datetime) -> datetime:
    # naive values are taken to be UTC already
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class UTCDateTime(TypeDecorator[datetime]):  # pylint: disable=too-many-ancestors
    """Timezone-aware UTC datetime.

    SQLite has no timezone support, so values are stored there as naive UTC
    and re-tagged on the way out.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Dialect) -> Any:
        if value is None:
            return None
        value = _as_utc(value)
        if dialect.name == DialectName.SQLITE.value:
            return value.replace(tzinfo=None)
        return value

    def process_result_value(self, value: Any, dialect: Dialect) -> datetime | None:
        if isinstance(value, datetime):
            return _as_utc(value)
        return value

    def process_literal_param(self, value: datetime | None, dialect: Dialect) -> Any:
        return self.process_bind_param(value, dialect)

    @property
    def python_type(self) -> type[datetime]:
        return datetime
