"""Holiday registry.

A static, year-scoped lookup table from calendar date to `Holiday`. Tables are
injected (see `trackly.config.load_holiday_registry`) rather than compiled in,
so a deployment can ship a new year without a code change.
"""

import datetime as dt
from collections.abc import Iterable, Mapping

from trackly.domain.models import Holiday
from trackly.domain.value_objects import HolidayType


class HolidayRegistry:
    """Pure, O(1) lookup of holidays by date.

    Dates outside the loaded years simply have no holiday; callers must not
    assume coverage beyond `years`.
    """

    def __init__(self, holidays: Iterable[Holiday], version: str | None = None):
        self._by_date: dict[dt.date, Holiday] = {h.date: h for h in holidays}
        self.version = version

    @classmethod
    def from_mapping(
        cls, table: Mapping[str, Mapping[str, str]], version: str | None = None
    ) -> "HolidayRegistry":
        """Build a registry from ``{"YYYY-MM-DD": {"name": ..., "type": ...}}``.

        Raises:
            ValueError: If a date key or holiday type is malformed.
        """
        holidays = [
            Holiday(
                date=dt.date.fromisoformat(day),
                name=entry["name"],
                classification=HolidayType(entry["type"]),
            )
            for day, entry in table.items()
        ]
        return cls(holidays, version=version)

    def lookup(self, day: dt.date | str) -> Holiday | None:
        """Return the holiday on ``day``, or None."""
        if isinstance(day, str):
            day = dt.date.fromisoformat(day)
        return self._by_date.get(day)

    @property
    def years(self) -> frozenset[int]:
        """Calendar years with at least one loaded holiday."""
        return frozenset(day.year for day in self._by_date)

    def __len__(self) -> int:
        return len(self._by_date)

    def __contains__(self, day: object) -> bool:
        return day in self._by_date
