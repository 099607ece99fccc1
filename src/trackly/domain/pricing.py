"""Room tier pricing.

Maps a room tier (the booking's ``internal_table``) and a stay length to a
projected price. Prices are whole currency units per night.
"""

import datetime as dt
import logging
import math
from dataclasses import dataclass

from trackly.domain.errors import UnknownTierError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoomTier:
    """A sellable room tier."""

    name: str
    base_price: int
    floor: int


NEST = RoomTier("The Nest", 1200, 1)
HAVEN = RoomTier("The Haven", 2400, 1)
RESIDENCE = RoomTier("The Residence", 4800, 2)
SANCTUARY = RoomTier("The Sanctuary", 9500, 2)

ROOM_TIERS: dict[str, RoomTier] = {
    tier.name: tier for tier in (NEST, HAVEN, RESIDENCE, SANCTUARY)
}
DEFAULT_TIER = NEST.name


def tier_unit_price(tier: str, *, strict: bool = False) -> int:
    """Return the nightly price for ``tier``.

    An unknown tier prices at 0 and logs a warning, unless ``strict`` is set.

    Raises:
        UnknownTierError: If ``strict`` and the tier is not in `ROOM_TIERS`.
    """
    if (room_tier := ROOM_TIERS.get(tier)) is not None:
        return room_tier.base_price
    if strict:
        raise UnknownTierError(tier)
    logger.warning("Unknown room tier %r; pricing at 0", tier)
    return 0


def count_nights(check_in: dt.date, check_out: dt.date) -> int:
    """Number of billable nights. Same-day stays count as one night."""
    days = (check_out - check_in).total_seconds() / 86400
    return max(1, math.ceil(days))


def price(tier: str, nights: int, *, strict: bool = False) -> int:
    """Price of ``nights`` nights in ``tier``."""
    return nights * tier_unit_price(tier, strict=strict)


def price_projection(
    tier: str, check_in: dt.date, check_out: dt.date, *, strict: bool = False
) -> int:
    """Projected price of a stay.

    Args:
        tier: Room tier name, e.g. ``"The Haven"``.
        check_in: Arrival date.
        check_out: Departure date.
        strict: Raise on an unknown tier instead of pricing it at 0.

    Returns:
        ``count_nights(check_in, check_out) * tier_unit_price(tier)``.
    """
    return price(tier, count_nights(check_in, check_out), strict=strict)
