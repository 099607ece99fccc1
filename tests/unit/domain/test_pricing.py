"""Unit tests for room tier pricing."""

import datetime as dt
import logging

import pytest
from hypothesis import given
from hypothesis import strategies as st

from trackly.domain.errors import UnknownTierError
from trackly.domain.pricing import (
    DEFAULT_TIER,
    ROOM_TIERS,
    count_nights,
    price,
    price_projection,
    tier_unit_price,
)

TIERS = sorted(ROOM_TIERS)


@pytest.mark.parametrize(
    "tier,unit_price,floor",
    [
        ("The Nest", 1200, 1),
        ("The Haven", 2400, 1),
        ("The Residence", 4800, 2),
        ("The Sanctuary", 9500, 2),
    ],
)
def test_tier_table(tier, unit_price, floor):
    """The four sellable tiers with their nightly price and floor."""
    assert tier_unit_price(tier) == unit_price
    assert ROOM_TIERS[tier].floor == floor


def test_default_tier_is_the_nest():
    """Bookings without a tier fall back to the entry tier."""
    assert DEFAULT_TIER == "The Nest"


@pytest.mark.parametrize("tier", TIERS)
def test_same_day_stay_bills_one_night(tier):
    """Same-day check-in and check-out is billed as one night."""
    day = dt.date(2026, 3, 10)
    assert price_projection(tier, day, day) == tier_unit_price(tier) * 1


@pytest.mark.parametrize("tier", TIERS)
def test_two_night_stay(tier):
    """2026-03-10 to 2026-03-12 is two nights."""
    total = price_projection(tier, dt.date(2026, 3, 10), dt.date(2026, 3, 12))
    assert total == tier_unit_price(tier) * 2


@given(
    check_in=st.dates(min_value=dt.date(2000, 1, 1), max_value=dt.date(2100, 1, 1)),
    length=st.integers(min_value=-30, max_value=400),
)
def test_nights_are_never_below_one(check_in, length):
    """Night count is ``max(1, days)`` for any pair of dates."""
    check_out = check_in + dt.timedelta(days=length)
    assert count_nights(check_in, check_out) == max(1, length)


def test_unknown_tier_prices_at_zero_and_warns(caplog):
    """An unknown tier prices at 0 and logs a warning naming it."""
    with caplog.at_level(logging.WARNING, logger="trackly.domain.pricing"):
        total = price_projection("The Attic", dt.date(2026, 3, 10), dt.date(2026, 3, 12))

    assert total == 0
    assert "The Attic" in caplog.text


def test_unknown_tier_raises_when_strict():
    """Strict pricing surfaces unknown tiers as a validation error."""
    with pytest.raises(UnknownTierError) as excinfo:
        price("The Attic", 3, strict=True)
    assert excinfo.value.tier == "The Attic"
    assert excinfo.value.reason == "unknown_tier"


def test_price_multiplies_nights():
    """`price` is nights times the unit price."""
    assert price("The Haven", 3) == 7200
