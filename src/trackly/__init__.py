"""TRACKLY

Operations core for a hospitality venue. It merges holidays, birthdays,
events and meetings into per-day calendar views, and turns authorized
cross-domain artist-booking signals into residency protocols, guest bookings
and operational tasks in a single atomic step.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
