"""Utility constants and helpers for calrel.

Time unit constants represent durations in milliseconds.
Month and year are fixed-length buckets (30 and 365 days), not calendar units.
"""

import time

# Time unit constants (all values in milliseconds)
SECOND = 1000
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY
MONTH = 30 * DAY
QUARTER = 3 * MONTH
YEAR = 365 * DAY


def now_ms() -> int:
    """Return the current wall-clock time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000
