"""Normalize the accepted time range shapes into two millisecond timestamps."""

import math
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from typing import Any, TypeAlias

from dateutil.parser import isoparse

from calrel.errors import RangeConversionError
from calrel.util import now_ms

TimeRangePart: TypeAlias = datetime | date | str | int | float


@dataclass(frozen=True, kw_only=True)
class TimeRange:
    """A ``start`` point and an optional ``end`` point (defaults to now)."""

    start: TimeRangePart
    end: TimeRangePart | None = None


def to_timestamp(value: Any) -> float:
    """Convert a range part to milliseconds since the epoch.

    Accepts:
    - int/float: Passed through as-is (milliseconds)
    - datetime: Must be timezone-aware
    - date: Start of day in UTC
    - str: ISO 8601, read as UTC when it carries no offset

    Raises:
        RangeConversionError: If the value cannot be converted
    """
    if isinstance(value, bool):
        raise RangeConversionError(value, "booleans are not timestamps")
    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            raise RangeConversionError(value, "timestamp is not a finite number")
        return value
    if isinstance(value, datetime):
        if value.tzinfo is None:
            raise RangeConversionError(
                value,
                "naive datetime.\n"
                "Hint: Add timezone info:\n"
                "  dt = datetime(..., tzinfo=timezone.utc)",
            )
        return value.timestamp() * 1000
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc).timestamp() * 1000
    if isinstance(value, str):
        try:
            parsed = isoparse(value.strip())
        except (ValueError, OverflowError) as e:
            raise RangeConversionError(value, f"not an ISO 8601 date ({e})") from e
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed.timestamp() * 1000
    raise RangeConversionError(
        value,
        f"unsupported type {type(value).__name__!r}; "
        f"expected datetime, date, ISO string or millisecond number",
    )


def extract_range_points(
    time_range: Any, now: Callable[[], float] = now_ms
) -> tuple[float, float]:
    """Return ``(from, to)`` in milliseconds; a missing end is the current time."""
    if isinstance(time_range, TimeRange):
        start, end = time_range.start, time_range.end
    elif isinstance(time_range, Mapping):
        if "from" not in time_range:
            raise RangeConversionError(time_range, "range mapping has no 'from' key")
        start, end = time_range["from"], time_range.get("to")
    else:
        start, end = time_range, None

    from_ms = to_timestamp(start)
    to_ms = now() if end is None else to_timestamp(end)
    return from_ms, to_ms
