"""Renderers turn a selected unit, or a fallback timestamp, into text.

``format_time_difference`` only decides *what* to render. Locale grammar
lives behind the ``Renderer`` interface so that callers can plug in their
own internationalization engine; ``EnglishRenderer`` covers en-US.
"""

import math
from abc import ABC, abstractmethod
from collections.abc import Mapping
from datetime import datetime
from typing import Any, Literal, TypeAlias
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import humanize
from typing_extensions import override

from calrel.units import UNITS, Unit

Style: TypeAlias = Literal["long", "short", "narrow"]


class Renderer(ABC):

    @abstractmethod
    def relative(
        self, value: int | float, unit: Unit, options: Mapping[str, Any]
    ) -> str:
        """Render a signed count of ``unit``; negative values (and -0.0) are in the past."""
        pass

    @abstractmethod
    def absolute(self, timestamp_ms: float, options: Mapping[str, Any]) -> str:
        """Render an exact date and time for the fallback path."""
        pass


# (singular, plural) per style
_UNIT_NAMES: dict[Style, dict[Unit, tuple[str, str]]] = {
    "long": {
        "year": ("year", "years"),
        "quarter": ("quarter", "quarters"),
        "month": ("month", "months"),
        "week": ("week", "weeks"),
        "day": ("day", "days"),
        "hour": ("hour", "hours"),
        "minute": ("minute", "minutes"),
        "second": ("second", "seconds"),
    },
    "short": {
        "year": ("yr.", "yr."),
        "quarter": ("qtr.", "qtrs."),
        "month": ("mo.", "mo."),
        "week": ("wk.", "wk."),
        "day": ("day", "days"),
        "hour": ("hr.", "hr."),
        "minute": ("min.", "min."),
        "second": ("sec.", "sec."),
    },
    "narrow": {
        "year": ("y", "y"),
        "quarter": ("q", "q"),
        "month": ("mo", "mo"),
        "week": ("w", "w"),
        "day": ("d", "d"),
        "hour": ("h", "h"),
        "minute": ("m", "m"),
        "second": ("s", "s"),
    },
}

# Phrases used with numeric="auto" in place of -1/0/+1 counts
_AUTO_PHRASES: dict[Unit, dict[int, str]] = {
    "year": {-1: "last year", 0: "this year", 1: "next year"},
    "quarter": {-1: "last quarter", 0: "this quarter", 1: "next quarter"},
    "month": {-1: "last month", 0: "this month", 1: "next month"},
    "week": {-1: "last week", 0: "this week", 1: "next week"},
    "day": {-1: "yesterday", 0: "today", 1: "tomorrow"},
    "hour": {0: "this hour"},
    "minute": {0: "this minute"},
    "second": {0: "now"},
}

_DATE_STYLES = ("full", "long", "medium", "short")


class EnglishRenderer(Renderer):
    """en-US relative and absolute time phrases.

    Relative options:
        numeric: "always" or "auto" ("yesterday", "next month", ...)
        style: "long" ("5 minutes ago"), "short" ("5 min. ago") or
            "narrow" ("5m ago")

    Absolute options:
        date_style / time_style: "full", "long", "medium", "short" or None
        tz: IANA timezone name, default "UTC"

    Unknown option keys are ignored.
    """

    @override
    def relative(
        self, value: int | float, unit: Unit, options: Mapping[str, Any]
    ) -> str:
        if unit not in UNITS:
            valid = ", ".join(UNITS)
            raise ValueError(f"Invalid unit {unit!r}. Valid units: {valid}")

        numeric = options.get("numeric", "always")
        if numeric not in ("auto", "always"):
            raise ValueError(f"numeric must be 'auto' or 'always', got {numeric!r}")

        style = options.get("style", "long")
        if style not in _UNIT_NAMES:
            valid = ", ".join(_UNIT_NAMES)
            raise ValueError(f"Invalid style {style!r}. Valid styles: {valid}")

        if numeric == "auto" and value in _AUTO_PHRASES[unit]:
            return _AUTO_PHRASES[unit][value]

        past = math.copysign(1, value) < 0
        count = int(abs(value))
        singular, plural = _UNIT_NAMES[style][unit]
        name = singular if count == 1 else plural
        amount = humanize.intcomma(count)
        # Narrow units attach to the number: "5m"
        quantity = f"{amount}{name}" if style == "narrow" else f"{amount} {name}"

        if past:
            return f"{quantity} ago"
        return f"in {quantity}"

    @override
    def absolute(self, timestamp_ms: float, options: Mapping[str, Any]) -> str:
        date_style = options.get("date_style")
        time_style = options.get("time_style")
        for name, style in (("date_style", date_style), ("time_style", time_style)):
            if style is not None and style not in _DATE_STYLES:
                valid = ", ".join(_DATE_STYLES)
                raise ValueError(f"Invalid {name} {style!r}. Valid styles: {valid}")

        tz = options.get("tz", "UTC")
        try:
            zone = ZoneInfo(tz)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone {tz!r}") from e

        dt = datetime.fromtimestamp(timestamp_ms / 1000, tz=zone)

        if date_style is None and time_style is None:
            return f"{dt.month}/{dt.day}/{dt.year}"

        date_part = _format_date(dt, date_style) if date_style else None
        time_part = _format_time(dt, time_style) if time_style else None

        if date_part is None:
            return time_part or ""
        if time_part is None:
            return date_part

        joiner = " at " if date_style in ("full", "long") else ", "
        return f"{date_part}{joiner}{time_part}"


def _format_date(dt: datetime, style: str) -> str:
    if style == "full":
        return f"{dt:%A}, {dt:%B} {dt.day}, {dt.year}"
    if style == "long":
        return f"{dt:%B} {dt.day}, {dt.year}"
    if style == "medium":
        return f"{dt:%b} {dt.day}, {dt.year}"
    return f"{dt.month}/{dt.day}/{dt.year % 100:02d}"


def _format_time(dt: datetime, style: str) -> str:
    hour = dt.hour % 12 or 12
    meridiem = "AM" if dt.hour < 12 else "PM"
    if style == "short":
        return f"{hour}:{dt.minute:02d} {meridiem}"
    clock = f"{hour}:{dt.minute:02d}:{dt.second:02d} {meridiem}"
    if style == "medium":
        return clock
    return f"{clock} {dt.tzname()}"
