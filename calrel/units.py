"""The fixed catalog of relative time units.

Matchers are ordered from coarsest (year) to finest (second). A delta
qualifies for a unit when it is greater than or equal to the unit's
threshold; the magnitude is the delta divided by the divisor, which equals
the threshold unless given explicitly.
"""

from dataclasses import dataclass
from typing import Literal, TypeAlias

from calrel.util import DAY, HOUR, MINUTE, MONTH, QUARTER, SECOND, WEEK, YEAR

Unit: TypeAlias = Literal[
    "year", "quarter", "month", "week", "day", "hour", "minute", "second"
]


@dataclass(frozen=True, kw_only=True)
class IntervalMatcher:
    unit: Unit
    threshold: int
    divisor: int | None = None

    def __post_init__(self) -> None:
        if self.threshold < 0:
            raise ValueError(
                f"IntervalMatcher threshold must be >= 0, got {self.threshold}"
            )
        if self.threshold == 0 and not self.divisor:
            raise ValueError(
                f"IntervalMatcher for {self.unit!r} has a zero threshold "
                f"and needs an explicit divisor"
            )

    @property
    def scale(self) -> int:
        """Milliseconds per unit when computing the rounded magnitude."""
        return self.divisor if self.divisor is not None else self.threshold

    def __str__(self) -> str:
        return f"IntervalMatcher({self.unit}, >={self.threshold}ms)"


MATCHERS: tuple[IntervalMatcher, ...] = (
    IntervalMatcher(unit="year", threshold=YEAR),
    IntervalMatcher(unit="quarter", threshold=QUARTER),
    IntervalMatcher(unit="month", threshold=MONTH),
    IntervalMatcher(unit="week", threshold=WEEK),
    IntervalMatcher(unit="day", threshold=DAY),
    IntervalMatcher(unit="hour", threshold=HOUR),
    IntervalMatcher(unit="minute", threshold=MINUTE),
    # No lower bound for seconds
    IntervalMatcher(unit="second", threshold=0, divisor=SECOND),
)

UNITS: tuple[Unit, ...] = tuple(matcher.unit for matcher in MATCHERS)


def normalize_unit(unit: str) -> str:
    """Map a plural unit name ("weeks") to its singular form ("week").

    Anything that is not a known plural is returned unchanged, so callers
    still have to check the result against ``UNITS``.
    """
    for known in UNITS:
        if known + "s" == unit:
            return known
    return unit
