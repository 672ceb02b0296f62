"""Tests for the unit catalog."""

import pytest

from calrel.units import MATCHERS, UNITS, IntervalMatcher, normalize_unit
from calrel.util import DAY, MONTH, QUARTER, SECOND, WEEK, YEAR


def test_catalog_is_ordered_coarse_to_fine():
    """Test that thresholds never increase along the catalog."""
    assert UNITS == (
        "year",
        "quarter",
        "month",
        "week",
        "day",
        "hour",
        "minute",
        "second",
    )
    thresholds = [matcher.threshold for matcher in MATCHERS]
    assert thresholds == sorted(thresholds, reverse=True)


def test_catalog_uses_fixed_length_buckets():
    """Test that month and year are 30 and 365 days."""
    by_unit = {matcher.unit: matcher for matcher in MATCHERS}
    assert by_unit["year"].threshold == YEAR == 365 * DAY
    assert by_unit["quarter"].threshold == QUARTER == 90 * DAY
    assert by_unit["month"].threshold == MONTH == 30 * DAY
    assert by_unit["week"].threshold == WEEK


def test_second_has_no_lower_bound():
    """Test that seconds match any delta and divide by one second."""
    second = MATCHERS[-1]
    assert second.threshold == 0
    assert second.scale == SECOND


def test_scale_defaults_to_threshold():
    assert MATCHERS[0].scale == YEAR


def test_matcher_is_immutable():
    with pytest.raises(AttributeError):
        MATCHERS[0].threshold = 1  # type: ignore[misc]


def test_zero_threshold_requires_divisor():
    with pytest.raises(ValueError, match="explicit divisor"):
        IntervalMatcher(unit="second", threshold=0)


def test_negative_threshold_rejected():
    with pytest.raises(ValueError, match="must be >= 0"):
        IntervalMatcher(unit="day", threshold=-1)


@pytest.mark.parametrize(
    ("given", "expected"),
    [
        ("weeks", "week"),
        ("seconds", "second"),
        ("quarters", "quarter"),
        ("week", "week"),
        ("fortnights", "fortnights"),
    ],
)
def test_normalize_unit(given, expected):
    assert normalize_unit(given) == expected
