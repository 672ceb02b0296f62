"""Tests for range extraction."""

from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from calrel.errors import RangeConversionError
from calrel.range import TimeRange, extract_range_points, to_timestamp
from calrel.util import now_ms

NOW = datetime(2023, 1, 1, tzinfo=timezone.utc)
NOW_MS = NOW.timestamp() * 1000


def clock() -> float:
    return NOW_MS


def test_numbers_pass_through():
    assert to_timestamp(1_000) == 1_000
    assert to_timestamp(1.5) == 1.5


def test_aware_datetime_converts_to_milliseconds():
    assert to_timestamp(NOW) == NOW_MS
    pacific = datetime(2022, 12, 31, 16, 0, tzinfo=ZoneInfo("US/Pacific"))
    assert to_timestamp(pacific) == NOW_MS


def test_date_is_start_of_day_utc():
    assert to_timestamp(date(2023, 1, 1)) == NOW_MS


def test_iso_strings():
    """Test that ISO strings parse, and offset-less ones are read as UTC."""
    assert to_timestamp("2023-01-01T00:00:00Z") == NOW_MS
    assert to_timestamp("2023-01-01T02:00:00+02:00") == NOW_MS
    assert to_timestamp("2023-01-01") == NOW_MS
    assert to_timestamp("2023-01-01T00:00:05") == NOW_MS + 5_000


def test_naive_datetime_rejected():
    with pytest.raises(RangeConversionError, match="naive datetime"):
        to_timestamp(datetime(2023, 1, 1))


@pytest.mark.parametrize("value", ["not a date", "", "2023-13-45"])
def test_malformed_strings_rejected(value):
    with pytest.raises(RangeConversionError, match="not an ISO 8601 date"):
        to_timestamp(value)


@pytest.mark.parametrize("value", [float("nan"), float("inf"), -float("inf")])
def test_non_finite_numbers_rejected(value):
    with pytest.raises(RangeConversionError, match="finite"):
        to_timestamp(value)


@pytest.mark.parametrize("value", [None, True, [1, 2], object()])
def test_unsupported_types_rejected(value):
    with pytest.raises(RangeConversionError):
        to_timestamp(value)


def test_conversion_error_is_value_error():
    with pytest.raises(ValueError):
        to_timestamp("garbage")


def test_single_point_ends_now():
    assert extract_range_points(NOW_MS - 5_000, clock) == (NOW_MS - 5_000, NOW_MS)
    assert extract_range_points(NOW - timedelta(days=1), clock) == (
        NOW_MS - 86_400_000,
        NOW_MS,
    )


def test_mapping_range():
    assert extract_range_points({"from": 10, "to": 20}, clock) == (10, 20)
    assert extract_range_points({"from": 10}, clock) == (10, NOW_MS)
    assert extract_range_points({"from": 10, "to": None}, clock) == (10, NOW_MS)


def test_mapping_without_from_rejected():
    with pytest.raises(RangeConversionError, match="no 'from' key"):
        extract_range_points({"to": 10}, clock)


def test_time_range_dataclass():
    assert extract_range_points(TimeRange(start=10, end=20), clock) == (10, 20)
    assert extract_range_points(TimeRange(start="2023-01-01"), clock) == (
        NOW_MS,
        NOW_MS,
    )


def test_bad_end_point_rejected():
    with pytest.raises(RangeConversionError):
        extract_range_points({"from": 10, "to": "soon"}, clock)


def test_default_clock_is_wall_time():
    before = datetime.now(timezone.utc).timestamp() * 1000
    _, to_ms = extract_range_points(0)
    after = datetime.now(timezone.utc).timestamp() * 1000
    assert before - 1 <= to_ms <= after + 1


def test_now_ms_is_whole_milliseconds():
    assert isinstance(now_ms(), int)
