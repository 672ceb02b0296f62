"""Narrow the unit catalog down to the matchers a call may use.

Exclusions remove entries from the catalog; minimum and maximum units then
pick the finest and coarsest indices within what remains. Both steps raise
on bad options; the caller decides what to do with the failure.
"""

from collections.abc import Collection, Mapping
from typing import Any

from calrel.errors import UnitRangeError, UnitTypeError
from calrel.options import DEFAULT_EXCLUDED_UNITS
from calrel.units import MATCHERS, IntervalMatcher, normalize_unit

NONE = "none"


def excluded_units_from(excluded_units: Any) -> list[str]:
    """Return the excluded unit names, applying the ("quarter",) default."""
    if excluded_units is None:
        return list(DEFAULT_EXCLUDED_UNITS)
    # A bare string is a single name, not a list of names
    if isinstance(excluded_units, (str, bytes, Mapping)) or not isinstance(
        excluded_units, Collection
    ):
        raise UnitTypeError("excluded_units", excluded_units)
    return list(excluded_units)


def filter_matchers(excluded_units: Any = None) -> list[IntervalMatcher]:
    """Return the catalog without the excluded units, preserving order.

    Raises:
        UnitTypeError: If excluded_units is not a list-like collection
        UnitRangeError: If an excluded name is not a known unit
    """
    excluded = excluded_units_from(excluded_units)
    matchers = list(MATCHERS)

    for unit in excluded:
        normalized = normalize_unit(str(unit))
        index = next(
            (i for i, matcher in enumerate(matchers) if matcher.unit == normalized),
            -1,
        )
        if index == -1:
            raise UnitRangeError("excluded_units", unit)
        del matchers[index]

    return matchers


def resolve_unit_bounds(minimum_unit: Any, maximum_unit: Any) -> tuple[str, str]:
    """Normalize minimum and maximum unit options to singular names or "none"."""
    min_unit = NONE if minimum_unit is None else str(minimum_unit)
    max_unit = NONE if maximum_unit is None else str(maximum_unit)

    if min_unit != NONE:
        min_unit = normalize_unit(min_unit)
    if max_unit != NONE:
        max_unit = normalize_unit(max_unit)

    return min_unit, max_unit


def _index_of(matchers: list[IntervalMatcher], unit: str) -> int:
    for i, matcher in enumerate(matchers):
        if matcher.unit == unit:
            return i
    return -1


def calculate_boundaries(
    matchers: list[IntervalMatcher], minimum_unit: str, maximum_unit: str
) -> tuple[int, int]:
    """Return ``(min_index, max_index)`` into ``matchers``.

    The minimum unit is the finest allowed (highest index) and the maximum
    unit the coarsest allowed (lowest index).

    Raises:
        UnitRangeError: If either unit is missing from ``matchers``, or the
            minimum unit is coarser than the maximum unit. Minimum unit
            problems are reported ahead of maximum unit problems.
    """
    max_index = 0 if maximum_unit == NONE else _index_of(matchers, maximum_unit)

    if minimum_unit == NONE:
        min_index = len(matchers) - 1 if matchers else 0
    else:
        min_index = _index_of(matchers, minimum_unit)

    min_out_of_range = minimum_unit != NONE and min_index == -1
    max_out_of_range = maximum_unit != NONE and max_index == -1
    min_coarser_than_max = min_index < max_index

    if min_out_of_range or min_coarser_than_max:
        raise UnitRangeError("minimum_unit", minimum_unit)
    if max_out_of_range:
        raise UnitRangeError("maximum_unit", maximum_unit)

    return min_index, max_index
