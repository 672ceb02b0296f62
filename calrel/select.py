"""Pick the unit and signed magnitude used to describe a time difference."""

import math
from dataclasses import dataclass

from calrel.matchers import calculate_boundaries, filter_matchers, resolve_unit_bounds
from calrel.options import TimeDifferenceOptions
from calrel.units import IntervalMatcher, Unit


@dataclass(frozen=True, kw_only=True)
class Selection:
    """A chosen unit and count. Positive counts point to the future.

    A past delta that rounds to zero is ``-0.0`` so the direction survives.
    """

    value: int | float
    unit: Unit


def select_unit(
    matchers: list[IntervalMatcher],
    min_index: int,
    max_index: int,
    from_ms: float,
    to_ms: float,
) -> Selection | None:
    """Scan ``matchers`` from coarse to fine and return the first that fits.

    The scan starts one entry above ``max_index`` so that a delta which
    already qualifies for a unit coarser than the maximum is detected and
    rejected rather than squeezed into the maximum unit. Returns None when
    no permitted unit applies.
    """
    diff = to_ms - from_ms
    diff_abs = abs(diff)

    if not math.isfinite(diff_abs):
        return None

    for index in range(max(max_index - 1, 0), min_index + 1):
        matcher = matchers[index]

        if diff_abs < matcher.threshold:
            continue

        if index < max_index:
            break

        rounded = _round_half_up(diff_abs / matcher.scale)
        if diff < 0:
            value: int | float = rounded
        else:
            value = -rounded if rounded else -0.0
        return Selection(value=value, unit=matcher.unit)

    return None


def _round_half_up(value: float) -> int:
    # Half-up for non-negative values; round() is half-even
    return int(value + 0.5)


def select_for_options(
    options: TimeDifferenceOptions, from_ms: float, to_ms: float
) -> Selection | None:
    """Filter, bound and scan the catalog for one call's options.

    Raises:
        UnitTypeError: If excluded_units has the wrong shape
        UnitRangeError: If a unit option is unknown or out of order
    """
    matchers = filter_matchers(options.excluded_units)

    if not matchers:
        return None

    minimum_unit, maximum_unit = resolve_unit_bounds(
        options.minimum_unit, options.maximum_unit
    )
    min_index, max_index = calculate_boundaries(matchers, minimum_unit, maximum_unit)

    return select_unit(matchers, min_index, max_index, from_ms, to_ms)
