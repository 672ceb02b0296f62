from .core import Formatter, ago, format_time_difference, log_error
from .errors import (
    CalrelError,
    ErrorKind,
    FormatError,
    RangeConversionError,
    UnitRangeError,
    UnitTypeError,
)
from .matchers import calculate_boundaries, filter_matchers
from .options import TimeDifferenceOptions
from .range import TimeRange, extract_range_points, to_timestamp
from .render import EnglishRenderer, Renderer
from .select import Selection, select_unit
from .units import MATCHERS, UNITS, IntervalMatcher, Unit, normalize_unit

__all__ = [
    "Formatter",
    "ago",
    "format_time_difference",
    "log_error",
    "TimeDifferenceOptions",
    "TimeRange",
    "extract_range_points",
    "to_timestamp",
    "filter_matchers",
    "calculate_boundaries",
    "select_unit",
    "Selection",
    "IntervalMatcher",
    "MATCHERS",
    "UNITS",
    "Unit",
    "normalize_unit",
    "Renderer",
    "EnglishRenderer",
    "CalrelError",
    "ErrorKind",
    "FormatError",
    "RangeConversionError",
    "UnitRangeError",
    "UnitTypeError",
]
