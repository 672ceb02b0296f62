from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

DEFAULT_EXCLUDED_UNITS: tuple[str, ...] = ("quarter",)

DEFAULT_DATE_TIME_OPTIONS: Mapping[str, Any] = {
    "date_style": "long",
    "time_style": "short",
}


@dataclass(frozen=True, kw_only=True)
class TimeDifferenceOptions:
    """Options for ``format_time_difference``.

    Unit names are validated when units are selected, not here, so that a
    bad value is reported and the call falls back to absolute formatting.

    Args:
        minimum_unit: Finest unit allowed for relative output, or "none"
        maximum_unit: Coarsest unit allowed for relative output, or "none"
        excluded_units: Units never used; None means ("quarter",)
        date_time_options: Passed to the absolute renderer on fallback
        relative: Passed to the relative renderer (numeric, style, ...)
    """

    minimum_unit: Any = "none"
    maximum_unit: Any = "none"
    excluded_units: Any = None
    date_time_options: Mapping[str, Any] | None = None
    relative: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_kwargs(cls, **kwargs: Any) -> "TimeDifferenceOptions":
        """Build options, collecting unrecognized keywords as relative pass-through."""
        own = {
            name: kwargs.pop(name)
            for name in (
                "minimum_unit",
                "maximum_unit",
                "excluded_units",
                "date_time_options",
            )
            if name in kwargs
        }
        return cls(**own, relative=kwargs)

    def relative_options(self) -> dict[str, Any]:
        """Options for the relative renderer; ``numeric`` defaults to "auto"."""
        return {"numeric": "auto", **self.relative}

    def absolute_options(self) -> Mapping[str, Any]:
        if self.date_time_options is None:
            return DEFAULT_DATE_TIME_OPTIONS
        return self.date_time_options
