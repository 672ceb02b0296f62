"""Exceptions raised by the selection steps and the error value reported to callers.

The steps raise ordinary exceptions; ``format_time_difference`` catches each
one at the boundary of the step that produced it and hands a ``FormatError``
to the caller's reporter instead of raising.
"""

from enum import Enum
from typing import Any


class CalrelError(Exception):
    """Base exception for all calrel errors."""


class RangeConversionError(CalrelError, ValueError):
    """A range endpoint could not be converted to a timestamp."""

    def __init__(self, value: Any, reason: str):
        self.value = value
        super().__init__(f"Cannot convert {value!r} to a timestamp: {reason}")


class UnitTypeError(CalrelError, TypeError):
    """A unit option has the wrong shape (e.g. excluded_units is not a list)."""

    def __init__(self, option: str, value: Any):
        self.option = option
        self.value = value
        super().__init__(
            f"Value is not of list type for format_time_difference option {option}.\n"
            f"Got {type(value).__name__!r}: {value!r}\n"
            f"Hint: pass a list of unit names, e.g. {option}=['quarter', 'weeks']"
        )


class UnitRangeError(CalrelError, ValueError):
    """A unit option names an unknown unit, or min/max are in the wrong order."""

    def __init__(self, option: str, value: Any):
        self.option = option
        self.value = value
        super().__init__(
            f"Value {value} out of range for format_time_difference option {option}"
        )


class ErrorKind(Enum):
    CONVERSION = "conversion"
    CONFIG_TYPE = "config_type"
    CONFIG_RANGE = "config_range"
    RELATIVE_RENDER = "relative_render"
    ABSOLUTE_RENDER = "absolute_render"

    @classmethod
    def for_config(cls, error: Exception) -> "ErrorKind":
        """Classify an exception raised while filtering or bounding units."""
        if isinstance(error, UnitTypeError):
            return cls.CONFIG_TYPE
        if isinstance(error, UnitRangeError):
            return cls.CONFIG_RANGE
        # Anything else escaping the selection steps came from bad options
        return cls.CONFIG_TYPE if isinstance(error, TypeError) else cls.CONFIG_RANGE


class FormatError(CalrelError):
    """Structured error handed to the ``on_error`` reporter."""

    code: str = "FORMAT_ERROR"

    def __init__(self, kind: ErrorKind, cause: BaseException | None = None):
        self.kind: ErrorKind = kind
        self.cause: BaseException | None = cause
        self.message: str = "Error formatting time difference."
        super().__init__(self.message)
        self.__cause__ = cause

    def __str__(self) -> str:
        if self.cause is None:
            return f"[{self.code}] {self.message}"
        return f"[{self.code}] {self.message} ({self.kind.value}: {self.cause})"
