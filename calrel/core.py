import logging
from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

from calrel.errors import ErrorKind, FormatError
from calrel.options import TimeDifferenceOptions
from calrel.range import extract_range_points
from calrel.render import EnglishRenderer, Renderer
from calrel.select import select_for_options
from calrel.units import Unit
from calrel.util import now_ms

logger = logging.getLogger(__name__)

RelativeRenderer: TypeAlias = Callable[
    [int | float, Unit, Mapping[str, Any]], str
]
AbsoluteRenderer: TypeAlias = Callable[[float, Mapping[str, Any]], str]
ErrorReporter: TypeAlias = Callable[[FormatError], None]


def log_error(error: FormatError) -> None:
    """Default reporter: log the error and its cause."""
    logger.error("%s", error, exc_info=error.cause)


def _report(on_error: ErrorReporter, kind: ErrorKind, cause: BaseException) -> None:
    error = FormatError(kind, cause)
    try:
        on_error(error)
    except Exception:
        logger.exception("Error reporter failed while handling %s", error)


def format_time_difference(
    render_relative: RelativeRenderer,
    render_absolute: AbsoluteRenderer,
    time_range: Any,
    options: TimeDifferenceOptions | None = None,
    *,
    on_error: ErrorReporter = log_error,
    now: Callable[[], float] = now_ms,
) -> str:
    """
    Describe the time between two points with the most natural unit.

    Calculates the difference between ``from`` and ``to`` (``to`` defaults
    to the current time), selects the coarsest permitted unit the difference
    reaches, and renders it, e.g. "in 5 seconds" or "2 weeks ago". When no
    unit is permitted the ``from`` point is rendered as an absolute date.

    ``numeric`` defaults to "auto", so +1 day reads as "tomorrow" and -1 day
    as "yesterday"; pass ``numeric="always"`` in ``options.relative`` to
    override.

    Never raises. Failures are handed to ``on_error``; unconvertible ranges
    and failed fallbacks return an empty string.

    Args:
        render_relative: ``(value, unit, options) -> str``
        render_absolute: ``(timestamp_ms, date_time_options) -> str``
        time_range: A single point, a ``TimeRange``, or ``{"from": ..., "to": ...}``
        options: Unit constraints and renderer options
        on_error: Receives a ``FormatError`` for every failure
        now: Clock returning milliseconds since the epoch

    Returns:
        The relative phrase, the absolute fallback, or ""
    """
    options = options or TimeDifferenceOptions()

    try:
        from_ms, to_ms = extract_range_points(time_range, now)
    except Exception as e:
        _report(on_error, ErrorKind.CONVERSION, e)
        return ""

    try:
        selection = select_for_options(options, from_ms, to_ms)
    except Exception as e:
        _report(on_error, ErrorKind.for_config(e), e)
        selection = None

    if selection is not None:
        logger.debug(
            "Selected %s %s for %s..%s", selection.value, selection.unit, from_ms, to_ms
        )
        try:
            return render_relative(
                selection.value, selection.unit, options.relative_options()
            )
        except Exception as e:
            _report(on_error, ErrorKind.RELATIVE_RENDER, e)
    else:
        logger.debug("No relative unit for %s..%s, using absolute date", from_ms, to_ms)

    try:
        return render_absolute(from_ms, options.absolute_options())
    except Exception as e:
        _report(on_error, ErrorKind.ABSOLUTE_RENDER, e)

    return ""


class Formatter:
    """Binds a renderer, an error reporter and a clock.

    Example:
        >>> fmt = Formatter()
        >>> fmt.ago({"from": "2023-01-01T00:00:00Z", "to": "2023-01-01T00:00:05Z"})
        '5 seconds ago'
    """

    def __init__(
        self,
        renderer: Renderer | None = None,
        *,
        on_error: ErrorReporter | None = None,
        clock: Callable[[], float] | None = None,
    ):
        self.renderer: Renderer = renderer if renderer is not None else EnglishRenderer()
        self.on_error: ErrorReporter = on_error if on_error is not None else log_error
        self.clock: Callable[[], float] = clock if clock is not None else now_ms

    def format_time_difference(self, time_range: Any, **options: Any) -> str:
        """Format ``time_range`` as relative time; see ``calrel.core.format_time_difference``.

        Keyword options are ``minimum_unit``, ``maximum_unit``,
        ``excluded_units`` and ``date_time_options``; any other keyword is
        passed to the renderer's ``relative`` method.
        """
        return format_time_difference(
            self.renderer.relative,
            self.renderer.absolute,
            time_range,
            TimeDifferenceOptions.from_kwargs(**options),
            on_error=self.on_error,
            now=self.clock,
        )

    ago = format_time_difference


_default_formatter = Formatter()


def ago(time_range: Any, **options: Any) -> str:
    """Format ``time_range`` with a default English ``Formatter``."""
    return _default_formatter.format_time_difference(time_range, **options)
