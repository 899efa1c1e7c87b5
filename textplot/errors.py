from __future__ import annotations

from enum import Enum


class ChartErrorKind(Enum):
    EMPTY_DATA = "empty_data"
    ALL_NON_FINITE = "all_non_finite"
    INVALID_RANGE = "invalid_range"
    ZERO_DIMENSION = "zero_dimension"


class ChartError(ValueError):
    """Base class for every failure a render call can report.

    The set of kinds is closed; each subclass pins one ``ChartErrorKind``.
    The base class is abstract: catch it, but raise one of the subclasses.
    """

    kind: ChartErrorKind
    default_message = "chart cannot be rendered"

    def __init__(self, message: str | None = None) -> None:
        if not isinstance(getattr(type(self), "kind", None), ChartErrorKind):
            raise TypeError(f"{type(self).__name__} has no kind; raise a ChartError subclass")
        super().__init__(message or self.default_message)


class EmptyDataError(ChartError):
    kind = ChartErrorKind.EMPTY_DATA
    default_message = "cannot plot empty data"


class AllNonFiniteError(ChartError):
    kind = ChartErrorKind.ALL_NON_FINITE
    default_message = "series contains no finite samples"


class InvalidRangeError(ChartError):
    kind = ChartErrorKind.INVALID_RANGE
    default_message = "invalid min/max range"


class ZeroDimensionError(ChartError):
    kind = ChartErrorKind.ZERO_DIMENSION
    default_message = "chart height and width must be > 0"


class SeriesInputError(ValueError):
    pass
