"""Domain-layer error definitions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .month_range import YearMonthRange
    from .period import Period
    from .year_month import YearMonth

# ============================================================================
#                           General domain errors
# ============================================================================


class MonthSpanError(Exception):
    """Base class for all monthspan errors."""


class NullArgumentError(MonthSpanError, TypeError):
    """Raised when a required argument is None."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Argument '{name}' must not be None.")
        self.name = name


class InvalidYearMonthError(MonthSpanError, ValueError):
    """Raised when a year or month-of-year field is out of range."""

    def __init__(self, field: str, value: int, low: int, high: int) -> None:
        super().__init__(
            f"Invalid value for {field}: {value} (valid values {low} - {high})."
        )
        self.field = field
        self.value = value


class ArithmeticOverflowError(MonthSpanError, ArithmeticError):
    """Raised when month or period arithmetic leaves the representable span."""


class ParseError(MonthSpanError, ValueError):
    """Raised when text cannot be parsed."""

    def __init__(self, message: str, text: str, index: int = 0) -> None:
        super().__init__(f"{message}: '{text}'")
        self.text = text
        self.index = index


# ============================================================================
#                           Range invariant errors
# ============================================================================


class RangeError(MonthSpanError, ValueError):
    """Base class for errors raised when a range cannot be built or combined."""


class InvalidRangeOrderError(RangeError):
    """Raised when the end of a range precedes its start."""

    def __init__(self, start: YearMonth, end: YearMonth) -> None:
        super().__init__(f"End month {end} must be on or after start month {start}.")
        self.start = start
        self.end = end


class ReservedBoundaryError(RangeError):
    """Raised when a bound sits on a position reserved next to MIN or MAX."""

    def __init__(self, bound: str, month: YearMonth, message: str | None = None) -> None:
        if message is None:
            message = f"Range must not {bound} at {month}, it is a reserved position."
        super().__init__(message)
        self.bound = bound
        self.month = month


class EmptyAtSentinelError(ReservedBoundaryError):
    """Raised when an empty range is located exactly at MIN or MAX."""

    def __init__(self, month: YearMonth) -> None:
        super().__init__(
            "empty",
            month,
            f"Empty range must not be located at {month}.",
        )


class NegativePeriodError(RangeError):
    """Raised when a range is built from a negative period."""

    def __init__(self, period: Period) -> None:
        super().__init__(f"Period must not be negative, got {period}.")
        self.period = period


class DisconnectedRangesError(RangeError):
    """Raised when intersection or union is requested for ranges that do not connect."""

    def __init__(self, first: YearMonthRange, second: YearMonthRange) -> None:
        super().__init__(f"Ranges do not connect: {first} and {second}.")
        self.first = first
        self.second = second
