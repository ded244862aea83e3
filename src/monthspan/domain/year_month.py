"""The calendar-month point type.

`YearMonth` is a discrete, totally ordered position on the month axis covering
years ``YEAR_MIN`` to ``YEAR_MAX``, far beyond what `datetime.date` supports.
Every month maps to a "proleptic month" index (``year * 12 + month - 1``) which
is used for arithmetic and distances.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import Final, overload

from .errors import ArithmeticOverflowError, InvalidYearMonthError, ParseError
from .period import Period
from .utils import require

YEAR_MIN: Final[int] = -999_999_999
YEAR_MAX: Final[int] = 999_999_999

_PROLEPTIC_MIN: Final[int] = YEAR_MIN * 12
_PROLEPTIC_MAX: Final[int] = YEAR_MAX * 12 + 11

# sign is mandatory once the year needs more than four digits (ISO-8601 expanded form)
_YEAR_MONTH_PATTERN = re.compile(
    r"(?P<sign>[-+]?)(?P<year>[0-9]{4,9})-(?P<month>[0-9]{2})"
)


@dataclass(frozen=True, slots=True, order=True)
class YearMonth:
    """A year and a month-of-year, such as ``2012-07``.

    Instances are immutable, hashable and ordered chronologically.
    """

    year: int
    month: int

    def __post_init__(self) -> None:
        if not YEAR_MIN <= self.year <= YEAR_MAX:
            raise InvalidYearMonthError("year", self.year, YEAR_MIN, YEAR_MAX)
        if not 1 <= self.month <= 12:  # pylint: disable=magic-value-comparison
            raise InvalidYearMonthError("month", self.month, 1, 12)

    # ------------------------------------------------------------------ factories

    @classmethod
    def of_proleptic_month(cls, proleptic_month: int) -> YearMonth:
        """Build the month at the given proleptic month index.

        Raises:
            ArithmeticOverflowError: If the index is outside the supported span.
        """
        if not _PROLEPTIC_MIN <= proleptic_month <= _PROLEPTIC_MAX:
            raise ArithmeticOverflowError(
                f"Proleptic month {proleptic_month} is outside the supported span."
            )
        year, month_index = divmod(proleptic_month, 12)
        return cls(year, month_index + 1)

    @classmethod
    def from_date(cls, value: date) -> YearMonth:
        """Return the month containing ``value``."""
        require(value, "value")
        return cls(value.year, value.month)

    @classmethod
    def parse(cls, text: str) -> YearMonth:
        """Parse text such as ``2012-07``, ``-0044-03`` or ``+10000-01``.

        Raises:
            ParseError: If the text is not in that form or a field is out of range.
        """
        require(text, "text")
        match = _YEAR_MONTH_PATTERN.fullmatch(text)
        if match is None or (not match["sign"] and len(match["year"]) > 4):
            raise ParseError("Text cannot be parsed to a YearMonth", text)
        year = int(match["year"])
        if match["sign"] == "-":
            year = -year
        try:
            return cls(year, int(match["month"]))
        except InvalidYearMonthError as e:
            raise ParseError("Text cannot be parsed to a YearMonth", text) from e

    # ------------------------------------------------------------------ queries

    @property
    def proleptic_month(self) -> int:
        """Months elapsed since year zero, January (negative before it)."""
        return self.year * 12 + self.month - 1

    def months_until(self, other: YearMonth) -> int:
        """Signed number of whole months from this month to ``other``."""
        require(other, "other")
        return other.proleptic_month - self.proleptic_month

    # ------------------------------------------------------------------ arithmetic

    def plus_months(self, months: int) -> YearMonth:
        """Return this month shifted forward by ``months`` (negative shifts back).

        Raises:
            ArithmeticOverflowError: If the result falls outside the supported span.
        """
        if months == 0:
            return self
        return YearMonth.of_proleptic_month(self.proleptic_month + months)

    def minus_months(self, months: int) -> YearMonth:
        return self.plus_months(-months)

    def plus(self, period: Period) -> YearMonth:
        """Return this month shifted forward by ``period``."""
        require(period, "period")
        return self.plus_months(period.total_months)

    def minus(self, period: Period) -> YearMonth:
        """Return this month shifted back by ``period``."""
        require(period, "period")
        return self.plus_months(-period.total_months)

    def with_year(self, year: int) -> YearMonth:
        return YearMonth(year, self.month)

    def with_month(self, month: int) -> YearMonth:
        return YearMonth(self.year, month)

    def __add__(self, other: Period | int) -> YearMonth:
        if isinstance(other, Period):
            return self.plus(other)
        if isinstance(other, int) and not isinstance(other, bool):
            return self.plus_months(other)
        return NotImplemented

    __radd__ = __add__

    @overload
    def __sub__(self, other: YearMonth) -> int: ...

    @overload
    def __sub__(self, other: Period | int) -> YearMonth: ...

    def __sub__(self, other: YearMonth | Period | int) -> YearMonth | int:
        if isinstance(other, YearMonth):
            return other.months_until(self)
        if isinstance(other, Period):
            return self.minus(other)
        if isinstance(other, int) and not isinstance(other, bool):
            return self.minus_months(other)
        return NotImplemented

    # ------------------------------------------------------------------ text

    def __str__(self) -> str:
        if abs(self.year) < 10_000:  # pylint: disable=magic-value-comparison
            year = f"{self.year:05d}" if self.year < 0 else f"{self.year:04d}"
        else:
            year = f"{self.year:+d}"
        return f"{year}-{self.month:02d}"


MIN_YEARMONTH: Final[YearMonth] = YearMonth(YEAR_MIN, 1)
"""Earliest representable month; as a range start it means "unbounded"."""

MAX_YEARMONTH: Final[YearMonth] = YearMonth(YEAR_MAX, 12)
"""Latest representable month; as a range end it means "unbounded"."""
