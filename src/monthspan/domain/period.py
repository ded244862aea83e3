"""Month-granular, signed durations.

A `Period` counts whole years and whole months. It is the amount type used to
shift a `YearMonth` and the result type of `YearMonthRange.to_period()`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, Final

from .errors import ArithmeticOverflowError, ParseError
from .utils import require

MAX_MONTHS: Final[int] = 2**31 - 1
"""Largest count a single period component (and a range length) can hold."""

MIN_MONTHS: Final[int] = -(2**31)

_PERIOD_PATTERN = re.compile(
    r"(?P<sign>[-+]?)P(?:(?P<years>[-+]?\d+)Y)?(?:(?P<months>[-+]?\d+)M)?",
    re.IGNORECASE | re.ASCII,
)


def _check_component(name: str, value: int) -> int:
    if not MIN_MONTHS <= value <= MAX_MONTHS:
        raise ArithmeticOverflowError(
            f"Period {name} {value} exceeds the supported range "
            f"[{MIN_MONTHS}, {MAX_MONTHS}]."
        )
    return value


@dataclass(frozen=True, slots=True)
class Period:
    """An amount of time in years and months, such as '2 years and 3 months'.

    Components are kept as given: ``Period(1, 0)`` and ``Period(0, 12)`` add the
    same number of months to a `YearMonth` but are not equal.
    """

    years: int = 0
    months: int = 0

    ZERO: ClassVar[Period]

    def __post_init__(self) -> None:
        _check_component("years", self.years)
        _check_component("months", self.months)

    @classmethod
    def of_months(cls, months: int) -> Period:
        """Return a period of ``months`` months."""
        return cls(0, months)

    @classmethod
    def of_years(cls, years: int) -> Period:
        """Return a period of ``years`` years."""
        return cls(years, 0)

    @classmethod
    def parse(cls, text: str) -> Period:
        """Parse an ISO-8601 month-granular duration such as ``P1Y2M`` or ``-P3M``.

        Args:
            text: The text to parse; the designators are case-insensitive.

        Returns:
            The parsed period.

        Raises:
            ParseError: If the text is not a valid duration.
        """
        require(text, "text")
        match = _PERIOD_PATTERN.fullmatch(text)
        if match is None or (match["years"] is None and match["months"] is None):
            raise ParseError("Text cannot be parsed to a Period", text)
        years = int(match["years"] or 0)
        months = int(match["months"] or 0)
        if match["sign"] == "-":
            years, months = -years, -months
        try:
            return cls(years, months)
        except ArithmeticOverflowError as e:
            raise ParseError("Text cannot be parsed to a Period", text) from e

    @property
    def total_months(self) -> int:
        """Total number of months, folding years in at twelve months each."""
        return self.years * 12 + self.months

    @property
    def is_negative(self) -> bool:
        """True if any component is negative."""
        return self.years < 0 or self.months < 0

    @property
    def is_zero(self) -> bool:
        return self.years == 0 and self.months == 0

    def negated(self) -> Period:
        """Return a copy with every component negated."""
        return Period(-self.years, -self.months)

    def __neg__(self) -> Period:
        return self.negated()

    def __str__(self) -> str:
        if self.is_zero:
            return "P0M"
        text = "P"
        if self.years:
            text += f"{self.years}Y"
        if self.months:
            text += f"{self.months}M"
        return text


Period.ZERO = Period()
