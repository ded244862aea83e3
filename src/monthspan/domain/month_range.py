"""Half-open ranges of calendar months.

A `YearMonthRange` is the set of months from ``start`` (inclusive) to ``end``
(exclusive). Unbounded ranges reuse the extremes of the month axis instead of
an optional bound:

- ``start == MIN_YEARMONTH`` means "unbounded at the start".
- ``end == MAX_YEARMONTH`` means "unbounded at the end".

To keep arithmetic near those sentinels safe, the months right next to them
are reserved: a range never starts at ``MAX_YEARMONTH - 1`` and never ends at
``MIN_YEARMONTH + 1``, whatever the other bound is. An empty range is never
located exactly at ``MIN_YEARMONTH`` or ``MAX_YEARMONTH``.

Every instance is validated on construction and is immutable afterwards, so it
can be shared freely between threads.

Example:
    ```py
    >>> r = YearMonthRange.parse("2012-07/P2M")
    >>> str(r), r.length_in_months()
    ('2012-07/2012-09', 2)
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Final, TypeAlias, overload

from .errors import (
    ArithmeticOverflowError,
    DisconnectedRangesError,
    EmptyAtSentinelError,
    InvalidRangeOrderError,
    NegativePeriodError,
    ParseError,
    RangeError,
    ReservedBoundaryError,
)
from .period import MAX_MONTHS, Period
from .utils import require
from .year_month import MAX_YEARMONTH, MIN_YEARMONTH, YearMonth

logger = logging.getLogger(__name__)

_MIN_PLUS_ONE: Final[YearMonth] = MIN_YEARMONTH.plus_months(1)
_MAX_MINUS_ONE: Final[YearMonth] = MAX_YEARMONTH.minus_months(1)

MonthAdjuster: TypeAlias = Callable[[YearMonth], YearMonth]


def _check_invariants(start: YearMonth, end: YearMonth) -> None:
    if end < start:
        raise InvalidRangeOrderError(start, end)
    if start == _MAX_MINUS_ONE:
        raise ReservedBoundaryError("start", start)
    if end == _MIN_PLUS_ONE:
        raise ReservedBoundaryError("end", end)
    # with start <= end, either case is an empty range sitting on a sentinel
    if end == MIN_YEARMONTH or start == MAX_YEARMONTH:
        raise EmptyAtSentinelError(start)


def _adjust(month: YearMonth, adjuster: YearMonth | MonthAdjuster) -> YearMonth:
    if isinstance(adjuster, YearMonth):
        return adjuster
    if callable(adjuster):
        return adjuster(month)
    raise TypeError(f"Expected a YearMonth or a callable, got {type(adjuster).__name__}")


class MonthSequence:
    """Lazy, ordered sequence of the months of a range.

    Each iteration starts afresh, and the length is known without iterating.
    For a range unbounded at the end, ``MAX_YEARMONTH`` itself is the final
    element.
    """

    __slots__ = ("_start", "_end")

    def __init__(self, start: YearMonth, end: YearMonth) -> None:
        self._start = start
        self._end = end

    def __iter__(self) -> Iterator[YearMonth]:
        current = self._start
        while current < self._end:
            yield current
            current = current.plus_months(1)
        if self._end == MAX_YEARMONTH:
            yield MAX_YEARMONTH

    def __len__(self) -> int:
        extra = 1 if self._end == MAX_YEARMONTH else 0
        return self._start.months_until(self._end) + extra

    def __contains__(self, month: object) -> bool:
        if not isinstance(month, YearMonth):
            return False
        return self._start <= month < self._end or (
            month == self._end == MAX_YEARMONTH
        )

    def __repr__(self) -> str:
        return f"MonthSequence({self._start}/{self._end})"


@dataclass(frozen=True, slots=True)
class YearMonthRange:
    """An immutable range of months, ``start`` inclusive to ``end`` exclusive.

    Build instances through the factories (`of`, `of_closed`, `of_empty`,
    `unbounded`, `of_unbounded_start`, `of_unbounded_end`, `parse`). Direct
    construction runs the same validation.

    Attributes:
        start: First month of the range; ``MIN_YEARMONTH`` if unbounded.
        end: Month just after the range; ``MAX_YEARMONTH`` if unbounded.

    Raises:
        NullArgumentError: If a bound is None.
        InvalidRangeOrderError: If ``end`` is before ``start``.
        ReservedBoundaryError: If ``start`` is ``MAX_YEARMONTH - 1`` or ``end``
            is ``MIN_YEARMONTH + 1``.
        EmptyAtSentinelError: If the range is empty at ``MIN_YEARMONTH`` or
            ``MAX_YEARMONTH``.
    """

    start: YearMonth
    end: YearMonth

    def __post_init__(self) -> None:
        require(self.start, "start_inclusive")
        require(self.end, "end_exclusive")
        try:
            _check_invariants(self.start, self.end)
        except RangeError as e:
            logger.debug("Rejected range %s/%s: %s", self.start, self.end, e)
            raise

    # ============================================================================
    #                               Factories
    # ============================================================================

    @overload
    @classmethod
    def of(cls, start_inclusive: YearMonth, end: YearMonth) -> YearMonthRange: ...

    @overload
    @classmethod
    def of(cls, start_inclusive: YearMonth, end: Period) -> YearMonthRange: ...

    @classmethod
    def of(cls, start_inclusive: YearMonth, end: YearMonth | Period) -> YearMonthRange:
        """Obtain a range from a start and either an exclusive end or a period.

        Args:
            start_inclusive: The first month, ``MIN_YEARMONTH`` for unbounded.
            end: The exclusive end month (``MAX_YEARMONTH`` for unbounded), or
                a non-negative `Period` added to the start to get the end.

        Returns:
            The validated range.

        Raises:
            NegativePeriodError: If ``end`` is a negative period.
            ArithmeticOverflowError: If start plus period leaves the month axis.
            RangeError: If the bounds violate the range invariants.
        """
        require(start_inclusive, "start_inclusive")
        require(end, "end")
        if isinstance(end, Period):
            if end.is_negative:
                raise NegativePeriodError(end)
            return cls(start_inclusive, start_inclusive.plus(end))
        return cls(start_inclusive, end)

    @classmethod
    def of_closed(
        cls, start_inclusive: YearMonth, end_inclusive: YearMonth
    ) -> YearMonthRange:
        """Obtain a range from an inclusive start and an inclusive end.

        ``MAX_YEARMONTH`` as the inclusive end gives a range unbounded at the end,
        as does ``MAX_YEARMONTH - 1``, since the month after it is the sentinel.

        Raises:
            InvalidRangeOrderError: If ``end_inclusive`` is before ``start_inclusive``.
            RangeError: If the resulting bounds violate the range invariants.
        """
        require(start_inclusive, "start_inclusive")
        require(end_inclusive, "end_inclusive")
        if end_inclusive < start_inclusive:
            raise InvalidRangeOrderError(start_inclusive, end_inclusive)
        end = (
            MAX_YEARMONTH
            if end_inclusive == MAX_YEARMONTH
            else end_inclusive.plus_months(1)
        )
        return cls(start_inclusive, end)

    @classmethod
    def of_empty(cls, month: YearMonth) -> YearMonthRange:
        """Obtain an empty range located at ``month``.

        Raises:
            RangeError: If ``month`` is ``MIN_YEARMONTH``, ``MIN_YEARMONTH + 1``,
                ``MAX_YEARMONTH - 1`` or ``MAX_YEARMONTH``.
        """
        require(month, "month")
        return cls(month, month)

    @classmethod
    def unbounded(cls) -> YearMonthRange:
        """Return the range of every month, unbounded at both ends."""
        return ALL

    @classmethod
    def of_unbounded_start(cls, end_exclusive: YearMonth) -> YearMonthRange:
        return cls.of(MIN_YEARMONTH, end_exclusive)

    @classmethod
    def of_unbounded_end(cls, start_inclusive: YearMonth) -> YearMonthRange:
        return cls.of(start_inclusive, MAX_YEARMONTH)

    @classmethod
    def parse(cls, text: str) -> YearMonthRange:
        """Parse a range from text.

        Three forms are accepted, matching ISO-8601 intervals:

        - ``<start>/<end>``, such as ``2012-07/2012-09``
        - ``<start>/<period>``, such as ``2012-07/P2M``
        - ``<period>/<end>``, such as ``P2M/2012-09``

        Period designators are case-insensitive. The text is split at the first
        forward slash.

        Args:
            text: The text to parse.

        Returns:
            The parsed range.

        Raises:
            ParseError: If there is no slash, or a month or period is malformed.
            RangeError: If the parsed bounds violate the range invariants.
        """
        require(text, "text")
        index = text.find("/")
        if index < 0:
            logger.debug("No forward slash in range text %r", text)
            raise ParseError("YearMonthRange cannot be parsed, no forward slash found", text)
        left, right = text[:index], text[index + 1 :]
        if text[0] in "Pp":
            period = Period.parse(left)
            end = YearMonth.parse(right)
            return cls.of(end.minus(period), end)
        start = YearMonth.parse(left)
        if right.startswith(("P", "p")):
            return cls.of(start, start.plus(Period.parse(right)))
        return cls.of(start, YearMonth.parse(right))

    # ============================================================================
    #                               Accessors
    # ============================================================================

    @property
    def end_inclusive(self) -> YearMonth:
        """Last month in the range; ``MAX_YEARMONTH`` if unbounded at the end.

        For an empty range this is the month before ``start``.
        """
        if self.is_unbounded_end:
            return MAX_YEARMONTH
        return self.end.minus_months(1)

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    @property
    def is_unbounded_start(self) -> bool:
        return self.start == MIN_YEARMONTH

    @property
    def is_unbounded_end(self) -> bool:
        return self.end == MAX_YEARMONTH

    def with_start(self, adjuster: YearMonth | MonthAdjuster) -> YearMonthRange:
        """Return a copy with the start replaced or adjusted, keeping the end.

        Args:
            adjuster: The new start month, or a callable mapping the current
                start to the new one.
        """
        require(adjuster, "adjuster")
        return YearMonthRange.of(_adjust(self.start, adjuster), self.end)

    def with_end(self, adjuster: YearMonth | MonthAdjuster) -> YearMonthRange:
        """Return a copy with the exclusive end replaced or adjusted, keeping the start."""
        require(adjuster, "adjuster")
        return YearMonthRange.of(self.start, _adjust(self.end, adjuster))

    # ============================================================================
    #                               Predicates
    # ============================================================================

    def contains(self, month: YearMonth) -> bool:
        """Check whether ``month`` is in the range.

        A range unbounded at the end contains ``MAX_YEARMONTH``; an empty range
        contains nothing.
        """
        require(month, "month")
        return self.start <= month and (month < self.end or self.is_unbounded_end)

    def __contains__(self, month: YearMonth) -> bool:
        return self.contains(month)

    def encloses(self, other: YearMonthRange) -> bool:
        """Check whether every month of ``other`` is in this range.

        An empty range encloses itself.
        """
        require(other, "other")
        return self.start <= other.start and other.end <= self.end

    def abuts(self, other: YearMonthRange) -> bool:
        """Check whether the ranges touch end to start without overlapping.

        An empty range does not abut itself.
        """
        require(other, "other")
        return (self.end == other.start) != (self.start == other.end)

    def is_connected(self, other: YearMonthRange) -> bool:
        """Check whether the ranges overlap or abut, leaving no gap between them."""
        require(other, "other")
        return self == other or (
            self.start <= other.end and other.start <= self.end
        )

    def overlaps(self, other: YearMonthRange) -> bool:
        """Check whether the ranges share at least one month.

        An empty range overlaps itself.
        """
        require(other, "other")
        return self == other or (self.start < other.end and other.start < self.end)

    def is_after(self, other: YearMonth | YearMonthRange) -> bool:
        """Check whether this range is entirely after a month or another range.

        Against a month, an empty range is treated as the single point at its
        start. A range is never after itself.
        """
        require(other, "other")
        if isinstance(other, YearMonthRange):
            return self.start >= other.end and other != self
        return self.start > other

    def is_before(self, other: YearMonth | YearMonthRange) -> bool:
        """Check whether this range is entirely before a month or another range."""
        require(other, "other")
        if isinstance(other, YearMonthRange):
            return self.end <= other.start and other != self
        return self.end <= other and self.start < other

    # ============================================================================
    #                               Combinators
    # ============================================================================

    def intersection(self, other: YearMonthRange) -> YearMonthRange:
        """Return the months shared by both ranges.

        Raises:
            DisconnectedRangesError: If the ranges are not connected.
        """
        require(other, "other")
        if not self.is_connected(other):
            raise DisconnectedRangesError(self, other)
        if other.encloses(self):
            return self
        if self.encloses(other):
            return other
        return YearMonthRange.of(max(self.start, other.start), min(self.end, other.end))

    def union(self, other: YearMonthRange) -> YearMonthRange:
        """Return the months in either range.

        Raises:
            DisconnectedRangesError: If the ranges are not connected, as the
                union would have a gap.
        """
        require(other, "other")
        if not self.is_connected(other):
            raise DisconnectedRangesError(self, other)
        return self.span(other)

    def span(self, other: YearMonthRange) -> YearMonthRange:
        """Return the smallest range enclosing both ranges, including any gap."""
        require(other, "other")
        if self.encloses(other):
            return self
        if other.encloses(self):
            return other
        return YearMonthRange.of(min(self.start, other.start), max(self.end, other.end))

    # ============================================================================
    #                               Quantities
    # ============================================================================

    def length_in_months(self) -> int:
        """Number of months in the range.

        Saturates at ``MAX_MONTHS`` for unbounded ranges and for lengths that
        do not fit.
        """
        if self.is_unbounded_start or self.is_unbounded_end:
            return MAX_MONTHS
        return min(self.start.months_until(self.end), MAX_MONTHS)

    def to_period(self) -> Period:
        """Return the length of the range as a month-only period.

        Raises:
            ArithmeticOverflowError: If the range is unbounded, or its length
                does not fit in a period.
        """
        if self.is_unbounded_start or self.is_unbounded_end:
            raise ArithmeticOverflowError(
                "Unbounded range cannot be converted to a Period"
            )
        months = self.start.months_until(self.end)
        if months > MAX_MONTHS:
            raise ArithmeticOverflowError(
                f"Range {self} is too long to be converted to a Period"
            )
        return Period.of_months(months)

    # ============================================================================
    #                               Enumeration
    # ============================================================================

    def stream(self) -> MonthSequence:
        """Return the months of the range as a lazy, known-length sequence."""
        return MonthSequence(self.start, self.end)

    def __iter__(self) -> Iterator[YearMonth]:
        return iter(self.stream())

    def __str__(self) -> str:
        return f"{self.start}/{self.end}"


ALL: Final[YearMonthRange] = YearMonthRange(MIN_YEARMONTH, MAX_YEARMONTH)
"""Every month, unbounded at both ends."""
