"""monthspan

Half-open ranges over a calendar-month axis. A range covers the months from a
start (inclusive) to an end (exclusive), may be unbounded in either direction,
and supports containment, adjacency, overlap, intersection, union, span,
length and month-by-month iteration.
"""

import logging

from monthspan.domain.errors import (
    ArithmeticOverflowError,
    DisconnectedRangesError,
    EmptyAtSentinelError,
    InvalidRangeOrderError,
    InvalidYearMonthError,
    MonthSpanError,
    NegativePeriodError,
    NullArgumentError,
    ParseError,
    RangeError,
    ReservedBoundaryError,
)
from monthspan.domain.month_range import ALL, MonthSequence, YearMonthRange
from monthspan.domain.period import MAX_MONTHS, Period
from monthspan.domain.year_month import (
    MAX_YEARMONTH,
    MIN_YEARMONTH,
    YEAR_MAX,
    YEAR_MIN,
    YearMonth,
)

__all__ = [
    "__version__",
    # values
    "YearMonth",
    "Period",
    "YearMonthRange",
    "MonthSequence",
    # constants
    "ALL",
    "MAX_MONTHS",
    "MAX_YEARMONTH",
    "MIN_YEARMONTH",
    "YEAR_MAX",
    "YEAR_MIN",
    # errors
    "MonthSpanError",
    "NullArgumentError",
    "InvalidYearMonthError",
    "ArithmeticOverflowError",
    "ParseError",
    "RangeError",
    "InvalidRangeOrderError",
    "ReservedBoundaryError",
    "EmptyAtSentinelError",
    "NegativePeriodError",
    "DisconnectedRangesError",
]
__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
