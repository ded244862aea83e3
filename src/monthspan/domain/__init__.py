"""Domain layer for monthspan.

Contains the value types: `YearMonth` (a point on the month axis), `Period`
(a month-granular duration) and `YearMonthRange` (a half-open range of months),
together with the errors they raise. This package is pure: no I/O and no
mutable state.
"""
