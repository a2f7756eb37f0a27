"""Proleptic Gregorian calendar arithmetic.

Leap-year and month-length lookups plus the small month-stepping helpers
the age engine is built on. Everything here is a pure function over ints.
"""

_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Return True if ``year`` is a Gregorian leap year."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in ``month`` (1-12) of ``year``."""
    if month == 2:
        return 29 if is_leap_year(year) else 28
    return _MONTH_LENGTHS[month - 1]


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return the (year, month) following the given month."""
    if month == 12:
        return year + 1, 1
    return year, month + 1


def months_between(
    start_year: int, start_month: int, end_year: int, end_month: int
) -> int:
    """Count whole calendar months from one (year, month) to another."""
    return (end_year - start_year) * 12 + (end_month - start_month)
