"""agespan - human-friendly age between two calendar dates.

Example:
    >>> from agespan import CalendarDate, calculate_age
    >>> calculate_age(CalendarDate(2024, 1, 29), CalendarDate(2024, 2, 28))
    AgeResult(years=0, months=0, weeks=4, days=2)
"""

from agespan.core import (
    AgeResult,
    CalendarDate,
    InvalidDateError,
    calculate_age,
    days_in_month,
    is_leap_year,
)

__all__ = [
    "AgeResult",
    "CalendarDate",
    "InvalidDateError",
    "calculate_age",
    "days_in_month",
    "is_leap_year",
]
