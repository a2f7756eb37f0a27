"""Core domain logic for the agespan age calculator.

This package contains zero external dependencies and represents
the pure calendar arithmetic of the application. Parsing and
presentation are handled by the adapters package.
"""

from .calendar import days_in_month, is_leap_year
from .engine import AgeDifferenceEngine, calculate_age
from .models import AgeResult, CalendarDate, DateRelation, InvalidDateError
from .ordering import DateOrderer

__all__ = [
    "AgeDifferenceEngine",
    "AgeResult",
    "CalendarDate",
    "DateOrderer",
    "DateRelation",
    "InvalidDateError",
    "calculate_age",
    "days_in_month",
    "is_leap_year",
]
