"""Normalization of date pairs before age decomposition.

Age queries are read as "forward in time". A pair that looks reversed
within a single year is taken to mean next year's occurrence of the end
date; a pair reversed across years is simply swapped.
"""

from .calendar import is_leap_year
from .models import CalendarDate, DateRelation


class DateOrderer:
    """Produces (start, end) pairs with start chronologically <= end.

    All methods are static as the class carries no state.
    """

    @staticmethod
    def relation(start: CalendarDate, end: CalendarDate) -> DateRelation:
        """Compare the supplied start against the supplied end."""
        if start < end:
            return DateRelation.BEFORE
        if start == end:
            return DateRelation.EQUAL
        return DateRelation.AFTER

    @staticmethod
    def order(
        start: CalendarDate, end: CalendarDate
    ) -> tuple[CalendarDate, CalendarDate]:
        """Return the pair normalized so the first date is not after the second.

        Same year, start after end: the end date moves to the following
        year (Feb 29 clamps to Feb 28 there). Different years: swap.
        """
        if DateOrderer.relation(start, end) != DateRelation.AFTER:
            return start, end

        if start.year == end.year:
            return start, DateOrderer.roll_forward(end)

        return end, start

    @staticmethod
    def roll_forward(value: CalendarDate) -> CalendarDate:
        """Move a date to the same month and day of the next year."""
        year = value.year + 1
        day = value.day
        if value.month == 2 and day == 29 and not is_leap_year(year):
            day = 28
        return CalendarDate(year, value.month, day)
