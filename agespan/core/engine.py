"""Decomposition of a date span into years, months, weeks and days.

This module provides the core algorithm for turning an ordered pair of
calendar dates into the human-friendly age people actually say: whole
months and years first, then weeks and leftover days.
"""

from .calendar import days_in_month, months_between, next_month
from .models import AgeResult, CalendarDate
from .ordering import DateOrderer


class AgeDifferenceEngine:
    """Splits an ordered date span into an AgeResult.

    Pure function over domain objects, no external dependencies.
    All methods are static as the class carries no state.
    """

    @staticmethod
    def decompose(start: CalendarDate, end: CalendarDate) -> AgeResult:
        """Decompose the span from ``start`` to ``end``.

        Branches on how the two day-of-month numbers compare:
        - equal: a whole number of months
        - start day lower: whole months, then a forward day count in the end month
        - start day higher: bridge to the 1st of the next month, whole months
          to the 1st of the end month, then the tail up to the end day

        Raises:
            ValueError: If ``start`` is not strictly before ``end``.
        """
        if not start < end:
            raise ValueError(
                f"start ({start}) must be strictly before end ({end})"
            )

        if start.day == end.day:
            return AgeDifferenceEngine._whole_months(start, end)
        if start.day < end.day:
            return AgeDifferenceEngine._forward_days(start, end)
        return AgeDifferenceEngine._bridge_months_tail(start, end)

    @staticmethod
    def _whole_months(start: CalendarDate, end: CalendarDate) -> AgeResult:
        total = months_between(start.year, start.month, end.year, end.month)
        return AgeResult(years=total // 12, months=total % 12, weeks=0, days=0)

    @staticmethod
    def _forward_days(start: CalendarDate, end: CalendarDate) -> AgeResult:
        total = months_between(start.year, start.month, end.year, end.month)
        diff_days = end.day - start.day
        return AgeResult(
            years=total // 12,
            months=total % 12,
            weeks=diff_days // 7,
            days=diff_days % 7,
        )

    @staticmethod
    def _bridge_months_tail(start: CalendarDate, end: CalendarDate) -> AgeResult:
        # Bridge: start day up to the 1st of the following month
        bridge_days = days_in_month(start.year, start.month) - start.day + 1
        weeks = bridge_days // 7
        days = bridge_days % 7

        # Whole months from the 1st of that month to the 1st of the end month
        next_year, next_mon = next_month(start.year, start.month)
        total = months_between(next_year, next_mon, end.year, end.month)

        # Tail: the 1st of the end month up to the end day
        span_days = end.day - 1
        weeks += span_days // 7
        days += span_days % 7

        weeks += days // 7
        days %= 7

        return AgeResult(
            years=total // 12, months=total % 12, weeks=weeks, days=days
        )


def calculate_age(start: CalendarDate, end: CalendarDate) -> AgeResult:
    """Return the age from ``start`` to ``end``.

    Identical dates give the zero result. Otherwise the pair is normalized
    by DateOrderer (same-year roll forward, cross-year swap) and decomposed.
    """
    if start == end:
        return AgeResult.zero()
    ordered_start, ordered_end = DateOrderer.order(start, end)
    return AgeDifferenceEngine.decompose(ordered_start, ordered_end)
