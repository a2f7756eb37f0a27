"""Tests for DateOrderer roll-forward and swap policy."""

from agespan.core.models import CalendarDate, DateRelation
from agespan.core.ordering import DateOrderer


# ============================================================================
# relation tests
# ============================================================================


def test_relation_before() -> None:
    assert DateOrderer.relation(CalendarDate(2024, 1, 1), CalendarDate(2024, 1, 2)) == DateRelation.BEFORE


def test_relation_equal() -> None:
    assert DateOrderer.relation(CalendarDate(2024, 1, 1), CalendarDate(2024, 1, 1)) == DateRelation.EQUAL


def test_relation_after() -> None:
    assert DateOrderer.relation(CalendarDate(2025, 1, 1), CalendarDate(2024, 12, 31)) == DateRelation.AFTER


# ============================================================================
# order tests
# ============================================================================


def test_order_passes_through_ordered_pair() -> None:
    start = CalendarDate(2023, 6, 16)
    end = CalendarDate(2024, 5, 1)
    assert DateOrderer.order(start, end) == (start, end)


def test_order_passes_through_equal_pair() -> None:
    value = CalendarDate(2024, 3, 3)
    assert DateOrderer.order(value, value) == (value, value)


def test_order_rolls_end_forward_within_same_year() -> None:
    """A reversed same-year pair means next year's occurrence of the end date."""
    start = CalendarDate(2024, 5, 10)
    end = CalendarDate(2024, 3, 1)
    assert DateOrderer.order(start, end) == (start, CalendarDate(2025, 3, 1))


def test_order_clamps_rolled_leap_day() -> None:
    """Feb 29 rolled into a common year becomes Feb 28."""
    start = CalendarDate(2024, 3, 1)
    end = CalendarDate(2024, 2, 29)
    assert DateOrderer.order(start, end) == (start, CalendarDate(2025, 2, 28))


def test_order_swaps_across_years() -> None:
    """A reversed pair in different years is swapped, not rolled."""
    start = CalendarDate(2025, 1, 1)
    end = CalendarDate(2024, 6, 15)
    assert DateOrderer.order(start, end) == (end, start)


def test_order_result_is_never_reversed() -> None:
    pairs = [
        (CalendarDate(2024, 12, 31), CalendarDate(2024, 1, 1)),
        (CalendarDate(2024, 2, 29), CalendarDate(2024, 2, 28)),
        (CalendarDate(2030, 1, 1), CalendarDate(1999, 12, 31)),
    ]
    for start, end in pairs:
        ordered_start, ordered_end = DateOrderer.order(start, end)
        assert ordered_start <= ordered_end


# ============================================================================
# roll_forward tests
# ============================================================================


def test_roll_forward_keeps_month_and_day() -> None:
    assert DateOrderer.roll_forward(CalendarDate(2023, 7, 30)) == CalendarDate(2024, 7, 30)


def test_roll_forward_february() -> None:
    """Only a leap day needs clamping; Feb 28 rolls unchanged."""
    assert DateOrderer.roll_forward(CalendarDate(2024, 2, 29)) == CalendarDate(2025, 2, 28)
    assert DateOrderer.roll_forward(CalendarDate(2023, 2, 28)) == CalendarDate(2024, 2, 28)
