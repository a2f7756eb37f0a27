"""Tests for CalendarDate and AgeResult invariants."""

from datetime import date

import pytest

from agespan.core.models import AgeResult, CalendarDate, InvalidDateError


# ============================================================================
# CalendarDate tests
# ============================================================================


def test_calendar_date_accepts_leap_day() -> None:
    value = CalendarDate(2024, 2, 29)
    assert (value.year, value.month, value.day) == (2024, 2, 29)


@pytest.mark.parametrize(
    "year,month,day",
    [
        (2023, 2, 29),
        (1900, 2, 29),
        (2024, 4, 31),
        (2024, 1, 32),
        (2024, 1, 0),
        (2024, 13, 1),
        (2024, 0, 1),
    ],
)
def test_calendar_date_rejects_impossible_dates(year: int, month: int, day: int) -> None:
    """Construction fails fast for dates that do not exist."""
    with pytest.raises(InvalidDateError):
        CalendarDate(year, month, day)


def test_invalid_date_error_is_value_error() -> None:
    with pytest.raises(ValueError, match="month must be between 1 and 12"):
        CalendarDate(2024, 13, 1)


def test_calendar_date_is_immutable() -> None:
    value = CalendarDate(2024, 1, 1)
    with pytest.raises(AttributeError):
        value.day = 2  # type: ignore[misc]


def test_calendar_date_orders_chronologically() -> None:
    """Comparison is lexicographic on (year, month, day)."""
    assert CalendarDate(2023, 12, 31) < CalendarDate(2024, 1, 1)
    assert CalendarDate(2024, 1, 31) < CalendarDate(2024, 2, 1)
    assert CalendarDate(2024, 2, 1) < CalendarDate(2024, 2, 2)
    assert CalendarDate(2024, 2, 2) == CalendarDate(2024, 2, 2)


def test_calendar_date_date_conversions() -> None:
    value = CalendarDate.from_date(date(2020, 3, 15))
    assert value == CalendarDate(2020, 3, 15)
    assert value.to_date() == date(2020, 3, 15)


def test_calendar_date_isoformat() -> None:
    assert CalendarDate(987, 6, 5).isoformat() == "0987-06-05"
    assert str(CalendarDate(2024, 12, 31)) == "2024-12-31"


# ============================================================================
# AgeResult tests
# ============================================================================


def test_age_result_zero() -> None:
    assert AgeResult.zero() == AgeResult(years=0, months=0, weeks=0, days=0)


def test_age_result_as_dict() -> None:
    result = AgeResult(years=1, months=2, weeks=3, days=4)
    assert result.as_dict() == {"years": 1, "months": 2, "weeks": 3, "days": 4}


def test_age_result_total_months() -> None:
    assert AgeResult(years=4, months=4, weeks=1, days=6).total_months == 52


@pytest.mark.parametrize("field", ["years", "months", "weeks", "days"])
def test_age_result_rejects_negative_fields(field: str) -> None:
    values = {"years": 0, "months": 0, "weeks": 0, "days": 0, field: -1}
    with pytest.raises(ValueError, match=f"{field} must be non-negative"):
        AgeResult(**values)


def test_age_result_rejects_unfolded_days() -> None:
    """Seven or more days must already be folded into weeks."""
    with pytest.raises(ValueError, match="days must be below 7"):
        AgeResult(years=0, months=0, weeks=0, days=7)


def test_age_result_rejects_unfolded_months() -> None:
    with pytest.raises(ValueError, match="months must be below 12"):
        AgeResult(years=0, months=12, weeks=0, days=0)
