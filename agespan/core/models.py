"""Domain models for the agespan age calculator.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from dataclasses import asdict, dataclass
from datetime import date
from enum import Enum

from .calendar import days_in_month


class InvalidDateError(ValueError):
    """Raised when a (year, month, day) triple is not a real calendar date."""


@dataclass(frozen=True, order=True)
class CalendarDate:
    """A proleptic Gregorian calendar date.

    Ordering is lexicographic on (year, month, day), which matches
    chronological order.
    """

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        """Validate the date on creation."""
        if not 1 <= self.month <= 12:
            raise InvalidDateError(
                f"month must be between 1 and 12, got {self.month}"
            )
        max_day = days_in_month(self.year, self.month)
        if not 1 <= self.day <= max_day:
            raise InvalidDateError(
                f"day must be between 1 and {max_day} for "
                f"{self.year:04d}-{self.month:02d}, got {self.day}"
            )

    @classmethod
    def from_date(cls, value: date) -> "CalendarDate":
        """Build a CalendarDate from a ``datetime.date``."""
        return cls(value.year, value.month, value.day)

    def to_date(self) -> date:
        """Convert to ``datetime.date`` (years 1-9999 only)."""
        return date(self.year, self.month, self.day)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()


class DateRelation(Enum):
    """How a supplied start date relates to a supplied end date."""

    BEFORE = "before"
    EQUAL = "equal"
    AFTER = "after"


@dataclass(frozen=True)
class AgeResult:
    """Elapsed calendar time split into years, months, weeks and days.

    ``days`` is always below 7; whole weeks are folded into ``weeks``.
    """

    years: int
    months: int
    weeks: int
    days: int

    def __post_init__(self) -> None:
        """Validate result invariants on creation."""
        for name in ("years", "months", "weeks", "days"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")
        if self.months >= 12:
            raise ValueError(f"months must be below 12, got {self.months}")
        if self.days >= 7:
            raise ValueError(f"days must be below 7, got {self.days}")

    @classmethod
    def zero(cls) -> "AgeResult":
        return cls(years=0, months=0, weeks=0, days=0)

    @property
    def total_months(self) -> int:
        """Whole months in the span, years included."""
        return self.years * 12 + self.months

    def as_dict(self) -> dict[str, int]:
        return asdict(self)
