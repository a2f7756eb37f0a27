"""Age calculation service - entry point for front ends.

Implements AgeCalculationPort by wiring the parser port to the
ordering and decomposition logic.
"""

import logging

from .engine import calculate_age
from .models import AgeResult, CalendarDate
from .ports import AgeCalculationPort, DateParserPort

logger = logging.getLogger(__name__)


class AgeService(AgeCalculationPort):
    """Computes ages for adapters that hold raw or parsed dates."""

    def __init__(self, parser: DateParserPort):
        """Initialize the age service.

        Args:
            parser: Port used to turn date strings into CalendarDate values.
        """
        self.parser = parser

    def calculate(self, start: CalendarDate, end: CalendarDate) -> AgeResult:
        """Compute the age between two dates."""
        result = calculate_age(start, end)
        logger.debug(
            f"Age {start} -> {end}: {result.years}y {result.months}m "
            f"{result.weeks}w {result.days}d"
        )
        return result

    def calculate_from_strings(self, start: str, end: str) -> AgeResult:
        """Parse both dates with the configured parser and compute the age."""
        start_date = self.parser.parse(start)
        end_date = self.parser.parse(end)
        return self.calculate(start_date, end_date)
