"""Port interfaces for the agespan age calculator.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package.

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - DateParserPort: Turn external date text into CalendarDate values

2. **Driving Ports** (adapters/external systems call into core)
   - AgeCalculationPort: Entry point for age calculations
"""

from abc import ABC, abstractmethod

from .models import AgeResult, CalendarDate


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class DateParserPort(ABC):
    """Port for parsing externally supplied date representations.

    Adapters implementing this port own all well-formedness checks;
    the core never re-validates what a parser hands it.
    """

    @abstractmethod
    def parse(self, text: str) -> CalendarDate:
        """Parse a single date.

        Args:
            text: External date representation.

        Returns:
            A valid CalendarDate.

        Raises:
            InvalidDateError: If the text is malformed or names an
                impossible date.
        """


# ============================================================================
# DRIVING PORTS (External systems call into core)
# ============================================================================


class AgeCalculationPort(ABC):
    """Port for requesting age calculations.

    Called by CLI and other front ends.
    """

    @abstractmethod
    def calculate(self, start: CalendarDate, end: CalendarDate) -> AgeResult:
        """Compute the age between two already-valid dates."""

    @abstractmethod
    def calculate_from_strings(self, start: str, end: str) -> AgeResult:
        """Parse both dates, then compute the age between them.

        Raises:
            InvalidDateError: If either date fails to parse.
        """
