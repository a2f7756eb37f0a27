"""ISO 8601 calendar-date parser.

Implements DateParserPort for the ``yyyy-mm-dd`` form.
"""

import logging
import re

from agespan.core.models import CalendarDate, InvalidDateError
from agespan.core.ports import DateParserPort

logger = logging.getLogger(__name__)

_ISO_DATE = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)


class IsoDateParser(DateParserPort):
    """Parses ``yyyy-mm-dd`` strings into CalendarDate values."""

    def parse(self, text: str) -> CalendarDate:
        """Parse an ISO calendar date.

        Surrounding whitespace is ignored; anything else that is not
        exactly four-digit year, two-digit month and two-digit day is
        rejected, as are impossible dates such as 2023-02-29.

        Raises:
            InvalidDateError: If the text is malformed or not a real date.
        """
        if not isinstance(text, str):
            raise InvalidDateError(f"Date must be a string, got {type(text).__name__}")

        match = _ISO_DATE.fullmatch(text.strip())
        if match is None:
            raise InvalidDateError(f"Invalid date {text!r}: expected yyyy-mm-dd")

        year, month, day = (int(part) for part in match.groups())
        try:
            return CalendarDate(year, month, day)
        except InvalidDateError as e:
            logger.debug(f"Rejected date {text!r}: {e}")
            raise InvalidDateError(f"Invalid date {text!r}: {e}") from e
