"""
Calendar date construction.

Dates are plain ``datetime.date`` values (proleptic Gregorian, naive).
This is the only place where invalid calendar input is rejected:
the engine assumes every date it receives is valid.
"""

import re
from datetime import date


SUNDAY = 7  # ISO day-of-week, Monday=1

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class InvalidDateError(ValueError):
    """Raised when year/month/day do not form a valid calendar date."""
    pass


def calendar_date(year: int, month: int, day: int) -> date:
    """
    Build a calendar date.

    Args:
        year: Gregorian year (1..9999)
        month: Month of year (1..12)
        day: Day of month

    Returns:
        date value

    Raises:
        InvalidDateError: If the fields are out of range (e.g. 2015-02-30)
    """
    try:
        return date(year, month, day)
    except (TypeError, ValueError) as e:
        raise InvalidDateError(f"Invalid date {year}-{month}-{day}: {str(e)}") from e


def parse_date(text: str) -> date:
    """
    Parse ISO ``YYYY-MM-DD`` text into a date.

    Only the extended calendar form is accepted; basic (``20160103``)
    and week-date (``2016-W01-1``) forms are rejected.
    """
    try:
        text = text.strip()
        if not _ISO_DATE_RE.match(text):
            raise ValueError("expected YYYY-MM-DD")
        return date.fromisoformat(text)
    except (AttributeError, ValueError) as e:
        raise InvalidDateError(f"Invalid date '{text}': {str(e)}") from e


def is_sunday(d: date) -> bool:
    return d.isoweekday() == SUNDAY
