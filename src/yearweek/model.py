"""
Core Value Types

Defines the plain values exchanged by the week-numbering engine:
    - WeekYearPair (a week number and the year it belongs to)
    - TemporalField (the catalog of extractable date/time fields)

ARCHITECTURAL RULE:
    These objects:
        - Are immutable
        - Compare by value
        - Carry no calendar logic (that belongs in yearweek.engine)
"""

from dataclasses import dataclass
from enum import Enum


MIN_WEEK = 1
MAX_WEEK = 53


@dataclass(frozen=True)
class WeekYearPair:
    """
    A week number together with the year it is counted in.

    The year is NOT always the calendar year of the date.
    Near year boundaries both ISO-8601 and MySQL mode 0 can attribute
    a date to the previous or the following year.

    Examples:
        - 2015-01-01 under ISO-8601  -> WeekYearPair(2015, 1)
        - 2016-01-03 under ISO-8601  -> WeekYearPair(2015, 53)

    Properties:
        year: Week-year (integer, may differ from the calendar year)
        week: Week number, always in [1, 53]
    """

    year: int
    week: int

    def __post_init__(self) -> None:
        if not MIN_WEEK <= self.week <= MAX_WEEK:
            raise ValueError(f"Week {self.week} is out of range ({MIN_WEEK}-{MAX_WEEK}).")

    def as_int(self) -> int:
        """Six-digit YEARWEEK form: year * 100 + week (2015, 5) -> 201505."""
        return self.year * 100 + self.week

    def concatenated(self) -> int:
        """
        Decimal digits of year followed by the digits of week, unpadded.

        (2015, 5) -> 20155, while (2015, 12) -> 201512.
        Single-digit weeks therefore do NOT yield a six-digit value.
        This is the legacy mode-0 output format; prefer as_int() for new code.
        """
        return int(f"{self.year}{self.week}")

    def label(self) -> str:
        return f"{self.year}-W{self.week:02d}"


class TemporalField(Enum):
    """
    Temporal fields an expression can extract from a date or timestamp.

    Every member is either a date field (needs year/month/day)
    or a time field (needs a time of day).
    """

    YEAR = "year"
    MONTH = "month"
    WEEK = "week"
    DAY_OF_WEEK = "day_of_week"
    DAY_OF_MONTH = "day_of_month"
    DAY_OF_YEAR = "day_of_year"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    MILLISECOND = "millisecond"

    # Composite fields
    YEAR_MONTH = "year_month"
    YEAR_WEEK = "year_week"
    YEAR_WEEK_MYSQL = "year_week_mysql"

    @property
    def is_time_field(self) -> bool:
        return self in _TIME_FIELDS


_TIME_FIELDS = frozenset({
    TemporalField.HOUR,
    TemporalField.MINUTE,
    TemporalField.SECOND,
    TemporalField.MILLISECOND,
})
