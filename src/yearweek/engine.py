"""
Week-Numbering Engine

Pure functions mapping a calendar date to week-year numbers:
    - ISO-8601 week-year (delegated to date.isocalendar())
    - MySQL YEARWEEK(date, 0), which no standard library provides

Also exposes plain field extraction for every TemporalField,
which is what rendered expression templates evaluate to.

IMPORTANT:
    Nothing here validates dates, catches exceptions or keeps state.
    Invalid dates are rejected upstream by yearweek.dates.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Union

from .dates import SUNDAY, is_sunday
from .model import TemporalField, WeekYearPair


Temporal = Union[date, datetime, time]

# Weekdays repeat every 400 Gregorian years
_GREGORIAN_CYCLE = 400


def has_sunday_in_last_week(year: int) -> bool:
    """
    Check whether the last days of a year (December 28-31) include a Sunday.

    Defined for every integer year, including years outside the range
    of datetime.date (the year before 1 AD is year 0).

    Args:
        year: Proleptic Gregorian year

    Returns:
        True on the first of December 28..31 that falls on a Sunday
    """
    year = 2000 + (year - 2000) % _GREGORIAN_CYCLE
    for day in range(28, 32):
        if date(year, 12, day).isoweekday() == SUNDAY:
            return True
    return False


def mysql_year_week_pair(d: date) -> WeekYearPair:
    """
    Compute the MySQL mode-0 week-year pair for a date.

    The result is derived from the ISO week number, shifted by one
    when the previous year ended with a Sunday in its last week:
        - ISO week > 1: same year, ISO week - 1
        - ISO week 1:   previous year, week 52 or 53 depending on
                        whether the year before that also ended
                        with a Sunday in its last week
    Otherwise the ISO week is used unchanged with the calendar year.

    NOTE:
        A Sunday is advanced to the following Monday before the lookup,
        but the advanced value is never used afterwards, so Sundays are
        computed from their own date. Existing consumers rely on these
        exact numbers; see DESIGN.md before changing it.

    WARNING:
        This is the legacy approximation of mode 0, not the server's own
        rule. Some dates differ from a real MySQL YEARWEEK(date, 0):
        2014-12-29 gives (2013, 52) here, while MySQL returns 201452.
        Rendering YEAR_WEEK_MYSQL through mysql_templates() and evaluating
        it in the database can therefore disagree with python_templates().
    """
    if is_sunday(d):
        d + timedelta(days=1)

    iso_week = d.isocalendar()[1]
    last_year = d.year - 1

    if has_sunday_in_last_week(last_year):
        week = 52 if has_sunday_in_last_week(last_year - 1) else 53
        if iso_week > 1:
            return WeekYearPair(year=d.year, week=iso_week - 1)
        return WeekYearPair(year=d.year - 1, week=week)

    return WeekYearPair(year=d.year, week=iso_week)


def mysql_year_week(d: date) -> int:
    """
    Legacy approximation of MySQL YEARWEEK(date, 0) as an unpadded integer.

    Near year boundaries the value can differ from the database (see
    mysql_year_week_pair); 2014-12-29 gives 201352, MySQL gives 201452.

    Year and week digits are concatenated without zero-padding the week,
    so week 5 of 2015 is 20155 rather than 201505.
    Use mysql_year_week_pair(d).as_int() for the six-digit form.
    """
    return mysql_year_week_pair(d).concatenated()


def iso_year_week_pair(d: date) -> WeekYearPair:
    iso = d.isocalendar()
    return WeekYearPair(year=iso[0], week=iso[1])


def iso_year_week(d: date) -> int:
    """ISO-8601 week-year * 100 + week, e.g. 2016-01-03 -> 201553."""
    return iso_year_week_pair(d).as_int()


def year_month(d: date) -> int:
    return d.year * 100 + d.month


def extract_field(value: Temporal, field: TemporalField) -> int:
    """
    Extract a single temporal field as an integer.

    Date fields need a date (or datetime); time fields need a
    datetime or time. Day of week uses the ISO encoding (Monday=1 ... Sunday=7).

    Args:
        value: date, datetime or time
        field: TemporalField to extract

    Returns:
        Integer field value

    Raises:
        TypeError: If the value does not carry the part the field needs
    """
    if field.is_time_field:
        if not isinstance(value, (datetime, time)):
            raise TypeError(f"{field.name} requires a time of day, got {type(value).__name__}")
        return _TIME_EXTRACTORS[field](value)

    if not isinstance(value, date):
        raise TypeError(f"{field.name} requires a calendar date, got {type(value).__name__}")
    return _DATE_EXTRACTORS[field](value)


_DATE_EXTRACTORS = {
    TemporalField.YEAR: lambda d: d.year,
    TemporalField.MONTH: lambda d: d.month,
    TemporalField.WEEK: lambda d: d.isocalendar()[1],
    TemporalField.DAY_OF_WEEK: lambda d: d.isoweekday(),
    TemporalField.DAY_OF_MONTH: lambda d: d.day,
    TemporalField.DAY_OF_YEAR: lambda d: d.timetuple().tm_yday,
    TemporalField.YEAR_MONTH: year_month,
    TemporalField.YEAR_WEEK: iso_year_week,
    TemporalField.YEAR_WEEK_MYSQL: mysql_year_week,
}

_TIME_EXTRACTORS = {
    TemporalField.HOUR: lambda t: t.hour,
    TemporalField.MINUTE: lambda t: t.minute,
    TemporalField.SECOND: lambda t: t.second,
    TemporalField.MILLISECOND: lambda t: t.microsecond // 1000,
}
