"""
Year-Week Numbering Package

Computes week-of-year numbers for calendar dates under two conventions:
    - ISO-8601 (weeks start Monday, week 1 holds the first Thursday)
    - MySQL YEARWEEK mode 0 (weeks start Sunday)

ARCHITECTURAL GUARANTEE:
------------------------
The engine is a set of pure functions over immutable date values.
It holds no state, does no I/O and never logs.

Expression templates (yearweek.templates) are explicit values.
There is no process-wide default registry.
"""

from .dates import InvalidDateError, calendar_date, parse_date
from .engine import (
    extract_field,
    has_sunday_in_last_week,
    iso_year_week,
    iso_year_week_pair,
    mysql_year_week,
    mysql_year_week_pair,
    year_month,
)
from .model import TemporalField, WeekYearPair

__version__ = "0.1.0"

__all__ = [
    "InvalidDateError",
    "TemporalField",
    "WeekYearPair",
    "calendar_date",
    "extract_field",
    "has_sunday_in_last_week",
    "iso_year_week",
    "iso_year_week_pair",
    "mysql_year_week",
    "mysql_year_week_pair",
    "parse_date",
    "year_month",
]
