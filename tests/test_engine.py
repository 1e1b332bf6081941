"""
Tests for the Week-Numbering Engine.

Reference values for MySQL mode 0 were worked out by hand from the
weekday of December 28-31 of the surrounding years. They pin the
legacy output exactly, including its two known quirks:
    - a Sunday is numbered from its own date (the one-day advance is unused)
    - single-digit weeks are concatenated without zero-padding
"""

from datetime import date, datetime, time, timedelta

import pytest
from yearweek.engine import (
    extract_field,
    has_sunday_in_last_week,
    iso_year_week,
    iso_year_week_pair,
    mysql_year_week,
    mysql_year_week_pair,
    year_month,
)
from yearweek.model import TemporalField, WeekYearPair


def _days(start: date, end: date):
    d = start
    while d <= end:
        yield d
        d += timedelta(days=1)


class TestHasSundayInLastWeek:
    """Test the December 28-31 Sunday check."""

    @pytest.mark.parametrize("year, expected", [
        (1999, False),  # Dec 28-31 is Tue-Fri
        (2000, True),   # Dec 31 is a Sunday
        (2004, False),
        (2012, True),   # Dec 30 is a Sunday
        (2013, True),
        (2015, False),
        (2020, False),
        (2022, False),  # Dec 28-31 is Wed-Sat
        (2023, True),
    ])
    def test_known_years(self, year, expected):
        assert has_sunday_in_last_week(year) is expected

    def test_matches_reference_calendar(self):
        """Dec 28-31 holds a Sunday iff Jan 1 of the next year is Mon-Thu."""
        for year in range(2000, 2051):
            expected = date(year + 1, 1, 1).isoweekday() <= 4
            assert has_sunday_in_last_week(year) is expected, year

    def test_total_outside_date_range(self):
        """Years beyond datetime.date follow the 400-year cycle."""
        for year in (2000, 2012, 2015):
            assert has_sunday_in_last_week(year - 2400) is has_sunday_in_last_week(year)
            assert has_sunday_in_last_week(year + 8000) is has_sunday_in_last_week(year)
        assert has_sunday_in_last_week(0) is True
        assert has_sunday_in_last_week(-1) is False


class TestMysqlYearWeek:
    """Test MySQL YEARWEEK mode 0."""

    @pytest.mark.parametrize("d, expected", [
        (date(2000, 1, 1), 200052),
        # Sunday: numbered from its own date
        (date(2016, 1, 3), 201653),
        (date(2016, 1, 4), 20161),
        # Across the 2014/2015 boundary
        (date(2014, 12, 28), 201451),
        (date(2014, 12, 29), 201352),
        (date(2014, 12, 30), 201352),
        (date(2014, 12, 31), 201352),
        (date(2015, 1, 1), 201452),
        (date(2015, 1, 2), 201452),
        (date(2015, 1, 3), 201452),
        (date(2015, 1, 4), 201452),
        (date(2015, 1, 5), 20151),
        (date(2015, 1, 11), 20151),
        (date(2015, 1, 12), 20152),
        # December 31 of leap years
        (date(2012, 12, 31), 20121),
        (date(2016, 12, 31), 201652),
        (date(2020, 12, 31), 202052),
        (date(2024, 12, 31), 202353),
    ])
    def test_reference_dates(self, d, expected):
        assert mysql_year_week(d) == expected

    @pytest.mark.parametrize("d, expected", [
        (date(2014, 12, 29), WeekYearPair(2013, 52)),
        (date(2015, 1, 1), WeekYearPair(2014, 52)),
        (date(2015, 1, 5), WeekYearPair(2015, 1)),
        (date(2024, 12, 31), WeekYearPair(2023, 53)),
    ])
    def test_pair(self, d, expected):
        assert mysql_year_week_pair(d) == expected

    def test_single_digit_week_is_not_padded(self):
        """The legacy integer drops the leading zero; as_int() keeps it."""
        d = date(2015, 1, 5)
        assert mysql_year_week(d) == 20151
        assert mysql_year_week_pair(d).as_int() == 201501

    def test_sunday_is_not_advanced(self):
        sunday = date(2016, 1, 3)
        assert mysql_year_week(sunday) != mysql_year_week(sunday + timedelta(days=1))

    def test_first_representable_date(self):
        """0001-01-01 looks back to years 0 and -1 without failing."""
        assert mysql_year_week_pair(date(1, 1, 1)) == WeekYearPair(0, 53)

    def test_accepts_datetime(self):
        assert mysql_year_week(datetime(2015, 1, 1, 23, 59)) == 201452

    def test_idempotent(self):
        for d in _days(date(2014, 12, 20), date(2015, 1, 15)):
            assert mysql_year_week(d) == mysql_year_week(d)
            assert mysql_year_week_pair(d) == mysql_year_week_pair(d)

    def test_week_always_in_range(self):
        for d in _days(date(1990, 1, 1), date(2060, 12, 31)):
            week = mysql_year_week_pair(d).week
            assert 1 <= week <= 53, d

    def test_year_within_one_of_calendar_year(self):
        for d in _days(date(1990, 1, 1), date(2060, 12, 31)):
            assert abs(mysql_year_week_pair(d).year - d.year) <= 1, d

    def test_legacy_value_differs_from_server_near_boundary(self):
        """MySQL itself returns 201452 for 2014-12-29; the legacy rule does not."""
        assert mysql_year_week(date(2014, 12, 29)) != 201452
        assert mysql_year_week_pair(date(2014, 12, 29)).year == 2013

    def test_integer_is_concatenated_pair(self):
        for d in _days(date(2010, 1, 1), date(2012, 12, 31)):
            assert mysql_year_week(d) == mysql_year_week_pair(d).concatenated()


class TestIsoYearWeek:
    """ISO-8601 values are delegated to date.isocalendar()."""

    def test_known_values(self):
        assert iso_year_week(date(2016, 1, 3)) == 201553
        assert iso_year_week(date(2000, 1, 1)) == 199952
        assert iso_year_week(date(2014, 12, 29)) == 201501
        assert iso_year_week_pair(date(2020, 12, 31)) == WeekYearPair(2020, 53)

    def test_matches_isocalendar(self):
        for d in _days(date(2000, 1, 1), date(2050, 12, 31)):
            iso = d.isocalendar()
            assert iso_year_week(d) == iso[0] * 100 + iso[1], d


class TestExtractField:
    """Test per-field extraction."""

    TIMESTAMP = datetime(2016, 1, 3, 13, 45, 30, 123456)

    @pytest.mark.parametrize("temporal_field, expected", [
        (TemporalField.YEAR, 2016),
        (TemporalField.MONTH, 1),
        (TemporalField.WEEK, 53),
        (TemporalField.DAY_OF_WEEK, 7),
        (TemporalField.DAY_OF_MONTH, 3),
        (TemporalField.DAY_OF_YEAR, 3),
        (TemporalField.HOUR, 13),
        (TemporalField.MINUTE, 45),
        (TemporalField.SECOND, 30),
        (TemporalField.MILLISECOND, 123),
        (TemporalField.YEAR_MONTH, 201601),
        (TemporalField.YEAR_WEEK, 201553),
        (TemporalField.YEAR_WEEK_MYSQL, 201653),
    ])
    def test_datetime_fields(self, temporal_field, expected):
        assert extract_field(self.TIMESTAMP, temporal_field) == expected

    def test_every_field_supported(self):
        for temporal_field in TemporalField:
            assert isinstance(extract_field(self.TIMESTAMP, temporal_field), int)

    def test_time_fields_on_time(self):
        t = time(8, 5, 59, 999999)
        assert extract_field(t, TemporalField.HOUR) == 8
        assert extract_field(t, TemporalField.MINUTE) == 5
        assert extract_field(t, TemporalField.SECOND) == 59
        assert extract_field(t, TemporalField.MILLISECOND) == 999

    def test_day_of_year_leap(self):
        assert extract_field(date(2020, 12, 31), TemporalField.DAY_OF_YEAR) == 366

    def test_time_field_on_date_raises(self):
        with pytest.raises(TypeError):
            extract_field(date(2016, 1, 3), TemporalField.HOUR)

    def test_date_field_on_time_raises(self):
        with pytest.raises(TypeError):
            extract_field(time(12, 0), TemporalField.YEAR)

    def test_year_month(self):
        assert year_month(date(2015, 12, 31)) == 201512
