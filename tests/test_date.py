"""
Tests for the Date model.

This module contains tests for date validation, leap years and the
weekday and month name lookups.
"""

import dataclasses

import pytest

from bank_records.models import Date, is_leap_year, days_in_month
from bank_records.validation import InvalidArgument


class TestLeapYears:
    """Test leap year and month length helpers."""

    @pytest.mark.parametrize("year,expected", [
        (2024, True),
        (2023, False),
        (1900, False),
        (2000, True),
        (0, True),
        (-4, True),
        (-100, False),
    ])
    def test_is_leap_year(self, year, expected):
        """Test the Gregorian leap year rule."""
        assert is_leap_year(year) is expected

    def test_days_in_month(self):
        """Test month lengths, including February in leap years."""
        assert days_in_month(2021, 1) == 31
        assert days_in_month(2021, 4) == 30
        assert days_in_month(2021, 2) == 28
        assert days_in_month(2020, 2) == 29
        assert days_in_month(1900, 2) == 28


class TestDateValidation:
    """Test Date construction rules."""

    def test_valid_date(self):
        """Test that fields are stored as given."""
        date = Date(1879, 3, 14)

        assert date.year == 1879
        assert date.month == 3
        assert date.day == 14

    @pytest.mark.parametrize("month", [0, 13, -1])
    def test_month_out_of_range(self, month):
        """Test rejection of months outside 1-12."""
        with pytest.raises(InvalidArgument, match="Month must be between 1 and 12"):
            Date(2021, month, 1)

    @pytest.mark.parametrize("year,month,day", [
        (2021, 1, 0),
        (2021, 1, 32),
        (2021, 4, 31),
        (2021, 2, 29),
        (1900, 2, 29),
    ])
    def test_day_out_of_range(self, year, month, day):
        """Test rejection of days that do not exist in the month."""
        with pytest.raises(InvalidArgument, match="Day must be between 1 and"):
            Date(year, month, day)

    def test_leap_day_accepted(self):
        """Test that February 29 is accepted in leap years."""
        assert Date(2000, 2, 29).day == 29
        assert Date(2024, 2, 29).day == 29

    def test_non_integer_parts_rejected(self):
        """Test rejection of non-integer parts."""
        with pytest.raises(InvalidArgument, match="Year must be an integer"):
            Date("2021", 1, 1)
        with pytest.raises(InvalidArgument, match="Day must be an integer"):
            Date(2021, 1, 1.5)
        with pytest.raises(InvalidArgument, match="Month must be an integer"):
            Date(2021, True, 1)

    def test_date_is_immutable(self):
        """Test that a date cannot be changed after construction."""
        date = Date(2021, 3, 15)

        with pytest.raises(dataclasses.FrozenInstanceError):
            date.day = 16

    def test_dates_compare_by_value(self):
        """Test value equality."""
        assert Date(2021, 3, 15) == Date(2021, 3, 15)
        assert Date(2021, 3, 15) != Date(2021, 3, 16)

    def test_str(self):
        """Test ISO-style string form."""
        assert str(Date(1900, 1, 1)) == "1900-01-01"


class TestDayOfTheWeek:
    """Test weekday computation."""

    @pytest.mark.parametrize("year,month,day,expected", [
        (1977, 10, 31, "Monday"),
        (2021, 3, 15, "Monday"),
        (1970, 1, 1, "Thursday"),
        (1900, 1, 1, "Monday"),
        (1950, 10, 14, "Saturday"),
        (1994, 5, 10, "Tuesday"),
        (1954, 7, 13, "Tuesday"),
        (1980, 10, 1, "Wednesday"),
        (2000, 2, 29, "Tuesday"),
        (1, 1, 1, "Monday"),
        (9999, 12, 31, "Friday"),
    ])
    def test_known_weekdays(self, year, month, day, expected):
        """Test weekdays against known Gregorian calendar dates."""
        assert Date(year, month, day).get_day_of_the_week() == expected

    def test_year_zero_and_negative_years(self):
        """Test proleptic Gregorian weekdays before year 1."""
        assert Date(0, 1, 1).get_day_of_the_week() == "Saturday"
        assert Date(0, 12, 31).get_day_of_the_week() == "Sunday"
        assert Date(-1, 1, 1).get_day_of_the_week() == "Friday"

    def test_consecutive_days_advance_weekday(self):
        """Test that the weekday advances by one across a month and year boundary."""
        names = [
            Date(1999, 12, 31).get_day_of_the_week(),
            Date(2000, 1, 1).get_day_of_the_week(),
            Date(2000, 1, 2).get_day_of_the_week(),
        ]
        assert names == ["Friday", "Saturday", "Sunday"]


class TestMonthName:
    """Test month name lookup."""

    def test_all_months(self):
        """Test every month maps to its English name."""
        names = [Date(2021, month, 1).get_month_name() for month in range(1, 13)]

        assert names == [
            "January", "February", "March", "April", "May", "June",
            "July", "August", "September", "October", "November", "December",
        ]
