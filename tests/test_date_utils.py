"""Tests for calendar arithmetic helpers."""

import pytest

from utc_datetime.date_utils import (
    DAY_NAMES,
    EPOCH_WEEKDAY,
    _month_length,
    days_in_month,
    days_in_year,
    is_leap_year,
)
from utc_datetime.errors import MonthError


class TestIsLeapYear:
    """Tests for is_leap_year function."""

    def test_known_years(self):
        """Test the Gregorian rule on well-known years."""
        assert is_leap_year(2000) is True  # Divisible by 400
        assert is_leap_year(1900) is False  # Divisible by 100 only
        assert is_leap_year(2021) is False
        assert is_leap_year(2024) is True

    def test_century_years(self):
        """Test that only every fourth century year is a leap year."""
        assert [y for y in range(1600, 2500, 100) if is_leap_year(y)] == [
            1600,
            2000,
            2400,
        ]


class TestDaysInYear:
    """Tests for days_in_year function."""

    def test_leap_and_common_years(self):
        """Test 366 days for leap years and 365 otherwise."""
        assert days_in_year(2020) == 366
        assert days_in_year(2021) == 365
        assert days_in_year(1970) == 365
        assert days_in_year(2100) == 365


class TestDaysInMonth:
    """Tests for days_in_month function."""

    def test_february(self):
        """Test February length in leap and common years."""
        assert days_in_month(2020, 2) == 29
        assert days_in_month(2021, 2) == 28
        assert days_in_month(2000, 2) == 29
        assert days_in_month(1900, 2) == 28

    def test_long_and_short_months(self):
        """Test the 31-day and 30-day months."""
        for month in (1, 3, 5, 7, 8, 10, 12):
            assert days_in_month(2020, month) == 31
        for month in (4, 6, 9, 11):
            assert days_in_month(2020, month) == 30

    def test_year_total_matches_days_in_year(self):
        """Test that month lengths add up to the year length."""
        for year in (2019, 2020, 2100):
            total = sum(days_in_month(year, m) for m in range(1, 13))
            assert total == days_in_year(year)

    @pytest.mark.parametrize("month", [0, 13, -1])
    def test_invalid_month(self, month):
        """Test that out-of-range months raise MonthError."""
        with pytest.raises(MonthError, match="Month Number Error"):
            days_in_month(2020, month)

    def test_internal_lookup_asserts(self):
        """Test that the unchecked lookup fails fast on a bad month."""
        with pytest.raises(AssertionError):
            _month_length(2020, 13)


class TestDayNames:
    """Tests for day-name constants."""

    def test_sunday_first(self):
        """Test that day names follow the Sunday = 0 convention."""
        assert DAY_NAMES[0] == "Sun"
        assert DAY_NAMES[1] == "Mon"
        assert DAY_NAMES[6] == "Sat"

    def test_epoch_weekday_is_thursday(self):
        """Test that 1970-01-01 maps to Thursday."""
        assert EPOCH_WEEKDAY == 4
