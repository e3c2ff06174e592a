"""Shared calendar constants and day/month/year arithmetic."""

from utc_datetime.errors import MonthError

EPOCH_YEAR = 1970
MAX_YEAR = 65535  # Widest year a time string may carry

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR  # 86400
SECONDS_PER_WEEK = 7 * SECONDS_PER_DAY  # 604800

# Timestamps above this overflow an unsigned 32-bit counter (2106-02-07 06:28:15)
MAX_U32_EPOCH_SECONDS = 2**32 - 1

# Day-of-week names in weekday() order (Sunday = 0, Saturday = 6)
DAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

# 1970-01-01 was a Thursday
EPOCH_WEEKDAY = DAY_NAMES.index("Thu")

# Days in each month of a common year, 1-indexed
DAYS_IN_MONTH = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
FEBRUARY = 2


def is_leap_year(year: int) -> bool:
    """
    Check the Gregorian leap-year rule.

    A year is a leap year if it is divisible by 4 but not by 100,
    or if it is divisible by 400.
    """
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


def days_in_month(year: int, month: int) -> int:
    """
    Return the number of days in a month of the given year.

    Args:
        year: Calendar year
        month: Month number (1-12)

    Returns:
        28, 29, 30 or 31

    Raises:
        MonthError: If month is outside 1-12
    """
    if not 1 <= month <= 12:
        raise MonthError(f"Month Number Error: {month}")
    return _month_length(year, month)


def _month_length(year: int, month: int) -> int:
    # Callers validate the month first
    assert 1 <= month <= 12, f"month out of range: {month}"
    if month == FEBRUARY and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]
