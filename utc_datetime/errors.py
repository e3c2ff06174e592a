"""Exceptions raised when a UTC date-time cannot be built."""


class IllegalTimeError(ValueError):
    """Base exception for invalid date-time values."""

    default_message = "Illegal time"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class YearError(IllegalTimeError):
    """Year is before 1970 or beyond 65535."""

    default_message = "Year Number Error"


class MonthError(IllegalTimeError):
    """Month is outside 1-12."""

    default_message = "Month Number Error"


class DayError(IllegalTimeError):
    """Day is zero or past the end of the month."""

    default_message = "Day Number Error"


class HourError(IllegalTimeError):
    default_message = "Hour Number Error"


class MinuteError(IllegalTimeError):
    default_message = "Minute Number Error"


class SecondError(IllegalTimeError):
    default_message = "Second Number Error"


class TimeStringError(IllegalTimeError):
    """Time string does not hold six usable numbers."""

    default_message = "The format of the input time string is not standardized"
