"""Data model for UTC calendar date-times."""

from dataclasses import astuple, dataclass, fields

from utc_datetime.date_utils import (
    DAY_NAMES,
    EPOCH_WEEKDAY,
    EPOCH_YEAR,
    MAX_U32_EPOCH_SECONDS,
    MAX_YEAR,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    SECONDS_PER_WEEK,
    _month_length,
    days_in_year,
)
from utc_datetime.errors import (
    DayError,
    HourError,
    MinuteError,
    MonthError,
    SecondError,
    YearError,
)
from utc_datetime.time_string_parser import parse_time_fields

MAX_HOUR = 23
MAX_MINUTE = 59
MAX_SECOND = 59


@dataclass(frozen=True, order=True)
class UtcDatetime:
    """
    A validated civil date-time in UTC, from 1970 onwards.

    Instances are immutable and always valid: the constructor checks
    every field in the order year, month, day, hour, minute, second and
    raises the error for the first one that is out of range. Comparison
    follows field order, which is chronological order.
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            # bool is an int subclass but never a meaningful field value
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(
                    f"{f.name} must be an int, not {type(value).__name__}"
                )

        if not EPOCH_YEAR <= self.year <= MAX_YEAR:
            raise YearError(f"Year Number Error: {self.year}")
        if not 1 <= self.month <= 12:
            raise MonthError(f"Month Number Error: {self.month}")
        if not 1 <= self.day <= _month_length(self.year, self.month):
            raise DayError(
                f"Day Number Error: {self.day} for {self.year}-{self.month:02}"
            )
        if not 0 <= self.hour <= MAX_HOUR:
            raise HourError(f"Hour Number Error: {self.hour}")
        if not 0 <= self.minute <= MAX_MINUTE:
            raise MinuteError(f"Minute Number Error: {self.minute}")
        if not 0 <= self.second <= MAX_SECOND:
            raise SecondError(f"Second Number Error: {self.second}")

    @classmethod
    def create(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
    ) -> "UtcDatetime":
        """Build a validated date-time from its six fields."""
        return cls(year, month, day, hour, minute, second)

    @classmethod
    def from_string(cls, time_str: str) -> "UtcDatetime":
        """
        Parse a time string holding year, month, day, hour, minute, second.

        Any non-digit text separates the numbers, so "2020-12-31 23:59:59",
        "2020/12/31 23:59:59" and "2020年12月31日23点59分59秒" are equivalent.

        Args:
            time_str: Time string with six numbers in field order

        Returns:
            UtcDatetime built from the parsed numbers

        Raises:
            TimeStringError: If the string does not hold six usable numbers
            IllegalTimeError: Subclass for the first out-of-range field
        """
        return cls(*parse_time_fields(time_str))

    def to_epoch_seconds(self) -> int:
        """
        Return seconds elapsed since 1970-01-01 00:00:00 UTC.

        Leap seconds are ignored. The result is not truncated to 32 bits;
        see fits_u32_timestamp() for callers that need the narrower range.

        Raises:
            YearError: If the year is before 1970
        """
        if self.year < EPOCH_YEAR:
            raise YearError(f"Year Number Error: {self.year}")

        total_seconds = sum(
            days_in_year(year) * SECONDS_PER_DAY
            for year in range(EPOCH_YEAR, self.year)
        )
        total_seconds += sum(
            _month_length(self.year, month) * SECONDS_PER_DAY
            for month in range(1, self.month)
        )
        total_seconds += (
            (self.day - 1) * SECONDS_PER_DAY
            + self.hour * SECONDS_PER_HOUR
            + self.minute * SECONDS_PER_MINUTE
            + self.second
        )
        return total_seconds

    timestamp = to_epoch_seconds

    def fits_u32_timestamp(self) -> bool:
        """Check whether the epoch seconds fit an unsigned 32-bit integer."""
        return self.to_epoch_seconds() <= MAX_U32_EPOCH_SECONDS

    def weekday(self) -> int:
        """Return the day of the week: 0 for Sunday, 1-6 for Monday-Saturday."""
        seconds_into_week = self.to_epoch_seconds() % SECONDS_PER_WEEK
        days_into_week = seconds_into_week // SECONDS_PER_DAY
        return (EPOCH_WEEKDAY + days_into_week) % 7

    def weekday_name(self) -> str:
        """Return the three-letter day name, e.g. "Mon"."""
        return DAY_NAMES[self.weekday()]

    def to_display_string(self) -> str:
        """Format as YYYY-MM-DD HH:MM:SS."""
        return (
            f"{self.year}-{self.month:02}-{self.day:02} "
            f"{self.hour:02}:{self.minute:02}:{self.second:02}"
        )

    def to_tuple(self) -> tuple[int, int, int, int, int, int]:
        return astuple(self)

    def __str__(self) -> str:
        return self.to_display_string()
