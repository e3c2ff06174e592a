"""Extract date-time fields from loosely formatted time strings."""

import logging
import re

from utc_datetime.date_utils import MAX_YEAR
from utc_datetime.errors import TimeStringError

logger = logging.getLogger(__name__)

# Constants
FIELD_NAMES = ("year", "month", "day", "hour", "minute", "second")
MAX_BYTE_FIELD = 255  # Month through second are stored as unsigned bytes
FIELD_LIMITS = (MAX_YEAR, *([MAX_BYTE_FIELD] * (len(FIELD_NAMES) - 1)))

# ASCII digits only; \d would also match non-ASCII digits
_DIGIT_RUN = re.compile(r"[0-9]+")


def split_digit_tokens(text: str) -> list[str]:
    """
    Split a string into its runs of ASCII digits.

    Everything that is not '0'-'9' acts as a separator, so punctuation,
    words and multi-byte characters all split fields apart.

    Examples:
        "2020-12-31 23:59:59" -> ["2020", "12", "31", "23", "59", "59"]
        "时间:2021年2月28日23点59分0秒" -> ["2021", "2", "28", "23", "59", "0"]
    """
    return _DIGIT_RUN.findall(text)


def parse_time_fields(text: str) -> tuple[int, int, int, int, int, int]:
    """
    Parse a time string into (year, month, day, hour, minute, second).

    Fields must appear in that order. Range checks beyond each field's
    storage width are left to the date-time constructor.

    Args:
        text: Time string, e.g. "2020/12/31 23:59:59"

    Returns:
        Tuple of six integers

    Raises:
        TimeStringError: If the string does not hold exactly six numbers,
                         or a number is too wide for its field
    """
    tokens = split_digit_tokens(text)
    if len(tokens) != len(FIELD_NAMES):
        logger.warning(
            "Expected %d numbers in time string, found %d: %r",
            len(FIELD_NAMES),
            len(tokens),
            text,
        )
        raise TimeStringError(
            f"{TimeStringError.default_message}: "
            f"expected {len(FIELD_NAMES)} numbers, found {len(tokens)}"
        )

    fields = []
    for name, token, limit in zip(FIELD_NAMES, tokens, FIELD_LIMITS):
        try:
            fields.append(_parse_bounded(token, limit))
        except (OverflowError, ValueError) as e:
            logger.warning("Time string %s overflows: %s", name, token)
            raise TimeStringError(
                f"{TimeStringError.default_message}: {name} {token} exceeds {limit}"
            ) from e

    logger.debug("Parsed %r into %s", text, fields)
    return tuple(fields)


def _parse_bounded(token: str, limit: int) -> int:
    value = int(token)
    if value > limit:
        raise OverflowError(f"{value} > {limit}")
    return value
