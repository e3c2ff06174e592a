"""CLI entry point for parsing time strings into UTC date-times."""

import argparse
import logging
import os
import sys

from utc_datetime.errors import IllegalTimeError
from utc_datetime.models import UtcDatetime

logger = logging.getLogger(__name__)

# Constants
LOG_LEVEL = os.getenv("UTC_DATETIME_LOG_LEVEL", "INFO")


def describe(dt: UtcDatetime) -> str:
    """Summarize a date-time as display string, epoch seconds and weekday."""
    return (
        f"{dt.to_display_string()} epoch={dt.to_epoch_seconds()} "
        f"weekday={dt.weekday()} ({dt.weekday_name()})"
    )


def main(argv: list[str] | None = None) -> int:
    """Parse each time string argument and log what it describes."""
    # Configure logging
    logging.basicConfig(
        level=LOG_LEVEL.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    parser = argparse.ArgumentParser(
        description="Parse loosely formatted UTC time strings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  utc-datetime "2020-12-31 23:59:59"
  utc-datetime "时间:2021年2月28日23点59分0秒" "2020/4/28 12:12:12"
        """,
    )
    parser.add_argument(
        "time_strings",
        nargs="+",
        metavar="TIME",
        help="Time string with year, month, day, hour, minute, second in order",
    )
    args = parser.parse_args(argv)

    failures = 0
    for time_str in args.time_strings:
        try:
            dt = UtcDatetime.from_string(time_str)
        except IllegalTimeError as e:
            logger.error("Could not parse %r: %s", time_str, e)
            failures += 1
            continue
        logger.info("%s -> %s", time_str, describe(dt))

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
