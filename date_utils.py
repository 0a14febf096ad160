"""
Centralized date and time utilities for the statistics core.

This module provides a focused set of functions for handling the timestamps
carried by trip records in a consistent and timezone-aware manner.

Key Features:
-   **Timezone-Aware Parsing**: All timestamps are handled as timezone-aware
    datetime objects, defaulting to UTC.
-   **Split Date/Time Input**: Trip forms submit the day and the clock time
    separately ("5 July, 2013" and "08:00 AM"); they are combined here.
-   **Calendar Arithmetic**: Birthday-aware year differences are computed with
    `dateutil.relativedelta` rather than by dividing day counts.
"""

import logging
from datetime import UTC, date, datetime

from dateutil import parser
from dateutil.relativedelta import relativedelta

logger = logging.getLogger(__name__)


def parse_timestamp(ts: str | datetime | date | None) -> datetime | None:
    """
    Parse a timestamp string (or datetime object) and ensure it is
    timezone-aware, defaulting to UTC.

    ISO 8601 strings are tried first. Anything else goes through the lenient
    dateutil parser with day-first ordering, matching how trip forms write
    dates ("07/12/2011 10:00" is the 7th of December).

    Args:
        ts: The timestamp to parse.

    Returns:
        A timezone-aware datetime object, or None if parsing fails.
    """
    if not ts:
        logger.debug("Received empty timestamp; returning None.")
        return None

    if isinstance(ts, datetime):
        return ensure_utc(ts)

    if isinstance(ts, date):
        return datetime.combine(ts, datetime.min.time(), tzinfo=UTC)

    try:
        parsed_time = parser.isoparse(ts)
    except (ValueError, TypeError):
        try:
            parsed_time = parser.parse(ts, dayfirst=True)
        except (ValueError, TypeError, OverflowError) as e:
            logger.warning("Failed to parse timestamp '%s': %s", ts, e)
            return None

    if parsed_time.tzinfo is None:
        return parsed_time.replace(tzinfo=UTC)
    return parsed_time


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Return the datetime as an explicit UTC-aware value."""

    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)

    return dt.astimezone(UTC)


def combine_date_and_time(
    date_part: str | date | None,
    time_part: str | None = None,
) -> datetime | None:
    """Combine a calendar day and an optional clock time into one UTC datetime.

    >>> combine_date_and_time("5 July, 2013", "08:00 AM")
    datetime.datetime(2013, 7, 5, 8, 0, tzinfo=datetime.timezone.utc)
    """
    if not date_part:
        return None

    if isinstance(date_part, datetime):
        day = date_part.date()
    elif isinstance(date_part, date):
        day = date_part
    else:
        parsed_day = parse_timestamp(date_part)
        if parsed_day is None:
            return None
        day = parsed_day.date()

    if not time_part:
        return datetime.combine(day, datetime.min.time(), tzinfo=UTC)

    try:
        clock = parser.parse(time_part, default=datetime.combine(day, datetime.min.time()))
    except (ValueError, TypeError, OverflowError) as e:
        logger.warning("Failed to parse time '%s': %s", time_part, e)
        return None

    return datetime.combine(day, clock.time(), tzinfo=UTC)


def years_between(born: date | None, on: date | datetime | None) -> int | None:
    """Whole years elapsed between two dates, counting only completed birthdays."""
    if born is None or on is None:
        return None

    if isinstance(born, datetime):
        born = born.date()
    if isinstance(on, datetime):
        on = on.date()

    return relativedelta(on, born).years
