"""Validate and format embed timestamps.

Discord expects embed timestamps as RFC 3339 date-times, the strict
profile of ISO 8601: ``2024-01-15T10:30:00Z`` or
``2024-01-15T10:30:00.123+02:00``.
"""

import datetime
import re
from typing import Final

import arrow

from discord_webhook_builder import exceptions

_RFC_3339: Final = re.compile(
    r"\d{4}-\d{2}-\d{2}"
    r"T([01]\d|2[0-3]):[0-5]\d:[0-5]\d(\.\d+)?"
    r"(Z|[+-]([01]\d|2[0-3]):[0-5]\d)",
    re.ASCII,
)


def is_valid_timestamp(timestamp: str) -> bool:
    """Check if a string is a valid RFC 3339 timestamp.

    :param timestamp: The timestamp to check
    :return: True if the timestamp is valid
    """
    if not isinstance(timestamp, str) or not _RFC_3339.fullmatch(timestamp):
        return False

    # The pattern checks the shape, arrow checks the calendar
    try:
        arrow.get(timestamp)
    except ValueError:  # arrow.ParserError is a ValueError
        return False
    return True


def format_timestamp(moment: datetime.datetime | arrow.Arrow) -> str:
    """Format a timezone-aware moment as an RFC 3339 timestamp.

    :param moment: A timezone-aware datetime or an `arrow.Arrow`
    :return: The formatted timestamp
    :raises exceptions.InvalidTimestampError: If the datetime is naive
    """
    if isinstance(moment, datetime.datetime) and moment.utcoffset() is None:
        raise exceptions.InvalidTimestampError(timestamp=moment)
    return moment.isoformat()
