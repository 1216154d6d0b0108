import logging
import math
from datetime import datetime, timezone
from typing import Optional, Union

from quota_admin.constants.labels import UTC_MARKER

# Every config timestamp is displayed in UTC, regardless of the host's zone
DISPLAY_TIMEZONE = timezone.utc


class MalformedTimestamp(ValueError):
    """Raised when a config date is not a usable epoch-seconds value."""


def pad_zero(value: int) -> str:
    """Render a calendar field with a leading zero when it is below 10"""
    if value < 10:
        return f"0{value}"
    return str(value)


def normalize_timestamp(value: Union[int, float, None]) -> Optional[int]:
    """
    Validate an epoch-seconds value and return it as whole seconds.

    Returns None for an absent value. Raises MalformedTimestamp for anything
    that is not a non-negative number inside the range datetime can represent.
    """
    if value is None:
        return None

    # bool is an int subclass, but True is not a timestamp
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedTimestamp(f"Timestamp must be a number, got {type(value).__name__}")

    if isinstance(value, float):
        if not math.isfinite(value):
            raise MalformedTimestamp(f"Timestamp must be finite, got {value}")
        value = int(value)

    if value < 0:
        raise MalformedTimestamp(f"Timestamp must not be negative, got {value}")

    try:
        datetime.fromtimestamp(value, tz=DISPLAY_TIMEZONE)
    except (OverflowError, OSError, ValueError) as e:
        raise MalformedTimestamp(f"Timestamp {value} is out of range: {str(e)}") from e

    return value


def format_date(timestamp: Union[int, float, None]) -> str:
    """
    Format epoch seconds as a three line UTC string.

    Example for 1700000000:

        22:13
        11/14/2023
        UTC

    Absent, zero and malformed timestamps all give an empty string.
    """
    try:
        seconds = normalize_timestamp(timestamp)
    except MalformedTimestamp as e:
        logging.warning(f"Ignoring malformed config date {timestamp!r}: {str(e)}")
        return ''

    if not seconds:
        return ''

    parsed = datetime.fromtimestamp(seconds, tz=DISPLAY_TIMEZONE)
    return "\n".join([
        f"{pad_zero(parsed.hour)}:{pad_zero(parsed.minute)}",
        f"{pad_zero(parsed.month)}/{pad_zero(parsed.day)}/{parsed.year}",
        UTC_MARKER,
    ])
