"""
Time constants, short duration rendering and timestamp-derived ObjectIds.
"""

import logging
from datetime import date, datetime, time, timezone
from email.utils import parsedate_to_datetime
from typing import Union

from bson import ObjectId

from hydroutils.common.constants import TimeConstants
from hydroutils.common.numeric import Number, format_number, round_half_up

logger = logging.getLogger(__name__)

SECOND = TimeConstants.SECOND
MINUTE = TimeConstants.MINUTE
HOUR = TimeConstants.HOUR
DAY = TimeConstants.DAY
WEEK = TimeConstants.WEEK

Timestamp = Union[str, datetime, date]


def format_time_short(ms: Number) -> str:
    """
    Render a duration in its nearest whole unit.

    A unit is used once the duration is within half a smaller unit of it,
    so 23.5 hours already reads as ``"1d"``.

    Examples:
        >>> format_time_short(90 * MINUTE)
        '2h'
        >>> format_time_short(750)
        '750ms'
    """
    magnitude = abs(ms)
    if magnitude >= DAY - HOUR / 2:
        return f"{round_half_up(ms / DAY)}d"
    if magnitude >= HOUR - MINUTE / 2:
        return f"{round_half_up(ms / HOUR)}h"
    if magnitude >= MINUTE - SECOND / 2:
        return f"{round_half_up(ms / MINUTE)}m"
    if magnitude >= SECOND:
        return f"{round_half_up(ms / SECOND)}s"
    return f"{format_number(ms)}ms"


def _to_datetime(timestamp: Timestamp) -> datetime:
    if isinstance(timestamp, str):
        text = timestamp.strip()
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            pass
        # RFC 2822, e.g. "Wed, 01 Jan 2020 00:00:00 GMT"
        try:
            return parsedate_to_datetime(text)
        except (TypeError, ValueError):
            raise ValueError(f"Invalid timestamp string: {timestamp!r}") from None
    if isinstance(timestamp, datetime):
        return timestamp
    if isinstance(timestamp, date):
        return datetime.combine(timestamp, time(), tzinfo=timezone.utc)
    raise TypeError(f"Unsupported timestamp type: {type(timestamp).__name__}")


def get_object_id(timestamp: Timestamp) -> ObjectId:
    """
    Build an ObjectId that sorts at the given moment.

    The first 4 bytes hold the epoch seconds, the other 8 bytes are zero,
    which makes the result usable as a lower bound in ``_id`` range queries.

    Args:
        timestamp: ISO-8601 or RFC 2822 string, date, or datetime (naive
            means UTC). Other free-form date strings are rejected.

    Returns:
        ObjectId for the timestamp

    Raises:
        ValueError: If a string is neither ISO-8601 nor RFC 2822
    """
    return ObjectId.from_datetime(_to_datetime(timestamp))


class Time:
    """Namespace bundling the duration constants with their helpers."""

    second = SECOND
    minute = MINUTE
    hour = HOUR
    day = DAY
    week = WEEK

    format_time_short = staticmethod(format_time_short)
    get_object_id = staticmethod(get_object_id)
