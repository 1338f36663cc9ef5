from __future__ import annotations
from datetime import datetime, date, time
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from loguru import logger


def now_in_zone(tz_name: Optional[str]) -> datetime:
    """
    Current naive local time in the given zone.
    If tz_name is None (or unknown), the server's local time is used.
    """
    if not tz_name:
        return datetime.now()

    try:
        zone = ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        logger.warning("Unknown timezone '{}', falling back to server time: {}", tz_name, e)
        return datetime.now()

    return datetime.now(zone).replace(tzinfo=None)


def to_local(value: datetime, tz_name: Optional[str]) -> datetime:
    """Convert an aware datetime into naive local time; naive values pass through."""
    if value.tzinfo is None:
        return value
    if tz_name:
        try:
            return value.astimezone(ZoneInfo(tz_name)).replace(tzinfo=None)
        except (ZoneInfoNotFoundError, ValueError) as e:
            logger.warning("Unknown timezone '{}', converting {} with server time: {}", tz_name, value, e)
    return value.astimezone().replace(tzinfo=None)


def start_of_day(value: datetime | date) -> datetime:
    """Drop the time-of-day component: midnight of the same calendar day."""
    if isinstance(value, datetime):
        return datetime.combine(value.date(), time.min)
    return datetime.combine(value, time.min)


def weekday_index(value: datetime | date) -> int:
    """
    Day-of-week index with 0 = Sunday ... 6 = Saturday.

    Every component that matches habits against a date goes through this
    function, so due-habits and summary counts always agree.
    """
    # date.weekday() is 0 = Monday
    return (value.weekday() + 1) % 7
