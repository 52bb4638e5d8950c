"""
Timezone offset utilities.

All offsets are whole hours. Zones with half-hour or 45-minute offsets are
truncated toward zero (Asia/Kolkata counts as UTC+5).
"""

from datetime import datetime
from functools import lru_cache
from typing import Optional

import pytz

from .errors import UnknownTimezoneError

SECONDS_PER_HOUR = 3600


def timezones() -> list[str]:
    """Sorted list of every supported timezone identifier."""
    return sorted(pytz.all_timezones)


def is_valid_timezone(tz_name: str) -> bool:
    """Check that tz_name is a key in the timezone database."""
    return isinstance(tz_name, str) and tz_name in pytz.all_timezones_set


@lru_cache(maxsize=None)
def get_timezone(tz_name: str):
    """
    Look up a pytz timezone by name.

    Raises:
        UnknownTimezoneError: tz_name is not in the timezone database
    """
    if not is_valid_timezone(tz_name):
        raise UnknownTimezoneError(f"Unknown timezone: {tz_name!r}")
    return pytz.timezone(tz_name)


def _as_utc(now: Optional[datetime]) -> datetime:
    if now is None:
        return datetime.now(pytz.UTC)
    # Naive datetimes are treated as UTC
    if now.tzinfo is None:
        return pytz.UTC.localize(now)
    return now.astimezone(pytz.UTC)


def utc_offset_hours(tz_name: str, now: Optional[datetime] = None) -> int:
    """
    Whole-hour UTC offset of a timezone at a given instant.

    Args:
        tz_name: Timezone string (e.g., "America/New_York")
        now: Instant to evaluate at (default: current time). Naive datetimes
             are treated as UTC.

    Returns:
        Offset in hours, e.g. -5 for New York in winter

    Raises:
        UnknownTimezoneError: tz_name is not in the timezone database
    """
    tz = get_timezone(tz_name)
    local_dt = _as_utc(now).astimezone(tz)
    return int(local_dt.utcoffset().total_seconds() / SECONDS_PER_HOUR)


def offset_hours(from_tz: str, to_tz: str, now: Optional[datetime] = None) -> int:
    """
    Rotation needed to view availability declared in from_tz from to_tz.

    Both offsets are taken at the same instant so a daylight-saving change in
    one of the zones can't put them out of step.

    Returns:
        utc_offset(from_tz) - utc_offset(to_tz), in whole hours
    """
    now = _as_utc(now)
    return utc_offset_hours(from_tz, now) - utc_offset_hours(to_tz, now)
