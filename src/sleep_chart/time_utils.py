"""
time_utils.py

What this file does:
  - Single place for turning raw time values into tz-aware datetimes.
  - Resolves display zones and local midnights so the clock-face layout and the
    axis labels agree on what "the day" is.

This file does NOT:
  - Compute layout
  - Format durations
"""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from typing import Any, Optional, Union
from zoneinfo import ZoneInfo

SECONDS_PER_DAY = 86400.0


def parse_time_utc(t: Any) -> datetime:
    """Parse ISO strings, epoch seconds or datetimes into a tz-aware UTC datetime."""
    if isinstance(t, datetime):
        return t.replace(tzinfo=timezone.utc) if t.tzinfo is None else t.astimezone(timezone.utc)

    if isinstance(t, (int, float)):
        # epoch seconds
        return datetime.fromtimestamp(float(t), tz=timezone.utc)

    if isinstance(t, str):
        s = t.strip()
        # RFC3339 exports commonly end with 'Z'
        if s.endswith("Z"):
            s = s[:-1] + "+00:00"
        # Apple Health exports use '2024-01-01 22:00:00 -0500'
        if len(s) > 19 and s[10] == " " and s[-5] in "+-" and s[-6] == " ":
            s = s[:10] + "T" + s[11:19] + s[-5:-2] + ":" + s[-2:]
        dt = datetime.fromisoformat(s)
        return dt.replace(tzinfo=timezone.utc) if dt.tzinfo is None else dt.astimezone(timezone.utc)

    raise TypeError(f"Unsupported time type: {type(t)}")


def resolve_tz(tz: Union[str, tzinfo, None]) -> Optional[tzinfo]:
    if tz is None or isinstance(tz, tzinfo):
        return tz
    return ZoneInfo(tz)


def as_zone(dt: datetime, tz: Union[str, tzinfo, None] = None) -> datetime:
    """
    Express dt in tz. Without tz, aware datetimes keep their own zone and naive
    ones are treated as UTC.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    zone = resolve_tz(tz)
    return dt.astimezone(zone) if zone is not None else dt


def start_of_day(dt: datetime, tz: Union[str, tzinfo, None] = None) -> datetime:
    """Local midnight of the calendar day containing dt."""
    local = as_zone(dt, tz)
    return local.replace(hour=0, minute=0, second=0, microsecond=0)
