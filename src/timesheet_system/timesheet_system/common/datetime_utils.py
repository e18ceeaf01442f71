from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo


def get_zone(name: str) -> ZoneInfo:
    """Resolve an IANA zone name (e.g. ``America/New_York``)."""
    return ZoneInfo(name)


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_instant(value: str) -> datetime:
    """Parse an ISO-8601 timestamp; a trailing ``Z`` means UTC.

    The result keeps whatever offset the string carries (or none).
    """
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def is_aware(value: datetime) -> bool:
    return value.tzinfo is not None and value.utcoffset() is not None


def now_local(tz: tzinfo) -> datetime:
    """Current time in the given zone.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(tz)


def local_date(value: datetime, tz: tzinfo) -> date:
    return value.astimezone(tz).date()


def start_of_day(day: date, tz: tzinfo) -> datetime:
    """00:00 local on ``day`` as a UTC instant."""
    return datetime.combine(day, time(0, 0), tzinfo=tz).astimezone(timezone.utc)


def next_midnight(value: datetime, tz: tzinfo) -> datetime:
    """00:00 local on the day after ``value``'s local date, as a UTC instant."""
    return start_of_day(local_date(value, tz) + timedelta(days=1), tz)


def day_range_bounds(start: date, end: date, tz: tzinfo) -> tuple[datetime, datetime]:
    """Half-open UTC bounds covering local days ``start`` .. ``end`` inclusive."""
    return start_of_day(start, tz), start_of_day(end + timedelta(days=1), tz)


def format_clock(value: Optional[datetime], tz: tzinfo) -> str:
    """12-hour clock without zero padding, e.g. ``9:05 PM``."""
    if value is None:
        return "-"
    return value.astimezone(tz).strftime("%I:%M %p").lstrip("0")
