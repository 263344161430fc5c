"""Helper functions

Time handling shared by presenters and CSV export.
"""

from datetime import datetime, timezone
from typing import Optional


def to_utc_naive(dt: Optional[datetime]) -> Optional[datetime]:
    """Convert a datetime to naive UTC; naive input is assumed to be UTC already"""
    if dt is None:
        return None
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc).replace(tzinfo=None)
    return dt


def truncate_to_minute(dt: datetime) -> datetime:
    return dt.replace(second=0, microsecond=0)


def duration_minutes(start: datetime, end: Optional[datetime]) -> Optional[int]:
    """Whole minutes between start and end, ignoring seconds"""
    if end is None:
        return None
    delta = truncate_to_minute(end) - truncate_to_minute(start)
    return int(round(delta.total_seconds() / 60))


def format_duration(start: datetime, end: Optional[datetime]) -> str:
    """Format a duration as "<h>h <m>m", or "Ongoing" when there is no end

    Seconds are ignored on both ends.
    """
    minutes = duration_minutes(start, end)
    if minutes is None:
        return "Ongoing"
    hours, rest = divmod(minutes, 60)
    return f"{hours}h {rest}m"


def duration_hours(start: datetime, end: Optional[datetime]) -> str:
    """Duration in hours with two decimals, or "Ongoing" """
    if end is None:
        return "Ongoing"
    return f"{(end - start).total_seconds() / 3600:.2f}"


def format_datetime(dt: Optional[datetime]) -> str:
    """Short display format, e.g. "Mar 05 14:30" """
    if dt is None:
        return "Ongoing"
    return dt.strftime("%b %d %H:%M")


def safe_filename(value: str) -> str:
    """Replace whitespace runs and path separators with dashes"""
    return "-".join(value.replace("/", " ").replace("\\", " ").split())
