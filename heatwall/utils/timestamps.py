"""
Calendar day utilities for heatwall.

Everything in the grid works on calendar days: dates truncated to local
midnight. Incoming values may be dates, datetimes or ISO-8601 strings.
"""

from datetime import date, datetime, timedelta
from typing import List, Optional, Union

DayLike = Union[date, datetime, str]

SHORT_MONTH_NAMES = [
    'Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
    'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec',
]


def parse_timestamp(ts: Optional[str]) -> Optional[datetime]:
    """
    Parse ISO-8601 timestamp, accepting a 'Z' suffix for UTC.

    Returns None if parsing fails.
    """
    if not ts:
        return None

    try:
        if ts.endswith('Z'):
            ts = ts[:-1] + '+00:00'
        return datetime.fromisoformat(ts)
    except (ValueError, TypeError):
        return None


def to_calendar_day(value: Optional[DayLike]) -> Optional[date]:
    """
    Truncate a date, datetime or ISO string to its local calendar day.

    Aware datetimes are converted to local time before truncation.
    Returns None when the value cannot be interpreted.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        if len(value) == 10:
            try:
                return date.fromisoformat(value)
            except ValueError:
                return None
        return to_calendar_day(parse_timestamp(value))
    return None


def date_key(value: DayLike) -> str:
    """ISO YYYY-MM-DD key of the value's calendar day."""
    day = to_calendar_day(value)
    return day.isoformat() if day else ''


def local_today() -> date:
    """Today's calendar day in local time."""
    return date.today()


def weekday_index(day: date) -> int:
    """Weekday with 0=Sunday through 6=Saturday."""
    return (day.weekday() + 1) % 7


def get_date_array(start: date, end: date) -> List[date]:
    """Every calendar day from start to end inclusive."""
    span = (end - start).days
    return [start + timedelta(days=i) for i in range(span + 1)]


def short_month_name(day: date) -> str:
    """Three letter English month name."""
    return SHORT_MONTH_NAMES[day.month - 1]


def format_display_date(day: Optional[date]) -> str:
    """
    Format a calendar day for display, e.g. "Jan 5, 2024".

    Returns "N/A" if None.
    """
    if not day:
        return "N/A"
    return f"{short_month_name(day)} {day.day}, {day.year}"

