from __future__ import annotations

from datetime import date
from datetime import datetime
from datetime import timedelta
from typing import Any

from zocal.utils.exceptions import InvalidDateError

DISPLAY_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def to_civil_date(value: date) -> date:
    """Drop the time of day; a datetime keeps the calendar date it carries."""
    if isinstance(value, datetime):
        return value.date()
    return value


def parse_gregorian_date(value: Any) -> date:
    """Read a Gregorian date from a date, datetime or ISO-8601 string.

    Raises:
        InvalidDateError: the value is empty, of another type, or not a real
            calendar day (e.g. 2023-02-29).
    """
    if isinstance(value, (date, datetime)):
        return to_civil_date(value)
    if not isinstance(value, str) or not value.strip():
        raise InvalidDateError(value)

    text = value.strip()
    try:
        if len(text) == 10:
            return date.fromisoformat(text)
        return datetime.fromisoformat(text).date()
    except ValueError as e:
        raise InvalidDateError(value, reason=f"Invalid date: {e}") from e


def add_days(value: date, days: int) -> date:
    return value + timedelta(days=days)


def days_between(start: date, end: date) -> int:
    """Whole calendar days from ``start`` to ``end`` (negative if end is earlier)."""
    return (to_civil_date(end) - to_civil_date(start)).days


def format_display_date(value: date) -> str:
    """Format as ``DD Mon YYYY``, e.g. ``05 Dec 2020``."""
    value = to_civil_date(value)
    return f"{value.day:02d} {DISPLAY_MONTHS[value.month - 1]} {value.year}"
