from __future__ import annotations

from datetime import date
from typing import Any
from typing import Optional
from typing import Union

from zocal.entities.constants import MAX_EVENT_AGE_YEARS
from zocal.entities.constants import TODAY
from zocal.entities.event import EventDateValidation
from zocal.utils.date_utils import days_between
from zocal.utils.date_utils import parse_gregorian_date
from zocal.utils.date_utils import to_civil_date
from zocal.utils.exceptions import InvalidDateError


def _anniversary_in(year: int, event_date: date) -> date:
    try:
        return date(year, event_date.month, event_date.day)
    except ValueError:
        # Feb 29 in a common year rolls over to Mar 1
        return date(year, 3, 1)


def next_gregorian_anniversary(event_date: date, today: Optional[date] = None) -> date:
    """Same month/day this year, or next year if it has already passed."""
    event_date = to_civil_date(event_date)
    today = to_civil_date(today or date.today())

    next_occurrence = _anniversary_in(today.year, event_date)
    if next_occurrence < today:
        next_occurrence = _anniversary_in(today.year + 1, event_date)
    return next_occurrence


def gregorian_days_remaining(
    event_date: date, today: Optional[date] = None
) -> Union[int, str]:
    today = to_civil_date(today or date.today())
    days = days_between(today, next_gregorian_anniversary(event_date, today))
    return TODAY if days == 0 else days


def years_at_next_occurrence(event_date: date, today: Optional[date] = None) -> int:
    """Years completed at the next anniversary (the current count when it is today)."""
    event_date = to_civil_date(event_date)
    today = to_civil_date(today or date.today())

    if (event_date.month, event_date.day) == (today.month, today.day):
        return today.year - event_date.year

    years = today.year - event_date.year
    if (today.month, today.day) < (event_date.month, event_date.day):
        years -= 1
    return max(1, years + 1)


def validate_event_date(value: Any, today: Optional[date] = None) -> EventDateValidation:
    """Event dates must be real days, not in the future and at most 100 years old."""
    today = to_civil_date(today or date.today())
    try:
        event_date = parse_gregorian_date(value)
    except InvalidDateError:
        return EventDateValidation(is_valid=False, error="Invalid date format")

    try:
        oldest_allowed = today.replace(year=today.year - MAX_EVENT_AGE_YEARS)
    except ValueError:
        oldest_allowed = date(today.year - MAX_EVENT_AGE_YEARS, 2, 28)

    if event_date > today:
        return EventDateValidation(is_valid=False, error="Event date cannot be in the future")
    if event_date < oldest_allowed:
        return EventDateValidation(
            is_valid=False,
            error=f"Event date cannot be more than {MAX_EVENT_AGE_YEARS} years ago",
        )
    return EventDateValidation(is_valid=True)
