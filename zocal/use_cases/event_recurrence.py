"""Recurring events on the Zoroastrian calendar.

An event recurs whenever its roj/mah (or its Gatha day) comes round again
under the user's calendar variant. These helpers feed the "falls on" and
"days remaining" columns of the event tables and never raise for a bad
event: the placeholders ``N/A`` and ``Calculating...`` are returned instead.
"""

from __future__ import annotations

from datetime import date
from typing import Any
from typing import Iterable
from typing import List
from typing import Mapping
from typing import Optional
from typing import Tuple
from typing import Union

from pydantic import BaseModel
from pydantic import ValidationError

from zocal import LOGGER
from zocal.entities.constants import CALCULATING
from zocal.entities.constants import CalendarVariant
from zocal.entities.constants import NOT_AVAILABLE
from zocal.entities.constants import TODAY
from zocal.entities.event import ConversionResult
from zocal.entities.event import EventDate
from zocal.entities.event import ZoroastrianEvent
from zocal.use_cases.convert_date import DEFAULT_CONVERTER
from zocal.use_cases.find_next_occurrence import DEFAULT_FINDER
from zocal.use_cases.interfaces.calendar_converter_interface import (
    CalendarConverterInterface,
)
from zocal.use_cases.interfaces.occurrence_finder_interface import (
    OccurrenceFinderInterface,
)
from zocal.utils.date_utils import days_between
from zocal.utils.date_utils import to_civil_date
from zocal.utils.exceptions import InvalidDateError

DaysRemaining = Union[int, str]


def _raw_fields(event: Any) -> dict:
    if isinstance(event, BaseModel):
        return dict(event)
    if isinstance(event, Mapping):
        return dict(event)
    return dict(getattr(event, "__dict__", {}))


def format_days_remaining(days: DaysRemaining) -> str:
    """``1 day``, ``12 days``, or the placeholder unchanged."""
    if isinstance(days, str):
        return days
    return f"{days} day{'' if days == 1 else 's'}"


class EventRecurrence:
    def __init__(
        self,
        converter: CalendarConverterInterface,
        finder: OccurrenceFinderInterface,
    ):
        self.converter = converter
        self.finder = finder

    def try_convert_event(self, event: Any, variant: CalendarVariant) -> ConversionResult:
        """Convert an event's date, reporting failure instead of raising.

        Raises:
            UnsupportedVariantError: ``variant`` is unknown.
        """
        variant = CalendarVariant.parse(variant)
        try:
            source = EventDate.coerce(event)
            value = self.converter.to_zoroastrian(
                source.event_date, variant, source.before_sunrise
            )
        except (ValidationError, InvalidDateError, ArithmeticError) as e:
            LOGGER.error(f"Error converting event to Zoroastrian calendar: {e}")
            return ConversionResult.failure(str(e))
        return ConversionResult.success(value)

    def convert_event_to_zoroastrian(
        self, event: Any, variant: CalendarVariant
    ) -> ZoroastrianEvent:
        """Copy of ``event`` with roj, mah and is_gatha filled in (``N/A`` on failure)."""
        result = self.try_convert_event(event, variant)
        if not result.ok:
            return ZoroastrianEvent.model_construct(
                **{
                    **_raw_fields(event),
                    "roj": NOT_AVAILABLE,
                    "mah": NOT_AVAILABLE,
                    "is_gatha": False,
                }
            )

        return ZoroastrianEvent.model_validate(
            {
                **_raw_fields(event),
                "roj": result.value.roj,
                "mah": result.value.mah,
                "is_gatha": result.value.is_gatha,
            }
        )

    def _next_occurrence(
        self, event: Any, variant: CalendarVariant, today: Optional[date]
    ) -> Tuple[ConversionResult, date, Optional[date]]:
        variant = CalendarVariant.parse(variant)
        today = to_civil_date(today or date.today())
        result = self.try_convert_event(event, variant)
        if not result.ok:
            return result, today, None

        target = result.value
        current = self.converter.to_zoroastrian(today, variant)
        if target.same_day_as(current):
            return result, today, today

        next_date = self.finder.find_next_occurrence(
            target.roj, target.mah, target.is_gatha, today, variant
        )
        return result, today, next_date

    def next_gregorian_date(
        self, event: Any, variant: CalendarVariant, today: Optional[date] = None
    ) -> Optional[date]:
        """Gregorian date on which the event's roj/mah next falls, today included."""
        _, _, next_date = self._next_occurrence(event, variant, today)
        return next_date

    def days_until_next_occurrence(
        self, event: Any, variant: CalendarVariant, today: Optional[date] = None
    ) -> DaysRemaining:
        result, today, next_date = self._next_occurrence(event, variant, today)
        if not result.ok:
            return NOT_AVAILABLE
        if next_date is None:
            return CALCULATING
        if next_date == today:
            return TODAY
        return days_between(today, next_date)

    def sort_by_zoroastrian_proximity(
        self,
        events: Iterable[Any],
        variant: CalendarVariant,
        today: Optional[date] = None,
    ) -> List[Any]:
        """Closest upcoming events first; unresolved ones last.

        Order: ``Today``, then day counts ascending, then ``Calculating...``,
        then ``N/A``. Ties keep their input order.
        """
        variant = CalendarVariant.parse(variant)
        today = to_civil_date(today or date.today())

        def sort_key(event: Any) -> Tuple[int, int]:
            days = self.days_until_next_occurrence(event, variant, today)
            if days == TODAY:
                return 0, 0
            if days == CALCULATING:
                return 2, 0
            if days == NOT_AVAILABLE:
                return 3, 0
            return 1, days

        return sorted(events, key=sort_key)


DEFAULT_RECURRENCE = EventRecurrence(DEFAULT_CONVERTER, DEFAULT_FINDER)


def convert_event_to_zoroastrian(event: Any, variant: CalendarVariant) -> ZoroastrianEvent:
    return DEFAULT_RECURRENCE.convert_event_to_zoroastrian(event, variant)


def days_until_next_occurrence(
    event: Any, variant: CalendarVariant, today: Optional[date] = None
) -> DaysRemaining:
    return DEFAULT_RECURRENCE.days_until_next_occurrence(event, variant, today)


def next_zoroastrian_gregorian_date(
    event: Any, variant: CalendarVariant, today: Optional[date] = None
) -> Optional[date]:
    return DEFAULT_RECURRENCE.next_gregorian_date(event, variant, today)


def sort_by_zoroastrian_proximity(
    events: Iterable[Any], variant: CalendarVariant, today: Optional[date] = None
) -> List[Any]:
    return DEFAULT_RECURRENCE.sort_by_zoroastrian_proximity(events, variant, today)
