from __future__ import annotations

from datetime import date
from typing import Optional

from zocal import LOGGER
from zocal.entities.constants import CalendarVariant
from zocal.entities.constants import DEFAULT_SEARCH_WINDOW_DAYS
from zocal.entities.constants import SIXTH_GATHA_DAY
from zocal.entities.constants import SIXTH_GATHA_NAME
from zocal.settings import CALENDAR_SETTINGS
from zocal.use_cases.convert_date import DEFAULT_CONVERTER
from zocal.use_cases.interfaces.calendar_converter_interface import (
    CalendarConverterInterface,
)
from zocal.use_cases.interfaces.occurrence_finder_interface import (
    OccurrenceFinderInterface,
)
from zocal.utils.date_utils import add_days
from zocal.utils.date_utils import is_leap_year
from zocal.utils.date_utils import to_civil_date


def next_sixth_gatha_date(from_date: date) -> date:
    """Next Avardad-sal-Gah (March 20 of a leap year) strictly after ``from_date``."""
    month, day = SIXTH_GATHA_DAY
    current_year = from_date.year

    if is_leap_year(current_year):
        this_year = date(current_year, month, day)
        if this_year > from_date:
            return this_year

    next_leap_year = current_year + 1
    while not is_leap_year(next_leap_year):
        next_leap_year += 1
    return date(next_leap_year, month, day)


class NextOccurrenceFinder(OccurrenceFinderInterface):
    """Scans forward one day at a time for the next matching roj/mah or Gatha."""

    def __init__(
        self,
        converter: CalendarConverterInterface,
        search_window_days: int = DEFAULT_SEARCH_WINDOW_DAYS,
    ):
        self.converter = converter
        self.search_window_days = search_window_days

    def find_next_occurrence(
        self,
        target_roj: str,
        target_mah: str,
        is_gatha: bool,
        from_date: date,
        variant: CalendarVariant,
    ) -> Optional[date]:
        variant = CalendarVariant.parse(variant)
        from_date = to_civil_date(from_date)

        if is_gatha and target_roj == SIXTH_GATHA_NAME and variant is CalendarVariant.FASLI:
            return next_sixth_gatha_date(from_date)

        for days_to_add in range(1, self.search_window_days + 1):
            candidate = add_days(from_date, days_to_add)
            result = self.converter.to_zoroastrian(candidate, variant)

            if is_gatha and result.is_gatha and result.roj == target_roj:
                return candidate
            if (
                not is_gatha
                and not result.is_gatha
                and result.roj == target_roj
                and result.mah == target_mah
            ):
                return candidate

        LOGGER.warning(
            f"No {variant.value} occurrence of {target_roj}/{target_mah} within "
            f"{self.search_window_days} days after {from_date.isoformat()}"
        )
        return None


DEFAULT_FINDER = NextOccurrenceFinder(
    DEFAULT_CONVERTER, CALENDAR_SETTINGS.search_window_days
)


def find_next_occurrence(
    target_roj: str,
    target_mah: str,
    is_gatha: bool,
    from_date: date,
    variant: CalendarVariant,
) -> Optional[date]:
    return DEFAULT_FINDER.find_next_occurrence(
        target_roj, target_mah, is_gatha, from_date, variant
    )
