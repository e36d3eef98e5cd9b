"""Gregorian to Zoroastrian date conversion."""

from __future__ import annotations

from datetime import date
from typing import Optional
from typing import Union

from zocal import LOGGER
from zocal.entities.constants import CalendarVariant
from zocal.entities.constants import DAYS_PER_MAH
from zocal.entities.constants import DAYS_PER_YEAR
from zocal.entities.constants import FASLI_NEW_YEAR
from zocal.entities.constants import GATHA_DAYS
from zocal.entities.constants import GATHA_MAH_NAME
from zocal.entities.constants import GATHA_NAMES
from zocal.entities.constants import LEAP_GATHA_DAYS
from zocal.entities.constants import MAH_NAMES
from zocal.entities.constants import REFERENCE_DATES
from zocal.entities.constants import REGULAR_DAYS_PER_YEAR
from zocal.entities.constants import ROJ_NAMES
from zocal.entities.zoroastrian_date import GathaDay
from zocal.entities.zoroastrian_date import RojMah
from zocal.entities.zoroastrian_date import ZoroastrianDate
from zocal.entities.zoroastrian_date import ZoroastrianDateInfo
from zocal.use_cases.interfaces.calendar_converter_interface import (
    CalendarConverterInterface,
)
from zocal.utils.date_utils import add_days
from zocal.utils.date_utils import days_between
from zocal.utils.date_utils import is_leap_year
from zocal.utils.date_utils import parse_gregorian_date
from zocal.utils.date_utils import to_civil_date

DateLike = Union[date, str]


def fasli_year_start(day: date) -> date:
    """March 21 on or before ``day``."""
    month, new_year_day = FASLI_NEW_YEAR
    if (day.month, day.day) >= FASLI_NEW_YEAR:
        return date(day.year, month, new_year_day)
    return date(day.year - 1, month, new_year_day)


def _regular_day(day_in_year: int) -> ZoroastrianDate:
    mah_index, roj_index = divmod(day_in_year, DAYS_PER_MAH)
    return ZoroastrianDate(
        roj=ROJ_NAMES[roj_index],
        mah=MAH_NAMES[mah_index],
        is_gatha=False,
        roj_index=roj_index,
        mah_index=mah_index,
    )


def _gatha_day(gatha_index: int) -> ZoroastrianDate:
    return ZoroastrianDate(
        roj=GATHA_NAMES[gatha_index],
        mah=GATHA_MAH_NAME,
        is_gatha=True,
        roj_index=gatha_index,
        mah_index=-1,
    )


class ZoroastrianCalendarConverter(CalendarConverterInterface):
    """Maps Gregorian days onto the Shenshai, Kadmi and Fasli calendars.

    Fasli is tied to the equinox and gets a sixth Gatha day whenever the
    Gregorian year in which its Zoroastrian year ends is a leap year.
    Shenshai and Kadmi count fixed 365-day years from their reference dates
    and drift against the solar year; no Kabisa correction is applied.
    """

    def to_zoroastrian(
        self,
        gregorian_date: date,
        variant: CalendarVariant,
        before_sunrise: bool = False,
    ) -> ZoroastrianDate:
        variant = CalendarVariant.parse(variant)
        day = to_civil_date(gregorian_date)

        # the liturgical day starts at sunrise
        if before_sunrise:
            day = add_days(day, -1)

        if variant is CalendarVariant.FASLI:
            return self._fasli(day)
        return self._drifting(day, variant)

    @staticmethod
    def _fasli(day: date) -> ZoroastrianDate:
        year_start = fasli_year_start(day)
        days_diff = days_between(year_start, day)

        if days_diff >= REGULAR_DAYS_PER_YEAR:
            gatha_index = days_diff - REGULAR_DAYS_PER_YEAR
            # a Mar 21 to Mar 20 year is 366 days long exactly when it ends in a leap year
            max_gathas = LEAP_GATHA_DAYS if is_leap_year(year_start.year + 1) else GATHA_DAYS
            if gatha_index >= max_gathas:
                raise ArithmeticError(
                    f"{day} is {days_diff} days into the Fasli year starting {year_start}"
                )
            return _gatha_day(gatha_index)
        return _regular_day(days_diff)

    @staticmethod
    def _drifting(day: date, variant: CalendarVariant) -> ZoroastrianDate:
        days_since_reference = days_between(REFERENCE_DATES[variant], day)
        day_in_year = days_since_reference % DAYS_PER_YEAR

        if day_in_year >= REGULAR_DAYS_PER_YEAR:
            return _gatha_day(day_in_year - REGULAR_DAYS_PER_YEAR)
        return _regular_day(day_in_year)

    def explain(self, gregorian_date: date, variant: CalendarVariant) -> ZoroastrianDate:
        """Convert while logging each intermediate value at DEBUG level."""
        variant = CalendarVariant.parse(variant)
        day = to_civil_date(gregorian_date)
        LOGGER.debug(f"=== Debug for {day.isoformat()} ({variant.value}) ===")

        if variant is CalendarVariant.FASLI:
            year_start = fasli_year_start(day)
            end_year = year_start.year + 1
            LOGGER.debug(f"Zoroastrian year starts: {year_start.isoformat()}")
            LOGGER.debug(f"Days since Zoroastrian year start: {days_between(year_start, day)}")
            LOGGER.debug(f"Zoroastrian year ends in: {end_year} (leap: {is_leap_year(end_year)})")
        else:
            reference = REFERENCE_DATES[variant]
            days_since_reference = days_between(reference, day)
            LOGGER.debug(f"Reference date: {reference.isoformat()}")
            LOGGER.debug(f"Days since reference: {days_since_reference}")
            LOGGER.debug(f"Day in Zoroastrian year: {days_since_reference % DAYS_PER_YEAR}")

        result = self.to_zoroastrian(day, variant)
        LOGGER.debug(f"Final result: {result.roj} - {result.mah}")
        return result


DEFAULT_CONVERTER = ZoroastrianCalendarConverter()


def to_zoroastrian(
    gregorian_date: DateLike,
    variant: CalendarVariant,
    before_sunrise: bool = False,
) -> ZoroastrianDate:
    """Convert a Gregorian date (or ISO string) to its Zoroastrian roj/mah.

    Raises:
        InvalidDateError: the date cannot be parsed.
        UnsupportedVariantError: ``variant`` is not Shenshai, Kadmi or Fasli.
    """
    return DEFAULT_CONVERTER.to_zoroastrian(
        parse_gregorian_date(gregorian_date), variant, before_sunrise
    )


def explain_conversion(gregorian_date: DateLike, variant: CalendarVariant) -> ZoroastrianDate:
    return DEFAULT_CONVERTER.explain(parse_gregorian_date(gregorian_date), variant)


def get_roj_mah_from_date(
    gregorian_date: DateLike, variant: CalendarVariant = CalendarVariant.SHENSHAI
) -> Optional[RojMah]:
    """Roj and mah of a regular day; ``None`` on a Gatha day."""
    result = to_zoroastrian(gregorian_date, variant)
    if result.is_gatha:
        return None
    return RojMah(roj=result.roj, mah=result.mah)


def get_gatha_from_date(
    gregorian_date: DateLike, variant: CalendarVariant = CalendarVariant.SHENSHAI
) -> Optional[GathaDay]:
    result = to_zoroastrian(gregorian_date, variant)
    if result.is_gatha:
        return GathaDay(name=result.roj, day=result.roj_index + 1)
    return None


def get_zoroastrian_date_info(
    gregorian_date: DateLike, variant: CalendarVariant = CalendarVariant.SHENSHAI
) -> ZoroastrianDateInfo:
    variant = CalendarVariant.parse(variant)
    result = to_zoroastrian(gregorian_date, variant)
    if result.is_gatha:
        return ZoroastrianDateInfo(
            type="gatha",
            gatha=result.roj,
            gatha_day=result.roj_index + 1,
            calendar_type=variant,
        )
    return ZoroastrianDateInfo(
        type="regular",
        roj=result.roj,
        mah=result.mah,
        calendar_type=variant,
    )


def format_zoroastrian_date(zoroastrian_date: ZoroastrianDate) -> str:
    """Roj calculator display text."""
    if zoroastrian_date.is_gatha:
        return f"{zoroastrian_date.roj} ({GATHA_MAH_NAME})"
    return f"{zoroastrian_date.roj} (Roj), {zoroastrian_date.mah} (Mah)"
