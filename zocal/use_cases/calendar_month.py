from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date
from typing import Dict
from typing import List
from typing import Optional

from zocal.entities.constants import CalendarVariant
from zocal.entities.constants import DAY_TYPE_DEFAULT
from zocal.entities.constants import DAY_TYPE_MUKTAD
from zocal.entities.zoroastrian_date import SpecialDateInfo
from zocal.entities.zoroastrian_date import ZoroastrianDate
from zocal.use_cases.classify_day import DEFAULT_CLASSIFIER
from zocal.use_cases.convert_date import DEFAULT_CONVERTER
from zocal.use_cases.interfaces.calendar_converter_interface import (
    CalendarConverterInterface,
)
from zocal.use_cases.interfaces.day_classifier_interface import DayClassifierInterface


@dataclass(frozen=True, slots=True)
class CalendarDay:
    """Represents one calendar cell."""

    gregorian: date
    zoroastrian: ZoroastrianDate
    special: Optional[SpecialDateInfo]
    day_type: str

    @property
    def g(self) -> int:  # Gregorian day number
        return self.gregorian.day

    @property
    def is_special(self) -> bool:
        return self.special is not None or self.day_type == DAY_TYPE_MUKTAD


class ZoroastrianGregorianCalendar:
    """
    A Gregorian month with the Zoroastrian date of every day, so that
    rendering code never has to call the converter cell by cell.
    """

    def __init__(
        self,
        year: int,
        month: int,
        variant: CalendarVariant,
        converter: CalendarConverterInterface = DEFAULT_CONVERTER,
        classifier: DayClassifierInterface = DEFAULT_CLASSIFIER,
    ) -> None:
        self.year = year
        self.month = month
        self.variant = CalendarVariant.parse(variant)

        _, days_in_month = calendar.monthrange(year, month)
        self._days: List[CalendarDay] = [
            self._build(date(year, month, day), converter, classifier)
            for day in range(1, days_in_month + 1)
        ]

        # O(1) look-ups by Gregorian day number
        self._by_gregorian: Dict[int, CalendarDay] = {d.g: d for d in self._days}

    def _build(
        self,
        gregorian: date,
        converter: CalendarConverterInterface,
        classifier: DayClassifierInterface,
    ) -> CalendarDay:
        zoroastrian = converter.to_zoroastrian(gregorian, self.variant)
        return CalendarDay(
            gregorian=gregorian,
            zoroastrian=zoroastrian,
            special=classifier.classify_special_date(zoroastrian, gregorian, self.variant),
            day_type=classifier.day_type(zoroastrian, gregorian, self.variant),
        )

    @property
    def days(self) -> List[CalendarDay]:
        return list(self._days)

    def day(self, gregorian_day: int) -> Optional[CalendarDay]:
        return self._by_gregorian.get(gregorian_day)

    def zoroastrian_from_gregorian(self, gregorian_day: int) -> Optional[ZoroastrianDate]:
        """Return the Zoroastrian date that matches a given Gregorian day number."""
        cell = self._by_gregorian.get(gregorian_day)
        return cell.zoroastrian if cell else None

    def special_days(self) -> List[CalendarDay]:
        """Every cell that is highlighted in the month view (Muktad included)."""
        return [d for d in self._days if d.is_special]

    def gatha_days(self) -> List[CalendarDay]:
        return [d for d in self._days if d.zoroastrian.is_gatha]

    def muktad_days(self) -> List[CalendarDay]:
        return [d for d in self._days if d.day_type == DAY_TYPE_MUKTAD]

    def ordinary_days(self) -> List[CalendarDay]:
        return [d for d in self._days if d.day_type == DAY_TYPE_DEFAULT]

    def __len__(self) -> int:
        return len(self._days)

    def __repr__(self) -> str:
        return (
            f"<Calendar {calendar.month_name[self.month]} {self.year} / "
            f"{self.variant.value} – {len(self._days)} days>"
        )
