from __future__ import annotations

from abc import ABC
from abc import abstractmethod
from datetime import date
from typing import Optional

from zocal.entities.constants import CalendarVariant
from zocal.entities.zoroastrian_date import SpecialDateInfo
from zocal.entities.zoroastrian_date import ZoroastrianDate


class DayClassifierInterface(ABC):
    @abstractmethod
    def classify_special_date(
        self,
        zoroastrian_date: ZoroastrianDate,
        gregorian_date: date,
        variant: CalendarVariant,
    ) -> Optional[SpecialDateInfo]:
        pass

    @abstractmethod
    def day_type(
        self,
        zoroastrian_date: ZoroastrianDate,
        gregorian_date: date,
        variant: CalendarVariant,
    ) -> str:
        pass
