from __future__ import annotations

from abc import ABC
from abc import abstractmethod
from datetime import date

from zocal.entities.constants import CalendarVariant
from zocal.entities.zoroastrian_date import ZoroastrianDate


class CalendarConverterInterface(ABC):
    @abstractmethod
    def to_zoroastrian(
        self,
        gregorian_date: date,
        variant: CalendarVariant,
        before_sunrise: bool = False,
    ) -> ZoroastrianDate:
        pass
