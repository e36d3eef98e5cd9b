from __future__ import annotations

from abc import ABC
from abc import abstractmethod
from datetime import date
from typing import Optional

from zocal.entities.constants import CalendarVariant


class OccurrenceFinderInterface(ABC):
    @abstractmethod
    def find_next_occurrence(
        self,
        target_roj: str,
        target_mah: str,
        is_gatha: bool,
        from_date: date,
        variant: CalendarVariant,
    ) -> Optional[date]:
        pass
