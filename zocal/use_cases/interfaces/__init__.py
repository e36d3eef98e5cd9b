from __future__ import annotations

from zocal.use_cases.interfaces.calendar_converter_interface import (
    CalendarConverterInterface,
)
from zocal.use_cases.interfaces.day_classifier_interface import DayClassifierInterface
from zocal.use_cases.interfaces.occurrence_finder_interface import (
    OccurrenceFinderInterface,
)

__all__ = [
    "CalendarConverterInterface",
    "DayClassifierInterface",
    "OccurrenceFinderInterface",
]
