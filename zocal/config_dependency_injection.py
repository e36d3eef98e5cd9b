"""Dependency injection configuration for the ZoCal calendar engine."""

from __future__ import annotations

from lagom import Container, Singleton

from zocal import LOGGER
from zocal.settings import CALENDAR_SETTINGS
from zocal.settings.calendar_settings import CalendarSettings
from zocal.use_cases.classify_day import SpecialDateClassifier
from zocal.use_cases.convert_date import ZoroastrianCalendarConverter
from zocal.use_cases.find_next_occurrence import NextOccurrenceFinder
from zocal.use_cases.interfaces.calendar_converter_interface import (
    CalendarConverterInterface,
)
from zocal.use_cases.interfaces.day_classifier_interface import DayClassifierInterface
from zocal.use_cases.interfaces.occurrence_finder_interface import (
    OccurrenceFinderInterface,
)


def configure_container(settings: CalendarSettings = CALENDAR_SETTINGS) -> Container:
    """Bind the calendar interfaces to their implementations.

    Args:
        settings: Engine settings, the process-wide ones by default

    Returns:
        Container with the converter, finder and classifier bindings
    """
    container = Container()

    container[CalendarSettings] = settings

    container[CalendarConverterInterface] = Singleton(
        lambda c: ZoroastrianCalendarConverter()
    )
    container[OccurrenceFinderInterface] = Singleton(
        lambda c: NextOccurrenceFinder(
            converter=c[CalendarConverterInterface],
            search_window_days=c[CalendarSettings].search_window_days,
        )
    )
    container[DayClassifierInterface] = Singleton(lambda c: SpecialDateClassifier())

    LOGGER.debug(
        f"Calendar bindings configured (default calendar: {settings.default_calendar_type.value}, "
        f"search window: {settings.search_window_days} days)"
    )
    return container
