"""Application container for the ZoCal calendar engine."""

from __future__ import annotations

from typing import Optional

from lagom import Container, Singleton

from zocal.config_dependency_injection import configure_container
from zocal.settings import CALENDAR_SETTINGS
from zocal.settings.calendar_settings import CalendarSettings
from zocal.use_cases.event_recurrence import EventRecurrence
from zocal.use_cases.interfaces.calendar_converter_interface import (
    CalendarConverterInterface,
)
from zocal.use_cases.interfaces.occurrence_finder_interface import (
    OccurrenceFinderInterface,
)
from zocal.use_cases.reminders import ReminderPlanner


# Global container instance
_container: Optional[Container] = None


def get_container() -> Container:
    """Get the global container instance.

    Returns:
        The configured container
    """
    global _container
    if _container is None:
        _container = setup_container()
    return _container


def setup_container(settings: CalendarSettings = CALENDAR_SETTINGS) -> Container:
    """Set up and configure the application container.

    Args:
        settings: Engine settings, the process-wide ones by default

    Returns:
        Fully configured container
    """
    container = configure_container(settings)

    child_container = Container(container)

    child_container[EventRecurrence] = Singleton(
        lambda c: EventRecurrence(
            converter=c[CalendarConverterInterface],
            finder=c[OccurrenceFinderInterface],
        )
    )
    child_container[ReminderPlanner] = Singleton(
        lambda c: ReminderPlanner(recurrence=c[EventRecurrence])
    )

    return child_container
