from __future__ import annotations

from zocal import DEFAULT_PATH
from zocal.settings.calendar_settings import CalculatorSettings
from zocal.settings.calendar_settings import CalendarSettings

CALENDAR_SETTINGS = CalendarSettings(_env_file=f"{DEFAULT_PATH}/.env")

__all__ = ["CALENDAR_SETTINGS", "CalendarSettings", "CalculatorSettings"]
