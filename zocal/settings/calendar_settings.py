from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from zocal.entities.constants import CalendarVariant
from zocal.entities.constants import DEFAULT_SEARCH_WINDOW_DAYS
from zocal.utils.pydantic_advanced_settings import CommandLineSettings


class CalendarSettings(BaseSettings):
    default_calendar_type: CalendarVariant = Field(
        default=CalendarVariant.SHENSHAI,
        description="Calendar variant used when the caller does not pick one",
    )
    search_window_days: int = Field(
        default=DEFAULT_SEARCH_WINDOW_DAYS,
        gt=0,
        description="Number of days scanned when looking for the next occurrence",
    )
    log_level: str = Field(default="INFO", description="Application log level")
    enable_file_logging: bool = Field(default=False)
    log_file_path: str = Field(default="zocal.log")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ZOCAL_",
        extra="ignore",
    )


class CalculatorSettings(CommandLineSettings):
    """Gregorian to Zoroastrian roj calculator."""

    date: Optional[str] = Field(
        default=None,
        description="Gregorian date in YYYY-MM-DD, today when omitted",
    )
    calendar_type: Optional[str] = Field(
        default=None,
        description="Shenshai, Kadmi or Fasli",
    )
    before_sunrise: bool = Field(
        default=False,
        description="The time is before sunrise and belongs to the previous day",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ZOCAL_CALCULATOR_",
        extra="ignore",
    )
