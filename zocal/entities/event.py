from __future__ import annotations

from datetime import date
from typing import Any
from typing import Mapping
from typing import Optional
from typing import Union

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator
from pydantic.alias_generators import to_camel

from zocal.entities.constants import ALLOWED_REMINDER_DAYS
from zocal.entities.constants import CalendarVariant
from zocal.entities.constants import EventCategory
from zocal.entities.zoroastrian_date import ZoroastrianDate
from zocal.utils.date_utils import parse_gregorian_date


class EventDate(BaseModel):
    """The part of an event the calendar engine reads: its date and sunrise flag.

    Every other key (name, category, owner, timestamps, ...) is carried along
    untouched so that annotated copies can be handed back unchanged.
    """

    event_date: date
    before_sunrise: bool = False

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    @classmethod
    def coerce(cls, value: Any):
        """Build from a model, a mapping or an attribute-style record."""
        if isinstance(value, cls):
            return value
        if isinstance(value, BaseModel):
            return cls.model_validate(value.model_dump())
        if isinstance(value, Mapping):
            return cls.model_validate(dict(value))
        return cls.model_validate(value, from_attributes=True)

    @field_validator("event_date", mode="before")
    @classmethod
    def _parse_event_date(cls, value: Any) -> date:
        return parse_gregorian_date(value)

    @field_validator("before_sunrise", mode="before")
    @classmethod
    def _default_before_sunrise(cls, value: Any) -> Any:
        return False if value is None else value


class Event(EventDate):
    """A user event as stored by the API layer, checked field by field."""

    id: Optional[str] = None
    name: Optional[str] = None
    category: EventCategory = EventCategory.OTHER
    reminder_days: int = Field(default=0, validation_alias="reminder_days")

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value: Any) -> Any:
        return None if value is None else str(value)

    @field_validator("reminder_days")
    @classmethod
    def _check_reminder_days(cls, value: int) -> int:
        if value not in ALLOWED_REMINDER_DAYS:
            raise ValueError(
                f"Reminder days must be one of {', '.join(map(str, ALLOWED_REMINDER_DAYS))}"
            )
        return value


class ZoroastrianEvent(EventDate):
    """Copy of an event annotated with its roj/mah under one calendar variant."""

    roj: str
    mah: str
    is_gatha: bool = False


class ConversionResult(BaseModel):
    """Outcome of converting an event; either a date or an error message."""

    ok: bool
    value: Optional[ZoroastrianDate] = None
    error: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def success(cls, value: ZoroastrianDate) -> "ConversionResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str) -> "ConversionResult":
        return cls(ok=False, error=error)


class EventDateValidation(BaseModel):
    is_valid: bool
    error: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class ReminderStatus(BaseModel):
    event_id: Optional[str] = None
    event_name: Optional[str] = None
    event_date: Optional[date] = None
    reminder_days: int
    days_until: Union[int, str]
    due_today: bool
    send_immediately: bool
    calendar_type: CalendarVariant

    model_config = ConfigDict(frozen=True)
