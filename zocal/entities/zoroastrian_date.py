from __future__ import annotations

from typing import Literal
from typing import Optional

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import model_validator
from pydantic.alias_generators import to_camel

from zocal.entities.constants import CalendarVariant
from zocal.entities.constants import DAYS_PER_MAH
from zocal.entities.constants import LEAP_GATHA_DAYS
from zocal.entities.constants import MAH_NAMES
from zocal.entities.constants import SpecialDateType


class ZoroastrianDate(BaseModel):
    """A day expressed as roj/mah, or as one of the intercalary Gatha days."""

    roj: str
    mah: str
    is_gatha: bool
    roj_index: int
    mah_index: int

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @model_validator(mode="after")
    def _check_indices(self) -> "ZoroastrianDate":
        if self.is_gatha:
            if self.mah_index != -1 or not 0 <= self.roj_index < LEAP_GATHA_DAYS:
                raise ValueError(
                    f"Gatha day needs mah_index -1 and roj_index 0..5, got "
                    f"{self.roj_index}/{self.mah_index}"
                )
        elif not (0 <= self.roj_index < DAYS_PER_MAH and 0 <= self.mah_index < len(MAH_NAMES)):
            raise ValueError(
                f"Regular day needs roj_index 0..29 and mah_index 0..11, got "
                f"{self.roj_index}/{self.mah_index}"
            )
        return self

    @property
    def day_of_year(self) -> int:
        """0-based position in the 360 regular days; -1 for Gatha days."""
        if self.is_gatha:
            return -1
        return self.mah_index * DAYS_PER_MAH + self.roj_index

    def same_day_as(self, other: "ZoroastrianDate") -> bool:
        """True when both name the same roj/mah, or the same Gatha."""
        if self.is_gatha != other.is_gatha:
            return False
        if self.is_gatha:
            return self.roj == other.roj
        return self.roj == other.roj and self.mah == other.mah


class SpecialDateInfo(BaseModel):
    name: str
    description: str
    type: SpecialDateType
    color_hint: str

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class RojMah(BaseModel):
    roj: str
    mah: str

    model_config = ConfigDict(frozen=True)


class GathaDay(BaseModel):
    name: str
    day: int  # 1-based

    model_config = ConfigDict(frozen=True)


class ZoroastrianDateInfo(BaseModel):
    """Flat view used by reminder e-mails and older table code."""

    type: Literal["gatha", "regular"]
    gatha: Optional[str] = None
    gatha_day: Optional[int] = None
    roj: Optional[str] = None
    mah: Optional[str] = None
    calendar_type: CalendarVariant

    model_config = ConfigDict(frozen=True)
