from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Any

from zocal.utils.exceptions import UnsupportedVariantError


class CalendarVariant(Enum):
    """The three Zoroastrian calendar traditions."""
    SHENSHAI = "Shenshai"
    KADMI = "Kadmi"
    FASLI = "Fasli"

    @classmethod
    def parse(cls, value: Any) -> "CalendarVariant":
        """Accept an enum member or its (case-insensitive) name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for variant in cls:
                if variant.value.lower() == key:
                    return variant
        raise UnsupportedVariantError(value)


class SpecialDateType(Enum):
    """Observance categories, in classification priority order."""
    NOWRUZ_ZOROASTRIAN = "nowruz-zoroastrian"
    KHORDAD_SAAL = "khordad-saal"
    ZARTHOST_NO_DISO = "zarthost-no-diso"
    NOWRUZ_GREGORIAN = "nowruz-gregorian"
    GATHA = "Gatha"
    JASHAN = "jashan"
    FIRST_DAY_MONTH = "first-day-month"


class EventCategory(Enum):
    BIRTHDAY = "Birthday"
    ANNIVERSARY = "Anniversary"
    OTHER = "Other"


# Names of 12 Mahs (months)
MAH_NAMES = (
    "Fravardin",
    "Ardibehesht",
    "Khordad",
    "Tir",
    "Amardad",
    "Shehrevar",
    "Meher",
    "Avan",
    "Adar",
    "Dae",
    "Bahman",
    "Aspandard",
)

# Names of 30 Rojs (days)
ROJ_NAMES = (
    "Hormazd",
    "Bahman",
    "Ardibehesht",
    "Shehrevar",
    "Aspandard",
    "Khordad",
    "Amardad",
    "Dae-Pa-Adar",
    "Adar",
    "Avan",
    "Khorshed",
    "Mohor",
    "Tir",
    "Gosh",
    "Dae-Pa-Meher",
    "Meher",
    "Srosh",
    "Rashne",
    "Fravardin",
    "Behram",
    "Ram",
    "Govad",
    "Dae-Pa-Din",
    "Din",
    "Ashishvangh",
    "Ashtad",
    "Asman",
    "Zamyad",
    "Mareshpand",
    "Aneran",
)

# Five Gathas, plus the sixth that only exists in Fasli leap years
GATHA_NAMES = (
    "Ahunavaiti",
    "Ushtavaiti",
    "Spentamainyu",
    "Vohuxshathra",
    "Vahishtoishti",
    "Avardad-sal-Gah",
)
SIXTH_GATHA_NAME = GATHA_NAMES[5]
GATHA_MAH_NAME = "Gatha"

DAYS_PER_MAH = 30
REGULAR_DAYS_PER_YEAR = 360
DAYS_PER_YEAR = 365
GATHA_DAYS = 5
LEAP_GATHA_DAYS = 6
# Muktad: the five days before the Gathas, day-in-year 355..359
MUKTAD_FIRST_DAY = 355

# Day on which roj Hormazd, mah Fravardin begins
REFERENCE_DATES = {
    CalendarVariant.SHENSHAI: date(1926, 9, 9),
    CalendarVariant.KADMI: date(1926, 8, 10),
}

# Fasli year starts on the spring equinox
FASLI_NEW_YEAR = (3, 21)
# Avardad-sal-Gah falls on the day before the Fasli new year
SIXTH_GATHA_DAY = (3, 20)

DEFAULT_SEARCH_WINDOW_DAYS = 400
ALLOWED_REMINDER_DAYS = (0, 1, 3, 7, 30)
MAX_EVENT_AGE_YEARS = 100

# Placeholder values shown in tables instead of raising
TODAY = "Today"
NOT_AVAILABLE = "N/A"
CALCULATING = "Calculating..."

DAY_TYPE_GATHA = "Gatha"
DAY_TYPE_MUKTAD = "Muktad"
DAY_TYPE_DEFAULT = "Default"
