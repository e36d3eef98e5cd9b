from __future__ import annotations

from datetime import date
from typing import Optional

from zocal.entities.constants import CalendarVariant
from zocal.entities.constants import DAY_TYPE_DEFAULT
from zocal.entities.constants import DAY_TYPE_GATHA
from zocal.entities.constants import DAY_TYPE_MUKTAD
from zocal.entities.constants import FASLI_NEW_YEAR
from zocal.entities.constants import MUKTAD_FIRST_DAY
from zocal.entities.constants import REGULAR_DAYS_PER_YEAR
from zocal.entities.constants import SpecialDateType
from zocal.entities.zoroastrian_date import SpecialDateInfo
from zocal.entities.zoroastrian_date import ZoroastrianDate
from zocal.use_cases.interfaces.day_classifier_interface import DayClassifierInterface
from zocal.utils.date_utils import to_civil_date

NOWRUZ = SpecialDateInfo(
    name="Nowruz",
    description="Zoroastrian New Year (Roj Hormazd, Mah Fravardin)",
    type=SpecialDateType.NOWRUZ_ZOROASTRIAN,
    color_hint="#2e7d32",
)
KHORDAD_SAAL = SpecialDateInfo(
    name="Khordad Saal",
    description="Birthday of Prophet Zarathushtra",
    type=SpecialDateType.KHORDAD_SAAL,
    color_hint="#f9a825",
)
ZARTHOST_NO_DISO = SpecialDateInfo(
    name="Zarthost no Diso",
    description="Death anniversary of Prophet Zarathushtra",
    type=SpecialDateType.ZARTHOST_NO_DISO,
    color_hint="#6a1b9a",
)
JAMSHEDI_NOWRUZ = SpecialDateInfo(
    name="Jamshedi Nowruz",
    description="Spring equinox New Year",
    type=SpecialDateType.NOWRUZ_GREGORIAN,
    color_hint="#43a047",
)


def _gatha(zoroastrian_date: ZoroastrianDate) -> SpecialDateInfo:
    return SpecialDateInfo(
        name=f"{zoroastrian_date.roj} Gatha",
        description=f"Gatha day {zoroastrian_date.roj_index + 1}",
        type=SpecialDateType.GATHA,
        color_hint="#1565c0",
    )


def _jashan(zoroastrian_date: ZoroastrianDate) -> SpecialDateInfo:
    return SpecialDateInfo(
        name=f"{zoroastrian_date.mah} Jashan",
        description=f"Roj {zoroastrian_date.roj} of Mah {zoroastrian_date.mah}",
        type=SpecialDateType.JASHAN,
        color_hint="#ef6c00",
    )


def _first_day_of_month(zoroastrian_date: ZoroastrianDate) -> SpecialDateInfo:
    return SpecialDateInfo(
        name=f"First day of {zoroastrian_date.mah}",
        description="",
        type=SpecialDateType.FIRST_DAY_MONTH,
        color_hint="#00838f",
    )


class SpecialDateClassifier(DayClassifierInterface):
    """Names the observance, if any, that falls on a day.

    Rules are checked in a fixed order and the first match wins:
    Nowruz, Khordad Saal, Zarthost no Diso, Jamshedi Nowruz (Shenshai and
    Kadmi only), Gatha, Jashan, first day of a month.
    """

    def classify_special_date(
        self,
        zoroastrian_date: ZoroastrianDate,
        gregorian_date: date,
        variant: CalendarVariant,
    ) -> Optional[SpecialDateInfo]:
        variant = CalendarVariant.parse(variant)
        gregorian_date = to_civil_date(gregorian_date)
        regular = not zoroastrian_date.is_gatha

        if regular and zoroastrian_date.roj_index == 0 and zoroastrian_date.mah_index == 0:
            return NOWRUZ
        if regular and zoroastrian_date.roj == "Khordad" and zoroastrian_date.mah == "Fravardin":
            return KHORDAD_SAAL
        if regular and zoroastrian_date.roj == "Khorshed" and zoroastrian_date.mah == "Dae":
            return ZARTHOST_NO_DISO
        if (
            variant in (CalendarVariant.SHENSHAI, CalendarVariant.KADMI)
            and (gregorian_date.month, gregorian_date.day) == FASLI_NEW_YEAR
        ):
            return JAMSHEDI_NOWRUZ
        if zoroastrian_date.is_gatha:
            return _gatha(zoroastrian_date)
        if zoroastrian_date.roj == zoroastrian_date.mah:
            return _jashan(zoroastrian_date)
        if zoroastrian_date.roj_index == 0 and zoroastrian_date.mah_index > 0:
            return _first_day_of_month(zoroastrian_date)
        return None

    def day_type(
        self,
        zoroastrian_date: ZoroastrianDate,
        gregorian_date: date,
        variant: CalendarVariant,
    ) -> str:
        if zoroastrian_date.is_gatha:
            return DAY_TYPE_GATHA
        if MUKTAD_FIRST_DAY <= zoroastrian_date.day_of_year < REGULAR_DAYS_PER_YEAR:
            return DAY_TYPE_MUKTAD
        special = self.classify_special_date(zoroastrian_date, gregorian_date, variant)
        if special is not None:
            return special.type.value
        return DAY_TYPE_DEFAULT


DEFAULT_CLASSIFIER = SpecialDateClassifier()


def classify_special_date(
    zoroastrian_date: ZoroastrianDate,
    gregorian_date: date,
    variant: CalendarVariant,
) -> Optional[SpecialDateInfo]:
    return DEFAULT_CLASSIFIER.classify_special_date(zoroastrian_date, gregorian_date, variant)


def day_type(
    zoroastrian_date: ZoroastrianDate,
    gregorian_date: date,
    variant: CalendarVariant,
) -> str:
    return DEFAULT_CLASSIFIER.day_type(zoroastrian_date, gregorian_date, variant)
