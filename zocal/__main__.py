"""Roj calculator: print the Zoroastrian date of a Gregorian day.

    python -m zocal --date 2024-03-20 --calendar_type Fasli --before_sunrise true
"""

import sys
from datetime import date

from pydantic import ValidationError

from zocal import loguru_logger
from zocal.app_container import get_container
from zocal.entities.constants import CalendarVariant
from zocal.settings import CALENDAR_SETTINGS
from zocal.settings.calendar_settings import CalculatorSettings
from zocal.use_cases.convert_date import format_zoroastrian_date
from zocal.use_cases.interfaces import CalendarConverterInterface
from zocal.use_cases.interfaces import DayClassifierInterface
from zocal.utils.date_utils import add_days
from zocal.utils.date_utils import format_display_date
from zocal.utils.date_utils import parse_gregorian_date
from zocal.utils.exceptions import ZocalException


def main() -> int:
    logger = loguru_logger(__name__, verbose=False)

    try:
        settings = CalculatorSettings()
        gregorian = parse_gregorian_date(settings.date) if settings.date else date.today()
        variant = CalendarVariant.parse(
            settings.calendar_type or CALENDAR_SETTINGS.default_calendar_type
        )
    except (ValidationError, ZocalException) as e:
        logger.error(f"Invalid Date Input: {e}")
        return 1

    container = get_container()
    converter = container[CalendarConverterInterface]
    classifier = container[DayClassifierInterface]

    result = converter.to_zoroastrian(gregorian, variant, settings.before_sunrise)
    # classification is about the liturgical day the time belongs to
    liturgical_day = add_days(gregorian, -1) if settings.before_sunrise else gregorian
    special = classifier.classify_special_date(result, liturgical_day, variant)

    logger.info(f"{format_display_date(gregorian)} ({variant.value})")
    logger.info(format_zoroastrian_date(result))
    logger.info(f"Day type: {classifier.day_type(result, liturgical_day, variant)}")
    if special is not None:
        logger.info(
            f"Special Date: {special.name}: {special.description}"
            if special.description
            else f"Special Date: {special.name}"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
