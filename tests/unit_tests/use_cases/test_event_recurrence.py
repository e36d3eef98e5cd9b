from __future__ import annotations

import unittest
from datetime import date
from types import SimpleNamespace
from unittest.mock import MagicMock
from unittest.mock import patch

from zocal.entities.constants import CalendarVariant
from zocal.entities.event import Event
from zocal.entities.event import ZoroastrianEvent
from zocal.use_cases.convert_date import ZoroastrianCalendarConverter
from zocal.use_cases.event_recurrence import EventRecurrence
from zocal.use_cases.event_recurrence import convert_event_to_zoroastrian
from zocal.use_cases.event_recurrence import days_until_next_occurrence
from zocal.use_cases.event_recurrence import format_days_remaining
from zocal.use_cases.event_recurrence import next_zoroastrian_gregorian_date
from zocal.use_cases.find_next_occurrence import NextOccurrenceFinder
from zocal.utils.exceptions import UnsupportedVariantError

SHENSHAI = CalendarVariant.SHENSHAI


def _recurrence(search_window_days: int = 400) -> EventRecurrence:
    converter = ZoroastrianCalendarConverter()
    return EventRecurrence(
        converter=converter,
        finder=NextOccurrenceFinder(converter, search_window_days=search_window_days),
    )


class TestConvertEvent(unittest.TestCase):
    def setUp(self):
        self.recurrence = _recurrence()

    def test_annotates_event_with_roj_and_mah(self):
        # Arrange
        event = {"id": 7, "name": "Navjote", "eventDate": "2023-08-16", "owner": "u-1"}

        # Act
        result = self.recurrence.convert_event_to_zoroastrian(event, SHENSHAI)

        # Assert
        self.assertIsInstance(result, ZoroastrianEvent)
        self.assertEqual((result.roj, result.mah, result.is_gatha), ("Hormazd", "Fravardin", False))
        self.assertEqual(result.id, 7)
        self.assertEqual(result.name, "Navjote")
        self.assertEqual(result.owner, "u-1")

    def test_before_sunrise_event(self):
        event = Event(event_date=date(2023, 8, 16), before_sunrise=True)

        result = self.recurrence.convert_event_to_zoroastrian(event, SHENSHAI)

        self.assertTrue(result.is_gatha)
        self.assertEqual(result.roj, "Vahishtoishti")

    def test_accepts_attribute_style_records(self):
        event = SimpleNamespace(
            id=None, name="Wedding", category="Anniversary", event_date=date(2023, 8, 12),
            before_sunrise=None, reminder_days=7,
        )

        result = self.recurrence.convert_event_to_zoroastrian(event, SHENSHAI)

        self.assertEqual(result.roj, "Ushtavaiti")
        self.assertTrue(result.is_gatha)
        self.assertEqual(result.reminder_days, 7)

    @patch("zocal.use_cases.event_recurrence.LOGGER")
    def test_bad_date_yields_placeholders(self, mock_logger):
        event = {"name": "Broken", "event_date": "not-a-date"}

        result = self.recurrence.convert_event_to_zoroastrian(event, SHENSHAI)

        self.assertEqual((result.roj, result.mah, result.is_gatha), ("N/A", "N/A", False))
        self.assertEqual(result.name, "Broken")
        mock_logger.error.assert_called_once()

    @patch("zocal.use_cases.event_recurrence.LOGGER")
    def test_overflow_before_sunrise_yields_placeholders(self, mock_logger):
        event = {"event_date": date.min, "before_sunrise": True}

        result = self.recurrence.try_convert_event(event, SHENSHAI)

        self.assertFalse(result.ok)
        self.assertIsNone(result.value)
        self.assertTrue(result.error)

    def test_only_date_fields_are_read(self):
        # Arrange
        event = {
            "eventDate": "2023-08-16",
            "category": "Others",
            "reminder_days": 2,
        }

        # Act
        result = self.recurrence.convert_event_to_zoroastrian(event, SHENSHAI)
        days = self.recurrence.days_until_next_occurrence(event, SHENSHAI, date(2023, 8, 10))

        # Assert
        self.assertEqual((result.roj, result.mah), ("Hormazd", "Fravardin"))
        self.assertEqual(result.category, "Others")
        self.assertEqual(result.reminder_days, 2)
        self.assertEqual(days, 6)

    def test_unknown_variant_raises(self):
        with self.assertRaises(UnsupportedVariantError):
            self.recurrence.convert_event_to_zoroastrian({"event_date": "2023-08-16"}, "Julian")

    def test_module_level_helper(self):
        result = convert_event_to_zoroastrian({"event_date": "2024-03-20"}, "Fasli")

        self.assertEqual(result.roj, "Avardad-sal-Gah")


class TestDaysUntilNextOccurrence(unittest.TestCase):
    def setUp(self):
        self.recurrence = _recurrence()
        self.event = {"event_date": "2023-08-16"}

    def test_counts_days(self):
        result = self.recurrence.days_until_next_occurrence(
            self.event, SHENSHAI, today=date(2023, 8, 10)
        )

        self.assertEqual(result, 6)

    def test_today(self):
        result = self.recurrence.days_until_next_occurrence(
            self.event, SHENSHAI, today=date(2024, 8, 15)
        )

        self.assertEqual(result, "Today")

    def test_just_passed(self):
        result = self.recurrence.days_until_next_occurrence(
            self.event, SHENSHAI, today=date(2023, 8, 17)
        )

        self.assertEqual(result, 364)

    def test_not_found_within_window(self):
        recurrence = _recurrence(search_window_days=30)

        with patch("zocal.use_cases.find_next_occurrence.LOGGER"):
            result = recurrence.days_until_next_occurrence(
                self.event, SHENSHAI, today=date(2023, 8, 17)
            )

        self.assertEqual(result, "Calculating...")

    @patch("zocal.use_cases.event_recurrence.LOGGER")
    def test_invalid_event(self, mock_logger):
        result = self.recurrence.days_until_next_occurrence(
            {"event_date": ""}, SHENSHAI, today=date(2023, 8, 10)
        )

        self.assertEqual(result, "N/A")

    def test_sixth_gatha_under_fasli(self):
        result = days_until_next_occurrence(
            {"event_date": "2024-03-20"}, "Fasli", today=date(2024, 3, 21)
        )

        self.assertEqual(result, (date(2028, 3, 20) - date(2024, 3, 21)).days)

    def test_next_gregorian_date(self):
        self.assertEqual(
            next_zoroastrian_gregorian_date(self.event, SHENSHAI, today=date(2023, 8, 17)),
            date(2024, 8, 15),
        )
        self.assertEqual(
            next_zoroastrian_gregorian_date(self.event, SHENSHAI, today=date(2023, 8, 16)),
            date(2023, 8, 16),
        )

    def test_today_skips_the_search(self):
        # Arrange
        converter = ZoroastrianCalendarConverter()
        finder = MagicMock()
        recurrence = EventRecurrence(converter=converter, finder=finder)

        # Act
        result = recurrence.days_until_next_occurrence(
            self.event, SHENSHAI, today=date(2023, 8, 16)
        )

        # Assert
        self.assertEqual(result, "Today")
        finder.find_next_occurrence.assert_not_called()


class TestSortByZoroastrianProximity(unittest.TestCase):
    @patch("zocal.use_cases.find_next_occurrence.LOGGER")
    @patch("zocal.use_cases.event_recurrence.LOGGER")
    def test_sort_order(self, mock_recurrence_logger, mock_finder_logger):
        # Arrange
        recurrence = _recurrence(search_window_days=30)
        bad = {"name": "bad", "event_date": "2023-13-40"}
        far = {"name": "far", "event_date": "2023-08-05"}
        six = {"name": "six", "event_date": "2023-08-16"}
        today = {"name": "today", "event_date": "2022-08-10"}
        two = {"name": "two", "event_date": "2023-08-12"}
        events = [bad, far, six, today, two]

        # Act
        result = recurrence.sort_by_zoroastrian_proximity(events, SHENSHAI, date(2023, 8, 10))

        # Assert
        self.assertEqual([e["name"] for e in result], ["today", "two", "six", "far", "bad"])
        self.assertEqual([e["name"] for e in events], ["bad", "far", "six", "today", "two"])

    def test_ties_keep_input_order(self):
        recurrence = _recurrence()
        first = {"name": "first", "event_date": "2023-08-16"}
        second = {"name": "second", "event_date": "2022-08-16"}

        result = recurrence.sort_by_zoroastrian_proximity(
            [first, second], SHENSHAI, date(2023, 8, 10)
        )

        self.assertEqual([e["name"] for e in result], ["first", "second"])


class TestFormatDaysRemaining(unittest.TestCase):
    def test_format(self):
        self.assertEqual(format_days_remaining(1), "1 day")
        self.assertEqual(format_days_remaining(12), "12 days")
        self.assertEqual(format_days_remaining("Today"), "Today")
        self.assertEqual(format_days_remaining("N/A"), "N/A")


if __name__ == "__main__":
    unittest.main()
