from __future__ import annotations

import unittest
from datetime import date
from unittest.mock import patch

from zocal.entities.constants import CalendarVariant
from zocal.use_cases.convert_date import ZoroastrianCalendarConverter
from zocal.use_cases.event_recurrence import EventRecurrence
from zocal.use_cases.find_next_occurrence import NextOccurrenceFinder
from zocal.use_cases.reminders import ReminderPlanner


class TestReminderPlanner(unittest.TestCase):
    def setUp(self):
        converter = ZoroastrianCalendarConverter()
        recurrence = EventRecurrence(converter, NextOccurrenceFinder(converter))
        self.planner = ReminderPlanner(recurrence)
        self.event = {
            "id": "evt-1",
            "name": "Navjote",
            "event_date": "2023-08-16",
            "reminder_days": 7,
        }

    def test_due_on_exact_lead_time(self):
        # Act
        status = self.planner.reminder_status(self.event, "Shenshai", date(2023, 8, 9))

        # Assert
        self.assertEqual(status.days_until, 7)
        self.assertTrue(status.due_today)
        self.assertTrue(status.send_immediately)
        self.assertEqual(status.event_id, "evt-1")
        self.assertEqual(status.calendar_type, CalendarVariant.SHENSHAI)

    def test_inside_lead_time_sends_immediately_only(self):
        status = self.planner.reminder_status(self.event, "Shenshai", date(2023, 8, 12))

        self.assertEqual(status.days_until, 4)
        self.assertFalse(status.due_today)
        self.assertTrue(status.send_immediately)

    def test_occurrence_today_counts_as_zero_days(self):
        status = self.planner.reminder_status(self.event, "Shenshai", date(2023, 8, 16))

        self.assertEqual(status.days_until, "Today")
        self.assertFalse(status.due_today)
        self.assertTrue(status.send_immediately)

    def test_outside_lead_time(self):
        status = self.planner.reminder_status(self.event, "Shenshai", date(2023, 7, 1))

        self.assertFalse(status.due_today)
        self.assertFalse(status.send_immediately)

    def test_disabled_reminders_never_fire(self):
        event = {**self.event, "reminder_days": 0}

        status = self.planner.reminder_status(event, "Shenshai", date(2023, 8, 16))

        self.assertFalse(status.due_today)
        self.assertFalse(status.send_immediately)

    @patch("zocal.use_cases.reminders.LOGGER")
    def test_upcoming_reminders_skips_disabled_and_invalid(self, mock_logger):
        # Arrange
        events = [
            self.event,
            {**self.event, "id": "evt-2", "reminder_days": 0},
            {**self.event, "id": "evt-3", "reminder_days": 5},
            {**self.event, "id": "evt-4", "event_date": "2023-02-30"},
        ]

        # Act
        statuses = self.planner.upcoming_reminders(events, "Shenshai", date(2023, 8, 9))

        # Assert
        self.assertEqual([s.event_id for s in statuses], ["evt-1"])
        self.assertEqual(mock_logger.error.call_count, 2)


if __name__ == "__main__":
    unittest.main()
