from __future__ import annotations

import unittest
from datetime import date
from datetime import datetime

from zocal.utils.date_utils import add_days
from zocal.utils.date_utils import days_between
from zocal.utils.date_utils import format_display_date
from zocal.utils.date_utils import is_leap_year
from zocal.utils.date_utils import parse_gregorian_date
from zocal.utils.date_utils import to_civil_date
from zocal.utils.exceptions import InvalidDateError


class TestIsLeapYear(unittest.TestCase):
    def test_gregorian_rules(self):
        self.assertTrue(is_leap_year(2024))
        self.assertTrue(is_leap_year(2000))
        self.assertFalse(is_leap_year(2023))
        self.assertFalse(is_leap_year(1900))


class TestParseGregorianDate(unittest.TestCase):
    def test_iso_date(self):
        self.assertEqual(parse_gregorian_date("2023-08-16"), date(2023, 8, 16))

    def test_iso_datetime_keeps_calendar_date(self):
        self.assertEqual(parse_gregorian_date("2023-08-16T23:30:00"), date(2023, 8, 16))

    def test_date_objects_pass_through(self):
        self.assertEqual(parse_gregorian_date(datetime(2023, 8, 16, 5)), date(2023, 8, 16))
        self.assertEqual(parse_gregorian_date(date(2023, 8, 16)), date(2023, 8, 16))

    def test_rejects_impossible_day(self):
        with self.assertRaises(InvalidDateError) as ctx:
            parse_gregorian_date("2023-02-29")

        self.assertEqual(ctx.exception.code, "invalid_date")
        self.assertEqual(ctx.exception.details, {"value": "'2023-02-29'"})

    def test_rejects_empty_and_other_types(self):
        for value in ("", "   ", None, 20230816):
            with self.subTest(value=value):
                with self.assertRaises(InvalidDateError) as ctx:
                    parse_gregorian_date(value)
                self.assertEqual(ctx.exception.message, "Invalid date format")


class TestDateArithmetic(unittest.TestCase):
    def test_to_civil_date(self):
        self.assertEqual(to_civil_date(datetime(2024, 3, 20, 4, 0)), date(2024, 3, 20))

    def test_add_days_across_leap_day(self):
        self.assertEqual(add_days(date(2024, 2, 28), 2), date(2024, 3, 1))
        self.assertEqual(add_days(date(2024, 3, 1), -1), date(2024, 2, 29))

    def test_days_between(self):
        self.assertEqual(days_between(date(2023, 8, 10), date(2023, 8, 16)), 6)
        self.assertEqual(days_between(date(2023, 8, 16), date(2023, 8, 10)), -6)
        self.assertEqual(days_between(datetime(2023, 8, 10, 23), date(2023, 8, 11)), 1)

    def test_format_display_date(self):
        self.assertEqual(format_display_date(date(2020, 12, 5)), "05 Dec 2020")


if __name__ == "__main__":
    unittest.main()
