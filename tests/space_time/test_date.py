"""Tests for calendar dates."""

import unittest
from decimal import Decimal

from bigtime.space_time.calendars import Calendar
from bigtime.space_time.date import Date, DayCursor, Weekday, next_day, previous_day
from bigtime.space_time.timescales import Timescale


class TestDate(unittest.TestCase):
    """Test cases for Date construction, ordering and arithmetic."""

    def test_validation(self):
        with self.assertRaises(ValueError):
            Date.gregorian(2023, 2, 29)
        with self.assertRaises(ValueError):
            Date.gregorian(2023, 13, 1)
        with self.assertRaises(ValueError):
            Date.gregorian(2023, 4, 0)
        with self.assertRaises(ValueError):
            Date.gregorian(2023, 4, 31)
        with self.assertRaises(ValueError):
            Date.gregorian(1900, 2, 29)
        # valid in the Julian calendar
        self.assertEqual(Date.julian(1900, 2, 29).day, 29)

    def test_ordering_puts_calendar_first(self):
        self.assertLess(Date.julian(3000, 1, 1), Date.gregorian(-3000, 1, 1))
        self.assertLess(Date.gregorian(2024, 12, 31), Date.gregorian(2025, 1, 1))
        self.assertLess(Date.gregorian(-5, 6, 1), Date.gregorian(-4, 1, 1))
        self.assertNotEqual(Date.julian(2000, 1, 1), Date.gregorian(2000, 1, 1))
        self.assertEqual(Date.gregorian(2000, 1, 1), Date(2000, 1, 1, Calendar.GREGORIAN))

    def test_str(self):
        self.assertEqual(str(Date.gregorian(2025, 1, 1)), "2025-01-01 GR")
        self.assertEqual(str(Date.julian(-4712, 1, 1)), "-4712-01-01 JU")

    def test_month_and_year_boundaries(self):
        date = Date.gregorian(2024, 2, 10)
        self.assertEqual(date.start_of_month(), Date.gregorian(2024, 2, 1))
        self.assertEqual(date.end_of_month(), Date.gregorian(2024, 2, 29))
        self.assertEqual(date.start_of_year(), Date.gregorian(2024, 1, 1))
        self.assertEqual(date.end_of_year(), Date.gregorian(2024, 12, 31))
        self.assertEqual(date.day_of_year(), 41)
        self.assertEqual(Date.gregorian(2024, 12, 31).day_of_year(), 366)

    def test_next_and_previous(self):
        self.assertEqual(Date.gregorian(2025, 12, 31).next(), Date.gregorian(2026, 1, 1))
        self.assertEqual(Date.gregorian(2026, 1, 1).previous(), Date.gregorian(2025, 12, 31))
        self.assertEqual(Date.gregorian(1960, 2, 28).next(), Date.gregorian(1960, 2, 29))
        self.assertEqual(Date.gregorian(1960, 2, 29).next(), Date.gregorian(1960, 3, 1))
        self.assertEqual(Date.gregorian(1900, 3, 1).previous(), Date.gregorian(1900, 2, 28))
        self.assertEqual(Date.julian(1900, 3, 1).previous(), Date.julian(1900, 2, 29))
        self.assertEqual(Date.gregorian(0, 1, 1).previous(), Date.gregorian(-1, 12, 31))

    def test_cursor_transitions_are_pure(self):
        cursor = DayCursor(2023, 12, 31)
        self.assertEqual(next_day(cursor, Calendar.GREGORIAN), DayCursor(2024, 1, 1))
        self.assertEqual(previous_day(DayCursor(2024, 3, 1), Calendar.GREGORIAN), DayCursor(2024, 2, 29))
        self.assertEqual(cursor, DayCursor(2023, 12, 31))

    def test_plus_and_minus_days(self):
        date = Date.gregorian(2000, 1, 1)
        self.assertEqual(date.plus_days(0), date)
        self.assertEqual(date.plus_days(31), Date.gregorian(2000, 2, 1))
        self.assertEqual(date.plus_days(366), Date.gregorian(2001, 1, 1))
        self.assertEqual(date.minus_days(1), Date.gregorian(1999, 12, 31))
        self.assertEqual(date.plus_or_minus_days(-365), Date.gregorian(1999, 1, 1))
        with self.assertRaises(ValueError):
            date.plus_days(-1)
        with self.assertRaises(ValueError):
            date.minus_days(-1)

    def test_day_counts_must_be_integers(self):
        date = Date.gregorian(2000, 1, 1)
        for days in (Decimal("2.5"), 2.0, "2", True):
            with self.assertRaises(ValueError):
                date.plus_or_minus_days(days)
        with self.assertRaises(ValueError):
            date.plus_days(Decimal("100.5"))
        with self.assertRaises(ValueError):
            date.minus_days("1")

    def test_large_steps_agree_with_walking(self):
        for calendar in Calendar:
            start = Date(-1, 11, 20, calendar)
            walked = start
            for _ in range(1000):
                walked = walked.next()
            self.assertEqual(start.plus_days(1000), walked)
            self.assertEqual(walked.minus_days(1000), start)

    def test_weekday(self):
        self.assertEqual(Date.gregorian(2000, 1, 1).weekday(), Weekday.SATURDAY)
        self.assertEqual(Date.gregorian(1957, 10, 4).weekday(), Weekday.FRIDAY)
        self.assertEqual(Date.julian(1582, 10, 4).weekday(), Weekday.THURSDAY)
        self.assertEqual(Date.gregorian(1582, 10, 15).weekday(), Weekday.FRIDAY)

    def test_convert_to(self):
        self.assertEqual(
            Date.gregorian(1582, 10, 15).convert_to(Calendar.JULIAN), Date.julian(1582, 10, 5)
        )
        self.assertEqual(
            Date.julian(-4712, 1, 1).convert_to(Calendar.GREGORIAN), Date.gregorian(-4713, 11, 24)
        )
        with self.assertRaises(ValueError):
            Date.gregorian(2000, 1, 1).convert_to(Calendar.GREGORIAN)

    def test_jd(self):
        jd = Date.gregorian(2000, 1, 1).jd(Timescale.TT)
        self.assertEqual(str(jd.jd), "2451544.5")
        self.assertEqual(jd.timescale, Timescale.TT)
        self.assertEqual(Date.gregorian(2000, 1, 1).jd().timescale, Timescale.TAI)


if __name__ == "__main__":
    unittest.main()
