"""Tests for seconds rounding and rollover."""

import unittest
from decimal import ROUND_CEILING, ROUND_HALF_EVEN, Decimal

from bigtime.space_time.calendars import Calendar
from bigtime.space_time.date_time import DateTime
from bigtime.space_time.rounding import (
    OdometerReading,
    RoundSeconds,
    next_minute,
    rollover,
)
from bigtime.space_time.timescales import Timescale


class TestRoundSeconds(unittest.TestCase):
    """Test cases for RoundSeconds."""

    def test_rounds_without_overflow(self):
        result = RoundSeconds(2).apply("12.345")
        self.assertEqual(result.value, Decimal("12.34"))
        self.assertFalse(result.overflows)

        result = RoundSeconds(2, ROUND_CEILING).apply("12.341")
        self.assertEqual(result.value, Decimal("12.35"))

    def test_overflow_at_sixty(self):
        result = RoundSeconds(2, ROUND_HALF_EVEN).apply("59.999")
        self.assertEqual(result.value, Decimal(60))
        self.assertTrue(result.overflows)

        result = RoundSeconds(-1).apply("55")
        self.assertTrue(result.overflows)
        self.assertFalse(RoundSeconds(-1).apply("54").overflows)

    def test_rejects_sixty_and_above(self):
        with self.assertRaises(ValueError):
            RoundSeconds(2).apply(60)
        with self.assertRaises(ValueError):
            RoundSeconds(2).apply("-60.5")

    def test_places_must_be_at_least_minus_one(self):
        with self.assertRaises(ValueError):
            RoundSeconds(-2)


class TestRollover(unittest.TestCase):
    """Test cases for the minute odometer."""

    def test_next_minute_carries(self):
        self.assertEqual(
            next_minute(OdometerReading(2025, 12, 31, 23, 59), Calendar.GREGORIAN),
            OdometerReading(2026, 1, 1, 0, 0),
        )
        self.assertEqual(
            next_minute(OdometerReading(2025, 6, 30, 10, 59), Calendar.GREGORIAN),
            OdometerReading(2025, 6, 30, 11, 0),
        )
        self.assertEqual(
            next_minute(OdometerReading(2025, 6, 30, 10, 5), Calendar.GREGORIAN),
            OdometerReading(2025, 6, 30, 10, 6),
        )

    def test_leap_day_depends_on_calendar(self):
        self.assertEqual(
            next_minute(OdometerReading(1960, 2, 28, 23, 59), Calendar.GREGORIAN),
            OdometerReading(1960, 2, 29, 0, 0),
        )
        self.assertEqual(
            next_minute(OdometerReading(1960, 2, 29, 23, 59), Calendar.GREGORIAN),
            OdometerReading(1960, 3, 1, 0, 0),
        )
        self.assertEqual(
            next_minute(OdometerReading(1900, 2, 28, 23, 59), Calendar.GREGORIAN),
            OdometerReading(1900, 3, 1, 0, 0),
        )
        self.assertEqual(
            next_minute(OdometerReading(1900, 2, 28, 23, 59), Calendar.JULIAN),
            OdometerReading(1900, 2, 29, 0, 0),
        )

    def test_rollover_keeps_calendar_and_timescale(self):
        moment = DateTime.julian(-1, 12, 31, 23, 59, "59.9", Timescale.UT1)
        self.assertEqual(rollover(moment), DateTime.julian(0, 1, 1, 0, 0, 0, Timescale.UT1))

    def test_round_seconds_uses_rollover(self):
        moment = DateTime.gregorian(1960, 2, 28, 23, 59, "59.9996")
        self.assertEqual(moment.round_seconds(3), DateTime.gregorian(1960, 2, 29, 0, 0, 0))


if __name__ == "__main__":
    unittest.main()
