"""Tests for times of day."""

import unittest
from decimal import Decimal

from bigtime.space_time.time_of_day import Time, format_seconds
from bigtime.space_time.timescales import Timescale


class TestTime(unittest.TestCase):
    """Test cases for Time."""

    def test_validation(self):
        with self.assertRaises(ValueError):
            Time(24, 0, 0)
        with self.assertRaises(ValueError):
            Time(0, 60, 0)
        with self.assertRaises(ValueError):
            Time(0, 0, 60)
        with self.assertRaises(ValueError):
            Time(0, 0, "-0.001")
        self.assertEqual(Time(23, 59, "59.999").seconds, Decimal("59.999"))

    def test_fraction(self):
        self.assertEqual(Time(12, 0, 0).fraction(), Decimal("0.5"))
        self.assertEqual(
            str(Time(12, 30, 0).fraction()), "0.5208333333333333333333333333333333"
        )
        self.assertEqual(Time.zero(Timescale.UTC).fraction(), 0)

    def test_from_fraction(self):
        self.assertEqual(Time.from_fraction("0.5", Timescale.TT), Time(12, 0, 0, Timescale.TT))
        self.assertEqual(Time.from_fraction("0.81"), Time(19, 26, 24))
        with self.assertRaises(ValueError):
            Time.from_fraction(1)
        with self.assertRaises(ValueError):
            Time.from_fraction("-0.1")

    def test_from_seconds_of_day(self):
        self.assertEqual(Time.from_seconds_of_day("4142.5"), Time(1, 9, "2.5"))
        self.assertEqual(Time(1, 9, "2.5").seconds_of_day(), Decimal("4142.5"))

    def test_equality_ignores_trailing_zeros(self):
        self.assertEqual(Time(1, 2, "3.000"), Time(1, 2, 3))
        self.assertEqual(hash(Time(1, 2, "3.000")), hash(Time(1, 2, 3)))

    def test_ordering(self):
        self.assertLess(Time(23, 0, 0, Timescale.TAI), Time(0, 0, 0, Timescale.TT))
        self.assertLess(Time(1, 0, "0.5"), Time(1, 0, "0.51"))

    def test_str(self):
        self.assertEqual(str(Time(1, 9, "2.0", Timescale.TT)), "01:09:02.0 TT")
        self.assertEqual(format_seconds(Decimal("6E+1")), "60")
        self.assertEqual(format_seconds(Decimal("0")), "00")


if __name__ == "__main__":
    unittest.main()
