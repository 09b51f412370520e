"""Proleptic Julian and Gregorian calendars.

Both calendars are extended without limit in either direction, with a year 0
that is a leap year. Day counts are continuous: day 1.0 of a year is
January 1 at 0h, day 1.5 is January 1 at 12h.
"""

from decimal import Decimal
from enum import Enum
from typing import List

from .decimals import Number, big, exact_arithmetic

SHORT_YEAR = 365
LONG_YEAR = 366

_MONTH_LENGTHS: List[int] = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]


def _multiples_before(year: int, k: int) -> int:
    """Signed count of multiples of k between 0 and year.

    Differences of this count give the number of multiples in [a, b) for any
    a <= b, on both sides of year 0.
    """
    return -(-year // k)


class Calendar(Enum):
    """A proleptic calendar.

    Members are declared in sort order: JULIAN sorts before GREGORIAN.
    """

    JULIAN = ("JU", 4, 1461, "1721056.5")
    GREGORIAN = ("GR", 400, 146097, "1721058.5")

    def __init__(self, abbreviation: str, full_cycle_years: int, full_cycle_days: int, jan0: str):
        self.abbreviation = abbreviation
        self.full_cycle_years = full_cycle_years
        self.full_cycle_days = full_cycle_days
        # Julian Date of January 0.0 (December 31, 0h) of year 0
        self.julian_date_jan0_year0 = Decimal(jan0)

    @property
    def order(self) -> int:
        return list(Calendar).index(self)

    def is_leap(self, year: int) -> bool:
        if year % 4 != 0:
            return False
        if self is Calendar.JULIAN:
            return True
        return year % 100 != 0 or year % 400 == 0

    def num_days_in(self, year: int) -> int:
        return LONG_YEAR if self.is_leap(year) else SHORT_YEAR

    def month_length(self, year: int, month: int) -> int:
        """Number of days in a month.

        Raises:
            ValueError: If month is not between 1 and 12
        """
        if not 1 <= month <= 12:
            raise ValueError(f"Month must be between 1 and 12, got {month}")
        if month == 2 and self.is_leap(year):
            return 29
        return _MONTH_LENGTHS[month - 1]

    def leap_years_between(self, start_inclusive: int, end_exclusive: int) -> int:
        """Count leap years in [start, end); negative when the range is reversed."""

        def count(k: int) -> int:
            return _multiples_before(end_exclusive, k) - _multiples_before(start_inclusive, k)

        if self is Calendar.JULIAN:
            return count(4)
        return count(4) - count(100) + count(400)

    def days_in_complete_years(self, start_inclusive: int, end_exclusive: int) -> int:
        """Total days in the years of the half-open range [start, end).

        A reversed range gives the negated count of the forward range.
        """
        years = end_exclusive - start_inclusive
        return SHORT_YEAR * years + self.leap_years_between(start_inclusive, end_exclusive)

    @exact_arithmetic
    def days_from_jan0(self, year: int, month: int, day: Number) -> Decimal:
        """Days elapsed since January 0.0 of the year.

        Args:
            year: Year number, any integer
            month: Month (1-12)
            day: Day of the month, possibly fractional

        Returns:
            Continuous day of the year (Jan 1 at 0h is 1.0)
        """
        self.month_length(year, month)
        before = sum(self.month_length(year, m) for m in range(1, month))
        return big(day) + before

    @exact_arithmetic
    def days_from_dec32(self, year: int, month: int, day: Number) -> Decimal:
        """Days remaining until December 32.0, which is January 1.0 of the next year.

        Args:
            year: Year number, any integer
            month: Month (1-12)
            day: Day of the month, possibly fractional

        Returns:
            Days from the given moment to the start of the following year
        """
        length = self.month_length(year, month)
        after = sum(self.month_length(year, m) for m in range(month + 1, 13))
        return after + (length + 1 - big(day))

    def __str__(self) -> str:
        return self.abbreviation
