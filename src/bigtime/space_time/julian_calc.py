"""Julian Date calculation module.

Closed-form conversion between calendar dates and Julian Dates for any
integer year. Years are split into whole leap cycles (4 Julian or 400
Gregorian years, which always hold the same number of days) and a remainder,
so the cost does not grow with the distance from year 0.

Non-negative years count forward from January 0.0 of year 0. Negative years
count backward from January 1.0 of year 0, starting at ``year + 1`` so that
cycle boundaries land on cycle-start leap years, and measure the day within
the year from its end (December 32.0).
"""

from decimal import Decimal
from typing import Dict, Tuple

from .calendars import LONG_YEAR, Calendar
from .date import Date
from .date_time import DateTime
from .decimals import Number, big, decimals, exact_arithmetic, floor
from .julian import JulianDate
from .time_of_day import Time
from .timescales import Timescale


class CalendarMismatchError(ValueError):
    """Raised when a converter is given a date in a different calendar."""


class JulianDateConverter:
    """Converts between dates in one calendar and Julian Dates."""

    _converters: Dict[Calendar, "JulianDateConverter"] = {}

    def __init__(self, calendar: Calendar):
        self.calendar = calendar

    @classmethod
    def using(cls, calendar: Calendar) -> "JulianDateConverter":
        """Converter for a calendar. Converters hold no state beyond it."""
        if calendar not in cls._converters:
            cls._converters[calendar] = cls(calendar)
        return cls._converters[calendar]

    def to_julian_date(self, date_time: DateTime) -> JulianDate:
        """Julian Date of a moment on the DateTime's own timescale.

        Args:
            date_time: Moment in this converter's calendar

        Returns:
            The Julian Date, tied to the DateTime's timescale

        Raises:
            CalendarMismatchError: If the DateTime is in another calendar
        """
        if date_time.calendar is not self.calendar:
            raise CalendarMismatchError(
                f"{date_time} is not in the {self.calendar.name.lower()} calendar"
            )
        return self.to_julian_date_parts(
            date_time.year, date_time.month, date_time.fractional_day(), date_time.timescale
        )

    @exact_arithmetic
    def to_julian_date_parts(
        self, year: int, month: int, fractional_day: Number, timescale: Timescale
    ) -> JulianDate:
        """Julian Date of a year, month and fractional day of the month.

        Args:
            year: Any integer year
            month: Month (1-12)
            fractional_day: Day of the month; 4.5 is the 4th at noon
            timescale: Timescale to attach to the result

        Returns:
            JulianDate for that moment
        """
        calendar = self.calendar
        cycle_years = calendar.full_cycle_years
        cycle_days = calendar.full_cycle_days
        fractional_day = big(fractional_day)

        if year >= 0:
            num_cycles = year // cycle_years
            full_cycles = num_cycles * cycle_days
            remainder_years = calendar.days_in_complete_years(num_cycles * cycle_years, year)
            remainder_days = calendar.days_from_jan0(year, month, fractional_day)
            jd = calendar.julian_date_jan0_year0 + full_cycles + remainder_years + remainder_days
        else:
            biased_year = year + 1
            # truncate toward year 0
            num_cycles = -(-biased_year // cycle_years)
            full_cycles = abs(num_cycles * cycle_days)
            remainder_years = calendar.days_in_complete_years(
                biased_year, num_cycles * cycle_years
            )
            remainder_days = calendar.days_from_dec32(year, month, fractional_day)
            # January 0.0 of year 0 is already one day into year -1
            overhang = 1
            jd = calendar.julian_date_jan0_year0 + overhang - (
                full_cycles + remainder_years + remainder_days
            )

        return JulianDate(jd, timescale)

    def to_date_time(self, julian_date: JulianDate) -> DateTime:
        """Date and time in this calendar of a Julian Date.

        Args:
            julian_date: Julian Date on any timescale

        Returns:
            DateTime on the Julian Date's timescale
        """
        year, month, day, fraction = self.to_date_parts(julian_date.jd)
        date = Date(year, month, day, self.calendar)
        return DateTime(date, Time.from_fraction(fraction, julian_date.timescale))

    @exact_arithmetic
    def to_date_parts(self, jd: Number) -> Tuple[int, int, int, Decimal]:
        """Split a Julian Date into year, month, day and fraction of the day."""
        calendar = self.calendar
        cycle_years = calendar.full_cycle_years
        cycle_days = calendar.full_cycle_days

        # January 1.0 of year 0; every cycle boundary is a whole number of
        # cycles away from it on either side
        origin = calendar.julian_date_jan0_year0 + 1
        elapsed = big(jd) - origin

        num_cycles = floor(elapsed) // cycle_days
        year = num_cycles * cycle_years
        remaining = elapsed - num_cycles * cycle_days

        # No year is longer than LONG_YEAR, so this never overshoots
        estimate = floor(remaining) // LONG_YEAR
        remaining -= calendar.days_in_complete_years(year, year + estimate)
        year += estimate
        while remaining >= calendar.num_days_in(year):
            remaining -= calendar.num_days_in(year)
            year += 1

        month = 1
        while remaining >= calendar.month_length(year, month):
            remaining -= calendar.month_length(year, month)
            month += 1

        day = floor(remaining)
        fraction = decimals(remaining)
        return year, month, day + 1, fraction
