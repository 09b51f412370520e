"""Calendar dates with unbounded years."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from functools import total_ordering
from typing import TYPE_CHECKING, NamedTuple, Optional, Tuple

from .calendars import Calendar
from .decimals import EXACT, floor

if TYPE_CHECKING:
    from .julian import JulianDate
    from .timescales import Timescale

# Larger day steps go through the Julian Date instead of walking day by day
DAY_WALK_LIMIT = 62


class Weekday(Enum):
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


class DayCursor(NamedTuple):
    """Position reached while stepping a date one day at a time."""

    year: int
    month: int
    day: int


def next_day(cursor: DayCursor, calendar: Calendar) -> DayCursor:
    year, month, day = cursor
    if day < calendar.month_length(year, month):
        return DayCursor(year, month, day + 1)
    if month < 12:
        return DayCursor(year, month + 1, 1)
    return DayCursor(year + 1, 1, 1)


def previous_day(cursor: DayCursor, calendar: Calendar) -> DayCursor:
    year, month, day = cursor
    if day > 1:
        return DayCursor(year, month, day - 1)
    if month > 1:
        return DayCursor(year, month - 1, calendar.month_length(year, month - 1))
    return DayCursor(year - 1, 12, 31)


def _check_days(days) -> None:
    if isinstance(days, bool) or not isinstance(days, int):
        raise ValueError(f"Days must be an integer, got {days!r}")


@total_ordering
@dataclass(frozen=True)
class Date:
    """A day in a proleptic calendar.

    Dates order by calendar first (Julian before Gregorian), then year,
    month and day. Dates in different calendars are never equal, even when
    they name the same day.
    """

    year: int
    month: int
    day: int
    calendar: Calendar = Calendar.GREGORIAN

    def __post_init__(self):
        if not isinstance(self.calendar, Calendar):
            raise ValueError(f"Unknown calendar: {self.calendar!r}")
        for name in ("year", "month", "day"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name.capitalize()} must be an integer, got {value!r}")
        if not 1 <= self.month <= 12:
            raise ValueError(f"Month must be between 1 and 12, got {self.month}")
        length = self.calendar.month_length(self.year, self.month)
        if not 1 <= self.day <= length:
            raise ValueError(
                f"Day must be between 1 and {length} for {self.year}-{self.month:02d} "
                f"({self.calendar.name.lower()}), got {self.day}"
            )

    @classmethod
    def gregorian(cls, year: int, month: int, day: int) -> "Date":
        return cls(year, month, day, Calendar.GREGORIAN)

    @classmethod
    def julian(cls, year: int, month: int, day: int) -> "Date":
        return cls(year, month, day, Calendar.JULIAN)

    def _key(self) -> Tuple[int, int, int, int]:
        return (self.calendar.order, self.year, self.month, self.day)

    def __lt__(self, other: "Date") -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() < other._key()

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d} {self.calendar.abbreviation}"

    @property
    def cursor(self) -> DayCursor:
        return DayCursor(self.year, self.month, self.day)

    def _at(self, cursor: DayCursor) -> "Date":
        return Date(cursor.year, cursor.month, cursor.day, self.calendar)

    def start_of_month(self) -> "Date":
        return Date(self.year, self.month, 1, self.calendar)

    def end_of_month(self) -> "Date":
        return Date(self.year, self.month, self.month_length(), self.calendar)

    def start_of_year(self) -> "Date":
        return Date(self.year, 1, 1, self.calendar)

    def end_of_year(self) -> "Date":
        return Date(self.year, 12, 31, self.calendar)

    def month_length(self) -> int:
        return self.calendar.month_length(self.year, self.month)

    def is_leap_year(self) -> bool:
        return self.calendar.is_leap(self.year)

    def day_of_year(self) -> int:
        """Ordinal day within the year, January 1 being 1."""
        return int(self.calendar.days_from_jan0(self.year, self.month, self.day))

    def next(self) -> "Date":
        return self._at(next_day(self.cursor, self.calendar))

    def previous(self) -> "Date":
        return self._at(previous_day(self.cursor, self.calendar))

    def plus_days(self, days: int) -> "Date":
        """Date a number of days later.

        Raises:
            ValueError: If days is negative
        """
        _check_days(days)
        if days < 0:
            raise ValueError(f"Days must not be negative, got {days}")
        return self.plus_or_minus_days(days)

    def minus_days(self, days: int) -> "Date":
        """Date a number of days earlier.

        Raises:
            ValueError: If days is negative
        """
        _check_days(days)
        if days < 0:
            raise ValueError(f"Days must not be negative, got {days}")
        return self.plus_or_minus_days(-days)

    def plus_or_minus_days(self, days: int) -> "Date":
        """Date shifted by a signed whole number of days."""
        _check_days(days)
        if abs(days) > DAY_WALK_LIMIT:
            from .julian import JulianDate

            midnight = self.jd()
            shifted = JulianDate(EXACT.add(midnight.jd, days), midnight.timescale)
            return shifted.to_date_time(self.calendar).date

        step = next_day if days > 0 else previous_day
        cursor = self.cursor
        for _ in range(abs(days)):
            cursor = step(cursor, self.calendar)
        return self._at(cursor)

    def jd(self, timescale: Optional["Timescale"] = None) -> "JulianDate":
        """Julian Date of 0h on this day.

        Args:
            timescale: Timescale to attach, TAI when omitted

        Returns:
            A JulianDate whose fractional part is 0.5
        """
        from .julian_calc import JulianDateConverter
        from .timescales import Timescale

        timescale = timescale or Timescale.TAI
        converter = JulianDateConverter.using(self.calendar)
        return converter.to_julian_date_parts(self.year, self.month, self.day, timescale)

    def weekday(self) -> Weekday:
        # JD 0.0 fell on a Monday noon, so the day index is floor(JD + 1.5) mod 7
        return Weekday(floor(EXACT.add(self.jd().jd, Decimal("1.5"))) % 7)

    def convert_to(self, calendar: Calendar) -> "Date":
        """Express the same day in another calendar.

        Raises:
            ValueError: If the date is already in that calendar
        """
        if calendar is self.calendar:
            raise ValueError(f"{self} is already in the {calendar.name.lower()} calendar")
        return self.jd().to_date_time(calendar).date
