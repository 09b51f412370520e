"""Rounding of seconds, and the carry into minutes, hours, days, months and years."""

import dataclasses
from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal
from typing import TYPE_CHECKING, NamedTuple

from ..constants import HOURS_PER_DAY, MINUTES_PER_HOUR, MONTHS_PER_YEAR, SECONDS_PER_MINUTE
from .calendars import Calendar
from .date import Date
from .decimals import Number, big, round_to
from .time_of_day import Time

if TYPE_CHECKING:
    from .date_time import DateTime


class RoundedSeconds(NamedTuple):
    value: Decimal
    # rounding reached a full minute
    overflows: bool


@dataclass(frozen=True)
class RoundSeconds:
    """Rounds seconds to a fixed number of decimal places.

    Attributes:
        places: Decimal places to keep, -1 to round to tens of seconds
        rounding: A ``decimal`` rounding mode
    """

    places: int
    rounding: str = ROUND_HALF_EVEN

    def __post_init__(self):
        if self.places < -1:
            raise ValueError(f"Places must be -1 or more, got {self.places}")

    def apply(self, seconds: Number) -> RoundedSeconds:
        """Round a seconds value.

        Args:
            seconds: Value below 60 in magnitude

        Returns:
            The rounded value and whether it reached 60

        Raises:
            ValueError: If seconds is 60 or more in magnitude
        """
        seconds = big(seconds)
        if not abs(seconds) < SECONDS_PER_MINUTE:
            raise ValueError(f"Seconds must be less than 60, got {seconds}")
        value = round_to(seconds, self.places, self.rounding)
        return RoundedSeconds(value, abs(value) >= SECONDS_PER_MINUTE)


class OdometerReading(NamedTuple):
    year: int
    month: int
    day: int
    hour: int
    minute: int


def next_minute(reading: OdometerReading, calendar: Calendar) -> OdometerReading:
    """Advance one minute, carrying as far up as needed."""
    year, month, day, hour, minute = reading
    minute += 1
    if minute == MINUTES_PER_HOUR:
        minute = 0
        hour += 1
    if hour == HOURS_PER_DAY:
        hour = 0
        day += 1
    if day > calendar.month_length(year, month):
        day = 1
        month += 1
    if month > MONTHS_PER_YEAR:
        month = 1
        year += 1
    return OdometerReading(year, month, day, hour, minute)


def rollover(date_time: "DateTime") -> "DateTime":
    """The start of the minute after ``date_time``, with seconds reset to 0."""
    reading = OdometerReading(
        date_time.year, date_time.month, date_time.day, date_time.hour, date_time.minute
    )
    year, month, day, hour, minute = next_minute(reading, date_time.calendar)
    return dataclasses.replace(
        date_time,
        date=Date(year, month, day, date_time.calendar),
        time=Time(hour, minute, Decimal(0), date_time.timescale),
    )
