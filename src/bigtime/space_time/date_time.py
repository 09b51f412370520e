"""Moments in time: a calendar date plus a time of day on a timescale."""

from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal
from functools import total_ordering
from typing import TYPE_CHECKING, Optional

from ..constants import SECONDS_PER_DAY
from .calendars import Calendar
from .date import Date
from .decimals import EXACT, Number, big, divide, exact_arithmetic, floor, round_to
from .rounding import RoundSeconds, rollover
from .time_of_day import Time, format_seconds
from .timescales import Timescale

if TYPE_CHECKING:
    from ..config import TimescaleConfig
    from .julian import JulianDate

HALF_DAY_SECONDS = SECONDS_PER_DAY // 2


@total_ordering
@dataclass(frozen=True)
class DateTime:
    """A date in some calendar at a time on some timescale.

    Calendar and timescale are independent: any calendar pairs with any
    timescale.
    """

    date: Date
    time: Time

    def __post_init__(self):
        if not isinstance(self.date, Date):
            raise ValueError(f"Expected a Date, got {self.date!r}")
        if not isinstance(self.time, Time):
            raise ValueError(f"Expected a Time, got {self.time!r}")

    @classmethod
    def of(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        seconds: Number = 0,
        calendar: Calendar = Calendar.GREGORIAN,
        timescale: Timescale = Timescale.TAI,
    ) -> "DateTime":
        return cls(Date(year, month, day, calendar), Time(hour, minute, big(seconds), timescale))

    @classmethod
    def gregorian(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        seconds: Number = 0,
        timescale: Timescale = Timescale.TAI,
    ) -> "DateTime":
        return cls.of(year, month, day, hour, minute, seconds, Calendar.GREGORIAN, timescale)

    @classmethod
    def julian(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        seconds: Number = 0,
        timescale: Timescale = Timescale.TAI,
    ) -> "DateTime":
        return cls.of(year, month, day, hour, minute, seconds, Calendar.JULIAN, timescale)

    @classmethod
    def from_fraction(
        cls, date: Date, fraction: Number, timescale: Timescale = Timescale.TAI
    ) -> "DateTime":
        return cls(date, Time.from_fraction(fraction, timescale))

    @classmethod
    def from_julian_date(
        cls, julian_date: "JulianDate", calendar: Calendar = Calendar.GREGORIAN
    ) -> "DateTime":
        from .julian_calc import JulianDateConverter

        return JulianDateConverter.using(calendar).to_date_time(julian_date)

    @classmethod
    @exact_arithmetic
    def from_julian_seconds(
        cls, seconds: Number, calendar: Calendar, timescale: Timescale
    ) -> "DateTime":
        """Inverse of :meth:`julian_seconds`.

        Args:
            seconds: Julian Date multiplied by 86400
            calendar: Calendar of the result
            timescale: Timescale of the result
        """
        from .julian_calc import JulianDateConverter

        since_noon = big(seconds) - HALF_DAY_SECONDS
        day_number = floor(since_noon) // SECONDS_PER_DAY
        seconds_of_day = since_noon - day_number * SECONDS_PER_DAY

        converter = JulianDateConverter.using(calendar)
        year, month, day, _ = converter.to_date_parts(Decimal(day_number) + Decimal("0.5"))
        return cls(
            Date(year, month, day, calendar),
            Time.from_seconds_of_day(seconds_of_day, timescale),
        )

    @property
    def calendar(self) -> Calendar:
        return self.date.calendar

    @property
    def timescale(self) -> Timescale:
        return self.time.timescale

    @property
    def year(self) -> int:
        return self.date.year

    @property
    def month(self) -> int:
        return self.date.month

    @property
    def day(self) -> int:
        return self.date.day

    @property
    def hour(self) -> int:
        return self.time.hour

    @property
    def minute(self) -> int:
        return self.time.minute

    @property
    def seconds(self) -> Decimal:
        return self.time.seconds

    def fractional_day(self) -> Decimal:
        """Day of the month plus the elapsed fraction of that day."""
        return EXACT.add(self.day, self.time.fraction())

    def to_julian_date(self) -> "JulianDate":
        from .julian_calc import JulianDateConverter

        return JulianDateConverter.using(self.calendar).to_julian_date(self)

    @exact_arithmetic
    def julian_seconds(self) -> Decimal:
        """Julian Date multiplied by 86400, computed without any division."""
        return self.date.jd(self.timescale).jd * SECONDS_PER_DAY + self.time.seconds_of_day()

    def convert_to(
        self, timescale: Timescale, config: Optional["TimescaleConfig"] = None
    ) -> Optional["DateTime"]:
        """The same instant on another timescale, or None if it is undefined there."""
        from .timescales import convert_to

        return convert_to(timescale, self, config)

    def with_time(self, time: Time) -> "DateTime":
        return DateTime(self.date, time)

    def round_seconds(self, places: int, rounding: str = ROUND_HALF_EVEN) -> "DateTime":
        """Round the seconds, carrying into the next minute when they reach 60.

        Args:
            places: Decimal places to keep; -1 rounds to tens of seconds
            rounding: A ``decimal`` rounding mode

        Returns:
            The rounded DateTime
        """
        result = RoundSeconds(places, rounding).apply(self.seconds)
        if result.overflows:
            return rollover(self)
        return self.with_time(self.time.with_seconds(result.value))

    def _maybe_round(self, places: Optional[int], rounding: str) -> "DateTime":
        return self if places is None else self.round_seconds(places, rounding)

    def plus_minus_seconds(
        self, seconds: Number, places: Optional[int] = None, rounding: str = ROUND_HALF_EVEN
    ) -> "DateTime":
        """Shift by a signed number of seconds, staying on the same timescale."""
        shifted = EXACT.add(self.julian_seconds(), big(seconds))
        result = DateTime.from_julian_seconds(shifted, self.calendar, self.timescale)
        return result._maybe_round(places, rounding)

    def plus_minus_days(
        self, days: Number, places: Optional[int] = None, rounding: str = ROUND_HALF_EVEN
    ) -> "DateTime":
        """Shift by a signed, possibly fractional, number of days."""
        return self.plus_minus_seconds(EXACT.multiply(big(days), SECONDS_PER_DAY), places, rounding)

    def seconds_from(
        self, start: "DateTime", places: Optional[int] = None, rounding: str = ROUND_HALF_EVEN
    ) -> Decimal:
        """Seconds elapsed from ``start`` to this moment.

        Raises:
            ValueError: If the two moments are on different timescales
        """
        if start.timescale is not self.timescale:
            raise ValueError(
                f"Cannot subtract {start.timescale.name} from {self.timescale.name}: "
                "convert to a common timescale first"
            )
        elapsed = EXACT.subtract(self.julian_seconds(), start.julian_seconds())
        return elapsed if places is None else round_to(elapsed, places, rounding)

    def days_from(
        self, start: "DateTime", places: Optional[int] = None, rounding: str = ROUND_HALF_EVEN
    ) -> Decimal:
        """Days elapsed from ``start`` to this moment.

        Raises:
            ValueError: If the two moments are on different timescales
        """
        days = divide(self.seconds_from(start), SECONDS_PER_DAY)
        return days if places is None else round_to(days, places, rounding)

    def __lt__(self, other: "DateTime") -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return (self.date._key(), self.time._key()) < (other.date._key(), other.time._key())

    def __str__(self) -> str:
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d} "
            f"{self.hour:02d}:{self.minute:02d}:{format_seconds(self.seconds)} "
            f"{self.calendar.abbreviation} {self.timescale.name}"
        )
