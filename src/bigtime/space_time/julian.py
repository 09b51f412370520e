"""Julian Date values."""

from dataclasses import dataclass
from decimal import Decimal
from functools import total_ordering
from typing import TYPE_CHECKING

from ..constants import J2000 as J2000_JD
from ..constants import JULIAN_CENTURY_DAYS, MODIFIED_JD_ORIGIN
from .calendars import Calendar
from .decimals import EXACT, Number, big, decimals, divide
from .timescales import Timescale

if TYPE_CHECKING:
    from .date_time import DateTime


@total_ordering
@dataclass(frozen=True)
class JulianDate:
    """A continuous day count on a timescale.

    The number carries no calendar: the integer part changes at noon and the
    fractional part is 0.5 at midnight in every calendar.
    """

    jd: Decimal
    timescale: Timescale = Timescale.TAI

    def __post_init__(self):
        if not isinstance(self.timescale, Timescale):
            raise ValueError(f"Unknown timescale: {self.timescale!r}")
        object.__setattr__(self, "jd", big(self.jd))

    def modified_jd(self) -> Decimal:
        return EXACT.subtract(self.jd, MODIFIED_JD_ORIGIN)

    def days_since(self, other: "JulianDate") -> Decimal:
        return EXACT.subtract(self.jd, other.jd)

    def julian_centuries_since(self, other: "JulianDate") -> Decimal:
        """Julian centuries of 36525 days elapsed since ``other``."""
        return divide(self.days_since(other), JULIAN_CENTURY_DAYS)

    def fraction(self) -> Decimal:
        return decimals(self.jd)

    def no_fraction(self) -> int:
        return int(self.jd)

    def plus_days(self, days: Number) -> "JulianDate":
        return JulianDate(EXACT.add(self.jd, big(days)), self.timescale)

    def to_date_time(self, calendar: Calendar = Calendar.GREGORIAN) -> "DateTime":
        from .julian_calc import JulianDateConverter

        return JulianDateConverter.using(calendar).to_date_time(self)

    def __lt__(self, other: "JulianDate") -> bool:
        if not isinstance(other, JulianDate):
            return NotImplemented
        return (self.jd, self.timescale.order) < (other.jd, other.timescale.order)

    def __str__(self) -> str:
        return f"{self.jd} {self.timescale.name}"


J2000 = JulianDate(J2000_JD, Timescale.TT)
