"""Time of day on a timescale."""

from dataclasses import dataclass
from decimal import Decimal
from functools import total_ordering
from typing import Tuple

from ..constants import SECONDS_PER_DAY, SECONDS_PER_HOUR, SECONDS_PER_MINUTE
from .decimals import EXACT, Number, big, divide, exact_arithmetic
from .timescales import Timescale


def format_seconds(seconds: Decimal) -> str:
    """Seconds with a two digit integer part and whatever places they carry."""
    whole, _, fraction = format(seconds, "f").partition(".")
    return whole.zfill(2) + (f".{fraction}" if fraction else "")


@total_ordering
@dataclass(frozen=True)
class Time:
    """Hour, minute and seconds on a timescale.

    Seconds are a Decimal in [0, 60); leap-second values of 60 and above are
    not representable.
    """

    hour: int
    minute: int
    seconds: Decimal = Decimal(0)
    timescale: Timescale = Timescale.TAI

    def __post_init__(self):
        if not isinstance(self.timescale, Timescale):
            raise ValueError(f"Unknown timescale: {self.timescale!r}")
        for name, upper in (("hour", 23), ("minute", 59)):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name.capitalize()} must be an integer, got {value!r}")
            if not 0 <= value <= upper:
                raise ValueError(f"{name.capitalize()} must be between 0 and {upper}, got {value}")
        seconds = big(self.seconds)
        if not 0 <= seconds < SECONDS_PER_MINUTE:
            raise ValueError(f"Seconds must be at least 0 and less than 60, got {seconds}")
        object.__setattr__(self, "seconds", seconds)

    @classmethod
    def zero(cls, timescale: Timescale = Timescale.TAI) -> "Time":
        return cls(0, 0, Decimal(0), timescale)

    @classmethod
    @exact_arithmetic
    def from_seconds_of_day(cls, seconds: Number, timescale: Timescale = Timescale.TAI) -> "Time":
        """Build a Time from seconds elapsed since 0h.

        Raises:
            ValueError: If seconds is outside [0, 86400)
        """
        seconds = big(seconds)
        if not 0 <= seconds < SECONDS_PER_DAY:
            raise ValueError(f"Seconds of day must be in [0, 86400), got {seconds}")
        hour = int(seconds // SECONDS_PER_HOUR)
        seconds -= hour * SECONDS_PER_HOUR
        minute = int(seconds // SECONDS_PER_MINUTE)
        seconds -= minute * SECONDS_PER_MINUTE
        return cls(hour, minute, seconds, timescale)

    @classmethod
    def from_fraction(cls, fraction: Number, timescale: Timescale = Timescale.TAI) -> "Time":
        """Build a Time from a fraction of a day.

        Args:
            fraction: Fraction of the day elapsed, in [0, 1)
            timescale: Timescale of the result

        Raises:
            ValueError: If fraction is outside [0, 1)
        """
        fraction = big(fraction)
        if not 0 <= fraction < 1:
            raise ValueError(f"Fraction of day must be in [0, 1), got {fraction}")
        return cls.from_seconds_of_day(EXACT.multiply(fraction, SECONDS_PER_DAY), timescale)

    @exact_arithmetic
    def seconds_of_day(self) -> Decimal:
        return self.hour * SECONDS_PER_HOUR + self.minute * SECONDS_PER_MINUTE + self.seconds

    def fraction(self) -> Decimal:
        """Fraction of the day elapsed at this time."""
        return divide(self.seconds_of_day(), SECONDS_PER_DAY)

    def with_seconds(self, seconds: Number) -> "Time":
        return Time(self.hour, self.minute, big(seconds), self.timescale)

    def _key(self) -> Tuple[int, int, int, Decimal]:
        return (self.timescale.order, self.hour, self.minute, self.seconds)

    def __lt__(self, other: "Time") -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._key() < other._key()

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}:{format_seconds(self.seconds)} {self.timescale.name}"
