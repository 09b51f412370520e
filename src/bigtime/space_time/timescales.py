"""Timescales and conversion between them.

Every timescale is described by a single function: its offset from TAI, in
seconds, at a given moment. Converting between two timescales adds the
difference of their offsets to the moment's Julian Date, expressed in
seconds. An offset that is not known at the requested moment makes the
whole conversion undefined, and that is reported as ``None``.
"""

import math
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, Optional

from ..config import TimescaleConfig
from ..constants import J2000, UT1_PLACES
from ..logging import get_logger
from .decimals import EXACT, big, exact_arithmetic, round_to

if TYPE_CHECKING:
    from .date_time import DateTime

logger = get_logger(__name__)

TT_MINUS_TAI = Decimal("32.184")
GPS_MINUS_TAI = Decimal(-19)
DEFAULT_UTC_MINUS_TAI = Decimal(-37)

# (year, month, day) in the Gregorian calendar
GPS_EPOCH = (1980, 1, 6)
LATEST_LEAP_SECOND = (2017, 1, 1)

# TDB - TT periodic terms
TDB_MEAN_ANOMALY_AT_J2000 = Decimal("357.53")
TDB_MEAN_ANOMALY_RATE = Decimal("0.9856003")
TDB_FIRST_TERM = Decimal("0.001658")
TDB_SECOND_TERM = Decimal("0.000014")


class Timescale(Enum):
    """A definition of elapsed time, related to the others through TAI.

    Members are declared in sort order.
    """

    TAI = "TAI"
    TT = "TT"
    GPS = "GPS"
    UTC = "UTC"
    UT1 = "UT1"
    TDB = "TDB"

    @property
    def order(self) -> int:
        return list(Timescale).index(self)

    def seconds_from_tai(
        self, when: "DateTime", config: Optional[TimescaleConfig] = None
    ) -> Optional[Decimal]:
        """Offset of this timescale from TAI at a moment.

        Args:
            when: The moment, in any calendar and timescale
            config: Overrides to apply; read from the environment when omitted

        Returns:
            This timescale minus TAI in seconds, or None when it is not defined
            at that moment

        Raises:
            ConfigurationError: If an environment override is malformed
        """
        if config is None:
            config = TimescaleConfig.from_env()
        return _OFFSETS[self](when, config)

    def convert_to(
        self, target: "Timescale", when: "DateTime", config: Optional[TimescaleConfig] = None
    ) -> Optional["DateTime"]:
        """Re-express a moment given on this timescale on another one."""
        if when.timescale is not self:
            raise ValueError(f"{when} is not on the {self.name} timescale")
        return convert_to(target, when, config)

    def __str__(self) -> str:
        return self.name


def _on_or_after(when: "DateTime", year_month_day) -> bool:
    from .calendars import Calendar
    from .date import Date

    date = when.date
    if date.calendar is not Calendar.GREGORIAN:
        date = date.convert_to(Calendar.GREGORIAN)
    return date >= Date.gregorian(*year_month_day)


def _tai(when: "DateTime", config: TimescaleConfig) -> Optional[Decimal]:
    return Decimal(0)


def _tt(when: "DateTime", config: TimescaleConfig) -> Optional[Decimal]:
    return TT_MINUS_TAI


def _gps(when: "DateTime", config: TimescaleConfig) -> Optional[Decimal]:
    if _on_or_after(when, GPS_EPOCH):
        return GPS_MINUS_TAI
    logger.debug(f"GPS is not defined before 1980-01-06: {when}")
    return None


def _utc(when: "DateTime", config: TimescaleConfig) -> Optional[Decimal]:
    if config.utc_minus_tai is not None:
        logger.debug(f"Using UTC-TAI override {config.utc_minus_tai}")
        return config.utc_minus_tai
    if _on_or_after(when, LATEST_LEAP_SECOND):
        return DEFAULT_UTC_MINUS_TAI
    logger.debug(f"UTC-TAI is not known before 2017-01-01 without an override: {when}")
    return None


def _ut1(when: "DateTime", config: TimescaleConfig) -> Optional[Decimal]:
    if config.ut1_minus_tai is not None:
        logger.debug(f"Using UT1-TAI override {config.ut1_minus_tai}")
        return round_to(config.ut1_minus_tai, UT1_PLACES)
    from .ut1 import default_table

    offset = default_table(config.ut1_table_path).seconds_at(when)
    if offset is None:
        logger.debug(f"UT1-TAI is not tabulated for {when}")
    return offset


@exact_arithmetic
def _tdb(when: "DateTime", config: TimescaleConfig) -> Optional[Decimal]:
    jd = when.to_julian_date().jd
    degrees = TDB_MEAN_ANOMALY_AT_J2000 + TDB_MEAN_ANOMALY_RATE * (jd - J2000)
    g = math.radians(float(degrees % 360))
    return (
        TT_MINUS_TAI
        + TDB_FIRST_TERM * big(math.sin(g))
        + TDB_SECOND_TERM * big(math.sin(2 * g))
    )


_OFFSETS: Dict[Timescale, Callable[["DateTime", TimescaleConfig], Optional[Decimal]]] = {
    Timescale.TAI: _tai,
    Timescale.TT: _tt,
    Timescale.GPS: _gps,
    Timescale.UTC: _utc,
    Timescale.UT1: _ut1,
    Timescale.TDB: _tdb,
}


def convert_to(
    target: Timescale, when: "DateTime", config: Optional[TimescaleConfig] = None
) -> Optional["DateTime"]:
    """Re-express a moment on another timescale, keeping its calendar.

    Args:
        target: Timescale of the result
        when: The moment to convert
        config: Overrides to apply; read from the environment when omitted

    Returns:
        The same instant on the target timescale, ``when`` itself if it is
        already on that timescale, or None if either offset is undefined

    Raises:
        ConfigurationError: If an environment override is malformed
    """
    if when.timescale is target:
        return when
    if config is None:
        config = TimescaleConfig.from_env()

    source_offset = when.timescale.seconds_from_tai(when, config)
    target_offset = target.seconds_from_tai(when, config)
    if source_offset is None or target_offset is None:
        logger.debug(f"Cannot convert {when} to {target.name}")
        return None

    from .date_time import DateTime

    seconds = EXACT.add(when.julian_seconds(), EXACT.subtract(target_offset, source_offset))
    return DateTime.from_julian_seconds(seconds, when.calendar, target)
