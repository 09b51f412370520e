from datetime import MAXYEAR, MINYEAR, datetime, timezone
from decimal import ROUND_HALF_EVEN
from typing import Optional

import pytz

from ..config import TimescaleConfig
from .calendars import Calendar
from .date_time import DateTime
from .decimals import big
from .timescales import Timescale

MICROSECOND_PLACES = 6


class NaiveDateTimeError(Exception):
    """Raised when a datetime object has no timezone info."""

    pass


def ensure_utc(dt: datetime) -> datetime:
    """Convert datetime to UTC if it has a timezone.

    Args:
        dt: Datetime to convert

    Returns:
        datetime: UTC datetime

    Raises:
        NaiveDateTimeError: If datetime is naive
    """
    if dt.tzinfo is None:
        raise NaiveDateTimeError("Datetime must have timezone info")
    return dt.astimezone(timezone.utc)


def date_time_from_datetime(dt: datetime, timescale: Timescale = Timescale.UTC) -> DateTime:
    """Convert an aware datetime to a Gregorian DateTime.

    The wall-clock fields of the UTC datetime are kept as they are and
    labelled with ``timescale``; microseconds carry over exactly.

    Args:
        dt: Timezone-aware datetime
        timescale: Timescale the datetime's clock reading is on

    Returns:
        DateTime: Gregorian DateTime

    Raises:
        NaiveDateTimeError: If datetime is naive
    """
    dt = ensure_utc(dt)
    seconds = big(f"{dt.second}.{dt.microsecond:06d}")
    return DateTime.gregorian(dt.year, dt.month, dt.day, dt.hour, dt.minute, seconds, timescale)


def date_time_to_datetime(
    date_time: DateTime, config: Optional[TimescaleConfig] = None
) -> datetime:
    """Convert a DateTime to a UTC datetime.

    Moments on other timescales are converted to UTC first. Seconds are
    rounded to microseconds, carrying into the next minute when needed.

    Args:
        date_time: Gregorian DateTime
        config: Overrides for the UTC conversion

    Returns:
        datetime: UTC datetime

    Raises:
        ValueError: If the DateTime is not Gregorian, cannot be expressed in
            UTC, or falls outside the years datetime supports
    """
    if date_time.calendar is not Calendar.GREGORIAN:
        raise ValueError(f"Only Gregorian dates convert to datetime: {date_time}")
    utc = date_time.convert_to(Timescale.UTC, config)
    if utc is None:
        raise ValueError(f"UTC is not defined at {date_time}")
    utc = utc.round_seconds(MICROSECOND_PLACES, ROUND_HALF_EVEN)
    if not MINYEAR <= utc.year <= MAXYEAR:
        raise ValueError(f"Year {utc.year} is outside the range datetime supports")

    whole = int(utc.seconds)
    microsecond = int((utc.seconds - whole).scaleb(MICROSECOND_PLACES))
    return datetime(
        utc.year,
        utc.month,
        utc.day,
        utc.hour,
        utc.minute,
        whole,
        microsecond,
        tzinfo=pytz.UTC,
    )
