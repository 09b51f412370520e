"""UT1-TAI offset table.

The table is a flat text file, one day per line::

    # year month day UT1-TAI(ms) sigma(ms)
    1980  9 30 -18967.5278   0.4000

Comment lines start with ``#``. The sigma column is optional and ignored.
Dates are in the Gregorian calendar. A daily table has one line per day;
values are only interpolated between a date and the day after it, so dates
missing from the table have no value.
"""

import functools
from decimal import Decimal
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Tuple, Union

from ..constants import UT1_PLACES
from ..logging import get_logger
from .calendars import Calendar
from .date import Date
from .decimals import EXACT, big, divide, round_to

logger = get_logger(__name__)

DEFAULT_TABLE_PATH = Path(__file__).resolve().parent.parent / "data" / "UT1-TAI.txt"

MILLISECONDS_PER_SECOND = 1000


class Ut1TableError(ValueError):
    """Raised when a UT1-TAI table cannot be parsed."""


def _parse_line(line: str, number: int) -> Tuple[Date, str]:
    fields = line.split()
    if len(fields) < 4:
        raise Ut1TableError(f"Line {number}: expected year, month, day and offset: {line!r}")
    try:
        date = Date.gregorian(int(fields[0]), int(fields[1]), int(fields[2]))
        big(fields[3])
    except ValueError as e:
        raise Ut1TableError(f"Line {number}: {e}") from e
    return date, fields[3]


class Ut1Table:
    """An immutable, date-ordered snapshot of UT1-TAI values."""

    def __init__(self, entries: Mapping[Date, str]):
        if not entries:
            raise Ut1TableError("UT1-TAI table has no entries")
        self._dates: Tuple[Date, ...] = tuple(sorted(entries))
        self._raw: Mapping[Date, str] = MappingProxyType(dict(entries))

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Ut1Table":
        """Parse table lines.

        Raises:
            Ut1TableError: If a data line is malformed or the table is empty
        """
        entries = {}
        for number, line in enumerate(lines, start=1):
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            date, raw = _parse_line(stripped, number)
            entries[date] = raw
        return cls(entries)

    @classmethod
    def load(cls, path: Union[str, Path]) -> "Ut1Table":
        path = Path(path)
        logger.debug(f"Loading UT1-TAI table from {path}")
        with open(path, encoding="utf-8") as f:
            table = cls.from_lines(f)
        logger.debug(
            f"Loaded {len(table)} UT1-TAI entries from {table.earliest_date} "
            f"to {table.most_recent_date}"
        )
        return table

    def __len__(self) -> int:
        return len(self._dates)

    @property
    def earliest_date(self) -> Date:
        return self._dates[0]

    @property
    def most_recent_date(self) -> Date:
        return self._dates[-1]

    def dates(self) -> List[Date]:
        return list(self._dates)

    def lookup(self, date: Date) -> Optional[str]:
        """Raw UT1-TAI text, in milliseconds, tabulated for exactly this date."""
        return self._raw.get(_gregorian(date))

    def _seconds(self, date: Date) -> Decimal:
        return round_to(divide(self._raw[date], MILLISECONDS_PER_SECOND), UT1_PLACES)

    def seconds_at(self, when) -> Optional[Decimal]:
        """UT1-TAI in seconds at a moment.

        A moment at 0h gets its date's entry. Later in the day the value is
        interpolated linearly towards the next day's entry. Moments after the
        last entry get the last value; moments before the first entry, or on
        or next to a date missing from the table, have no value.

        Args:
            when: A DateTime in either calendar

        Returns:
            Seconds rounded to 7 places, or None where the table has no value
        """
        date = _gregorian(when.date)
        if date < self.earliest_date:
            return None
        if date >= self.most_recent_date:
            return self._seconds(self.most_recent_date)
        if date not in self._raw:
            logger.debug(f"No UT1-TAI entry for {date}")
            return None

        fraction = when.time.fraction()
        if fraction == 0:
            return self._seconds(date)

        following = date.next()
        if following not in self._raw:
            logger.debug(f"No UT1-TAI entry for {following} to interpolate towards")
            return None
        low = big(self._raw[date])
        high = big(self._raw[following])
        milliseconds = EXACT.add(low, EXACT.multiply(EXACT.subtract(high, low), fraction))
        return round_to(divide(milliseconds, MILLISECONDS_PER_SECOND), UT1_PLACES)


def _gregorian(date: Date) -> Date:
    if date.calendar is Calendar.GREGORIAN:
        return date
    return date.convert_to(Calendar.GREGORIAN)


@functools.lru_cache(maxsize=None)
def _load_cached(path: Path) -> Ut1Table:
    return Ut1Table.load(path)


def default_table(path: Optional[Union[str, Path]] = None) -> Ut1Table:
    """The table at ``path``, or the packaged excerpt, loaded once per path."""
    return _load_cached(Path(path) if path is not None else DEFAULT_TABLE_PATH)
