"""
Command-line interface utilities for bigtime.

This module provides shared option parsing and logging configuration for
the bigtime commands.
"""

import logging
import re
from typing import Any, Dict

import click

from ..logging import set_log_level
from ..space_time.calendars import Calendar
from ..space_time.date_time import DateTime
from ..space_time.decimals import big
from ..space_time.timescales import Timescale

CALENDAR_NAMES = [c.name.lower() for c in Calendar]
TIMESCALE_NAMES = [t.name for t in Timescale]

WHEN_PATTERN = re.compile(
    r"^(-?\d+)-(\d{1,2})-(\d{1,2})"
    r"(?:[T ](\d{1,2}):(\d{1,2})(?::(\d{1,2}(?:\.\d+)?))?)?$"
)


def configure_logging(args: Dict[str, Any]) -> None:
    """
    Configure logging based on command line options.

    Args:
        args: Options of the top-level command, keyed by parameter name
    """
    quiet = args.get("quiet", False)
    debug = args.get("debug", False)
    verbosity = args.get("verbose", 0)

    if quiet:
        log_level = logging.ERROR
    elif debug:
        log_level = logging.DEBUG
    else:
        # 0 -> WARNING, 1 -> INFO, 2+ -> DEBUG
        if verbosity == 0:
            log_level = logging.WARNING
        elif verbosity == 1:
            log_level = logging.INFO
        else:
            log_level = logging.DEBUG

    set_log_level(log_level)
    logging.getLogger("bigtime").debug(
        f"Logging configured with level {logging.getLevelName(log_level)}"
    )


def parse_calendar(name: str) -> Calendar:
    return Calendar[name.upper()]


def parse_timescale(name: str) -> Timescale:
    return Timescale[name.upper()]


def parse_when(text: str, calendar: Calendar, timescale: Timescale) -> DateTime:
    """Parse ``[-]YYYY-MM-DD[(T| )HH:MM[:SS[.fff]]]`` into a DateTime.

    Raises:
        click.BadParameter: If the text does not match or names an invalid date
    """
    match = WHEN_PATTERN.match(text.strip())
    if not match:
        raise click.BadParameter(
            f"Expected YYYY-MM-DD with an optional HH:MM[:SS], got {text!r}"
        )
    year, month, day, hour, minute, seconds = match.groups()
    try:
        return DateTime.of(
            int(year),
            int(month),
            int(day),
            int(hour or 0),
            int(minute or 0),
            big(seconds or "0"),
            calendar,
            timescale,
        )
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


calendar_option = click.option(
    "--calendar",
    type=click.Choice(CALENDAR_NAMES, case_sensitive=False),
    default="gregorian",
    show_default=True,
    help="Calendar the date is given in.",
)

timescale_option = click.option(
    "--timescale",
    type=click.Choice(TIMESCALE_NAMES, case_sensitive=False),
    default="TAI",
    show_default=True,
    help="Timescale the time is given on.",
)

places_option = click.option(
    "--places",
    type=click.IntRange(min=-1),
    default=None,
    help="Round seconds to this many decimal places.",
)
