"""CLI commands for Julian Date, timescale and calendar conversion."""

from typing import Optional

import click

from ..config import ConfigurationError
from ..space_time.date_time import DateTime
from ..space_time.decimals import big
from ..space_time.julian import JulianDate
from .common import (
    CALENDAR_NAMES,
    TIMESCALE_NAMES,
    calendar_option,
    parse_calendar,
    parse_timescale,
    parse_when,
    places_option,
    timescale_option,
)


def _rounded(date_time: DateTime, places: Optional[int]) -> DateTime:
    return date_time if places is None else date_time.round_seconds(places)


@click.command()
@click.argument("when")
@calendar_option
@timescale_option
def jd(when: str, calendar: str, timescale: str) -> None:
    """Print the Julian Date of WHEN."""
    date_time = parse_when(when, parse_calendar(calendar), parse_timescale(timescale))
    click.echo(str(date_time.to_julian_date().jd))


@click.command()
@click.argument("julian_date")
@calendar_option
@timescale_option
@places_option
def date(julian_date: str, calendar: str, timescale: str, places: Optional[int]) -> None:
    """Print the date and time of JULIAN_DATE."""
    try:
        value = JulianDate(big(julian_date), parse_timescale(timescale))
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="JULIAN_DATE") from e
    click.echo(str(_rounded(value.to_date_time(parse_calendar(calendar)), places)))


@click.command()
@click.argument("when")
@click.option(
    "--to",
    "target",
    type=click.Choice(TIMESCALE_NAMES, case_sensitive=False),
    required=True,
    help="Timescale to convert to.",
)
@click.option(
    "--from",
    "source",
    type=click.Choice(TIMESCALE_NAMES, case_sensitive=False),
    default="TAI",
    show_default=True,
    help="Timescale WHEN is given on.",
)
@calendar_option
@places_option
def convert(when: str, target: str, source: str, calendar: str, places: Optional[int]) -> None:
    """Re-express WHEN on another timescale."""
    date_time = parse_when(when, parse_calendar(calendar), parse_timescale(source))
    try:
        converted = date_time.convert_to(parse_timescale(target))
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e
    if converted is None:
        raise click.ClickException(
            f"Cannot convert {date_time} to {target.upper()}: offset is not defined at that moment"
        )
    click.echo(str(_rounded(converted, places)))


@click.command(name="calendar")
@click.argument("when")
@click.option(
    "--to",
    "target",
    type=click.Choice(CALENDAR_NAMES, case_sensitive=False),
    required=True,
    help="Calendar to convert to.",
)
@click.option(
    "--from",
    "source",
    type=click.Choice(CALENDAR_NAMES, case_sensitive=False),
    default="gregorian",
    show_default=True,
    help="Calendar WHEN is given in.",
)
@timescale_option
def calendar_command(when: str, target: str, source: str, timescale: str) -> None:
    """Express the date of WHEN in another calendar."""
    date_time = parse_when(when, parse_calendar(source), parse_timescale(timescale))
    try:
        converted = date_time.date.convert_to(parse_calendar(target))
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--to") from e
    click.echo(str(DateTime(converted, date_time.time)))
