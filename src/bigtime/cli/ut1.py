"""CLI commands for UT1-TAI tables."""

from typing import Optional

import click

from ..config import ConfigurationError, TimescaleConfig
from ..iers.client import Ut1FetchError, Ut1TableClient
from ..space_time.calendars import Calendar
from ..space_time.timescales import Timescale
from ..space_time.ut1 import Ut1TableError, default_table
from .common import calendar_option, parse_calendar, parse_when


@click.group()
def ut1() -> None:
    """Look up and download UT1-TAI tables."""
    pass


@ut1.command()
@click.argument("when")
@calendar_option
@click.option(
    "--table",
    type=click.Path(exists=True, dir_okay=False),
    help="UT1-TAI table to read. Defaults to BIGTIME_UT1_TABLE or the bundled excerpt.",
)
def lookup(when: str, calendar: str, table: Optional[str]) -> None:
    """Print UT1-TAI in seconds at WHEN."""
    date_time = parse_when(when, parse_calendar(calendar), Timescale.TAI)
    try:
        path = table or TimescaleConfig.from_env().ut1_table_path
        ut1_table = default_table(path)
    except (ConfigurationError, Ut1TableError, OSError) as e:
        raise click.ClickException(str(e)) from e

    seconds = ut1_table.seconds_at(date_time)
    if seconds is None:
        earliest = ut1_table.earliest_date
        if date_time.calendar is Calendar.JULIAN:
            earliest = earliest.convert_to(Calendar.JULIAN)
        if date_time.date < earliest:
            raise click.ClickException(f"UT1-TAI is not tabulated before {earliest}")
        raise click.ClickException(f"UT1-TAI is not tabulated at {date_time}")
    click.echo(str(seconds))


@ut1.command()
@click.argument("url")
@click.option(
    "--output",
    type=click.Path(dir_okay=False),
    required=True,
    help="File to write the table to.",
)
@click.option("--timeout", type=float, default=30.0, show_default=True, help="Seconds to wait.")
def fetch(url: str, output: str, timeout: float) -> None:
    """Download a UT1-TAI table from URL and save it to --output."""
    client = Ut1TableClient(url, timeout=timeout)
    try:
        table = client.download(output)
    except (Ut1FetchError, Ut1TableError) as e:
        raise click.ClickException(str(e)) from e
    click.echo(
        f"Saved {len(table)} entries from {table.earliest_date} to "
        f"{table.most_recent_date} in {output}"
    )
