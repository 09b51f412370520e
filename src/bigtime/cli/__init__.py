"""CLI entry point for bigtime."""

import click

from . import common as common
from .convert import calendar_command, convert, date, jd
from .ut1 import ut1
from ..logging import get_logger


logger = get_logger(__name__)


@click.group()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times: -v, -vv)",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Enable debug logging (equivalent to -vv)",
)
@click.option(
    "--quiet",
    is_flag=True,
    help="Suppress all logging except errors",
)
def cli(verbose: int, debug: bool, quiet: bool) -> None:
    """Convert between calendars, Julian Dates and timescales."""
    common.configure_logging(
        {
            "quiet": quiet,
            "debug": debug,
            "verbose": verbose,
        }
    )
    logger.debug("Debug logging enabled")


cli.add_command(jd)
cli.add_command(date)
cli.add_command(convert)
cli.add_command(calendar_command)
cli.add_command(ut1)
if __name__ == "__main__":
    cli()
