"""Download client for UT1-TAI tables."""

from pathlib import Path
from typing import Union

import requests

from ..logging import get_logger
from ..space_time.ut1 import Ut1Table

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 30


class Ut1FetchError(RuntimeError):
    """Raised when a UT1-TAI table cannot be downloaded."""


class Ut1TableClient:
    """Fetches a UT1-TAI table published at a URL."""

    def __init__(self, url: str, timeout: float = DEFAULT_TIMEOUT):
        """Initialize the client.

        Args:
            url: Location of a table in ``year month day UT1-TAI(ms) [sigma]`` form
            timeout: Seconds to wait for the server
        """
        self.url = url
        self.timeout = timeout

    def fetch(self) -> str:
        """Download the table text.

        Returns:
            str: Response text

        Raises:
            Ut1FetchError: If the request fails or returns an error status
        """
        logger.info(f"Fetching UT1-TAI table from {self.url}")
        try:
            response = requests.get(self.url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Error fetching UT1-TAI table from {self.url}: {e}")
            raise Ut1FetchError(f"Could not fetch {self.url}: {e}") from e
        return response.text

    def fetch_table(self) -> Ut1Table:
        """Download and parse the table.

        Raises:
            Ut1FetchError: If the download fails
            Ut1TableError: If the downloaded text is not a valid table
        """
        return Ut1Table.from_lines(self.fetch().splitlines())

    def download(self, destination: Union[str, Path]) -> Ut1Table:
        """Download a table and store it, only once it has parsed cleanly.

        Args:
            destination: File to write, parent directories are created

        Returns:
            The parsed table
        """
        text = self.fetch()
        table = Ut1Table.from_lines(text.splitlines())

        destination = Path(destination)
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(text, encoding="utf-8")
        logger.info(
            f"Wrote {len(table)} UT1-TAI entries ({table.earliest_date} to "
            f"{table.most_recent_date}) to {destination}"
        )
        return table
