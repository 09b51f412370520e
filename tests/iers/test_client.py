"""Tests for the UT1-TAI download client."""

import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock, patch

import requests

from bigtime.iers.client import Ut1FetchError, Ut1TableClient
from bigtime.space_time.date import Date
from bigtime.space_time.ut1 import Ut1TableError

TABLE_TEXT = "# UT1-TAI\n1997  1  1 -30111.0800 0.0364\n1997  1  2 -30112.9100 0.0364\n"


def _response(text: str) -> MagicMock:
    response = MagicMock()
    response.text = text
    response.raise_for_status.return_value = None
    return response


class TestUt1TableClient(unittest.TestCase):
    """Test cases for Ut1TableClient."""

    def setUp(self):
        self.client = Ut1TableClient("https://example.org/ut1.txt", timeout=5)

    @patch("bigtime.iers.client.requests.get")
    def test_fetch(self, mock_get):
        mock_get.return_value = _response(TABLE_TEXT)
        self.assertEqual(self.client.fetch(), TABLE_TEXT)
        mock_get.assert_called_once_with("https://example.org/ut1.txt", timeout=5)

    @patch("bigtime.iers.client.requests.get")
    def test_fetch_table(self, mock_get):
        mock_get.return_value = _response(TABLE_TEXT)
        table = self.client.fetch_table()
        self.assertEqual(table.most_recent_date, Date.gregorian(1997, 1, 2))

    @patch("bigtime.iers.client.requests.get")
    def test_http_error(self, mock_get):
        response = _response("")
        response.raise_for_status.side_effect = requests.HTTPError("404 Client Error")
        mock_get.return_value = response
        with self.assertRaises(Ut1FetchError) as ctx:
            self.client.fetch()
        self.assertIsInstance(ctx.exception.__cause__, requests.HTTPError)

    @patch("bigtime.iers.client.requests.get")
    def test_connection_error(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("refused")
        with self.assertRaises(Ut1FetchError):
            self.client.fetch()

    @patch("bigtime.iers.client.requests.get")
    def test_download_writes_valid_table(self, mock_get):
        mock_get.return_value = _response(TABLE_TEXT)
        with tempfile.TemporaryDirectory() as tmp:
            destination = Path(tmp) / "nested" / "ut1.txt"
            table = self.client.download(destination)
            self.assertEqual(len(table), 2)
            self.assertEqual(destination.read_text(encoding="utf-8"), TABLE_TEXT)

    @patch("bigtime.iers.client.requests.get")
    def test_download_does_not_write_invalid_table(self, mock_get):
        mock_get.return_value = _response("<html>not a table</html>")
        with tempfile.TemporaryDirectory() as tmp:
            destination = Path(tmp) / "ut1.txt"
            with self.assertRaises(Ut1TableError):
                self.client.download(destination)
            self.assertFalse(destination.exists())


if __name__ == "__main__":
    unittest.main()
