"""Tests for the ut1 CLI commands."""

import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

from bigtime.cli import cli
from bigtime.iers.client import Ut1FetchError
from bigtime.space_time.ut1 import Ut1Table

TABLE_TEXT = "2020  1  6  1000.0\n2020  1  7  2000.0\n2020  1 11  2400.0\n"


@patch.dict(os.environ, {"BIGTIME_UT1_TABLE": ""})
class TestUt1CLI(unittest.TestCase):
    """Validate CLI wiring for UT1 lookups and downloads."""

    def setUp(self):
        self.runner = CliRunner()

    def test_lookup_bundled_table(self):
        result = self.runner.invoke(cli, ["ut1", "lookup", "1962-01-01 12:00"])
        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertEqual(result.output.strip(), "-1.8140754")

    def test_lookup_before_table(self):
        result = self.runner.invoke(cli, ["ut1", "lookup", "1900-01-01"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("not tabulated before 1962-01-01 GR", result.output)

    def test_lookup_between_excerpts(self):
        result = self.runner.invoke(cli, ["ut1", "lookup", "2000-01-01"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("not tabulated at 2000-01-01 00:00:00 GR TAI", result.output)

    def test_lookup_with_table_option(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "ut1.txt"
            path.write_text(TABLE_TEXT, encoding="utf-8")
            result = self.runner.invoke(
                cli, ["ut1", "lookup", "2020-01-06 12:00", "--table", str(path)]
            )
        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertEqual(result.output.strip(), "1.5000000")

    @patch("bigtime.cli.ut1.Ut1TableClient")
    def test_fetch(self, mock_client_class):
        mock_client = mock_client_class.return_value
        mock_client.download.return_value = Ut1Table.from_lines(TABLE_TEXT.splitlines())

        result = self.runner.invoke(
            cli, ["ut1", "fetch", "https://example.org/ut1.txt", "--output", "ut1.txt"]
        )

        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertIn("Saved 2 entries", result.output)
        mock_client_class.assert_called_once_with("https://example.org/ut1.txt", timeout=30.0)
        mock_client.download.assert_called_once_with("ut1.txt")

    @patch("bigtime.cli.ut1.Ut1TableClient")
    def test_fetch_failure(self, mock_client_class):
        mock_client_class.return_value.download.side_effect = Ut1FetchError("Could not fetch")
        result = self.runner.invoke(
            cli, ["ut1", "fetch", "https://example.org/ut1.txt", "--output", "ut1.txt"]
        )
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Could not fetch", result.output)


if __name__ == "__main__":
    unittest.main()
