#!/usr/bin/env python3
"""
Tests for the command-line interface.
"""

import json
import unittest
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

# Add src to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from packing_slip_parser.cli import cli
from packing_slip_parser.exporter import EXPORT_HEADER
from packing_slip_parser.pdf_extractor import PDFExtractionError


SAMPLE_PAGES = [
    "Order Number: 123\n"
    "Order Date: Shipping Method: Buyer Name: Seller Name: 01/02/2023\n"
    "Quantity Description Price Total Price\n"
    "2 Widget $5.00 $10.00\n"
    "2 Total $10.00 Total"
]


class TestCli(unittest.TestCase):
    """Test cases for the packing-slip-parser commands."""

    def setUp(self):
        self.runner = CliRunner()
        patcher = patch('packing_slip_parser.parser.extract_pdf_pages', return_value=SAMPLE_PAGES)
        self.mock_extract = patcher.start()
        self.addCleanup(patcher.stop)

    def invoke(self, args):
        Path("slips.pdf").write_bytes(b"%PDF-1.4\n")
        return self.runner.invoke(cli, args)

    def test_parse_to_console(self):
        with self.runner.isolated_filesystem():
            result = self.invoke(["parse", "slips.pdf"])

        self.assertEqual(result.exit_code, 0)
        self.assertIn('"orderNumber": "123"', result.output)
        self.assertIn('"description": "Widget"', result.output)

    def test_parse_to_file(self):
        with self.runner.isolated_filesystem():
            result = self.invoke(["-v", "parse", "slips.pdf", "-o", "orders.json"])
            data = json.loads(Path("orders.json").read_text(encoding='utf-8'))

        self.assertEqual(result.exit_code, 0)
        self.assertIn("orders.json", result.output)
        self.assertEqual(data[0]["orderDate"], "01/02/2023")
        self.assertEqual(data[0]["items"][0]["totalPrice"], 10.0)

    def test_export(self):
        with self.runner.isolated_filesystem():
            result = self.invoke(["export", "slips.pdf", "-o", "items.csv"])
            lines = Path("items.csv").read_text(encoding='utf-8').split("\n")

        self.assertEqual(result.exit_code, 0)
        self.assertEqual(lines, [
            ",".join(EXPORT_HEADER),
            "123,01/02/2023,2,10.00,2,Widget,5.00,10.00",
        ])

    def test_export_timestamped_name(self):
        with self.runner.isolated_filesystem():
            Path("out").mkdir()
            result = self.invoke(["export", "slips.pdf", "--output-dir", "out"])
            written = list(Path("out").iterdir())

        self.assertEqual(result.exit_code, 0)
        self.assertEqual(len(written), 1)
        self.assertRegex(written[0].name, r'^parsedPackingSlip-\d+\.csv$')

    def test_summary(self):
        with self.runner.isolated_filesystem():
            result = self.invoke(["summary", "slips.pdf"])

        self.assertEqual(result.exit_code, 0)
        self.assertIn("123", result.output)
        self.assertIn("01/02/2023", result.output)

    def test_extraction_error_aborts(self):
        self.mock_extract.side_effect = PDFExtractionError("unreadable document")

        with self.runner.isolated_filesystem():
            result = self.invoke(["parse", "slips.pdf"])

        self.assertEqual(result.exit_code, 1)

    def test_missing_file(self):
        with self.runner.isolated_filesystem():
            result = self.runner.invoke(cli, ["parse", "missing.pdf"])

        self.assertEqual(result.exit_code, 2)
        self.mock_extract.assert_not_called()


if __name__ == '__main__':
    unittest.main()
