#!/usr/bin/env python3
"""
Tests for order segmentation across pages.
"""

import unittest

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from packing_slip_parser.segmenter import OrderSegmenter, segment_pages


class TestOrderSegmenter(unittest.TestCase):
    """Test cases for the OrderSegmenter."""

    def setUp(self):
        self.segmenter = OrderSegmenter()

    def test_empty_input(self):
        self.assertEqual(self.segmenter.segment([]), [])

    def test_single_page_without_marker(self):
        """A lone page with no order number is one block equal to the page."""
        page = "Packing Slip\nQuantity Description Price Total Price"
        self.assertEqual(self.segmenter.segment([page]), [page])

    def test_single_blank_page_is_kept(self):
        self.assertEqual(self.segmenter.segment([""]), [""])

    def test_repeated_order_number_merges_pages(self):
        pages = [
            "Order Number: 123\nQuantity Description Price Total Price\n1 Widget $1.00 $1.00",
            "Order Number: 123\n2 Gadget $2.00 $4.00",
        ]
        blocks = self.segmenter.segment(pages)
        self.assertEqual(blocks, ["\n".join(pages)])

    def test_new_order_number_splits_at_transition(self):
        pages = [
            "Order Number: 123\nQuantity Description Price Total Price\n1 Widget $1.00 $1.00",
            "Order Number: 456\nQuantity Description Price Total Price\n2 Gadget $2.00 $4.00",
        ]
        blocks = self.segmenter.segment(pages)
        self.assertEqual(blocks, pages)

    def test_unmarked_page_continues_current_order(self):
        pages = ["Order Number: 1\nfirst", "continued", "Order Number: 2\nsecond"]
        blocks = self.segmenter.segment(pages)
        self.assertEqual(blocks, ["Order Number: 1\nfirst\ncontinued", "Order Number: 2\nsecond"])

    def test_unmarked_first_page_joins_first_order(self):
        pages = ["cover sheet", "Order Number: 1\nfirst"]
        self.assertEqual(self.segmenter.segment(pages), ["cover sheet\nOrder Number: 1\nfirst"])

    def test_returning_order_number_starts_new_block(self):
        pages = ["Order Number: 1", "Order Number: 2", "Order Number: 1"]
        self.assertEqual(self.segmenter.segment(pages), pages)

    def test_marker_with_extra_whitespace(self):
        self.assertEqual(self.segmenter.find_order_number("Order Number:\n  A-77 x"), "A-77")
        self.assertIsNone(self.segmenter.find_order_number("Order No: 5"))

    def test_pages_are_partitioned_in_order(self):
        """Every page lands in exactly one block, in order; block count follows transitions."""
        pages = [
            "Order Number: 10\na",
            "b",
            "Order Number: 10\nc",
            "Order Number: 11\nd",
            "",
            "Order Number: 12\ne",
            "f",
        ]
        blocks = self.segmenter.segment(pages)

        self.assertEqual("\n".join(blocks), "\n".join(pages))
        # transitions: 10 -> 11 -> 12
        self.assertEqual(len(blocks), 3)
        self.assertEqual(blocks[1], "Order Number: 11\nd\n")

    def test_accepts_any_iterable(self):
        pages = (text for text in ["Order Number: 1", "Order Number: 2"])
        self.assertEqual(segment_pages(pages), ["Order Number: 1", "Order Number: 2"])

    def test_no_state_between_documents(self):
        self.segmenter.segment(["Order Number: 1\nx"])
        self.assertEqual(self.segmenter.segment(["Order Number: 2\ny"]), ["Order Number: 2\ny"])


if __name__ == '__main__':
    unittest.main()
