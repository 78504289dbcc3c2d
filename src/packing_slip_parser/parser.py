#!/usr/bin/env python3
"""
Packing Slip Parser
Turns multi-order packing slip PDFs into structured orders and flat exports.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from .exporter import export_to_csv
from .models import Order
from .order_parser import OrderParser
from .pdf_extractor import extract_pdf_pages
from .segmenter import OrderSegmenter

logger = logging.getLogger(__name__)


class PackingSlipParser:
    """Main parser class tying page extraction, segmentation and field extraction together."""

    def __init__(self, segmenter: Optional[OrderSegmenter] = None,
                 order_parser: Optional[OrderParser] = None):
        self.segmenter = segmenter or OrderSegmenter()
        self.order_parser = order_parser or OrderParser()

    def extract_pages_from_pdf(self, pdf_path: str) -> List[str]:
        """Extract per-page text from a PDF file."""
        try:
            pages = extract_pdf_pages(pdf_path)
        except Exception as e:
            logger.error(f"Error extracting text from PDF: {e}")
            raise

        logger.info(f"Extracted {len(pages)} page(s) from PDF")
        return pages

    def parse_pages(self, pages: Iterable[str]) -> List[Order]:
        """
        Parse page texts into orders.

        Args:
            pages: Page texts in document order

        Returns:
            One Order per detected order block, in document order
        """
        blocks = self.segmenter.segment(pages)
        orders = [self.order_parser.parse_order(block) for block in blocks]

        item_count = sum(len(order.items) for order in orders)
        logger.info(f"Parsed {len(orders)} order(s) with {item_count} item(s)")
        return orders

    def parse_pdf(self, pdf_path: str) -> List[Order]:
        """Main method to parse a packing slip PDF into orders."""
        logger.info(f"Parsing packing slips from: {pdf_path}")
        pages = self.extract_pages_from_pdf(pdf_path)
        return self.parse_pages(pages)

    def to_dicts(self, orders: Iterable[Order]) -> List[Dict[str, Any]]:
        return [order.to_dict() for order in orders]

    def to_json(self, orders: Iterable[Order]) -> str:
        return json.dumps(self.to_dicts(orders), indent=2, ensure_ascii=False)

    def parse_pdf_to_json(self, pdf_path: str, output_path: Optional[str] = None) -> str:
        """Parse a PDF and return JSON string, optionally save to file."""
        json_str = self.to_json(self.parse_pdf(pdf_path))

        if output_path:
            with open(output_path, 'w', encoding='utf-8') as f:
                f.write(json_str)
            logger.info(f"Results saved to: {output_path}")

        return json_str

    def export_pdf_to_csv(self, pdf_path: str,
                          output_path: Optional[Union[str, Path]] = None,
                          output_dir: Union[str, Path] = ".") -> Path:
        """Parse a PDF and write the flat item export."""
        orders = self.parse_pdf(pdf_path)
        return export_to_csv(orders, output_path=output_path, output_dir=output_dir)
