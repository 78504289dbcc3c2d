#!/usr/bin/env python3
"""
Order segmentation for multi-order packing slip documents.
Groups per-page text into one raw text block per order.
"""

import re
import logging
from typing import Iterable, List, Optional

logger = logging.getLogger(__name__)

ORDER_NUMBER_PATTERN = re.compile(r'Order Number:\s*(\S+)')


class OrderSegmenter:
    """Splits an ordered sequence of page texts into per-order text blocks."""

    def __init__(self, order_number_pattern: re.Pattern = ORDER_NUMBER_PATTERN,
                 page_separator: str = "\n"):
        self.order_number_pattern = order_number_pattern
        self.page_separator = page_separator

    def find_order_number(self, text: str) -> Optional[str]:
        """Return the first order number marked in the text, if any."""
        match = self.order_number_pattern.search(text)
        return match.group(1) if match else None

    def segment(self, pages: Iterable[str]) -> List[str]:
        """
        Group pages into raw order blocks.

        A page whose order number differs from the current one closes the
        current block. Pages without a marker, or repeating the current
        number, continue the current block.

        Args:
            pages: Page texts in document order

        Returns:
            List of order blocks, each the newline-joined text of its pages
        """
        blocks = []
        current_pages: List[str] = []
        current_number: Optional[str] = None

        for page_index, page_text in enumerate(pages, start=1):
            found_number = self.find_order_number(page_text)

            if found_number:
                if current_number and found_number != current_number:
                    blocks.append(self.page_separator.join(current_pages))
                    logger.debug(f"Order {current_number} closed before page {page_index}")
                    current_pages = []

                current_number = found_number

            current_pages.append(page_text)

        if current_pages:
            blocks.append(self.page_separator.join(current_pages))

        logger.info(f"Segmented document into {len(blocks)} order block(s)")
        return blocks


def segment_pages(pages: Iterable[str]) -> List[str]:
    """
    Convenience function to segment page texts into order blocks.

    Args:
        pages: Page texts in document order

    Returns:
        List of raw order blocks
    """
    return OrderSegmenter().segment(pages)
