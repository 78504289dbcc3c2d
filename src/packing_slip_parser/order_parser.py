#!/usr/bin/env python3
"""
Order field extraction for packing slips.
Parses one raw order block into a structured Order using fixed text patterns.
"""

import re
import logging
from typing import List, Optional
from decimal import Decimal, InvalidOperation, localcontext

from .models import Order, OrderItem, ZERO_PRICE
from .segmenter import ORDER_NUMBER_PATTERN

logger = logging.getLogger(__name__)

ITEMS_ANCHOR = r'Quantity\s+Description\s+Price\s+Total Price'
DOLLAR_AMOUNT = r'\$(\d+\.\d{2})'

ITEMS_SECTION_PATTERN = re.compile(ITEMS_ANCHOR + r'(.*)', re.DOTALL)

ORDER_DATE_PATTERN = re.compile(
    r'Order Date:\s*Shipping Method:\s*Buyer Name:\s*Seller Name:\s*(\d{2}/\d{2}/\d{4})'
)

# The description is lazy and may not run across another items anchor, so a
# match never swallows the table header of a following order.
ITEM_PATTERN = re.compile(
    r'(\d+)\s+((?:(?!' + ITEMS_ANCHOR + r').)*?)\s*'
    + DOLLAR_AMOUNT + r'\s*' + DOLLAR_AMOUNT,
    re.DOTALL
)

TOTAL_QUANTITY_PATTERN = re.compile(r'(\d+)\s+Total')
TOTAL_PRICE_PATTERN = re.compile(r'Total\s+' + DOLLAR_AMOUNT)

CENTS = Decimal('0.01')


class OrderParser:
    """Extracts order header fields and item lines from a raw order block."""

    def __init__(self):
        self.order_number_pattern = ORDER_NUMBER_PATTERN
        self.items_section_pattern = ITEMS_SECTION_PATTERN
        self.order_date_pattern = ORDER_DATE_PATTERN
        self.item_pattern = ITEM_PATTERN
        self.total_quantity_pattern = TOTAL_QUANTITY_PATTERN
        self.total_price_pattern = TOTAL_PRICE_PATTERN

    def normalize_price(self, price_str: str) -> Decimal:
        """Normalize a price string to a Decimal with two fractional digits."""
        if not price_str:
            return ZERO_PRICE

        price_str = re.sub(r'[\$,]', '', price_str.strip())

        try:
            # quantize needs a precision covering every integer digit
            with localcontext() as ctx:
                ctx.prec = max(ctx.prec, len(price_str) + 2)
                return Decimal(price_str).quantize(CENTS)
        except InvalidOperation:
            logger.warning(f"Invalid price format: {price_str}")
            return ZERO_PRICE

    def parse_quantity(self, quantity_str: str) -> Optional[int]:
        """Parse an integer quantity, or None if it cannot be converted."""
        try:
            return int(quantity_str)
        except ValueError:
            logger.warning(f"Invalid quantity: {quantity_str[:20]}... ({len(quantity_str)} digits)")
            return None

    def normalize_description(self, description: str) -> str:
        """
        Join a wrapped description into one line.

        Each line break, together with the spaces and tabs around it, becomes
        a single space; the result is trimmed. Spacing within a line is kept.
        """
        return re.sub(r'[ \t]*(?:\r\n|\r|\n)\s*', ' ', description).strip()

    def extract_order_number(self, text: str) -> Optional[str]:
        match = self.order_number_pattern.search(text)
        return match.group(1) if match else None

    def extract_order_date(self, text: str) -> Optional[str]:
        match = self.order_date_pattern.search(text)
        return match.group(1) if match else None

    def extract_items(self, items_section: str) -> List[OrderItem]:
        """Extract item lines from the text following the items header."""
        items = []

        for match in self.item_pattern.finditer(items_section):
            quantity, description, unit_price, total_price = match.groups()
            parsed_quantity = self.parse_quantity(quantity)
            if parsed_quantity is None:
                continue

            items.append(OrderItem(
                quantity=parsed_quantity,
                description=self.normalize_description(description),
                unit_price=self.normalize_price(unit_price),
                total_price=self.normalize_price(total_price),
            ))

        return items

    def extract_total_quantity(self, text: str) -> int:
        match = self.total_quantity_pattern.search(text)
        if not match:
            return 0
        quantity = self.parse_quantity(match.group(1))
        return quantity if quantity is not None else 0

    def extract_total_price(self, text: str) -> Decimal:
        match = self.total_price_pattern.search(text)
        return self.normalize_price(match.group(1)) if match else ZERO_PRICE

    def parse_order(self, order_text: str) -> Order:
        """
        Parse a raw order block into an Order.

        Unmatched fields fall back to None or zero. A block without an items
        header yields an all-default Order and nothing else is extracted.

        Args:
            order_text: Text of all pages belonging to one order

        Returns:
            Parsed Order record
        """
        items_section_match = self.items_section_pattern.search(order_text)
        if not items_section_match:
            logger.warning("No items section found in order block, using defaults")
            return Order()

        items_section = items_section_match.group(1).strip()

        order = Order(
            order_number=self.extract_order_number(order_text),
            order_date=self.extract_order_date(order_text),
            total_quantity=self.extract_total_quantity(order_text),
            total_price=self.extract_total_price(order_text),
            items=tuple(self.extract_items(items_section)),
        )

        logger.debug(f"Order {order.order_number}: {len(order.items)} item(s), "
                     f"total qty {order.total_quantity}, total {order.total_price}")
        return order


def parse_order_text(order_text: str) -> Order:
    """
    Convenience function to parse one raw order block.

    Args:
        order_text: Raw order block text

    Returns:
        Parsed Order record
    """
    return OrderParser().parse_order(order_text)
