"""
Data models for the Packing Slip Parser.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Optional, Tuple

ZERO_PRICE = Decimal("0.00")


@dataclass(frozen=True)
class OrderItem:
    """Represents a single item line of a packing slip order."""
    quantity: int
    description: str
    unit_price: Decimal
    total_price: Decimal

    def to_dict(self) -> Dict[str, Any]:
        return {
            "quantity": self.quantity,
            "description": self.description,
            "price": float(self.unit_price),
            "totalPrice": float(self.total_price),
        }


@dataclass(frozen=True)
class Order:
    """Represents one order reconstructed from a packing slip document."""
    order_number: Optional[str] = None
    order_date: Optional[str] = None
    total_quantity: int = 0
    total_price: Decimal = ZERO_PRICE
    items: Tuple[OrderItem, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "orderNumber": self.order_number,
            "orderDate": self.order_date,
            "totalQty": self.total_quantity,
            "totalPrice": float(self.total_price),
            "items": [item.to_dict() for item in self.items],
        }
