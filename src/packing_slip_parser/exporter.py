#!/usr/bin/env python3
"""
Tabular export of parsed packing slip orders.

Rows are joined with a plain delimiter and are not quoted, so a description
containing the delimiter shifts the columns of its row. Consumers that need
strict CSV must handle this themselves.
"""

import logging
import time
from pathlib import Path
from typing import Any, Iterable, List, Optional, Tuple, Union

from .models import Order

logger = logging.getLogger(__name__)

EXPORT_HEADER = (
    "order.orderNumber",
    "order.orderDate",
    "order.totalQty",
    "order.totalPrice",
    "item.quantity",
    "item.description",
    "item.price",
    "item.totalPrice",
)

FILENAME_PREFIX = "parsedPackingSlip"

ExportRow = Tuple[Any, Any, Any, Any, Any, Any, Any, Any]


def to_rows(orders: Iterable[Order]) -> List[ExportRow]:
    """Flatten orders into one row per (order, item) pair."""
    return [
        (
            order.order_number,
            order.order_date,
            order.total_quantity,
            order.total_price,
            item.quantity,
            item.description,
            item.unit_price,
            item.total_price,
        )
        for order in orders
        for item in order.items
    ]


def _format_field(value: Any) -> str:
    return "" if value is None else str(value)


def to_csv_text(orders: Iterable[Order], delimiter: str = ",") -> str:
    """
    Serialize orders as delimited text with the fixed export header.

    Args:
        orders: Parsed orders
        delimiter: Field separator

    Returns:
        Header line plus one line per item, newline-joined
    """
    lines = [delimiter.join(EXPORT_HEADER)]
    for row in to_rows(orders):
        lines.append(delimiter.join(_format_field(value) for value in row))
    return "\n".join(lines)


def suggested_filename(now: Optional[float] = None) -> str:
    """Build the default export filename from a timestamp in seconds."""
    if now is None:
        now = time.time()
    return f"{FILENAME_PREFIX}-{int(now * 1000)}.csv"


def export_to_csv(orders: Iterable[Order],
                  output_path: Optional[Union[str, Path]] = None,
                  output_dir: Union[str, Path] = ".",
                  delimiter: str = ",") -> Path:
    """
    Write the delimited export of orders to a file.

    Args:
        orders: Parsed orders
        output_path: Destination file; defaults to a timestamped name in output_dir
        output_dir: Directory used when no output_path is given
        delimiter: Field separator

    Returns:
        Path of the written file
    """
    if output_path is None:
        output_path = Path(output_dir) / suggested_filename()
    output_path = Path(output_path)

    csv_text = to_csv_text(orders, delimiter=delimiter)
    with open(output_path, 'w', encoding='utf-8', newline='') as f:
        f.write(csv_text)

    logger.info(f"CSV export saved to: {output_path}")
    return output_path
