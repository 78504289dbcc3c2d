#!/usr/bin/env python3
"""
Example usage of the Packing Slip Parser
Demonstrates the pipeline on sample page texts, without a PDF.
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from packing_slip_parser import PackingSlipParser, OrderSegmenter, to_csv_text


def create_sample_pages():
    """Create sample page texts, as a PDF text extractor would return them."""
    return [
        """
        Packing Slip
        Order Number: 20240314-01
        Order Date: Shipping Method: Buyer Name: Seller Name: 03/14/2024
        Standard   Jane Doe   ACME Supply

        Quantity   Description          Price     Total Price
        2          Blue Widget          $5.00     $10.00
        1          Deluxe Gadget
                   Kit, boxed           $12.25    $12.25
        """,
        """
        Packing Slip (continued)
        3          Spring               $1.00     $3.00
        6 Total                                   $25.25 Total
        """,
        """
        Packing Slip
        Order Number: 20240315-07
        Order Date: Shipping Method: Buyer Name: Seller Name: 03/15/2024
        Express   John Roe   ACME Supply

        Quantity   Description          Price     Total Price
        4          Hex Nut M6           $0.50     $2.00
        4 Total                                   $2.00 Total
        """,
    ]


def demonstrate_segmentation(pages):
    print("=" * 60)
    print("DEMONSTRATION: Order Segmentation")
    print("=" * 60)

    blocks = OrderSegmenter().segment(pages)
    print(f"{len(pages)} pages -> {len(blocks)} order blocks")
    for i, block in enumerate(blocks, 1):
        print(f"  Block {i}: {len(block)} characters")


def demonstrate_parsing(pages):
    print("\n" + "=" * 60)
    print("DEMONSTRATION: Parsed Orders (JSON)")
    print("=" * 60)

    parser = PackingSlipParser()
    orders = parser.parse_pages(pages)
    print(parser.to_json(orders))
    return orders


def demonstrate_export(orders):
    print("\n" + "=" * 60)
    print("DEMONSTRATION: CSV Export")
    print("=" * 60)

    print(to_csv_text(orders))
    # "Kit, boxed" adds a column to its row; fields are never quoted
    print("\nNote: descriptions containing commas are written unquoted.")


def main():
    """Run all demonstrations."""
    pages = create_sample_pages()
    demonstrate_segmentation(pages)
    orders = demonstrate_parsing(pages)
    demonstrate_export(orders)


if __name__ == "__main__":
    main()
