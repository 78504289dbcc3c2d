#!/usr/bin/env python3
"""
Simple Packing Slip Parser
A user-friendly script to parse packing slip PDFs.
"""

import sys
import os
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent / "src"))

from packing_slip_parser import PackingSlipParser, export_to_csv


def main():
    """Main function for PDF parsing."""
    print("📦 PACKING SLIP PARSER")
    print("=" * 50)
    print("This tool extracts orders and items from packing slip PDFs.")
    print("=" * 50)

    try:
        # Get PDF file path
        while True:
            pdf_path = input("\n📄 Please enter the path to your packing slip PDF: ").strip()

            if not pdf_path:
                print("❌ No file path provided. Please try again.")
                continue

            # Remove quotes if user added them
            pdf_path = pdf_path.strip('"\'')

            if not os.path.exists(pdf_path):
                print(f"❌ File not found: {pdf_path}")
                continue

            if not pdf_path.lower().endswith('.pdf'):
                print("❌ File must be a PDF (.pdf extension)")
                continue

            break

        print(f"\n🔄 Parsing PDF: {pdf_path}")
        parser = PackingSlipParser()
        orders = parser.parse_pdf(pdf_path)

        print("\n📋 PARSED ORDERS:")
        print(parser.to_json(orders))

        print(f"\n📈 SUMMARY:")
        print(f"   • Found {len(orders)} order(s)")
        for order in orders:
            print(f"   • Order {order.order_number}: {len(order.items)} item(s), "
                  f"total ${order.total_price}")

        choice = input("\n💾 Export items to CSV? (y/N): ").strip().lower()
        if choice == "y":
            csv_path = export_to_csv(orders)
            print(f"💾 CSV saved to: {csv_path}")

    except KeyboardInterrupt:
        print("\n\n👋 Operation cancelled by user.")
        sys.exit(0)
    except Exception as e:
        print(f"\n❌ Error: {e}")
        print("Please check your PDF file and try again.")
        sys.exit(1)


if __name__ == "__main__":
    main()
