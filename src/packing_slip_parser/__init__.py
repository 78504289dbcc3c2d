"""
Packing Slip Parser

Extracts orders and line items from multi-order packing slip PDFs.
"""

__version__ = "1.0.0"

from .models import Order, OrderItem
from .segmenter import OrderSegmenter, segment_pages
from .order_parser import OrderParser, parse_order_text
from .exporter import EXPORT_HEADER, to_rows, to_csv_text, export_to_csv
from .pdf_extractor import PDFPageExtractor, PDFExtractionError, extract_pdf_pages
from .parser import PackingSlipParser

__all__ = [
    "Order",
    "OrderItem",
    "OrderSegmenter",
    "segment_pages",
    "OrderParser",
    "parse_order_text",
    "EXPORT_HEADER",
    "to_rows",
    "to_csv_text",
    "export_to_csv",
    "PDFPageExtractor",
    "PDFExtractionError",
    "extract_pdf_pages",
    "PackingSlipParser",
]
