#!/usr/bin/env python3
"""
Per-page PDF text extraction with multiple fallback strategies.
"""

import logging
import os
import shutil
import subprocess
from typing import List

import fitz  # PyMuPDF
import pdfplumber

logger = logging.getLogger(__name__)


class PDFExtractionError(Exception):
    """Raised when no strategy can extract page text from a PDF."""


class PDFPageExtractor:
    """PDF extractor returning one text string per page, in page order."""

    def __init__(self):
        self.extraction_methods = [
            self._extract_with_pdfplumber,
            self._extract_with_pymupdf,
            self._extract_with_pdftotext,
        ]

    def extract_pages(self, pdf_path: str) -> List[str]:
        """
        Extract the text of every page of a PDF.

        Args:
            pdf_path: Path to the PDF file

        Returns:
            List of page texts; blank pages are empty strings
        """
        if not os.path.exists(pdf_path):
            raise FileNotFoundError(f"PDF file not found: {pdf_path}")

        for method in self.extraction_methods:
            try:
                pages = method(pdf_path)
                if any(page.strip() for page in pages):
                    logger.info(f"Extracted {len(pages)} page(s) using {method.__name__}")
                    return [self.normalize_line_endings(page) for page in pages]
                logger.warning(f"Method {method.__name__} returned no text")
            except Exception as e:
                logger.warning(f"Method {method.__name__} failed: {e}")
                continue

        logger.error("All extraction methods failed")
        raise PDFExtractionError(f"Could not extract text from {pdf_path}")

    def normalize_line_endings(self, text: str) -> str:
        return text.replace('\r\n', '\n').replace('\r', '\n')

    def _extract_with_pdfplumber(self, pdf_path: str) -> List[str]:
        """Extract page texts using pdfplumber."""
        with pdfplumber.open(pdf_path) as pdf:
            return [page.extract_text() or "" for page in pdf.pages]

    def _extract_with_pymupdf(self, pdf_path: str) -> List[str]:
        """Extract page texts using PyMuPDF."""
        with fitz.open(pdf_path) as doc:
            return [page.get_text("text") or "" for page in doc]

    def _extract_with_pdftotext(self, pdf_path: str) -> List[str]:
        """Extract page texts using the pdftotext command-line tool."""
        if shutil.which('pdftotext') is None:
            logger.warning("pdftotext not available")
            return []

        result = subprocess.run(
            ['pdftotext', '-layout', pdf_path, '-'],
            capture_output=True,
            text=True
        )

        if result.returncode != 0:
            logger.warning(f"pdftotext failed: {result.stderr}")
            return []

        # pdftotext ends every page with a form feed
        pages = result.stdout.split('\f')
        if pages and not pages[-1].strip():
            pages = pages[:-1]
        return pages


def extract_pdf_pages(pdf_path: str) -> List[str]:
    """
    Convenience function to extract per-page text from a PDF.

    Args:
        pdf_path: Path to the PDF file

    Returns:
        List of page texts in page order
    """
    extractor = PDFPageExtractor()
    return extractor.extract_pages(pdf_path)
