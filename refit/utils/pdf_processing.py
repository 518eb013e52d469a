"""
PDF processing utilities for text extraction and inspection.

Helper functions:
    page_count: Quick page count without full extraction.
    extract_page_texts: Text of every page, in document order.
    extract_lines: Non-empty text lines across all pages.
    normalize_for_matching: Text normalization for fuzzy matching.
    find_section_header: Find header text in a list of lines.
"""

import io
from typing import List, Optional

import pdfplumber
from PyPDF2 import PdfReader


def page_count(pdf_bytes: bytes) -> Optional[int]:
    """Get page count from PDF bytes, or None if unreadable."""
    try:
        reader = PdfReader(io.BytesIO(pdf_bytes))
        return len(reader.pages)
    except Exception:
        return None


def extract_page_texts(pdf_bytes: bytes) -> List[str]:
    """
    Extract the text layer of every page.

    Pages without a text layer (e.g. scanned images) contribute an empty string,
    so the result always has one entry per page.

    Raises:
        Whatever pdfplumber/pdfminer raise for corrupt or encrypted input. Callers
        at a context boundary wrap these into their own error types.
    """
    texts = []
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        for page in pdf.pages:
            texts.append(page.extract_text() or "")
    return texts


def extract_lines(pdf_bytes: bytes) -> List[str]:
    """Non-empty, stripped text lines across all pages, top-to-bottom."""
    lines = []
    for text in extract_page_texts(pdf_bytes):
        lines.extend(line.strip() for line in text.splitlines() if line.strip())
    return lines


def normalize_for_matching(text: str) -> str:
    """Keep only lowercase alphanumeric characters for fuzzy text matching."""
    return "".join(c for c in text.lower() if c.isalnum())


def find_section_header(section_name: str, lines: List[str]) -> Optional[int]:
    """Find index of section header in lines using normalized exact match, or None."""
    section_norm = normalize_for_matching(section_name)

    for i, text in enumerate(lines):
        # Exact match prevents "Skills" matching "Technical Skills Overview"
        if section_norm == normalize_for_matching(text):
            return i

    return None
