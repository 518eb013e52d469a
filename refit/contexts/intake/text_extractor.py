"""
Format-specific text extraction.

Each decoder turns raw bytes into plain text. A decoder either returns the full text
(possibly empty for a valid document with no text layer) or raises ExtractionError;
it never returns partially decoded text.
"""

import io
from typing import Callable, Dict, Iterator, Union

import docx
from docx.table import Table

from refit.contexts.intake.exceptions import ExtractionError
from refit.contexts.intake.format_detector import DocumentFormat, RawDocument, detect_format
from refit.contexts.intake.logger import _log_error, log_extraction_result
from refit.utils.pdf_processing import extract_page_texts


def _decode_txt(buffer: bytes) -> str:
    try:
        return buffer.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ExtractionError("Text file is not valid UTF-8", fmt="txt") from e


def _decode_pdf(buffer: bytes) -> str:
    try:
        pages = extract_page_texts(buffer)
    except Exception as e:
        # pdfminer raises a zoo of exception types for corrupt and encrypted files
        raise ExtractionError(f"PDF decode failed: {type(e).__name__}", fmt="pdf") from e
    return "\n".join(pages)


def _iter_block_text(container) -> Iterator[str]:
    """Yield paragraph text of a document body or table cell in reading order."""
    for block in container.iter_inner_content():
        if isinstance(block, Table):
            yield from _iter_table_text(block)
        else:
            yield block.text


def _iter_table_text(table: Table) -> Iterator[str]:
    # Merged cells come back once per grid position they cover
    seen = set()
    for row in table.rows:
        for cell in row.cells:
            if cell._tc in seen:
                continue
            seen.add(cell._tc)
            yield from _iter_block_text(cell)


def _decode_word(buffer: bytes) -> str:
    """
    Extract paragraph text from a Word document, table cells included.

    Empty paragraphs are kept as blank lines so paragraph boundaries survive.
    Table cells are read row by row where the table sits in the body, one line
    per cell paragraph. Legacy binary .doc files are not OOXML packages and fail here.
    """
    try:
        document = docx.Document(io.BytesIO(buffer))
        return "\n".join(_iter_block_text(document))
    except Exception as e:
        raise ExtractionError(f"Word document decode failed: {type(e).__name__}", fmt="docx") from e


DECODERS: Dict[DocumentFormat, Callable[[bytes], str]] = {
    DocumentFormat.TXT: _decode_txt,
    DocumentFormat.PDF: _decode_pdf,
    DocumentFormat.DOC: _decode_word,
    DocumentFormat.DOCX: _decode_word,
}


def extract_text(buffer: bytes, fmt: Union[DocumentFormat, str]) -> str:
    """
    Extract plain text from a document buffer.

    Args:
        buffer: Raw document bytes
        fmt: DocumentFormat, or an extension/filename to detect it from

    Returns:
        Extracted text ("" for a valid document without text)

    Raises:
        UnsupportedFormatError: Format not supported (no decode is attempted)
        ExtractionError: The decoder failed
    """
    if not isinstance(fmt, DocumentFormat):
        fmt = detect_format(fmt)

    decoder = DECODERS[fmt]
    try:
        text = decoder(buffer)
    except ExtractionError as e:
        e.format = fmt.value
        _log_error(f"Extraction failed for {fmt.value} document: {e.message}")
        raise

    log_extraction_result(fmt.value, len(buffer), text)
    return text


def extract_document(document: RawDocument) -> str:
    """Extract text from a RawDocument, tagging errors with its declared name."""
    try:
        return extract_text(document.buffer, document.format)
    except ExtractionError as e:
        e.filename = document.name
        raise
