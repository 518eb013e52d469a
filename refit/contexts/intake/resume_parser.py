"""
Resume ingestion orchestrators.

Pipeline: FormatDetector -> TextExtractor -> SectionSegmenter -> FieldExtractor.
Each call is self-contained; nothing is shared between calls.
"""

from pathlib import Path
from typing import Optional, Union

from refit.contexts.intake.format_detector import (
    MAX_FILE_SIZE,
    DocumentFormat,
    detect_format,
    validate_upload,
)
from refit.contexts.intake.logger import _log_info
from refit.contexts.intake.resume_data_structure import IngestionResult, ParsedResume
from refit.contexts.intake.section_patterns import SectionHeaderMatcher
from refit.contexts.intake.section_segmenter import SectionSegmenter
from refit.contexts.intake.text_extractor import extract_document, extract_text


def parse_resume_text(text: str, matcher: Optional[SectionHeaderMatcher] = None) -> ParsedResume:
    """Segment already-extracted text into a ParsedResume."""
    return SectionSegmenter(matcher).segment(text)


def parse_resume_buffer(
    buffer: bytes,
    fmt: Union[DocumentFormat, str],
    matcher: Optional[SectionHeaderMatcher] = None,
) -> IngestionResult:
    """
    Extract and parse a resume held in memory.

    Args:
        buffer: Raw document bytes
        fmt: DocumentFormat or extension/filename ("pdf", ".docx", "cv.txt")
        matcher: Optional header matching strategy

    Returns:
        IngestionResult with extracted text and parsed record

    Raises:
        UnsupportedFormatError: Unknown format
        ExtractionError: Decode failure
    """
    if not isinstance(fmt, DocumentFormat):
        fmt = detect_format(fmt)

    text = extract_text(buffer, fmt)
    return IngestionResult(text=text, resume=parse_resume_text(text, matcher), format=fmt.value)


def parse_upload(
    buffer: bytes,
    filename: str,
    max_bytes: int = MAX_FILE_SIZE,
) -> IngestionResult:
    """
    Full upload path: allow-list and size check, then extraction and parsing.

    Raises:
        UnsupportedFormatError, UploadTooLargeError, ExtractionError
    """
    document = validate_upload(buffer, filename, max_bytes=max_bytes)
    text = extract_document(document)
    result = IngestionResult(
        text=text, resume=parse_resume_text(text), format=document.format.value
    )
    _log_info(f"Parsed upload {filename!r}: {len(result.resume.experience)} experience entries")
    return result


def parse_resume_file(file_path: Union[str, Path]) -> IngestionResult:
    """
    Parse a resume file from disk; the extension decides the decoder.

    Raises:
        FileNotFoundError: Path does not exist
        UnsupportedFormatError, ExtractionError
    """
    file_path = Path(file_path)
    fmt = detect_format(file_path.name)
    if not file_path.exists():
        raise FileNotFoundError(f"Resume not found: {file_path}")

    _log_info(f"Parsing {file_path.name} as {fmt.value}")
    return parse_resume_buffer(file_path.read_bytes(), fmt)
