"""
Document format detection and upload checks.

Maps a filename or extension to one of the supported document formats, and applies
the upload handler's allow-list and size limit before any bytes are decoded.
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from dotenv import load_dotenv

from refit.contexts.intake.exceptions import UnsupportedFormatError, UploadTooLargeError
from refit.contexts.intake.logger import _log_debug, _log_warning

load_dotenv()

# 10 MiB unless overridden
MAX_FILE_SIZE = int(os.getenv("MAX_FILE_SIZE", str(10 * 1024 * 1024)))


class DocumentFormat(str, Enum):
    """Supported upload formats."""

    PDF = "pdf"
    DOC = "doc"
    DOCX = "docx"
    TXT = "txt"

    @classmethod
    def values(cls) -> list:
        return [member.value for member in cls]


@dataclass(frozen=True)
class RawDocument:
    """
    Uploaded document as received: bytes plus the detected format.

    Consumed once by the text extractor and then discarded.
    """

    buffer: bytes
    format: DocumentFormat
    name: Optional[str] = None


def detect_format(name_or_extension: str) -> DocumentFormat:
    """
    Detect the document format from a filename or extension.

    Accepts "resume.PDF", ".pdf" and "pdf" alike.

    Args:
        name_or_extension: Filename, dotted extension, or bare extension

    Returns:
        The matching DocumentFormat

    Raises:
        UnsupportedFormatError: For anything outside pdf/doc/docx/txt
    """
    value = (name_or_extension or "").strip().lower()
    extension = value.rsplit(".", 1)[-1] if "." in value else value

    try:
        return DocumentFormat(extension)
    except ValueError:
        raise UnsupportedFormatError(extension or value, filename=name_or_extension) from None


def validate_upload(
    buffer: bytes,
    filename: str,
    max_bytes: int = MAX_FILE_SIZE,
) -> RawDocument:
    """
    Apply the upload allow-list and size limit.

    Args:
        buffer: Uploaded bytes
        filename: Declared name of the upload (extension decides the format)
        max_bytes: Size limit in bytes (default: MAX_FILE_SIZE env, 10 MiB)

    Returns:
        RawDocument ready for text extraction

    Raises:
        UnsupportedFormatError: Extension not in the allow-list
        UploadTooLargeError: Buffer larger than max_bytes
    """
    fmt = detect_format(filename)

    if len(buffer) > max_bytes:
        _log_warning(f"Rejected upload {filename!r}: {len(buffer)} bytes > {max_bytes}")
        raise UploadTooLargeError(len(buffer), max_bytes, filename=filename)

    _log_debug(f"Accepted upload {filename!r} as {fmt.value} ({len(buffer)} bytes)")
    return RawDocument(buffer=buffer, format=fmt, name=filename)
