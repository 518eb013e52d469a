"""Custom exceptions for the intake context with user-facing messages."""

from typing import Optional


class IngestionError(Exception):
    """
    Base class for ingestion failures.

    Attributes:
        message: Detailed description for logs
        user_message: Short message safe to show to the person who uploaded the file
        filename: Declared name of the uploaded document, if known
    """

    user_message = "could not process this file"

    def __init__(self, message: str, filename: Optional[str] = None):
        self.message = message
        self.filename = filename

        parts = [message]
        if filename:
            parts.append(f"File: {filename}")

        super().__init__("\n".join(parts))


class UnsupportedFormatError(IngestionError):
    """Raised when a document's extension is not one of pdf, doc, docx, txt."""

    user_message = "unsupported file type"

    def __init__(self, extension: str, filename: Optional[str] = None):
        self.extension = extension
        super().__init__(f"Unsupported document format: '{extension}'", filename=filename)


class ExtractionError(IngestionError):
    """
    Raised when a supported document cannot be decoded.

    Distinguishes a failed decode (corrupt file, encrypted PDF, legacy binary .doc)
    from a valid document that simply has no text.
    """

    user_message = "could not read this file"

    def __init__(self, message: str, fmt: Optional[str] = None, filename: Optional[str] = None):
        self.format = fmt
        super().__init__(message, filename=filename)


class UploadTooLargeError(IngestionError):
    """Raised when an upload exceeds the configured size limit."""

    user_message = "file is too large"

    def __init__(self, size_bytes: int, max_bytes: int, filename: Optional[str] = None):
        self.size_bytes = size_bytes
        self.max_bytes = max_bytes
        super().__init__(
            f"Upload of {size_bytes} bytes exceeds limit of {max_bytes} bytes", filename=filename
        )
