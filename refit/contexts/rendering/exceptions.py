"""Custom exceptions for the rendering context."""

from typing import Optional


class RenderError(Exception):
    """
    Raised when a document backend fails to produce bytes.

    The backend's own exception is chained as __cause__ and kept on
    `original_error` for logging; only `message` is meant for users.

    Attributes:
        message: What failed
        output_format: "pdf" or "docx"
        original_error: Backend exception, if any
    """

    def __init__(
        self,
        message: str,
        output_format: str,
        original_error: Optional[BaseException] = None,
    ):
        self.message = message
        self.output_format = output_format
        self.original_error = original_error
        super().__init__(f"{output_format.upper()} rendering failed: {message}")
