"""
Intake context logger.

Provides logging interface for intake context with automatic [intake] prefix.
All intake modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from refit.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[intake]"


def setup_intake_logger(log_dir: Path, source: str = "upload") -> Path:
    """
    Setup logger for intake context.

    Args:
        log_dir: Directory for this intake session
        source: Where the documents come from, for provenance ("upload", "cli")

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="intake",
        log_dir=log_dir,
        extra_provenance={"Source": source},
    )


def _log_info(message: str) -> None:
    """Log info message with [intake] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [intake] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [intake] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [intake] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [intake] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_extraction_result(fmt: str, size_bytes: int, text: str) -> None:
    """Log the outcome of a successful decode."""
    if text.strip():
        _log_debug(f"Extracted {len(text)} chars from {size_bytes} byte {fmt} document")
    else:
        _log_warning(f"{fmt} document ({size_bytes} bytes) decoded but contains no text")


def log_segmentation_result(resume) -> None:
    """Log a one-line summary of a ParsedResume."""
    _log_debug(
        f"Segmented resume: name={resume.name!r} "
        f"experience={len(resume.experience)} education={len(resume.education)} "
        f"skills={len(resume.skills)} summary={'yes' if resume.summary else 'no'}"
    )
