"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from refit.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, output_format: str = "") -> Path:
    """
    Setup logger for rendering context.

    Configures loguru with provenance tracking and rendering-specific context.

    Args:
        log_dir: Directory for this rendering session
        output_format: Requested output format, for provenance

    Returns:
        Path to log file

    Example:
        from refit.contexts.rendering.logger import setup_rendering_logger

        log_file = setup_rendering_logger(log_dir, "pdf")
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={"Output format": output_format or "(unspecified)"},
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_render_start(resume_name: str, template_id: str, variant: str, output_format: str) -> None:
    """Log start of a render with context."""
    _log_info(f"Rendering {output_format.upper()}: {resume_name or '(unnamed)'}")
    _log_debug(f"  Template: {template_id}")
    _log_debug(f"  Variant: {variant}")


def log_render_result(
    filename: str,
    size_bytes: int,
    page_count,  # Optional[int]
    elapsed_time: float,
) -> None:
    """
    Log a finished render.

    Args:
        filename: Generated filename
        size_bytes: Size of the output
        page_count: Pages in the output (None for DOCX)
        elapsed_time: Time taken to render
    """
    pages = f", {page_count} page(s)" if page_count is not None else ""
    _log_success(f"{filename}: {size_bytes} bytes{pages} ({elapsed_time:.2f}s)")
