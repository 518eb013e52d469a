"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
Templating runs inside intake or rendering sessions, so sinks are configured by
those contexts; this module only emits.
"""

from loguru import logger

CONTEXT_PREFIX = "[template]"


def _log_info(message: str) -> None:
    """Log info message with [template] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [template] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [template] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [template] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_layout_result(template_id: str, variant: str, block_count: int, page_count: int) -> None:
    """Log the size of a computed layout."""
    _log_debug(
        f"Layout for {template_id}/{variant}: {block_count} blocks on {page_count} page(s)"
    )
