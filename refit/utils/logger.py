"""
Logging setup shared by the intake, templating and rendering contexts.

Library modules only emit through their context wrappers
(contexts/{context}/logger.py); sinks are attached here, once per CLI run or
service process.

Sinks:
    file:    <log_dir>/<context>.log, everything from DEBUG up
    console: stderr, LOG_LEVEL and up, so CLI results on stdout stay clean
"""

import os
import sys
from pathlib import Path
from typing import Optional, TextIO

from dotenv import load_dotenv
from loguru import logger

from refit import __version__
from refit.utils.timestamp import now_exact

load_dotenv()

CONSOLE_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <7} | {message}"
CONSOLE_FORMAT = "<dim>{time:HH:mm:ss}</dim> | <level>{level: <7}</level> | <level>{message}</level>"

LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[dict] = None,
    level_colors: Optional[dict] = None,
    console: Optional[TextIO] = None,
) -> Path:
    """
    Replace all loguru sinks with a session log file plus a console sink.

    Args:
        context_name: Log file stem ("intake", "template", "render")
        log_dir: Session directory, created if missing
        extra_provenance: Additional lines for the provenance header
        level_colors: Console color overrides, e.g. {"INFO": "<cyan>"}
        console: Console stream (default: sys.stderr at call time)

    Returns:
        Path to the log file

    Example:
        log_file = setup_logger(
            context_name="render",
            log_dir=Path("outs/logs/export_20251114_123456"),
            extra_provenance={"Output format": "pdf"},
        )
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()

    for level_name, color in {**LEVEL_COLORS, **(level_colors or {})}.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(
        console or sys.stderr,
        format=CONSOLE_FORMAT,
        level=CONSOLE_LEVEL,
        colorize=True,
    )

    log_provenance({"Context": context_name, **(extra_provenance or {})})
    return log_file


def reset_logger() -> None:
    """Drop session sinks and go back to loguru's default stderr sink."""
    logger.remove()
    logger.add(sys.stderr)


def log_provenance(extra_context: Optional[dict] = None) -> None:
    """
    Write a provenance header: when, what command, which interpreter and version.

    Args:
        extra_context: Additional key-value pairs to log
    """
    lines = {
        "Started": now_exact(),
        "Command": " ".join(sys.argv),
        "Working directory": Path.cwd(),
        "Python": sys.version.split()[0],
        "refit": __version__,
        **(extra_context or {}),
    }

    logger.info("=" * 80)
    for key, value in lines.items():
        logger.info(f"{key}: {value}")
    logger.info("=" * 80)
