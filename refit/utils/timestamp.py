"""Timestamp helpers for log directories and generated filenames."""

import time
from datetime import datetime


def now() -> str:
    """Current local time as a compact sortable string (e.g. 20251114_123456)."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def now_exact() -> str:
    """Current local time in ISO 8601 with microseconds."""
    return datetime.now().isoformat()


def timestamp_millis() -> int:
    """Milliseconds since the epoch, used to keep generated filenames unique."""
    return time.time_ns() // 1_000_000
