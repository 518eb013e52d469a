"""
Shared utilities for REFIT.

Common functionality used across contexts:
- Logger setup
- PDF helpers
- Timestamps
"""

from refit.utils.timestamp import now, now_exact, timestamp_millis

__all__ = ["now", "now_exact", "timestamp_millis"]
