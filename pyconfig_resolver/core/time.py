# pyconfig_resolver/core/time.py
from __future__ import annotations
from datetime import datetime, timezone

__all__ = ["nowIso"]



def nowIso() -> str:
    """
    Returns the current UTC wall-clock time as ISO-8601 with millisecond
    precision and a "Z" suffix, e.g. "2023-03-01T10:20:30.123Z".
    """
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
