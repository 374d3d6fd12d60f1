"""Timezone-aware time helpers.

Formatting choices come from the ``time`` config section
(``strip_microseconds``, ``use_z_suffix``); callers pass them through.
"""
from __future__ import annotations

from datetime import datetime, timezone


def utc_now(*, strip_microseconds: bool = True) -> datetime:
    """Return a timezone-aware UTC datetime."""
    now = datetime.now(timezone.utc)
    if strip_microseconds:
        now = now.replace(microsecond=0)
    return now


def format_utc(dt: datetime, *, use_z_suffix: bool = True) -> str:
    """Render ``dt`` as ISO 8601 in UTC."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    ts = dt.astimezone(timezone.utc).isoformat()
    if use_z_suffix:
        ts = ts.replace("+00:00", "Z")
    return ts


def parse_iso8601(timestamp_str: str) -> datetime:
    """Parse an ISO 8601 timestamp string into a UTC datetime.

    Accepts a trailing ``Z``; naive values are treated as UTC.
    """
    raw = str(timestamp_str).strip()
    if raw.endswith("Z"):
        raw = raw[:-1] + "+00:00"
    dt = datetime.fromisoformat(raw)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


__all__ = ["utc_now", "format_utc", "parse_iso8601"]
