# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Timezone-aware datetime helpers.

All timestamps emitted by the service are UTC. The classification
pipeline itself never reads the clock; only report envelopes and
log records carry timestamps.

Example:
    >>> from levixia_screening.utils.datetime import utc_now, format_iso
    >>> format_iso(utc_now())
    '2025-01-01T12:00:00+00:00'
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Get current UTC time as timezone-aware datetime.

    Returns:
        Timezone-aware datetime representing current UTC time.
    """
    return datetime.now(timezone.utc)


def format_iso(dt: datetime | None) -> str | None:
    """Format a datetime as ISO 8601 string.

    Naive datetimes are assumed to be UTC.

    Args:
        dt: Datetime to format, or None.

    Returns:
        ISO formatted string, or None if input is None.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.isoformat()


def milliseconds_since(start: datetime) -> float:
    """Get elapsed milliseconds since a UTC start time.

    Args:
        start: Timezone-aware start time.

    Returns:
        Elapsed time in milliseconds, rounded to two decimals.
    """
    return round((utc_now() - start).total_seconds() * 1000, 2)
