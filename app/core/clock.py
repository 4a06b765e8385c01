"""Timestamps: always timezone-aware UTC."""

import datetime


def utc_now() -> datetime.datetime:
    """Current time in UTC, with ``tzinfo`` set."""
    return datetime.datetime.now(datetime.timezone.utc)
