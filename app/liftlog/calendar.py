"""
Calendar helpers for the weekly template.

Weeks are ISO weeks: they start on Monday.  A workout day with
``day_number`` n (1 = Monday … 7 = Sunday) maps to exactly one date in
any given week::

    week_start  = Monday on or before the anchor date
    target_date = week_start + (n - 1) days
"""

from __future__ import annotations

import datetime
from typing import Iterator

# Dashboard range presets, in days (inclusive of today).
RANGE_PRESETS: dict[str, int] = {"7d": 7, "14d": 14, "30d": 30, "90d": 90}


def week_start(day: datetime.date) -> datetime.date:
    """Return the Monday on or before *day*."""
    return day - datetime.timedelta(days=day.weekday())


def week_end(day: datetime.date) -> datetime.date:
    """Return the Sunday closing *day*'s week."""
    return week_start(day) + datetime.timedelta(days=6)


def target_date(day_number: int, week_anchor: datetime.date) -> datetime.date:
    """Canonical date of workout day *day_number* in the week of *week_anchor*.

    Raises :class:`ValueError` if *day_number* is not in 1..7.
    """
    if not 1 <= day_number <= 7:
        raise ValueError(f"day_number must be between 1 and 7, got {day_number}")
    return week_start(week_anchor) + datetime.timedelta(days=day_number - 1)


def same_week(a: datetime.date, b: datetime.date) -> bool:
    """``True`` if both dates fall in the same ISO week."""
    return week_start(a) == week_start(b)


def days_inclusive(start: datetime.date, end: datetime.date) -> int:
    """Number of calendar days in ``[start, end]``; ``0`` for an inverted range."""
    return max((end - start).days + 1, 0)


def iter_days(start: datetime.date, end: datetime.date) -> Iterator[datetime.date]:
    """Yield every date in ``[start, end]``."""
    current = start
    while current <= end:
        yield current
        current += datetime.timedelta(days=1)


def iter_week_starts(start: datetime.date, end: datetime.date) -> Iterator[datetime.date]:
    """Yield the Monday of every ISO week overlapping ``[start, end]``."""
    if end < start:
        return
    current = week_start(start)
    while current <= end:
        yield current
        current += datetime.timedelta(days=7)


def range_for_preset(preset: str, today: datetime.date) -> tuple[datetime.date, datetime.date]:
    """Resolve a dashboard preset such as ``'30d'`` to ``(start, end)``.

    ``'Nd'`` covers N calendar days ending today.  Raises :class:`KeyError`
    for unknown presets.
    """
    try:
        days = RANGE_PRESETS[preset]
    except KeyError:
        raise KeyError(f"Unknown range preset '{preset}'. Available: {sorted(RANGE_PRESETS)}") from None
    return today - datetime.timedelta(days=days - 1), today
