"""
Time and date utilities for local-calendar arithmetic.

Key concepts:
  - Local normalisation: every datetime is reduced to a *naive local*
    datetime before arithmetic.  Aware datetimes are converted to the system
    local zone first; naive datetimes are taken to already be local.
  - Calendar days vs. elapsed days: ``calendar_days_between()`` compares
    dates only (midnight-truncated), ``elapsed_days()`` floors the raw
    elapsed duration.  The two differ near midnight, e.g. 23:59 → 00:01 is
    one calendar day but zero elapsed days.
  - Day-of-week: ``js_day_of_week()`` numbers days 0 = Sunday … 6 = Saturday,
    the numbering stored in recommendation rules.  ``week_range()`` uses
    Monday-start weeks; ``day_range()`` and ``month_range()`` give the
    other statistics periods.
"""

from __future__ import annotations

import calendar
import math
from datetime import datetime, timedelta
from typing import Optional

SECONDS_PER_DAY = 86_400


def to_local_naive(dt: datetime) -> datetime:
    """Return ``dt`` as a naive datetime in the local time zone."""
    if dt.tzinfo is None:
        return dt
    return dt.astimezone().replace(tzinfo=None)


def local_now(now: Optional[datetime] = None) -> datetime:
    """Return ``now`` normalised to naive local time, or the current time."""
    if now is None:
        return datetime.now()
    return to_local_naive(now)


def calendar_days_between(start: datetime, end: datetime) -> int:
    """Return signed whole calendar days from ``start`` to ``end``.

    Both values are truncated to their local date first, so the result does
    not depend on the time of day.

    Returns:
        ``(end.date() - start.date()).days`` after local normalisation.
    """
    return (to_local_naive(end).date() - to_local_naive(start).date()).days


def elapsed_days(start: datetime, end: datetime) -> int:
    """Return ``floor(elapsed seconds / 86400)`` from ``start`` to ``end``."""
    delta = to_local_naive(end) - to_local_naive(start)
    return math.floor(delta.total_seconds() / SECONDS_PER_DAY)


def js_day_of_week(dt: datetime) -> int:
    """Return the weekday of ``dt`` with 0 = Sunday, 6 = Saturday."""
    return (to_local_naive(dt).weekday() + 1) % 7


def week_range(now: datetime) -> tuple[datetime, datetime]:
    """Return the Monday-start week containing ``now``.

    Returns:
        ``(start, end)`` where ``start`` is Monday 00:00:00 and ``end`` is
        Sunday 23:59:59.999999, both naive local datetimes.
    """
    local = to_local_naive(now)
    monday = (local - timedelta(days=local.weekday())).replace(
        hour=0, minute=0, second=0, microsecond=0
    )
    sunday_end = monday + timedelta(days=7) - timedelta(microseconds=1)
    return monday, sunday_end


def day_range(now: datetime) -> tuple[datetime, datetime]:
    """Return 00:00:00 and 23:59:59.999999 of the local day containing ``now``."""
    start = to_local_naive(now).replace(hour=0, minute=0, second=0, microsecond=0)
    return start, start + timedelta(days=1) - timedelta(microseconds=1)


def month_range(now: datetime) -> tuple[datetime, datetime]:
    """Return the first instant and the last microsecond of ``now``'s month."""
    start = to_local_naive(now).replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    days_in_month = calendar.monthrange(start.year, start.month)[1]
    return start, start + timedelta(days=days_in_month) - timedelta(microseconds=1)
