"""
Todo completion statistics over calendar periods.

Periods are local time and always contain ``now``:

  - today:  00:00:00 through 23:59:59.999999
  - week:   Monday 00:00 through Sunday 23:59:59.999999
  - month:  the 1st 00:00 through the last day 23:59:59.999999

For every period the same two rules apply:

  - A todo belongs to the period if it was created *or* updated in it.
  - A todo counts as completed in the period if it is done and its
    ``updated_at`` (the completion time) falls in the period.

Two result shapes are offered.  ``CompletionStats`` is the bare
completed / total / rate triple used by the dashboard
(``calculate_completion_dashboard``).  ``PeriodStats`` adds per-category
counts and, for weeks only, completions per weekday indexed Monday = 0.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Optional

from daily_helper.models.todo import TodoItem
from daily_helper.taxonomy.todo_taxonomy import TodoCategory
from daily_helper.utils.time_utils import (
    day_range,
    local_now,
    month_range,
    to_local_naive,
    week_range,
)


@dataclass
class CategoryCount:
    completed: int = 0
    total:     int = 0


@dataclass
class CompletionStats:
    completed:       int
    total:           int
    completion_rate: int


@dataclass
class CompletionDashboard:
    """Completion rates for today, this week and this month."""

    today: CompletionStats
    week:  CompletionStats
    month: CompletionStats


@dataclass
class PeriodStats:
    """Completion summary for one week or month.

    Attributes:
        completed_count:   Todos completed in the period.
        total_count:       Todos created or updated in the period.
        completion_rate:   Rounded percentage 0–100; 0 when nothing happened.
        category_stats:    Per-category completed / total counts.
        daily_completions: Completions per weekday, Monday first.  Weeks only;
                           ``None`` for months.
    """

    completed_count:   int
    total_count:       int
    completion_rate:   int
    category_stats:    dict[TodoCategory, CategoryCount] = field(default_factory=dict)
    daily_completions: Optional[list[int]] = None


def _completion_rate(completed: int, total: int) -> int:
    if total <= 0:
        return 0
    # Half-up rounding (12.5 -> 13)
    return math.floor(completed / total * 100 + 0.5)


def _split_period(
    todos: Iterable[TodoItem],
    start: datetime,
    end:   datetime,
) -> tuple[list[TodoItem], list[TodoItem]]:
    """Return ``(todos in the period, todos completed in the period)``."""

    def inside(ts: datetime) -> bool:
        return start <= to_local_naive(ts) <= end

    period = [t for t in todos if inside(t.created_at) or inside(t.updated_at)]
    completed = [t for t in period if t.is_done and inside(t.updated_at)]
    return period, completed


# ── Completion rates ──────────────────────────────────────────────────────────


def _completion_in_range(
    todos: Iterable[TodoItem],
    start: datetime,
    end:   datetime,
) -> CompletionStats:
    period, completed = _split_period(todos, start, end)
    return CompletionStats(
        completed=len(completed),
        total=len(period),
        completion_rate=_completion_rate(len(completed), len(period)),
    )


def calculate_today_completion(
    todos: Iterable[TodoItem],
    now:   Optional[datetime] = None,
) -> CompletionStats:
    return _completion_in_range(todos, *day_range(local_now(now)))


def calculate_week_completion(
    todos: Iterable[TodoItem],
    now:   Optional[datetime] = None,
) -> CompletionStats:
    return _completion_in_range(todos, *week_range(local_now(now)))


def calculate_month_completion(
    todos: Iterable[TodoItem],
    now:   Optional[datetime] = None,
) -> CompletionStats:
    return _completion_in_range(todos, *month_range(local_now(now)))


def calculate_completion_dashboard(
    todos: Iterable[TodoItem],
    now:   Optional[datetime] = None,
) -> CompletionDashboard:
    """Today / week / month completion rates, all evaluated at the same ``now``."""
    current = local_now(now)
    items = list(todos)
    return CompletionDashboard(
        today=calculate_today_completion(items, now=current),
        week=calculate_week_completion(items, now=current),
        month=calculate_month_completion(items, now=current),
    )


# ── Period breakdowns ─────────────────────────────────────────────────────────


def _period_stats(
    todos:         Iterable[TodoItem],
    start:         datetime,
    end:           datetime,
    with_weekdays: bool,
) -> PeriodStats:
    period, completed = _split_period(todos, start, end)

    category_stats = {category: CategoryCount() for category in TodoCategory}
    for todo in period:
        category_stats[todo.category].total += 1
    for todo in completed:
        category_stats[todo.category].completed += 1

    daily: Optional[list[int]] = None
    if with_weekdays:
        daily = [0] * 7
        for todo in completed:
            daily[to_local_naive(todo.updated_at).weekday()] += 1

    return PeriodStats(
        completed_count=len(completed),
        total_count=len(period),
        completion_rate=_completion_rate(len(completed), len(period)),
        category_stats=category_stats,
        daily_completions=daily,
    )


def calculate_week_stats(
    todos: Iterable[TodoItem],
    now:   Optional[datetime] = None,
) -> PeriodStats:
    """Summarise todo activity for the week containing ``now``."""
    start, end = week_range(local_now(now))
    return _period_stats(todos, start, end, with_weekdays=True)


def calculate_month_stats(
    todos: Iterable[TodoItem],
    now:   Optional[datetime] = None,
) -> PeriodStats:
    """Summarise todo activity for the calendar month containing ``now``."""
    start, end = month_range(local_now(now))
    return _period_stats(todos, start, end, with_weekdays=False)
