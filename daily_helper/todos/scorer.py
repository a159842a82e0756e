"""
Todo urgency scoring: priority + due date + procrastination.

Score formula (unweighted sum, unbounded above)
------------------------------------------------
    total = priority_score + due_date_score + delay_score

All three factors share one additive scale, so a badly overdue low-priority
task (50+) can outrank a fresh high-priority one (30).

Component explanations
----------------------
priority_score:
    Lookup table: high 30, medium 15, low 5.

due_date_score (d = calendar days until due, local dates only):
    no due date → 0
    d < 0       → 50 + |d| * 5
    d = 0       → 40
    d = 1       → 30
    2 <= d <= 7 → 20 - 2d          (16 … 6)
    d > 7       → max(0, 10 - d)   (2, 1, then 0 from day 10)

delay_score (whole *elapsed* days since creation / last update):
    created >= 7 and updated >= 3 → min(25, 2 * created)
    created >= 3 and updated >= 1 → min(15, created)
    otherwise                     → 0

Reasons
-------
One entry per non-zero factor, in order: priority label, due-date bucket,
delay.  The due-date reason only covers d <= 7; days 8–9 still score but
carry no reason text.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from daily_helper.models.todo import TodoItem
from daily_helper.taxonomy.todo_taxonomy import TodoPriority
from daily_helper.utils.time_utils import calendar_days_between, elapsed_days, local_now

_PRIORITY_WEIGHTS: dict[TodoPriority, float] = {
    TodoPriority.HIGH:   30.0,
    TodoPriority.MEDIUM: 15.0,
    TodoPriority.LOW:     5.0,
}

DEFAULT_LOCALE = "ko"

_REASON_TEXT: dict[str, dict[str, str]] = {
    "ko": {
        "priority":     "우선순위: {label}",
        "overdue":      "마감일 지남",
        "due_today":    "오늘 마감",
        "due_tomorrow": "내일 마감",
        "due_in_days":  "{days}일 후 마감",
        "stalled":      "{days}일째 미루는 중",
    },
    "en": {
        "priority":     "Priority: {label}",
        "overdue":      "overdue",
        "due_today":    "due today",
        "due_tomorrow": "due tomorrow",
        "due_in_days":  "due in {days} days",
        "stalled":      "{days} days stalled",
    },
}

_PRIORITY_LABELS: dict[str, dict[TodoPriority, str]] = {
    "ko": {TodoPriority.HIGH: "높음", TodoPriority.MEDIUM: "중간", TodoPriority.LOW: "낮음"},
    "en": {TodoPriority.HIGH: "high", TodoPriority.MEDIUM: "medium", TodoPriority.LOW: "low"},
}

SUPPORTED_LOCALES: frozenset[str] = frozenset(_REASON_TEXT)


@dataclass
class TodoScoreComponents:
    """Per-factor breakdown of a todo score."""

    priority_score: float
    due_date_score: float
    delay_score:    float

    @property
    def total(self) -> float:
        return self.priority_score + self.due_date_score + self.delay_score


@dataclass
class ScoredTodo:
    """A todo with its computed score.  Derived, never persisted.

    Attributes:
        todo:       The scored item.
        score:      Total score (``components.total``).
        reasons:    Human-readable explanations, one per contributing factor.
        components: Per-factor breakdown.
    """

    todo:       TodoItem
    score:      float
    reasons:    list[str]
    components: TodoScoreComponents


def calculate_priority_score(priority: TodoPriority) -> float:
    return _PRIORITY_WEIGHTS[priority]


def days_until_due(due_date: datetime, now: Optional[datetime] = None) -> int:
    """Signed calendar days from today to ``due_date`` (negative = overdue)."""
    return calendar_days_between(local_now(now), due_date)


def calculate_due_date_score(
    due_date: Optional[datetime],
    now:      Optional[datetime] = None,
) -> float:
    """Score deadline proximity; see module docstring for the buckets."""
    if due_date is None:
        return 0.0

    days = days_until_due(due_date, now)

    if days < 0:
        return 50.0 + abs(days) * 5.0
    if days == 0:
        return 40.0
    if days == 1:
        return 30.0
    if days <= 7:
        return 20.0 - days * 2.0
    return max(0.0, 10.0 - days)


def calculate_delay_score(
    created_at: datetime,
    updated_at: datetime,
    now:        Optional[datetime] = None,
) -> float:
    """Score how long a todo has been sitting untouched."""
    current = local_now(now)
    days_since_created = elapsed_days(created_at, current)
    days_since_updated = elapsed_days(updated_at, current)

    if days_since_created >= 7 and days_since_updated >= 3:
        return float(min(25, days_since_created * 2))

    if days_since_created >= 3 and days_since_updated >= 1:
        return float(min(15, days_since_created))

    return 0.0


def calculate_todo_score(
    todo:   TodoItem,
    now:    Optional[datetime] = None,
    locale: str = DEFAULT_LOCALE,
) -> ScoredTodo:
    """Score one todo and explain the contributing factors.

    Args:
        todo:   Item to score.  ``is_done`` is not checked here.
        now:    Clock value; defaults to the current local time.
        locale: Reason text language, ``"ko"`` or ``"en"``.  Unknown values
                fall back to ``"ko"``.

    Returns:
        ScoredTodo with score, reasons and component breakdown.
    """
    current = local_now(now)
    text = _REASON_TEXT.get(locale, _REASON_TEXT[DEFAULT_LOCALE])
    labels = _PRIORITY_LABELS.get(locale, _PRIORITY_LABELS[DEFAULT_LOCALE])
    reasons: list[str] = []

    priority_score = calculate_priority_score(todo.priority)
    if priority_score > 0:
        reasons.append(text["priority"].format(label=labels[todo.priority]))

    due_date_score = calculate_due_date_score(todo.due_date, current)
    if todo.due_date is not None:
        days = days_until_due(todo.due_date, current)
        if days < 0:
            reasons.append(text["overdue"])
        elif days == 0:
            reasons.append(text["due_today"])
        elif days == 1:
            reasons.append(text["due_tomorrow"])
        elif days <= 7:
            reasons.append(text["due_in_days"].format(days=days))

    delay_score = calculate_delay_score(todo.created_at, todo.updated_at, current)
    if delay_score > 0:
        reasons.append(text["stalled"].format(days=elapsed_days(todo.created_at, current)))

    components = TodoScoreComponents(
        priority_score=priority_score,
        due_date_score=due_date_score,
        delay_score=delay_score,
    )
    return ScoredTodo(
        todo=todo,
        score=components.total,
        reasons=reasons,
        components=components,
    )
