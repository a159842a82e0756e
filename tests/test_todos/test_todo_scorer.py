"""
Tests for daily_helper/todos/scorer.py.

What we test
------------
calculate_priority_score():
  - high 30, medium 15, low 5.

calculate_due_date_score():
  - No due date -> 0.
  - Every bucket: overdue, today, tomorrow, 2–7 days, beyond a week.
  - Calendar-day comparison: time of day never flips the bucket.

calculate_delay_score():
  - Both thresholds must hold; caps at 25 and 15.
  - Uses elapsed days (floor), not calendar days.

calculate_todo_score():
  - Total = unweighted sum of the three components.
  - Overdue low-priority outranks fresh high-priority.
  - Reasons are ordered priority -> due date -> delay.
  - No due-date reason beyond 7 days even when the score is non-zero.
  - English reason locale; unknown locale falls back to Korean.
"""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from daily_helper.models.todo import TodoItem
from daily_helper.taxonomy.todo_taxonomy import TodoPriority
from daily_helper.todos.scorer import (
    calculate_delay_score,
    calculate_due_date_score,
    calculate_priority_score,
    calculate_todo_score,
    days_until_due,
)

NOW = datetime(2026, 10, 19, 12, 0, 0)


# ── Helpers ────────────────────────────────────────────────────────────────────

def _todo(
    priority: TodoPriority = TodoPriority.MEDIUM,
    due_date: datetime | None = None,
    created_at: datetime = NOW - timedelta(hours=1),
    updated_at: datetime | None = None,
    todo_id: int = 1,
) -> TodoItem:
    return TodoItem(
        todo_id=todo_id,
        title=f"todo-{todo_id}",
        priority=priority,
        due_date=due_date,
        created_at=created_at,
        updated_at=updated_at or created_at,
    )


def _days_from_now(days: int, hour: int = 12) -> datetime:
    return (NOW + timedelta(days=days)).replace(hour=hour)


# ── calculate_priority_score ──────────────────────────────────────────────────

class TestPriorityScore:
    @pytest.mark.parametrize(
        "priority, expected",
        [(TodoPriority.HIGH, 30.0), (TodoPriority.MEDIUM, 15.0), (TodoPriority.LOW, 5.0)],
    )
    def test_lookup(self, priority, expected):
        assert calculate_priority_score(priority) == pytest.approx(expected)


# ── calculate_due_date_score ──────────────────────────────────────────────────

class TestDueDateScore:
    def test_no_due_date(self):
        assert calculate_due_date_score(None, NOW) == 0.0

    @pytest.mark.parametrize(
        "days, expected",
        [
            (-1, 55.0),
            (-5, 75.0),
            (-30, 200.0),
            (0, 40.0),
            (1, 30.0),
            (2, 16.0),
            (5, 10.0),
            (7, 6.0),
            (8, 2.0),
            (9, 1.0),
            (10, 0.0),
            (45, 0.0),
        ],
    )
    def test_buckets(self, days, expected):
        assert calculate_due_date_score(_days_from_now(days), NOW) == pytest.approx(expected)

    def test_due_late_today_checked_just_after_midnight(self):
        now = datetime(2026, 10, 19, 0, 1)
        due = datetime(2026, 10, 19, 23, 59)
        assert calculate_due_date_score(due, now) == pytest.approx(40.0)

    def test_due_earlier_today_is_not_overdue(self):
        now = datetime(2026, 10, 19, 23, 59)
        due = datetime(2026, 10, 19, 0, 1)
        assert days_until_due(due, now) == 0
        assert calculate_due_date_score(due, now) == pytest.approx(40.0)

    def test_tomorrow_just_after_midnight(self):
        now = datetime(2026, 10, 19, 23, 59)
        due = datetime(2026, 10, 20, 0, 1)
        assert calculate_due_date_score(due, now) == pytest.approx(30.0)

    def test_yesterday_late_is_overdue(self):
        now = datetime(2026, 10, 19, 0, 1)
        due = datetime(2026, 10, 18, 23, 59)
        assert calculate_due_date_score(due, now) == pytest.approx(55.0)


# ── calculate_delay_score ─────────────────────────────────────────────────────

class TestDelayScore:
    @pytest.mark.parametrize(
        "created_days_ago, updated_days_ago, expected",
        [
            (10, 3, 20.0),    # long branch: 10 * 2
            (14, 5, 25.0),    # long branch capped
            (7, 2, 7.0),      # short branch: updated < 3
            (5, 1, 5.0),      # short branch
            (20, 1, 15.0),    # short branch capped
            (5, 0, 0.0),      # touched today
            (2, 2, 0.0),      # too young
            (30, 0, 0.0),     # old but active
        ],
    )
    def test_thresholds(self, created_days_ago, updated_days_ago, expected):
        created = NOW - timedelta(days=created_days_ago)
        updated = NOW - timedelta(days=updated_days_ago)
        assert calculate_delay_score(created, updated, NOW) == pytest.approx(expected)

    def test_uses_elapsed_not_calendar_days(self):
        # Three calendar days ago, but only 2.99 elapsed days.
        created = NOW - timedelta(days=3) + timedelta(seconds=1)
        assert calculate_delay_score(created, created, NOW) == 0.0
        created = NOW - timedelta(days=3)
        assert calculate_delay_score(created, created, NOW) == pytest.approx(3.0)


# ── calculate_todo_score ──────────────────────────────────────────────────────

class TestCalculateTodoScore:
    def test_total_is_sum_of_components(self):
        todo = _todo(
            priority=TodoPriority.HIGH,
            due_date=_days_from_now(1),
            created_at=NOW - timedelta(days=10),
            updated_at=NOW - timedelta(days=4),
        )
        scored = calculate_todo_score(todo, NOW)
        assert scored.components.priority_score == pytest.approx(30.0)
        assert scored.components.due_date_score == pytest.approx(30.0)
        assert scored.components.delay_score == pytest.approx(20.0)
        assert scored.score == pytest.approx(80.0)
        assert scored.score == pytest.approx(scored.components.total)
        assert scored.todo is todo

    def test_overdue_low_beats_fresh_high(self):
        overdue_low = calculate_todo_score(
            _todo(priority=TodoPriority.LOW, due_date=_days_from_now(-5, hour=9)), NOW
        )
        fresh_high = calculate_todo_score(_todo(priority=TodoPriority.HIGH), NOW)
        assert overdue_low.score == pytest.approx(80.0)
        assert fresh_high.score == pytest.approx(30.0)
        assert overdue_low.score > fresh_high.score

    def test_reasons_order_korean(self):
        todo = _todo(
            priority=TodoPriority.HIGH,
            due_date=_days_from_now(-2),
            created_at=NOW - timedelta(days=10),
            updated_at=NOW - timedelta(days=4),
        )
        assert calculate_todo_score(todo, NOW).reasons == [
            "우선순위: 높음",
            "마감일 지남",
            "10일째 미루는 중",
        ]

    @pytest.mark.parametrize(
        "days, reason",
        [(0, "오늘 마감"), (1, "내일 마감"), (2, "2일 후 마감"), (7, "7일 후 마감")],
    )
    def test_due_reason_buckets(self, days, reason):
        scored = calculate_todo_score(_todo(due_date=_days_from_now(days)), NOW)
        assert scored.reasons == ["우선순위: 중간", reason]

    def test_no_due_reason_beyond_a_week(self):
        scored = calculate_todo_score(_todo(due_date=_days_from_now(8)), NOW)
        assert scored.components.due_date_score == pytest.approx(2.0)
        assert scored.reasons == ["우선순위: 중간"]

    def test_english_locale(self):
        todo = _todo(
            priority=TodoPriority.LOW,
            due_date=_days_from_now(3),
            created_at=NOW - timedelta(days=4),
            updated_at=NOW - timedelta(days=2),
        )
        assert calculate_todo_score(todo, NOW, locale="en").reasons == [
            "Priority: low",
            "due in 3 days",
            "4 days stalled",
        ]

    def test_unknown_locale_falls_back_to_korean(self):
        scored = calculate_todo_score(_todo(priority=TodoPriority.LOW), NOW, locale="fr")
        assert scored.reasons == ["우선순위: 낮음"]

    def test_done_flag_is_ignored_by_scorer(self):
        todo = TodoItem(
            todo_id=9, title="done", is_done=True, priority=TodoPriority.HIGH,
            created_at=NOW, updated_at=NOW,
        )
        assert calculate_todo_score(todo, NOW).score == pytest.approx(30.0)
