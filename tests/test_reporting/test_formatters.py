"""
Tests for daily_helper/reporting/formatters.py.

What we test
------------
  - format_recommendation(): pick line with weight; distinct messages for
    no-candidates and no-selection outcomes.
  - format_history(): numbered newest-first list; "(none)" when empty.
  - format_top_todos(): one row per todo with joined reasons; empty notice.
  - format_period_stats(): completion summary; weekday row for weeks only.
  - format_completion_dashboard(): one row per period.
"""

from __future__ import annotations

from datetime import datetime

from daily_helper.models.menu import MenuItem
from daily_helper.models.todo import TodoItem
from daily_helper.recommendations.recommender import (
    RecommendationResult,
    RecommendationStatus,
)
from daily_helper.reporting.formatters import (
    format_completion_dashboard,
    format_history,
    format_period_stats,
    format_recommendation,
    format_top_todos,
)
from daily_helper.taxonomy.menu_taxonomy import MenuCategory, TimeOfDay
from daily_helper.todos.ranker import get_top_priority_todos
from daily_helper.todos.stats import (
    calculate_completion_dashboard,
    calculate_month_stats,
    calculate_week_stats,
)

NOW = datetime(2026, 10, 19, 12, 0, 0)


def _result(status: RecommendationStatus, menu: MenuItem | None = None) -> RecommendationResult:
    return RecommendationResult(
        status=status,
        menu=menu,
        weights={1: 2.0} if menu else {},
        candidate_count=1 if menu else 0,
        time_of_day=TimeOfDay.LUNCH,
        day_of_week=1,
    )


class TestFormatRecommendation:
    def test_pick(self):
        menu = MenuItem(menu_id=1, name="김치찌개", category=MenuCategory.KOREAN)
        text = format_recommendation(_result(RecommendationStatus.OK, menu))
        assert "[1] 김치찌개 (korean)" in text
        assert "weight 2.00" in text
        assert "lunch, day 1" in text

    def test_uncategorised_pick(self):
        menu = MenuItem(menu_id=1, name="샐러드")
        assert "(uncategorised)" in format_recommendation(_result(RecommendationStatus.OK, menu))

    def test_no_candidates(self):
        text = format_recommendation(_result(RecommendationStatus.NO_CANDIDATES))
        assert "no menus match" in text

    def test_no_selection(self):
        text = format_recommendation(_result(RecommendationStatus.NO_SELECTION))
        assert "excluded by the active rules" in text


class TestFormatHistory:
    def test_numbered(self):
        text = format_history([MenuItem(menu_id=2, name="b"), MenuItem(menu_id=1, name="a")])
        assert " 1. b" in text
        assert " 2. a" in text

    def test_empty(self):
        assert "(none)" in format_history([])


class TestFormatTodos:
    def test_rows(self):
        todo = TodoItem(todo_id=1, title="Pay rent", priority="low",
                        due_date=datetime(2026, 10, 14), created_at=NOW, updated_at=NOW)
        text = format_top_todos(get_top_priority_todos([todo], now=NOW, locale="en"))
        assert "Pay rent" in text
        assert "80.0" in text
        assert "Priority: low; overdue" in text

    def test_empty(self):
        assert "(no open todos)" in format_top_todos([])

    def test_week_stats(self):
        todo = TodoItem(todo_id=1, title="t", is_done=True, created_at=NOW, updated_at=NOW)
        text = format_period_stats(calculate_week_stats([todo], now=NOW))
        assert "Completed: 1/1 (100%)" in text
        assert "Mon" in text and "Sun" in text

    def test_month_stats_have_no_weekday_row(self):
        todo = TodoItem(todo_id=1, title="t", is_done=True, created_at=NOW, updated_at=NOW)
        text = format_period_stats(calculate_month_stats([todo], now=NOW), heading="This Month")
        assert "=== This Month ===" in text
        assert "Tue" not in text

    def test_completion_dashboard(self):
        todos = [
            TodoItem(todo_id=1, title="a", is_done=True, created_at=NOW, updated_at=NOW),
            TodoItem(todo_id=2, title="b", created_at=NOW, updated_at=NOW),
        ]
        text = format_completion_dashboard(calculate_completion_dashboard(todos, now=NOW))
        assert "=== Completion ===" in text
        for label in ("Today", "Week", "Month"):
            assert label in text
        assert text.count("50%") == 3
