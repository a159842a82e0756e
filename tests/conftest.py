"""
Shared pytest fixtures for the daily-helper test suite.

Provides:
  - ``fixed_now``: a deterministic clock value (Monday 2026-10-19 12:00 local).
  - ``seeded_rng``: a ``random.Random`` with a fixed seed.
  - Sample domain objects for use in multiple test modules.

All datetimes are naive and therefore interpreted as local time.
"""

from __future__ import annotations

import random
from datetime import datetime

import pytest

from daily_helper.models.menu import MenuItem, RecommendationRule, RuleActions, RuleConditions
from daily_helper.models.todo import TodoItem
from daily_helper.taxonomy.menu_taxonomy import MenuCategory, TimeOfDay
from daily_helper.taxonomy.todo_taxonomy import TodoCategory, TodoPriority

FIXED_NOW = datetime(2026, 10, 19, 12, 0, 0)   # Monday


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(12345)


@pytest.fixture
def sample_menus() -> list[MenuItem]:
    """Six menus across categories, one uncategorised."""
    return [
        MenuItem(menu_id=1, name="김치찌개", tags=["국물", "매운"], category=MenuCategory.KOREAN,
                 time_of_day=[TimeOfDay.LUNCH, TimeOfDay.DINNER]),
        MenuItem(menu_id=2, name="짜장면", tags=["면"], category=MenuCategory.CHINESE),
        MenuItem(menu_id=3, name="초밥", tags=["밥"], category=MenuCategory.JAPANESE,
                 time_of_day=[TimeOfDay.DINNER]),
        MenuItem(menu_id=4, name="파스타", tags=["면"], category=MenuCategory.WESTERN),
        MenuItem(menu_id=5, name="떡볶이", tags=["매운"], category=MenuCategory.SNACK,
                 time_of_day=[TimeOfDay.SNACK]),
        MenuItem(menu_id=6, name="샐러드", tags=["가벼운"]),
    ]


@pytest.fixture
def sample_rule() -> RecommendationRule:
    """Enabled weekday-lunch rule boosting Korean and excluding snacks."""
    return RecommendationRule(
        rule_id=1,
        name="Weekday lunch",
        enabled=True,
        conditions=RuleConditions(day_of_week=[1, 2, 3, 4, 5], time_of_day=[TimeOfDay.LUNCH]),
        actions=RuleActions(
            priority_categories=[MenuCategory.KOREAN],
            exclude_categories=[MenuCategory.SNACK],
        ),
    )


@pytest.fixture
def sample_todo() -> TodoItem:
    return TodoItem(
        todo_id=1,
        title="Write report",
        priority=TodoPriority.HIGH,
        category=TodoCategory.WORK,
        created_at=datetime(2026, 10, 19, 9, 0, 0),
        updated_at=datetime(2026, 10, 19, 9, 0, 0),
    )
