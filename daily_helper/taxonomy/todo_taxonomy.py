"""
Todo taxonomy.

  - ``TodoPriority`` — user-assigned importance; feeds the priority score.
  - ``TodoCategory`` — life area the task belongs to; used by weekly stats.

This module has NO imports from any other ``daily_helper`` package.
"""

from enum import StrEnum


class TodoPriority(StrEnum):
    """User-assigned importance of a todo."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class TodoCategory(StrEnum):
    """Life area a todo belongs to."""

    WORK = "work"
    HOME = "home"
    PERSONAL = "personal"
