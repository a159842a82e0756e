"""
Todo model.

Timestamps may be given as datetimes, ISO strings or epoch numbers (pydantic
parses epoch values as UTC).  The scoring engine normalises every timestamp
to naive local time before any day arithmetic, so mixing naive-local and
aware values across records is safe.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator

from daily_helper.taxonomy.todo_taxonomy import TodoCategory, TodoPriority
from daily_helper.utils.time_utils import to_local_naive


class TodoItem(BaseModel):
    """A single task.

    Attributes:
        todo_id: Unique identifier.
        title: Short description.
        is_done: Completed todos are never scored.
        priority: User-assigned importance.
        category: Life area; defaults to ``personal``.
        due_date: Optional deadline.  Only its local calendar date matters.
        created_at: Creation time.
        updated_at: Last modification time; must be >= ``created_at``.
    """

    model_config = ConfigDict(frozen=True)

    todo_id: int
    title: str
    is_done: bool = False
    priority: TodoPriority = TodoPriority.MEDIUM
    category: TodoCategory = TodoCategory.PERSONAL
    due_date: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    @model_validator(mode="after")
    def validate_timestamp_ordering(self) -> "TodoItem":
        """Ensure updated_at is not before created_at."""
        if to_local_naive(self.updated_at) < to_local_naive(self.created_at):
            raise ValueError(
                f"updated_at ({self.updated_at}) must be >= created_at ({self.created_at})."
            )
        return self
