"""
Todo ranker: picks the N most urgent open todos ("today's goals").

Completed todos are dropped before scoring.  Ranking is by score descending;
equal scores keep their input order (Python's sort is stable).  The result
is a fresh list on every call.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, Optional

from daily_helper.models.todo import TodoItem
from daily_helper.todos.scorer import DEFAULT_LOCALE, ScoredTodo, calculate_todo_score
from daily_helper.utils.time_utils import local_now

log = logging.getLogger(__name__)

DEFAULT_TOP_COUNT = 3


def get_top_priority_todos(
    todos:  Iterable[TodoItem],
    count:  int = DEFAULT_TOP_COUNT,
    now:    Optional[datetime] = None,
    locale: str = DEFAULT_LOCALE,
) -> list[ScoredTodo]:
    """Return the ``count`` highest-scoring open todos.

    Args:
        todos:  All todos; completed ones are ignored.
        count:  Maximum number of results; ``<= 0`` yields an empty list.
        now:    Clock value shared by every score in this call.
        locale: Reason text language.

    Returns:
        ScoredTodo list, highest score first.
    """
    if count <= 0:
        return []

    current = local_now(now)
    scored = [
        calculate_todo_score(todo, current, locale)
        for todo in todos
        if not todo.is_done
    ]
    ranked = sorted(scored, key=lambda s: s.score, reverse=True)
    log.debug("Scored %d open todos; returning top %d", len(ranked), count)
    return ranked[:count]
