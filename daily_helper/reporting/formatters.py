"""
Plain-text terminal formatters for CLI commands.

All formatters accept engine results and return multi-line strings suitable
for ``typer.echo()``.  No third-party dependencies.
"""

from __future__ import annotations

from typing import Sequence

from daily_helper.models.menu import MenuItem
from daily_helper.recommendations.recommender import (
    RecommendationResult,
    RecommendationStatus,
)
from daily_helper.todos.scorer import ScoredTodo
from daily_helper.todos.stats import CompletionDashboard, PeriodStats

_WEEKDAY_LABELS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


# ── Menu recommendation ──────────────────────────────────────────────────────


def format_recommendation(result: RecommendationResult) -> str:
    """Format one recommendation outcome.

    Example::

        === Menu Recommendation ===
          Context:    lunch, day 1
          Candidates: 6
          Pick:       [12] 김치찌개 (korean)  weight 2.00
    """
    lines: list[str] = []
    lines.append("")
    lines.append("=== Menu Recommendation ===")
    lines.append(f"  Context:    {result.time_of_day}, day {result.day_of_week}")
    lines.append(f"  Candidates: {result.candidate_count}")

    if result.status is RecommendationStatus.NO_CANDIDATES:
        lines.append("  (no menus match the category / time / tag filters)")
        return "\n".join(lines)
    if result.status is RecommendationStatus.NO_SELECTION or result.menu is None:
        lines.append("  (every candidate was excluded by the active rules)")
        return "\n".join(lines)

    menu = result.menu
    category = menu.category or "uncategorised"
    pick = f"  Pick:       [{menu.menu_id}] {menu.name} ({category})"
    if result.weights:
        pick += f"  weight {result.weights.get(menu.menu_id, 1.0):.2f}"
    lines.append(pick)
    return "\n".join(lines)


def format_history(history: Sequence[MenuItem]) -> str:
    """Format the recent-recommendation list, newest first."""
    lines = ["", "  Recent:"]
    if not history:
        lines.append("    (none)")
    for rank, menu in enumerate(history, start=1):
        lines.append(f"    {rank:>2}. {menu.name}")
    return "\n".join(lines)


# ── Todos ─────────────────────────────────────────────────────────────────────


def format_top_todos(scored: Sequence[ScoredTodo]) -> str:
    """Format ranked todos as an ASCII table.

    Example::

        Rank  Score  Todo                            Reasons
        ---------------------------------------------------------------
           1   80.0  Pay rent                        Priority: low; overdue
    """
    lines: list[str] = []
    lines.append("")
    lines.append("=== Today's Top Todos ===")

    if not scored:
        lines.append("  (no open todos)")
        return "\n".join(lines)

    header = f"  {'Rank':>4}  {'Score':>6}  {'Todo':<30}  Reasons"
    lines.append(header)
    lines.append("  " + "-" * (len(header) + 20))
    for rank, item in enumerate(scored, start=1):
        title = item.todo.title[:30]
        reasons = "; ".join(item.reasons)
        lines.append(f"  {rank:>4}  {item.score:>6.1f}  {title:<30}  {reasons}")
    return "\n".join(lines)


def format_period_stats(stats: PeriodStats, heading: str = "This Week") -> str:
    """Format a week or month breakdown; the weekday row appears for weeks only.

    Example::

        === This Week ===
          Completed: 2/3 (67%)

          Category    Done  Total
          work           1      1
          ...
    """
    lines: list[str] = []
    lines.append("")
    lines.append(f"=== {heading} ===")
    lines.append(
        f"  Completed: {stats.completed_count}/{stats.total_count} "
        f"({stats.completion_rate}%)"
    )
    lines.append("")
    lines.append(f"  {'Category':<10}  {'Done':>4}  {'Total':>5}")
    for category, counts in stats.category_stats.items():
        lines.append(f"  {category:<10}  {counts.completed:>4}  {counts.total:>5}")
    if stats.daily_completions is not None:
        lines.append("")
        lines.append("  " + "  ".join(f"{d:>3}" for d in _WEEKDAY_LABELS))
        lines.append("  " + "  ".join(f"{n:>3}" for n in stats.daily_completions))
    return "\n".join(lines)


def format_completion_dashboard(dashboard: CompletionDashboard) -> str:
    """Format today / week / month completion rates, one row each."""
    lines = ["", "=== Completion ==="]
    for label, stats in (
        ("Today", dashboard.today),
        ("Week", dashboard.week),
        ("Month", dashboard.month),
    ):
        lines.append(
            f"  {label:<6} {stats.completed:>3}/{stats.total:<3} {stats.completion_rate:>3}%"
        )
    return "\n".join(lines)
