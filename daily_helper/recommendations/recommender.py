"""
Menu recommendation flow: filter → weight → draw → remember.

Usage flow
----------
1. recommend_menu(menus, rules, category=..., time_of_day=..., tags=...)
   -> RecommendationResult

   a. Candidates are filtered by category, meal slot and tags.
   b. No candidates → status ``no_candidates`` (weights never computed).
   c. Rules present → calculate_menu_weights() + weighted_random_select();
      a ``None`` draw (every weight zeroed) → status ``no_selection``.
   d. No rules → uniform draw over the candidates.

2. RecommendationHistory.record(result.menu)
   The caller owns the history; the flow itself never mutates it.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import Iterable, Optional, Sequence

from daily_helper.models.menu import MenuItem, RecommendationRule
from daily_helper.recommendations.rule_engine import calculate_menu_weights
from daily_helper.recommendations.sampling import (
    uniform_random_select,
    weighted_random_select,
)
from daily_helper.taxonomy.menu_taxonomy import (
    MenuCategory,
    TimeOfDay,
    time_of_day_for_hour,
)
from daily_helper.utils.time_utils import js_day_of_week, local_now

log = logging.getLogger(__name__)

DEFAULT_HISTORY_SIZE = 5


class RecommendationStatus(StrEnum):
    OK = "ok"
    NO_CANDIDATES = "no_candidates"
    NO_SELECTION = "no_selection"


@dataclass
class RecommendationResult:
    """Outcome of one recommendation request.

    Attributes:
        status:          ``ok``, ``no_candidates`` or ``no_selection``.
        menu:            The drawn item; ``None`` unless status is ``ok``.
        weights:         Weight map used for the draw (empty for uniform draws).
        candidate_count: Number of items left after filtering.
        time_of_day:     Meal slot used for filtering and rule matching.
        day_of_week:     Weekday used for rule matching (0 = Sunday).
    """

    status:          RecommendationStatus
    menu:            Optional[MenuItem]
    weights:         dict[int, float]
    candidate_count: int
    time_of_day:     TimeOfDay
    day_of_week:     int

    @property
    def ok(self) -> bool:
        return self.status is RecommendationStatus.OK


def filter_menus(
    menus:       Sequence[MenuItem],
    category:    Optional[MenuCategory] = None,
    time_of_day: Optional[TimeOfDay] = None,
    tags:        Optional[Iterable[str]] = None,
) -> list[MenuItem]:
    """Return menus passing every given filter, preserving input order.

    - ``category``: exact match.
    - ``time_of_day``: menus without slot restrictions always pass.
    - ``tags``: at least one tag in common.
    """
    wanted_tags = set(tags or ())
    result: list[MenuItem] = []
    for menu in menus:
        if category is not None and menu.category != category:
            continue
        if time_of_day is not None and menu.time_of_day and time_of_day not in menu.time_of_day:
            continue
        if wanted_tags and wanted_tags.isdisjoint(menu.tags):
            continue
        result.append(menu)
    return result


def recommend_menu(
    menus:       Sequence[MenuItem],
    rules:       Sequence[RecommendationRule] = (),
    category:    Optional[MenuCategory] = None,
    time_of_day: Optional[TimeOfDay] = None,
    tags:        Optional[Iterable[str]] = None,
    now:         Optional[datetime] = None,
    rng:         Optional[random.Random] = None,
) -> RecommendationResult:
    """Recommend one menu for the current context.

    Args:
        menus:       All registered menus.
        rules:       Recommendation rules (enabled and disabled).
        category:    Optional category filter.
        time_of_day: Meal slot; derived from ``now`` when omitted.
        tags:        Optional tag filter (any overlap).
        now:         Clock value; defaults to the current local time.
        rng:         Random source; defaults to the ``random`` module.

    Returns:
        RecommendationResult describing the outcome.
    """
    current = local_now(now)
    slot = time_of_day or time_of_day_for_hour(current.hour)
    day = js_day_of_week(current)

    candidates = filter_menus(menus, category=category, time_of_day=slot, tags=tags)
    if not candidates:
        log.info(
            "No menu candidates (category=%s, time_of_day=%s, tags=%s)",
            category, slot, sorted(tags or ()),
        )
        return RecommendationResult(
            status=RecommendationStatus.NO_CANDIDATES,
            menu=None,
            weights={},
            candidate_count=0,
            time_of_day=slot,
            day_of_week=day,
        )

    weights: dict[int, float] = {}
    if rules:
        weights = calculate_menu_weights(candidates, rules, day, slot)
        picked = weighted_random_select(candidates, weights, rng=rng)
    else:
        picked = uniform_random_select(candidates, rng=rng)

    if picked is None:
        log.info("All %d candidates were excluded by rules", len(candidates))
        status = RecommendationStatus.NO_SELECTION
    else:
        log.debug("Recommended menu %d (%s)", picked.menu_id, picked.name)
        status = RecommendationStatus.OK

    return RecommendationResult(
        status=status,
        menu=picked,
        weights=weights,
        candidate_count=len(candidates),
        time_of_day=slot,
        day_of_week=day,
    )


@dataclass
class RecommendationHistory:
    """Newest-first list of recently recommended menus, unique by ``menu_id``."""

    max_size: int = DEFAULT_HISTORY_SIZE
    items:    list[MenuItem] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.max_size < 1:
            raise ValueError(f"max_size must be >= 1, got {self.max_size}.")

    def record(self, menu: MenuItem) -> None:
        """Put ``menu`` at the front, dropping any older entry with the same id."""
        remaining = [m for m in self.items if m.menu_id != menu.menu_id]
        self.items = [menu, *remaining][: self.max_size]

    def __len__(self) -> int:
        return len(self.items)
