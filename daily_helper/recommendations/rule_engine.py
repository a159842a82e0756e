"""
Rule-based menu weighting.

Weight formula
--------------
Every candidate starts at 1.0.  For each *enabled* rule whose conditions
match the current context (in input order), every candidate's running weight
is multiplied by the rule's action multiplier::

    multiplier = actions.weight (1.0 if unset)
               * 2.0   if category in priority_categories
    multiplier = 0.0   if category in exclude_categories   (overrides the boost)

Because the chain is multiplicative, a zero from any matching rule is
sticky: later rules cannot bring that candidate back.  An exclusion sets the
weight to exactly 0.0, and running products are capped at ``MAX_WEIGHT`` so
they never overflow to ``inf``.

Condition matching
------------------
A rule matches when both its day-of-week and time-of-day conditions match.
An absent or empty condition matches every context.

All functions here are pure; they read no global state.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from daily_helper.models.menu import MenuItem, RecommendationRule
from daily_helper.recommendations.sampling import MAX_WEIGHT
from daily_helper.taxonomy.menu_taxonomy import MenuCategory, TimeOfDay

log = logging.getLogger(__name__)

# Fixed multiplier for categories listed in priority_categories
PRIORITY_BOOST = 2.0

__all__ = [
    "PRIORITY_BOOST",
    "apply_rule_action",
    "calculate_menu_weights",
    "check_rule_conditions",
]


def check_rule_conditions(
    rule:                RecommendationRule,
    current_day_of_week: int,
    current_time_of_day: TimeOfDay,
) -> bool:
    """Return ``True`` if ``rule`` applies to the given context.

    Args:
        rule:                Rule to evaluate.
        current_day_of_week: 0 = Sunday … 6 = Saturday.
        current_time_of_day: Current meal slot.

    Returns:
        ``True`` when every present condition contains the current value.
    """
    conditions = rule.conditions
    if conditions is None:
        return True

    if conditions.day_of_week and current_day_of_week not in conditions.day_of_week:
        return False

    if conditions.time_of_day and current_time_of_day not in conditions.time_of_day:
        return False

    return True


def apply_rule_action(
    menu_category: Optional[MenuCategory],
    rule:          RecommendationRule,
) -> float:
    """Return the multiplier ``rule`` contributes to a menu of ``menu_category``.

    Exclusion short-circuits to 0.0 regardless of any priority boost.
    Uncategorised menus never match priority or exclude lists.
    """
    actions = rule.actions
    if actions is None:
        return 1.0

    weight = actions.weight if actions.weight is not None else 1.0

    if menu_category is not None:
        if menu_category in actions.exclude_categories:
            return 0.0
        if menu_category in actions.priority_categories:
            weight *= PRIORITY_BOOST

    return weight


def calculate_menu_weights(
    menus:               Sequence[MenuItem],
    rules:               Sequence[RecommendationRule],
    current_day_of_week: int,
    current_time_of_day: TimeOfDay,
) -> dict[int, float]:
    """Compute the weight of every candidate under all matching rules.

    Args:
        menus:               Candidate menu items.
        rules:               Rules, applied in the given order.
        current_day_of_week: 0 = Sunday … 6 = Saturday.
        current_time_of_day: Current meal slot.

    Returns:
        Mapping ``menu_id -> weight`` (>= 0) covering every candidate.
    """
    weights: dict[int, float] = {menu.menu_id: 1.0 for menu in menus}

    for rule in rules:
        if not rule.enabled:
            continue
        if not check_rule_conditions(rule, current_day_of_week, current_time_of_day):
            continue

        for menu in menus:
            multiplier = apply_rule_action(menu.category, rule)
            if multiplier == 0.0:
                weights[menu.menu_id] = 0.0
            else:
                weights[menu.menu_id] = min(weights[menu.menu_id] * multiplier, MAX_WEIGHT)

        log.debug("Applied rule %r: weights=%s", rule.name, weights)

    return weights
