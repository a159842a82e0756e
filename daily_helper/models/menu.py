"""
Menu and recommendation-rule models.

``MenuItem`` is a user-registered dish.  It is immutable for the duration of
a recommendation pass; the engine only ever reads ``menu_id`` and
``category``, while the recommender's filters read ``tags`` and
``time_of_day``.

``RecommendationRule`` couples optional *conditions* (when does the rule
apply?) with optional *actions* (what does it do to candidate weights?).
Absence is permissive throughout:

  - ``conditions=None`` or an empty condition list → matches every context.
  - ``actions=None`` → multiplier 1.0, no boosts, no exclusions.
  - ``RuleActions.weight=None`` → multiplier 1.0.
"""

from __future__ import annotations

import math
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from daily_helper.taxonomy.menu_taxonomy import MenuCategory, TimeOfDay


class MenuItem(BaseModel):
    """A dish that can be recommended.

    Attributes:
        menu_id: Unique identifier; keys the weight map.
        name: Display name, e.g. ``"김치찌개"``.
        tags: Free-form tags used by the tag filter.
        category: Cuisine category, or ``None`` when uncategorised.
            Uncategorised items never match category-based rule actions.
        time_of_day: Meal slots this dish suits.  Empty = any slot.
        created_at: When the user registered the dish.
    """

    model_config = ConfigDict(frozen=True)

    menu_id: int
    name: str
    tags: list[str] = []
    category: Optional[MenuCategory] = None
    time_of_day: list[TimeOfDay] = []
    created_at: Optional[datetime] = None


class RuleConditions(BaseModel):
    """Context a rule applies to.  Empty lists mean "any".

    Attributes:
        day_of_week: Weekdays the rule applies on (0 = Sunday … 6 = Saturday).
        time_of_day: Meal slots the rule applies to.
    """

    model_config = ConfigDict(frozen=True)

    day_of_week: list[int] = []
    time_of_day: list[TimeOfDay] = []

    @field_validator("day_of_week")
    @classmethod
    def validate_day_of_week(cls, v: list[int]) -> list[int]:
        for day in v:
            if not 0 <= day <= 6:
                raise ValueError(f"day_of_week values must be in [0, 6], got {day}.")
        return v


class RuleActions(BaseModel):
    """Weight modifications applied when a rule matches.

    Attributes:
        priority_categories: Categories whose weight is doubled.
        exclude_categories: Categories whose weight is forced to 0.
            Exclusion wins over a priority boost for the same category.
        weight: Base multiplier for every candidate; ``None`` means 1.0.
    """

    model_config = ConfigDict(frozen=True)

    priority_categories: list[MenuCategory] = []
    exclude_categories: list[MenuCategory] = []
    weight: Optional[float] = None

    @field_validator("weight")
    @classmethod
    def validate_weight(cls, v: Optional[float]) -> Optional[float]:
        if v is None:
            return v
        if not math.isfinite(v):
            raise ValueError(f"weight must be a finite number, got {v}.")
        if v < 0:
            raise ValueError(f"weight must be >= 0, got {v}.")
        return v


class RecommendationRule(BaseModel):
    """A conditional weight modifier for menu recommendations.

    Attributes:
        rule_id: Identifier; ``None`` for ad-hoc rules not yet stored.
        name: Human-readable label, e.g. ``"Friday night: no Korean"``.
        enabled: Disabled rules are skipped without being evaluated.
        conditions: When the rule applies; ``None`` = always.
        actions: What the rule does; ``None`` = multiplier 1.0.
        created_at: Creation time, informational only.
        updated_at: Last edit time, informational only.
    """

    model_config = ConfigDict(frozen=True)

    rule_id: Optional[int] = None
    name: str
    enabled: bool = True
    conditions: Optional[RuleConditions] = None
    actions: Optional[RuleActions] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
