"""
Menu taxonomy for meal recommendations.

Two dimensions describe every menu item and recommendation context:
  - ``MenuCategory`` — the *what*: which cuisine does the dish belong to?
  - ``TimeOfDay``    — the *when*: which meal slot is it suitable for?

``time_of_day_for_hour()`` maps a local clock hour onto a ``TimeOfDay``
bucket.  Anything from 22:00 through 04:59 counts as a late-night snack.

Usage example::

    from daily_helper.taxonomy.menu_taxonomy import MenuCategory, TimeOfDay

    category = MenuCategory.KOREAN
    slot     = time_of_day_for_hour(12)   # TimeOfDay.LUNCH

This module has NO imports from any other ``daily_helper`` package.
"""

from enum import StrEnum


class MenuCategory(StrEnum):
    """Cuisine category of a menu item."""

    KOREAN = "korean"
    CHINESE = "chinese"
    JAPANESE = "japanese"
    WESTERN = "western"
    SNACK = "snack"
    """Street food and light bites (tteokbokki, gimbap, ...)."""

    OTHER = "other"


class TimeOfDay(StrEnum):
    """Meal slot used both as a menu attribute and as rule context."""

    BREAKFAST = "breakfast"
    """05:00 – 09:59"""

    LUNCH = "lunch"
    """10:00 – 14:59"""

    DINNER = "dinner"
    """15:00 – 21:59"""

    SNACK = "snack"
    """22:00 – 04:59 (late-night snack)."""


def time_of_day_for_hour(hour: int) -> TimeOfDay:
    """Return the meal slot for a local clock hour (0–23)."""
    if 5 <= hour < 10:
        return TimeOfDay.BREAKFAST
    if 10 <= hour < 15:
        return TimeOfDay.LUNCH
    if 15 <= hour < 22:
        return TimeOfDay.DINNER
    return TimeOfDay.SNACK
