"""
Random selection helpers shared by the recommenders.

Both helpers accept an optional ``rng``: any object exposing ``random()``
(and ``choice()`` for the uniform helper), typically ``random.Random(seed)``.
When omitted, the module-level ``random`` source is used.

Weighted selection
------------------
Items are walked in input order while accumulating their positive weights;
the first item whose cumulative weight reaches the draw
``u ∈ [0, total_weight)`` wins.  Items with weight <= 0 (or NaN) add nothing
to the total and can never be drawn.  Items absent from the weight map count
as 1.0.  Weights above ``MAX_WEIGHT`` (including ``inf``) are capped to it.
"""

from __future__ import annotations

import logging
import random
from operator import attrgetter
from typing import Any, Callable, Mapping, Optional, Sequence, TypeVar

log = logging.getLogger(__name__)

T = TypeVar("T")

_DEFAULT_KEY: Callable[[Any], int] = attrgetter("menu_id")

# Ceiling for a single weight, so that a sum over any realistic menu list
# stays finite and the draw stays proportional.
MAX_WEIGHT = 1e150


def _effective_weight(weights: Mapping[int, float], ident: int) -> float:
    """Weight used for drawing: missing -> 1.0, NaN or <= 0 -> 0.0, capped."""
    weight = weights.get(ident, 1.0)
    if not weight > 0:
        return 0.0
    return min(weight, MAX_WEIGHT)


def weighted_random_select(
    items:   Sequence[T],
    weights: Mapping[int, float],
    rng:     Optional[random.Random] = None,
    key:     Callable[[T], int] = _DEFAULT_KEY,
) -> Optional[T]:
    """Draw one item with probability proportional to its weight.

    Args:
        items:   Candidates, in a deterministic order.
        weights: Identifier → weight map (from ``calculate_menu_weights``).
        rng:     Random source; defaults to the ``random`` module.
        key:     Extracts the identifier used to look up ``weights``.

    Returns:
        The selected item, or ``None`` when ``items`` is empty or the total
        positive weight is 0.
    """
    if not items:
        return None

    effective = [_effective_weight(weights, key(item)) for item in items]
    total_weight = sum(effective)

    if total_weight == 0:
        return None

    source = rng if rng is not None else random
    draw = source.random() * total_weight
    cumulative = 0.0

    for item, weight in zip(items, effective):
        if weight == 0:
            continue
        cumulative += weight
        if draw <= cumulative:
            return item

    log.debug("Weighted draw %.6f exceeded cumulative %.6f; using first item", draw, cumulative)
    return items[0]


def uniform_random_select(
    items: Sequence[T],
    rng:   Optional[random.Random] = None,
) -> Optional[T]:
    """Draw one item uniformly at random, or ``None`` when ``items`` is empty."""
    if not items:
        return None
    source = rng if rng is not None else random
    return source.choice(items)
