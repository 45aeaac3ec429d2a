# -*- coding: utf-8 -*-
"""
Exhaustive-search solver for the 0/1 max-defense knapsack.

Every subset of the catalog is visited as a bitmask over item indices
(bit j set -> item j included). Only catalogs with fewer than 64 items are
accepted; the caller is expected to filter the catalog down first since the
running time is O(2^N x N).

Ties: a candidate replaces the best-so-far only when its defense is strictly
greater, so the earliest enumerated mask wins among equal optima. Items in the
returned solution keep catalog order.
"""

from __future__ import annotations
import logging
import math
from typing import List, Optional, Sequence

from maxdefense.business_objects.errors import PreconditionError
from maxdefense.business_objects.items import ArmorItem
from maxdefense.planning.solution import Solution, aggregate

logger = logging.getLogger(__name__)

MAX_EXHAUSTIVE_ITEMS = 64


def subset_from_mask(items: Sequence[ArmorItem], mask: int) -> List[ArmorItem]:
    return [items[j] for j in range(len(items)) if (mask >> j) & 1]


def exhaustive_max_defense(items: Sequence[ArmorItem], budget: float) -> Solution:
    """
    Compute the optimal set of armor items by trying every subset.

    Parameters
    ----------
    items : sequence[ArmorItem]
        Catalog (read-only); must hold fewer than 64 items.
    budget : float
        Non-negative gold budget, compared directly against summed costs.

    Raises
    ------
    PreconditionError
        If len(items) >= 64, or budget is negative or not finite.
    """
    n = len(items)
    if n >= MAX_EXHAUSTIVE_ITEMS:
        raise PreconditionError(
            f"exhaustive search needs fewer than {MAX_EXHAUSTIVE_ITEMS} items (got {n})."
        )
    if not math.isfinite(budget) or budget < 0:
        raise PreconditionError(f"budget must be finite and >= 0 (got {budget}).")

    best: Optional[List[ArmorItem]] = None
    best_defense = 0.0
    for mask in range(1 << n):
        candidate = subset_from_mask(items, mask)
        cand_cost, cand_defense = aggregate(candidate)
        if cand_cost <= budget and (best is None or cand_defense > best_defense):
            best = candidate
            best_defense = cand_defense

    logger.debug("exhaustive: n=%d budget=%s, %d subsets visited", n, budget, 1 << n)
    # The empty mask is always feasible, so `best` is set.
    return Solution.from_items(best)
