# -*- coding: utf-8 -*-
"""
Dynamic-programming solver for the 0/1 max-defense knapsack.

Table layout:
  table[i][c] = best total defense using only the first i items with total cost <= c
  table[0][*] = table[*][0] = 0

Reconstruction walks back from (N, budget). Item i-1 is taken exactly when
table[i][c] != table[i-1][c]; the walk ends when i reaches 0. The comparison is
exact: an untaken row entry is a copy of the row above, so no float tolerance
(and no running "remaining defense" counter) is involved.

Ordering / ties:
  - Selected items come back in discovery order, i.e. descending catalog index.
  - When taking and skipping item i-1 give the same value, the item is skipped.
"""

from __future__ import annotations
import logging
import numbers
from typing import List, Sequence, Tuple

from maxdefense.business_objects.errors import PreconditionError
from maxdefense.business_objects.items import ArmorItem
from maxdefense.planning.solution import Solution

logger = logging.getLogger(__name__)

DefenseTable = List[List[float]]


def _integral_budget(budget: float) -> int:
    if isinstance(budget, bool):
        raise PreconditionError("budget must be a number, not a bool.")
    if isinstance(budget, numbers.Integral):
        value = int(budget)
    elif isinstance(budget, numbers.Real) and float(budget).is_integer():
        value = int(budget)
    else:
        raise PreconditionError(f"dynamic solver needs an integral budget (got {budget!r}).")
    if value < 0:
        raise PreconditionError(f"budget must be >= 0 (got {value}).")
    return value


def build_defense_table(items: Sequence[ArmorItem], budget: int) -> DefenseTable:
    """
    Fill the (N+1) x (budget+1) table of best achievable defense per item prefix.

    Raises
    ------
    PreconditionError
        If the budget is negative/non-integral or an item cost is not a positive int.
    """
    capacity = _integral_budget(budget)
    for armor in items:
        if isinstance(armor.cost, bool) or not isinstance(armor.cost, int) or armor.cost <= 0:
            raise PreconditionError(f"item {armor.description!r} has invalid cost {armor.cost!r}.")

    table: DefenseTable = [[0.0] * (capacity + 1)]
    for i in range(1, len(items) + 1):
        armor = items[i - 1]
        above = table[i - 1]
        row = [0.0] * (capacity + 1)
        for c in range(1, capacity + 1):
            if armor.cost > c:
                row[c] = above[c]
            else:
                row[c] = max(above[c], armor.defense + above[c - armor.cost])
        table.append(row)

    logger.debug("defense table built: %d rows x %d columns", len(table), capacity + 1)
    return table


def reconstruct_selection(items: Sequence[ArmorItem], table: DefenseTable) -> List[ArmorItem]:
    """Recover the chosen items from a filled table (descending catalog index)."""
    chosen: List[ArmorItem] = []
    i = len(items)
    c = len(table[0]) - 1
    while i > 0:
        if table[i][c] != table[i - 1][c]:
            chosen.append(items[i - 1])
            c -= items[i - 1].cost
        i -= 1
    return chosen


def dynamic_max_defense(items: Sequence[ArmorItem], budget: int) -> Solution:
    """
    Compute the optimal set of armor items with the dynamic method.

    Among the subsets whose gold cost fits within `budget`, return the one whose
    defense is greatest. O(N x budget) time and memory.

    Parameters
    ----------
    items : sequence[ArmorItem]
        Catalog (read-only).
    budget : int
        Non-negative integer gold budget; integral floats (e.g. 500.0) are accepted.

    Returns
    -------
    Solution
        Selected items (descending catalog index) with aggregate cost/defense.
    """
    solution, _ = dynamic_max_defense_with_table(items, budget)
    return solution


def dynamic_max_defense_with_table(
    items: Sequence[ArmorItem], budget: int
) -> Tuple[Solution, DefenseTable]:
    """Same as dynamic_max_defense, also returning the filled table."""
    table = build_defense_table(items, budget)
    chosen = reconstruct_selection(items, table)
    solution = Solution.from_items(chosen)
    logger.debug(
        "dynamic: n=%d budget=%s -> %d items, cost=%d, defense=%s",
        len(items), budget, len(solution), solution.total_cost, solution.total_defense,
    )
    return solution, table
