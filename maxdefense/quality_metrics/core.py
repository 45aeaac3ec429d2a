# -*- coding: utf-8 -*-
"""
quality_metrics/core.py

Pure helpers to check and describe max-defense solutions.
- No side effects
- No external dependencies
- Works off a catalog (sequence of ArmorItem), a Solution and the budget

Public API:
  - compute_solution_metrics(catalog, solution, budget) -> Dict[str, float]
  - verify_solution(catalog, solution, budget) -> Tuple[bool, str]
  - best_feasible_defense(catalog, budget) -> float
"""

from __future__ import annotations
from itertools import combinations
from typing import Dict, Sequence, Tuple

from maxdefense.business_objects.errors import PreconditionError
from maxdefense.business_objects.items import ArmorItem
from maxdefense.planning.solution import Solution, aggregate
from maxdefense.planning.solvers.exhaustive import MAX_EXHAUSTIVE_ITEMS

# Float tolerance when comparing summed defenses.
EPS = 1e-9


def _pct(part: float, whole: float) -> float:
    return 0.0 if whole == 0 else (part / whole) * 100.0


def compute_solution_metrics(
    catalog: Sequence[ArmorItem],
    solution: Solution,
    budget: float,
) -> Dict[str, float]:
    """
    Returns:
      {
        "Total Cost": ...,
        "Total Defense": ...,
        "Items Selected": ...,
        "Catalog Size": ...,
        "Budget": ...,
        "Budget Used %": ...,       # percent (0..100)
        "Selection Rate %": ...,    # percent (0..100)
        "Defense per Gold": ...,
        "Catalog Defense": ...,     # defense if every item were taken
      }
    """
    catalog_cost, catalog_defense = aggregate(catalog)
    return {
        "Total Cost": float(solution.total_cost),
        "Total Defense": float(solution.total_defense),
        "Items Selected": float(len(solution)),
        "Catalog Size": float(len(catalog)),
        "Budget": float(budget),
        "Budget Used %": _pct(solution.total_cost, budget),
        "Selection Rate %": _pct(len(solution), len(catalog)),
        "Defense per Gold": 0.0 if solution.total_cost == 0
        else solution.total_defense / solution.total_cost,
        "Catalog Defense": float(catalog_defense),
    }


def verify_solution(
    catalog: Sequence[ArmorItem],
    solution: Solution,
    budget: float,
) -> Tuple[bool, str]:
    """
    Check that a solution is a valid, feasible subset of the catalog.

    Membership is by identity: solutions must share the catalog's item objects.
    """
    catalog_ids = {id(armor) for armor in catalog}
    seen = set()
    for armor in solution.items:
        if id(armor) not in catalog_ids:
            return False, f"Item {armor.description!r} is not part of the catalog"
        if id(armor) in seen:
            return False, f"Item {armor.description!r} selected more than once"
        seen.add(id(armor))

    total_cost, total_defense = aggregate(solution.items)
    if total_cost != solution.total_cost:
        return False, f"Total cost {solution.total_cost} does not match items ({total_cost})"
    if abs(total_defense - solution.total_defense) > EPS:
        return False, f"Total defense {solution.total_defense} does not match items ({total_defense})"
    if total_cost > budget:
        return False, f"Total cost {total_cost} exceeds budget {budget}"
    return True, "Solution is valid"


def best_feasible_defense(catalog: Sequence[ArmorItem], budget: float) -> float:
    """
    Reference optimum by brute force over subset sizes (small catalogs only).
    """
    if len(catalog) >= MAX_EXHAUSTIVE_ITEMS:
        raise PreconditionError(
            f"brute force needs fewer than {MAX_EXHAUSTIVE_ITEMS} items (got {len(catalog)})."
        )
    best = 0.0
    for size in range(1, len(catalog) + 1):
        for combo in combinations(catalog, size):
            cost, defense = aggregate(combo)
            if cost <= budget and defense > best:
                best = defense
    return best
