# -*- coding: utf-8 -*-
"""
Solution model and aggregation helpers for max-defense results.

These data classes define the shape of outputs produced by the solvers
and consumed by the metrics/reporting layers.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Tuple

from maxdefense.business_objects.items import ArmorItem


def aggregate(subset: Iterable[ArmorItem]) -> Tuple[int, float]:
    """
    Total gold cost and total defense of any subset of items.

    The empty subset yields (0, 0.0).
    """
    total_cost = 0
    total_defense = 0.0
    for armor in subset:
        total_cost += armor.cost
        total_defense += armor.defense
    return total_cost, total_defense


# Name used by the report helpers.
sum_armor_vector = aggregate


@dataclass(frozen=True)
class Solution:
    """
    A selected subset together with its aggregate cost and defense.

    Attributes
    ----------
    items : tuple[ArmorItem, ...]
        Selected items, shared by reference with the catalog.
        Order is solver-defined (see the solver modules).
    total_cost : int
        Sum of member costs.
    total_defense : float
        Sum of member defenses.
    """
    items: Tuple[ArmorItem, ...]
    total_cost: int
    total_defense: float

    @classmethod
    def from_items(cls, items: Iterable[ArmorItem]) -> "Solution":
        chosen = tuple(items)
        total_cost, total_defense = aggregate(chosen)
        return cls(items=chosen, total_cost=total_cost, total_defense=total_defense)

    @classmethod
    def empty(cls) -> "Solution":
        return cls(items=(), total_cost=0, total_defense=0.0)

    @property
    def total_benefit(self) -> float:
        return self.total_defense

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class SolveResult:
    """
    Outcome of one timed solver run.

    Attributes
    ----------
    algorithm : str
        Solver name ("dynamic" | "exhaustive").
    solution : Solution
        The optimal subset found.
    elapsed_seconds : float
        Wall-clock time spent in the solver.
    """
    algorithm: str
    solution: Solution
    elapsed_seconds: float
