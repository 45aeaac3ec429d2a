# -*- coding: utf-8 -*-
"""
Armor item model for the max-defense knapsack.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List

from .errors import StateValidationError


@dataclass(frozen=True)
class ArmorItem:
    """
    One armor item available for purchase.

    Attributes
    ----------
    description : str
        Human-readable description, e.g. "new enchanted helmet". Must be non-empty.
    cost : int
        Cost in units of gold. Must be a positive integer.
    defense : float
        Defense points; expected to be nonnegative.
    """
    description: str
    cost: int
    defense: float

    def __post_init__(self) -> None:  # type: ignore[override]
        if not self.description:
            raise StateValidationError("ArmorItem.description must be non-empty.")
        if isinstance(self.cost, bool) or not isinstance(self.cost, int):
            raise StateValidationError(f"ArmorItem[{self.description}] cost must be an integer.")
        if self.cost <= 0:
            raise StateValidationError(f"ArmorItem[{self.description}] cost must be > 0.")

    @property
    def benefit(self) -> float:
        return self.defense


# Ordered catalog (or subset) of shared, immutable items.
ArmorVector = List[ArmorItem]
