# -*- coding: utf-8 -*-
"""
Policy (configuration knobs) for a max-defense run.

Catalog filtering (applied before any solver):
  - min_defense / max_defense: inclusive defense window; items outside it are dropped
  - total_size: keep only the first `total_size` matching items (catalog order)

Solving:
  - budget: total gold available
  - algorithm: "dynamic" | "exhaustive"
    The exhaustive solver is exponential and refuses catalogs of 64+ items,
    so keep total_size small when selecting it.
"""

from __future__ import annotations
from dataclasses import dataclass

from maxdefense.business_objects.errors import StateValidationError

ALGORITHMS = ("dynamic", "exhaustive")


@dataclass(frozen=True)
class Policy:
    """
    Run knobs (pure data holder).

    Attributes
    ----------
    budget : float
        Gold budget. The dynamic solver needs an integral value.
    algorithm : str
        Solver name: "dynamic" | "exhaustive".
    min_defense : float
        Lowest defense an item may have to stay in the catalog.
    max_defense : float
        Highest defense an item may have to stay in the catalog.
    total_size : int
        Maximum number of items kept after filtering.
    """
    budget: float = 500
    algorithm: str = "dynamic"

    # Catalog filter
    min_defense: float = 1.0
    max_defense: float = float("inf")
    total_size: int = 70

    def __post_init__(self) -> None:  # type: ignore[override]
        if self.budget < 0:
            raise StateValidationError(f"Policy.budget must be >= 0 (got {self.budget}).")
        if self.algorithm not in ALGORITHMS:
            raise StateValidationError(
                f"Policy.algorithm must be one of {ALGORITHMS} (got {self.algorithm!r})."
            )
        if self.total_size < 0:
            raise StateValidationError(f"Policy.total_size must be >= 0 (got {self.total_size}).")
        if self.min_defense > self.max_defense:
            raise StateValidationError("Policy.min_defense must not exceed Policy.max_defense.")
