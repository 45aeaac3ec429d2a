# -*- coding: utf-8 -*-
"""
Planning layer public API for the max-defense pipeline.

This module exposes the core planning-time data contracts:
  - Policy configuration
  - Solution / SolveResult models and the aggregate() helper

Solvers, orchestrators and the tracker are intentionally not exported here to
avoid cluttering the namespace. They should be imported explicitly when needed:
  - planning.solvers.dynamic.dynamic_max_defense
  - planning.solvers.exhaustive.exhaustive_max_defense
"""

from .policy import Policy
from .solution import Solution, SolveResult, aggregate

__all__ = [
    "Policy",
    "Solution",
    "SolveResult",
    "aggregate",
]
