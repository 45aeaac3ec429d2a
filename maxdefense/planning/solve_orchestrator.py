# -*- coding: utf-8 -*-
"""
Solve orchestrator: timed solver dispatch and solver comparison.

- run_solver(items, policy, tracker)   -> SolveResult for policy.algorithm
- compare_solvers(items, budget, ...)  -> both results + agreement flag

The solvers themselves stay pure; timing, logging and artifacts live here.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence

from maxdefense.business_objects.errors import StateValidationError
from maxdefense.business_objects.items import ArmorItem
from maxdefense.planning.policy import Policy
from maxdefense.planning.solution import Solution, SolveResult
from maxdefense.planning.solvers.dynamic import (
    DefenseTable,
    dynamic_max_defense,
    dynamic_max_defense_with_table,
)
from maxdefense.planning.solvers.exhaustive import exhaustive_max_defense
from maxdefense.planning.tracker import Tracker
from maxdefense.utils.timer import Timer

logger = logging.getLogger(__name__)

SolverFn = Callable[[Sequence[ArmorItem], float], Solution]

SOLVERS: Dict[str, SolverFn] = {
    "dynamic": dynamic_max_defense,
    "exhaustive": exhaustive_max_defense,
}

# Optimal values from the two solvers are sums of the same floats in different orders.
AGREEMENT_TOL = 1e-9


@dataclass(frozen=True)
class Comparison:
    dynamic: SolveResult
    exhaustive: SolveResult
    agree: bool


def run_solver(
    items: Sequence[ArmorItem],
    policy: Policy,
    tracker: Optional[Tracker] = None,
) -> SolveResult:
    """
    Time one solver run on an already filtered catalog.

    If a tracker is given, writes solution.csv and, for the dynamic solver,
    dp_table.csv (the tracker skips tables too large to read).
    """
    solver = SOLVERS.get(policy.algorithm)
    if solver is None:
        raise StateValidationError(f"Unknown algorithm: {policy.algorithm!r}")

    table: Optional[DefenseTable] = None
    timer = Timer()
    if policy.algorithm == "dynamic":
        solution, table = dynamic_max_defense_with_table(items, policy.budget)
    else:
        solution = solver(items, policy.budget)
    elapsed = timer.elapsed()

    result = SolveResult(algorithm=policy.algorithm, solution=solution, elapsed_seconds=elapsed)
    logger.info(
        "%s: n=%d budget=%s -> %d items, cost=%d, defense=%.4f in %.6fs",
        policy.algorithm, len(items), policy.budget, len(solution),
        solution.total_cost, solution.total_defense, elapsed,
    )

    if tracker is not None:
        tracker.write_solution_csv(result)
        if table is not None:
            tracker.write_dp_table_csv(table)

    return result


def compare_solvers(
    items: Sequence[ArmorItem],
    budget: int,
    tracker: Optional[Tracker] = None,
) -> Comparison:
    """
    Run both solvers on the same catalog and check they reach the same optimum.
    With a tracker, each run is appended to benchmark.csv.
    """
    results: Dict[str, SolveResult] = {}
    for algorithm in ("dynamic", "exhaustive"):
        res = run_solver(items, Policy(budget=budget, algorithm=algorithm))
        results[algorithm] = res
        if tracker is not None:
            tracker.append_benchmark_row(algorithm, len(items), budget, res.solution, res.elapsed_seconds)

    agree = abs(results["dynamic"].solution.total_defense
                - results["exhaustive"].solution.total_defense) <= AGREEMENT_TOL
    if not agree:
        logger.warning(
            "solvers disagree: dynamic=%s exhaustive=%s",
            results["dynamic"].solution.total_defense,
            results["exhaustive"].solution.total_defense,
        )
    return Comparison(dynamic=results["dynamic"], exhaustive=results["exhaustive"], agree=agree)
