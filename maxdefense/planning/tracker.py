# -*- coding: utf-8 -*-
"""
Planning tracker: CSV artifacts for catalog selection, solving and benchmarking.

Files produced (when Tracker is used):
  - catalog.csv      (filtered catalog; written by write_catalog_csv)
  - solution.csv     (selected items + totals row)
  - dp_table.csv     (dynamic-programming table, only when small enough)
  - benchmark.csv    (append-as-you-go, one row per timed solver run)

Notes
-----
- Callers decide when to invoke these writers; the orchestrators call them
  when a tracker is passed in.
"""

from __future__ import annotations
import csv
import os
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from maxdefense.business_objects.items import ArmorItem
from maxdefense.planning.solution import Solution, SolveResult
from maxdefense.utils.report import MAX_CACHE_DIM


def _ratio(defense: float, cost: int) -> float:
    return float(defense) / cost if cost else 0.0


@dataclass
class Tracker:
    """
    Thin, opt-in artifact writer. Callers control when/where to dump.
    """
    out_dir: str
    _benchmark_path: str = field(init=False, repr=False)
    _benchmark_started: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:  # type: ignore[override]
        os.makedirs(self.out_dir, exist_ok=True)
        self._benchmark_path = os.path.join(self.out_dir, "benchmark.csv")

    # -----------------------------
    # Catalog selection
    # -----------------------------
    def write_catalog_csv(
        self,
        items: Sequence[ArmorItem],
        filename: str = "catalog.csv",
    ) -> str:
        """
        Persist the filtered catalog.

        Columns:
          index, description, cost, defense, defense_per_gold
        """
        path = os.path.join(self.out_dir, filename)
        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["index", "description", "cost", "defense", "defense_per_gold"])
            for idx, armor in enumerate(items):
                w.writerow([idx, armor.description, armor.cost, float(armor.defense),
                            _ratio(armor.defense, armor.cost)])
        return path

    # -----------------------------
    # Solve artifacts
    # -----------------------------
    def write_solution_csv(
        self,
        result: SolveResult,
        filename: str = "solution.csv",
    ) -> str:
        """
        Selected items followed by a TOTAL row.

        Columns:
          algorithm, description, cost, defense
        """
        path = os.path.join(self.out_dir, filename)
        sol: Solution = result.solution
        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["algorithm", "description", "cost", "defense"])
            for armor in sol.items:
                w.writerow([result.algorithm, armor.description, armor.cost, float(armor.defense)])
            w.writerow([result.algorithm, "TOTAL", sol.total_cost, float(sol.total_defense)])
        return path

    def write_dp_table_csv(
        self,
        table: List[List[float]],
        filename: str = "dp_table.csv",
    ) -> Optional[str]:
        """
        Dump the DP table (rows = item prefixes, columns = budget 0..B).
        Returns None without writing when either dimension exceeds MAX_CACHE_DIM.
        """
        if not table or len(table) > MAX_CACHE_DIM or len(table[0]) > MAX_CACHE_DIM:
            return None
        path = os.path.join(self.out_dir, filename)
        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["prefix"] + [f"c{c}" for c in range(len(table[0]))])
            for i, row in enumerate(table):
                w.writerow([i] + [float(v) for v in row])
        return path

    # -----------------------------
    # Benchmark log (append-as-you-go)
    # -----------------------------
    def append_benchmark_row(
        self,
        algorithm: str,
        n: int,
        budget: float,
        solution: Solution,
        elapsed_seconds: float,
    ) -> str:
        """
        Columns:
          algorithm, n, budget, items_selected, total_cost, total_defense, elapsed_seconds
        """
        if not self._benchmark_started:
            with open(self._benchmark_path, "w", newline="", encoding="utf-8") as f:
                csv.writer(f).writerow([
                    "algorithm",
                    "n",
                    "budget",
                    "items_selected",
                    "total_cost",
                    "total_defense",
                    "elapsed_seconds",
                ])
            self._benchmark_started = True

        with open(self._benchmark_path, "a", newline="", encoding="utf-8") as f:
            csv.writer(f).writerow([
                algorithm,
                n,
                budget,
                len(solution),
                solution.total_cost,
                float(solution.total_defense),
                round(float(elapsed_seconds), 6),
            ])
        return self._benchmark_path

    @property
    def benchmark_path(self) -> str:
        return self._benchmark_path
