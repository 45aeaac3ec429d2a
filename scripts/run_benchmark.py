#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Benchmark the dynamic and exhaustive solvers on growing catalog prefixes.

For each n in SIZES the catalog is filtered to its first n matching items and
both solvers run on it; optimal defenses must agree. Each run is appended to
OUT_DIR/benchmark.csv.

Usage:
  python scripts/run_benchmark.py
"""

from __future__ import annotations
import logging
import os
from typing import List

# ====== CONFIGURATION ======
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DB_PATH = os.path.join(ROOT, "data", "armor.csv")
OUT_DIR = "reports/benchmark"

BUDGET = 500
MIN_DEFENSE = 1
MAX_DEFENSE = 500

# Exhaustive search doubles per item; keep the largest size modest.
SIZES = [4, 8, 12, 16, 20]
# ===========================

from maxdefense.business_objects.items import ArmorItem
from maxdefense.planning import Policy
from maxdefense.planning.selection_orchestrator import run_selection_phase
from maxdefense.planning.solve_orchestrator import compare_solvers
from maxdefense.planning.tracker import Tracker
from maxdefense.utils.read_catalog import load_armor_database


def main() -> None:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    catalog: List[ArmorItem] = load_armor_database(DB_PATH)
    tracker = Tracker(out_dir=OUT_DIR)

    print(f"\n=== Benchmark (budget {BUDGET} gold) ===")
    print(f"{'n':>4} {'dynamic s':>12} {'exhaustive s':>14} {'defense':>10}  agree")
    for n in SIZES:
        policy = Policy(budget=BUDGET, min_defense=MIN_DEFENSE, max_defense=MAX_DEFENSE, total_size=n)
        items = run_selection_phase(catalog, policy)
        cmp = compare_solvers(items, BUDGET, tracker=tracker)
        print(
            f"{len(items):>4} {cmp.dynamic.elapsed_seconds:>12.6f} "
            f"{cmp.exhaustive.elapsed_seconds:>14.6f} "
            f"{cmp.dynamic.solution.total_defense:>10.2f}  {cmp.agree}"
        )

    print(f"\nRows appended to: {os.path.abspath(tracker.benchmark_path)}")


if __name__ == "__main__":
    main()
