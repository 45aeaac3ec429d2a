#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Load data/armor.csv, filter it, solve max-defense with one algorithm and report.

This script does NOT use argparse.
Just set the variables at the top of the file and run:

    python scripts/run_maxdefense.py

Outputs under OUT_DIR:
  - catalog.csv    (filtered catalog)
  - solution.csv   (selected items + totals row)
  - dp_table.csv   (dynamic algorithm only, small tables only)
"""

from __future__ import annotations
import logging
import os
from typing import List

# ====== CONFIGURATION ======
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DB_PATH = os.path.join(ROOT, "data", "armor.csv")
OUT_DIR = "reports/maxdefense"

BUDGET = 500
ALGORITHM = "dynamic"      # "dynamic" | "exhaustive"

# Catalog filter: defense window (inclusive) + size cap
MIN_DEFENSE = 1
MAX_DEFENSE = 500
TOTAL_SIZE = 70            # keep well under 64 for "exhaustive"

PRINT_DP_TABLE = False
# ============================

from maxdefense.business_objects.items import ArmorItem
from maxdefense.planning import Policy
from maxdefense.planning.selection_orchestrator import run_selection_phase
from maxdefense.planning.solve_orchestrator import run_solver
from maxdefense.planning.solvers.dynamic import build_defense_table
from maxdefense.planning.tracker import Tracker
from maxdefense.quality_metrics.core import compute_solution_metrics, verify_solution
from maxdefense.utils.read_catalog import load_armor_database
from maxdefense.utils.report import print_2d_cache, print_armor_vector


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    catalog: List[ArmorItem] = load_armor_database(DB_PATH)

    policy = Policy(
        budget=BUDGET,
        algorithm=ALGORITHM,
        min_defense=MIN_DEFENSE,
        max_defense=MAX_DEFENSE,
        total_size=TOTAL_SIZE,
    )
    tracker = Tracker(out_dir=OUT_DIR)

    filtered = run_selection_phase(catalog, policy, tracker=tracker)
    result = run_solver(filtered, policy, tracker=tracker)

    print(f"\n=== {ALGORITHM} max defense (budget {BUDGET} gold, {len(filtered)} items) ===")
    print_armor_vector(result.solution.items)

    if PRINT_DP_TABLE and ALGORITHM == "dynamic":
        print_2d_cache(build_defense_table(filtered, BUDGET))

    _, msg = verify_solution(filtered, result.solution, BUDGET)
    print(f"\nCheck: {msg}")
    for key, value in compute_solution_metrics(filtered, result.solution, BUDGET).items():
        print(f"  - {key}: {value:.4f}")

    print(f"\nelapsed time = {result.elapsed_seconds} seconds")
    print(f"Artifacts written to: {os.path.abspath(OUT_DIR)}")


if __name__ == "__main__":
    main()
