# -*- coding: utf-8 -*-
"""
Cross-checks between the dynamic and exhaustive solvers on random catalogs.
"""

import random

import pytest

from maxdefense.planning.solvers.dynamic import dynamic_max_defense
from maxdefense.planning.solvers.exhaustive import exhaustive_max_defense

from conftest import random_catalog

SOLVERS = [dynamic_max_defense, exhaustive_max_defense]


def _cases(seed, count=25, max_n=9):
    rng = random.Random(seed)
    for _ in range(count):
        yield random_catalog(rng, rng.randint(0, max_n)), rng.randint(0, 60)


def test_solvers_agree_on_optimal_defense():
    for items, budget in _cases(seed=42):
        dyn = dynamic_max_defense(items, budget)
        exh = exhaustive_max_defense(items, budget)
        assert dyn.total_defense == pytest.approx(exh.total_defense)


@pytest.mark.parametrize("solver", SOLVERS)
def test_solutions_are_feasible(solver):
    for items, budget in _cases(seed=5):
        assert solver(items, budget).total_cost <= budget


@pytest.mark.parametrize("solver", SOLVERS)
def test_optimum_is_monotone_in_budget(solver):
    rng = random.Random(99)
    items = random_catalog(rng, 8)
    previous = 0.0
    for budget in range(0, 80, 4):
        current = solver(items, budget).total_defense
        assert current >= previous - 1e-9
        previous = current


@pytest.mark.parametrize("solver", SOLVERS)
def test_repeat_runs_are_identical(solver):
    for items, budget in _cases(seed=11, count=10):
        first = solver(items, budget)
        second = solver(items, budget)
        assert (first.total_cost, first.total_defense) == (second.total_cost, second.total_defense)


@pytest.mark.parametrize("solver", SOLVERS)
def test_inputs_are_not_mutated(solver):
    rng = random.Random(3)
    items = random_catalog(rng, 6)
    snapshot = list(items)
    solver(items, 30)
    assert items == snapshot
