# -*- coding: utf-8 -*-
import random

import pytest

from maxdefense.business_objects import PreconditionError
from maxdefense.planning.solvers.dynamic import (
    build_defense_table,
    dynamic_max_defense,
    reconstruct_selection,
)
from maxdefense.quality_metrics.core import best_feasible_defense, verify_solution

from conftest import make_items, random_catalog


def test_small_catalog_prefers_pair_over_single(abcd_items):
    sol = dynamic_max_defense(abcd_items, 5)
    assert sol.total_defense == 7
    assert sol.total_cost == 5
    assert {a.description for a in sol.items} == {"A", "B"}


def test_classic_instance(classic_items):
    sol = dynamic_max_defense(classic_items, 50)
    assert sol.total_defense == 220
    assert sol.total_cost == 50
    assert {a.description for a in sol.items} == {"B", "C"}


def test_items_come_back_in_descending_catalog_order(classic_items):
    sol = dynamic_max_defense(classic_items, 60)
    assert [a.description for a in sol.items] == ["C", "B", "A"]


def test_single_unaffordable_item():
    sol = dynamic_max_defense(make_items([("big", 10, 5)]), 5)
    assert sol.items == ()
    assert sol.total_defense == 0


def test_identical_items_budget_three():
    items = make_items([(f"u{i}", 1, 1) for i in range(5)])
    sol = dynamic_max_defense(items, 3)
    assert sol.total_defense == 3
    assert len(sol) == 3


def test_empty_catalog():
    sol = dynamic_max_defense([], 100)
    assert (sol.total_cost, sol.total_defense, len(sol)) == (0, 0.0, 0)


def test_zero_budget(abcd_items):
    sol = dynamic_max_defense(abcd_items, 0)
    assert (sol.total_cost, sol.total_defense, len(sol)) == (0, 0.0, 0)


def test_zero_defense_items_are_tolerated():
    items = make_items([("nothing", 1, 0.0), ("something", 2, 4.0)])
    sol = dynamic_max_defense(items, 3)
    assert sol.total_defense == 4.0


def test_table_shape_and_value(abcd_items):
    table = build_defense_table(abcd_items, 5)
    assert len(table) == 5
    assert all(len(row) == 6 for row in table)
    assert all(v == 0 for v in table[0])
    assert all(row[0] == 0 for row in table)
    assert table[4][5] == 7


def test_tie_skips_the_later_item():
    items = make_items([("first", 3, 5.0), ("second", 3, 5.0)])
    sol = dynamic_max_defense(items, 3)
    assert [a.description for a in sol.items] == ["first"]


def test_reconstruction_with_non_integral_defense():
    # Sums like 0.1 + 0.2 do not cancel exactly under subtraction.
    items = make_items([("a", 1, 0.1), ("b", 1, 0.2), ("c", 1, 0.3), ("d", 2, 0.15)])
    table = build_defense_table(items, 3)
    chosen = reconstruct_selection(items, table)
    assert {a.description for a in chosen} == {"a", "b", "c"}
    assert sum(a.defense for a in chosen) == pytest.approx(table[-1][-1])


def test_integral_float_budget_is_accepted(classic_items):
    assert dynamic_max_defense(classic_items, 50.0).total_defense == 220


@pytest.mark.parametrize("budget", [-1, 2.5])
def test_invalid_budget_is_rejected(classic_items, budget):
    with pytest.raises(PreconditionError):
        dynamic_max_defense(classic_items, budget)


def test_matches_brute_force_on_random_catalogs():
    rng = random.Random(1234)
    for _ in range(40):
        items = random_catalog(rng, rng.randint(0, 10))
        budget = rng.randint(0, 60)
        sol = dynamic_max_defense(items, budget)
        ok, msg = verify_solution(items, sol, budget)
        assert ok, msg
        assert sol.total_defense == pytest.approx(best_feasible_defense(items, budget))


def test_large_budget_many_items():
    rng = random.Random(7)
    items = random_catalog(rng, 70, max_cost=50)
    sol = dynamic_max_defense(items, 500)
    ok, msg = verify_solution(items, sol, 500)
    assert ok, msg
    assert sol.total_cost <= 500
