# -*- coding: utf-8 -*-
import pytest

from maxdefense.business_objects import PreconditionError
from maxdefense.planning.solvers.exhaustive import (
    MAX_EXHAUSTIVE_ITEMS,
    exhaustive_max_defense,
    subset_from_mask,
)

from conftest import make_items


def test_small_catalog_prefers_pair_over_single(abcd_items):
    sol = exhaustive_max_defense(abcd_items, 5)
    assert sol.total_defense == 7
    assert [a.description for a in sol.items] == ["A", "B"]


def test_classic_instance(classic_items):
    sol = exhaustive_max_defense(classic_items, 50)
    assert sol.total_defense == 220
    assert [a.description for a in sol.items] == ["B", "C"]


def test_single_unaffordable_item():
    sol = exhaustive_max_defense(make_items([("big", 10, 5)]), 5)
    assert sol.items == ()
    assert sol.total_defense == 0


def test_identical_items_keep_earliest_mask():
    items = make_items([(f"u{i}", 1, 1) for i in range(5)])
    sol = exhaustive_max_defense(items, 3)
    assert sol.total_defense == 3
    # mask 0b00111 is the first 3-item subset enumerated
    assert [a.description for a in sol.items] == ["u0", "u1", "u2"]


def test_tie_keeps_earliest_mask():
    items = make_items([("first", 3, 5.0), ("second", 3, 5.0)])
    sol = exhaustive_max_defense(items, 3)
    assert [a.description for a in sol.items] == ["first"]


def test_empty_catalog_and_zero_budget(abcd_items):
    assert exhaustive_max_defense([], 10).total_defense == 0
    sol = exhaustive_max_defense(abcd_items, 0)
    assert (sol.total_cost, len(sol)) == (0, 0)


def test_real_valued_budget(abcd_items):
    assert exhaustive_max_defense(abcd_items, 5.5).total_defense == 7


def test_subset_from_mask(abcd_items):
    assert subset_from_mask(abcd_items, 0) == []
    assert subset_from_mask(abcd_items, 0b1010) == [abcd_items[1], abcd_items[3]]


def test_rejects_64_items():
    items = make_items([(f"i{k}", 1, 1) for k in range(MAX_EXHAUSTIVE_ITEMS)])
    with pytest.raises(PreconditionError):
        exhaustive_max_defense(items, 10)


def test_rejects_negative_budget(abcd_items):
    with pytest.raises(PreconditionError):
        exhaustive_max_defense(abcd_items, -1)


@pytest.mark.parametrize("budget", [float("nan"), float("inf")])
def test_rejects_non_finite_budget(abcd_items, budget):
    with pytest.raises(PreconditionError):
        exhaustive_max_defense(abcd_items, budget)
