# -*- coding: utf-8 -*-
import random
from typing import List

import pytest

from maxdefense.business_objects.items import ArmorItem


def make_items(rows) -> List[ArmorItem]:
    """[(description, cost, defense), ...] -> ArmorItems."""
    return [ArmorItem(description=d, cost=c, defense=v) for d, c, v in rows]


def random_catalog(rng: random.Random, n: int, max_cost: int = 20) -> List[ArmorItem]:
    return [
        ArmorItem(
            description=f"item{i}",
            cost=rng.randint(1, max_cost),
            defense=round(rng.uniform(0.0, 25.0), 2),
        )
        for i in range(n)
    ]


@pytest.fixture
def abcd_items() -> List[ArmorItem]:
    return make_items([("A", 2, 3), ("B", 3, 4), ("C", 4, 5), ("D", 5, 6)])


@pytest.fixture
def classic_items() -> List[ArmorItem]:
    return make_items([("A", 10, 60), ("B", 20, 100), ("C", 30, 120)])
