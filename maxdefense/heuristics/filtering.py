# -*- coding: utf-8 -*-
"""
Catalog filtering applied before solving.

Purpose:
  1) drop armor with zero/negative (or otherwise irrelevant) defense
  2) bound the catalog size so the exhaustive solver stays tractable

An item is kept when min_defense <= defense <= max_defense, and only the first
`total_size` matching items (catalog order) are kept. Items are shared, not copied.
"""

from __future__ import annotations
from typing import Iterable, List

from maxdefense.business_objects.items import ArmorItem


def filter_armor_vector(
    source: Iterable[ArmorItem],
    min_defense: float,
    max_defense: float,
    total_size: int,
) -> List[ArmorItem]:
    kept: List[ArmorItem] = []
    for armor in source:
        if len(kept) >= total_size:
            break
        if min_defense <= armor.defense <= max_defense:
            kept.append(armor)
    return kept
