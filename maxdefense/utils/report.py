# -*- coding: utf-8 -*-
"""
Console helpers: armor vectors and DP tables as readable text.
"""

from __future__ import annotations
from typing import List, Sequence

from maxdefense.business_objects.items import ArmorItem
from maxdefense.planning.solution import sum_armor_vector

# Tables with more rows or columns than this are not rendered.
MAX_CACHE_DIM = 250


def _fmt_number(value: float) -> str:
    return f"{value:g}"


def format_armor_vector(armors: Sequence[ArmorItem]) -> str:
    lines = ["*** Armor Vector ***"]
    if len(armors) == 0:
        lines.append("[empty armor list]")
        return "\n".join(lines)

    for armor in armors:
        lines.append(
            f"Ye olde {armor.description} ==> Cost of {armor.cost} gold"
            f"; Defense points = {_fmt_number(armor.defense)}"
        )
    total_cost, total_defense = sum_armor_vector(armors)
    lines.append(f"> Grand total cost: {total_cost} gold")
    lines.append(f"> Grand total defense: {_fmt_number(total_defense)}")
    return "\n".join(lines)


def print_armor_vector(armors: Sequence[ArmorItem]) -> None:
    print(format_armor_vector(armors))


def format_2d_cache(cache: List[List[float]]) -> str:
    """
    Render a 2D table with width-5 columns.
    Refuses (prints "[too large]") when either dimension exceeds MAX_CACHE_DIM.
    """
    lines = ["*** 2D Cache ***"]
    if len(cache) == 0:
        lines.append("[empty]")
    elif len(cache) > MAX_CACHE_DIM or max(len(row) for row in cache) > MAX_CACHE_DIM:
        lines.append("[too large]")
    else:
        for row in cache:
            lines.append("".join(f"{_fmt_number(value):>5}" for value in row))
    return "\n".join(lines)


def print_2d_cache(cache: List[List[float]]) -> None:
    print(format_2d_cache(cache))
