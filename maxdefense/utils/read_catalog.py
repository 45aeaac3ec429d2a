# -*- coding: utf-8 -*-
"""
I/O helpers for loading armor catalogs.

Formats:
- caret-delimited text (armor.csv):
      header line
      <description>^<cost_gold>^<defense_points>
      ...
- JSON: [{"description": "...", "cost": <int>, "defense": <number>}, ...]

Both map directly to business_objects.items.ArmorItem.
"""

from __future__ import annotations
import json
import logging
import math
from typing import List, Optional

from maxdefense.business_objects.errors import SchemaError, StateValidationError
from maxdefense.business_objects.items import ArmorItem

logger = logging.getLogger(__name__)

FIELD_DELIMITER = "^"
FIELD_COUNT = 3


def _parse_number(field: str) -> Optional[float]:
    try:
        value = float(field.strip())
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def load_armor_database(path: str) -> List[ArmorItem]:
    """
    Load all the valid armor items from a caret-delimited database.

    The first line is a header and is skipped. Each data line must have exactly
    three fields; otherwise the whole file is rejected with SchemaError.
    Rows whose numbers do not parse, or that violate item invariants
    (empty description, non-positive cost), are skipped with a warning.
    Cost is truncated to an integer.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = f.read().splitlines()
    except OSError as e:
        raise SchemaError(f"{path}: cannot open armor database: {e}") from e

    items: List[ArmorItem] = []
    for line_number, line in enumerate(lines, start=1):
        if line_number == 1 or not line.strip():
            continue

        fields = line.split(FIELD_DELIMITER)
        if len(fields) != FIELD_COUNT:
            raise SchemaError(
                f"{path}: invalid field count at line {line_number}; "
                f"want {FIELD_COUNT} but got {len(fields)}. Line: {line}"
            )

        description, cost_field, defense_field = fields
        cost = _parse_number(cost_field)
        defense = _parse_number(defense_field)
        if cost is None or defense is None:
            logger.warning("%s:%d: unparseable numbers, skipping row %r", path, line_number, line)
            continue
        try:
            items.append(ArmorItem(description=description, cost=int(cost), defense=defense))
        except StateValidationError as e:
            logger.warning("%s:%d: %s; skipping row", path, line_number, e)

    logger.info("loaded %d armor items from %s", len(items), path)
    return items


def _require(obj: dict, key: str, path: str) -> object:
    if key not in obj:
        raise SchemaError(f"{path}: missing required key '{key}' in object {obj}")
    return obj[key]


def read_armor_json(path: str) -> List[ArmorItem]:
    """
    Load items from a JSON array. Each element must have:
      - description (str)
      - cost (integer)
      - defense (number)
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except Exception as e:
        raise SchemaError(f"{path}: failed to read/parse JSON: {e}") from e

    if not isinstance(data, list):
        raise SchemaError(f"{path}: expected a JSON array.")

    items: List[ArmorItem] = []
    for idx, obj in enumerate(data, start=1):
        if not isinstance(obj, dict):
            raise SchemaError(f"{path}[{idx}]: expected an object.")
        try:
            description = str(_require(obj, "description", path))
            cost = _require(obj, "cost", path)
            if isinstance(cost, float) and cost.is_integer():
                cost = int(cost)
            defense = float(_require(obj, "defense", path))
            items.append(ArmorItem(description=description, cost=cost, defense=defense))
        except Exception as e:
            raise SchemaError(f"{path}[{idx}]: {e}") from e
    return items
