# -*- coding: utf-8 -*-
"""
Catalog selection orchestrator.

Thin wrapper that connects Policy -> filtering heuristic, and (optionally) writes
a CSV report of the filtered catalog via planning.Tracker.
"""

from __future__ import annotations
import logging
from typing import List, Optional, Sequence

from maxdefense.business_objects.items import ArmorItem
from maxdefense.heuristics.filtering import filter_armor_vector
from maxdefense.planning.policy import Policy
from maxdefense.planning.tracker import Tracker

logger = logging.getLogger(__name__)


def run_selection_phase(
    catalog: Sequence[ArmorItem],
    policy: Policy,
    tracker: Optional[Tracker] = None,
) -> List[ArmorItem]:
    """
    Filter the catalog with the policy's defense window and size cap.

    Parameters
    ----------
    catalog : sequence[ArmorItem]
        Full catalog as loaded.
    policy : Policy
        Provides min_defense, max_defense and total_size.
    tracker : Tracker | None
        If provided, writes catalog.csv into tracker.out_dir.

    Returns
    -------
    list[ArmorItem]
        The filtered catalog (same item objects, catalog order).
    """
    filtered = filter_armor_vector(
        catalog,
        min_defense=policy.min_defense,
        max_defense=policy.max_defense,
        total_size=policy.total_size,
    )
    logger.info("catalog filtered: %d of %d items kept", len(filtered), len(catalog))

    if tracker is not None:
        tracker.write_catalog_csv(filtered)

    return filtered
