from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import List

from .entities import CatalogItem, SelectionState, SkippedItem, VolumeEstimate

logger = logging.getLogger(__name__)

UNKNOWN_ITEM_REASON = "unknown catalog id"


def estimate_volume(
    selection: SelectionState, catalog: Mapping[str, CatalogItem]
) -> VolumeEstimate:
    """
    Total cubic footage of a selection.

    Non-positive quantities contribute nothing. Ids missing from the catalog
    are skipped and reported on the result instead of failing the estimate.
    """
    total = 0.0
    skipped: List[SkippedItem] = []
    for item_id, quantity in selection.quantities:
        if quantity <= 0:
            continue
        item = catalog.get(item_id)
        if item is None:
            logger.warning(f"Unknown catalog id {item_id!r} (qty {quantity}) skipped in volume estimate")
            skipped.append(SkippedItem(item_id, quantity, UNKNOWN_ITEM_REASON))
            continue
        total += item.cubic_feet * quantity

    for custom in selection.custom_items:
        total += custom.cubic_feet

    return VolumeEstimate(cubic_feet=total, skipped=tuple(skipped))
