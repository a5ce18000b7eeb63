from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from .entities import (
    CatalogItem,
    Container,
    FlatItemInstance,
    PackedItem,
    PackingResult,
    SelectionState,
    SkippedItem,
)
from .flatten import flatten
from .metrics import DEFAULT_FILL_FACTOR, recommend_units
from .packer import find_oversized, pack
from .volume import estimate_volume

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculatorResult:
    total_volume_cubic_feet: float
    units_recommended: int
    packing: PackingResult
    container: Container
    skipped: Tuple[SkippedItem, ...] = field(default_factory=tuple)
    excluded: Tuple[FlatItemInstance, ...] = field(default_factory=tuple)


def calculate(
    selection: SelectionState,
    catalog: Mapping[str, CatalogItem],
    container: Container,
    fill_factor: float = DEFAULT_FILL_FACTOR,
    item_gap: float = 0.0,
    exclude_oversized: bool = False,
) -> CalculatorResult:
    """
    Run the whole estimate: volume, flatten, pack, fill metrics, recommendation.

    Everything is recomputed from `selection`; nothing is cached between calls.
    With `exclude_oversized` the instances that can never fit are dropped and
    listed on the result and left out of the total volume; otherwise the first
    one raises ItemTooLargeError.
    """
    estimate = estimate_volume(selection, catalog)
    instances = flatten(selection, catalog)

    excluded: List[FlatItemInstance] = []
    if exclude_oversized:
        excluded = find_oversized(instances, container)
        if excluded:
            logger.warning(
                f"Excluding {len(excluded)} oversized item(s): "
                f"{', '.join(item.source_key for item in excluded)}"
            )
            excluded_keys = {item.source_key for item in excluded}
            instances = [item for item in instances if item.source_key not in excluded_keys]

    total = estimate.cubic_feet - sum(item.cubic_feet for item in excluded)
    packing = pack(instances, container, item_gap=item_gap)
    units = recommend_units(total, container, fill_factor)

    logger.info(
        f"Selection of {selection.total_quantity} item(s): {total:.2f} cu ft, "
        f"{units} unit(s) recommended, {packing.container_count} container(s) visualized"
    )
    return CalculatorResult(
        total_volume_cubic_feet=total,
        units_recommended=units,
        packing=packing,
        container=container,
        skipped=estimate.skipped,
        excluded=tuple(excluded),
    )


def packed_item_to_dict(packed: PackedItem) -> Dict[str, Any]:
    item = packed.item
    return {
        "item_id": item.item_id,
        "instance_index": item.instance_index,
        "is_custom": item.is_custom,
        "container_index": packed.container_index,
        "position": {"x": packed.x, "y": packed.y, "z": packed.z},
        "dimensions": {"width": item.width, "depth": item.depth, "height": item.height},
        "color": item.color,
    }


def packing_to_dict(packing: PackingResult) -> Dict[str, Any]:
    return {
        "packed_items": [packed_item_to_dict(p) for p in packing.packed_items],
        "container_count": packing.container_count,
        "last_container_fill_percent": packing.last_container_fill_percent,
    }
