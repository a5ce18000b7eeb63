from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Dict, List, Tuple

from .entities import CatalogItem, FlatItemInstance, SelectionState

logger = logging.getLogger(__name__)


def _catalog_sort_key(instance: FlatItemInstance) -> Tuple[float, str, int]:
    return (-instance.volume, instance.item_id, instance.instance_index)


def flatten(
    selection: SelectionState, catalog: Mapping[str, CatalogItem]
) -> List[FlatItemInstance]:
    """
    Expand a selection into individually placeable units.

    Catalog units come first, largest volume first, ties broken by item id and
    then instance index. Custom items follow in the order they were added.
    This ordering is what makes packing reproducible.
    """
    catalog_units: List[FlatItemInstance] = []
    next_index: Dict[str, int] = {}

    for item_id, quantity in selection.quantities:
        if quantity <= 0:
            continue
        item = catalog.get(item_id)
        if item is None:
            logger.debug(f"Unknown catalog id {item_id!r} skipped while flattening selection")
            continue
        start = next_index.get(item_id, 0)
        for index in range(start, start + quantity):
            catalog_units.append(
                FlatItemInstance(
                    item_id=item.id,
                    instance_index=index,
                    width=item.width,
                    depth=item.depth,
                    height=item.height,
                    color=item.color,
                )
            )
        next_index[item_id] = start + quantity

    catalog_units.sort(key=_catalog_sort_key)

    custom_units = [
        FlatItemInstance(
            item_id=custom.id,
            instance_index=0,
            width=custom.width,
            depth=custom.depth,
            height=custom.height,
            color=custom.color,
            is_custom=True,
        )
        for custom in selection.custom_items
    ]
    return catalog_units + custom_units
