"""
Storage calculator engine - estimates how many storage units a selection needs
and lays the selected items out in 3D.

This package re-exports the pipeline stages from their modules:
- entities: data model and error types
- catalog: built-in household inventory and file loading
- volume: cubic footage of a selection
- flatten: selection to ordered, individually placeable units
- packer: shelf-based placement across containers
- metrics: fill metrics and rental recommendation
- geometry: numba invariant checks
- scene: renderer coordinates
- solver: the full pipeline
"""

from __future__ import annotations

from .entities import (
    CatalogItem,
    Container,
    CustomItem,
    FillMetrics,
    FlatItemInstance,
    InvalidDimensionsError,
    ItemTooLargeError,
    PackedItem,
    PackingResult,
    SelectionState,
    SkippedItem,
    StorageCalculatorError,
    VolumeEstimate,
)
from .catalog import (
    CATEGORIES,
    DEFAULT_CATALOG,
    INVENTORY_ITEMS,
    Catalog,
    calculate_cubic_feet,
    get_item_by_id,
    get_items_by_category,
    load_catalog_file,
)
from .volume import estimate_volume
from .flatten import flatten
from .metrics import DEFAULT_FILL_FACTOR, compute_fill_metrics, recommend_units
from .packer import ShelfPacker, find_oversized, pack
from .geometry import verify_packing
from .solver import CalculatorResult, calculate, packing_to_dict

__all__ = [
    # Data model
    "CatalogItem",
    "Container",
    "CustomItem",
    "FillMetrics",
    "FlatItemInstance",
    "PackedItem",
    "PackingResult",
    "SelectionState",
    "SkippedItem",
    "VolumeEstimate",
    # Errors
    "StorageCalculatorError",
    "InvalidDimensionsError",
    "ItemTooLargeError",
    # Catalog
    "CATEGORIES",
    "DEFAULT_CATALOG",
    "INVENTORY_ITEMS",
    "Catalog",
    "calculate_cubic_feet",
    "get_item_by_id",
    "get_items_by_category",
    "load_catalog_file",
    # Pipeline stages
    "estimate_volume",
    "flatten",
    "pack",
    "find_oversized",
    "ShelfPacker",
    "compute_fill_metrics",
    "recommend_units",
    "DEFAULT_FILL_FACTOR",
    "verify_packing",
    "CalculatorResult",
    "calculate",
    "packing_to_dict",
]
