"""
Household inventory catalog.

The calculator core only reads from a `Catalog`; it never caches or edits it.
Dimensions are interior-storage dimensions in inches (width x depth x height).
Large flat pieces (bed frames, mattresses, table tops) are listed standing on
edge, which is how they are loaded into a unit.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

import pandas as pd

from .entities import DEFAULT_COLOR, CatalogItem, InvalidDimensionsError

logger = logging.getLogger(__name__)

CATEGORIES: Tuple[Tuple[str, str], ...] = (
    ("bedroom", "Bedroom"),
    ("living-room", "Living Room"),
    ("kitchen", "Kitchen"),
    ("office", "Office"),
    ("boxes", "Boxes"),
    ("outdoor", "Outdoor"),
    ("misc", "Miscellaneous"),
)

# id, name, category, width, depth, height, color
_INVENTORY = (
    ("king-bed", "King Bed Frame", "bedroom", 80, 10, 76, "#8B5CF6"),
    ("queen-bed", "Queen Bed Frame", "bedroom", 80, 10, 60, "#A78BFA"),
    ("king-mattress", "King Mattress", "bedroom", 80, 12, 76, "#7C3AED"),
    ("queen-mattress", "Queen Mattress", "bedroom", 80, 12, 60, "#8B5CF6"),
    ("dresser", "Dresser (6 Drawer)", "bedroom", 60, 18, 32, "#D97706"),
    ("nightstand", "Nightstand", "bedroom", 24, 18, 26, "#F59E0B"),
    ("wardrobe", "Wardrobe", "bedroom", 40, 24, 72, "#92400E"),
    ("sofa-3-seat", "3-Seat Sofa", "living-room", 85, 36, 35, "#0EA5E9"),
    ("sofa-2-seat", "Loveseat (2-Seat)", "living-room", 60, 36, 35, "#38BDF8"),
    ("armchair", "Armchair", "living-room", 36, 34, 36, "#0284C7"),
    ("coffee-table", "Coffee Table", "living-room", 48, 24, 18, "#D97706"),
    ("tv-55", '55" TV (boxed)', "living-room", 50, 6, 32, "#1F2937"),
    ("tv-65", '65" TV (boxed)', "living-room", 58, 6, 36, "#111827"),
    ("entertainment-center", "Entertainment Center", "living-room", 60, 20, 24, "#78350F"),
    ("bookshelf", "Bookshelf (5 Shelf)", "living-room", 36, 12, 72, "#B45309"),
    ("floor-lamp", "Floor Lamp", "living-room", 18, 18, 65, "#FCD34D"),
    ("refrigerator", "Refrigerator", "kitchen", 36, 32, 70, "#9CA3AF"),
    ("dining-table-6", "Dining Table (6 Seat)", "kitchen", 72, 6, 42, "#78350F"),
    ("dining-table-4", "Dining Table (4 Seat)", "kitchen", 48, 6, 36, "#92400E"),
    ("dining-chair", "Dining Chair", "kitchen", 20, 20, 38, "#B45309"),
    ("bar-stool", "Bar Stool", "kitchen", 16, 16, 30, "#D97706"),
    ("microwave", "Microwave", "kitchen", 24, 18, 14, "#4B5563"),
    ("office-desk", "Office Desk", "office", 60, 30, 30, "#374151"),
    ("office-chair", "Office Chair", "office", 26, 26, 42, "#1F2937"),
    ("filing-cabinet", "Filing Cabinet (2 Drawer)", "office", 15, 22, 28, "#6B7280"),
    ("computer-monitor", "Computer Monitor (boxed)", "office", 26, 8, 18, "#111827"),
    ("box-small", "Small Box", "boxes", 16, 12, 12, "#D4A574"),
    ("box-medium", "Medium Box", "boxes", 18, 18, 16, "#C4956A"),
    ("box-large", "Large Box", "boxes", 24, 18, 18, "#B4855A"),
    ("box-wardrobe", "Wardrobe Box", "boxes", 24, 21, 46, "#A4754A"),
    ("box-dish-pack", "Dish Pack Box", "boxes", 18, 18, 28, "#94653A"),
    ("bicycle", "Bicycle", "outdoor", 68, 24, 42, "#DC2626"),
    ("lawn-mower", "Lawn Mower (push)", "outdoor", 24, 56, 42, "#16A34A"),
    ("patio-chair", "Patio Chair", "outdoor", 26, 28, 36, "#15803D"),
    ("grill", "BBQ Grill", "outdoor", 52, 24, 44, "#1F2937"),
    ("exercise-bike", "Exercise Bike", "misc", 40, 20, 50, "#7C3AED"),
    ("weight-bench", "Weight Bench", "misc", 50, 28, 48, "#4B5563"),
    ("treadmill", "Treadmill (folded)", "misc", 36, 28, 60, "#374151"),
    ("crib", "Crib (disassembled)", "misc", 52, 8, 36, "#F9A8D4"),
    ("stroller", "Stroller (folded)", "misc", 24, 20, 40, "#EC4899"),
    ("guitar-case", "Guitar (in case)", "misc", 44, 6, 18, "#92400E"),
    ("gaming-console", "Gaming Console (boxed)", "misc", 16, 12, 8, "#1F2937"),
    ("suitcase-large", "Large Suitcase", "misc", 30, 12, 20, "#1E40AF"),
)

INVENTORY_ITEMS: Tuple[CatalogItem, ...] = tuple(
    CatalogItem(id=i, name=n, category=c, width=w, depth=d, height=h, color=col)
    for i, n, c, w, d, h, col in _INVENTORY
)


class Catalog(Mapping):
    """Read-only item lookup keyed by catalog id, in declaration order."""

    def __init__(self, items: Iterable[CatalogItem]) -> None:
        self._items: Dict[str, CatalogItem] = {}
        for item in items:
            if item.id in self._items:
                raise ValueError(f"duplicate catalog id {item.id!r}")
            self._items[item.id] = item

    def __getitem__(self, item_id: str) -> CatalogItem:
        return self._items[item_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def get_item_by_id(self, item_id: str) -> Optional[CatalogItem]:
        return self._items.get(item_id)

    def get_items_by_category(self, category: str) -> List[CatalogItem]:
        return [item for item in self._items.values() if item.category == category]

    @property
    def categories(self) -> List[str]:
        seen: List[str] = []
        for item in self._items.values():
            if item.category not in seen:
                seen.append(item.category)
        return seen


DEFAULT_CATALOG = Catalog(INVENTORY_ITEMS)


def get_item_by_id(item_id: str) -> Optional[CatalogItem]:
    return DEFAULT_CATALOG.get_item_by_id(item_id)


def get_items_by_category(category: str) -> List[CatalogItem]:
    return DEFAULT_CATALOG.get_items_by_category(category)


def calculate_cubic_feet(item: CatalogItem) -> float:
    return item.cubic_feet


# Accepted spreadsheet headers per field, first match wins.
COLUMN_ALIASES: Dict[str, Tuple[str, ...]] = {
    "id": ("id", "item_id", "Item ID", "Item Code"),
    "name": ("name", "item_name", "Item Name", "Name"),
    "category": ("category", "Category"),
    "width": ("width", "Width", "Width (in)"),
    "depth": ("depth", "Depth", "Depth (in)"),
    "height": ("height", "Height", "Height (in)"),
    "color": ("color", "Color"),
}


def _resolve_columns(columns: Iterable[str]) -> Dict[str, str]:
    present = list(columns)
    resolved = {}
    for field_name, aliases in COLUMN_ALIASES.items():
        for alias in aliases:
            if alias in present:
                resolved[field_name] = alias
                break
    missing = [f for f in ("id", "width", "depth", "height") if f not in resolved]
    if missing:
        raise ValueError(f"catalog file is missing column(s): {', '.join(missing)}")
    return resolved


def load_catalog_file(path: Union[str, Path]) -> Catalog:
    """
    Build a Catalog from a CSV or Excel sheet.

    Rows with missing or non-positive dimensions are skipped with a warning.
    """
    path = Path(path)
    if path.suffix.lower() in (".xlsx", ".xls"):
        df = pd.read_excel(path)
    else:
        df = pd.read_csv(path)

    cols = _resolve_columns(df.columns)
    items: List[CatalogItem] = []
    for row_no, row in enumerate(df.to_dict(orient="records"), start=2):
        item_id = row.get(cols["id"])
        if pd.isna(item_id) or not str(item_id).strip():
            logger.warning(f"{path.name} row {row_no}: missing item id, skipped")
            continue
        item_id = str(item_id).strip()
        name = row.get(cols["name"]) if "name" in cols else None
        category = row.get(cols["category"]) if "category" in cols else None
        color = row.get(cols["color"]) if "color" in cols else None
        try:
            items.append(
                CatalogItem(
                    id=item_id,
                    name=item_id if name is None or pd.isna(name) else str(name),
                    category="misc" if category is None or pd.isna(category) else str(category),
                    width=float(row[cols["width"]]),
                    depth=float(row[cols["depth"]]),
                    height=float(row[cols["height"]]),
                    color=DEFAULT_COLOR if color is None or pd.isna(color) else str(color),
                )
            )
        except (InvalidDimensionsError, TypeError, ValueError) as e:
            logger.warning(f"{path.name} row {row_no}: {e}, skipped")
    logger.info(f"Loaded {len(items)} catalog items from {path}")
    return Catalog(items)
