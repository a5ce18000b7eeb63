from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .entities import (
    EPS,
    Container,
    FlatItemInstance,
    ItemTooLargeError,
    PackedItem,
    PackingResult,
)
from .metrics import compute_fill_metrics

logger = logging.getLogger(__name__)


@dataclass
class Cursor:
    """Insertion point inside the open container plus the extents of the current row and layer."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    row_depth: float = 0.0
    layer_height: float = 0.0


class ShelfPacker:
    """
    First-fit shelf packer over a fixed item order.

    Items advance along x within a row, rows advance along y within a layer,
    and layers advance along z. When an item fits under none of the three
    wraps, the open container is closed and a fresh one is opened. Items are
    never rotated.
    """

    def __init__(self, container: Container, item_gap: float = 0.0) -> None:
        if item_gap < 0:
            raise ValueError("item_gap must be >= 0")
        self.container = container
        self.item_gap = item_gap
        self.container_index = -1
        self.cursor = Cursor()
        self.placements: List[PackedItem] = []

    def _fits(self, item: FlatItemInstance, x: float, y: float, z: float) -> bool:
        return (
            x + item.width <= self.container.width + EPS
            and y + item.depth <= self.container.depth + EPS
            and z + item.height <= self.container.height + EPS
        )

    def _try_current_row(self, item: FlatItemInstance) -> Optional[Tuple[float, float, float]]:
        c = self.cursor
        if self._fits(item, c.x, c.y, c.z):
            return c.x, c.y, c.z
        return None

    def _try_new_row(self, item: FlatItemInstance) -> Optional[Tuple[float, float, float]]:
        c = self.cursor
        y = c.y + c.row_depth + self.item_gap
        if self._fits(item, 0.0, y, c.z):
            c.x, c.y, c.row_depth = 0.0, y, 0.0
            return 0.0, y, c.z
        return None

    def _try_new_layer(self, item: FlatItemInstance) -> Optional[Tuple[float, float, float]]:
        c = self.cursor
        z = c.z + c.layer_height + self.item_gap
        if self._fits(item, 0.0, 0.0, z):
            c.x, c.y, c.z = 0.0, 0.0, z
            c.row_depth, c.layer_height = 0.0, 0.0
            return 0.0, 0.0, z
        return None

    def _open_container(self) -> None:
        self.container_index += 1
        self.cursor = Cursor()
        logger.debug(f"Opened container {self.container_index}")

    def place(self, item: FlatItemInstance) -> PackedItem:
        if not item.fits_in(self.container):
            raise ItemTooLargeError(item, self.container)

        position = None
        if self.container_index >= 0:
            position = (
                self._try_current_row(item)
                or self._try_new_row(item)
                or self._try_new_layer(item)
            )
        if position is None:
            self._open_container()
            position = (0.0, 0.0, 0.0)

        x, y, z = position
        c = self.cursor
        c.x = x + item.width + self.item_gap
        c.row_depth = max(c.row_depth, item.depth)
        c.layer_height = max(c.layer_height, item.height)

        packed = PackedItem(item=item, container_index=self.container_index, x=x, y=y, z=z)
        self.placements.append(packed)
        return packed

    def pack(self, items: Sequence[FlatItemInstance]) -> PackingResult:
        for item in items:
            self.place(item)
        metrics = compute_fill_metrics(self.placements, self.container)
        logger.info(
            f"Packed {len(self.placements)} items into {metrics.container_count} container(s) "
            f"of {self.container.width} x {self.container.depth} x {self.container.height} in, "
            f"last container {metrics.last_container_fill_percent:.2f}% full"
        )
        return PackingResult(
            packed_items=tuple(self.placements),
            container_count=metrics.container_count,
            last_container_fill_percent=metrics.last_container_fill_percent,
        )


def pack(
    instances: Sequence[FlatItemInstance],
    container: Container,
    item_gap: float = 0.0,
) -> PackingResult:
    """Place every instance in order; raises ItemTooLargeError for an instance that cannot fit an empty container."""
    return ShelfPacker(container, item_gap=item_gap).pack(instances)


def find_oversized(
    instances: Sequence[FlatItemInstance], container: Container
) -> List[FlatItemInstance]:
    return [item for item in instances if not item.fits_in(container)]
