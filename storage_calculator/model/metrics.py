from __future__ import annotations

from math import ceil
from typing import Sequence

from .entities import EPS, Container, FillMetrics, PackedItem

# Share of a unit's raw volume that people realistically fill.
DEFAULT_FILL_FACTOR = 0.85


def compute_fill_metrics(packed_items: Sequence[PackedItem], container: Container) -> FillMetrics:
    """Container count and how full the last container is, as 0-100."""
    if not packed_items:
        return FillMetrics(container_count=0, last_container_fill_percent=0.0)

    container_count = max(p.container_index for p in packed_items) + 1
    last_index = container_count - 1
    last_volume = sum(p.cubic_feet for p in packed_items if p.container_index == last_index)
    percent = min(last_volume / container.cubic_feet * 100.0, 100.0)
    return FillMetrics(container_count=container_count, last_container_fill_percent=percent)


def recommend_units(
    total_volume_cubic_feet: float,
    container: Container,
    fill_factor: float = DEFAULT_FILL_FACTOR,
) -> int:
    """
    Number of units to rent for a given volume.

    Deliberately more conservative than the packed container count: each unit
    is only credited with `fill_factor` of its raw capacity.
    """
    if not 0 < fill_factor < 1:
        raise ValueError(f"fill_factor must be between 0 and 1 (exclusive), got {fill_factor}")
    if total_volume_cubic_feet <= EPS:
        return 0
    usable = container.cubic_feet * fill_factor
    return max(1, ceil(total_volume_cubic_feet / usable - EPS))
