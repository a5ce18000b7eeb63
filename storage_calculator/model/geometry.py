from __future__ import annotations

from typing import List, Sequence

import numpy as np
import numba

from .entities import EPS, Container, PackedItem, PackingResult


@numba.njit(cache=True)
def check_bounds_within_container(x: float, y: float, z: float,
                                   dx: float, dy: float, dz: float,
                                   xmax: float, ymax: float, zmax: float,
                                   epsilon: float) -> bool:
    """Check if a box at (x,y,z) with dimensions (dx,dy,dz) lies inside [0, max] on every axis."""
    if x < -epsilon or y < -epsilon or z < -epsilon:
        return False
    if x + dx > xmax + epsilon:
        return False
    if y + dy > ymax + epsilon:
        return False
    if z + dz > zmax + epsilon:
        return False
    return True


@numba.njit(cache=True)
def boxes_overlap(a: np.ndarray, b: np.ndarray, epsilon: float) -> bool:
    """Rows are [x, y, z, dx, dy, dz]; touching faces do not count as overlap."""
    return (
        a[0] < b[0] + b[3] - epsilon
        and a[0] + a[3] > b[0] + epsilon
        and a[1] < b[1] + b[4] - epsilon
        and a[1] + a[4] > b[1] + epsilon
        and a[2] < b[2] + b[5] - epsilon
        and a[2] + a[5] > b[2] + epsilon
    )


@numba.njit(cache=True)
def find_overlapping_pairs_numba(boxes: np.ndarray, epsilon: float) -> np.ndarray:
    n = boxes.shape[0]
    pairs = np.empty((max(n * (n - 1) // 2, 1), 2), dtype=np.int64)
    count = 0
    for i in range(n):
        for j in range(i + 1, n):
            if boxes_overlap(boxes[i], boxes[j], epsilon):
                pairs[count, 0] = i
                pairs[count, 1] = j
                count += 1
    return pairs[:count]


def placement_array(packed: Sequence[PackedItem]) -> np.ndarray:
    data = np.empty((len(packed), 6), dtype=np.float64)
    for row, p in enumerate(packed):
        data[row] = (p.x, p.y, p.z, *p.dims)
    return data


def verify_packing(result: PackingResult, container: Container) -> List[str]:
    """
    Check containment and non-overlap of every packed item.

    Returns human-readable violations; an empty list means the layout is sound.
    """
    violations: List[str] = []
    by_container = {}
    for p in result.packed_items:
        by_container.setdefault(p.container_index, []).append(p)

    for index in sorted(by_container):
        packed = by_container[index]
        data = placement_array(packed)
        for row, p in enumerate(packed):
            x, y, z, dx, dy, dz = data[row]
            if not check_bounds_within_container(
                x, y, z, dx, dy, dz,
                container.width, container.depth, container.height, EPS,
            ):
                violations.append(
                    f"container {index}: {p.item.source_key} at ({x}, {y}, {z}) exceeds container bounds"
                )
        for i, j in find_overlapping_pairs_numba(data, EPS):
            violations.append(
                f"container {index}: {packed[i].item.source_key} overlaps {packed[j].item.source_key}"
            )

    if result.packed_items:
        expected = max(p.container_index for p in result.packed_items) + 1
    else:
        expected = 0
    if result.container_count != expected:
        violations.append(
            f"container_count {result.container_count} does not match highest container index (expected {expected})"
        )
    return violations
