"""
Conversion of packed positions into a renderer's scene frame.

The scene is Y-up: scene x follows container width, scene y follows height and
scene z follows depth. Containers are laid out side by side along scene x with
a fixed gap, each centered on its own footprint, and everything is scaled so a
unit is a manageable size on screen.
"""

from __future__ import annotations

from typing import Dict

from .entities import Container, PackedItem

CONTAINER_GAP = 20.0
DEFAULT_SCALE = 0.01


def _container_offset(container: Container, container_index: int) -> float:
    return container_index * (container.width + CONTAINER_GAP)


def to_scene_position(
    packed: PackedItem, container: Container, scale: float = DEFAULT_SCALE
) -> Dict[str, float]:
    """Center point of a packed item in scene units."""
    offset = _container_offset(container, packed.container_index)
    return {
        "x": (packed.x + packed.item.width / 2 - container.width / 2 + offset) * scale,
        "y": (packed.z + packed.item.height / 2) * scale,
        "z": (packed.y + packed.item.depth / 2 - container.depth / 2) * scale,
    }


def to_scene_dimensions(packed: PackedItem, scale: float = DEFAULT_SCALE) -> Dict[str, float]:
    return {
        "width": packed.item.width * scale,
        "height": packed.item.height * scale,
        "depth": packed.item.depth * scale,
    }


def container_scene_dimensions(container: Container, scale: float = DEFAULT_SCALE) -> Dict[str, float]:
    return {
        "width": container.width * scale,
        "height": container.height * scale,
        "depth": container.depth * scale,
    }


def container_center_position(
    container: Container, container_index: int, scale: float = DEFAULT_SCALE
) -> Dict[str, float]:
    return {
        "x": _container_offset(container, container_index) * scale,
        "y": container.height / 2 * scale,
        "z": 0.0,
    }
