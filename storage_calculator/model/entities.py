from __future__ import annotations

from dataclasses import dataclass, field, replace
from math import isfinite
from numbers import Real
from typing import Dict, Iterable, List, Optional, Tuple

CUBIC_INCHES_PER_CUBIC_FOOT = 1728.0
DEFAULT_COLOR = "#9CA3AF"

EPS = 1e-6


class StorageCalculatorError(Exception):
    """Base class for errors raised by the calculator core."""


class InvalidDimensionsError(StorageCalculatorError, ValueError):
    pass


class ItemTooLargeError(StorageCalculatorError, ValueError):
    """An instance exceeds the container on at least one axis and can never be placed."""

    def __init__(self, instance: "FlatItemInstance", container: "Container") -> None:
        self.instance = instance
        self.container = container
        self.axes = instance.overflow_axes(container)
        super().__init__(
            f"Item {instance.source_key} ({instance.width} x {instance.depth} x {instance.height} in) "
            f"does not fit container {container.width} x {container.depth} x {container.height} in "
            f"on axis {', '.join(self.axes)}"
        )


def _check_dims(owner: str, width: float, depth: float, height: float) -> None:
    for name, value in (("width", width), ("depth", depth), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, Real):
            raise InvalidDimensionsError(f"{owner}: {name} must be a number, got {value!r}")
        if not isfinite(value) or value <= 0:
            raise InvalidDimensionsError(f"{owner}: {name} must be a positive number, got {value!r}")


def cubic_feet(width: float, depth: float, height: float) -> float:
    return width * depth * height / CUBIC_INCHES_PER_CUBIC_FOOT


@dataclass(frozen=True)
class CatalogItem:
    id: str
    name: str
    category: str
    width: float
    depth: float
    height: float
    color: str = DEFAULT_COLOR

    def __post_init__(self) -> None:
        _check_dims(f"catalog item {self.id!r}", self.width, self.depth, self.height)

    @property
    def cubic_feet(self) -> float:
        return cubic_feet(self.width, self.depth, self.height)


@dataclass(frozen=True)
class CustomItem:
    """User-authored item; always placed exactly once."""

    id: str
    name: str
    width: float
    depth: float
    height: float
    color: str = DEFAULT_COLOR

    def __post_init__(self) -> None:
        _check_dims(f"custom item {self.id!r}", self.width, self.depth, self.height)

    @property
    def cubic_feet(self) -> float:
        return cubic_feet(self.width, self.depth, self.height)


@dataclass(frozen=True)
class SkippedItem:
    item_id: str
    quantity: int
    reason: str


@dataclass(frozen=True)
class SelectionState:
    """
    Caller-owned snapshot of what the user picked.

    `quantities` is an ordered tuple of (item_id, quantity) pairs; every
    editing helper returns a new state and leaves the receiver untouched.
    """

    quantities: Tuple[Tuple[str, int], ...] = ()
    custom_items: Tuple[CustomItem, ...] = ()

    @classmethod
    def from_mapping(
        cls,
        quantities: Optional[Dict[str, int]] = None,
        custom_items: Iterable[CustomItem] = (),
    ) -> "SelectionState":
        state = cls(custom_items=tuple(custom_items))
        for item_id, qty in (quantities or {}).items():
            state = state.set_quantity(item_id, qty)
        return state

    def quantity_of(self, item_id: str) -> int:
        for key, qty in self.quantities:
            if key == item_id:
                return qty
        return 0

    @property
    def total_quantity(self) -> int:
        return sum(max(qty, 0) for _, qty in self.quantities) + len(self.custom_items)

    @property
    def is_empty(self) -> bool:
        return self.total_quantity == 0

    def set_quantity(self, item_id: str, quantity: int) -> "SelectionState":
        entries = list(self.quantities)
        for index, (key, _) in enumerate(entries):
            if key == item_id:
                if quantity <= 0:
                    del entries[index]
                else:
                    entries[index] = (key, quantity)
                return replace(self, quantities=tuple(entries))
        if quantity > 0:
            entries.append((item_id, quantity))
        return replace(self, quantities=tuple(entries))

    def add_item(self, item_id: str, count: int = 1) -> "SelectionState":
        return self.set_quantity(item_id, self.quantity_of(item_id) + count)

    def remove_item(self, item_id: str, count: int = 1) -> "SelectionState":
        return self.set_quantity(item_id, self.quantity_of(item_id) - count)

    def add_custom_item(self, item: CustomItem) -> "SelectionState":
        if any(existing.id == item.id for existing in self.custom_items):
            raise ValueError(f"custom item {item.id!r} already selected")
        return replace(self, custom_items=self.custom_items + (item,))

    def remove_custom_item(self, custom_id: str) -> "SelectionState":
        return replace(
            self,
            custom_items=tuple(c for c in self.custom_items if c.id != custom_id),
        )

    def clear(self) -> "SelectionState":
        return SelectionState()


@dataclass(frozen=True)
class FlatItemInstance:
    """One physical unit to place."""

    item_id: str
    instance_index: int
    width: float
    depth: float
    height: float
    color: str = DEFAULT_COLOR
    is_custom: bool = False

    @property
    def source_key(self) -> str:
        if self.is_custom:
            return f"custom:{self.item_id}"
        return f"{self.item_id}#{self.instance_index}"

    @property
    def volume(self) -> float:
        return self.width * self.depth * self.height

    @property
    def cubic_feet(self) -> float:
        return cubic_feet(self.width, self.depth, self.height)

    def overflow_axes(self, container: "Container") -> List[str]:
        axes = []
        if self.width > container.width + EPS:
            axes.append("width")
        if self.depth > container.depth + EPS:
            axes.append("depth")
        if self.height > container.height + EPS:
            axes.append("height")
        return axes

    def fits_in(self, container: "Container") -> bool:
        return not self.overflow_axes(container)


@dataclass(frozen=True)
class Container:
    """Fixed-size storage unit interior, dimensions in inches."""

    width: float
    depth: float
    height: float

    def __post_init__(self) -> None:
        _check_dims("container", self.width, self.depth, self.height)

    @property
    def cubic_feet(self) -> float:
        return cubic_feet(self.width, self.depth, self.height)


@dataclass(frozen=True)
class PackedItem:
    item: FlatItemInstance
    container_index: int
    x: float
    y: float
    z: float

    @property
    def dims(self) -> Tuple[float, float, float]:
        return (self.item.width, self.item.depth, self.item.height)

    @property
    def cubic_feet(self) -> float:
        return self.item.cubic_feet


@dataclass(frozen=True)
class PackingResult:
    packed_items: Tuple[PackedItem, ...] = ()
    container_count: int = 0
    last_container_fill_percent: float = 0.0

    @property
    def total_cubic_feet(self) -> float:
        return sum(p.cubic_feet for p in self.packed_items)


@dataclass(frozen=True)
class FillMetrics:
    container_count: int
    last_container_fill_percent: float


@dataclass(frozen=True)
class VolumeEstimate:
    cubic_feet: float
    skipped: Tuple[SkippedItem, ...] = field(default_factory=tuple)
