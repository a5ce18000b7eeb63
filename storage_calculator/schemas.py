from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .model import CalculatorResult, CatalogItem, CustomItem, SelectionState
from .model.scene import to_scene_dimensions, to_scene_position

# Per catalog id; every unit becomes its own placed instance.
MAX_ITEM_QUANTITY = 1000


def to_camel(string: str) -> str:
    """Helper function to convert snake_case to camelCase"""
    parts = string.split("_")
    return parts[0] + "".join(word.capitalize() for word in parts[1:])


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ----Catalog-----
class CatalogItemOut(CamelModel):
    id: str
    name: str
    category: str
    width: float
    depth: float
    height: float
    color: str
    cubic_feet: float

    @classmethod
    def from_item(cls, item: CatalogItem) -> "CatalogItemOut":
        return cls(
            id=item.id,
            name=item.name,
            category=item.category,
            width=item.width,
            depth=item.depth,
            height=item.height,
            color=item.color,
            cubic_feet=item.cubic_feet,
        )


class CategoryOut(CamelModel):
    id: str
    name: str


class CatalogResponse(CamelModel):
    items: List[CatalogItemOut]
    total_count: int


# ----Selection-----
class SelectedItemIn(CamelModel):
    item_id: str
    quantity: int = Field(ge=0, le=MAX_ITEM_QUANTITY)


class CustomItemIn(CamelModel):
    id: str
    name: str = "Custom item"
    width: float = Field(gt=0)
    depth: float = Field(gt=0)
    height: float = Field(gt=0)
    color: Optional[str] = None

    def to_entity(self) -> CustomItem:
        if self.color:
            return CustomItem(self.id, self.name, self.width, self.depth, self.height, self.color)
        return CustomItem(self.id, self.name, self.width, self.depth, self.height)


class EstimateRequest(CamelModel):
    items: List[SelectedItemIn] = []
    custom_items: List[CustomItemIn] = []
    exclude_oversized: bool = False

    def to_selection(self) -> SelectionState:
        state = SelectionState()
        for entry in self.items:
            state = state.add_item(entry.item_id, entry.quantity)
        for custom in self.custom_items:
            state = state.add_custom_item(custom.to_entity())
        return state


# ----Result-----
class Vector3(CamelModel):
    x: float
    y: float
    z: float


class Dimensions(CamelModel):
    width: float
    depth: float
    height: float


class PackedItemOut(CamelModel):
    item_id: str
    instance_index: int
    is_custom: bool
    container_index: int
    position: Vector3
    dimensions: Dimensions
    color: str
    scene_position: Vector3
    scene_dimensions: Dimensions


class SkippedItemOut(CamelModel):
    item_id: str
    quantity: int
    reason: str


class ExcludedItemOut(CamelModel):
    item_id: str
    instance_index: int
    is_custom: bool
    source_key: str


class ContainerOut(CamelModel):
    width: float
    depth: float
    height: float
    cubic_feet: float


class EstimateResponse(CamelModel):
    total_volume_cubic_feet: float
    units_recommended: int
    container_count: int
    last_container_fill_percent: float
    container: ContainerOut
    packed_items: List[PackedItemOut]
    skipped: List[SkippedItemOut] = []
    excluded: List[ExcludedItemOut] = []

    @classmethod
    def from_result(cls, result: CalculatorResult) -> "EstimateResponse":
        container = result.container
        packing = result.packing
        packed_items = []
        for p in packing.packed_items:
            packed_items.append(
                PackedItemOut(
                    item_id=p.item.item_id,
                    instance_index=p.item.instance_index,
                    is_custom=p.item.is_custom,
                    container_index=p.container_index,
                    position=Vector3(x=p.x, y=p.y, z=p.z),
                    dimensions=Dimensions(width=p.item.width, depth=p.item.depth, height=p.item.height),
                    color=p.item.color,
                    scene_position=Vector3(**to_scene_position(p, container)),
                    scene_dimensions=Dimensions(**to_scene_dimensions(p)),
                )
            )
        return cls(
            total_volume_cubic_feet=result.total_volume_cubic_feet,
            units_recommended=result.units_recommended,
            container_count=packing.container_count,
            last_container_fill_percent=packing.last_container_fill_percent,
            container=ContainerOut(
                width=container.width,
                depth=container.depth,
                height=container.height,
                cubic_feet=container.cubic_feet,
            ),
            packed_items=packed_items,
            skipped=[SkippedItemOut(item_id=s.item_id, quantity=s.quantity, reason=s.reason) for s in result.skipped],
            excluded=[
                ExcludedItemOut(
                    item_id=e.item_id,
                    instance_index=e.instance_index,
                    is_custom=e.is_custom,
                    source_key=e.source_key,
                )
                for e in result.excluded
            ],
        )
