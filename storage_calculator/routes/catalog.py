from fastapi import APIRouter, Depends, HTTPException

from .. import schemas
from ..dependencies import catalog_dependency
from ..model import CATEGORIES, Catalog

router = APIRouter(tags=["Catalog"])


@router.get("/", response_model=schemas.CatalogResponse)
def read_catalog(category: str = None, catalog: Catalog = Depends(catalog_dependency)):
    if category:
        items = catalog.get_items_by_category(category)
    else:
        items = list(catalog.values())
    return schemas.CatalogResponse(
        items=[schemas.CatalogItemOut.from_item(item) for item in items],
        total_count=len(items),
    )


@router.get("/categories", response_model=list[schemas.CategoryOut])
def read_categories(catalog: Catalog = Depends(catalog_dependency)):
    names = dict(CATEGORIES)
    return [
        schemas.CategoryOut(id=category, name=names.get(category, category.title()))
        for category in catalog.categories
    ]


@router.get("/items/{item_id}", response_model=schemas.CatalogItemOut)
def read_catalog_item(item_id: str, catalog: Catalog = Depends(catalog_dependency)):
    item = catalog.get_item_by_id(item_id)
    if item is None:
        raise HTTPException(status_code=404, detail=f"Catalog item {item_id} not found")
    return schemas.CatalogItemOut.from_item(item)
