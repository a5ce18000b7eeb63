from fastapi import APIRouter, Depends, HTTPException

from .. import schemas
from ..config import Settings
from ..dependencies import catalog_dependency, settings_dependency
from ..logger import logger
from ..model import Catalog, ItemTooLargeError, calculate

router = APIRouter(tags=["Calculator"])


@router.post("/estimate", response_model=schemas.EstimateResponse)
def estimate(
    request: schemas.EstimateRequest,
    catalog: Catalog = Depends(catalog_dependency),
    settings: Settings = Depends(settings_dependency),
):
    try:
        selection = request.to_selection()
        result = calculate(
            selection,
            catalog,
            settings.container,
            fill_factor=settings.fill_factor,
            item_gap=settings.item_gap,
            exclude_oversized=request.exclude_oversized,
        )
    except ItemTooLargeError as e:
        logger.warning(f"Rejected estimate: {e}")
        raise HTTPException(
            status_code=422,
            detail=[{"msg": str(e), "sourceKey": e.instance.source_key, "axes": e.axes}],
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=[{"msg": str(e)}])
    return schemas.EstimateResponse.from_result(result)
