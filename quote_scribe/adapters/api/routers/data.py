# quote_scribe\adapters\api\routers\data.py
from typing import Any, Dict
from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse
from dependency_injector.wiring import inject, Provide

from quote_scribe.core.domain.models import Snapshot, StoreStats
from quote_scribe.core.use_cases.data import ImportSnapshot, ResetStore
from quote_scribe.services.entity_store import EntityStore
from quote_scribe.shared.container import Container

router = APIRouter(prefix="/data", tags=["Data"])


@router.get("/stats", response_model=StoreStats)
@inject
async def get_stats(
    store: EntityStore = Depends(Provide[Container.entity_store]),
):
    return store.stats()


@router.get("/export", response_model=Snapshot)
@inject
async def export_data(
    store: EntityStore = Depends(Provide[Container.entity_store]),
):
    """Backup of all collections. The API key is reported only as a mask."""
    return store.export_snapshot()


@router.post("/import")
@inject
async def import_data(
    data: Dict[str, Any],
    use_case: ImportSnapshot = Depends(Provide[Container.import_snapshot_use_case]),
):
    """
    Replaces every collection present (and not null) in the body.
    Collections are imported independently: on a partial failure the
    response is 400 and lists what was and was not imported.
    """
    result = use_case.execute(data)
    body = {"ok": result.ok, "imported": result.imported, "failed": result.failed}
    code = status.HTTP_200_OK if result.ok else status.HTTP_400_BAD_REQUEST
    return JSONResponse(status_code=code, content=body)


@router.post("/reset", status_code=status.HTTP_204_NO_CONTENT)
@inject
async def reset_data(
    use_case: ResetStore = Depends(Provide[Container.reset_store_use_case]),
):
    use_case.execute()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
