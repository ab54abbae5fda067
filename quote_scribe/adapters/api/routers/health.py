# quote_scribe\adapters\api\routers\health.py
from fastapi import APIRouter, Depends, status, Response
from dependency_injector.wiring import inject, Provide
from typing import Dict
import structlog

from quote_scribe.services.entity_store import EntityStore
from quote_scribe.shared.container import Container

logger = structlog.get_logger()

router = APIRouter(prefix="/health", tags=["System"])

@router.get("/live", status_code=status.HTTP_200_OK)
async def liveness_probe():
    """
    Liveness Probe.
    Returns 200 OK if the service is operational.
    """
    return {"status": "ok", "service": "quote-scribe"}

@router.get("/ready", status_code=status.HTTP_200_OK)
@inject
async def readiness_probe(
    response: Response,
    store: EntityStore = Depends(Provide[Container.entity_store]),
) -> Dict[str, str]:
    """
    Readiness Probe.
    Checks that the storage medium is reachable and writable.
    Returns 503 Service Unavailable when it is not.
    """
    health_status = {"storage": "up" if store.health_check() else "down"}

    if health_status["storage"] != "up":
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        logger.warning("readiness_probe_failed", status=health_status)

    return health_status
