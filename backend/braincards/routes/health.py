"""
Brain Cards Backend — Health Check Route
=========================================

What:  GET /api/health for process supervisors and smoke tests.
How:   Loads the category store once. A store that cannot be read means
       every category endpoint would fail, so the service reports itself
       unhealthy (HTTP 503).
"""

import logging
import time

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from braincards import __version__
from braincards.config import settings
from braincards.exceptions import StorageError
from braincards.schemas.category import HealthResponse
from braincards.services.category_service import CategoryService, get_category_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix=settings.api_prefix, tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Category store unreadable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(
    service: CategoryService = Depends(get_category_service),
) -> JSONResponse:
    store_status = "available"
    overall = "healthy"

    try:
        await service.store.load()
    except StorageError as e:
        store_status = "unavailable"
        overall = "unhealthy"
        logger.warning("Health check: category store unreadable: %s", e.message)

    body = HealthResponse(
        status=overall,
        version=__version__,
        store=store_status,
        uptime_seconds=round(time.time() - _start_time, 2),
        detail=service.store.describe(),
    )
    return JSONResponse(
        status_code=200 if overall == "healthy" else 503,
        content=body.model_dump(),
    )
