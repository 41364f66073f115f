"""Health check endpoints: liveness (no dependencies) and database readiness."""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text

from taskmanager.domain.exceptions import StorageUnavailableException
from taskmanager.infrastructure.persistence.database import (
    get_db,
    translate_storage_errors,
)
from taskmanager.schemas.health import HealthResponse, ReadinessErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get(
    "/ready",
    response_model=HealthResponse,
    responses={503: {"description": "Database unreachable", "model": ReadinessErrorResponse}},
)
async def readiness_check() -> HealthResponse | JSONResponse:
    """Return 200 if the database answers a trivial query; 503 otherwise."""
    try:
        async for session in get_db():
            with translate_storage_errors():
                await session.execute(text("SELECT 1"))
    except StorageUnavailableException as e:
        logger.warning("Readiness check failed: %s", e.details.get("reason"))
        return JSONResponse(
            status_code=503,
            content=ReadinessErrorResponse(message=e.message).model_dump(),
        )
    return HealthResponse()
