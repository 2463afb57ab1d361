"""Health check endpoint."""

from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from api.models.responses import HealthResponse
from core.config import API_VERSION
from core.database import database_available

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint for monitoring.

    Returns 200 if healthy, 503 if the request log database is missing.
    """
    available = database_available()
    timestamp = datetime.now(timezone.utc).isoformat()

    if available:
        return HealthResponse(
            status="healthy",
            version=API_VERSION,
            database_available=True,
            timestamp=timestamp,
        )
    else:
        return JSONResponse(
            status_code=503,
            content=HealthResponse(
                status="unhealthy",
                version=API_VERSION,
                database_available=False,
                timestamp=timestamp,
                error="Request log database not found",
            ).model_dump(),
        )
