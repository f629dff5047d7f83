"""Health check endpoint."""

import logging
from datetime import datetime, timezone
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.engine import Engine

from api.dependencies import get_db_engine
from utils.config import get_settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health(engine: Engine = Depends(get_db_engine)):
    """Health check endpoint with dependency status.

    Only the database decides overall health; blob storage and job search
    are reported as configured or not.
    """
    health_status = {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        "services": {}
    }

    overall_healthy = True

    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        health_status["services"]["database"] = {
            "status": "healthy",
            "message": "Connection successful"
        }
    except Exception as e:
        logger.warning("Database health check failed", extra={"error": str(e)[:200]})
        health_status["services"]["database"] = {
            "status": "unhealthy",
            "message": "Connection failed"
        }
        overall_healthy = False

    settings = get_settings()
    health_status["services"]["blob_storage"] = {
        "status": "configured" if settings.storage.is_configured else "not configured"
    }
    health_status["services"]["job_search"] = {
        "status": "configured" if settings.jooble_api_key else "not configured"
    }

    if not overall_healthy:
        health_status["status"] = "degraded"

    status_code = status.HTTP_200_OK if overall_healthy else status.HTTP_503_SERVICE_UNAVAILABLE

    return JSONResponse(
        content=health_status,
        status_code=status_code
    )
