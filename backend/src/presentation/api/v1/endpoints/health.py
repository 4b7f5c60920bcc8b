"""
Health Endpoint
"""
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from core.config import settings
from core.database import health_check


router = APIRouter()


@router.get("/health")
async def health():
    """Service and database health"""
    database_ok = await health_check()
    return JSONResponse(
        status_code=status.HTTP_200_OK if database_ok else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "status": "healthy" if database_ok else "degraded",
            "service": settings.APP_NAME,
            "environment": settings.ENVIRONMENT,
            "database": "up" if database_ok else "down",
        },
    )
