"""
API V1 Endpoints Package
Exports routers used by main app
"""
from .companies import router as companies_router
from .health import router as health_router
from .job_applications import router as job_applications_router

__all__ = [
    "companies_router",
    "health_router",
    "job_applications_router",
]
