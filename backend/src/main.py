"""Main FastAPI Application

Wires middleware, global exception handlers and the API routers from
`presentation`.

Run locally for development with:

    uvicorn main:app --reload

Keep application logic in `application`, `core` and `infrastructure`;
this module only assembles the app.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from core.config import settings
from core.database import init_db, close_db
from core.logging_config import configure_logging
from core.exceptions import (
    DomainException,
    AuthenticationException,
    ValidationException,
    RepositoryException,
    ResourceNotFoundException,
)
from presentation.api.v1.endpoints import companies_router, health_router, job_applications_router


configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    # Startup
    logger.info(f"🚀 Starting {settings.APP_NAME} ({settings.ENVIRONMENT})...")

    await init_db()
    logger.info("✅ Database initialized")

    yield

    # Shutdown
    logger.info("👋 Shutting down gracefully...")
    await close_db()
    logger.info("✅ Database connections closed")


# Initialize FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    description="Job application tracker: filtering, facets, dashboard stats and company directory",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None
)


# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_response(status_code: int, message: str, fields=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": {"message": message, "fields": fields or {}}}
    )


# Global Exception Handler
@app.exception_handler(DomainException)
async def domain_exception_handler(request: Request, exc: DomainException):
    """Handle domain-level exceptions"""
    if isinstance(exc, ValidationException):
        logger.warning(f"Validation failed on {request.url.path}: {exc.errors}")
        return _error_response(status.HTTP_400_BAD_REQUEST, exc.message, exc.errors)

    if isinstance(exc, RepositoryException):
        logger.error(f"Repository failure on {request.url.path}: {str(exc)}")
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    logger.warning(f"Domain exception: {str(exc)}")

    if isinstance(exc, AuthenticationException):
        status_code = status.HTTP_401_UNAUTHORIZED
    elif isinstance(exc, ResourceNotFoundException):
        status_code = status.HTTP_404_NOT_FOUND
    else:
        status_code = status.HTTP_400_BAD_REQUEST

    return _error_response(status_code, str(exc))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Path and header validation failures share the 400 envelope"""
    fields = {}
    for error in exc.errors():
        key = str(error["loc"][-1]) if error["loc"] else "request"
        fields.setdefault(key, error["msg"])

    logger.warning(f"Validation failed on {request.url.path}: {fields}")
    return _error_response(status.HTTP_400_BAD_REQUEST, "Invalid request parameters", fields)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch-all exception handler"""
    logger.opt(exception=exc).error(f"Unhandled exception: {str(exc)}")
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


# Include API routes
app.include_router(
    health_router,
    prefix="/api/v1",
    tags=["Health"]
)

app.include_router(
    job_applications_router,
    prefix="/api/v1",
    tags=["Job Applications"]
)

app.include_router(
    companies_router,
    prefix="/api/v1",
    tags=["Companies"]
)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=settings.DEBUG)
