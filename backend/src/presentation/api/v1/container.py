"""
Dependency Injection Container
Manages service and store instances
"""
from fastapi import Depends

from core.config import settings
from core.database import AsyncSessionLocal
from application.repositories.interfaces import ICompanyStore, IJobApplicationStore
from application.services.companies import CompanyQueryService
from application.services.job_applications import JobApplicationQueryService
from infrastructure.persistence.repositories.company import SQLAlchemyCompanyStore
from infrastructure.persistence.repositories.job_application import SQLAlchemyJobApplicationStore
from infrastructure.security.jwt_service import JwtService


# Singleton instances
_jwt_service: JwtService | None = None
_job_application_store: IJobApplicationStore | None = None
_company_store: ICompanyStore | None = None


def get_jwt_service() -> JwtService:
    """Get JWT service instance (singleton)"""
    global _jwt_service
    if _jwt_service is None:
        _jwt_service = JwtService()
    return _jwt_service


def get_job_application_store() -> IJobApplicationStore:
    """Get job application store (singleton; opens a session per query)"""
    global _job_application_store
    if _job_application_store is None:
        _job_application_store = SQLAlchemyJobApplicationStore(AsyncSessionLocal)
    return _job_application_store


def get_query_service(
    store: IJobApplicationStore = Depends(get_job_application_store)
) -> JobApplicationQueryService:
    """Get job application query service (per-request)"""
    return JobApplicationQueryService(
        store,
        currencies=settings.SUPPORTED_CURRENCIES,
        recent_limit=settings.RECENT_APPLICATIONS_LIMIT,
    )


def get_company_store() -> ICompanyStore:
    """Get company store (singleton; opens a session per query)"""
    global _company_store
    if _company_store is None:
        _company_store = SQLAlchemyCompanyStore(AsyncSessionLocal)
    return _company_store


def get_company_service(
    store: ICompanyStore = Depends(get_company_store)
) -> CompanyQueryService:
    """Get company query service (per-request)"""
    return CompanyQueryService(
        store,
        min_suggestion_length=settings.COMPANY_SUGGESTION_MIN_LENGTH,
    )
