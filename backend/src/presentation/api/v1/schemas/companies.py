"""
Company Schemas
Response envelopes for the company directory (camelCase on the wire)
"""
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from .common import CamelModel, OffsetPaginationResponse, PaginationResponse


class CompanyListItemResponse(CamelModel):
    id: UUID
    name: str
    industry: Optional[str] = None
    location: Optional[str] = None
    website: Optional[str] = None
    size: Optional[str] = None
    logo_url: Optional[str] = None
    created_at: Optional[datetime] = None
    applications_count: int = 0


class CompanyListData(CamelModel):
    companies: List[CompanyListItemResponse]
    pagination: PaginationResponse


class CompanyListResponse(CamelModel):
    """GET /companies"""
    success: bool = True
    data: CompanyListData


class CompanySuggestionResponse(CamelModel):
    id: UUID
    name: str
    industry: Optional[str] = None
    logo_url: Optional[str] = None


class CompanySuggestionsData(CamelModel):
    suggestions: List[CompanySuggestionResponse]
    pagination: OffsetPaginationResponse


class CompanySuggestionsResponse(CamelModel):
    """GET /companies/suggestions"""
    success: bool = True
    data: CompanySuggestionsData
