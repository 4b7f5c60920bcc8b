"""
Job Application Schemas
Response envelopes for the job application read API (camelCase on the wire)
"""
from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any, List, Optional
from uuid import UUID

from pydantic import Field, PlainSerializer

from domain.enums import ApplicationStatus, EmploymentType, JobLevel
from .common import CamelModel, PaginationResponse


# Decimal in Python, a JSON number on the wire
Amount = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CompanyOption(CamelModel):
    id: UUID
    name: str


class CompanyBrief(CompanyOption):
    industry: Optional[str] = None
    location: Optional[str] = None
    logo_url: Optional[str] = None


class JobApplicationResponse(CamelModel):
    """Job application with its company and note count"""

    id: UUID
    company_id: UUID
    status: ApplicationStatus
    job_title: str
    job_level: Optional[JobLevel] = None
    employment_type: Optional[EmploymentType] = None
    priority: int
    salary_min: Optional[Amount] = None
    salary_max: Optional[Amount] = None
    currency: str
    location: Optional[str] = None
    is_remote: bool
    is_favorite: bool
    source: Optional[str] = None
    job_url: Optional[str] = None
    applied_date: datetime
    response_deadline: Optional[datetime] = None
    personal_notes: Optional[str] = None
    job_description: Optional[str] = None
    requirements: Optional[str] = None
    company: Optional[CompanyBrief] = None
    notes_count: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class NoteResponse(CamelModel):
    id: UUID
    title: Optional[str] = None
    content: str
    note_date: datetime


class JobApplicationWithNotesResponse(JobApplicationResponse):
    """Single application: list fields plus its notes, newest first"""

    notes: List[NoteResponse] = Field(default_factory=list)


class JobApplicationDetailData(CamelModel):
    job_application: JobApplicationWithNotesResponse


class JobApplicationDetailResponse(CamelModel):
    """GET /job-applications/{id}"""
    success: bool = True
    data: JobApplicationDetailData


class JobApplicationListData(CamelModel):
    job_applications: List[JobApplicationResponse]
    pagination: PaginationResponse


class JobApplicationListResponse(CamelModel):
    """GET /job-applications"""
    success: bool = True
    data: JobApplicationListData


class OptionResponse(CamelModel):
    value: Any
    label: str


class FilterOptionsData(CamelModel):
    """Disabled categories are left out of the response"""

    companies: Optional[List[CompanyOption]] = None
    statuses: Optional[List[ApplicationStatus]] = None
    job_levels: Optional[List[JobLevel]] = None
    employment_types: Optional[List[EmploymentType]] = None
    sources: Optional[List[str]] = None
    locations: Optional[List[str]] = None
    priorities: List[OptionResponse]
    currencies: List[str]
    search_fields: List[OptionResponse]


class FilterOptionsResponse(CamelModel):
    """GET /job-applications/filter-options"""
    success: bool = True
    data: FilterOptionsData


class StatusCountResponse(CamelModel):
    status: ApplicationStatus
    count: int


class PriorityCountResponse(CamelModel):
    priority: int
    label: str
    count: int


class RecentApplicationResponse(CamelModel):
    id: UUID
    job_title: str
    status: ApplicationStatus
    priority: int
    created_at: datetime
    company: Optional[CompanyOption] = None


class StatsData(CamelModel):
    total_applications: int
    status_breakdown: List[StatusCountResponse]
    priority_breakdown: List[PriorityCountResponse]
    recent_applications: List[RecentApplicationResponse]
    success_rate: float = Field(..., description="Percent of applications at OFFER or ACCEPTED")


class StatsResponse(CamelModel):
    """GET /job-applications/stats"""
    success: bool = True
    data: StatsData
