"""
Job Application Domain Entity
Immutable job application business object
"""
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from ..enums import ApplicationStatus, EmploymentType, JobLevel, Priority
from .company import CompanySummary


@dataclass(frozen=True)
class JobApplication:
    """Job application domain entity - immutable"""

    id: UUID
    user_id: UUID
    company_id: UUID

    status: ApplicationStatus
    job_title: str
    applied_date: datetime
    priority: int = Priority.LOW.value
    currency: str = "IDR"

    job_level: Optional[JobLevel] = None
    employment_type: Optional[EmploymentType] = None

    # Salary band (same currency)
    salary_min: Optional[Decimal] = None
    salary_max: Optional[Decimal] = None

    location: Optional[str] = None
    is_remote: bool = False
    is_favorite: bool = False
    source: Optional[str] = None
    job_url: Optional[str] = None

    response_deadline: Optional[datetime] = None

    personal_notes: Optional[str] = None
    job_description: Optional[str] = None
    requirements: Optional[str] = None

    # Related data loaded alongside the row
    company: Optional[CompanySummary] = None
    notes_count: int = 0

    # Timestamps
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate application data"""
        if not self.job_title or len(self.job_title.strip()) == 0:
            raise ValueError("Job title cannot be empty")
        if self.priority not in {p.value for p in Priority}:
            raise ValueError(f"Priority must be 1-3, got {self.priority}")

    def __str__(self) -> str:
        return f"JobApplication({self.id}, {self.job_title}, status={self.status.value})"


@dataclass(frozen=True)
class ApplicationSummary:
    """Minimal projection used for "recent applications" lists"""

    id: UUID
    job_title: str
    status: ApplicationStatus
    priority: int
    created_at: datetime
    company: Optional[CompanySummary] = None
