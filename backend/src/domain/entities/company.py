"""
Company Domain Entity
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID


@dataclass(frozen=True)
class CompanySummary:
    """Company fields exposed next to a job application"""

    id: UUID
    name: str
    industry: Optional[str] = None
    location: Optional[str] = None
    logo_url: Optional[str] = None


@dataclass(frozen=True)
class CompanyListing:
    """Company directory entry with the current user's application count"""

    id: UUID
    name: str
    industry: Optional[str] = None
    location: Optional[str] = None
    website: Optional[str] = None
    size: Optional[str] = None
    logo_url: Optional[str] = None
    created_at: Optional[datetime] = None
    applications_count: int = 0
