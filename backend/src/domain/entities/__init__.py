"""Domain Entities - Core business objects"""

from .company import CompanyListing, CompanySummary
from .job_application import JobApplication, ApplicationSummary
from .note import Note

__all__ = ["CompanyListing", "CompanySummary", "JobApplication", "ApplicationSummary", "Note"]
