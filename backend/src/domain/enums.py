"""
Domain Enums
Business enumerations for job applications and their query vocabulary
"""
from enum import Enum
from typing import Dict, FrozenSet, List


class ApplicationStatus(str, Enum):
    """Job application pipeline status"""
    APPLIED = "APPLIED"
    PHONE_SCREEN = "PHONE_SCREEN"
    FINAL_INTERVIEW = "FINAL_INTERVIEW"
    TECHNICAL_TEST = "TECHNICAL_TEST"
    OFFER = "OFFER"
    NEGOTIATION = "NEGOTIATION"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"
    ON_HOLD = "ON_HOLD"


class JobLevel(str, Enum):
    """Seniority of the advertised position"""
    ENTRY = "ENTRY"
    MID = "MID"
    SENIOR = "SENIOR"
    LEAD = "LEAD"
    MANAGER = "MANAGER"
    DIRECTOR = "DIRECTOR"


class EmploymentType(str, Enum):
    """Contract type of the advertised position"""
    FULL_TIME = "FULL_TIME"
    PART_TIME = "PART_TIME"
    CONTRACT = "CONTRACT"
    FREELANCE = "FREELANCE"
    INTERNSHIP = "INTERNSHIP"


class Priority(int, Enum):
    """Application priority (1 is the most important)"""
    HIGH = 1
    MEDIUM = 2
    LOW = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()


class SearchField(str, Enum):
    """Fields the free-text search can look into"""
    JOB_TITLE = "jobTitle"
    COMPANY_NAME = "companyName"
    PERSONAL_NOTES = "personalNotes"
    JOB_DESCRIPTION = "jobDescription"
    REQUIREMENTS = "requirements"
    LOCATION = "location"


class SortField(str, Enum):
    """Sortable keys accepted by the listing endpoint"""
    CREATED_AT = "createdAt"
    APPLIED_DATE = "appliedDate"
    JOB_TITLE = "jobTitle"
    PRIORITY = "priority"
    SALARY_MIN = "salaryMin"
    SALARY_MAX = "salaryMax"
    COMPANY_NAME = "companyName"


class SortDirection(str, Enum):
    """Sort direction"""
    ASC = "asc"
    DESC = "desc"


DEFAULT_SEARCH_FIELDS: List[SearchField] = [
    SearchField.JOB_TITLE,
    SearchField.COMPANY_NAME,
    SearchField.PERSONAL_NOTES,
]

SEARCH_FIELD_LABELS: Dict[SearchField, str] = {
    SearchField.JOB_TITLE: "Job Title",
    SearchField.COMPANY_NAME: "Company Name",
    SearchField.PERSONAL_NOTES: "Personal Notes",
    SearchField.JOB_DESCRIPTION: "Job Description",
    SearchField.REQUIREMENTS: "Requirements",
    SearchField.LOCATION: "Location",
}

# Statuses counted as a successful outcome in the stats success rate
SUCCESSFUL_STATUSES: FrozenSet[ApplicationStatus] = frozenset({
    ApplicationStatus.OFFER,
    ApplicationStatus.ACCEPTED,
})


class Projection(str, Enum):
    """Shape of the rows a store returns from find_many"""
    DETAIL = "detail"  # full row, company summary and notes count
    SUMMARY = "summary"  # id, title, status, priority, created_at, company name


class CompanySortField(str, Enum):
    """Sortable keys of the company directory"""
    NAME = "name"
    INDUSTRY = "industry"
    LOCATION = "location"
    CREATED_AT = "createdAt"
