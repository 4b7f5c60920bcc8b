"""
FilterSpec Normalizer
Turns raw query-string parameters into validated, typed query objects.

Validation is declared on pydantic models; every invalid parameter is
reported together in one ValidationException and unknown keys are
ignored.
"""
from decimal import Decimal
from typing import Annotated, List, Optional, Union
from uuid import UUID

from pydantic import Field, field_validator

from core.config import settings
from domain.enums import (
    ApplicationStatus,
    DEFAULT_SEARCH_FIELDS,
    EmploymentType,
    JobLevel,
    SearchField,
    SortDirection,
    SortField,
)
from domain.value_objects import (
    Bounds,
    FacetSelection,
    FilterSpec,
    JobApplicationQuery,
    PageSpec,
    SortSpec,
    max_page,
)
from ..query_params import (
    Flag,
    Instant,
    QueryParams,
    RawQuery,
    dedupe,
    validate_query,
)


PriorityLevel = Annotated[int, Field(ge=1, le=3)]
Amount = Annotated[Decimal, Field(ge=0)]


class JobApplicationFilterParams(QueryParams):
    """Filter parameters of the listing endpoint.

    Multi-valued filters keep their shape: a single value means equality,
    a list (repeated key or ``key[]=``) means membership.
    """

    status: Optional[Union[ApplicationStatus, List[ApplicationStatus]]] = None
    priority: Optional[Union[PriorityLevel, List[PriorityLevel]]] = None
    job_level: Optional[Union[JobLevel, List[JobLevel]]] = None
    employment_type: Optional[Union[EmploymentType, List[EmploymentType]]] = None
    company: Optional[UUID] = None

    location: Optional[str] = None
    source: Optional[str] = None
    currency: Optional[str] = None
    is_remote: Flag = None
    is_favorite: Flag = None

    applied_date_from: Instant = None
    applied_date_to: Instant = None
    response_deadline_from: Instant = None
    response_deadline_to: Instant = None
    salary_min: Optional[Amount] = None
    salary_max: Optional[Amount] = None

    has_notes: Flag = None
    has_deadline: Flag = None
    is_overdue: Flag = None

    search: Optional[str] = None
    search_fields: Optional[List[SearchField]] = None

    @field_validator("search_fields", mode="before")
    @classmethod
    def drop_blank_search_fields(cls, v):
        items = v if isinstance(v, list) else [v]
        return [item for item in items if not (isinstance(item, str) and not item.strip())]

    @field_validator("status", "priority", "job_level", "employment_type", "search_fields")
    @classmethod
    def drop_repeats(cls, v):
        return dedupe(v)

    def to_filter_spec(self, user_id: UUID) -> FilterSpec:
        return FilterSpec(
            user_id=user_id,
            status=self.status,
            priority=self.priority,
            job_level=self.job_level,
            employment_type=self.employment_type,
            company_id=self.company,
            location=self.location,
            source=self.source,
            currency=self.currency,
            is_remote=self.is_remote,
            is_favorite=self.is_favorite,
            applied_date=Bounds(self.applied_date_from, self.applied_date_to),
            response_deadline=Bounds(self.response_deadline_from, self.response_deadline_to),
            salary=Bounds(self.salary_min, self.salary_max),
            has_notes=self.has_notes,
            has_deadline=self.has_deadline,
            is_overdue=self.is_overdue,
            search=self.search,
            search_fields=tuple(self.search_fields or DEFAULT_SEARCH_FIELDS),
        )


class JobApplicationListParams(JobApplicationFilterParams):
    """Filters plus sort and page; limit is rejected above the ceiling, never clamped"""

    page: int = Field(1, ge=1, le=max_page(settings.PAGINATION_MAX_LIMIT))
    limit: int = Field(
        settings.PAGINATION_DEFAULT_LIMIT, ge=1, le=settings.PAGINATION_MAX_LIMIT
    )
    sort_by: SortField = SortField.CREATED_AT
    sort_order: SortDirection = SortDirection.DESC


class FacetSelectionParams(QueryParams):
    include_companies: Flag = True
    include_statuses: Flag = True
    include_job_levels: Flag = True
    include_employment_types: Flag = True
    include_sources: Flag = True
    include_locations: Flag = True


def normalize_filters(raw: RawQuery, user_id: UUID) -> FilterSpec:
    """
    Build a FilterSpec from raw query parameters

    Args:
        raw: Query parameters (see collect_query_params)
        user_id: Authenticated user; always becomes an ownership filter

    Returns:
        FilterSpec

    Raises:
        ValidationException: listing every malformed parameter
    """
    return validate_query(JobApplicationFilterParams, raw).to_filter_spec(user_id)


def normalize_list_query(raw: RawQuery, user_id: UUID) -> JobApplicationQuery:
    """Filters, sort and pagination validated together so one response reports every problem"""
    params = validate_query(JobApplicationListParams, raw)
    return JobApplicationQuery(
        filters=params.to_filter_spec(user_id),
        sort=SortSpec(field=params.sort_by, direction=params.sort_order),
        page=PageSpec(page=params.page, limit=params.limit),
    )


def normalize_facet_selection(raw: RawQuery) -> FacetSelection:
    """Read the include<Category> toggles of the filter-options endpoint"""
    params = validate_query(FacetSelectionParams, raw)
    return FacetSelection(
        companies=params.include_companies,
        statuses=params.include_statuses,
        job_levels=params.include_job_levels,
        employment_types=params.include_employment_types,
        sources=params.include_sources,
        locations=params.include_locations,
    )

