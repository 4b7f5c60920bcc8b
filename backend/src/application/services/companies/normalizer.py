"""
Company Query Normalizer
Validates the company directory's query strings
"""
from typing import Optional

from pydantic import Field

from core.config import settings
from domain.enums import CompanySortField, SortDirection
from domain.value_objects import MAX_OFFSET, CompanyListQuery, PageSpec, SuggestionQuery, max_page
from ..query_params import QueryParams, RawQuery, validate_query


class CompanyListParams(QueryParams):
    page: int = Field(1, ge=1, le=max_page(settings.PAGINATION_MAX_LIMIT))
    limit: int = Field(
        settings.COMPANY_PAGE_DEFAULT_LIMIT, ge=1, le=settings.PAGINATION_MAX_LIMIT
    )
    search: Optional[str] = None
    sort_by: CompanySortField = CompanySortField.NAME
    sort_order: SortDirection = SortDirection.ASC


class CompanySuggestionParams(QueryParams):
    q: Optional[str] = None
    offset: int = Field(0, ge=0, le=MAX_OFFSET)
    limit: int = Field(
        settings.COMPANY_SUGGESTION_LIMIT, ge=1, le=settings.PAGINATION_MAX_LIMIT
    )


def normalize_company_query(raw: RawQuery) -> CompanyListQuery:
    params = validate_query(CompanyListParams, raw)
    return CompanyListQuery(
        search=params.search,
        sort_by=params.sort_by,
        sort_order=params.sort_order,
        page=PageSpec(page=params.page, limit=params.limit),
    )


def normalize_suggestion_query(raw: RawQuery) -> SuggestionQuery:
    params = validate_query(CompanySuggestionParams, raw)
    return SuggestionQuery(term=params.q, offset=params.offset, limit=params.limit)
