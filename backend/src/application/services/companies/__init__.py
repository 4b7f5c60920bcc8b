"""Company directory read side: listing and suggestions"""

from .normalizer import normalize_company_query, normalize_suggestion_query
from .query_service import (
    CompanyPage,
    CompanyQueryService,
    CompanySuggestions,
    build_company_search,
)

__all__ = [
    "normalize_company_query",
    "normalize_suggestion_query",
    "CompanyPage",
    "CompanyQueryService",
    "CompanySuggestions",
    "build_company_search",
]
