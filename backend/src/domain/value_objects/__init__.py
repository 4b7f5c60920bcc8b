"""Value Objects - Immutable objects defined by their attributes"""

from .company_query import CompanyListQuery, SuggestionQuery
from .filter_spec import Bounds, FacetSelection, FilterSpec, JobApplicationQuery
from .pagination import MAX_OFFSET, OffsetPageInfo, PageInfo, PageSpec, max_page, total_pages
from .sort_spec import SortInstruction, SortSpec

__all__ = [
    "Bounds",
    "CompanyListQuery",
    "FacetSelection",
    "FilterSpec",
    "JobApplicationQuery",
    "MAX_OFFSET",
    "max_page",
    "OffsetPageInfo",
    "PageInfo",
    "PageSpec",
    "total_pages",
    "SortInstruction",
    "SortSpec",
    "SuggestionQuery",
]
