"""
Company Query Value Objects
Normalized requests of the company directory endpoints
"""
from dataclasses import dataclass, field
from typing import Optional

from ..enums import CompanySortField, SortDirection
from .pagination import PageSpec


@dataclass(frozen=True)
class CompanyListQuery:
    """Directory listing: optional search, one sort key, page/limit"""

    search: Optional[str] = None
    sort_by: CompanySortField = CompanySortField.NAME
    sort_order: SortDirection = SortDirection.ASC
    page: PageSpec = field(default_factory=lambda: PageSpec(limit=50))


@dataclass(frozen=True)
class SuggestionQuery:
    """Autocomplete on company name with offset/limit paging"""

    term: Optional[str] = None
    offset: int = 0
    limit: int = 10
