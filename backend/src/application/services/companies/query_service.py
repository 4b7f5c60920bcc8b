"""
Company Query Service
Read side of the company directory: paged listing and name suggestions
"""
import asyncio
from dataclasses import dataclass
from typing import Dict, List, Optional
from uuid import UUID

from loguru import logger

from application.repositories.interfaces import ICompanyStore
from domain.entities import CompanyListing
from domain.enums import CompanySortField, SortDirection
from domain.value_objects import (
    CompanyListQuery,
    OffsetPageInfo,
    PageInfo,
    SortInstruction,
    SuggestionQuery,
)
from domain.value_objects.predicates import And, Contains, Predicate, any_of


COMPANY_SORT_PATHS: Dict[CompanySortField, str] = {
    CompanySortField.NAME: "name",
    CompanySortField.INDUSTRY: "industry",
    CompanySortField.LOCATION: "location",
    CompanySortField.CREATED_AT: "created_at",
}

COMPANY_SEARCH_PATHS = ("name", "industry", "location")

BY_NAME = SortInstruction("name", SortDirection.ASC)


def build_company_search(search: Optional[str]) -> Predicate:
    """Substring match on name, industry or location; everything when search is blank"""
    if search is None or not search.strip():
        return And(())
    return any_of(*(Contains(path, search) for path in COMPANY_SEARCH_PATHS))


@dataclass(frozen=True)
class CompanyPage:
    companies: List[CompanyListing]
    pagination: PageInfo


@dataclass(frozen=True)
class CompanySuggestions:
    suggestions: List[CompanyListing]
    pagination: OffsetPageInfo


class CompanyQueryService:
    """Stateless; application counts are scoped to the requesting user"""

    def __init__(self, store: ICompanyStore, min_suggestion_length: int = 2):
        self.store = store
        self.min_suggestion_length = min_suggestion_length

    async def list_companies(self, user_id: UUID, query: CompanyListQuery) -> CompanyPage:
        predicate = build_company_search(query.search)
        sort = SortInstruction(COMPANY_SORT_PATHS[query.sort_by], query.sort_order)

        total, rows = await asyncio.gather(
            self.store.count(predicate),
            self.store.find_many(
                predicate,
                sort,
                owner_id=user_id,
                skip=query.page.skip,
                take=query.page.limit,
            ),
        )

        logger.info(
            f"Listed {len(rows)}/{total} companies for user {user_id} "
            f"(page={query.page.page}, limit={query.page.limit})"
        )
        return CompanyPage(
            companies=list(rows),
            pagination=PageInfo.for_total(query.page, total),
        )

    async def suggest(self, user_id: UUID, query: SuggestionQuery) -> CompanySuggestions:
        """
        Companies whose name contains the term, by name

        Terms shorter than min_suggestion_length return nothing without
        touching the store.
        """
        term = (query.term or "").strip()
        if len(term) < self.min_suggestion_length:
            return CompanySuggestions(
                suggestions=[],
                pagination=OffsetPageInfo.for_total(query.offset, query.limit, 0),
            )

        predicate = Contains("name", term)
        total, rows = await asyncio.gather(
            self.store.count(predicate),
            self.store.find_many(
                predicate,
                BY_NAME,
                owner_id=user_id,
                skip=query.offset,
                take=query.limit,
            ),
        )
        return CompanySuggestions(
            suggestions=list(rows),
            pagination=OffsetPageInfo.for_total(query.offset, query.limit, total),
        )
