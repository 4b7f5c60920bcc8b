"""
Job Application Query Service
Read side of the job-application API: listing, single fetch, filter options and stats
"""
import asyncio
from dataclasses import dataclass
from typing import List, Sequence
from uuid import UUID

from loguru import logger

from application.repositories.interfaces import IJobApplicationStore
from core.exceptions import ResourceNotFoundException
from domain.entities import JobApplication, Note
from domain.enums import Projection
from domain.value_objects import FacetSelection, JobApplicationQuery, PageInfo, SortSpec
from domain.value_objects.predicates import Equals, all_of
from .facets import FacetAggregator, FilterOptions
from .filter_compiler import Clock, build_list_predicate, utc_now
from .sort_resolver import resolve_sort
from .stats import ApplicationStats, StatsAggregator


@dataclass(frozen=True)
class JobApplicationPage:
    """One page of job applications plus its pagination block"""
    job_applications: List[JobApplication]
    pagination: PageInfo


@dataclass(frozen=True)
class JobApplicationDetail:
    """One application with its notes"""
    job_application: JobApplication
    notes: List[Note]


class JobApplicationQueryService:
    """Stateless; safe to share between concurrent requests"""

    def __init__(
        self,
        store: IJobApplicationStore,
        currencies: Sequence[str],
        recent_limit: int = 5,
        clock: Clock = utc_now
    ):
        self.store = store
        self.clock = clock
        self.facets = FacetAggregator(store, currencies)
        self.stats = StatsAggregator(store, recent_limit)

    async def list_applications(self, query: JobApplicationQuery) -> JobApplicationPage:
        """
        Filtered, sorted, paginated listing

        The count and the page are independent queries and run
        concurrently; both complete before the envelope is built.
        """
        predicate = build_list_predicate(query.filters, clock=self.clock)
        sort = resolve_sort(query.sort)

        total, rows = await asyncio.gather(
            self.store.count(predicate),
            self.store.find_many(
                predicate,
                sort,
                skip=query.page.skip,
                take=query.page.limit,
                projection=Projection.DETAIL,
            ),
        )

        logger.info(
            f"Listed {len(rows)}/{total} job applications for user {query.filters.user_id} "
            f"(page={query.page.page}, limit={query.page.limit}, sort={sort.path} {sort.direction.value})"
        )
        return JobApplicationPage(
            job_applications=list(rows),
            pagination=PageInfo.for_total(query.page, total),
        )

    async def get_application(self, user_id: UUID, application_id: UUID) -> JobApplicationDetail:
        """
        One of the user's applications with its notes

        Raises:
            ResourceNotFoundException: no such application, or it belongs
                to another user
        """
        predicate = all_of(Equals("user_id", user_id), Equals("id", application_id))
        rows = await self.store.find_many(
            predicate,
            resolve_sort(SortSpec()),
            take=1,
            projection=Projection.DETAIL,
        )
        if not rows:
            raise ResourceNotFoundException("Job application", str(application_id))

        notes = await self.store.list_notes(application_id)
        return JobApplicationDetail(job_application=rows[0], notes=list(notes))

    async def get_filter_options(self, user_id: UUID, selection: FacetSelection) -> FilterOptions:
        return await self.facets.aggregate(user_id, selection)

    async def get_stats(self, user_id: UUID) -> ApplicationStats:
        return await self.stats.aggregate(user_id)
