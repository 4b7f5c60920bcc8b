"""
Facet Aggregator
Distinct values per filterable field for populating filter controls
"""
import asyncio
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple
from uuid import UUID

from loguru import logger

from application.repositories.interfaces import IJobApplicationStore
from domain.entities import CompanySummary
from domain.enums import (
    ApplicationStatus,
    EmploymentType,
    JobLevel,
    Priority,
    SEARCH_FIELD_LABELS,
    SearchField,
)
from domain.value_objects import FacetSelection
from domain.value_objects.predicates import Equals


@dataclass(frozen=True)
class Option:
    """A value/label pair for a static select list"""
    value: Any
    label: str


PRIORITY_OPTIONS: Tuple[Option, ...] = tuple(Option(p.value, p.label) for p in Priority)
SEARCH_FIELD_OPTIONS: Tuple[Option, ...] = tuple(
    Option(f.value, SEARCH_FIELD_LABELS[f]) for f in SearchField
)


@dataclass(frozen=True)
class FilterOptions:
    """Available filter values; disabled categories are None"""

    priorities: Tuple[Option, ...]
    currencies: Tuple[str, ...]
    search_fields: Tuple[Option, ...]
    companies: Optional[List[CompanySummary]] = None
    statuses: Optional[List[ApplicationStatus]] = None
    job_levels: Optional[List[JobLevel]] = None
    employment_types: Optional[List[EmploymentType]] = None
    sources: Optional[List[str]] = None
    locations: Optional[List[str]] = None


def _present(values: Sequence[Any]) -> List[Any]:
    """Drop null and blank values"""
    return [
        v for v in values
        if v is not None and not (isinstance(v, str) and not v.strip())
    ]


class FacetAggregator:
    """Computes filter options scoped to one user's applications"""

    # facet attribute -> (store field, converter for stored values)
    FACETS = {
        "companies": ("company", None),
        "statuses": ("status", ApplicationStatus),
        "job_levels": ("job_level", JobLevel),
        "employment_types": ("employment_type", EmploymentType),
        "sources": ("source", None),
        "locations": ("location", None),
    }

    def __init__(self, store: IJobApplicationStore, currencies: Sequence[str]):
        self.store = store
        self.currencies = tuple(currencies)

    async def aggregate(self, user_id: UUID, selection: FacetSelection) -> FilterOptions:
        """
        Compute the requested facets plus the static catalogs

        Args:
            user_id: Facets only see this user's applications
            selection: Which categories to compute

        Returns:
            FilterOptions
        """
        ownership = Equals("user_id", user_id)
        wanted = [name for name in self.FACETS if getattr(selection, name)]

        results = await asyncio.gather(*(
            self.store.distinct(self.FACETS[name][0], ownership) for name in wanted
        ))

        facets = {}
        for name, values in zip(wanted, results):
            convert = self.FACETS[name][1]
            values = _present(values)
            facets[name] = [convert(v) for v in values] if convert else values

        logger.debug(
            f"Facets for user {user_id}: "
            + ", ".join(f"{name}={len(values)}" for name, values in facets.items())
        )

        return FilterOptions(
            priorities=PRIORITY_OPTIONS,
            currencies=self.currencies,
            search_fields=SEARCH_FIELD_OPTIONS,
            **facets,
        )
