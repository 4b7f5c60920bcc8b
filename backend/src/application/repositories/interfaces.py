"""
Repository Interfaces (Abstract Base Classes)
Define contracts for data access without implementation details
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Union
from uuid import UUID

from domain.entities import ApplicationSummary, CompanyListing, JobApplication, Note
from domain.enums import Projection
from domain.value_objects import SortInstruction
from domain.value_objects.predicates import Predicate


class IJobApplicationStore(ABC):
    """Read-only queryable store of job applications.

    Every method receives a complete predicate tree; ownership scoping
    (``user_id``) is part of that tree, never implied by the store.
    Implementations must document how ``Contains`` treats letter case.
    """

    @abstractmethod
    async def count(self, predicate: Predicate) -> int:
        """Number of applications matching predicate"""
        pass

    @abstractmethod
    async def find_many(
        self,
        predicate: Predicate,
        sort: SortInstruction,
        skip: int = 0,
        take: Optional[int] = None,
        projection: Projection = Projection.DETAIL
    ) -> Union[List[JobApplication], List[ApplicationSummary]]:
        """Matching applications in sort order.

        Returns JobApplication entities for Projection.DETAIL and
        ApplicationSummary objects for Projection.SUMMARY.
        """
        pass

    @abstractmethod
    async def group_by(self, field: str, predicate: Predicate) -> Dict[Any, int]:
        """Count of matching applications per distinct value of field"""
        pass

    @abstractmethod
    async def distinct(self, field: str, predicate: Predicate) -> List[Any]:
        """Distinct values of field among matching applications, ascending.

        ``field`` may be ``"company"``, which yields CompanySummary objects
        ordered by name. Null values are returned as-is.
        """
        pass

    @abstractmethod
    async def list_notes(self, application_id: UUID) -> List[Note]:
        """Notes of one application, newest note_date first"""
        pass


class ICompanyStore(ABC):
    """Read-only store of the shared company directory.

    Companies are not owned by users; only the per-company application
    count is scoped, to the user passed as ``owner_id``.
    """

    @abstractmethod
    async def count(self, predicate: Predicate) -> int:
        """Number of companies matching predicate"""
        pass

    @abstractmethod
    async def find_many(
        self,
        predicate: Predicate,
        sort: SortInstruction,
        owner_id: UUID,
        skip: int = 0,
        take: Optional[int] = None
    ) -> List[CompanyListing]:
        """Matching companies in sort order, each with owner_id's application count"""
        pass
