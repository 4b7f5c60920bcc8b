"""
Company Store Implementation
SQLAlchemy-based read store for the company directory
"""
from typing import List, Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from loguru import logger

from application.repositories.interfaces import ICompanyStore
from core.exceptions import RepositoryException
from domain.entities import CompanyListing
from domain.value_objects import SortInstruction
from domain.value_objects.predicates import Predicate
from infrastructure.persistence.models import CompanyModel, JobApplicationModel
from infrastructure.persistence.predicate_sql import company_predicates as predicates


class SQLAlchemyCompanyStore(ICompanyStore):
    """SQLAlchemy implementation of the company store (one session per call)"""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def count(self, predicate: Predicate) -> int:
        """Count companies matching predicate"""
        try:
            stmt = select(func.count(CompanyModel.id)).where(predicates.to_clause(predicate))
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                return result.scalar_one()

        except RepositoryException:
            raise
        except Exception as e:
            logger.error(f"Failed to count companies: {str(e)}")
            raise RepositoryException(f"Failed to count companies: {str(e)}") from e

    async def find_many(
        self,
        predicate: Predicate,
        sort: SortInstruction,
        owner_id: UUID,
        skip: int = 0,
        take: Optional[int] = None
    ) -> List[CompanyListing]:
        """Find companies with the owner's application count per company"""
        try:
            order_column = predicates.column_for(sort.path)
            order = order_column.desc() if sort.descending else order_column.asc()

            applications_count = (
                select(func.count(JobApplicationModel.id))
                .where(
                    JobApplicationModel.company_id == CompanyModel.id,
                    JobApplicationModel.user_id == owner_id,
                )
                .correlate(CompanyModel)
                .scalar_subquery()
            )
            stmt = (
                select(CompanyModel, applications_count.label("applications_count"))
                .where(predicates.to_clause(predicate))
                .order_by(order)
                .offset(skip)
            )
            if take is not None:
                stmt = stmt.limit(take)

            async with self.session_factory() as session:
                result = await session.execute(stmt)
                rows = result.all()

            return [self._to_entity(model, count) for model, count in rows]

        except RepositoryException:
            raise
        except Exception as e:
            logger.error(f"Failed to find companies: {str(e)}")
            raise RepositoryException(f"Failed to find companies: {str(e)}") from e

    def _to_entity(self, model: CompanyModel, applications_count: int = 0) -> CompanyListing:
        return CompanyListing(
            id=model.id,
            name=model.name,
            industry=model.industry,
            location=model.location,
            website=model.website,
            size=model.size,
            logo_url=model.logo_url,
            created_at=model.created_at,
            applications_count=applications_count or 0,
        )
