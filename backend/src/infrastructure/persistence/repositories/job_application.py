"""
Job Application Store Implementation
SQLAlchemy-based read store for the job-application query engine
"""
from typing import Any, Dict, List, Optional, Union
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import contains_eager
from loguru import logger

from application.repositories.interfaces import IJobApplicationStore
from core.exceptions import RepositoryException
from domain.entities import ApplicationSummary, CompanySummary, JobApplication, Note
from domain.enums import ApplicationStatus, EmploymentType, JobLevel, Projection
from domain.value_objects import SortInstruction
from domain.value_objects.predicates import Predicate
from infrastructure.persistence.models import CompanyModel, JobApplicationModel, NoteModel
from infrastructure.persistence.predicate_sql import job_application_predicates as predicates


class SQLAlchemyJobApplicationStore(IJobApplicationStore):
    """SQLAlchemy implementation of the job application store.

    Each call opens its own session from the factory so that independent
    queries (count and page) can run concurrently. Text matching uses
    ``LIKE``: case-sensitive on PostgreSQL, ASCII case-insensitive on SQLite.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    @staticmethod
    def _joined(stmt):
        return stmt.select_from(JobApplicationModel).join(JobApplicationModel.company)

    async def count(self, predicate: Predicate) -> int:
        """Count applications matching predicate"""
        try:
            stmt = (
                self._joined(select(func.count(JobApplicationModel.id)))
                .where(predicates.to_clause(predicate))
            )
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                return result.scalar_one()

        except RepositoryException:
            raise
        except Exception as e:
            logger.error(f"Failed to count job applications: {str(e)}")
            raise RepositoryException(f"Failed to count job applications: {str(e)}") from e

    async def find_many(
        self,
        predicate: Predicate,
        sort: SortInstruction,
        skip: int = 0,
        take: Optional[int] = None,
        projection: Projection = Projection.DETAIL
    ) -> Union[List[JobApplication], List[ApplicationSummary]]:
        """Find applications with filtering, ordering and pagination"""
        try:
            order_column = predicates.column_for(sort.path)
            order = order_column.desc() if sort.descending else order_column.asc()

            if projection == Projection.SUMMARY:
                stmt = select(
                    JobApplicationModel.id,
                    JobApplicationModel.job_title,
                    JobApplicationModel.status,
                    JobApplicationModel.priority,
                    JobApplicationModel.created_at,
                    CompanyModel.id.label("company_id"),
                    CompanyModel.name.label("company_name"),
                )
            else:
                notes_count = (
                    select(func.count(NoteModel.id))
                    .where(NoteModel.job_application_id == JobApplicationModel.id)
                    .correlate(JobApplicationModel)
                    .scalar_subquery()
                )
                stmt = select(JobApplicationModel, notes_count.label("notes_count")).options(
                    contains_eager(JobApplicationModel.company)
                )

            stmt = self._joined(stmt).where(predicates.to_clause(predicate)).order_by(order).offset(skip)
            if take is not None:
                stmt = stmt.limit(take)

            async with self.session_factory() as session:
                result = await session.execute(stmt)
                rows = result.all()

            if projection == Projection.SUMMARY:
                return [self._to_summary(row) for row in rows]
            return [self._to_entity(model, notes) for model, notes in rows]

        except RepositoryException:
            raise
        except Exception as e:
            logger.error(f"Failed to find job applications: {str(e)}")
            raise RepositoryException(f"Failed to find job applications: {str(e)}") from e

    async def group_by(self, field: str, predicate: Predicate) -> Dict[Any, int]:
        """Count applications per value of field"""
        try:
            column = predicates.column_for(field)
            stmt = (
                self._joined(select(column, func.count(JobApplicationModel.id)))
                .where(predicates.to_clause(predicate))
                .group_by(column)
            )
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                return {value: count for value, count in result.all()}

        except RepositoryException:
            raise
        except Exception as e:
            logger.error(f"Failed to group job applications by {field}: {str(e)}")
            raise RepositoryException(f"Failed to group job applications: {str(e)}") from e

    async def distinct(self, field: str, predicate: Predicate) -> List[Any]:
        """Distinct values of field (or companies) among matching applications"""
        try:
            if field == "company":
                stmt = (
                    self._joined(select(CompanyModel.id, CompanyModel.name))
                    .where(predicates.to_clause(predicate))
                    .distinct()
                    .order_by(CompanyModel.name)
                )
            else:
                column = predicates.column_for(field)
                stmt = (
                    self._joined(select(column))
                    .where(predicates.to_clause(predicate))
                    .distinct()
                    .order_by(column)
                )

            async with self.session_factory() as session:
                result = await session.execute(stmt)
                rows = result.all()

            if field == "company":
                return [CompanySummary(id=company_id, name=name) for company_id, name in rows]
            return [row[0] for row in rows]

        except RepositoryException:
            raise
        except Exception as e:
            logger.error(f"Failed to list distinct {field} values: {str(e)}")
            raise RepositoryException(f"Failed to list distinct values: {str(e)}") from e

    async def list_notes(self, application_id: UUID) -> List[Note]:
        """Notes of one application, newest first"""
        try:
            stmt = (
                select(NoteModel)
                .where(NoteModel.job_application_id == application_id)
                .order_by(NoteModel.note_date.desc())
            )
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                models = result.scalars().all()

            return [
                Note(
                    id=model.id,
                    job_application_id=model.job_application_id,
                    content=model.content,
                    note_date=model.note_date,
                    title=model.title,
                )
                for model in models
            ]

        except Exception as e:
            logger.error(f"Failed to list notes of job application {application_id}: {str(e)}")
            raise RepositoryException(f"Failed to list notes: {str(e)}") from e

    def _to_entity(self, model: JobApplicationModel, notes_count: int = 0) -> JobApplication:
        """Convert JobApplicationModel (+ company) to domain entity"""
        company = model.company

        job_level = None
        if model.job_level:
            try:
                job_level = JobLevel(model.job_level)
            except ValueError:
                logger.warning(f"Unknown job level '{model.job_level}' on application {model.id}")

        employment_type = None
        if model.employment_type:
            try:
                employment_type = EmploymentType(model.employment_type)
            except ValueError:
                logger.warning(f"Unknown employment type '{model.employment_type}' on application {model.id}")

        return JobApplication(
            id=model.id,
            user_id=model.user_id,
            company_id=model.company_id,
            status=ApplicationStatus(model.status),
            job_title=model.job_title,
            applied_date=model.applied_date,
            priority=model.priority,
            currency=model.currency,
            job_level=job_level,
            employment_type=employment_type,
            salary_min=model.salary_min,
            salary_max=model.salary_max,
            location=model.location,
            is_remote=model.is_remote,
            is_favorite=model.is_favorite,
            source=model.source,
            job_url=model.job_url,
            response_deadline=model.response_deadline,
            personal_notes=model.personal_notes,
            job_description=model.job_description,
            requirements=model.requirements,
            company=CompanySummary(
                id=company.id,
                name=company.name,
                industry=company.industry,
                location=company.location,
                logo_url=company.logo_url,
            ) if company else None,
            notes_count=notes_count or 0,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_summary(self, row) -> ApplicationSummary:
        return ApplicationSummary(
            id=row.id,
            job_title=row.job_title,
            status=ApplicationStatus(row.status),
            priority=row.priority,
            created_at=row.created_at,
            company=CompanySummary(id=row.company_id, name=row.company_name),
        )
