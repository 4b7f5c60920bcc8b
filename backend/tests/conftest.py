"""
Shared fixtures

Store tests run against a throwaway SQLite file through aiosqlite; the
application engine (PostgreSQL) is never connected.
"""
import os

os.environ.setdefault("LOG_FILE_ENABLED", "false")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")

from datetime import datetime, timezone
from decimal import Decimal
from uuid import uuid4

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from core.database import Base
from infrastructure.persistence.models import CompanyModel, JobApplicationModel, NoteModel, UserModel
from infrastructure.persistence.repositories.company import SQLAlchemyCompanyStore
from infrastructure.persistence.repositories.job_application import SQLAlchemyJobApplicationStore
from main import app
from presentation.api.v1.container import get_company_store, get_job_application_store, get_jwt_service


def utc(year, month, day, hour=0):
    return datetime(year, month, day, hour, tzinfo=timezone.utc)


@pytest.fixture
def user_id():
    return uuid4()


@pytest.fixture
def other_user_id():
    return uuid4()


@pytest.fixture
async def session_factory(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'jobtracker.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest.fixture
async def seeded(session_factory, user_id, other_user_id):
    """
    Two users, three companies, six applications

    user_id owns a1..a5; other_user_id owns b1 (at a company user_id never
    applied to).
    """
    google = CompanyModel(id=uuid4(), name="Google", industry="Technology", location="Mountain View, CA")
    microsoft = CompanyModel(id=uuid4(), name="Microsoft", industry="Technology", location="Redmond, WA")
    meta = CompanyModel(id=uuid4(), name="Meta", industry="Technology", location="Menlo Park, CA")

    def application(owner, company, title, created, **kwargs):
        return JobApplicationModel(
            id=uuid4(),
            user_id=owner,
            company_id=company.id,
            job_title=title,
            applied_date=created,
            created_at=created,
            **kwargs,
        )

    a1 = application(
        user_id, google, "Backend Engineer", utc(2026, 1, 1),
        status="APPLIED", priority=1, salary_min=Decimal("5000000"), salary_max=Decimal("9000000"),
        location="Jakarta", source="LinkedIn", personal_notes="Referral from Sam",
        response_deadline=utc(2026, 2, 1),
    )
    a2 = application(
        user_id, microsoft, "Data Analyst", utc(2026, 1, 2),
        status="OFFER", priority=2, salary_min=Decimal("11000000"), salary_max=Decimal("15000000"),
        location="Remote", source="Referral", is_remote=True, job_level="MID",
        response_deadline=utc(2026, 12, 1),
    )
    a3 = application(
        user_id, google, "Frontend Engineer", utc(2026, 1, 3),
        status="ACCEPTED", priority=3, salary_min=Decimal("13000000"), salary_max=Decimal("20000000"),
        location="Bandung", job_level="SENIOR", employment_type="FULL_TIME",
        job_description="React and TypeScript",
    )
    a4 = application(
        user_id, microsoft, "Platform Engineer", utc(2026, 1, 4),
        status="REJECTED", priority=1, salary_min=Decimal("1000000"), salary_max=Decimal("3000000"),
        location="Jakarta", is_favorite=True,
    )
    a5 = application(
        user_id, google, "QA 100% Automation", utc(2026, 1, 5),
        status="APPLIED", priority=2, location="   ", source="LinkedIn",
    )
    b1 = application(
        other_user_id, meta, "Backend Engineer", utc(2026, 1, 6),
        status="OFFER", priority=1, location="Singapore", source="Jobstreet",
    )

    async with session_factory() as session:
        session.add_all([
            UserModel(id=user_id, email="owner@example.com", full_name="Owner"),
            UserModel(id=other_user_id, email="other@example.com", full_name="Other"),
            google, microsoft, meta,
        ])
        await session.flush()
        session.add_all([a1, a2, a3, a4, a5, b1])
        await session.flush()
        session.add_all([
            NoteModel(job_application_id=a1.id, content="Phone call scheduled", note_date=utc(2026, 1, 10)),
            NoteModel(job_application_id=a1.id, content="Sent portfolio", note_date=utc(2026, 1, 12)),
            NoteModel(job_application_id=a3.id, content="Signed", note_date=utc(2026, 1, 20)),
        ])
        await session.commit()

    return {
        "companies": {"google": google.id, "microsoft": microsoft.id, "meta": meta.id},
        "apps": {
            "a1": a1.id, "a2": a2.id, "a3": a3.id, "a4": a4.id, "a5": a5.id, "b1": b1.id,
        },
    }


@pytest.fixture
def store(session_factory):
    return SQLAlchemyJobApplicationStore(session_factory)


@pytest.fixture
def company_store(session_factory):
    return SQLAlchemyCompanyStore(session_factory)


@pytest.fixture
async def client(store, company_store):
    app.dependency_overrides[get_job_application_store] = lambda: store
    app.dependency_overrides[get_company_store] = lambda: company_store
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(user_id):
    token = get_jwt_service().create_access_token(user_id)
    return {"Authorization": f"Bearer {token}"}
