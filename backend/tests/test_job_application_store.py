"""
Tests for the SQLAlchemy job application store (SQLite backed)
"""
from decimal import Decimal
from uuid import uuid4

import pytest

from application.services.job_applications.filter_compiler import compile_filters, salary_overlap
from application.services.job_applications.search_clause import build_search_clause
from core.config import settings
from core.exceptions import RepositoryException
from domain.entities import ApplicationSummary, CompanySummary, JobApplication
from domain.enums import ApplicationStatus, Projection, SearchField, SortDirection
from domain.value_objects import Bounds, FilterSpec, SortInstruction
from domain.value_objects.predicates import (
    Contains,
    Equals,
    HasRelated,
    In,
    MatchNothing,
    all_of,
)
from infrastructure.persistence.models import JobApplicationModel, UserModel
from conftest import utc


NEWEST_FIRST = SortInstruction("created_at", SortDirection.DESC)
OLDEST_FIRST = SortInstruction("created_at", SortDirection.ASC)


async def ids(store, predicate, sort=OLDEST_FIRST):
    rows = await store.find_many(predicate, sort)
    return [row.id for row in rows]


@pytest.fixture
async def banded(session_factory, seeded):
    """A third user with one 8M-12M band and one 1M-3M band"""
    owner = uuid4()
    band = JobApplicationModel(
        id=uuid4(), user_id=owner, company_id=seeded["companies"]["google"],
        job_title="Site Reliability Engineer", status="APPLIED", priority=2,
        salary_min=Decimal("8000000"), salary_max=Decimal("12000000"),
        applied_date=utc(2026, 2, 1), created_at=utc(2026, 2, 1),
    )
    low = JobApplicationModel(
        id=uuid4(), user_id=owner, company_id=seeded["companies"]["google"],
        job_title="Support Engineer", status="APPLIED", priority=3,
        salary_min=Decimal("1000000"), salary_max=Decimal("3000000"),
        applied_date=utc(2026, 2, 2), created_at=utc(2026, 2, 2),
    )

    async with session_factory() as session:
        session.add(UserModel(id=owner, email="banded@example.com", full_name="Banded"))
        await session.flush()
        session.add_all([band, low])
        await session.commit()

    return {"owner": owner, "band": band.id, "low": low.id}


class TestCountAndFind:
    """Test filtering through the store"""

    async def test_count_is_scoped_to_owner(self, store, seeded, user_id, other_user_id):
        """Test ownership filter"""
        assert await store.count(Equals("user_id", user_id)) == 5
        assert await store.count(Equals("user_id", other_user_id)) == 1

    async def test_match_nothing_returns_empty(self, store, seeded):
        """Test MatchNothing yields no rows"""
        assert await store.count(MatchNothing()) == 0
        assert await store.find_many(MatchNothing(), NEWEST_FIRST) == []

    async def test_salary_band_partial_overlap(self, store, seeded, user_id):
        """Test 8M-12M band keeps overlapping bands only"""
        predicate = all_of(
            Equals("user_id", user_id),
            salary_overlap(Decimal("8000000"), Decimal("12000000")),
        )
        apps = seeded["apps"]
        assert await ids(store, predicate) == [apps["a1"], apps["a2"]]

    @pytest.mark.parametrize("floor,ceiling,band_matches,low_matches", [
        ("10000000", None, True, False),
        (None, "9000000", True, True),
        ("20000000", None, False, False),
        ("12000000", None, True, False),
        (None, "8000000", True, True),
        ("3000001", "7999999", False, False),
    ])
    async def test_single_bound_salary_against_stored_bands(
        self, store, banded, floor, ceiling, band_matches, low_matches
    ):
        """Test a floor or ceiling alone matches any band reaching it"""
        spec = FilterSpec(
            user_id=banded["owner"],
            salary=Bounds(
                Decimal(floor) if floor else None,
                Decimal(ceiling) if ceiling else None,
            ),
        )
        found = set(await ids(store, compile_filters(spec)))

        assert (banded["band"] in found) is band_matches
        assert (banded["low"] in found) is low_matches

    async def test_membership_is_union_of_equalities(self, store, seeded, user_id):
        """Test In over two statuses equals the union of two Equals"""
        owner = Equals("user_id", user_id)
        applied = set(await ids(store, all_of(owner, Equals("status", ApplicationStatus.APPLIED))))
        offer = set(await ids(store, all_of(owner, Equals("status", ApplicationStatus.OFFER))))
        both = set(await ids(
            store,
            all_of(owner, In("status", (ApplicationStatus.APPLIED, ApplicationStatus.OFFER))),
        ))

        assert both == applied | offer
        assert len(both) == 3

    async def test_single_element_membership_matches_equality(self, store, seeded, user_id):
        """Test In with one value behaves like Equals"""
        owner = Equals("user_id", user_id)
        single = await ids(store, all_of(owner, In("priority", (1,))))
        equal = await ids(store, all_of(owner, Equals("priority", 1)))
        assert single == equal

    async def test_has_notes(self, store, seeded, user_id):
        """Test HasRelated on notes"""
        apps = seeded["apps"]
        owner = Equals("user_id", user_id)

        assert await ids(store, all_of(owner, HasRelated("notes", True))) == [apps["a1"], apps["a3"]]
        assert await ids(store, all_of(owner, HasRelated("notes", False))) == [
            apps["a2"], apps["a4"], apps["a5"],
        ]

    async def test_deadline_filters(self, store, seeded, user_id):
        """Test hasDeadline=false and isOverdue against stored deadlines"""
        apps = seeded["apps"]

        no_deadline = compile_filters(FilterSpec(user_id=user_id, has_deadline=False))
        assert await ids(store, no_deadline) == [apps["a3"], apps["a4"], apps["a5"]]

        overdue = compile_filters(FilterSpec(user_id=user_id, is_overdue=True), now=utc(2026, 6, 1))
        assert await ids(store, overdue) == [apps["a1"]]

        window = compile_filters(
            FilterSpec(
                user_id=user_id,
                has_deadline=True,
                response_deadline=Bounds(utc(2026, 11, 1), utc(2026, 12, 31)),
            )
        )
        assert await ids(store, window) == [apps["a2"]]

    async def test_contains_escapes_wildcards(self, store, seeded, user_id):
        """Test a literal % in the search term is not a wildcard"""
        apps = seeded["apps"]
        predicate = all_of(Equals("user_id", user_id), Contains("job_title", "100%"))
        assert await ids(store, predicate) == [apps["a5"]]

        predicate = all_of(Equals("user_id", user_id), Contains("job_title", "%"))
        assert await ids(store, predicate) == [apps["a5"]]

    async def test_unknown_field_raises(self, store, seeded):
        """Test translator rejects unknown attributes"""
        with pytest.raises(RepositoryException):
            await store.count(Equals("password_hash", "x"))


class TestSearch:
    """Test search clauses against stored text"""

    async def test_default_fields_include_company_name_and_notes(self, store, seeded, user_id):
        """Test defaults search job title, company name and personal notes"""
        apps = seeded["apps"]
        owner = Equals("user_id", user_id)

        by_company = all_of(owner, build_search_clause("Google"))
        assert await ids(store, by_company) == [apps["a1"], apps["a3"], apps["a5"]]

        by_notes = all_of(owner, build_search_clause("Sam"))
        assert await ids(store, by_notes) == [apps["a1"]]

    async def test_non_default_field_needs_opt_in(self, store, seeded, user_id):
        """Test jobDescription is only searched when requested"""
        owner = Equals("user_id", user_id)

        assert await ids(store, all_of(owner, build_search_clause("React"))) == []
        opted_in = all_of(owner, build_search_clause("React", [SearchField.JOB_DESCRIPTION]))
        assert await ids(store, opted_in) == [seeded["apps"]["a3"]]


class TestSortingAndPaging:
    """Test ordering, virtual sort keys and offsets"""

    async def test_sort_by_company_name(self, store, seeded, user_id):
        """Test sorting through the company relation"""
        rows = await store.find_many(
            Equals("user_id", user_id),
            SortInstruction("company.name", SortDirection.ASC),
        )
        names = [row.company.name for row in rows]
        assert names == sorted(names)
        assert names[0] == "Google"
        assert names[-1] == "Microsoft"

    async def test_skip_and_take(self, store, seeded, user_id):
        """Test offset pagination"""
        apps = seeded["apps"]
        rows = await store.find_many(Equals("user_id", user_id), OLDEST_FIRST, skip=2, take=2)
        assert [row.id for row in rows] == [apps["a3"], apps["a4"]]

    async def test_detail_projection(self, store, seeded, user_id):
        """Test detail rows carry company summary and note count"""
        rows = await store.find_many(Equals("user_id", user_id), OLDEST_FIRST, take=1)
        first = rows[0]

        assert isinstance(first, JobApplication)
        assert first.id == seeded["apps"]["a1"]
        assert first.notes_count == 2
        assert first.company.name == "Google"
        assert first.company.industry == "Technology"
        assert first.salary_min == Decimal("5000000")
        assert first.currency == settings.DEFAULT_CURRENCY

    async def test_summary_projection(self, store, seeded, user_id):
        """Test summary rows carry only minimal company data"""
        rows = await store.find_many(
            Equals("user_id", user_id), NEWEST_FIRST, take=2, projection=Projection.SUMMARY
        )
        assert all(isinstance(row, ApplicationSummary) for row in rows)
        assert [row.job_title for row in rows] == ["QA 100% Automation", "Platform Engineer"]
        assert rows[1].company.name == "Microsoft"


class TestNotes:
    """Test list_notes"""

    async def test_newest_first(self, store, seeded):
        notes = await store.list_notes(seeded["apps"]["a1"])
        assert [n.content for n in notes] == ["Sent portfolio", "Phone call scheduled"]
        assert notes[0].job_application_id == seeded["apps"]["a1"]

    async def test_no_notes(self, store, seeded):
        assert await store.list_notes(seeded["apps"]["a2"]) == []


class TestAggregates:
    """Test group_by and distinct"""

    async def test_group_by_status(self, store, seeded, user_id):
        """Test counts per status"""
        counts = await store.group_by("status", Equals("user_id", user_id))
        assert counts == {"APPLIED": 2, "OFFER": 1, "ACCEPTED": 1, "REJECTED": 1}

    async def test_distinct_companies_are_scoped(self, store, seeded, user_id):
        """Test company facet never leaks other users' companies"""
        companies = await store.distinct("company", Equals("user_id", user_id))
        assert companies == [
            CompanySummary(id=seeded["companies"]["google"], name="Google"),
            CompanySummary(id=seeded["companies"]["microsoft"], name="Microsoft"),
        ]

    async def test_distinct_sources(self, store, seeded, user_id):
        """Test distinct values keep nulls for the caller to drop"""
        sources = await store.distinct("source", Equals("user_id", user_id))
        assert "Jobstreet" not in sources
        assert [s for s in sources if s is not None] == ["LinkedIn", "Referral"]
