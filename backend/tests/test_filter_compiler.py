"""
Tests for predicate compilation
"""
from datetime import datetime, timezone
from decimal import Decimal
from uuid import uuid4

from application.services.job_applications.filter_compiler import (
    build_list_predicate,
    compile_filters,
    deadline_clause,
    salary_overlap,
)
from domain.enums import ApplicationStatus
from domain.value_objects import Bounds, FilterSpec
from domain.value_objects.predicates import (
    And,
    Contains,
    Equals,
    HasRelated,
    In,
    IsNull,
    MatchNothing,
    Or,
    Range,
    all_of,
    any_of,
    between,
    membership,
)


USER_ID = uuid4()
NOW = datetime(2026, 6, 1, tzinfo=timezone.utc)


class TestPredicateBuilders:
    """Test combinators"""

    def test_all_of_flattens_and_skips_none(self):
        a, b, c = Equals("a", 1), Equals("b", 2), Equals("c", 3)
        assert all_of(a, None, And((b, c))) == And((a, b, c))

    def test_all_of_single_operand(self):
        a = Equals("a", 1)
        assert all_of(None, a) == a

    def test_all_of_short_circuits_match_nothing(self):
        assert all_of(Equals("a", 1), MatchNothing()) == MatchNothing()

    def test_any_of_empty_is_match_nothing(self):
        assert any_of(None, MatchNothing()) == MatchNothing()

    def test_between(self):
        assert between("x") is None
        assert between("x", 1) == Range("x", gte=1)
        assert between("x", 1, 5) == Range("x", gte=1, lte=5)
        assert between("x", 5, 1) == MatchNothing()

    def test_membership(self):
        assert membership("status", None) is None
        assert membership("status", []) is None
        assert membership("status", "OFFER") == Equals("status", "OFFER")
        assert membership("status", ["OFFER"]) == In("status", ("OFFER",))


class TestCompileFilters:
    """Test FilterSpec -> predicate"""

    def test_identity_is_ownership_only(self):
        """Test empty filters compile to the user test alone"""
        assert compile_filters(FilterSpec(user_id=USER_ID), now=NOW) == Equals("user_id", USER_ID)

    def test_each_filter_is_one_conjunct(self):
        spec = FilterSpec(
            user_id=USER_ID,
            status=[ApplicationStatus.APPLIED, ApplicationStatus.OFFER],
            location="Jakarta",
            is_remote=False,
            has_notes=True,
        )
        predicate = compile_filters(spec, now=NOW)

        assert isinstance(predicate, And)
        assert predicate.operands == (
            Equals("user_id", USER_ID),
            In("status", (ApplicationStatus.APPLIED, ApplicationStatus.OFFER)),
            Contains("location", "Jakarta"),
            Equals("is_remote", False),
            HasRelated("notes", True),
        )

    def test_inverted_date_range_matches_nothing(self):
        spec = FilterSpec(
            user_id=USER_ID,
            applied_date=Bounds(datetime(2026, 2, 1, tzinfo=timezone.utc), datetime(2026, 1, 1, tzinfo=timezone.utc)),
        )
        assert compile_filters(spec, now=NOW) == MatchNothing()

    def test_build_list_predicate_adds_search(self):
        spec = FilterSpec(user_id=USER_ID, search="react")
        predicate = build_list_predicate(spec, clock=lambda: NOW)

        assert isinstance(predicate, And)
        assert predicate.operands[0] == Equals("user_id", USER_ID)
        assert isinstance(predicate.operands[1], Or)


class TestSalaryOverlap:
    """Test partial-overlap salary semantics"""

    def test_absent(self):
        assert salary_overlap() is None

    def test_floor_only(self):
        assert salary_overlap(Decimal("8")) == Or((
            Range("salary_min", gte=Decimal("8")),
            Range("salary_max", gte=Decimal("8")),
        ))

    def test_floor_and_ceiling(self):
        predicate = salary_overlap(Decimal("8"), Decimal("12"))
        assert isinstance(predicate, And)
        assert len(predicate.operands) == 2

    def test_floor_above_ceiling(self):
        assert salary_overlap(Decimal("12"), Decimal("8")) == MatchNothing()


class TestDeadlineClause:
    """Test hasDeadline / responseDeadline / isOverdue interaction"""

    RANGE = Bounds(datetime(2026, 1, 1, tzinfo=timezone.utc), datetime(2026, 3, 1, tzinfo=timezone.utc))

    def test_nothing_requested(self):
        assert deadline_clause(FilterSpec(user_id=USER_ID), NOW) is None

    def test_has_deadline_false_overrides_range_and_overdue(self):
        """Test the presence axis wins instead of an unsatisfiable AND"""
        spec = FilterSpec(user_id=USER_ID, has_deadline=False, response_deadline=self.RANGE, is_overdue=True)
        assert deadline_clause(spec, NOW) == IsNull("response_deadline", True)

    def test_has_deadline_true_refined_by_range(self):
        spec = FilterSpec(user_id=USER_ID, has_deadline=True, response_deadline=self.RANGE)
        assert deadline_clause(spec, NOW) == And((
            IsNull("response_deadline", False),
            Range("response_deadline", gte=self.RANGE.lower, lte=self.RANGE.upper),
        ))

    def test_overdue_uses_compile_time_now(self):
        spec = FilterSpec(user_id=USER_ID, is_overdue=True)
        assert deadline_clause(spec, NOW) == And((
            IsNull("response_deadline", False),
            Range("response_deadline", lt=NOW),
        ))

    def test_overdue_false_adds_nothing(self):
        assert deadline_clause(FilterSpec(user_id=USER_ID, is_overdue=False), NOW) is None
