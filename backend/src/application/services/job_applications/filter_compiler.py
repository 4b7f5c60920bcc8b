"""
Predicate Compiler
Compiles a FilterSpec into one predicate tree over job applications.

Each filter contributes at most one operand and the operands are ANDed.
Well-typed but inconsistent input (inverted ranges) compiles to
MatchNothing instead of raising. No I/O happens here.
"""
from datetime import datetime, timezone
from typing import Callable, Optional

from loguru import logger

from domain.value_objects import FilterSpec
from domain.value_objects.predicates import (
    NOTES,
    Contains,
    Equals,
    HasRelated,
    IsNull,
    MatchNothing,
    Predicate,
    Range,
    all_of,
    any_of,
    between,
    membership,
)
from .search_clause import build_search_clause


Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _contains(field: str, value: Optional[str]) -> Optional[Predicate]:
    return Contains(field, value) if value is not None else None


def _equals(field: str, value) -> Optional[Predicate]:
    return Equals(field, value) if value is not None else None


def salary_overlap(floor=None, ceiling=None) -> Optional[Predicate]:
    """
    Partial-overlap salary filter

    An application matches the floor when either of its own bounds
    reaches it, and matches the ceiling when either of its own bounds is
    under it. Bands that only partly intersect [floor, ceiling] match;
    this is not a containment test.
    """
    if floor is None and ceiling is None:
        return None
    if floor is not None and ceiling is not None and floor > ceiling:
        return MatchNothing()

    floor_clause = None
    if floor is not None:
        floor_clause = any_of(
            Range("salary_min", gte=floor),
            Range("salary_max", gte=floor),
        )

    ceiling_clause = None
    if ceiling is not None:
        ceiling_clause = any_of(
            Range("salary_min", lte=ceiling),
            Range("salary_max", lte=ceiling),
        )

    return all_of(floor_clause, ceiling_clause)


def deadline_clause(spec: FilterSpec, now: datetime) -> Optional[Predicate]:
    """
    Everything that constrains response_deadline

    hasDeadline owns the presence axis. With hasDeadline=false only the
    IS NULL test is kept; the range and isOverdue refinements apply to
    non-null deadlines and are dropped rather than combined into a
    contradiction.
    """
    if spec.has_deadline is False:
        if not spec.response_deadline.is_empty() or spec.is_overdue:
            logger.debug("hasDeadline=false overrides responseDeadline range / isOverdue")
        return IsNull("response_deadline", True)

    presence = IsNull("response_deadline", False) if spec.has_deadline else None
    window = between(
        "response_deadline",
        spec.response_deadline.lower,
        spec.response_deadline.upper,
    )
    overdue = None
    if spec.is_overdue:
        overdue = all_of(
            IsNull("response_deadline", False),
            Range("response_deadline", lt=now),
        )

    if presence is None and window is None and overdue is None:
        return None
    return all_of(presence, window, overdue)


def compile_filters(spec: FilterSpec, now: Optional[datetime] = None) -> Predicate:
    """
    Compile every filter of spec except the free-text search

    Args:
        spec: Normalized filters
        now: Instant used by isOverdue, defaults to the current UTC time

    Returns:
        A conjunction; always contains the user_id ownership test
    """
    now = now or utc_now()

    return all_of(
        Equals("user_id", spec.user_id),
        membership("status", spec.status),
        membership("priority", spec.priority),
        membership("job_level", spec.job_level),
        membership("employment_type", spec.employment_type),
        _equals("company_id", spec.company_id),
        _contains("location", spec.location),
        _contains("source", spec.source),
        _equals("currency", spec.currency),
        _equals("is_remote", spec.is_remote),
        _equals("is_favorite", spec.is_favorite),
        between("applied_date", spec.applied_date.lower, spec.applied_date.upper),
        salary_overlap(spec.salary.lower, spec.salary.upper),
        HasRelated(NOTES, spec.has_notes) if spec.has_notes is not None else None,
        deadline_clause(spec, now),
    )


def build_list_predicate(spec: FilterSpec, clock: Clock = utc_now) -> Predicate:
    """Filters AND search: the predicate used by the listing endpoint"""
    predicate = all_of(
        compile_filters(spec, now=clock()),
        build_search_clause(spec.search, spec.search_fields),
    )
    logger.debug(f"Compiled filters for user {spec.user_id}: {predicate}")
    return predicate
