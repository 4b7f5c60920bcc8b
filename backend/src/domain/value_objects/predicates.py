"""
Predicate Value Objects
Immutable, store-agnostic boolean conditions over stored entities.

Field names are attribute names of the queried entity. For job
applications a dotted name such as ``company.name`` reaches through the
related Company. Store adapters translate the tree into their own query
language.
"""
from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union


COMPANY_NAME = "company.name"
NOTES = "notes"


@dataclass(frozen=True)
class Equals:
    """field == value"""
    field: str
    value: Any


@dataclass(frozen=True)
class In:
    """field is one of values"""
    field: str
    values: Tuple[Any, ...]


@dataclass(frozen=True)
class Range:
    """Bounded comparison; every bound that is set must hold"""
    field: str
    gte: Any = None
    lte: Any = None
    lt: Any = None


@dataclass(frozen=True)
class Contains:
    """Substring match on a text field"""
    field: str
    value: str


@dataclass(frozen=True)
class IsNull:
    """field IS NULL (or IS NOT NULL when is_null is False)"""
    field: str
    is_null: bool = True


@dataclass(frozen=True)
class HasRelated:
    """At least one (present) or zero (not present) related records"""
    relation: str
    present: bool = True


@dataclass(frozen=True)
class And:
    operands: Tuple["Predicate", ...]


@dataclass(frozen=True)
class Or:
    operands: Tuple["Predicate", ...]


@dataclass(frozen=True)
class MatchNothing:
    """Always false"""


Predicate = Union[Equals, In, Range, Contains, IsNull, HasRelated, And, Or, MatchNothing]


def all_of(*predicates: Optional[Predicate]) -> Predicate:
    """Conjunction of the given predicates.

    ``None`` operands are skipped, nested conjunctions are flattened and a
    single MatchNothing operand turns the whole conjunction into MatchNothing.
    An empty conjunction is an empty And, which matches everything.
    """
    operands = []
    for predicate in predicates:
        if predicate is None:
            continue
        if isinstance(predicate, MatchNothing):
            return MatchNothing()
        if isinstance(predicate, And):
            operands.extend(predicate.operands)
        else:
            operands.append(predicate)

    if len(operands) == 1:
        return operands[0]
    return And(tuple(operands))


def any_of(*predicates: Optional[Predicate]) -> Predicate:
    """Disjunction of the given predicates; MatchNothing when nothing is left"""
    operands = tuple(
        p for p in predicates
        if p is not None and not isinstance(p, MatchNothing)
    )
    if not operands:
        return MatchNothing()
    if len(operands) == 1:
        return operands[0]
    return Or(operands)


def between(field: str, lower: Any = None, upper: Any = None) -> Optional[Predicate]:
    """Closed or half-open range on one field.

    Returns None when neither bound is given and MatchNothing when the
    bounds are inverted (lower > upper).
    """
    if lower is None and upper is None:
        return None
    if lower is not None and upper is not None and lower > upper:
        return MatchNothing()
    return Range(field, gte=lower, lte=upper)


def membership(field: str, value: Any) -> Optional[Predicate]:
    """Equals for a scalar, In for a list or tuple"""
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        if not value:
            return None
        return In(field, tuple(value))
    return Equals(field, value)
