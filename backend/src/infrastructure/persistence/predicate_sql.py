"""
Predicate -> SQLAlchemy translation
Turns domain predicate trees into WHERE clauses over one mapped table.

A translator knows its root model plus any dotted related paths and
relations; job application statements must join ``companies`` (for
``company.name``). Contains is rendered as ``LIKE '%term%'`` with the
wildcards of the term escaped; letter case follows the database:
case-sensitive on PostgreSQL, ASCII case-insensitive on SQLite.
"""
from enum import Enum
from typing import Any, Dict, Optional

from sqlalchemy import and_, false, or_, true
from sqlalchemy.sql.elements import ColumnElement

from core.exceptions import RepositoryException
from domain.value_objects.predicates import (
    And,
    Contains,
    Equals,
    HasRelated,
    In,
    IsNull,
    MatchNothing,
    Or,
    Predicate,
    Range,
)
from infrastructure.persistence.models import CompanyModel, JobApplicationModel


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


class PredicateTranslator:
    """Translates predicate trees for one root model"""

    _HANDLERS = {
        Equals: "_equals",
        In: "_in",
        Range: "_range",
        Contains: "_contains",
        IsNull: "_is_null",
        HasRelated: "_has_related",
        And: "_and",
        Or: "_or",
        MatchNothing: "_nothing",
    }

    def __init__(
        self,
        model,
        related_columns: Optional[Dict[str, Any]] = None,
        relations: Optional[Dict[str, Any]] = None
    ):
        self.model = model
        self.related_columns = related_columns or {}
        self.relations = relations or {}

    def column_for(self, path: str):
        """Column for an attribute of the model or a dotted related path"""
        if path in self.related_columns:
            return self.related_columns[path]
        if path not in self.model.__table__.columns:
            raise RepositoryException(f"Unknown {self.model.__tablename__} field: {path}")
        return getattr(self.model, path)

    def to_clause(self, predicate: Predicate) -> ColumnElement:
        """Translate a predicate tree into a SQLAlchemy boolean clause"""
        handler = self._HANDLERS.get(type(predicate))
        if handler is None:
            raise RepositoryException(f"Unsupported predicate: {type(predicate).__name__}")
        return getattr(self, handler)(predicate)

    def _equals(self, p: Equals) -> ColumnElement:
        return self.column_for(p.field) == _plain(p.value)

    def _in(self, p: In) -> ColumnElement:
        return self.column_for(p.field).in_([_plain(v) for v in p.values])

    def _range(self, p: Range) -> ColumnElement:
        column = self.column_for(p.field)
        conditions = []
        if p.gte is not None:
            conditions.append(column >= p.gte)
        if p.lte is not None:
            conditions.append(column <= p.lte)
        if p.lt is not None:
            conditions.append(column < p.lt)
        return and_(*conditions) if conditions else true()

    def _contains(self, p: Contains) -> ColumnElement:
        return self.column_for(p.field).contains(p.value, autoescape=True)

    def _is_null(self, p: IsNull) -> ColumnElement:
        column = self.column_for(p.field)
        return column.is_(None) if p.is_null else column.is_not(None)

    def _has_related(self, p: HasRelated) -> ColumnElement:
        relation = self.relations.get(p.relation)
        if relation is None:
            raise RepositoryException(f"Unknown {self.model.__tablename__} relation: {p.relation}")
        return relation.any() if p.present else ~relation.any()

    def _and(self, p: And) -> ColumnElement:
        if not p.operands:
            return true()
        return and_(*(self.to_clause(o) for o in p.operands))

    def _or(self, p: Or) -> ColumnElement:
        if not p.operands:
            return false()
        return or_(*(self.to_clause(o) for o in p.operands))

    def _nothing(self, p: MatchNothing) -> ColumnElement:
        return false()


job_application_predicates = PredicateTranslator(
    JobApplicationModel,
    related_columns={
        "company.id": CompanyModel.id,
        "company.name": CompanyModel.name,
    },
    relations={
        "notes": JobApplicationModel.notes,
    },
)

company_predicates = PredicateTranslator(CompanyModel)
