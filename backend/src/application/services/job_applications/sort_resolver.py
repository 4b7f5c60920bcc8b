"""
Sort Resolver
Maps public sort keys to concrete attribute paths
"""
from typing import Callable, Dict, Optional, Union

from core.exceptions import ValidationException
from domain.enums import SortDirection, SortField
from domain.value_objects import SortInstruction, SortSpec


SortResolver = Callable[[SortDirection], SortInstruction]


def _own(attribute: str) -> SortResolver:
    """Sort on the application's own attribute"""
    return lambda direction: SortInstruction(attribute, direction)


def _related(relation: str, attribute: str) -> SortResolver:
    """Sort on an attribute reached through a relation"""
    path = f"{relation}.{attribute}"
    return lambda direction: SortInstruction(path, direction)


# New virtual keys only need a new entry here
SORT_RESOLVERS: Dict[SortField, SortResolver] = {
    SortField.CREATED_AT: _own("created_at"),
    SortField.APPLIED_DATE: _own("applied_date"),
    SortField.JOB_TITLE: _own("job_title"),
    SortField.PRIORITY: _own("priority"),
    SortField.SALARY_MIN: _own("salary_min"),
    SortField.SALARY_MAX: _own("salary_max"),
    SortField.COMPANY_NAME: _related("company", "name"),
}


def parse_sort(
    sort_by: Optional[str] = None,
    sort_order: Optional[str] = None
) -> SortSpec:
    """
    Validate raw sortBy / sortOrder values

    Args:
        sort_by: Public sort key, defaults to createdAt
        sort_order: "asc" or "desc", defaults to desc

    Returns:
        SortSpec

    Raises:
        ValidationException: listing every invalid value
    """
    errors = {}
    field = SortField.CREATED_AT
    direction = SortDirection.DESC

    if sort_by is not None:
        try:
            field = SortField(sort_by)
        except ValueError:
            allowed = ", ".join(f.value for f in SortField)
            errors["sortBy"] = f"must be one of: {allowed}"

    if sort_order is not None:
        try:
            direction = SortDirection(sort_order)
        except ValueError:
            errors["sortOrder"] = "must be one of: asc, desc"

    if errors:
        raise ValidationException.from_errors(errors)

    return SortSpec(field=field, direction=direction)


def resolve_sort(spec: Union[SortSpec, str]) -> SortInstruction:
    """Turn a SortSpec (or a bare sort key) into a SortInstruction"""
    if isinstance(spec, str):
        spec = parse_sort(spec)

    resolver = SORT_RESOLVERS.get(spec.field)
    if resolver is None:
        raise ValidationException("sortBy", f"unsupported sort key: {spec.field}")
    return resolver(spec.direction)
