"""
Sort Value Objects
"""
from dataclasses import dataclass

from ..enums import SortDirection, SortField


@dataclass(frozen=True)
class SortSpec:
    """Requested sort key and direction (single key only)"""

    field: SortField = SortField.CREATED_AT
    direction: SortDirection = SortDirection.DESC


@dataclass(frozen=True)
class SortInstruction:
    """Resolved ordering: an attribute path plus direction.

    ``path`` is a JobApplication attribute or a dotted path through a
    relation (``company.name``). Ties fall back to the store's natural
    order, which is not guaranteed to be stable.
    """

    path: str
    direction: SortDirection = SortDirection.DESC

    @property
    def descending(self) -> bool:
        return self.direction == SortDirection.DESC
