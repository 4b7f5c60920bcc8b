"""
Pagination Value Objects
Page/limit and offset/limit contracts with derived metadata
"""
from dataclasses import dataclass


# Largest OFFSET a 64-bit signed bind parameter can carry
MAX_OFFSET = 2 ** 63 - 1


def total_pages(total: int, limit: int) -> int:
    """ceil(total / limit) using integer arithmetic"""
    if limit < 1:
        raise ValueError("Limit must be at least 1")
    return -(-total // limit)


def max_page(limit: int) -> int:
    """Highest page whose skip still fits in MAX_OFFSET"""
    if limit < 1:
        raise ValueError("Limit must be at least 1")
    return MAX_OFFSET // limit + 1


@dataclass(frozen=True)
class PageSpec:
    """Requested page (1-based) and page size"""

    page: int = 1
    limit: int = 10

    def __post_init__(self):
        """Validate page and limit"""
        if self.page < 1:
            raise ValueError("Page must be at least 1")
        if self.limit < 1:
            raise ValueError("Limit must be at least 1")
        if self.page > max_page(self.limit):
            raise ValueError("Page is too large")

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class PageInfo:
    """Pagination block of a page/limit listing response"""

    page: int
    limit: int
    total: int
    pages: int

    @classmethod
    def for_total(cls, spec: PageSpec, total: int) -> "PageInfo":
        return cls(
            page=spec.page,
            limit=spec.limit,
            total=total,
            pages=total_pages(total, spec.limit),
        )


@dataclass(frozen=True)
class OffsetPageInfo:
    """Pagination block of an offset/limit listing response"""

    total: int
    limit: int
    offset: int
    has_more: bool

    @classmethod
    def for_total(cls, offset: int, limit: int, total: int) -> "OffsetPageInfo":
        if offset < 0:
            raise ValueError("Offset cannot be negative")
        if limit < 1:
            raise ValueError("Limit must be at least 1")
        if offset > MAX_OFFSET:
            raise ValueError("Offset is too large")
        return cls(
            total=total,
            limit=limit,
            offset=offset,
            has_more=offset + limit < total,
        )
