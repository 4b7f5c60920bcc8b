"""
Stats Aggregator
Status / priority breakdowns, recent applications and success rate
"""
import asyncio
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List, Mapping
from uuid import UUID

from loguru import logger

from application.repositories.interfaces import IJobApplicationStore
from domain.entities import ApplicationSummary
from domain.enums import ApplicationStatus, Priority, Projection, SortDirection, SUCCESSFUL_STATUSES
from domain.value_objects import SortInstruction
from domain.value_objects.predicates import Equals


@dataclass(frozen=True)
class StatusCount:
    status: ApplicationStatus
    count: int


@dataclass(frozen=True)
class PriorityCount:
    priority: int
    label: str
    count: int


@dataclass(frozen=True)
class ApplicationStats:
    total_applications: int
    status_breakdown: List[StatusCount]
    priority_breakdown: List[PriorityCount]
    recent_applications: List[ApplicationSummary]
    success_rate: float


def success_rate(total: int, status_counts: Mapping[ApplicationStatus, int]) -> float:
    """
    Percentage of applications that reached an offer or were accepted

    Rounded half-up to two decimals; 0 when there are no applications.
    """
    if total == 0:
        return 0.0

    successful = sum(status_counts.get(s, 0) for s in SUCCESSFUL_STATUSES)
    rate = Decimal(successful * 100) / Decimal(total)
    return float(rate.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def _priority_label(priority: Any) -> str:
    try:
        return Priority(priority).label
    except ValueError:
        return "Unknown"


class StatsAggregator:
    """Dashboard statistics for one user"""

    def __init__(self, store: IJobApplicationStore, recent_limit: int = 5):
        self.store = store
        self.recent_limit = recent_limit

    async def aggregate(self, user_id: UUID) -> ApplicationStats:
        """Run the four independent queries concurrently and combine them"""
        ownership = Equals("user_id", user_id)

        total, by_status, by_priority, recent = await asyncio.gather(
            self.store.count(ownership),
            self.store.group_by("status", ownership),
            self.store.group_by("priority", ownership),
            self.store.find_many(
                ownership,
                SortInstruction("created_at", SortDirection.DESC),
                skip=0,
                take=self.recent_limit,
                projection=Projection.SUMMARY,
            ),
        )

        status_counts: Dict[ApplicationStatus, int] = {
            ApplicationStatus(status): count for status, count in by_status.items()
        }
        status_breakdown = sorted(
            (StatusCount(status, count) for status, count in status_counts.items()),
            key=lambda s: (-s.count, s.status.value),
        )
        priority_breakdown = [
            PriorityCount(priority, _priority_label(priority), count)
            for priority, count in sorted(by_priority.items())
        ]

        rate = success_rate(total, status_counts)
        logger.debug(f"Stats for user {user_id}: total={total}, success_rate={rate}")

        return ApplicationStats(
            total_applications=total,
            status_breakdown=status_breakdown,
            priority_breakdown=priority_breakdown,
            recent_applications=list(recent),
            success_rate=rate,
        )
