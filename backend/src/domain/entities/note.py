"""
Note Domain Entity
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID


@dataclass(frozen=True)
class Note:
    """Note attached to a job application (read-only here)"""

    id: UUID
    job_application_id: UUID
    content: str
    note_date: datetime
    title: Optional[str] = None
