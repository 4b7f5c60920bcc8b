"""
Job Application ORM Model
SQLAlchemy model for tracked job applications
"""
import uuid
from sqlalchemy import (
    Column, String, Integer, Boolean, DateTime, Numeric, Text, ForeignKey, Index, Uuid
)
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from core.config import settings
from core.database import Base
from domain.enums import ApplicationStatus, Priority


class JobApplicationModel(Base):
    """Job application table ORM model"""

    __tablename__ = "job_applications"

    # Primary Key
    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)

    # Foreign Keys
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    company_id = Column(Uuid, ForeignKey("companies.id"), nullable=False, index=True)

    # Position
    status = Column(String(50), nullable=False, default=ApplicationStatus.APPLIED.value, index=True)
    job_title = Column(String(255), nullable=False)
    job_level = Column(String(50), nullable=True)
    employment_type = Column(String(50), nullable=True)
    priority = Column(Integer, nullable=False, default=Priority.LOW.value)

    # Salary band (same currency)
    salary_min = Column(Numeric(14, 2), nullable=True)
    salary_max = Column(Numeric(14, 2), nullable=True)
    currency = Column(String(10), nullable=False, default=settings.DEFAULT_CURRENCY)

    location = Column(String(255), nullable=True)
    is_remote = Column(Boolean, nullable=False, default=False)
    is_favorite = Column(Boolean, nullable=False, default=False)
    source = Column(String(100), nullable=True)
    job_url = Column(String(1000), nullable=True)

    # Dates
    applied_date = Column(DateTime(timezone=True), nullable=False)
    response_deadline = Column(DateTime(timezone=True), nullable=True)

    # Free text
    personal_notes = Column(Text, nullable=True)
    job_description = Column(Text, nullable=True)
    requirements = Column(Text, nullable=True)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now(), nullable=True)

    # Relationships
    user = relationship("UserModel", backref="job_applications")
    company = relationship("CompanyModel", backref="job_applications")
    notes = relationship("NoteModel", back_populates="job_application", cascade="all, delete-orphan")

    __table_args__ = (
        Index("idx_job_applications_user_created", "user_id", "created_at"),
        Index("idx_job_applications_user_status", "user_id", "status"),
        Index("idx_job_applications_user_applied", "user_id", "applied_date"),
    )

    def __repr__(self):
        return f"<JobApplicationModel {self.job_title} ({self.status})>"
