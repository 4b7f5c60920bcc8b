"""
Company ORM Model
Shared company directory referenced by job applications
"""
import uuid
from sqlalchemy import Column, String, DateTime, Text, Uuid
from sqlalchemy.sql import func

from core.database import Base


class CompanyModel(Base):
    """Company table ORM model"""

    __tablename__ = "companies"

    # Primary Key
    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)

    name = Column(String(255), unique=True, nullable=False, index=True)
    industry = Column(String(100), nullable=True)
    location = Column(String(255), nullable=True)
    website = Column(String(500), nullable=True)
    description = Column(Text, nullable=True)
    size = Column(String(50), nullable=True)  # e.g. "10000+"
    logo_url = Column(String(500), nullable=True)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now(), nullable=True)

    def __repr__(self):
        return f"<CompanyModel {self.name}>"
