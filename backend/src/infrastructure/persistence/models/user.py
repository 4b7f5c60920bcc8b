"""
User ORM Model
Owner of job applications; credentials live with the auth service
"""
import uuid
from sqlalchemy import Column, String, DateTime, Uuid
from sqlalchemy.sql import func

from core.database import Base


class UserModel(Base):
    """User table ORM model"""

    __tablename__ = "users"

    # Primary Key
    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)

    email = Column(String(255), unique=True, nullable=False, index=True)
    full_name = Column(String(255), nullable=False)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now(), nullable=True)

    def __repr__(self):
        return f"<UserModel {self.email}>"
