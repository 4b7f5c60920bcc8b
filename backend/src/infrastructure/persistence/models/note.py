"""
Note ORM Model
Notes attached to a job application (managed by the notes API)
"""
import uuid
from sqlalchemy import Column, String, DateTime, Text, ForeignKey, Uuid
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from core.database import Base


class NoteModel(Base):
    """Note table ORM model"""

    __tablename__ = "notes"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    job_application_id = Column(
        Uuid, ForeignKey("job_applications.id", ondelete="CASCADE"), nullable=False, index=True
    )

    title = Column(String(255), nullable=True)
    content = Column(Text, nullable=False)
    note_date = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    job_application = relationship("JobApplicationModel", back_populates="notes")

    def __repr__(self):
        return f"<NoteModel {self.id}>"
