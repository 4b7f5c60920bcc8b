"""ORM Models Package"""

from .company import CompanyModel
from .job_application import JobApplicationModel
from .note import NoteModel
from .user import UserModel

__all__ = [
    "CompanyModel",
    "JobApplicationModel",
    "NoteModel",
    "UserModel",
]
