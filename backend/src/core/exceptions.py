"""
Custom Exception Hierarchy
Domain and application-level exceptions
"""
from typing import Dict, Optional


class DomainException(Exception):
    """Base exception for all domain errors"""
    pass


class AuthenticationException(DomainException):
    """Authentication failed"""
    pass


class ValidationException(DomainException):
    """Data validation failed

    ``errors`` maps every offending field to its message so a single
    response can report all of them.
    """

    def __init__(self, field: str, message: str, errors: Optional[Dict[str, str]] = None):
        self.field = field
        self.message = message
        self.errors = errors or {field: message}
        super().__init__(f"{field}: {message}")

    @classmethod
    def from_errors(cls, errors: Dict[str, str]) -> "ValidationException":
        """Build one exception out of several field errors"""
        fields = ", ".join(sorted(errors))
        return cls(fields, "Invalid query parameters", errors=dict(errors))


class RepositoryException(DomainException):
    """Database operation failed"""
    pass


class ResourceNotFoundException(DomainException):
    """Requested resource not found"""

    def __init__(self, resource_type: str, identifier: str):
        self.resource_type = resource_type
        self.identifier = identifier
        super().__init__(f"{resource_type} not found: {identifier}")
