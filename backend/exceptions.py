"""
Custom exception classes for the application.

This module defines domain-specific exceptions raised by the schema and
transfer layers. Storage constraint errors from SQLAlchemy are not wrapped
here and reach the caller unchanged.
"""


class ApplicationError(Exception):
    """Base exception for all application errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class IdentityGenerationError(ApplicationError):
    """Raised when a new entity identifier cannot be generated"""

    def __init__(self, entity: str, message: str | None = None):
        details = {"entity": entity}
        msg = message or f"Failed to generate identity for new {entity}"
        super().__init__(msg, details)


class IdentityReassignmentError(ApplicationError):
    """Raised when code tries to change an identity that is already assigned"""

    def __init__(self, entity: str, current_id: str):
        details = {"entity": entity, "id": current_id}
        super().__init__(f"{entity} identity {current_id} cannot be reassigned", details)


class MalformedIdentityError(ApplicationError):
    """Raised when a stored identity string is not a valid UUID"""

    def __init__(self, entity: str, field: str, value):
        details = {"entity": entity, "field": field, "value": value}
        super().__init__(f"{entity}.{field} is not a valid UUID: {value!r}", details)


class IncompleteRecordError(ApplicationError):
    """Raised when an entity cannot be projected into its response DTO"""

    def __init__(self, entity: str, fields: list[str]):
        details = {"entity": entity, "fields": fields}
        super().__init__(f"{entity} record is missing or has invalid values for: {', '.join(fields)}", details)


class ValidationError(ApplicationError):
    """Raised when request payload validation fails"""

    def __init__(self, message: str, violations: list | None = None):
        self.violations = list(violations or [])
        details = {"violations": [v.model_dump(exclude_none=True) for v in self.violations]}
        super().__init__(message, details)


class DatabaseError(ApplicationError):
    """Raised when database operations fail"""

    def __init__(self, operation: str, message: str):
        details = {"operation": operation}
        super().__init__(message, details)
