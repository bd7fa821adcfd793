"""
Custom exception classes for the application.

This module defines domain-specific exceptions that provide better error handling
and clearer error messages throughout the data access layer.
"""


class ApplicationError(Exception):
    """Base exception for all application errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(ApplicationError):
    """Raised when validation fails"""

    def __init__(self, message: str, invalid_fields: dict | None = None):
        details = {"invalid_fields": invalid_fields} if invalid_fields else {}
        super().__init__(message, details)


class InvalidCriteriaError(ValidationError):
    """Raised when a criteria entry or page request cannot be translated"""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message, {field: message})


class AttributeResolutionError(ApplicationError):
    """Raised when a field path does not resolve against an entity's mapping"""

    def __init__(self, entity: str, path: str, segment: str, message: str | None = None):
        details = {"entity": entity, "path": path, "segment": segment}
        msg = message or f"'{segment}' is not a valid attribute in path '{path}' of {entity}"
        self.entity = entity
        self.path = path
        self.segment = segment
        super().__init__(msg, details)


class DatabaseError(ApplicationError):
    """Raised when database operations fail"""

    def __init__(self, operation: str, message: str):
        details = {"operation": operation}
        self.operation = operation
        super().__init__(message, details)


class PersistenceError(DatabaseError):
    """Raised when the persistence context fails while executing a repository operation"""

    def __init__(self, operation: str, entity: str, message: str):
        self.entity = entity
        super().__init__(operation, f"{operation} on {entity} failed: {message}")
        self.details["entity"] = entity
