"""Custom exceptions for the myapp application."""

from typing import Any, Dict, Optional


class MyAppException(Exception):
    """Base exception for all myapp application errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


# ==================== Domain Exceptions ====================

class DomainException(MyAppException):
    """Base exception for domain layer errors."""
    pass


class ValidationError(DomainException):
    """Raised when domain validation fails."""
    pass


class InvalidArgumentError(ValidationError):
    """Raised when a request carries an identifier where it must not, or lacks one.

    ``error_key`` is the short localisation key sent back to the client
    (``idexists``, ``idnull``, ``idinvalid``, ...).
    """

    def __init__(self, message: str, entity_name: str, error_key: str):
        self.entity_name = entity_name
        self.error_key = error_key
        super().__init__(
            message,
            error_code=error_key,
            details={"entity_name": entity_name, "error_key": error_key}
        )


class EntityNotFoundError(DomainException):
    """Raised when an entity is not found."""

    def __init__(self, entity_type: str, entity_id: Any, error_key: str = "idnotfound"):
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.error_key = error_key
        message = f"{entity_type} with id '{entity_id}' not found"
        super().__init__(
            message,
            error_code=error_key,
            details={"entity_type": entity_type, "entity_id": entity_id}
        )


class MethodNotAllowedError(DomainException):
    """Raised when a mutation is attempted on the collection path without an id."""

    def __init__(self, entity_type: str, method: str):
        message = f"{method} is not supported on the {entity_type} collection"
        super().__init__(message, details={"entity_type": entity_type, "method": method})


# ==================== Infrastructure Exceptions ====================

class InfrastructureException(MyAppException):
    """Base exception for infrastructure layer errors."""
    pass


# ==================== Storage Exceptions ====================

class StorageError(InfrastructureException):
    """Base exception for storage-related errors."""
    pass


class RepositoryError(StorageError):
    """Raised when repository operations fail."""
    pass
