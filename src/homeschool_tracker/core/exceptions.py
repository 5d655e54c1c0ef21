class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when an operation references an entity id that does not exist."""


class StorageError(DomainError):
    """Raised when the underlying persistence layer fails."""
