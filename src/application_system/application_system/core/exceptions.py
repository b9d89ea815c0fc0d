class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced application does not exist."""


class ConflictError(DomainError):
    """Raised when a status change is not allowed from the current status."""


class StoreError(DomainError):
    """Raised when the record store fails to read or persist data."""
