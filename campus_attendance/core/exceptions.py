class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class ConcurrentAttemptError(DomainError):
    """Raised when an attendance attempt is already in progress."""
