class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when a document entering the aggregator is malformed."""


class NotFoundError(DomainError):
    """Raised when a requested student, module or career does not exist."""
