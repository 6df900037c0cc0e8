class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced employee or task does not exist."""


class QualityMarkLockedError(ValidationError):
    """Raised when a quality mark is saved a second time."""


class DuplicateKpiEntryError(ValidationError):
    """Raised when a KPI score already exists for the employee and month."""
