class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidTimeFormat(ValidationError):
    """Raised when a time of day is not a valid "HH:MM" string."""


class PolicyViolation(DomainError):
    """Raised when an attendance transition's precondition does not hold."""


class QuotaExceeded(DomainError):
    """Raised when a short leave is consumed beyond the monthly cap."""


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""


class SheetsSyncError(DomainError):
    """Raised when the spreadsheet sink rejects or cannot be reached."""
