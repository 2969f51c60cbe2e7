class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidDate(ValidationError):
    """Raised when a calendar date is missing or cannot be parsed."""


class InvalidTimeFormat(ValidationError):
    """Raised when a wall-clock value is missing, malformed or outside 00:00-23:59."""


class IncompleteRecord(ValidationError):
    """Raised when an open attendance record (no exit punch) is metered."""
