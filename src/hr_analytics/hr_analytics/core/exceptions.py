class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class ReportComputationError(DomainError):
    """Raised when a report cannot be computed for the whole cohort."""

    def __init__(self, message: str = "Failed to calculate burnout analytics"):
        super().__init__(message)
