"""Domain-level exceptions.

Services raise these for rule violations; routes translate them into
400 (ValidationError), 404 (NotFoundError) or 409 (DuplicateError).
"""


class DomainError(Exception):
    """Base class for job application domain errors."""


class NotFoundError(DomainError):
    """Applicant or job posting does not exist."""


class DuplicateError(DomainError):
    """An applicant with this email already exists."""


class ValidationError(DomainError):
    """Request data breaks a business rule, e.g. a non-positive job id."""
