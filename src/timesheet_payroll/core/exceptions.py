class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InputError(ValidationError):
    """Raised when a computation input cannot be interpreted (e.g. a bad month string)."""
