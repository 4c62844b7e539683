"""Shared domain error messages and error types."""

from uuid import UUID


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested record does not exist."""


class StorageError(RuntimeError):
    """The record store failed to complete a read or write.

    Raised by database implementations and passed through the domain layer
    unchanged; callers decide whether to retry.
    """


def record_not_found(kind: str, record_id: UUID) -> str:
    """Return message for a missing record."""
    return f"{kind} {record_id} not found"


def negative_value(field_name: str, value: float) -> str:
    """Return message for a value that must not be negative."""
    return f"{field_name} must not be negative (got {value})"


def percentage_out_of_range(value: int) -> str:
    """Return message for a tax-deductible percentage outside 0-100."""
    return f"Tax deductible percentage must be between 0 and 100 (got {value})"
