"""Kernel – framework-agnostic building blocks."""

from pagination_options.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InvalidQueryError,
    UnknownAggregateError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InvalidQueryError",
    "UnknownAggregateError",
    "ValidationError",
]
