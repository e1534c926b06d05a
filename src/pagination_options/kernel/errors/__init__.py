"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   └── ValidationError
    │       ├── InvalidQueryError
    │       └── UnknownAggregateError
    └── ApplicationError         (base.py)
        └── ConfigError          (pagination_options.config.validation)
"""

from pagination_options.kernel.errors.base import ApplicationError, BaseError
from pagination_options.kernel.errors.domain import (
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
