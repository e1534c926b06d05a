"""Domain errors — faults in the client-supplied query parameters."""

from __future__ import annotations

from typing import Any

from pagination_options.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when request input violates a translation rule."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of parameter-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class InvalidQueryError(ValidationError):
    """The ``query`` parameter is not a JSON object."""

    default_code = "invalid_query"

    def __init__(self, message: str = "Invalid query JSON string", **kwargs: Any) -> None:
        kwargs.setdefault("errors", [{"param": "query", "reason": message}])
        super().__init__(message, **kwargs)


class UnknownAggregateError(ValidationError):
    """A requested aggregate key has no predefined pipeline."""

    default_code = "unknown_aggregate"

    def __init__(self, aggregate_key: str, **kwargs: Any) -> None:
        msg = f"Invalid aggregate: {aggregate_key}"
        kwargs.setdefault("detail", {"aggregate": aggregate_key})
        kwargs.setdefault("errors", [{"param": "aggregate", "value": aggregate_key}])
        super().__init__(msg, **kwargs)
        self.aggregate_key = aggregate_key


__all__ = [
    "DomainError",
    "InvalidQueryError",
    "UnknownAggregateError",
    "ValidationError",
]
