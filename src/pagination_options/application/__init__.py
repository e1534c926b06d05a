"""Application – use-case building blocks (framework-agnostic)."""

from pagination_options.application.pagination import (
    OptionsBuilder,
    PaginationOptions,
    QueryInput,
    build_pagination_options,
)

__all__ = ["OptionsBuilder", "PaginationOptions", "QueryInput", "build_pagination_options"]
