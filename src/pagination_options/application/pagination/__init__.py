"""Application pagination – request query parameters → pagination options."""
from pagination_options.application.pagination.builder import (
    OptionsBuilder,
    build_pagination_options,
)
from pagination_options.application.pagination.options import PaginationOptions, QueryInput
from pagination_options.application.pagination.query_filter import (
    filter_allowed,
    filter_query,
    flatten,
    is_allowed,
    unflatten,
)

__all__ = [
    "OptionsBuilder",
    "PaginationOptions",
    "QueryInput",
    "build_pagination_options",
    "filter_allowed",
    "filter_query",
    "flatten",
    "is_allowed",
    "unflatten",
]
