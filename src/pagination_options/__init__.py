"""
pagination_options – translate HTTP query parameters into pagination options.

Import path convention::

    from pagination_options.application.pagination import OptionsBuilder
    from pagination_options.config import OptionsConfig, QueryMode
    from pagination_options.kernel.errors import InvalidQueryError, UnknownAggregateError
    from pagination_options.adapters.fastapi import pagination_options_dep
"""

from pagination_options.application.pagination import (
    OptionsBuilder,
    PaginationOptions,
    build_pagination_options,
)
from pagination_options.config import OptionsConfig, QueryMode
from pagination_options.kernel.errors import InvalidQueryError, UnknownAggregateError

__version__ = "0.1.0"
__all__ = [
    "InvalidQueryError",
    "OptionsBuilder",
    "OptionsConfig",
    "PaginationOptions",
    "QueryMode",
    "UnknownAggregateError",
    "__version__",
    "build_pagination_options",
]
