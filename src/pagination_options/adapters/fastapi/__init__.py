"""FastAPI adapter – options dependency and exception mapper."""
from pagination_options.adapters.fastapi.deps import pagination_options_dep, query_input_from_params
from pagination_options.adapters.fastapi.exception_mapper import FastAPIExceptionMapper

__all__ = ["FastAPIExceptionMapper", "pagination_options_dep", "query_input_from_params"]
