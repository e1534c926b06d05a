"""FastAPI adapter – request → QueryInput and the options dependency."""

from typing import Any, Callable

from pagination_options.application.pagination import OptionsBuilder, PaginationOptions, QueryInput
from pagination_options.config import OptionsConfig


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'pagination-options[fastapi]' to use the FastAPI adapter"
        ) from exc


def query_input_from_params(query_params: Any) -> QueryInput:
    """Decode a Starlette ``QueryParams`` (or any multi-dict with ``getlist``).

    Keys given once map to ``str``; repeated keys map to ``list[str]``.
    """
    decoded: dict[str, str | list[str]] = {}
    for key in query_params.keys():
        values = query_params.getlist(key)
        decoded[key] = values[0] if len(values) == 1 else list(values)
    return decoded


def pagination_options_dep(
    config: OptionsConfig | None = None,
    builder: OptionsBuilder | None = None,
) -> Callable[..., PaginationOptions]:
    """Return a dependency that builds :class:`PaginationOptions` per request.

    Usage::

        ListOptions = Annotated[
            PaginationOptions,
            Depends(pagination_options_dep(OptionsConfig(allowed_query_fields={"status"}))),
        ]

        @router.get("/orders")
        async def list_orders(options: ListOptions): ...
    """
    _require_fastapi()
    from fastapi import Request  # type: ignore[import-untyped]

    options_builder = builder or OptionsBuilder()

    def dependency(request: Request) -> PaginationOptions:
        return options_builder.build(query_input_from_params(request.query_params), config)

    return dependency


__all__ = ["pagination_options_dep", "query_input_from_params"]
