"""FastAPI adapter – FastAPIExceptionMapper."""
from __future__ import annotations

from typing import Any, Callable

from pagination_options.adapters.fastapi.deps import _require_fastapi


class FastAPIExceptionMapper:
    """Register pagination-options error → HTTP status-code mappings on a FastAPI app.

    Error body schema::

        {"code": "unknown_aggregate", "message": "...", "detail": {...}, "errors": [...]}

    Mappings
    --------
    ``ValidationError`` (``InvalidQueryError``, ``UnknownAggregateError``) → 400
    ``ConfigError``                                                    → 500
    """

    def __init__(self) -> None:
        _require_fastapi()
        from pagination_options.config.validation import ConfigError
        from pagination_options.kernel.errors import ValidationError

        self._map: list[tuple[type[Exception], int]] = [
            (ValidationError, 400),
            (ConfigError, 500),
        ]

    def register(self, app: Any) -> None:
        """Register the error handlers on a ``FastAPI`` or ``Starlette`` app."""
        from fastapi.responses import JSONResponse  # type: ignore[import-untyped]

        for exc_type, status in self._map:

            def make_handler(code: int) -> Callable[[Any, Any], Any]:
                def handler(request: Any, exc: Any) -> Any:  # noqa: ARG001
                    return JSONResponse(status_code=code, content=exc.to_dict())

                return handler

            app.add_exception_handler(exc_type, make_handler(status))


__all__ = ["FastAPIExceptionMapper"]
