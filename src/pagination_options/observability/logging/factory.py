"""Observability – LoggingFactory."""
from __future__ import annotations

import logging
from typing import Any, Literal

import structlog

Renderer = Literal["json", "console"]


class LoggingFactory:
    """Route structlog events through stdlib logging with a JSON or console renderer."""

    @staticmethod
    def configure(level: int = logging.INFO, renderer: Renderer = "json") -> None:
        final: Any
        if renderer == "json":
            final = structlog.processors.JSONRenderer()
        elif renderer == "console":
            final = structlog.dev.ConsoleRenderer(colors=False)
        else:
            raise ValueError(f"Unknown renderer: {renderer!r}")

        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]
        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                final,
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)


__all__ = ["LoggingFactory"]
