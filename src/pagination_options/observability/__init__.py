"""Observability – structured logging."""

from pagination_options.observability.logging import Logger, LoggingFactory, get_logger

__all__ = ["Logger", "LoggingFactory", "get_logger"]
