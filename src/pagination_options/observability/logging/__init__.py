"""Observability – structured logging port and helpers."""
from pagination_options.observability.logging.protocol import Logger
from pagination_options.observability.logging.factory import LoggingFactory
from pagination_options.observability.logging.processors import get_logger

__all__ = ["Logger", "LoggingFactory", "get_logger"]
