"""Observability – structured logging helpers."""
from valkit.observability.logging.factory import JsonLoggerFactory, configure_logging
from valkit.observability.logging.processors import get_logger

__all__ = [
    "JsonLoggerFactory",
    "configure_logging",
    "get_logger",
]
