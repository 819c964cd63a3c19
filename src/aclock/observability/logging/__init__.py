"""Observability – structlog configuration and processors."""
from aclock.observability.logging.factory import JsonLoggerFactory
from aclock.observability.logging.processors import AdjustedTimeStamper, get_logger

__all__ = [
    "AdjustedTimeStamper",
    "JsonLoggerFactory",
    "get_logger",
]
