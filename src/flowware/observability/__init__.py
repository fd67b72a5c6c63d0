"""Observability – structured logging and correlation context."""

from flowware.observability.correlation import CorrelationContext
from flowware.observability.logging import JsonLoggerFactory, configure_logging, get_logger

__all__ = ["CorrelationContext", "JsonLoggerFactory", "configure_logging", "get_logger"]
