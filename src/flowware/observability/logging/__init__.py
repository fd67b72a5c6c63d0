"""Observability – structlog configuration and logger helpers."""
from flowware.observability.logging.factory import JsonLoggerFactory, configure_logging
from flowware.observability.logging.processors import CorrelationProcessor, get_logger

__all__ = ["CorrelationProcessor", "JsonLoggerFactory", "configure_logging", "get_logger"]
