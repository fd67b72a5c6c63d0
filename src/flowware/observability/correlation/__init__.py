"""Observability – ambient correlation id."""
from flowware.observability.correlation.context import CorrelationContext

__all__ = ["CorrelationContext"]
