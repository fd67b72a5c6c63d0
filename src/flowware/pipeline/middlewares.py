"""Pipeline – built-in middleware implementations."""
from __future__ import annotations

import time
from typing import Any, Callable

import structlog

from flowware.observability.correlation import CorrelationContext
from flowware.observability.logging import get_logger
from flowware.pipeline.context import Context
from flowware.pipeline.middleware import MiddlewareBase, Next


class LoggingMiddleware(MiddlewareBase):
    """Log the inner chain's completion or failure with timing."""

    def __init__(self, name: str = "flow") -> None:
        self._name = name
        self._log = get_logger(__name__)

    async def __call__(self, context: Context[Any, Any], next_: Next) -> Any:
        start = time.perf_counter()
        try:
            result = await next_()
        except Exception as exc:
            duration = (time.perf_counter() - start) * 1000
            self._log.error(
                "flow.step_failed",
                flow=self._name,
                args=len(context.req),
                error=type(exc).__name__,
                duration_ms=round(duration, 2),
            )
            raise
        duration = (time.perf_counter() - start) * 1000
        self._log.info(
            "flow.step_completed",
            flow=self._name,
            args=len(context.req),
            duration_ms=round(duration, 2),
        )
        return result


class ValidationMiddleware(MiddlewareBase):
    """Call ``validator(*context.req)`` before continuing; its exceptions propagate."""

    def __init__(self, validator: Callable[..., Any]) -> None:
        self._validator = validator

    async def __call__(self, context: Context[Any, Any], next_: Next) -> Any:
        self._validator(*context.req)
        return await next_()


class CorrelationMiddleware(MiddlewareBase):
    """Bind a ``correlation_id`` to logs emitted by the inner chain.

    Reuses the ambient id from :class:`CorrelationContext` when one is set,
    otherwise generates a uuid4 for the duration of the call.
    """

    async def __call__(self, context: Context[Any, Any], next_: Next) -> Any:
        correlation_id = CorrelationContext.get_or_new()
        token = CorrelationContext.set(correlation_id)
        try:
            with structlog.contextvars.bound_contextvars(correlation_id=correlation_id):
                return await next_()
        finally:
            CorrelationContext.reset(token)


__all__ = ["CorrelationMiddleware", "LoggingMiddleware", "ValidationMiddleware"]
