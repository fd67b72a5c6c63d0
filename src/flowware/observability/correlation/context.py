"""Observability – CorrelationContext."""
from __future__ import annotations

from contextvars import ContextVar, Token
from uuid import uuid4

_CTX_VAR: ContextVar[str | None] = ContextVar("_flowware_correlation_id", default=None)


class CorrelationContext:
    """Ambient correlation id stored in a ``ContextVar``."""

    @staticmethod
    def set(correlation_id: str | None) -> Token[str | None]:
        return _CTX_VAR.set(correlation_id)

    @staticmethod
    def get() -> str | None:
        return _CTX_VAR.get()

    @staticmethod
    def reset(token: Token[str | None]) -> None:
        _CTX_VAR.reset(token)

    @staticmethod
    def get_or_new() -> str:
        correlation_id = _CTX_VAR.get()
        if correlation_id is None:
            correlation_id = str(uuid4())
        return correlation_id

    @staticmethod
    def clear() -> None:
        _CTX_VAR.set(None)


__all__ = ["CorrelationContext"]
