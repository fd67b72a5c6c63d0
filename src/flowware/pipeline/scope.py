"""Pipeline – Scope: an isolated, extensible copy of a flow's chain."""
from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from flowware.errors import InvalidScopePositionError
from flowware.observability.logging import get_logger
from flowware.pipeline.middleware import Middleware, ensure_middleware

if TYPE_CHECKING:
    from flowware.pipeline.flow import Flow

T = TypeVar("T")

_log = get_logger(__name__)


class ScopePosition(str, enum.Enum):
    """Where :meth:`Scope.register` inserts a middleware."""

    PREFIX = "prefix"
    SUFFIX = "suffix"


class Scope(Generic[T]):
    """Callable sharing its flow's action but owning its own middleware chain.

    The chain starts as a copy of the flow's global chain; later global
    registrations are not seen, and scope registrations never reach the flow
    or sibling scopes.
    """

    def __init__(self, flow: Flow[T], middlewares: list[Middleware]) -> None:
        self._flow = flow
        self._middlewares = middlewares

    @property
    def middleware(self) -> tuple[Middleware, ...]:
        return tuple(self._middlewares)

    async def __call__(self, *args: Any) -> T:
        return await self._flow.execute(self._middlewares, args)

    def register(self, position: ScopePosition | str, middleware: Middleware) -> None:
        """Insert *middleware* at the head (``prefix``) or tail (``suffix``)."""
        try:
            where = ScopePosition(position)
        except ValueError:
            raise InvalidScopePositionError(position) from None
        ensure_middleware(middleware)
        if where is ScopePosition.PREFIX:
            self._middlewares.insert(0, middleware)
        else:
            self._middlewares.append(middleware)
        if not self._flow.settings.trace_calls:
            return
        _log.debug(
            "scope.middleware_registered",
            position=where.value,
            middleware_count=len(self._middlewares),
        )


__all__ = ["Scope", "ScopePosition"]
