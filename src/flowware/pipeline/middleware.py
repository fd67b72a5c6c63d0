"""Pipeline – Middleware and Next types."""
from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Union

from flowware.errors import MiddlewareTypeError

if TYPE_CHECKING:
    from flowware.pipeline.context import Context

Next = Callable[[], Awaitable[Any]]
Middleware = Callable[["Context[Any, Any]", Next], Union[Awaitable[Any], Any]]


class MiddlewareBase(abc.ABC):
    """Single node in the middleware chain.

    Subclasses run code before and after awaiting ``next_()``; returning
    without calling it short-circuits the rest of the chain. Plain function
    middleware may call ``next_()`` without awaiting it; the dispatcher then
    awaits the downstream chain once the function returns.
    """

    @abc.abstractmethod
    async def __call__(self, context: Context[Any, Any], next_: Next) -> Any: ...


def ensure_middleware(middleware: Any) -> Middleware:
    """Return *middleware* unchanged, or raise :class:`MiddlewareTypeError`."""
    if not callable(middleware):
        raise MiddlewareTypeError(f"Middleware must be callable, got {middleware!r}")
    return middleware


__all__ = ["Middleware", "MiddlewareBase", "Next", "ensure_middleware"]
