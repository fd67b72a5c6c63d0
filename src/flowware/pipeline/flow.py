"""Pipeline – Flow controller wrapping a terminal action."""
from __future__ import annotations

import inspect
import time
from typing import Any, Awaitable, Callable, Generic, Sequence, TypeVar, Union

from flowware.config.settings import FlowSettings
from flowware.errors import ActionTypeError
from flowware.observability.logging import get_logger
from flowware.pipeline.compose import compose
from flowware.pipeline.context import Context, create_context
from flowware.pipeline.middleware import Middleware, Next, ensure_middleware
from flowware.pipeline.scope import Scope

T = TypeVar("T")

_log = get_logger(__name__)


def _name_of(fn: Any) -> str:
    return getattr(fn, "__qualname__", None) or type(fn).__name__


class Flow(Generic[T]):
    """Callable controller: runs the registered middleware around *action*.

    Each ``await flow(*args)`` builds a fresh :class:`Context` with
    ``req == args``, runs the global chain, and finally calls
    ``action(*context.req)``, storing its (awaited) value into ``res``.
    The call resolves with ``context.res`` after the whole chain unwinds.

    The chain is snapshotted when a call starts; middleware registered while
    the call is in flight only apply to later calls.

    With ``settings.trace_calls`` enabled the controller logs registrations,
    scope creation and every call through structlog; call
    :func:`~flowware.observability.configure_logging` first to route those
    events through the stdlib root logger.

    Usage::

        flow = create_controller(fetch_user)
        flow.register(auth_middleware)
        user = await flow(42)

        admin = flow.create_scope()
        admin.register("prefix", audit_middleware)
        user = await admin(42)
    """

    def __init__(
        self,
        action: Callable[..., Union[Awaitable[T], T]],
        *,
        settings: FlowSettings | None = None,
    ) -> None:
        if not callable(action):
            raise ActionTypeError(f"`action` must be callable, got {action!r}")
        self._action = action
        self._settings = settings or FlowSettings()
        self._middlewares: list[Middleware] = []

    @property
    def action(self) -> Callable[..., Union[Awaitable[T], T]]:
        return self._action

    @property
    def settings(self) -> FlowSettings:
        return self._settings

    @property
    def middleware(self) -> tuple[Middleware, ...]:
        """Current global chain, in execution order."""
        return tuple(self._middlewares)

    async def __call__(self, *args: Any) -> T:
        return await self.execute(self._middlewares, args)

    def register(self, middleware: Middleware) -> None:
        """Append *middleware* to the global chain."""
        self._middlewares.append(ensure_middleware(middleware))
        if not self._settings.trace_calls:
            return
        _log.debug(
            "flow.middleware_registered",
            action=_name_of(self._action),
            middleware=_name_of(middleware),
            position=len(self._middlewares) - 1,
        )

    def create_scope(self) -> Scope[T]:
        """Return a :class:`Scope` seeded with a copy of the current global chain."""
        scope: Scope[T] = Scope(self, list(self._middlewares))
        if self._settings.trace_calls:
            _log.debug(
                "flow.scope_created",
                action=_name_of(self._action),
                middleware_count=len(self._middlewares),
            )
        return scope

    async def execute(self, chain: Sequence[Middleware], args: Sequence[Any]) -> T:
        """Run *chain* around the action for one call with *args*."""
        context = create_context(args)
        runner = compose(list(chain))

        async def terminal(ctx: Context[Any, Any], _next: Next) -> None:
            result = self._action(*ctx.req)
            if inspect.isawaitable(result):
                result = await result
            ctx.res = result

        if not self._settings.trace_calls:
            await runner(context, terminal)
            return context.res  # type: ignore[return-value]

        name = _name_of(self._action)
        start = time.perf_counter()
        try:
            await runner(context, terminal)
        except Exception as exc:
            _log.debug(
                "flow.call_failed",
                action=name,
                error=type(exc).__name__,
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
            )
            raise
        _log.debug(
            "flow.call_completed",
            action=name,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
        )
        return context.res  # type: ignore[return-value]


def create_controller(
    action: Callable[..., Union[Awaitable[T], T]],
    *,
    settings: FlowSettings | None = None,
) -> Flow[T]:
    """Wrap *action* in a :class:`Flow` with an empty global chain."""
    return Flow(action, settings=settings)


__all__ = ["Flow", "create_controller"]
