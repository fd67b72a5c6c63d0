"""Pipeline – compose(): the middleware dispatcher."""
from __future__ import annotations

import inspect
from typing import Any, Awaitable, Callable, Sequence

from flowware.errors import MiddlewareTypeError, NextCalledMultipleTimesError
from flowware.pipeline.middleware import Middleware

Runner = Callable[..., Awaitable[Any]]


async def _resolved(value: Any = None) -> Any:
    return value


async def _rejected(exc: BaseException) -> Any:
    raise exc


async def _settle(pending: list[Awaitable[Any]], value: Any) -> Any:
    for downstream in pending:
        await downstream
    return value


def _as_awaitable(value: Any) -> Awaitable[Any]:
    if inspect.isawaitable(value):
        return value
    return _resolved(value)


def validate_chain(chain: Sequence[Middleware]) -> None:
    """Raise :class:`MiddlewareTypeError` unless *chain* is a list/tuple of callables."""
    if not isinstance(chain, (list, tuple)):
        raise MiddlewareTypeError(
            f"Middleware stack must be a list or tuple, got {type(chain).__name__}"
        )
    for position, item in enumerate(chain):
        if not callable(item):
            raise MiddlewareTypeError(
                f"Middleware at position {position} is not callable: {item!r}",
                position=position,
            )


def compose(chain: Sequence[Middleware]) -> Runner:
    """Compose *chain* into a runner ``runner(context, next_=None)``.

    The runner calls each middleware with ``(context, next)`` in order; the
    last middleware's ``next`` invokes *next_* (called the same way), and a
    missing *next_* resolves to ``None``. Calling a ``next`` more than once
    fails with :class:`NextCalledMultipleTimesError`. Exceptions raised
    synchronously by a step surface when the returned awaitable is awaited,
    exactly like asynchronous ones.

    A plain (non-async) step that calls ``next`` but returns something other
    than an awaitable has the downstream chain awaited on its behalf before
    its value resolves, so the rest of the chain still runs exactly once.

    The chain is copied, so mutating *chain* later does not affect the runner.
    """
    validate_chain(chain)
    steps: tuple[Middleware, ...] = tuple(chain)

    def runner(context: Any, next_: Middleware | None = None) -> Awaitable[Any]:
        index = -1

        def dispatch(i: int) -> Awaitable[Any]:
            nonlocal index
            if i <= index:
                return _rejected(NextCalledMultipleTimesError(index=i))
            index = i
            if i < len(steps):
                step: Middleware | None = steps[i]
            elif i == len(steps):
                step = next_
            else:
                step = None
            if step is None:
                return _resolved()
            pending: list[Awaitable[Any]] = []

            def next_step() -> Awaitable[Any]:
                downstream = dispatch(i + 1)
                pending.append(downstream)
                return downstream

            try:
                result = step(context, next_step)
            except Exception as exc:
                return _rejected(exc)
            if pending and not inspect.isawaitable(result):
                return _settle(pending, result)
            return _as_awaitable(result)

        return dispatch(0)

    return runner


__all__ = ["Runner", "compose", "validate_chain"]
