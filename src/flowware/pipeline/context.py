"""Pipeline – per-call Context and its factory."""
from __future__ import annotations

import dataclasses
from typing import Any, Generic, Iterable, TypeVar

Req = TypeVar("Req", bound=tuple)
Res = TypeVar("Res")


@dataclasses.dataclass(eq=False)
class Context(Generic[Req, Res]):
    """Mutable record shared by the middleware chain and the action of one call.

    ``req`` holds the positional arguments of the call, ``res`` the evolving
    result (``None`` until the action or a middleware sets it).
    """

    req: Req
    res: Res | None = None

    def set_res(self, value: Any) -> None:
        """Replace ``res``, or update it when *value* is callable.

        A callable receives the current ``res`` and its return value becomes
        the new one. To store a callable as the result wrap it:
        ``ctx.set_res(lambda _: fn)``.
        """
        if callable(value):
            self.res = value(self.res)
            return
        self.res = value


def create_context(args: Iterable[Any]) -> Context[Any, Any]:
    """Build a fresh context for one call."""
    return Context(req=tuple(args))


__all__ = ["Context", "create_context"]
