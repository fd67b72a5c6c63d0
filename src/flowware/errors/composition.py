"""Composition errors — invalid chains, actions and ``next`` misuse.

Each class also derives from the matching builtin so callers can catch
``TypeError`` / ``ValueError`` / ``RuntimeError`` without importing flowware.
"""

from __future__ import annotations

from typing import Any

from flowware.errors.base import BaseError


class CompositionError(BaseError):
    """Base class for errors raised by the composition engine itself."""

    default_code = "composition_error"


class MiddlewareTypeError(CompositionError, TypeError):
    """The middleware chain is not a sequence of callables."""

    default_code = "invalid_middleware"

    def __init__(
        self,
        message: str = "Middleware must be composed of callables",
        *,
        position: int | None = None,
        **kwargs: Any,
    ) -> None:
        if position is not None:
            kwargs.setdefault("detail", {"position": position})
        super().__init__(message, **kwargs)
        self.position = position


class ActionTypeError(CompositionError, TypeError):
    """The terminal action handed to a controller is not callable."""

    default_code = "invalid_action"

    def __init__(self, message: str = "`action` must be callable", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class InvalidScopePositionError(CompositionError, ValueError):
    """A scope registration used a position other than prefix/suffix."""

    default_code = "invalid_scope_position"

    def __init__(self, position: object, **kwargs: Any) -> None:
        super().__init__(
            f"Scope position must be 'prefix' or 'suffix', got {position!r}",
            detail={"position": repr(position)},
            **kwargs,
        )
        self.position = position


class NextCalledMultipleTimesError(CompositionError, RuntimeError):
    """A middleware invoked its ``next`` continuation more than once."""

    default_code = "next_called_multiple_times"

    def __init__(self, index: int | None = None, **kwargs: Any) -> None:
        detail = {"index": index} if index is not None else None
        super().__init__("next() called multiple times", detail=detail, **kwargs)
        self.index = index


__all__ = [
    "ActionTypeError",
    "CompositionError",
    "InvalidScopePositionError",
    "MiddlewareTypeError",
    "NextCalledMultipleTimesError",
]
