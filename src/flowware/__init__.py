"""
flowware – async middleware composition around a single action.

Import path convention::

    from flowware import create_controller, compose
    from flowware.pipeline import Context, MiddlewareBase, ScopePosition
    from flowware.errors import NextCalledMultipleTimesError
"""

from flowware.pipeline import (
    Context,
    Flow,
    Middleware,
    MiddlewareBase,
    Next,
    Scope,
    ScopePosition,
    compose,
    create_context,
    create_controller,
)

__version__ = "0.1.0"
__all__ = [
    "Context",
    "Flow",
    "Middleware",
    "MiddlewareBase",
    "Next",
    "Scope",
    "ScopePosition",
    "__version__",
    "compose",
    "create_context",
    "create_controller",
]
