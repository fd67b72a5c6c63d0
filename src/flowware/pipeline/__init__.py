"""Pipeline – middleware composition around a single action."""
from flowware.pipeline.compose import Runner, compose, validate_chain
from flowware.pipeline.context import Context, create_context
from flowware.pipeline.flow import Flow, create_controller
from flowware.pipeline.middleware import Middleware, MiddlewareBase, Next, ensure_middleware
from flowware.pipeline.middlewares import (
    CorrelationMiddleware,
    LoggingMiddleware,
    ValidationMiddleware,
)
from flowware.pipeline.scope import Scope, ScopePosition

__all__ = [
    "Context",
    "CorrelationMiddleware",
    "Flow",
    "LoggingMiddleware",
    "Middleware",
    "MiddlewareBase",
    "Next",
    "Runner",
    "Scope",
    "ScopePosition",
    "ValidationMiddleware",
    "compose",
    "create_context",
    "create_controller",
    "ensure_middleware",
    "validate_chain",
]
