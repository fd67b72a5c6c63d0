"""Error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    └── CompositionError             (composition.py)
        ├── MiddlewareTypeError          (TypeError)
        ├── ActionTypeError              (TypeError)
        ├── InvalidScopePositionError    (ValueError)
        └── NextCalledMultipleTimesError (RuntimeError)
"""

from flowware.errors.base import BaseError
from flowware.errors.composition import (
    ActionTypeError,
    CompositionError,
    InvalidScopePositionError,
    MiddlewareTypeError,
    NextCalledMultipleTimesError,
)

__all__ = [
    "ActionTypeError",
    "BaseError",
    "CompositionError",
    "InvalidScopePositionError",
    "MiddlewareTypeError",
    "NextCalledMultipleTimesError",
]
