"""middleware-queue — ordered container for request-handling middleware.

Build a pipeline declaratively (append, prepend, positional and
type-relative insertion) and hand it to an executor.
"""

from __future__ import annotations

# ── Middleware ───────────────────────────────────────────────────
from .middleware import (
    MiddlewareDefinition,
    MiddlewareQueue,
    QueueRunner,
    build_pipeline,
    matches,
    type_identifier,
)

# ── Primitives ───────────────────────────────────────────────────
from .primitives import MiddlewareNotFoundError, MiddlewareQueueError

__all__ = [
    "MiddlewareDefinition",
    "MiddlewareNotFoundError",
    "MiddlewareQueue",
    "MiddlewareQueueError",
    "QueueRunner",
    "build_pipeline",
    "matches",
    "type_identifier",
]
