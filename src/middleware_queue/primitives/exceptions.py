"""Exceptions raised by middleware-queue."""

from __future__ import annotations


class MiddlewareQueueError(Exception):
    """Root exception for the middleware-queue package."""


class MiddlewareNotFoundError(MiddlewareQueueError, LookupError):
    """Raised when no queued middleware matches a type identifier.

    Usage: ``MiddlewareQueue.insert_before`` raises this when the anchor
    middleware cannot be located. The queue is left untouched.
    """

    def __init__(self, identifier: object) -> None:
        self.identifier = identifier
        name = getattr(identifier, "__qualname__", identifier)
        super().__init__(f"No middleware matching '{name}' could be found.")
