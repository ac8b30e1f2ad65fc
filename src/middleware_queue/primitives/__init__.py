"""Primitive building blocks shared across the package."""

from .exceptions import MiddlewareNotFoundError, MiddlewareQueueError

__all__ = [
    "MiddlewareNotFoundError",
    "MiddlewareQueueError",
]
