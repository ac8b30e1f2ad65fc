"""QueueRunner — drive the entries of a MiddlewareQueue in order."""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING, Any

from .definition import MiddlewareDefinition

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from .queue import MiddlewareQueue

    NextHandler = Callable[[Any], Awaitable[Any]]

logger = logging.getLogger(__name__)


def resolve(entry: Any) -> Any:
    """Turn a queue entry into something callable.

    Definitions are built; every other entry is used as is.
    """
    if isinstance(entry, MiddlewareDefinition):
        return entry.build()
    return entry


class QueueRunner:
    """Runs a message through a queue, then through *handler_fn*.

    The queue is read once, at construction, through ``count()`` and
    ``get(i)`` in increasing order; later changes to the queue do not
    affect an existing runner. Entry ``i`` is awaited as
    ``unit(message, next_handler)`` where ``next_handler`` continues at
    entry ``i + 1``, so the first entry is the outermost.
    """

    def __init__(
        self,
        queue: MiddlewareQueue,
        handler_fn: NextHandler,
    ) -> None:
        self._units = [resolve(queue.get(i)) for i in range(queue.count())]
        self._handler_fn = handler_fn
        logger.debug("Built runner over %d middleware", len(self._units))

    def __len__(self) -> int:
        return len(self._units)

    async def dispatch(self, message: Any, index: int = 0) -> Any:
        """Hand *message* to the unit at *index*, or to the handler past the end."""
        if index >= len(self._units):
            return await self._handler_fn(message)
        next_handler = functools.partial(self.dispatch, index=index + 1)
        return await self._units[index](message, next_handler)

    async def __call__(self, message: Any) -> Any:
        return await self.dispatch(message)


def build_pipeline(queue: MiddlewareQueue, handler_fn: NextHandler) -> QueueRunner:
    """Build a runner for *queue* ending at *handler_fn*."""
    return QueueRunner(queue, handler_fn)
