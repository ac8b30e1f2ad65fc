"""MiddlewareQueue — ordered, index-addressable middleware container."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..primitives.exceptions import MiddlewareNotFoundError
from .matching import find_first, type_identifier

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

logger = logging.getLogger(__name__)


def _describe(entry: object) -> str:
    cls = type_identifier(entry)
    if cls is not None:
        return cls.__name__
    if hasattr(entry, "__qualname__"):
        return str(entry.__qualname__)
    return repr(entry)


def _as_block(middleware: Any) -> list[Any]:
    """A list or tuple is a block of entries; anything else is one entry."""
    if isinstance(middleware, (list, tuple)):
        return list(middleware)
    return [middleware]


class MiddlewareQueue:
    """Holds middleware in execution order.

    The queue only manages membership and ordering; executors read it
    through :meth:`count` and :meth:`get`. Every mutating method returns
    the queue itself so calls can be chained::

        queue = MiddlewareQueue()
        queue.add(errors).add(routing).insert_before(RoutingMiddleware, auth)

    Entries are opaque. Relational insertion (:meth:`insert_before`,
    :meth:`insert_after`) matches on the entry's concrete class; raw
    callables never match.

    Every insertion method accepts a list or tuple as a block: its items
    are inserted as separate entries, in order, starting at the target
    position.
    """

    def __init__(self, middleware: Iterable[Any] | None = None) -> None:
        self._queue: list[Any] = list(middleware) if middleware is not None else []

    def _splice(self, position: int, middleware: Any) -> None:
        self._queue[position:position] = _as_block(middleware)

    def _log_insert(
        self,
        middleware: Any,
        position: int,
        relation: str | None = None,
        anchor: object = None,
    ) -> None:
        if not logger.isEnabledFor(logging.DEBUG):
            return
        names = ", ".join(_describe(entry) for entry in _as_block(middleware))
        if relation is None:
            logger.debug("Inserted middleware [%s] at %d", names, position)
        else:
            logger.debug(
                "Inserted middleware [%s] at %d, %s %r",
                names,
                position,
                relation,
                anchor,
            )

    # ── Mutation ─────────────────────────────────────────────────

    def add(self, middleware: Any) -> MiddlewareQueue:
        """Append *middleware* to the end of the queue."""
        position = len(self._queue)
        self._splice(position, middleware)
        self._log_insert(middleware, position)
        return self

    def push(self, middleware: Any) -> MiddlewareQueue:
        """Alias of :meth:`add`."""
        return self.add(middleware)

    def prepend(self, middleware: Any) -> MiddlewareQueue:
        """Insert *middleware* at the front of the queue."""
        self._splice(0, middleware)
        self._log_insert(middleware, 0)
        return self

    def insert_at(self, index: int, middleware: Any) -> MiddlewareQueue:
        """Insert *middleware* so that it starts at *index*.

        Negative indexes count from the end: the position is
        ``max(0, count + index)``, so ``-1`` places the entry before the
        current last one. Indexes past the end append.
        """
        size = len(self._queue)
        position = max(0, size + index) if index < 0 else min(index, size)
        self._splice(position, middleware)
        self._log_insert(middleware, position, "requested", index)
        return self

    def insert_before(
        self, identifier: type[Any] | str, middleware: Any
    ) -> MiddlewareQueue:
        """Insert *middleware* right before the first entry of type *identifier*.

        Raises
        ------
        MiddlewareNotFoundError
            If no entry matches. The queue is not modified.
        """
        position = find_first(self._queue, identifier)
        if position is None:
            raise MiddlewareNotFoundError(identifier)
        self._splice(position, middleware)
        self._log_insert(middleware, position, "before", identifier)
        return self

    def insert_after(
        self, identifier: type[Any] | str, middleware: Any
    ) -> MiddlewareQueue:
        """Insert *middleware* right after the first entry of type *identifier*.

        Unlike :meth:`insert_before`, a missing anchor is not an error:
        the middleware is appended to the end instead.
        """
        position = find_first(self._queue, identifier)
        if position is None:
            logger.debug("No middleware matching %r; appending", identifier)
            return self.add(middleware)
        self._splice(position + 1, middleware)
        self._log_insert(middleware, position + 1, "after", identifier)
        return self

    # ── Retrieval ────────────────────────────────────────────────

    def get(self, index: int) -> Any | None:
        """Return the entry at *index*, or ``None`` when out of bounds.

        Negative indexes are out of bounds; they do not wrap around.
        """
        if 0 <= index < len(self._queue):
            return self._queue[index]
        return None

    def count(self) -> int:
        """Number of queued entries."""
        return len(self._queue)

    def __len__(self) -> int:
        return len(self._queue)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._queue))

    def __repr__(self) -> str:
        names = ", ".join(_describe(entry) for entry in self._queue)
        return f"{type(self).__name__}([{names}])"
