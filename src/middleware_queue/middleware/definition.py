"""MiddlewareDefinition — a queue entry built on demand."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable


def default_kwargs_factory() -> dict[str, object]:
    """Factory for the mutable ``kwargs`` default."""
    return {}


@dataclass
class MiddlewareDefinition:
    """Describes a middleware without constructing it.

    The definition can be queued like any other entry. Relational
    insertion matches it by *middleware_cls*, so::

        queue.add(MiddlewareDefinition(AuthMiddleware, kwargs={"realm": "api"}))
        queue.insert_before(AuthMiddleware, cors)

    works before any instance exists. Executors call :meth:`build`.
    """

    middleware_cls: type[Any]
    factory: Callable[..., Any] | None = None
    kwargs: dict[str, object] = field(default_factory=default_kwargs_factory)

    def build(self) -> Any:
        """Construct the middleware instance."""
        if self.factory is not None:
            return self.factory(**self.kwargs)
        return self.middleware_cls(**self.kwargs)
