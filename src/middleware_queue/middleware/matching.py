"""Type identifiers for relational insertion.

An entry is either a *typed unit* (an instance of some middleware class,
or a :class:`MiddlewareDefinition` naming one) or a *raw callable*
(function, lambda, method, partial). Only typed units have an identifier.
"""

from __future__ import annotations

import functools
import types
from typing import Any

from .definition import MiddlewareDefinition

_RAW_CALLABLE_TYPES: tuple[type[Any], ...] = (
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.BuiltinMethodType,
    types.MethodWrapperType,
    types.WrapperDescriptorType,
    types.MethodDescriptorType,
    functools.partial,
)


def type_identifier(entry: object) -> type[Any] | None:
    """Return the concrete middleware class of *entry*, or ``None``.

    ``None`` means the entry is a raw callable and can never be matched.
    """
    if isinstance(entry, MiddlewareDefinition):
        return entry.middleware_cls
    if isinstance(entry, _RAW_CALLABLE_TYPES):
        return None
    return type(entry)


def type_names(cls: type[Any]) -> frozenset[str]:
    """Names under which *cls* can be referenced by string."""
    return frozenset(
        (cls.__name__, cls.__qualname__, f"{cls.__module__}.{cls.__qualname__}")
    )


def matches(entry: object, identifier: type[Any] | str) -> bool:
    """Check whether *entry*'s concrete type is *identifier*.

    Classes compare by identity, so subclasses do not match their base.
    Strings compare against the short, qualified and dotted module names.
    """
    cls = type_identifier(entry)
    if cls is None:
        return False
    if isinstance(identifier, str):
        return identifier in type_names(cls)
    return cls is identifier


def find_first(
    entries: list[Any],
    identifier: type[Any] | str,
) -> int | None:
    """Index of the first entry matching *identifier*, if any."""
    for index, entry in enumerate(entries):
        if matches(entry, identifier):
            return index
    return None
