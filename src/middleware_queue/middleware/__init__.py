"""Middleware queue and its collaborators."""

from .definition import MiddlewareDefinition
from .matching import matches, type_identifier
from .pipeline import QueueRunner, build_pipeline
from .queue import MiddlewareQueue

__all__ = [
    "MiddlewareDefinition",
    "MiddlewareQueue",
    "QueueRunner",
    "build_pipeline",
    "matches",
    "type_identifier",
]
