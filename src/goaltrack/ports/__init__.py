"""Ports - interfaces/protocols for external dependencies."""

from .objective_store import ObjectiveStore

__all__ = [
    "ObjectiveStore",
]
