"""Errors raised by the container itself.

Messages are part of the public contract and must stay verbatim. Exceptions
raised by registered callables are never wrapped in these.
"""

from __future__ import annotations

from collections.abc import Sequence


class ContainerError(Exception):
    """Base class for every error the container raises on its own."""


class UnknownDependencyError(ContainerError, LookupError):
    """A resolved or injected name is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown dependency: {name}")
        self.name = name


class NotFoundForInstantiationError(ContainerError, LookupError):
    """A raw lookup (``get(name, raw=True)`` or ``instantiate(name)``) missed."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Could not instantiate type not found: {name}")
        self.name = name


class CircularDependencyError(ContainerError):
    """A name was requested again while it was still being resolved."""

    def __init__(self, path: Sequence[str]) -> None:
        self.path = tuple(path)
        super().__init__("Circular reference: " + " -> ".join(self.path))
