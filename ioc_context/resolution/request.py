from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from ioc_context.resolution.errors import CircularDependencyError

if TYPE_CHECKING:
    from ioc_context.resolution.resolver import Resolver

_IN_PROGRESS: Any = object()


class ResolutionRequest:
    """Visitation state for one top-level ``get``/``call``/``instantiate``.

    A request is created per public call and dropped when that call returns
    or raises, so cycle tracking never leaks between calls while memoized
    singletons in the registry are still shared.
    """

    def __init__(self, resolver: Resolver) -> None:
        self.resolver = resolver
        self.visiting: dict[str, Any] = {}
        self.path: list[str] = []

    def get(self, name: str, args: Sequence[Any] | None = None) -> Any:
        name = name.strip()
        self.path.append(name)
        if self.visiting.get(name) is _IN_PROGRESS:
            self.resolver.logger.error("Circular reference detected", path=list(self.path))
            raise CircularDependencyError(self.path)

        self.visiting[name] = _IN_PROGRESS
        value = self.resolver.resolve(self, name, args)
        self.visiting[name] = value
        return value
