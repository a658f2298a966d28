"""Name-based IoC container.

Values are registered under string names and resolved on demand. Callables
get their dependencies injected by parameter name (or by an explicit
``__inject__`` list, see :func:`ioc_context.resolution.inspector.inject`),
and whatever ``get`` produces is kept as a singleton for this container.

    container = Container()
    container.register("settings", {"dsn": "sqlite://"})
    container.register("repository", Repository)   # Repository(settings)
    repo = container.get("repository")
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from ioc_context.config.context import ContainerConfig
from ioc_context.resolution.inspector import ParameterInspector
from ioc_context.resolution.registry import Kind, Registry
from ioc_context.resolution.resolver import Resolver
from ioc_context.services.logger.factory import LoggerFactory
from ioc_context.services.logger.interface import LoggingInterface

_MISSING: Any = object()


class Container:
    """Registry of named producers plus the entry points that resolve them."""

    def __init__(
        self,
        config: ContainerConfig | None = None,
        logger: LoggingInterface | None = None,
    ) -> None:
        self.config = config or ContainerConfig()
        self.log = logger or LoggerFactory(default_impl=self.config.log_impl).create()
        self._registry = Registry()
        self._resolver = Resolver(
            self._registry,
            self,
            ParameterInspector(introspect=self.config.introspect),
            self.log,
        )

    def register(
        self,
        name: str | Mapping[str, Any],
        value: Any = _MISSING,
        kind: Kind | str | None = None,
    ) -> None:
        """Register *value* under *name*, replacing any earlier registration.

        *kind* may be ``"object"`` or ``"function"`` (or the matching
        :class:`Kind`) to stop a callable from being invoked on resolution.
        Passing a single mapping registers every name in it with an
        inferred kind.
        """
        if isinstance(name, Mapping):
            if value is not _MISSING or kind is not None:
                raise TypeError("Bulk registration takes a single mapping argument")
            registrations = self._registry.register_many(name)
        elif value is _MISSING:
            raise TypeError(f"No value given for registration '{name}'")
        else:
            registrations = [self._registry.register(name, value, kind)]

        for registration in registrations:
            self.log.debug("Registered dependency", name=registration.name, kind=registration.kind.value)

    def get(self, name: str, raw: bool = False) -> Any:
        """Resolve *name*, or with ``raw=True`` return what was registered untouched."""
        if raw:
            return self._registry.lookup_raw(name)
        return self._resolver.request().get(name)

    def call(self, method: Any, args: Sequence[Any] | None = None, context: Any = None) -> Any:
        """Call *method* with its dependencies injected. Nothing is memoized."""
        return self._resolver.call(self._resolver.request(), method, args, receiver=context)

    def instantiate(self, constructor: Any, args: Sequence[Any] | None = None) -> Any:
        """Build a new value from *constructor* or the raw value registered under that name.

        Unlike :meth:`get` the result is never memoized.
        """
        if isinstance(constructor, str):
            constructor = self._registry.lookup_raw(constructor)
        return self._resolver.instantiate(self._resolver.request(), constructor, args)

    def has(self, name: str) -> bool:
        return name in self._registry

    def unregister(self, name: str) -> None:
        self._registry.unregister(name)
        self.log.debug("Unregistered dependency", name=name.strip())

    def names(self) -> list[str]:
        return self._registry.names()

    def __contains__(self, name: object) -> bool:
        return name in self._registry
