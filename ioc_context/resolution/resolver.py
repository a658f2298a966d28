"""Resolution algorithm: classify, inject, instantiate, memoize.

Classification of a registration happens once. A non-callable value (or one
registered explicitly as an object or factory) is returned verbatim; any
other callable is treated as a constructor and its result memoized. From then
on the registration only ever hands back that memoized instance.
"""

from __future__ import annotations

import inspect
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from ioc_context.resolution.errors import UnknownDependencyError
from ioc_context.resolution.inspector import ParameterInspector
from ioc_context.resolution.registry import Kind, Registry
from ioc_context.resolution.request import ResolutionRequest
from ioc_context.services.logger.interface import LoggingInterface

if TYPE_CHECKING:
    from ioc_context.config.container import Container


class Resolver:
    def __init__(
        self,
        registry: Registry,
        container: Container,
        inspector: ParameterInspector,
        logger: LoggingInterface,
    ) -> None:
        self.registry = registry
        self.container = container
        self.inspector = inspector
        self.logger = logger

    def request(self) -> ResolutionRequest:
        """Start a fresh request for one top-level call."""
        return ResolutionRequest(self)

    def resolve(self, request: ResolutionRequest, name: str, args: Sequence[Any] | None = None) -> Any:
        registration = self.registry.lookup(name)
        if registration is None:
            self.logger.error("Unknown dependency", name=name, path=list(request.path))
            raise UnknownDependencyError(name)
        if registration.resolved:
            return registration.instance

        if registration.kind is Kind.UNCLASSIFIED and not callable(registration.value):
            registration.kind = Kind.OBJECT

        if registration.kind in (Kind.OBJECT, Kind.FACTORY):
            self.logger.debug("Resolved registration", name=name, kind=registration.kind.value)
            return registration.memoize(registration.value)

        registration.kind = Kind.CONSTRUCTOR
        instance = self.instantiate(request, registration.value, args)
        self.logger.debug("Resolved registration", name=name, kind=registration.kind.value)
        return registration.memoize(instance)

    def call(
        self,
        request: ResolutionRequest,
        func: Any,
        args: Sequence[Any] | None = None,
        receiver: Any = None,
    ) -> Any:
        """Invoke *func* with explicit *args* followed by injected dependencies.

        Explicit arguments fill the leading positions as given, ``None``
        included; each remaining declared name is resolved through *request*.
        The owning container is appended as a trailing argument when the
        callable has room for it. With a *receiver*, a plain function gets it
        as its first argument and a class has ``__init__`` run on it. A bound
        method is rebound so the receiver replaces its ``self``.
        """
        if receiver is not None and inspect.ismethod(func):
            func = func.__func__
        resolved = self.arguments(request, func, args, bound=receiver is not None)

        if receiver is None:
            return func(*resolved)
        if inspect.isclass(func):
            return func.__init__(receiver, *resolved)
        return func(receiver, *resolved)

    def arguments(
        self,
        request: ResolutionRequest,
        func: Any,
        args: Sequence[Any] | None = None,
        bound: bool = False,
    ) -> list[Any]:
        """Positional arguments for *func*: explicit ones, injected ones, then the container if it fits."""
        spec = self.inspector.inspect(func, bound=bound)
        resolved = list(args) if args is not None else []
        for t in range(len(resolved), len(spec.names)):
            resolved.append(request.get(spec.names[t]))

        if spec.accepts(len(resolved) + 1):
            resolved.append(self.container)
        return resolved

    def instantiate(self, request: ResolutionRequest, constructor: Any, args: Sequence[Any] | None = None) -> Any:
        """Build a value from *constructor*.

        Classes are built the way ``type.__call__`` builds them, with the
        injected arguments handed to ``__new__`` (unless it is
        ``object.__new__``) and then to ``__init__``, which runs exactly once.
        A non-None return from the initializer replaces the instance. Any
        other callable acts as a factory and its return value is the result.
        """
        if not inspect.isclass(constructor):
            return self.call(request, constructor, args)

        resolved = self.arguments(request, constructor, args, bound=True)
        if constructor.__new__ is object.__new__:
            instance = object.__new__(constructor)
        else:
            instance = constructor.__new__(constructor, *resolved)
        if not isinstance(instance, constructor):
            return instance

        returned = constructor.__init__(instance, *resolved)
        return instance if returned is None else returned
