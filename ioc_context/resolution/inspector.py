"""Discovers the dependency names a callable wants injected.

Explicit metadata wins: a ``__inject__`` sequence on the callable (or, for
classes, anywhere on the class hierarchy), usually set with :func:`inject`.
Without metadata the signature is introspected, unless introspection is
switched off, in which case nothing is injected and only explicit arguments
reach the callable.
"""

from __future__ import annotations

import inspect as _inspect
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, TypeVar

INJECT_ATTR = "__inject__"

_POSITIONAL = (
    _inspect.Parameter.POSITIONAL_ONLY,
    _inspect.Parameter.POSITIONAL_OR_KEYWORD,
)

T = TypeVar("T")


def inject(*names: str) -> Callable[[T], T]:
    """Declare the dependency names of a function or class explicitly.

    Usage::

        @inject("db", "cache")
        class Repository:
            def __init__(self, db, cache): ...
    """

    def decorator(target: T) -> T:
        setattr(target, INJECT_ATTR, tuple(names))
        return target

    return decorator


@dataclass(frozen=True)
class CallableSpec:
    """What the injector needs to know about one callable."""

    names: tuple[str, ...]
    # Positional slots the callable takes; None means unbounded (*args).
    max_positional: int | None

    def accepts(self, count: int) -> bool:
        return self.max_positional is None or count <= self.max_positional


class ParameterInspector:
    """Stateless apart from the introspection switch."""

    def __init__(self, introspect: bool = True) -> None:
        self.introspect = introspect

    def inspect(self, func: Any, bound: bool = False) -> CallableSpec:
        """Return the injection spec for *func*.

        *bound* means *func* will be invoked with a receiver as its first
        argument; for plain functions that parameter is not a dependency.
        Classes never count their receiver since their signature omits it.
        """
        declared = _declared_names(func)
        sig = _signature(func)
        if sig is None:
            return CallableSpec(_clean(declared or ()), 0)

        params = list(sig.parameters.values())
        if bound and not _inspect.isclass(func) and params and params[0].kind in _POSITIONAL:
            params = params[1:]

        positional = [p for p in params if p.kind in _POSITIONAL]
        variadic = any(p.kind is _inspect.Parameter.VAR_POSITIONAL for p in params)
        max_positional = None if variadic else len(positional)

        if declared is not None:
            names = _clean(declared)
        elif self.introspect:
            names = tuple(p.name for p in positional if p.default is _inspect.Parameter.empty)
        else:
            names = ()
        return CallableSpec(names, max_positional)


def _declared_names(func: Any) -> Iterable[str] | None:
    declared = getattr(func, INJECT_ATTR, None)
    if isinstance(declared, str):
        return [declared]
    return declared


def _clean(names: Iterable[str]) -> tuple[str, ...]:
    cleaned = tuple(str(name).strip() for name in names)
    # A lone blank entry is how an empty parameter list gets written by hand.
    return () if cleaned == ("",) else cleaned


def _signature(func: Any) -> _inspect.Signature | None:
    try:
        return _inspect.signature(func)
    except (TypeError, ValueError):
        return None
