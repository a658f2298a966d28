"""Named registrations owned by one container.

Each name maps to a :class:`Registration` holding the raw value, its kind and,
once resolved, the memoized instance. Re-registering a name stores a fresh
Registration, so nothing resolved under the old value survives.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ioc_context.resolution.errors import NotFoundForInstantiationError, UnknownDependencyError


class Kind(Enum):
    UNCLASSIFIED = "unclassified"
    OBJECT = "object"
    FACTORY = "function"
    CONSTRUCTOR = "constructor"

    @classmethod
    def coerce(cls, kind: Kind | str | None) -> Kind:
        """Map a registration-time kind to a member.

        Only OBJECT and FACTORY can be forced by the caller; anything else is
        left for the resolver to infer.
        """
        if isinstance(kind, str):
            try:
                kind = cls(kind.strip().lower())
            except ValueError:
                return cls.UNCLASSIFIED
        if kind in (cls.OBJECT, cls.FACTORY):
            return kind
        return cls.UNCLASSIFIED


_UNSET: Any = object()


@dataclass
class Registration:
    name: str
    value: Any
    kind: Kind = Kind.UNCLASSIFIED
    instance: Any = field(default=_UNSET, repr=False)

    @property
    def resolved(self) -> bool:
        return self.instance is not _UNSET

    def memoize(self, instance: Any) -> Any:
        """Store the resolved instance; the registration is an object from now on."""
        self.instance = instance
        self.kind = Kind.OBJECT
        return instance


class Registry:
    """Mapping of name -> Registration."""

    def __init__(self) -> None:
        self._registrations: dict[str, Registration] = {}

    def register(self, name: str, value: Any, kind: Kind | str | None = None) -> Registration:
        if not isinstance(name, str):
            raise TypeError(f"Registration name must be a string, got {type(name).__name__}")
        registration = Registration(name.strip(), value, Kind.coerce(kind))
        self._registrations[registration.name] = registration
        return registration

    def register_many(self, values: Mapping[str, Any]) -> list[Registration]:
        return [self.register(name, value) for name, value in values.items()]

    def unregister(self, name: str) -> None:
        try:
            del self._registrations[name.strip()]
        except KeyError:
            raise UnknownDependencyError(name.strip()) from None

    def lookup(self, name: str) -> Registration | None:
        return self._registrations.get(name.strip())

    def lookup_raw(self, name: str) -> Any:
        """Return the registered value as-is, without resolving it."""
        registration = self.lookup(name)
        if registration is None:
            raise NotFoundForInstantiationError(name.strip())
        return registration.value

    def names(self) -> list[str]:
        return list(self._registrations)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip() in self._registrations

    def __iter__(self) -> Iterator[str]:
        return iter(self._registrations)

    def __len__(self) -> int:
        return len(self._registrations)
