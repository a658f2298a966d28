from abc import ABC, abstractmethod
from typing import Any


class LoggingInterface(ABC):
    """Where the container reports wiring events.

    Only two levels exist: ``debug`` for registrations and resolutions,
    ``error`` for failures reported just before the matching exception is
    raised. Context travels as keyword arguments.
    """

    @abstractmethod
    def debug(self, msg: str, **ctx: Any) -> None: ...

    @abstractmethod
    def error(self, msg: str, **ctx: Any) -> None: ...
