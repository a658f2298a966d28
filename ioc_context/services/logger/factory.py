from __future__ import annotations

from ioc_context.services.logger.interface import LoggingInterface
from ioc_context.services.logger.memory_logger import MemoryLogger
from ioc_context.services.logger.noop_logger import NoopLogger
from ioc_context.services.logger.pretty_logger import PrettyLogger


class LoggerFactory:
    """Creates loggers by implementation name, one cached instance per name."""

    _implementations: dict[str, type[LoggingInterface]] = {
        "noop": NoopLogger,
        "pretty": PrettyLogger,
        "memory": MemoryLogger,
    }

    def __init__(self, default_impl: str = "noop") -> None:
        self._default_impl = self.check(default_impl)
        self._instances: dict[str, LoggingInterface] = {}

    @classmethod
    def available(cls) -> list[str]:
        return list(cls._implementations)

    @classmethod
    def check(cls, impl_name: str) -> str:
        """Return *impl_name* if it names a known implementation, else raise."""
        if impl_name not in cls._implementations:
            raise ValueError(
                f"Unknown logger implementation: '{impl_name}' "
                f"(available: {', '.join(cls._implementations)})"
            )
        return impl_name

    def create(self, impl_name: str | None = None) -> LoggingInterface:
        name = self.check(impl_name or self._default_impl)
        if name not in self._instances:
            self._instances[name] = self._implementations[name]()
        return self._instances[name]
