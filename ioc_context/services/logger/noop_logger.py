from typing import Any

from ioc_context.services.logger.interface import LoggingInterface


class NoopLogger(LoggingInterface):
    """Discards every entry. Default for containers that were not given a logger."""

    def debug(self, msg: str, **ctx: Any) -> None:
        pass

    def error(self, msg: str, **ctx: Any) -> None:
        pass
