from dataclasses import dataclass
from typing import Any

from ioc_context.services.logger.interface import LoggingInterface


@dataclass
class LogEntry:
    level: str
    msg: str
    ctx: dict[str, Any]


class MemoryLogger(LoggingInterface):
    """Keeps every entry in order so tests can assert on wiring."""

    def __init__(self) -> None:
        self.entries: list[LogEntry] = []

    def debug(self, msg: str, **ctx: Any) -> None:
        self.entries.append(LogEntry("DEBUG", msg, ctx))

    def error(self, msg: str, **ctx: Any) -> None:
        self.entries.append(LogEntry("ERROR", msg, ctx))

    @property
    def messages(self) -> list[str]:
        return [e.msg for e in self.entries]

    def at(self, level: str) -> list[LogEntry]:
        """Entries logged at *level*, ``"DEBUG"`` or ``"ERROR"``."""
        return [e for e in self.entries if e.level == level]
