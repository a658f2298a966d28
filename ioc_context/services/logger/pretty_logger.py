import sys
from datetime import datetime, timezone
from typing import Any, TextIO

from ioc_context.services.logger.interface import LoggingInterface

_COLORS = {
    "DEBUG": "\033[36m",  # cyan
    "ERROR": "\033[31m",  # red
}
_RESET = "\033[0m"


class PrettyLogger(LoggingInterface):
    """One colorized line per event, ``key=value`` context appended."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def debug(self, msg: str, **ctx: Any) -> None:
        self._write("DEBUG", msg, ctx)

    def error(self, msg: str, **ctx: Any) -> None:
        self._write("ERROR", msg, ctx)

    def _write(self, level: str, msg: str, ctx: dict[str, Any]) -> None:
        stamp = datetime.now(timezone.utc).strftime("%H:%M:%S")
        fields = "".join(f"  {key}={value!r}" for key, value in ctx.items())
        # stderr is looked up per call so redirected streams are honoured.
        stream = self._stream if self._stream is not None else sys.stderr
        print(f"{_COLORS[level]}{stamp} [{level}]{_RESET} ioc: {msg}{fields}", file=stream)
