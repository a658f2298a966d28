"""Container settings, read from the environment.

Precedence, lowest to highest: process environment, the optional env file,
explicit overrides.
"""

from __future__ import annotations

import os
from pathlib import Path

from ioc_context.config.env_loader import load_env_file
from ioc_context.services.logger.factory import LoggerFactory

LOG_IMPL_KEY = "IOC_LOG_IMPL"
INTROSPECT_KEY = "IOC_INTROSPECT"

_TRUE = ("true", "1", "yes", "on")
_FALSE = ("false", "0", "no", "off")


class ContainerConfig:
    def __init__(
        self,
        overrides: dict[str, str] | None = None,
        env_file: str | None = None,
        project_root: Path | None = None,
    ) -> None:
        self._env = dict(os.environ)
        if env_file:
            self._env.update(load_env_file(env_file, project_root=project_root))
        if overrides:
            self._env.update(overrides)

    def get(self, key: str, default: str = "") -> str:
        return self._env.get(key, default)

    @property
    def log_impl(self) -> str:
        """Logger implementation the container creates when none is passed in."""
        return LoggerFactory.check(self.get(LOG_IMPL_KEY, "noop").strip().lower())

    @property
    def introspect(self) -> bool:
        """Whether signatures are read when a callable carries no ``__inject__``."""
        raw = self.get(INTROSPECT_KEY, "true").strip().lower()
        if raw in _TRUE:
            return True
        if raw in _FALSE:
            return False
        raise ValueError(f"Invalid value for {INTROSPECT_KEY}: '{raw}' (expected true or false)")

    def __repr__(self) -> str:
        return f"ContainerConfig(log_impl={self.get(LOG_IMPL_KEY, 'noop')!r}, introspect={self.get(INTROSPECT_KEY, 'true')!r})"
