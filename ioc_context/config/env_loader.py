"""Reads container settings from ``.env/<name>.env`` files.

Format is ``KEY=VALUE`` per line:
- blank lines and ``#`` comment lines are skipped
- an optional leading ``export`` is ignored, so files can be sourced by a shell
- matching single or double quotes around a value are stripped
- everything after the first ``=`` is the value; inline comments are kept
"""

from pathlib import Path


def load_env_file(env_name: str, project_root: Path | None = None) -> dict[str, str]:
    """Load ``<project_root>/.env/<env_name>.env``. A missing file yields ``{}``.

    *project_root* defaults to the current working directory.
    """
    root = project_root or Path.cwd()
    env_file = root / ".env" / f"{env_name}.env"
    if not env_file.is_file():
        return {}
    return parse_env_lines(env_file.read_text().splitlines())


def parse_env_lines(lines: list[str]) -> dict[str, str]:
    result: dict[str, str] = {}
    for raw in lines:
        line = raw.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        if line.startswith("export "):
            line = line[len("export "):].lstrip()
        key, _, value = line.partition("=")
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
            value = value[1:-1]
        result[key.strip()] = value
    return result
