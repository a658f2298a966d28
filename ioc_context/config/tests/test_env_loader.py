from pathlib import Path

from ioc_context.config.env_loader import load_env_file, parse_env_lines


def _write(root: Path, name: str, text: str) -> None:
    env_dir = root / ".env"
    env_dir.mkdir(exist_ok=True)
    (env_dir / f"{name}.env").write_text(text)


def test_load_valid_env_file(tmp_path: Path):
    _write(tmp_path, "local", "IOC_LOG_IMPL=pretty\nIOC_INTROSPECT=false\n")
    result = load_env_file("local", project_root=tmp_path)
    assert result == {"IOC_LOG_IMPL": "pretty", "IOC_INTROSPECT": "false"}


def test_load_missing_file_returns_empty(tmp_path: Path):
    assert load_env_file("nonexistent", project_root=tmp_path) == {}


def test_defaults_to_working_directory(tmp_path: Path, monkeypatch):
    _write(tmp_path, "dev", "KEY=val\n")
    monkeypatch.chdir(tmp_path)
    assert load_env_file("dev") == {"KEY": "val"}


def test_comments_and_blank_lines():
    assert parse_env_lines(["# a comment", "", "KEY=val", "  # another", "garbage"]) == {"KEY": "val"}


def test_quoted_values_and_export_prefix():
    result = parse_env_lines(["SINGLE='hello'", 'DOUBLE="world"', "export EXPORTED=yes"])
    assert result == {"SINGLE": "hello", "DOUBLE": "world", "EXPORTED": "yes"}


def test_value_with_equals_sign():
    assert parse_env_lines(["URL=sqlite:///db?opt=1"]) == {"URL": "sqlite:///db?opt=1"}
