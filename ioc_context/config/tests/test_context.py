from pathlib import Path

import pytest

from ioc_context.config.context import INTROSPECT_KEY, LOG_IMPL_KEY, ContainerConfig


def test_defaults(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv(LOG_IMPL_KEY, raising=False)
    monkeypatch.delenv(INTROSPECT_KEY, raising=False)
    config = ContainerConfig()
    assert config.log_impl == "noop"
    assert config.introspect is True


def test_reads_process_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv(LOG_IMPL_KEY, "Pretty")
    config = ContainerConfig()
    assert config.log_impl == "pretty"


def test_overrides_take_precedence(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv(INTROSPECT_KEY, "true")
    config = ContainerConfig(overrides={INTROSPECT_KEY: "no"})
    assert config.introspect is False


def test_env_file_sits_between_environment_and_overrides(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    env_dir = tmp_path / ".env"
    env_dir.mkdir()
    (env_dir / "test.env").write_text("IOC_LOG_IMPL=memory\nIOC_INTROSPECT=off\n")
    monkeypatch.setenv(LOG_IMPL_KEY, "pretty")

    config = ContainerConfig(
        overrides={INTROSPECT_KEY: "on"},
        env_file="test",
        project_root=tmp_path,
    )
    assert config.log_impl == "memory"
    assert config.introspect is True


def test_unknown_logger_rejected():
    config = ContainerConfig(overrides={LOG_IMPL_KEY: "loki"})
    with pytest.raises(ValueError, match="Unknown logger implementation: 'loki'"):
        config.log_impl


def test_invalid_introspect_value_rejected():
    config = ContainerConfig(overrides={INTROSPECT_KEY: "maybe"})
    with pytest.raises(ValueError, match="Invalid value for IOC_INTROSPECT: 'maybe'"):
        config.introspect


def test_get_falls_back_to_default():
    config = ContainerConfig(overrides={})
    assert config.get("IOC_SURELY_UNSET_12345", "fallback") == "fallback"
