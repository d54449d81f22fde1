import pytest

from task_api.config import DEFAULT_HOST, DEFAULT_PORT, ConfigError, get_settings


def test_defaults(monkeypatch):
    for name in ("TASK_API_HOST", "TASK_API_PORT", "TASK_API_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = get_settings()
    assert settings.host == DEFAULT_HOST == "127.0.0.1"
    assert settings.port == DEFAULT_PORT == 8080
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("TASK_API_HOST", "0.0.0.0")
    monkeypatch.setenv("TASK_API_PORT", "9000")
    monkeypatch.setenv("TASK_API_LOG_LEVEL", "debug")
    settings = get_settings()
    assert settings.host == "0.0.0.0"
    assert settings.port == 9000
    assert settings.log_level == "DEBUG"


def test_invalid_port(monkeypatch):
    monkeypatch.setenv("TASK_API_PORT", "eighty")
    with pytest.raises(ConfigError, match="TASK_API_PORT must be an integer, got 'eighty'"):
        get_settings()
