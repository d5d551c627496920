from __future__ import annotations

from pathlib import Path

import pytest

from sideslacker.config import settings

_VARS = (
    "SIDESLACKER_SLACK_WEBHOOK_URL",
    "SIDESLACKER_SLACK_TIMEOUT_SEC",
    "SIDESLACKER_NAME_DIRECTORY_PATH",
    "SIDESLACKER_API_HOST",
    "SIDESLACKER_API_PORT",
    "SIDESLACKER_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clear_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults_when_unset() -> None:
    assert settings.get_slack_webhook_url() is None
    assert settings.get_slack_timeout_sec() == 5.0
    assert settings.get_name_directory_path() is None
    assert settings.get_api_host() == "0.0.0.0"
    assert settings.get_api_port() == 8080
    assert settings.get_log_level() == "INFO"


def test_configured_values_are_stripped(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SIDESLACKER_SLACK_WEBHOOK_URL", "  https://hooks.example/abc ")
    monkeypatch.setenv("SIDESLACKER_SLACK_TIMEOUT_SEC", "2.5")
    monkeypatch.setenv("SIDESLACKER_NAME_DIRECTORY_PATH", " /etc/sideslacker/names.json ")
    monkeypatch.setenv("SIDESLACKER_API_HOST", " 127.0.0.1 ")
    monkeypatch.setenv("SIDESLACKER_API_PORT", "9000")
    monkeypatch.setenv("SIDESLACKER_LOG_LEVEL", "debug")

    assert settings.get_slack_webhook_url() == "https://hooks.example/abc"
    assert settings.get_slack_timeout_sec() == 2.5
    assert settings.get_name_directory_path() == Path("/etc/sideslacker/names.json")
    assert settings.get_api_host() == "127.0.0.1"
    assert settings.get_api_port() == 9000
    assert settings.get_log_level() == "DEBUG"


def test_blank_values_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SIDESLACKER_SLACK_WEBHOOK_URL", "   ")
    monkeypatch.setenv("SIDESLACKER_NAME_DIRECTORY_PATH", "")
    monkeypatch.setenv("SIDESLACKER_API_HOST", " ")

    assert settings.get_slack_webhook_url() is None
    assert settings.get_name_directory_path() is None
    assert settings.get_api_host() == "0.0.0.0"


@pytest.mark.parametrize("raw", ["abc", "0", "-1"])
def test_invalid_timeout_uses_default(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("SIDESLACKER_SLACK_TIMEOUT_SEC", raw)
    assert settings.get_slack_timeout_sec() == 5.0


@pytest.mark.parametrize("raw", ["http", "0", "-80", "65536"])
def test_invalid_port_uses_default(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("SIDESLACKER_API_PORT", raw)
    assert settings.get_api_port() == 8080


def test_port_upper_bound_is_accepted(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SIDESLACKER_API_PORT", "65535")
    assert settings.get_api_port() == 65535


@pytest.mark.parametrize("raw", ["verbose", "CRITICAL", "trace"])
def test_unknown_log_level_uses_default(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("SIDESLACKER_LOG_LEVEL", raw)
    assert settings.get_log_level() == "INFO"
