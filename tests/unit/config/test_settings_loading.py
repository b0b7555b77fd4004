"""Unit tests for settings loading and SmartSenderSettings validation."""
from __future__ import annotations

import os
import pathlib
from dataclasses import dataclass
from typing import ClassVar

import pytest

from smartsender_mailer.adapters.smartsender import (
    DEFAULT_DISCARD_URL,
    DEFAULT_SEND_URL,
    SmartSenderSettings,
)
from smartsender_mailer.config.settings import DotenvSettingsLoader, EnvSettingsLoader, Settings
from smartsender_mailer.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)


@dataclass
class RequiredSettings(Settings):
    _prefix: ClassVar[str] = "REQ"

    token: str
    retries: int = 0


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "SMARTSENDER_API_KEY",
        "SMARTSENDER_API_SECRET",
        "SMARTSENDER_SEND_URL",
        "SMARTSENDER_DISCARD_URL",
        "SMARTSENDER_TIMEOUT",
        "REQ_TOKEN",
        "REQ_RETRIES",
    ):
        monkeypatch.delenv(name, raising=False)


class TestEnvSettingsLoader:
    def test_defaults_when_env_empty(self) -> None:
        settings = EnvSettingsLoader().load(SmartSenderSettings)
        assert settings.api_key == ""
        assert settings.api_secret == ""
        assert settings.send_url == DEFAULT_SEND_URL
        assert settings.discard_url == DEFAULT_DISCARD_URL
        assert settings.timeout == 10.0

    def test_reads_prefixed_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SMARTSENDER_API_KEY", "k-1")
        monkeypatch.setenv("SMARTSENDER_API_SECRET", "s-1")
        monkeypatch.setenv("SMARTSENDER_TIMEOUT", "2.5")
        settings = EnvSettingsLoader().load(SmartSenderSettings)
        assert settings.api_key == "k-1"
        assert settings.api_secret == "s-1"
        assert settings.timeout == 2.5

    def test_missing_required_raises(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader().load(RequiredSettings)
        assert exc_info.value.setting_name == "REQ_TOKEN"

    def test_int_coercion(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REQ_TOKEN", "t")
        monkeypatch.setenv("REQ_RETRIES", "3")
        assert EnvSettingsLoader().load(RequiredSettings).retries == 3

    def test_bad_number_raises_invalid_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SMARTSENDER_TIMEOUT", "soon")
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader().load(SmartSenderSettings)
        assert exc_info.value.setting_name == "SMARTSENDER_TIMEOUT"

    def test_validation_error_surfaces_as_config_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SMARTSENDER_SEND_URL", "ftp://api.sndmart.com/send")
        with pytest.raises(ConfigError):
            EnvSettingsLoader().load(SmartSenderSettings)


class TestDotenvSettingsLoader:
    def test_loads_from_file(self, tmp_path: pathlib.Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("SMARTSENDER_API_KEY=from-file\nSMARTSENDER_API_SECRET=shh\n")
        try:
            settings = DotenvSettingsLoader(str(env_file)).load(SmartSenderSettings)
        finally:
            os.environ.pop("SMARTSENDER_API_KEY", None)
            os.environ.pop("SMARTSENDER_API_SECRET", None)
        assert settings.api_key == "from-file"
        assert settings.credentials.is_complete()


class TestSmartSenderSettings:
    def test_non_positive_timeout_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            SmartSenderSettings(timeout=0)

    def test_non_http_url_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            SmartSenderSettings(discard_url="api.sndmart.com")
        assert exc_info.value.setting_name == "discard_url"

    def test_secret_hidden_from_repr(self) -> None:
        settings = SmartSenderSettings(api_key="k", api_secret="top-secret")
        assert "top-secret" not in repr(settings)
        assert "top-secret" not in repr(settings.credentials)

    def test_credentials(self) -> None:
        creds = SmartSenderSettings(api_key="k", api_secret="s").credentials
        assert creds.api_key == "k"
        assert creds.api_secret == "s"
