"""Unit tests for config settings & validation."""

from dataclasses import dataclass, field
from typing import ClassVar

import pytest

from searchbase.config.settings import (
    DEFAULT_BASE_URL,
    EnvSettingsLoader,
    SearchbaseSettings,
    Settings,
)
from searchbase.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from searchbase.kernel.errors import BaseError


@dataclass
class AppSettings(Settings):
    _prefix: ClassVar[str] = "APP"

    host: str = "localhost"
    port: int = 8080
    debug: bool = False
    allowed_origins: list[str] = field(default_factory=list)


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_loads_string(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_HOST", "example.com")
        assert EnvSettingsLoader().load(AppSettings).host == "example.com"

    def test_loads_int(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_PORT", "9000")
        assert EnvSettingsLoader().load(AppSettings).port == 9000

    def test_loads_bool(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for truthy in ("true", "True", "1", "yes", "on"):
            monkeypatch.setenv("APP_DEBUG", truthy)
            assert EnvSettingsLoader().load(AppSettings).debug is True
        for falsy in ("false", "False", "0", "no", "off"):
            monkeypatch.setenv("APP_DEBUG", falsy)
            assert EnvSettingsLoader().load(AppSettings).debug is False

    def test_loads_list(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_ALLOWED_ORIGINS", "http://a.com, http://b.com")
        assert EnvSettingsLoader().load(AppSettings).allowed_origins == ["http://a.com", "http://b.com"]

    def test_explicit_environ(self) -> None:
        settings = EnvSettingsLoader({"APP_PORT": "1234"}).load(AppSettings)
        assert settings.port == 1234
        assert settings.host == "localhost"

    def test_bad_int(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader({"APP_PORT": "eighty"}).load(AppSettings)
        assert exc_info.value.setting_name == "APP_PORT"

    def test_bad_bool(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader({"APP_DEBUG": "maybe"}).load(AppSettings)

    def test_errors_name_settings_class(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader({"APP_PORT": "eighty"}).load(AppSettings)
        assert exc_info.value.settings_class == "AppSettings"
        assert exc_info.value.detail == {
            "setting": "APP_PORT",
            "reason": exc_info.value.reason,
            "settings_class": "AppSettings",
        }

    def test_missing_names_settings_class(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader({}).load(SearchbaseSettings)
        assert "SearchbaseSettings" in exc_info.value.message
        assert exc_info.value.detail["settings_class"] == "SearchbaseSettings"


# ---------------------------------------------------------------------------
# Settings env keys
# ---------------------------------------------------------------------------


class TestSettingsEnvKeys:
    def test_env_key_uses_prefix(self) -> None:
        assert AppSettings.env_key("allowed_origins") == "APP_ALLOWED_ORIGINS"

    def test_env_key_without_prefix(self) -> None:
        assert Settings.env_key("debug") == "DEBUG"

    def test_searchbase_env_keys(self) -> None:
        assert SearchbaseSettings.env_keys() == {
            "api_token": "SEARCHBASE_API_TOKEN",
            "base_url": "SEARCHBASE_BASE_URL",
            "timeout": "SEARCHBASE_TIMEOUT",
            "batch_size": "SEARCHBASE_BATCH_SIZE",
            "log_requests": "SEARCHBASE_LOG_REQUESTS",
        }


# ---------------------------------------------------------------------------
# SearchbaseSettings
# ---------------------------------------------------------------------------


class TestSearchbaseSettings:
    def test_defaults(self) -> None:
        settings = EnvSettingsLoader({"SEARCHBASE_API_TOKEN": "tok"}).load(SearchbaseSettings)
        assert settings.api_token == "tok"
        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.timeout == 30.0
        assert settings.batch_size == 100
        assert settings.log_requests is False

    def test_all_from_env(self) -> None:
        settings = EnvSettingsLoader({
            "SEARCHBASE_API_TOKEN": "tok",
            "SEARCHBASE_BASE_URL": "https://eu.searchbase.dev",
            "SEARCHBASE_TIMEOUT": "2.5",
            "SEARCHBASE_BATCH_SIZE": "50",
            "SEARCHBASE_LOG_REQUESTS": "yes",
        }).load(SearchbaseSettings)
        assert settings.base_url == "https://eu.searchbase.dev"
        assert settings.timeout == 2.5
        assert settings.batch_size == 50
        assert settings.log_requests is True

    def test_token_required(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader({}).load(SearchbaseSettings)
        assert exc_info.value.setting_name == "SEARCHBASE_API_TOKEN"

    def test_empty_token_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            SearchbaseSettings(api_token="")
        assert exc_info.value.setting_name == "SEARCHBASE_API_TOKEN"
        assert "***" in exc_info.value.message

    def test_non_positive_timeout_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            SearchbaseSettings(api_token="t", timeout=0)
        assert exc_info.value.setting_name == "SEARCHBASE_TIMEOUT"
        assert exc_info.value.value == 0
        assert exc_info.value.detail["settings_class"] == "SearchbaseSettings"

    def test_batch_size_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader({"SEARCHBASE_API_TOKEN": "t", "SEARCHBASE_BATCH_SIZE": "0"}).load(SearchbaseSettings)

    def test_repr_hides_token(self) -> None:
        assert "secret-token" not in repr(SearchbaseSettings(api_token="secret-token"))


class TestConfigErrors:
    def test_hierarchy(self) -> None:
        assert issubclass(MissingRequiredSettingError, ConfigError)
        assert issubclass(InvalidSettingValueError, ConfigError)
        assert issubclass(ConfigError, BaseError)

    def test_codes(self) -> None:
        assert MissingRequiredSettingError("X").code == "missing_required_setting"
        assert InvalidSettingValueError("X", 1, "bad").code == "invalid_setting_value"

    def test_secret_value_not_rendered(self) -> None:
        err = InvalidSettingValueError("SEARCHBASE_API_TOKEN", "s3cret", "rejected", secret=True)
        assert "s3cret" not in err.message
        assert "s3cret" not in str(err)
        assert err.value == "s3cret"
