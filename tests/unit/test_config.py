"""
Tests unitaires pour Settings (pydantic-settings).

Ces tests verifient:
- Valeurs par defaut
- Surcharge par variables d'environnement VEEZI_*
- Validation des bornes (timeout, max_attempts)
- Construction de la configuration de cache
"""

from datetime import timedelta
from pathlib import Path

import pytest
from pydantic import ValidationError

from veezi.adapters.api.cache import CacheConfig
from veezi.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "VEEZI_BASE_URL",
        "VEEZI_ACCESS_TOKEN",
        "VEEZI_TIMEOUT",
        "VEEZI_MAX_ATTEMPTS",
        "VEEZI_CACHE_ENABLED",
        "VEEZI_LOG_FILE",
        "VEEZI_LOG_HTTP",
    ):
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    def test_default_values(self):
        settings = Settings(_env_file=None)

        assert settings.base_url == "https://api.us.veezi.com/"
        assert settings.access_token is None
        assert settings.api_enabled is False
        assert settings.timeout == 30.0
        assert settings.max_attempts == 1
        assert settings.cache_enabled is True
        assert settings.log_http is False

    def test_default_cache_config_is_the_preset(self):
        assert Settings(_env_file=None).cache_config() == CacheConfig.default()


class TestEnvironment:
    def test_token_from_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("VEEZI_ACCESS_TOKEN", "from-env")

        settings = Settings(_env_file=None)

        assert settings.api_enabled is True
        assert settings.access_token.get_secret_value() == "from-env"
        assert "from-env" not in repr(settings)

    def test_cache_can_be_disabled(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("VEEZI_CACHE_ENABLED", "false")

        config = Settings(_env_file=None).cache_config()

        assert config == CacheConfig()
        assert config.is_enabled is False

    def test_numeric_overrides(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("VEEZI_TIMEOUT", "5.5")
        monkeypatch.setenv("VEEZI_MAX_ATTEMPTS", "3")

        settings = Settings(_env_file=None)

        assert settings.timeout == 5.5
        assert settings.max_attempts == 3

    def test_log_file_expands_home(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("VEEZI_LOG_FILE", "~/veezi.log")

        settings = Settings(_env_file=None)

        assert settings.log_file == Path("~/veezi.log").expanduser()


class TestValidation:
    @pytest.mark.parametrize("timeout", [0, -1])
    def test_timeout_must_be_positive(self, timeout: float):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, timeout=timeout)

    def test_max_attempts_at_least_one(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, max_attempts=0)

    def test_preset_ttls(self):
        config = Settings(_env_file=None).cache_config()

        assert config.sessions.ttl == timedelta(seconds=30)
        assert config.sessions.max_capacity == 1000
        assert config.site.max_capacity == 1
