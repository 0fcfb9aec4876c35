"""Tests for infrastructure.configuration."""

from pathlib import Path

import pytest

from infrastructure.configuration import ConfigurationError, Settings
from infrastructure.configuration.features import AdminSettings, CatalogSettings
from infrastructure.configuration.integrations import OpenAISettings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate from the developer's .env files and environment."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "ADMIN_PASSWORD",
        "OPENAI_API_KEY",
        "DATA_ROOT",
        "DEFAULT_LANG",
        "PREFIX",
        "DRAFT_TTL_SECONDS",
        "ADMIN_SESSION_MAX_AGE_SECONDS",
        "OPENAI_MODEL",
        "TRANSLATION_MAX_WORKERS",
        "PORT",
    ):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.catalog.minerals_root == Path("data") / "minerals"
        assert settings.catalog.DEFAULT_LANG == "en"
        assert settings.admin.ADMIN_SESSION_MAX_AGE_SECONDS == 28800
        assert settings.admin.DRAFT_TTL_SECONDS == 3600
        assert settings.openai.OPENAI_MODEL == "gpt-4o-mini"
        assert settings.openai.TRANSLATION_MAX_WORKERS == 4
        assert settings.server.PORT == 7979
        assert settings.is_production

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("DATA_ROOT", "/srv/catalog")
        monkeypatch.setenv("DRAFT_TTL_SECONDS", "60")
        monkeypatch.setenv("PREFIX", "dev-")
        settings = Settings()
        assert settings.catalog.minerals_root == Path("/srv/catalog/minerals")
        assert settings.admin.DRAFT_TTL_SECONDS == 60
        assert not settings.is_production

    def test_env_local_overrides_env(self, tmp_path):
        (tmp_path / ".env").write_text("DEFAULT_LANG=fr\nDATA_ROOT=a\n")
        (tmp_path / ".env.local").write_text("DEFAULT_LANG=de\n")
        settings = CatalogSettings()
        assert settings.DEFAULT_LANG == "de"
        assert settings.DATA_ROOT == "a"

    def test_section_overrides(self):
        settings = Settings(admin=AdminSettings(ADMIN_PASSWORD="pw"))
        assert settings.admin.ADMIN_PASSWORD == "pw"

    def test_validate_startup_requires_password(self):
        with pytest.raises(ConfigurationError):
            Settings().validate_startup()
        with pytest.raises(ConfigurationError):
            Settings(admin=AdminSettings(ADMIN_PASSWORD="   ")).validate_startup()

    def test_validate_startup_passes(self, monkeypatch):
        monkeypatch.setenv("ADMIN_PASSWORD", "s3cret")
        Settings().validate_startup()


class TestOpenAISettings:
    def test_not_configured_by_default(self):
        assert not OpenAISettings().is_configured

    def test_blank_key_is_not_configured(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "   ")
        settings = OpenAISettings()
        assert settings.OPENAI_API_KEY is None
        assert not settings.is_configured

    def test_configured(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        assert OpenAISettings().is_configured
