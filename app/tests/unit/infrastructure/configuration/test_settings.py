"""Unit tests for infrastructure.configuration.settings module.

Tests cover:
- I18nSettings validation and defaults
- Settings class initialization
- Integration with Pydantic BaseSettings
"""

import pytest
from pydantic import ValidationError

from infrastructure.configuration import I18nSettings, Settings
from infrastructure.services.providers import get_settings


class TestI18nSettings:
    """Test suite for I18nSettings configuration."""

    def test_i18n_settings_defaults(self):
        """I18nSettings uses correct default values."""
        i18n = I18nSettings()

        assert i18n.default_locale == "ar"
        assert i18n.supported_locales == ["ar", "en", "pseudo"]
        assert i18n.translations_dir is None
        assert i18n.resource_format == "json"
        assert i18n.fallback_locale is None
        assert i18n.test_language is None

    def test_i18n_settings_from_environment(self, monkeypatch):
        """I18nSettings reads I18N_* environment variables."""
        monkeypatch.setenv("I18N_DEFAULT_LOCALE", "en")
        monkeypatch.setenv("I18N_SUPPORTED_LOCALES", '["en", "pseudo"]')
        monkeypatch.setenv("I18N_TRANSLATIONS_DIR", "/srv/locales")
        monkeypatch.setenv("I18N_RESOURCE_FORMAT", "YAML")
        monkeypatch.setenv("I18N_FALLBACK_LOCALE", "en")
        monkeypatch.setenv("I18N_TEST_LANGUAGE", "pseudo")

        i18n = I18nSettings()

        assert i18n.default_locale == "en"
        assert i18n.supported_locales == ["en", "pseudo"]
        assert i18n.translations_dir == "/srv/locales"
        assert i18n.resource_format == "yaml"
        assert i18n.fallback_locale == "en"
        assert i18n.test_language == "pseudo"

    def test_blank_optional_values_are_unset(self, monkeypatch):
        monkeypatch.setenv("I18N_FALLBACK_LOCALE", "")
        monkeypatch.setenv("I18N_TEST_LANGUAGE", "  ")

        i18n = I18nSettings()

        assert i18n.fallback_locale is None
        assert i18n.test_language is None

    def test_invalid_resource_format(self):
        with pytest.raises(ValidationError):
            I18nSettings(resource_format="xml")

    def test_field_names_accepted(self):
        """Fields can be set by name as well as by alias."""
        i18n = I18nSettings(default_locale="en")
        assert i18n.default_locale == "en"


class TestSettings:
    """Test suite for the aggregated Settings."""

    def test_settings_instantiates_subsettings(self):
        settings = Settings()
        assert isinstance(settings.i18n, I18nSettings)
        assert settings.LOG_LEVEL == "INFO"

    def test_settings_accepts_override(self):
        i18n = I18nSettings(default_locale="en")
        settings = Settings(i18n=i18n)
        assert settings.i18n is i18n

    def test_is_production_without_prefix(self):
        assert Settings(PREFIX="").is_production is True

    def test_is_not_production_with_prefix(self):
        assert Settings(PREFIX="dev-").is_production is False

    def test_prefix_from_environment(self, monkeypatch):
        monkeypatch.setenv("PREFIX", "staging-")
        assert Settings().is_production is False


class TestGetSettings:
    """Test suite for the settings provider."""

    def test_get_settings_is_singleton(self):
        assert get_settings() is get_settings()

    def test_get_settings_returns_settings(self):
        assert isinstance(get_settings(), Settings)
