"""Shared fixtures for the campus i18n test suite."""

import json

import pytest

from infrastructure.services import providers
from tests.factories.i18n import AR_MESSAGES, EN_MESSAGES


@pytest.fixture(autouse=True)
def clear_provider_caches():
    """Reset application-scoped singletons between tests."""
    providers.get_settings.cache_clear()
    providers.get_locale_registry.cache_clear()
    yield
    providers.get_settings.cache_clear()
    providers.get_locale_registry.cache_clear()


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep the developer's .env and I18N_* variables out of tests."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "PREFIX",
        "LOG_LEVEL",
        "I18N_DEFAULT_LOCALE",
        "I18N_SUPPORTED_LOCALES",
        "I18N_TRANSLATIONS_DIR",
        "I18N_RESOURCE_FORMAT",
        "I18N_FALLBACK_LOCALE",
        "I18N_TEST_LANGUAGE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def json_locales_dir(tmp_path):
    """Directory with ar.json, en.json and an empty pseudo.json."""
    locales = tmp_path / "locales"
    locales.mkdir()
    (locales / "ar.json").write_text(
        json.dumps(AR_MESSAGES, ensure_ascii=False), encoding="utf-8"
    )
    (locales / "en.json").write_text(json.dumps(EN_MESSAGES), encoding="utf-8")
    (locales / "pseudo.json").write_text("{}", encoding="utf-8")
    return locales
