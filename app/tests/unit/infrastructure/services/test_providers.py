"""Unit tests for infrastructure.services providers and dependencies."""

from types import SimpleNamespace

import pytest

from infrastructure.i18n import LocaleRegistry, SessionState, TEST_LOCALE_STORAGE_KEY
from infrastructure.services import (
    get_locale_registry,
    get_settings,
    get_translation_session,
    new_translation_session,
)


@pytest.fixture
def configured_env(monkeypatch, json_locales_dir):
    """Point the providers at the temporary locale directory."""
    monkeypatch.setenv("PREFIX", "dev-")
    monkeypatch.setenv("I18N_TRANSLATIONS_DIR", str(json_locales_dir))
    return json_locales_dir


class TestGetLocaleRegistry:
    """Tests for the registry singleton."""

    def test_registry_is_cached(self, configured_env):
        assert get_locale_registry() is get_locale_registry()

    def test_registry_uses_settings(self, configured_env):
        registry = get_locale_registry()
        assert isinstance(registry, LocaleRegistry)
        assert registry.load("en").get("app").get("onlyEnglish") == "Only in English"


class TestNewTranslationSession:
    """Tests for per-session construction."""

    def test_each_call_returns_new_session(self, configured_env):
        first = new_translation_session()
        second = new_translation_session()
        assert first is not second
        assert first.registry is second.registry

    def test_session_is_ready(self, configured_env):
        session = new_translation_session()
        assert session.state is SessionState.READY
        assert session.get_locale() == get_settings().i18n.default_locale

    def test_storage_override(self, configured_env):
        session = new_translation_session(storage={TEST_LOCALE_STORAGE_KEY: "pseudo"})
        assert session.t("app.installApp") == "[MISSING: app.installApp]"


class TestGetTranslationSession:
    """Tests for the FastAPI dependency."""

    def test_reads_override_from_cookies(self, configured_env):
        request = SimpleNamespace(cookies={TEST_LOCALE_STORAGE_KEY: "pseudo"})
        session = get_translation_session(request)
        assert session.get_locale() == "pseudo"

    def test_without_cookie(self, configured_env):
        request = SimpleNamespace(cookies={})
        session = get_translation_session(request)
        assert session.get_locale() == "ar"
        assert session.t("app.installApp") == "تثبيت"
