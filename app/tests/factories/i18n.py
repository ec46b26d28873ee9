"""Test data factories for i18n system testing.

Provides deterministic test data builders for:
- LocaleTable
- LocaleRegistry
- ResolutionRequest
- TranslationSession
- Settings
"""

from typing import Any, Mapping, Optional

from infrastructure.configuration import I18nSettings, Settings
from infrastructure.i18n import (
    LocaleRegistry,
    LocaleTable,
    ResolutionRequest,
    TranslationSession,
)

AR_MESSAGES = {
    "app": {
        "installApp": "تثبيت",
        "welcome": "مرحباً {name}",
        "blank": "",
    },
    "nav": {
        "dashboard": "لوحة التحكم",
    },
}

EN_MESSAGES = {
    "app": {
        "installApp": "Install",
        "welcome": "Welcome {name}",
        "onlyEnglish": "Only in English",
    },
}


def make_locale_table(messages: Optional[Mapping[str, Any]] = None) -> LocaleTable:
    """Create a LocaleTable instance.

    Args:
        messages: Nested dict of translations (default: sample Arabic data).

    Returns:
        LocaleTable instance.
    """
    return LocaleTable.from_mapping(AR_MESSAGES if messages is None else messages)


def make_locale_registry(
    tables: Optional[Mapping[str, Mapping[str, Any]]] = None,
) -> LocaleRegistry:
    """Create a LocaleRegistry instance.

    Args:
        tables: Locale -> nested dict (default: ar, en and an empty pseudo).

    Returns:
        LocaleRegistry instance.
    """
    if tables is None:
        tables = {"ar": AR_MESSAGES, "en": EN_MESSAGES, "pseudo": {}}
    return LocaleRegistry(tables)


def make_resolution_request(
    key: str = "app.welcome", params: Optional[Mapping[str, Any]] = None
) -> ResolutionRequest:
    """Create a ResolutionRequest instance."""
    return ResolutionRequest.build(key, params)


def make_translation_session(
    registry: Optional[LocaleRegistry] = None,
    default_locale: str = "ar",
    storage: Optional[Mapping[str, Any]] = None,
    initialize: bool = True,
    allow_test_override: bool = True,
) -> TranslationSession:
    """Create a TranslationSession, initialized unless told otherwise."""
    session = TranslationSession(
        registry or make_locale_registry(),
        default_locale=default_locale,
        allow_test_override=allow_test_override,
    )
    if initialize:
        session.initialize(storage=storage)
    return session


def make_settings(prefix: str = "dev-", **i18n_overrides: Any) -> Settings:
    """Create Settings with explicit i18n values.

    Args:
        prefix: Settings PREFIX; an empty prefix means production.
        **i18n_overrides: I18nSettings fields by name.
    """
    return Settings(PREFIX=prefix, i18n=I18nSettings(**i18n_overrides))
