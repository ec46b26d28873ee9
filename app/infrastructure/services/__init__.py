"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    SettingsDep,
    LocaleRegistryDep,
    TranslationSessionDep,
    get_translation_session,
)
from infrastructure.services.providers import (
    get_settings,
    get_locale_registry,
    new_translation_session,
)

__all__ = [
    "SettingsDep",
    "LocaleRegistryDep",
    "TranslationSessionDep",
    "get_translation_session",
    "get_settings",
    "get_locale_registry",
    "new_translation_session",
]
