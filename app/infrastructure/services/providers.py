"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache
from typing import Any, Mapping, Optional

from infrastructure.configuration import Settings
from infrastructure.i18n.factory import create_registry_from_settings, create_session
from infrastructure.i18n.registry import LocaleRegistry
from infrastructure.i18n.session import TranslationSession


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_locale_registry() -> LocaleRegistry:
    """
    Get application-scoped LocaleRegistry singleton.

    Locale tables are loaded once per process and never mutated afterwards,
    so every session can read them without locking.

    Returns:
        LocaleRegistry: Cached registry built from settings.i18n.
    """
    return create_registry_from_settings(get_settings())


def new_translation_session(
    storage: Optional[Mapping[str, Any]] = None,
) -> TranslationSession:
    """
    Create a fresh, initialized TranslationSession.

    Not cached: every UI session owns its own instance.

    Args:
        storage: Session-scoped key/value store holding the test override.

    Returns:
        TranslationSession: Session bound to the shared registry.
    """
    return create_session(get_locale_registry(), get_settings(), storage=storage)
