"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated

from fastapi import Depends, Request

from infrastructure.configuration import Settings
from infrastructure.i18n.registry import LocaleRegistry
from infrastructure.i18n.session import TranslationSession
from infrastructure.services.providers import (
    get_settings,
    get_locale_registry,
    new_translation_session,
)


def get_translation_session(request: Request) -> TranslationSession:
    """Build the per-request TranslationSession.

    The test-language override is read from the request cookies.
    """
    return new_translation_session(storage=request.cookies)


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Shared locale tables
LocaleRegistryDep = Annotated[LocaleRegistry, Depends(get_locale_registry)]

# Per-request session
# Usage: session.t("app.installApp"), session.get_direction()
TranslationSessionDep = Annotated[TranslationSession, Depends(get_translation_session)]

__all__ = [
    "SettingsDep",
    "LocaleRegistryDep",
    "TranslationSessionDep",
    "get_translation_session",
]
