"""i18n system - key-based translation for the campus portals.

Provides locale resource loading, key resolution with interpolation and
pseudo-locale missing-key markers, and per-session locale state with
text-direction derivation.

Main components:
- models: Locale, Direction, LocaleTable, ResolutionRequest
- loader: TranslationLoader, JSONTranslationLoader, YAMLTranslationLoader
- registry: LocaleRegistry
- resolver: Resolver with lookup and interpolation
- session: TranslationSession (t, get_locale, set_locale, get_direction)
- sanitation: duplicate-key clean-up
- audit: validation, coverage and source key scanning
"""

from infrastructure.i18n.exceptions import (
    I18nError,
    InvalidLocaleError,
    LocaleResourceError,
    SessionNotInitializedError,
    UnknownLocaleError,
)
from infrastructure.i18n.loader import (
    JSONTranslationLoader,
    TranslationLoader,
    YAMLTranslationLoader,
)
from infrastructure.i18n.models import (
    DEFAULT_LOCALE,
    PSEUDO_LOCALE,
    Direction,
    Locale,
    LocaleTable,
    ResolutionRequest,
    direction_for,
)
from infrastructure.i18n.registry import LocaleRegistry
from infrastructure.i18n.resolver import Resolver, interpolate, lookup, missing_marker
from infrastructure.i18n.session import (
    TEST_LOCALE_STORAGE_KEY,
    SessionState,
    TranslationSession,
)

__all__ = [
    "DEFAULT_LOCALE",
    "PSEUDO_LOCALE",
    "TEST_LOCALE_STORAGE_KEY",
    "Direction",
    "I18nError",
    "InvalidLocaleError",
    "JSONTranslationLoader",
    "Locale",
    "LocaleRegistry",
    "LocaleResourceError",
    "LocaleTable",
    "ResolutionRequest",
    "Resolver",
    "SessionNotInitializedError",
    "SessionState",
    "TranslationLoader",
    "TranslationSession",
    "UnknownLocaleError",
    "YAMLTranslationLoader",
    "direction_for",
    "interpolate",
    "lookup",
    "missing_marker",
]
