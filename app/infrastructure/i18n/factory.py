"""Factory functions for creating i18n components.

Provides convenience functions for building the locale registry and
translation sessions with the application's configuration.
"""

from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, TYPE_CHECKING

from infrastructure.i18n.loader import (
    JSONTranslationLoader,
    TranslationLoader,
    YAMLTranslationLoader,
)
from infrastructure.i18n.models import Locale
from infrastructure.i18n.registry import LocaleRegistry
from infrastructure.i18n.resolver import Resolver
from infrastructure.i18n.session import TEST_LOCALE_STORAGE_KEY, TranslationSession
from infrastructure.logging import get_module_logger

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = get_module_logger()

LOADERS = {
    "json": JSONTranslationLoader,
    "yaml": YAMLTranslationLoader,
}


def default_translations_dir() -> Path:
    """Locate ``app/locales`` relative to this package."""
    # This file is at .../app/infrastructure/i18n/factory.py
    return Path(__file__).resolve().parents[2] / "locales"


def create_loader(
    translations_dir: Optional[Path] = None,
    fmt: str = "json",
    use_cache: bool = True,
) -> TranslationLoader:
    """Create the loader for a resource format.

    Raises:
        ValueError: If the format is unknown or the directory is missing.
    """
    try:
        loader_class = LOADERS[fmt.lower()]
    except KeyError:
        raise ValueError(f"Unsupported resource format: {fmt}") from None
    return loader_class(
        translations_dir=translations_dir or default_translations_dir(),
        use_cache=use_cache,
    )


def create_registry(
    translations_dir: Optional[Path] = None,
    locales: Optional[Iterable[str]] = None,
    fmt: str = "json",
) -> LocaleRegistry:
    """Load every declared locale into a LocaleRegistry.

    Args:
        translations_dir: Directory with resource files (default: app/locales).
        locales: Locales to register (default: every Locale member).
        fmt: Resource format, "json" or "yaml".

    Returns:
        LocaleRegistry: Immutable registry; locales without resources are
        registered with empty tables.

    Usage:
        registry = create_registry()
        registry = create_registry(Path("/srv/locales"), locales=["ar", "pseudo"])
    """
    loader = create_loader(translations_dir, fmt=fmt)
    declared = list(locales) if locales is not None else [member.value for member in Locale]
    registry = LocaleRegistry.from_loader(loader, declared)
    logger.info(
        "registry_created",
        translations_dir=str(loader.translations_dir),
        locale_count=len(registry),
    )
    return registry


def create_registry_from_settings(settings: "Settings") -> LocaleRegistry:
    """Build the registry described by ``settings.i18n``."""
    i18n = settings.i18n
    translations_dir = Path(i18n.translations_dir) if i18n.translations_dir else None
    return create_registry(
        translations_dir=translations_dir,
        locales=i18n.supported_locales,
        fmt=i18n.resource_format,
    )


def create_session(
    registry: Optional[LocaleRegistry] = None,
    settings: Optional["Settings"] = None,
    storage: Optional[Mapping[str, Any]] = None,
) -> TranslationSession:
    """Create and initialize a TranslationSession.

    The test override is read from ``storage`` first, then from the
    ``I18N_TEST_LANGUAGE`` setting. Pseudo mode is refused in production.

    Args:
        registry: Process-wide LocaleRegistry (default: the shared provider).
        settings: Application settings (default: the shared provider).
        storage: Session-scoped key/value store (cookies, session data).

    Returns:
        TranslationSession in the READY state.
    """
    if registry is None or settings is None:
        from infrastructure.services.providers import get_locale_registry, get_settings

        if settings is None:
            settings = get_settings()
        if registry is None:
            registry = get_locale_registry()

    i18n = settings.i18n
    resolver = Resolver(registry, fallback_locale=i18n.fallback_locale)
    session = TranslationSession(
        registry,
        default_locale=i18n.default_locale,
        resolver=resolver,
        allow_test_override=not settings.is_production,
    )

    effective_storage = dict(storage or {})
    if TEST_LOCALE_STORAGE_KEY not in effective_storage and i18n.test_language:
        effective_storage[TEST_LOCALE_STORAGE_KEY] = i18n.test_language

    return session.initialize(storage=effective_storage)
