"""Localization infrastructure settings."""

from typing import Optional

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings


class I18nSettings(InfrastructureSettings):
    """Translation system configuration.

    Environment Variables:
        I18N_DEFAULT_LOCALE: Locale of a new session (default: ar)
        I18N_SUPPORTED_LOCALES: JSON list of registered locales
            (default: ["ar", "en", "pseudo"])
        I18N_TRANSLATIONS_DIR: Directory holding locale resources
            (default: auto-discover app/locales)
        I18N_RESOURCE_FORMAT: Resource file format, 'json' or 'yaml'
        I18N_FALLBACK_LOCALE: Locale retried when a key is missing
            (default: unset, the raw key is shown)
        I18N_TEST_LANGUAGE: Test-tooling override read once per session

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        default_locale = settings.i18n.default_locale
        locales = settings.i18n.supported_locales
        ```
    """

    default_locale: str = Field(
        default="ar",
        alias="I18N_DEFAULT_LOCALE",
        description="Locale selected when a session starts",
    )
    supported_locales: list[str] = Field(
        default_factory=lambda: ["ar", "en", "pseudo"],
        alias="I18N_SUPPORTED_LOCALES",
        description="Locales registered at startup",
    )
    translations_dir: Optional[str] = Field(
        default=None,
        alias="I18N_TRANSLATIONS_DIR",
        description="Directory with locale resource files",
    )
    resource_format: str = Field(
        default="json",
        alias="I18N_RESOURCE_FORMAT",
        description="Resource format: 'json' or 'yaml'",
    )
    fallback_locale: Optional[str] = Field(
        default=None,
        alias="I18N_FALLBACK_LOCALE",
        description="Locale consulted before falling back to the raw key",
    )
    test_language: Optional[str] = Field(
        default=None,
        alias="I18N_TEST_LANGUAGE",
        description="Locale override used by automated UI tests",
    )

    @field_validator("resource_format")
    @classmethod
    def validate_resource_format(cls, v: str) -> str:
        """Validate the resource format name."""
        value = v.lower()
        if value not in ("json", "yaml"):
            raise ValueError(f"Unsupported resource format: {v}")
        return value

    @field_validator("fallback_locale", "test_language", mode="before")
    @classmethod
    def empty_string_as_none(cls, v: Optional[str]) -> Optional[str]:
        """Treat blank environment values as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v
