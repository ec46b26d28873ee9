"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the campus
i18n application using Pydantic BaseSettings.

Exports:
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation system settings class (for testing)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    locales = settings.i18n.supported_locales

    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.infrastructure.i18n import I18nSettings

__all__ = ["Settings", "I18nSettings"]
