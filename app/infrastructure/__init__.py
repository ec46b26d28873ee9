"""Infrastructure modules for the campus i18n application.

Centralized infrastructure components:
- configuration: Settings management (Settings, I18nSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Locale resources, key resolution and translation sessions
- services: Dependency injection services (SettingsDep, TranslationSessionDep, get_settings)
"""
