"""Infrastructure modules for the minerals catalog.

Centralized infrastructure components:
- configuration: Settings management (Settings, ConfigurationError)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Supported languages and localized UI messages
- operations: Operation results and error classification
- services: Dependency injection providers (SettingsDep, get_settings, ...)

Import from the subpackages directly; this package does not re-export them.
"""
