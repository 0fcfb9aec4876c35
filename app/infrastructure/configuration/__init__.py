"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the minerals
catalog using Pydantic BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    ConfigurationError: Raised when startup configuration is unusable

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    # Access settings
    data_root = settings.catalog.DATA_ROOT
    model = settings.openai.OPENAI_MODEL

    # Check environment
    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.settings import ConfigurationError, Settings

__all__ = ["Settings", "ConfigurationError"]
