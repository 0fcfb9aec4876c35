"""Minerals catalog configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from infrastructure.configuration.base import ENV_FILES

# Integration settings
from infrastructure.configuration.integrations import OpenAISettings

# Feature settings
from infrastructure.configuration.features import (
    AdminSettings,
    CatalogSettings,
)

# Infrastructure settings
from infrastructure.configuration.infrastructure import ServerSettings


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid at startup."""


class Settings(BaseSettings):
    """Minerals catalog configuration settings - main aggregator.

    Aggregates all domain-specific settings into a single configuration object.
    Settings are organized by concern:

    - **Integrations**: External service configurations (OpenAI)
    - **Features**: Feature module configurations (catalog, admin)
    - **Infrastructure**: Core system configurations (server)

    Environment Variables:
        PREFIX: Environment prefix; empty means production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        GIT_SHA: Git commit SHA for deployment tracking

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        minerals_root = settings.catalog.minerals_root
        if settings.openai.is_configured:
            model = settings.openai.OPENAI_MODEL
        ```
    """

    # Application-level settings
    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    # Integration settings
    openai: OpenAISettings

    # Feature settings
    catalog: CatalogSettings
    admin: AdminSettings

    # Infrastructure settings
    server: ServerSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            # Integrations
            "openai": OpenAISettings,
            # Features
            "catalog": CatalogSettings,
            "admin": AdminSettings,
            # Infrastructure
            "server": ServerSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    def validate_startup(self) -> None:
        """Fail fast on configuration the service cannot run without.

        Raises:
            ConfigurationError: If ADMIN_PASSWORD is blank.
        """
        if not self.admin.ADMIN_PASSWORD.strip():
            raise ConfigurationError(
                "ADMIN_PASSWORD is required. Set it in .env.local (or env) before starting."
            )

    model_config = SettingsConfigDict(
        env_file=ENV_FILES,
        case_sensitive=True,
        extra="ignore",
    )
