"""Mineral catalog feature settings."""

from pathlib import Path

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings


class CatalogSettings(FeatureSettings):
    """Record store location and language defaults.

    Environment Variables:
        DATA_ROOT: Directory holding the ``minerals/`` record store (default: data)
        DEFAULT_LANG: Language served when the request expresses no preference

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        minerals_root = settings.catalog.minerals_root
        ```
    """

    DATA_ROOT: str = Field(default="data", alias="DATA_ROOT")
    DEFAULT_LANG: str = Field(default="en", alias="DEFAULT_LANG")

    @property
    def minerals_root(self) -> Path:
        """Directory containing one folder per published mineral."""
        return Path(self.DATA_ROOT) / "minerals"
