"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.admin import AdminSettings
from infrastructure.configuration.features.catalog import CatalogSettings

__all__ = [
    "AdminSettings",
    "CatalogSettings",
]
