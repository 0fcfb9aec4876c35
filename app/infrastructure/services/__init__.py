"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    SettingsDep,
    TranslatorDep,
    LanguageResolverDep,
    MineralStoreDep,
    CatalogCacheDep,
    DraftStoreDep,
    SessionStoreDep,
    PublishPipelineDep,
    SuggestionServiceDep,
)
from infrastructure.services.providers import (
    get_settings,
    get_translator,
    get_language_resolver,
    get_mineral_store,
    get_catalog_cache,
    get_draft_store,
    get_session_store,
    get_openai_client,
    get_publish_pipeline,
    get_suggestion_service,
)

__all__ = [
    "SettingsDep",
    "TranslatorDep",
    "LanguageResolverDep",
    "MineralStoreDep",
    "CatalogCacheDep",
    "DraftStoreDep",
    "SessionStoreDep",
    "PublishPipelineDep",
    "SuggestionServiceDep",
    "get_settings",
    "get_translator",
    "get_language_resolver",
    "get_mineral_store",
    "get_catalog_cache",
    "get_draft_store",
    "get_session_store",
    "get_openai_client",
    "get_publish_pipeline",
    "get_suggestion_service",
]
