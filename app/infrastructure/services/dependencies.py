"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for the shared catalog services.
"""

from typing import Annotated

from fastapi import Depends

from infrastructure.configuration import Settings
from infrastructure.i18n import LanguageResolver, Translator
from infrastructure.services.providers import (
    get_catalog_cache,
    get_draft_store,
    get_language_resolver,
    get_mineral_store,
    get_publish_pipeline,
    get_session_store,
    get_settings,
    get_suggestion_service,
    get_translator,
)
from modules.minerals.catalog import CatalogCache
from modules.minerals.drafts import DraftStore
from modules.minerals.publisher import PublishPipeline
from modules.minerals.sessions import AdminSessionStore
from modules.minerals.store import MineralStore
from modules.minerals.suggestions import SuggestionService

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# UI text and request language
TranslatorDep = Annotated[Translator, Depends(get_translator)]
LanguageResolverDep = Annotated[LanguageResolver, Depends(get_language_resolver)]

# Catalog services
MineralStoreDep = Annotated[MineralStore, Depends(get_mineral_store)]
CatalogCacheDep = Annotated[CatalogCache, Depends(get_catalog_cache)]
DraftStoreDep = Annotated[DraftStore, Depends(get_draft_store)]
SessionStoreDep = Annotated[AdminSessionStore, Depends(get_session_store)]
PublishPipelineDep = Annotated[PublishPipeline, Depends(get_publish_pipeline)]
SuggestionServiceDep = Annotated[SuggestionService, Depends(get_suggestion_service)]

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
]
