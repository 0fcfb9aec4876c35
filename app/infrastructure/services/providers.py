"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for the catalog services.
Each provider is cached, so the catalog cache, draft store and session store
exist once per process and are shared by every request handler.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.i18n import LanguageResolver, Translator, create_translator
from integrations.openai import OpenAIClient
from modules.minerals.catalog import CatalogCache
from modules.minerals.drafts import DraftStore
from modules.minerals.publisher import PublishPipeline
from modules.minerals.resolver import MetadataPathResolver
from modules.minerals.sessions import AdminSessionStore
from modules.minerals.store import MineralStore
from modules.minerals.suggestions import SuggestionService


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    This is the single source of truth for settings across the entire application.

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/version")
        def version(settings: SettingsDep):
            return {"version": settings.GIT_SHA}

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_translator() -> Translator:
    """Get the UI message translator with every locale preloaded."""
    return create_translator(preload=True)


@lru_cache
def get_language_resolver() -> LanguageResolver:
    """Get the request language resolver configured from DEFAULT_LANG."""
    return LanguageResolver.from_setting(get_settings().catalog.DEFAULT_LANG)


@lru_cache
def get_mineral_store() -> MineralStore:
    return MineralStore(get_settings().catalog.minerals_root)


@lru_cache
def get_catalog_cache() -> CatalogCache:
    """Get the per-language catalog cache singleton.

    Returns:
        CatalogCache: Shared cache reading from the configured record store.
    """
    return CatalogCache(get_mineral_store(), MetadataPathResolver())


@lru_cache
def get_draft_store() -> DraftStore:
    return DraftStore(ttl_seconds=get_settings().admin.DRAFT_TTL_SECONDS)


@lru_cache
def get_session_store() -> AdminSessionStore:
    admin = get_settings().admin
    return AdminSessionStore(
        password=admin.ADMIN_PASSWORD,
        max_age_seconds=admin.ADMIN_SESSION_MAX_AGE_SECONDS,
    )


@lru_cache
def get_openai_client() -> OpenAIClient:
    """Get the OpenAI client configured from settings.openai.

    The client is returned even without an API key; callers check
    ``is_configured`` and fall back accordingly.
    """
    openai = get_settings().openai
    return OpenAIClient(
        api_key=openai.OPENAI_API_KEY,
        model=openai.OPENAI_MODEL,
        api_url=openai.OPENAI_API_URL,
        timeout_seconds=openai.OPENAI_TIMEOUT_SECONDS,
    )


@lru_cache
def get_publish_pipeline() -> PublishPipeline:
    """Get the publish pipeline wired to the shared store, cache and drafts."""
    return PublishPipeline(
        store=get_mineral_store(),
        catalog_cache=get_catalog_cache(),
        drafts=get_draft_store(),
        translator=get_openai_client(),
        max_workers=get_settings().openai.TRANSLATION_MAX_WORKERS,
    )


@lru_cache
def get_suggestion_service() -> SuggestionService:
    return SuggestionService(
        client=get_openai_client(),
        drafts=get_draft_store(),
        max_image_bytes=get_settings().admin.MAX_IMAGE_BYTES,
    )
