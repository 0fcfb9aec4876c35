"""App and client fixtures with every service provider overridden."""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from infrastructure.configuration import Settings
from infrastructure.configuration.features import AdminSettings
from infrastructure.i18n import LanguageResolver
from infrastructure.operations import OperationResult
from infrastructure.services import providers
from modules.minerals.publisher import PublishPipeline
from modules.minerals.sessions import AdminSessionStore
from modules.minerals.suggestions import SuggestionService
from server.server import create_app
from tests.factories.minerals import make_suggestion
from tests.helpers import ADMIN_PASSWORD


@pytest.fixture
def settings():
    return Settings(admin=AdminSettings(ADMIN_PASSWORD=ADMIN_PASSWORD))


@pytest.fixture
def session_store():
    return AdminSessionStore(password=ADMIN_PASSWORD)


@pytest.fixture
def suggestion_client():
    client = MagicMock()
    client.suggest_mineral.return_value = OperationResult.success(data=make_suggestion())
    return client


@pytest.fixture
def publish_pipeline(mineral_store, catalog_cache, draft_store, fake_translator):
    return PublishPipeline(
        store=mineral_store,
        catalog_cache=catalog_cache,
        drafts=draft_store,
        translator=fake_translator,
    )


@pytest.fixture
def app(
    settings,
    ui_translator,
    mineral_store,
    catalog_cache,
    draft_store,
    session_store,
    publish_pipeline,
    suggestion_client,
):
    app = create_app()
    overrides = {
        providers.get_settings: lambda: settings,
        providers.get_translator: lambda: ui_translator,
        providers.get_language_resolver: lambda: LanguageResolver(),
        providers.get_mineral_store: lambda: mineral_store,
        providers.get_catalog_cache: lambda: catalog_cache,
        providers.get_draft_store: lambda: draft_store,
        providers.get_session_store: lambda: session_store,
        providers.get_publish_pipeline: lambda: publish_pipeline,
        providers.get_suggestion_service: lambda: SuggestionService(
            suggestion_client, draft_store
        ),
    }
    app.dependency_overrides.update(overrides)
    return app


@pytest.fixture
def client(app):
    # Not used as a context manager: lifespan startup reads the real environment
    return TestClient(app)


@pytest.fixture
def admin_client(client):
    response = client.post("/admin/login", data={"password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return client
