"""Shared fixtures for the minerals catalog test suite."""

import pytest

from api.dependencies.rate_limits import get_limiter
from infrastructure.i18n import create_translator
from modules.minerals.catalog import CatalogCache
from modules.minerals.drafts import DraftStore
from modules.minerals.store import MineralStore
from tests.factories.minerals import FakeTranslator


@pytest.fixture(autouse=True)
def reset_rate_limiter():
    """Rate limit counters are process-wide; start every test from zero."""
    limiter = get_limiter()
    limiter.reset()
    yield
    limiter.reset()


@pytest.fixture
def minerals_root(tmp_path):
    root = tmp_path / "data" / "minerals"
    root.mkdir(parents=True)
    return root


@pytest.fixture
def mineral_store(minerals_root):
    return MineralStore(minerals_root)


@pytest.fixture
def catalog_cache(mineral_store):
    return CatalogCache(mineral_store)


@pytest.fixture
def draft_store():
    return DraftStore(ttl_seconds=3600)


@pytest.fixture
def fake_translator():
    return FakeTranslator()


@pytest.fixture(scope="session")
def ui_translator():
    """Translator over the real locale files shipped with the app."""
    return create_translator(preload=True)
