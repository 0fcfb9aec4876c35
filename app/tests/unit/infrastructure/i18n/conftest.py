"""Feature-level fixtures for i18n tests."""

import pytest
import yaml

from infrastructure.i18n import Translator, YAMLTranslationLoader


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Directory with two languages, French missing one key."""
    files = {
        "minerals.en.yml": {
            "admin": {
                "published": "Mineral published: {{identifier}}",
                "session_closed": "Admin session closed.",
            }
        },
        "minerals.fr.yml": {
            "admin": {"published": "Minéral publié : {{identifier}}"},
        },
        "extra.fr.yml": {"home": {"title": "Catalogue"}},
    }
    for name, data in files.items():
        with open(tmp_path / name, "w", encoding="utf-8") as f:
            yaml.dump(data, f, allow_unicode=True)
    return tmp_path


@pytest.fixture
def yaml_loader(temp_translations_dir):
    return YAMLTranslationLoader(temp_translations_dir, use_cache=False)


@pytest.fixture
def translator(yaml_loader):
    translator = Translator(loader=yaml_loader)
    translator.load_all()
    return translator
