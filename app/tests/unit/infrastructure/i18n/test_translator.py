"""Tests for infrastructure.i18n.translator and the shipped locale files."""

import pytest

from infrastructure.i18n import Language, TranslationKey

# Information pages ship in the base language only
BASE_LANGUAGE_ONLY_NAMESPACES = {"pages"}


class TestTranslator:
    def test_translate_with_variables(self, translator):
        message = translator.translate("admin.published", Language.FR, identifier="mineral.x.0xabc")
        assert message == "Minéral publié : mineral.x.0xabc"

    def test_missing_key_falls_back_to_base_language(self, translator):
        assert translator.translate("admin.session_closed", Language.FR) == "Admin session closed."

    def test_unloaded_language_falls_back(self, translator):
        assert translator.translate("admin.session_closed", Language.DE) == "Admin session closed."

    def test_unknown_key(self, translator):
        with pytest.raises(KeyError):
            translator.translate("admin.unknown", Language.EN)

    def test_missing_variable(self, translator):
        with pytest.raises(ValueError):
            translator.translate("admin.published", Language.EN)

    def test_get_namespace_merges_fallback(self, translator):
        namespace = translator.get_namespace("admin", Language.FR)
        assert namespace["published"].startswith("Minéral")
        assert namespace["session_closed"] == "Admin session closed."

    def test_has_message(self, translator):
        assert translator.has_message(TranslationKey("home", "title"), Language.FR)
        assert not translator.has_message(TranslationKey("home", "title"), Language.EN)

    def test_available_languages(self, translator):
        assert set(translator.get_available_languages()) == {Language.EN, Language.FR}


class TestShippedLocales:
    def test_every_language_has_a_catalog(self, ui_translator):
        assert set(ui_translator.get_available_languages()) == set(Language)

    @pytest.mark.parametrize("language", list(Language))
    def test_every_language_defines_every_key(self, ui_translator, language):
        base = ui_translator.catalogs[Language.EN].messages
        catalog = ui_translator.catalogs[language]
        for namespace, messages in base.items():
            if namespace in BASE_LANGUAGE_ONLY_NAMESPACES:
                continue
            for key in messages:
                assert catalog.has_message(TranslationKey(namespace, key)), f"{language.value}: {namespace}.{key}"

    @pytest.mark.parametrize("language", list(Language))
    def test_publish_summary_interpolates(self, ui_translator, language):
        message = ui_translator.translate(
            "admin.published", language, identifier="mineral.x.0xabc", translated_count=9
        )
        assert "mineral.x.0xabc" in message
        assert "9" in message

    def test_about_text_is_localized(self, ui_translator):
        english = ui_translator.get_namespace("about", Language.EN)
        for language in Language:
            if language is Language.EN:
                continue
            assert ui_translator.get_namespace("about", language)["title"] != english["title"]

    def test_info_pages_are_served_to_every_language(self, ui_translator):
        for language in Language:
            pages = ui_translator.get_namespace("pages", language)
            assert pages["default"]["title"] == "Information"
