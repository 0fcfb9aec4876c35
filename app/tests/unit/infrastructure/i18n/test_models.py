"""Tests for infrastructure.i18n.models."""

import pytest

from infrastructure.i18n import (
    BASE_LANGUAGE,
    LANGUAGE_PROFILES,
    Language,
    MessageCatalog,
    TranslationKey,
    language_options,
)


class TestLanguage:
    def test_canonical_order(self):
        assert [lang.value for lang in Language] == [
            "en", "es", "cs", "de", "fr", "zh", "ar", "pt", "hi", "ja",
        ]

    @pytest.mark.parametrize(
        "value,expected",
        [("fr", Language.FR), (" PT-br ", Language.PT), ("zh-Hans", Language.ZH), ("JA", Language.JA)],
    )
    def test_from_string_is_lenient(self, value, expected):
        assert Language.from_string(value) == expected

    @pytest.mark.parametrize("value", ["", "xx", "english", "-"])
    def test_from_string_rejects_unknown(self, value):
        with pytest.raises(ValueError):
            Language.from_string(value)

    def test_parse_returns_none(self):
        assert Language.parse(None) is None
        assert Language.parse("klingon") is None
        assert Language.parse("de-AT") == Language.DE

    def test_profiles_cover_every_language(self):
        assert set(LANGUAGE_PROFILES) == set(Language)

    def test_direction(self):
        assert Language.AR.direction == "rtl"
        assert all(lang.direction == "ltr" for lang in Language if lang != Language.AR)

    def test_names(self):
        assert Language.CS.english_name == "Czech"
        assert Language.DE.native_name == "Deutsch"

    def test_base_language(self):
        assert BASE_LANGUAGE == Language.EN


def test_language_options():
    options = language_options()
    assert len(options) == len(Language)
    assert options[0] == {"code": "en", "label": "English"}


class TestTranslationKey:
    def test_from_string(self):
        key = TranslationKey.from_string("admin.published")
        assert key.namespace == "admin"
        assert key.message_key == "published"
        assert str(key) == "admin.published"

    def test_from_string_requires_namespace(self):
        with pytest.raises(ValueError):
            TranslationKey.from_string("published")


class TestMessageCatalog:
    def test_lookup_and_merge(self):
        catalog = MessageCatalog(Language.EN, {"home": {"title": "A"}})
        catalog.merge(MessageCatalog(Language.EN, {"home": {"subtitle": "B"}, "admin": {"title": "C"}}))
        assert catalog.get_message(TranslationKey("home", "title")) == "A"
        assert catalog.has_message(TranslationKey("home", "subtitle"))
        assert catalog.get_namespace("admin") == {"title": "C"}
        assert catalog.get_message(TranslationKey("nope", "x")) is None
