"""i18n system - supported languages and localized UI messages.

Main components:
- models: Language table, TranslationKey, MessageCatalog
- loader: TranslationLoader and YAMLTranslationLoader
- translator: Translator with {{variable}} interpolation and base-language fallback
- resolvers: LanguageResolver for cookie / Accept-Language / default resolution
"""

from infrastructure.i18n.factory import create_translator
from infrastructure.i18n.loader import TranslationLoader, YAMLTranslationLoader
from infrastructure.i18n.models import (
    BASE_LANGUAGE,
    LANGUAGE_PROFILES,
    Language,
    LanguageProfile,
    MessageCatalog,
    TranslationKey,
    language_options,
)
from infrastructure.i18n.resolvers import LanguageResolver
from infrastructure.i18n.translator import Translator

__all__ = [
    "BASE_LANGUAGE",
    "LANGUAGE_PROFILES",
    "Language",
    "LanguageProfile",
    "MessageCatalog",
    "TranslationKey",
    "language_options",
    "TranslationLoader",
    "YAMLTranslationLoader",
    "Translator",
    "LanguageResolver",
    "create_translator",
]
