"""UI message translation with variable interpolation.

Looks messages up in the requested language and falls back to the base
language when a key is missing there.
"""

import re
from typing import Any, Dict, List, Optional

from infrastructure.i18n.loader import TranslationLoader
from infrastructure.i18n.models import (
    BASE_LANGUAGE,
    Language,
    MessageCatalog,
    TranslationKey,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()

_PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}")


class Translator:
    """Service for translating UI messages with ``{{variable}}`` interpolation.

    Attributes:
        loader: TranslationLoader for loading message files.
        catalogs: Loaded MessageCatalogs by language.
        fallback_language: Language used when a key is missing.
    """

    def __init__(
        self,
        loader: TranslationLoader,
        fallback_language: Language = BASE_LANGUAGE,
    ):
        self.loader = loader
        self.fallback_language = fallback_language
        self.catalogs: Dict[Language, MessageCatalog] = {}
        logger.info(
            "initialized_translator", fallback_language=fallback_language.value
        )

    def load_all(self) -> None:
        self.catalogs = self.loader.load_all()
        logger.info("loaded_all_translations", language_count=len(self.catalogs))

    def load_language(self, language: Language) -> None:
        self.catalogs[language] = self.loader.load(language)

    def translate_message(
        self,
        key: TranslationKey,
        language: Language,
        variables: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Retrieve and interpolate a UI message.

        Args:
            key: TranslationKey identifying the message.
            language: Language to translate to.
            variables: Optional dict of variables for interpolation.

        Returns:
            Translated and interpolated message string.

        Raises:
            KeyError: If key not found in requested or fallback language.
            ValueError: If a placeholder has no matching variable.
        """
        variables = variables or {}

        catalog = self.catalogs.get(language)
        message = catalog.get_message(key) if catalog else None

        if not message and language != self.fallback_language:
            fallback_catalog = self.catalogs.get(self.fallback_language)
            message = fallback_catalog.get_message(key) if fallback_catalog else None

            if message:
                logger.info(
                    "used_fallback_translation",
                    key=str(key),
                    requested_language=language.value,
                    fallback_language=self.fallback_language.value,
                )

        if not message:
            logger.error(
                "translation_not_found",
                key=str(key),
                language=language.value,
                fallback_language=self.fallback_language.value,
            )
            raise KeyError(
                f"Translation not found for key {key} in {language.value} or fallback {self.fallback_language.value}"
            )

        return self._interpolate(message, variables)

    def translate(
        self,
        key: str,
        language: Language,
        **variables: Any,
    ) -> str:
        """Shorthand taking a dotted key string: ``translate("admin.published", lang, id=...)``."""
        return self.translate_message(TranslationKey.from_string(key), language, variables)

    def has_message(self, key: TranslationKey, language: Language) -> bool:
        catalog = self.catalogs.get(language)
        return catalog.has_message(key) if catalog else False

    def get_available_languages(self) -> List[Language]:
        return list(self.catalogs.keys())

    def get_namespace(self, namespace: str, language: Language) -> Dict[str, Any]:
        """All messages of a namespace, base-language entries filling any gaps."""
        merged: Dict[str, Any] = {}
        fallback_catalog = self.catalogs.get(self.fallback_language)
        if fallback_catalog:
            merged.update(fallback_catalog.get_namespace(namespace))
        catalog = self.catalogs.get(language)
        if catalog:
            merged.update(catalog.get_namespace(namespace))
        return merged

    def _interpolate(self, message: str, variables: Dict[str, Any]) -> str:
        """Replace ``{{name}}`` placeholders with values from variables.

        Raises:
            ValueError: If variable not found in variables dict.
        """
        names = _PLACEHOLDER.findall(message)
        for var_name in names:
            if var_name not in variables:
                logger.error(
                    "missing_interpolation_variable",
                    variable=var_name,
                    available_variables=list(variables.keys()),
                )
                raise ValueError(f"Missing interpolation variable: {var_name}")

        return _PLACEHOLDER.sub(lambda match: str(variables[match.group(1)]), message)
