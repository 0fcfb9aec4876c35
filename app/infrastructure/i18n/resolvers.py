"""Request language resolution.

Determines which language to serve a request in from the sources available
on an HTTP request.
"""

from typing import Optional

from infrastructure.i18n.models import BASE_LANGUAGE, Language
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class LanguageResolver:
    """Resolves the request language.

    Fallback chain, first match wins:
    1. ``lang`` cookie holding a supported code
    2. Accept-Language header, in quality order
    3. Configured default language
    """

    def __init__(self, default_language: Language = BASE_LANGUAGE):
        self.default_language = default_language
        self.log = logger.bind(default_language=default_language.value)

    @classmethod
    def from_setting(cls, value: Optional[str]) -> "LanguageResolver":
        """Build a resolver from the DEFAULT_LANG setting.

        Unsupported values fall back to the base language with a warning.
        """
        language = Language.parse(value)
        if language is None:
            logger.warning(
                "invalid_default_language",
                value=value,
                fallback=BASE_LANGUAGE.value,
            )
            language = BASE_LANGUAGE
        return cls(default_language=language)

    def resolve(
        self,
        cookie_value: Optional[str] = None,
        accept_language: Optional[str] = None,
    ) -> Language:
        from_cookie = Language.parse(cookie_value)
        if from_cookie is not None:
            return from_cookie
        if accept_language:
            return self.resolve_from_header(accept_language)
        return self.default_language

    def resolve_from_header(self, accept_language: Optional[str]) -> Language:
        """Resolve language from an HTTP Accept-Language header.

        Args:
            accept_language: Header value, e.g. ``"fr-CA,fr;q=0.9,en;q=0.8"``.

        Returns:
            First supported language by descending quality, or the default.
        """
        if not accept_language:
            return self.default_language

        # "fr-CA,fr;q=0.9,en;q=0.8" -> [("fr-CA", 1.0), ("fr", 0.9), ("en", 0.8)]
        preferences = []
        for part in accept_language.split(","):
            lang_range = part.split(";")[0].strip()
            quality = 1.0

            if ";" in part and "q=" in part:
                try:
                    quality = float(part.split("q=")[1])
                except ValueError:
                    quality = 1.0

            preferences.append((lang_range, quality))

        for lang_range, _ in sorted(preferences, key=lambda x: x[1], reverse=True):
            language = Language.parse(lang_range)
            if language is not None:
                self.log.debug("resolved_from_header", language=language.value)
                return language

        self.log.debug("no_matching_language_in_header")
        return self.default_language
