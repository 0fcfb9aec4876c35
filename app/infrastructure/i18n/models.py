"""Language and message models for the i18n system.

Languages are described by a data table rather than branching logic: adding
a language means adding one enum member, one profile row and one YAML file.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class Language(str, Enum):
    """Supported languages, identified by two-letter ISO 639-1 codes.

    Declaration order is the canonical order used when iterating languages
    (publish outcome reporting, language picker).
    """

    EN = "en"
    ES = "es"
    CS = "cs"
    DE = "de"
    FR = "fr"
    ZH = "zh"
    AR = "ar"
    PT = "pt"
    HI = "hi"
    JA = "ja"

    @classmethod
    def from_string(cls, value: str) -> "Language":
        """Convert a language tag to Language.

        Accepts region-qualified tags and ignores case and surrounding
        whitespace, so ``" pt-BR "`` maps to ``Language.PT``.

        Args:
            value: Language tag (e.g., "fr", "fr-CA").

        Returns:
            Matching Language value.

        Raises:
            ValueError: If the language is not supported.
        """
        code = (value or "").strip().lower().split("-")[0]
        try:
            return cls(code)
        except ValueError as e:
            raise ValueError(f"Unsupported language: {value}") from e

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["Language"]:
        """Like from_string, but returns None for unsupported or empty input."""
        if not value:
            return None
        try:
            return cls.from_string(value)
        except ValueError:
            return None

    @property
    def code(self) -> str:
        return self.value

    @property
    def profile(self) -> "LanguageProfile":
        return LANGUAGE_PROFILES[self]

    @property
    def english_name(self) -> str:
        return self.profile.english_name

    @property
    def native_name(self) -> str:
        return self.profile.native_name

    @property
    def direction(self) -> str:
        return self.profile.direction


@dataclass(frozen=True)
class LanguageProfile:
    """Static facts about a language.

    Attributes:
        english_name: Name used when instructing the translation service.
        native_name: Name shown in the language picker.
        direction: Text direction, "ltr" or "rtl".
    """

    english_name: str
    native_name: str
    direction: str = "ltr"


LANGUAGE_PROFILES: Dict[Language, LanguageProfile] = {
    Language.EN: LanguageProfile("English", "English"),
    Language.ES: LanguageProfile("Spanish", "Español"),
    Language.CS: LanguageProfile("Czech", "Čeština"),
    Language.DE: LanguageProfile("German", "Deutsch"),
    Language.FR: LanguageProfile("French", "Français"),
    Language.ZH: LanguageProfile("Chinese", "中文"),
    Language.AR: LanguageProfile("Arabic", "العربية", direction="rtl"),
    Language.PT: LanguageProfile("Portuguese", "Português"),
    Language.HI: LanguageProfile("Hindi", "हिन्दी"),
    Language.JA: LanguageProfile("Japanese", "日本語"),
}

# Source language of every published record; all translations derive from it
BASE_LANGUAGE = Language.EN


def language_options() -> List[Dict[str, str]]:
    """Language picker entries in canonical order."""
    return [
        {"code": language.code, "label": language.native_name} for language in Language
    ]


@dataclass(frozen=True)
class TranslationKey:
    """Represents a translation key for accessing UI messages.

    Keys are hierarchical (e.g., "admin.published", "home.title").
    Frozen to ensure immutability and hashability for caching.

    Attributes:
        namespace: Top-level namespace (e.g., "admin", "catalog").
        message_key: Specific message identifier (e.g., "published").
    """

    namespace: str
    message_key: str

    def __str__(self) -> str:
        return f"{self.namespace}.{self.message_key}"

    @classmethod
    def from_string(cls, key_string: str) -> "TranslationKey":
        """Create TranslationKey from dot-separated string.

        Args:
            key_string: Dot-separated key (e.g., "admin.published").

        Returns:
            TranslationKey instance.

        Raises:
            ValueError: If key_string does not contain a dot.
        """
        parts = key_string.split(".", 1)
        if len(parts) != 2:
            raise ValueError(
                f"Translation key must be in format 'namespace.key': {key_string}"
            )
        return cls(namespace=parts[0], message_key=parts[1])


@dataclass
class MessageCatalog:
    """UI messages for a single language, organized by namespace.

    Attributes:
        language: The Language this catalog is for.
        messages: Nested dict structure {namespace: {key: message_string}}.
    """

    language: Language
    messages: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    def get_message(self, key: TranslationKey) -> Optional[str]:
        namespace_dict = self.messages.get(key.namespace, {})
        return namespace_dict.get(key.message_key)

    def has_message(self, key: TranslationKey) -> bool:
        return key.message_key in self.get_namespace(key.namespace)

    def get_namespace(self, namespace: str) -> Dict[str, Any]:
        return self.messages.get(namespace, {})

    def merge(self, other: "MessageCatalog") -> None:
        """Merge another catalog into this one. Later entries override earlier ones."""
        for namespace, messages in other.messages.items():
            if namespace not in self.messages:
                self.messages[namespace] = {}
            self.messages[namespace].update(messages)
