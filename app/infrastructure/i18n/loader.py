"""UI message loading interface and implementations.

Defines the contract for loading message catalogs and provides the YAML-based
loader used by the application.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict

import yaml

from infrastructure.i18n.models import Language, MessageCatalog
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class TranslationLoader(ABC):
    """Abstract base for message loaders."""

    @abstractmethod
    def load(self, language: Language) -> MessageCatalog:
        """Load messages for a specific language.

        Raises:
            FileNotFoundError: If no message files exist for the language.
            ValueError: If the file format is invalid.
        """
        pass

    @abstractmethod
    def load_all(self) -> Dict[Language, MessageCatalog]:
        """Load messages for every language that has files."""
        pass


class YAMLTranslationLoader(TranslationLoader):
    """Loader for YAML message tables.

    Expects files named ``<domain>.<language>.yml`` (e.g. ``minerals.fr.yml``)
    in the specified directory. All files for one language are merged.

    Attributes:
        translations_dir: Path to directory containing YAML files.
        cache: Loaded catalogs keyed by language.
    """

    def __init__(
        self,
        translations_dir: Path,
        use_cache: bool = True,
    ):
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Dict[Language, MessageCatalog] = {}

        if not self.translations_dir.exists():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_yaml_loader",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    def load(self, language: Language) -> MessageCatalog:
        if self.use_cache and language in self.cache:
            return self.cache[language]

        catalog = MessageCatalog(language=language)
        yaml_files = sorted(self.translations_dir.glob(f"*.{language.value}.yml"))

        if not yaml_files:
            raise FileNotFoundError(
                f"No translation files found for language {language.value} in {self.translations_dir}"
            )

        for yaml_file in yaml_files:
            try:
                with open(yaml_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
                    if data:
                        self._merge_yaml_data(catalog, data, yaml_file)
            except yaml.YAMLError as e:
                logger.error("yaml_parse_error", file=str(yaml_file), error=str(e))
                raise ValueError(f"Failed to parse {yaml_file}: {e}") from e

        logger.info(
            "loaded_translations",
            language=language.value,
            file_count=len(yaml_files),
            namespace_count=len(catalog.messages),
        )

        if self.use_cache:
            self.cache[language] = catalog

        return catalog

    def load_all(self) -> Dict[Language, MessageCatalog]:
        """Load every language detected from ``*.yml`` file names.

        Raises:
            ValueError: If no translation files found at all.
        """
        languages_found = set()
        for yaml_file in self.translations_dir.glob("*.yml"):
            # "minerals.fr.yml" -> "fr"
            parts = yaml_file.stem.split(".")
            if len(parts) >= 2:
                language = Language.parse(parts[-1])
                if language is not None:
                    languages_found.add(language)

        if not languages_found:
            raise ValueError(f"No translation files found in {self.translations_dir}")

        result = {}
        for language in languages_found:
            try:
                result[language] = self.load(language)
            except FileNotFoundError:
                logger.warning("could_not_load_language", language=language.value)

        return result

    def _merge_yaml_data(
        self,
        catalog: MessageCatalog,
        data: Dict,
        source_file: Path,
    ) -> None:
        """Merge YAML data of the form ``{namespace: {key: message}}`` into catalog."""
        if not isinstance(data, dict):
            logger.warning(
                "invalid_yaml_format", file=str(source_file), expected="dict"
            )
            return

        for namespace, messages in data.items():
            if not isinstance(messages, dict):
                logger.warning(
                    "invalid_namespace_format",
                    namespace=namespace,
                    expected="dict",
                )
                continue

            if namespace not in catalog.messages:
                catalog.messages[namespace] = {}

            catalog.messages[namespace].update(messages)

    def clear_cache(self) -> None:
        self.cache.clear()
        logger.info("cleared_translation_cache")
