"""Factory functions for creating i18n components."""

from pathlib import Path

from infrastructure.i18n.loader import YAMLTranslationLoader
from infrastructure.i18n.models import BASE_LANGUAGE, Language
from infrastructure.i18n.translator import Translator
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def default_locales_dir() -> Path:
    # This file is at .../app/infrastructure/i18n/factory.py
    return Path(__file__).resolve().parents[2] / "locales"


def create_translator(
    translations_dir: Path | None = None,
    fallback_language: Language = BASE_LANGUAGE,
    use_cache: bool = True,
    preload: bool = True,
) -> Translator:
    """Create and configure a Translator instance.

    Args:
        translations_dir: Path to YAML message files (default: app/locales)
        fallback_language: Language used when a key is missing (default: base language)
        use_cache: Whether loader should cache parsed YAML
        preload: Whether to load all languages immediately

    Returns:
        Translator: Configured translator instance

    Raises:
        ValueError: If translations_dir does not exist
    """
    if translations_dir is None:
        translations_dir = default_locales_dir()

    loader = YAMLTranslationLoader(
        translations_dir=translations_dir,
        use_cache=use_cache,
    )
    translator = Translator(loader=loader, fallback_language=fallback_language)

    if preload:
        translator.load_all()
        logger.info(
            "translator_created_with_preload",
            translations_dir=str(translations_dir),
            language_count=len(translator.get_available_languages()),
        )

    return translator
