"""Draft to catalog publish pipeline.

A publish validates the operator's form, claims the draft, allocates a new
folder, writes the image and one metadata file per supported language plus
the canonical ``mineral.json``, then invalidates the catalog cache.

Translations into non-base languages run concurrently. A failed translation
never fails the publish: that language gets a copy of the base-language text
and its code is reported in the outcome.

Writes are not rolled back. A failure after the folder is created leaves a
partial folder behind for ``maintenance.sweep_orphaned_folders`` to remove.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Protocol, Tuple

from infrastructure.i18n import BASE_LANGUAGE, Language
from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult
from modules.minerals.catalog import CatalogCache
from modules.minerals.drafts import DraftStore
from modules.minerals.forms import MineralForm
from modules.minerals.identifiers import allocate_identifier
from modules.minerals.images import image_filename
from modules.minerals.models import TRANSLATABLE_FIELDS, MineralDiskRecord
from modules.minerals.store import MineralStore

logger = get_module_logger()


class MetadataTranslator(Protocol):
    """Anything that can translate the text fields of a mineral."""

    @property
    def is_configured(self) -> bool: ...

    def translate_metadata(
        self, fields: Dict[str, str], language: Language
    ) -> OperationResult: ...


@dataclass
class TranslationOutcome:
    translated_count: int = 0
    fallback_lang_codes: List[str] = field(default_factory=list)

    @property
    def fallback_used(self) -> bool:
        return bool(self.fallback_lang_codes)


@dataclass(frozen=True)
class PublishResult:
    identifier: str
    outcome: TranslationOutcome


class PublishPipeline:
    """Turns a draft plus form values into a new mineral folder.

    Args:
        store: Record store the folder is created in.
        catalog_cache: Invalidated after every successful publish.
        drafts: Source of the uploaded image.
        translator: Translation service for non-base languages.
        max_workers: Upper bound on concurrent translation calls.
        base_language: Language the form values are written in.
    """

    def __init__(
        self,
        store: MineralStore,
        catalog_cache: CatalogCache,
        drafts: DraftStore,
        translator: MetadataTranslator,
        max_workers: int = 4,
        base_language: Language = BASE_LANGUAGE,
    ):
        self.store = store
        self.catalog_cache = catalog_cache
        self.drafts = drafts
        self.translator = translator
        self.max_workers = max(1, max_workers)
        self.base_language = base_language

    def publish(self, draft_id: str, form: MineralForm) -> PublishResult:
        """Publish a draft.

        Raises:
            ValidationError: If a form value is missing or malformed. Nothing
                is written and the draft stays available.
            NotFoundError: If the draft does not exist or was already published.
            StorageError: If a folder or file cannot be written. The draft is
                put back so the operator can retry.
            InternalInvariantError: If no unique identifier could be allocated.
        """
        base_record = form.to_disk_record()

        draft = self.drafts.take(draft_id)
        try:
            identifier, outcome = self._write(
                base_record, draft.image_bytes, draft.image_ext
            )
        except Exception:
            self.drafts.restore(draft)
            logger.error("mineral_publish_failed", draft_id=draft_id)
            raise

        self.catalog_cache.invalidate()
        logger.info(
            "mineral_published",
            identifier=identifier,
            translated_count=outcome.translated_count,
            fallback_lang_codes=outcome.fallback_lang_codes,
        )
        return PublishResult(identifier=identifier, outcome=outcome)

    def _write(
        self, base_record: MineralDiskRecord, image_bytes: bytes, image_ext: str
    ) -> Tuple[str, TranslationOutcome]:
        self.store.ensure_root()
        identifier = allocate_identifier(self.store.root, base_record.mineral_family)
        folder = self.store.create_folder(identifier)

        image_file = image_filename(image_ext)
        self.store.write_bytes(folder, image_file, image_bytes)
        base_record = base_record.model_copy(update={"image_file": image_file})

        localized, outcome = self.localize(base_record)
        for language in Language:
            self.store.write_record(folder, localized[language], language.value)
        self.store.write_record(folder, localized[self.base_language])
        return identifier, outcome

    def localize(
        self, base_record: MineralDiskRecord
    ) -> Tuple[Dict[Language, MineralDiskRecord], TranslationOutcome]:
        """Build one record per supported language from the base record."""
        targets = [lang for lang in Language if lang != self.base_language]
        localized: Dict[Language, MineralDiskRecord] = {self.base_language: base_record}
        outcome = TranslationOutcome()

        if not self.translator.is_configured:
            logger.warning(
                "metadata_translation_unavailable",
                fallback_lang_codes=[lang.value for lang in targets],
            )
            translated: List[Optional[MineralDiskRecord]] = [None] * len(targets)
        else:
            workers = min(self.max_workers, len(targets)) or 1
            with ThreadPoolExecutor(max_workers=workers) as executor:
                translated = list(
                    executor.map(
                        lambda lang: self._translate_one(base_record, lang), targets
                    )
                )

        for language, record in zip(targets, translated):
            if record is None:
                localized[language] = base_record
                outcome.fallback_lang_codes.append(language.value)
            else:
                localized[language] = record
                outcome.translated_count += 1
        return localized, outcome

    def _translate_one(
        self, base_record: MineralDiskRecord, language: Language
    ) -> Optional[MineralDiskRecord]:
        try:
            result = self.translator.translate_metadata(
                base_record.translatable_fields(), language
            )
        except Exception as e:
            logger.exception(
                "metadata_translation_fallback", language=language.value, error=str(e)
            )
            return None
        if not result.is_success or not isinstance(result.data, dict):
            logger.warning(
                "metadata_translation_fallback",
                language=language.value,
                error_code=result.error_code,
                error=result.message,
            )
            return None
        return merge_translation(base_record, result.data)


def merge_translation(
    base_record: MineralDiskRecord, translated: Dict[str, object]
) -> MineralDiskRecord:
    """Overlay translated text on the base record.

    Blank translated values keep the base-language text. Numbers, element
    composition and image filename always come from the base record.
    """
    updates = {}
    for name in TRANSLATABLE_FIELDS:
        value = translated.get(name)
        text = value.strip() if isinstance(value, str) else ""
        updates[name] = text or getattr(base_record, name)
    return base_record.model_copy(update=updates)
