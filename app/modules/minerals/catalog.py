"""Per-language catalog cache.

Catalogs are built lazily by scanning the record store and kept until the
next ``invalidate()``. Reads share a reader/writer lock; the directory scan
runs with no lock held, so concurrent misses for one language may both scan,
and the first insert wins.
"""

import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from pydantic import ValidationError as PydanticValidationError

from infrastructure.i18n import BASE_LANGUAGE, Language
from infrastructure.logging import get_module_logger
from modules.minerals.errors import NotFoundError
from modules.minerals.models import Mineral, is_valid_folder_name
from modules.minerals.resolver import MetadataPathResolver
from modules.minerals.store import MineralStore

logger = get_module_logger()


class ReadWriteLock:
    """Many readers or one writer. Waiting writers block new readers."""

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._waiting_writers:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            self._waiting_writers += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._waiting_writers -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


@dataclass
class Catalog:
    """All minerals for one language.

    ``by_slug`` maps identifier to mineral; ``ordered`` holds the same
    minerals sorted by display name.
    """

    language: Language
    by_slug: Dict[str, Mineral] = field(default_factory=dict)
    ordered: List[Mineral] = field(default_factory=list)

    @classmethod
    def build(cls, language: Language, minerals: List[Mineral]) -> "Catalog":
        ordered = sorted(minerals, key=lambda m: (m.common_name.casefold(), m.slug))
        return cls(
            language=language,
            by_slug={m.slug: m for m in ordered},
            ordered=ordered,
        )

    def clone(self) -> "Catalog":
        ordered = [m.model_copy(deep=True) for m in self.ordered]
        return Catalog(
            language=self.language,
            by_slug={m.slug: m for m in ordered},
            ordered=ordered,
        )

    def __len__(self) -> int:
        return len(self.ordered)

    def __contains__(self, slug: str) -> bool:
        return slug in self.by_slug


class CatalogCache:
    """Lazily populated map of language to Catalog."""

    def __init__(self, store: MineralStore, resolver: Optional[MetadataPathResolver] = None):
        self.store = store
        self.resolver = resolver or MetadataPathResolver(BASE_LANGUAGE)
        self._lock = ReadWriteLock()
        self._catalogs: Dict[Language, Catalog] = {}
        # Bumped by invalidate(); a scan started under an older generation is not cached
        self._generation = 0

    def get_catalog(self, language: Language) -> Catalog:
        """Return a snapshot of the catalog for ``language``.

        Raises:
            StorageError: If the record store root cannot be read.
        """
        with self._lock.read():
            cached = self._catalogs.get(language)
            if cached is not None:
                return cached.clone()
            generation = self._generation

        built = self._scan(language)

        with self._lock.write():
            if self._generation != generation:
                logger.debug("catalog_insert_stale", language=language.value)
                return built.clone()
            existing = self._catalogs.get(language)
            if existing is not None:
                logger.debug("catalog_insert_discarded", language=language.value)
                return existing.clone()
            self._catalogs[language] = built
            return built.clone()

    def get_mineral(self, language: Language, slug: str) -> Mineral:
        """Look up one mineral.

        Raises:
            NotFoundError: If no mineral has this identifier.
        """
        mineral = self.get_catalog(language).by_slug.get(slug)
        if mineral is None:
            raise NotFoundError(f"mineral '{slug}' not found")
        return mineral

    def invalidate(self) -> None:
        """Drop every cached language."""
        with self._lock.write():
            self._catalogs.clear()
            self._generation += 1
        logger.info("catalog_invalidated")

    def _scan(self, language: Language) -> Catalog:
        minerals: List[Mineral] = []
        skipped = 0
        for folder in self.store.list_folders():
            name = folder.name
            if not is_valid_folder_name(name):
                logger.debug("catalog_folder_ignored", folder=name)
                continue
            path = self.resolver.resolve(folder, language)
            if path is None:
                logger.warning("catalog_folder_without_metadata", folder=name)
                skipped += 1
                continue
            try:
                record = self.store.read_record(path)
            except (OSError, ValueError, PydanticValidationError) as e:
                logger.warning(
                    "catalog_metadata_parse_failed",
                    folder=name,
                    path=str(path),
                    error=str(e),
                )
                skipped += 1
                continue
            minerals.append(Mineral.from_disk_record(name, record))

        catalog = Catalog.build(language, minerals)
        logger.info(
            "catalog_loaded",
            language=language.value,
            count=len(catalog),
            skipped=skipped,
        )
        return catalog
