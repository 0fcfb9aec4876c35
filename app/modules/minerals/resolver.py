"""Metadata file lookup with language fallback."""

from pathlib import Path
from typing import List, Optional

from infrastructure.i18n import BASE_LANGUAGE, Language
from modules.minerals.models import metadata_filename


class MetadataPathResolver:
    """Pick the metadata file to read for a mineral folder.

    Lookup order, first existing file wins:

    1. ``mineral.<requested>.json``
    2. ``mineral.<base>.json`` when the requested language is not the base
    3. ``mineral.json`` (legacy, single-language layout)
    """

    def __init__(self, base_language: Language = BASE_LANGUAGE):
        self.base_language = base_language

    def candidates(self, folder: Path, language: Language) -> List[Path]:
        paths = [folder / metadata_filename(language.value)]
        if language != self.base_language:
            paths.append(folder / metadata_filename(self.base_language.value))
        paths.append(folder / metadata_filename())
        return paths

    def resolve(self, folder: Path, language: Language) -> Optional[Path]:
        """Return the first existing metadata path, or None if the folder has none."""
        for path in self.candidates(folder, language):
            if path.is_file():
                return path
        return None
