"""Filesystem access for the mineral record store.

All reads and writes of mineral folders go through ``MineralStore`` so
that I/O failures surface as ``StorageError`` rather than raw ``OSError``.
"""

from pathlib import Path
from typing import List, Optional

from infrastructure.logging import get_module_logger
from modules.minerals.errors import StorageError
from modules.minerals.models import MineralDiskRecord, metadata_filename

logger = get_module_logger()


class MineralStore:
    """Folder-per-mineral store rooted at ``root``."""

    def __init__(self, root: Path):
        self.root = Path(root)

    def ensure_root(self) -> None:
        try:
            self.root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error("mineral_root_create_failed", root=str(self.root), error=str(e))
            raise StorageError(f"cannot create record store root: {e}") from e

    def folder_path(self, folder_name: str) -> Path:
        return self.root / folder_name

    def list_folders(self) -> List[Path]:
        """List sub-directories of the root, creating the root if missing.

        Raises:
            StorageError: If the root cannot be read.
        """
        self.ensure_root()
        try:
            return sorted(p for p in self.root.iterdir() if p.is_dir())
        except OSError as e:
            logger.error("mineral_root_scan_failed", root=str(self.root), error=str(e))
            raise StorageError(f"cannot read record store root: {e}") from e

    def read_record(self, path: Path) -> MineralDiskRecord:
        """Parse one metadata file.

        Raises:
            OSError: If the file cannot be read.
            pydantic.ValidationError: If the content is not a valid record.
        """
        return MineralDiskRecord.model_validate_json(path.read_text(encoding="utf-8"))

    def create_folder(self, folder_name: str) -> Path:
        path = self.folder_path(folder_name)
        try:
            path.mkdir(parents=True, exist_ok=False)
        except OSError as e:
            logger.error("mineral_folder_create_failed", folder=folder_name, error=str(e))
            raise StorageError(f"cannot create mineral folder: {e}") from e
        return path

    def write_bytes(self, folder: Path, filename: str, data: bytes) -> Path:
        path = folder / filename
        try:
            path.write_bytes(data)
        except OSError as e:
            logger.error("mineral_file_write_failed", path=str(path), error=str(e))
            raise StorageError(f"cannot write {filename}: {e}") from e
        return path

    def write_record(
        self, folder: Path, record: MineralDiskRecord, language_code: Optional[str] = None
    ) -> Path:
        """Write a record as ``mineral.<lang>.json``, or ``mineral.json`` when no language is given."""
        filename = metadata_filename(language_code)
        path = folder / filename
        try:
            path.write_text(record.to_json(), encoding="utf-8")
        except OSError as e:
            logger.error("mineral_file_write_failed", path=str(path), error=str(e))
            raise StorageError(f"cannot write {filename}: {e}") from e
        return path
