"""Cleanup of folders left behind by failed publishes."""

import shutil
import time
from typing import Callable, List

from infrastructure.i18n import BASE_LANGUAGE, Language
from infrastructure.logging import get_module_logger
from modules.minerals.errors import StorageError
from modules.minerals.models import is_valid_folder_name
from modules.minerals.resolver import MetadataPathResolver
from modules.minerals.store import MineralStore

logger = get_module_logger()

# Lower bound on the grace period so an in-flight publish is never swept
MIN_GRACE_SECONDS = 60


def sweep_orphaned_folders(
    store: MineralStore,
    grace_seconds: int,
    base_language: Language = BASE_LANGUAGE,
    clock: Callable[[], float] = time.time,
) -> List[str]:
    """Delete mineral folders that have no base-language metadata.

    Only folders matching the identifier grammar and last modified more than
    ``grace_seconds`` ago are considered, so a publish still in progress is
    left alone. Grace periods below ``MIN_GRACE_SECONDS`` are raised to it.
    Folders without a valid name are never touched.

    Returns:
        Names of the removed folders.

    Raises:
        StorageError: If the root cannot be read or a folder cannot be removed.
    """
    resolver = MetadataPathResolver(base_language)
    cutoff = clock() - max(grace_seconds, MIN_GRACE_SECONDS)
    removed: List[str] = []
    for folder in store.list_folders():
        name = folder.name
        if not is_valid_folder_name(name):
            continue
        if resolver.resolve(folder, base_language) is not None:
            continue
        try:
            if folder.stat().st_mtime > cutoff:
                logger.debug("orphan_within_grace_period", folder=name)
                continue
            shutil.rmtree(folder)
        except OSError as e:
            logger.error("orphan_removal_failed", folder=name, error=str(e))
            raise StorageError(f"cannot remove orphaned folder {name}: {e}") from e
        removed.append(name)
        logger.warning("orphan_folder_removed", folder=name)

    logger.info("orphan_sweep_completed", removed=len(removed))
    return removed
