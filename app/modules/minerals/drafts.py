"""In-memory store for admin drafts awaiting publish."""

import secrets
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict

from infrastructure.logging import get_module_logger
from modules.minerals.errors import NotFoundError

logger = get_module_logger()

DRAFT_ID_BYTES = 16


@dataclass(frozen=True)
class Draft:
    draft_id: str
    image_bytes: bytes
    image_ext: str
    created_at: float
    epoch: int = 0


class DraftStore:
    """Drafts keyed by an opaque random id.

    ``take`` removes the draft, so a draft can be consumed at most once. The
    publish flow claims a draft with ``take`` after validation and hands it
    back with ``restore`` if the write fails, so the operator can retry
    without uploading the image again.

    Args:
        ttl_seconds: Drafts older than this are discarded on the next access.
            Zero or negative disables expiry.
        clock: Time source, replaceable in tests.
    """

    def __init__(self, ttl_seconds: int = 3600, clock: Callable[[], float] = time.time):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._drafts: Dict[str, Draft] = {}
        # Bumped by clear_all(); drafts from an older epoch are never restored
        self._epoch = 0

    def put(self, image_bytes: bytes, image_ext: str) -> str:
        draft_id = secrets.token_hex(DRAFT_ID_BYTES)
        with self._lock:
            draft = Draft(draft_id, image_bytes, image_ext, self._clock(), self._epoch)
            self._prune_locked()
            self._drafts[draft_id] = draft
        logger.info("draft_created", draft_id=draft_id, image_ext=image_ext, size=len(image_bytes))
        return draft_id

    def take(self, draft_id: str) -> Draft:
        """Remove and return a draft.

        Raises:
            NotFoundError: If the draft does not exist, has expired or was
                already taken.
        """
        with self._lock:
            self._prune_locked()
            draft = self._drafts.pop(draft_id, None)
        if draft is None:
            raise NotFoundError("draft not found or expired")
        return draft

    def restore(self, draft: Draft) -> None:
        """Put back a draft previously returned by ``take``.

        A draft taken before the last ``clear_all`` stays discarded.
        """
        with self._lock:
            if draft.epoch != self._epoch:
                logger.info("draft_restore_skipped", draft_id=draft.draft_id)
                return
            self._drafts.setdefault(draft.draft_id, draft)

    def clear_all(self) -> int:
        with self._lock:
            count = len(self._drafts)
            self._drafts.clear()
            self._epoch += 1
        if count:
            logger.info("drafts_cleared", count=count)
        return count

    def __len__(self) -> int:
        with self._lock:
            return len(self._drafts)

    def _prune_locked(self) -> int:
        if self.ttl_seconds <= 0:
            return 0
        cutoff = self._clock() - self.ttl_seconds
        expired = [k for k, d in self._drafts.items() if d.created_at < cutoff]
        for key in expired:
            del self._drafts[key]
        return len(expired)
