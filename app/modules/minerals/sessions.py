"""In-memory admin sessions."""

import hmac
import secrets
import threading
import time
from typing import Callable, Dict, Optional

from infrastructure.logging import get_module_logger

logger = get_module_logger()

SESSION_TOKEN_BYTES = 24
SESSION_COOKIE_NAME = "admin_session"


class AdminSessionStore:
    """Opaque bearer tokens with a fixed lifetime, lost on restart."""

    def __init__(
        self,
        password: str,
        max_age_seconds: int = 28800,
        clock: Callable[[], float] = time.time,
    ):
        self._password = password
        self.max_age_seconds = max_age_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._sessions: Dict[str, float] = {}

    def check_password(self, candidate: str) -> bool:
        if not self._password:
            return False
        return hmac.compare_digest(
            (candidate or "").encode("utf-8"), self._password.encode("utf-8")
        )

    def login(self, password: str) -> Optional[str]:
        """Create a session if the password matches; return its token."""
        if not self.check_password(password):
            logger.warning("admin_login_rejected")
            return None
        token = secrets.token_hex(SESSION_TOKEN_BYTES)
        with self._lock:
            self._prune_locked()
            self._sessions[token] = self._clock() + self.max_age_seconds
        logger.info("admin_session_created")
        return token

    def is_valid(self, token: Optional[str]) -> bool:
        if not token:
            return False
        now = self._clock()
        with self._lock:
            expires_at = self._sessions.get(token)
            if expires_at is None:
                return False
            if expires_at <= now:
                del self._sessions[token]
                return False
        return True

    def revoke(self, token: Optional[str]) -> bool:
        if not token:
            return False
        with self._lock:
            removed = self._sessions.pop(token, None) is not None
        if removed:
            logger.info("admin_session_revoked")
        return removed

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def _prune_locked(self) -> int:
        now = self._clock()
        expired = [t for t, expires_at in self._sessions.items() if expires_at <= now]
        for token in expired:
            del self._sessions[token]
        return len(expired)
