"""Errors for the minerals module.

Each class maps onto one failure category with its own propagation rule:
not-found and validation errors carry a message the caller can act on,
upstream errors have a defined fallback, and storage/internal errors are
logged in full but reported generically.
"""

from typing import Optional


class MineralError(Exception):
    """Base class for all minerals module errors."""


class NotFoundError(MineralError):
    """A requested mineral or draft does not exist."""


class ValidationError(MineralError):
    """Malformed or missing input. Never mutates stored state.

    Attributes:
        field: Name of the offending input field, when known.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class UpstreamServiceError(MineralError):
    """The suggestion/translation service failed or returned non-conforming output.

    Attributes:
        error_code: Machine code from the HTTP classifier, when available.
    """

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.error_code = error_code


class StorageError(MineralError):
    """Filesystem create/read/write failure."""


class InternalInvariantError(MineralError):
    """A condition that should be unreachable, e.g. identifier allocation exhaustion."""
