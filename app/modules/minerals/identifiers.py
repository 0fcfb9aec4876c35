"""Identifier allocation for new mineral folders."""

import re
import secrets
from pathlib import Path

from infrastructure.logging import get_module_logger
from modules.minerals.errors import InternalInvariantError
from modules.minerals.models import RECORD_PREFIX

logger = get_module_logger()

MAX_ALLOCATION_ATTEMPTS = 16
SUFFIX_BYTES = 4

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(value: str) -> str:
    """Lowercase, collapse non-alphanumeric runs to single dashes.

    >>> slugify("Iron Oxide!!")
    'iron-oxide'
    >>> slugify("")
    'unknown'
    """
    slug = _NON_ALNUM.sub("-", (value or "").lower()).strip("-")
    return slug or "unknown"


def compose_folder_name(family: str, suffix: str) -> str:
    return f"{RECORD_PREFIX}.{slugify(family)}.0x{suffix}"


def allocate_identifier(minerals_root: Path, family: str) -> str:
    """Pick an unused folder name for a mineral of the given family.

    The existence check is not guarded against other processes; the random
    suffix space keeps collisions negligible.

    Raises:
        InternalInvariantError: If every attempt collided.
    """
    for attempt in range(1, MAX_ALLOCATION_ATTEMPTS + 1):
        candidate = compose_folder_name(family, secrets.token_hex(SUFFIX_BYTES))
        if not (minerals_root / candidate).exists():
            return candidate
        logger.warning(
            "identifier_collision", candidate=candidate, attempt=attempt
        )
    logger.error(
        "identifier_allocation_exhausted",
        family=family,
        attempts=MAX_ALLOCATION_ATTEMPTS,
    )
    raise InternalInvariantError("could not allocate a unique mineral identifier")
