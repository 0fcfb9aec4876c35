"""Parsing helpers for admin form values.

The element composition is edited as a small line-oriented text format,
one ``symbol=percent`` (or ``symbol:percent``) pair per line:

    Si=46.70
    O=53.30
"""

import re
from typing import Dict

from modules.minerals.errors import ValidationError

ELEMENTS_FIELD = "major_elements_pct_text"

_DECIMAL_PATTERN = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)$")


def parse_decimal(raw: str, field: str) -> float:
    """Parse a plain decimal number, rejecting nan/inf and exponents.

    Raises:
        ValidationError: If ``raw`` is not a decimal number.
    """
    value = (raw or "").strip()
    if not _DECIMAL_PATTERN.match(value):
        raise ValidationError(f"'{field}' must be a number", field=field)
    return float(value)


def parse_major_elements(text: str) -> Dict[str, float]:
    """Parse the element composition mini-format into a mapping.

    Blank lines are ignored. A repeated symbol keeps the last value.

    Raises:
        ValidationError: On the first malformed line.
    """
    elements: Dict[str, float] = {}
    for raw_line in (text or "").splitlines():
        line = raw_line.strip()
        if not line:
            continue
        separator = "=" if "=" in line else ":"
        key, _, value = line.partition(separator)
        key = key.strip()
        value = value.strip()
        if not key or not value:
            raise ValidationError(
                "major_elements_pct lines must be like 'Si=46.7'",
                field=ELEMENTS_FIELD,
            )
        if not _DECIMAL_PATTERN.match(value):
            raise ValidationError(
                f"invalid percentage for '{key}'", field=ELEMENTS_FIELD
            )
        elements[key] = float(value)
    return elements


def major_elements_to_text(elements: Dict[str, float]) -> str:
    """Render a composition mapping back into the mini-format."""
    return "\n".join(f"{key}={value:.2f}" for key, value in sorted(elements.items()))
